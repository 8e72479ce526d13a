"""Roll recurring tasks whose scheduled day has arrived back to unchecked."""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .classifier import (
    DEFAULT_SECTIONS,
    HEADER_MARKER,
    LineKind,
    SectionKind,
    SectionNames,
    iter_sections,
    render_task,
)


logger = logging.getLogger(__name__)


@dataclass
class RollResult:
    """Outcome of a repeat-date check."""
    updated_lines: List[str] = field(default_factory=list)
    rolled: int = 0

    @property
    def changed(self) -> bool:
        return self.rolled > 0


def roll_completed_today(
    document_lines: Sequence[str],
    today: str,
    *,
    header_marker: str = HEADER_MARKER,
    sections: SectionNames = DEFAULT_SECTIONS,
) -> RollResult:
    """Uncheck recurring tasks that are checked and scheduled for today.

    Args:
        document_lines: Lines of the task document
        today: Today's date, formatted with the configured date format
        header_marker: Prefix that introduces a section header
        sections: Labels of the recurring and plain sections

    Returns:
        RollResult with the updated lines; ``changed`` is False when nothing
        was rewritten
    """
    result = RollResult()

    for section, line in iter_sections(document_lines, header_marker, sections):
        if (
            section is SectionKind.RECURRING
            and line.kind is LineKind.CHECKED
            and line.annotation == today
        ):
            result.updated_lines.append(render_task(line.text, today))
            result.rolled += 1
        else:
            result.updated_lines.append(line.raw)

    if result.changed:
        logger.debug(f"Unchecked {result.rolled} recurring task(s) scheduled for {today}")
    return result
