"""Extraction of completed tasks from the task document."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

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
class ExtractionResult:
    """Outcome of scanning a task document for completed tasks."""
    keep_lines: List[str] = field(default_factory=list)
    completed_lines: List[str] = field(default_factory=list)
    rescheduled: int = 0

    @property
    def has_completed(self) -> bool:
        return bool(self.completed_lines)


def extract(
    document_lines: Sequence[str],
    today: str,
    *,
    next_date: str,
    header_marker: str = HEADER_MARKER,
    sections: SectionNames = DEFAULT_SECTIONS,
    completion_stamp: Optional[str] = None,
) -> ExtractionResult:
    """Split a task document into lines to keep and newly completed tasks.

    Checked tasks in the recurring section are rewritten in place as
    unchecked tasks annotated with ``next_date``; checked tasks anywhere else
    are removed. Either way the original line, trimmed, is reported as
    completed.

    Args:
        document_lines: Lines of the task document
        today: Today's date, formatted with the configured date format
        next_date: Date used to reschedule recurring tasks
        header_marker: Prefix that introduces a section header
        sections: Labels of the recurring and plain sections
        completion_stamp: Optional time stamp appended to completed lines

    Returns:
        ExtractionResult; an empty ``completed_lines`` means nothing to write
    """
    result = ExtractionResult()

    for section, line in iter_sections(document_lines, header_marker, sections):
        if line.kind is not LineKind.CHECKED:
            result.keep_lines.append(line.raw)
            continue

        completed = line.raw.strip()
        if completion_stamp:
            completed = f"{completed} ({completion_stamp})"
        result.completed_lines.append(completed)

        if section is SectionKind.RECURRING:
            result.keep_lines.append(render_task(line.text, next_date))
            result.rescheduled += 1

    if result.has_completed:
        logger.debug(
            f"Extracted {len(result.completed_lines)} completed task(s) on {today}, "
            f"{result.rescheduled} rescheduled to {next_date}"
        )
    return result
