"""Line classification for task documents.

A task document is plain Markdown divided into sections by ``### `` headers.
Each line is one of: a section header, a checked task, an unchecked task, or
plain text. Section membership is decided by the most recent header only.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple


HEADER_MARKER = "### "
RECURRING_SECTION = "반복 작업"
PLAIN_SECTION = "일반 작업"

TASK_LINE_RE = re.compile(r"^\s*[-*]\s+\[( |x|X)\]")
TASK_PREFIX_RE = re.compile(r"^\s*[-*]\s+\[(?: |x|X)\]\s*")
ANNOTATION_RE = re.compile(r"\(([^()]+)\)\s*$")


class LineKind(Enum):
    """Kinds of lines in a task document."""
    HEADER = "header"
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    PLAIN = "plain"


class SectionKind(Enum):
    """How checked tasks inside a section are handled."""
    RECURRING = "recurring"
    PLAIN = "plain"


@dataclass(frozen=True)
class SectionNames:
    """Labels of the two recognized sections."""
    recurring: str = RECURRING_SECTION
    plain: str = PLAIN_SECTION

    def kind_of(self, name: str) -> SectionKind:
        """Return the section kind for a header name; unknown names are plain."""
        if name.strip() == self.recurring:
            return SectionKind.RECURRING
        return SectionKind.PLAIN


DEFAULT_SECTIONS = SectionNames()


@dataclass(frozen=True)
class ClassifiedLine:
    """A single document line together with what it was recognized as."""
    kind: LineKind
    raw: str
    text: str = ""
    annotation: str = ""
    section_name: str = ""

    @property
    def is_header(self) -> bool:
        return self.kind is LineKind.HEADER


def is_header(line: str, header_marker: str = HEADER_MARKER) -> bool:
    """Check whether a line starts a new section."""
    stripped = line.strip()
    return stripped.startswith(header_marker) or stripped == header_marker.strip()


def split_annotation(remainder: str) -> Tuple[str, str]:
    """Split task text from its trailing parenthesized annotation.

    Returns:
        Tuple of (text, annotation); annotation is empty when there is none
        or when the trailing group cannot be parsed.
    """
    remainder = remainder.strip()
    match = ANNOTATION_RE.search(remainder)
    if not match:
        return remainder, ""
    return remainder[:match.start()].strip(), match.group(1).strip()


def classify(line: str, header_marker: str = HEADER_MARKER) -> ClassifiedLine:
    """Classify a single line of a task document."""
    if is_header(line, header_marker):
        name = line.strip()[len(header_marker.strip()):].strip()
        return ClassifiedLine(LineKind.HEADER, line, section_name=name)

    match = TASK_LINE_RE.match(line)
    if not match:
        return ClassifiedLine(LineKind.PLAIN, line)

    kind = LineKind.UNCHECKED if match.group(1) == " " else LineKind.CHECKED
    text, annotation = split_annotation(TASK_PREFIX_RE.sub("", line, count=1))
    return ClassifiedLine(kind, line, text=text, annotation=annotation)


def iter_sections(
    lines: Iterable[str],
    header_marker: str = HEADER_MARKER,
    sections: SectionNames = DEFAULT_SECTIONS,
) -> Iterator[Tuple[SectionKind, ClassifiedLine]]:
    """Yield each classified line with the kind of section it belongs to.

    Header lines are reported with the kind of the section they open. Lines
    before the first header belong to a plain section.
    """
    current = SectionKind.PLAIN
    for line in lines:
        classified = classify(line, header_marker)
        if classified.is_header:
            current = sections.kind_of(classified.section_name)
        yield current, classified


def render_task(text: str, annotation: str = "", checked: bool = False, marker: str = "-") -> str:
    """Build a task line such as ``- [ ] Drink water (2024-01-03)``."""
    parts = [f"{marker} [{'x' if checked else ' '}]"]
    if text:
        parts.append(text)
    if annotation:
        parts.append(f"({annotation})")
    return " ".join(parts)
