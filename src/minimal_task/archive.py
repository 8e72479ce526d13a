"""Merging completed tasks into the dated archive document.

The archive is a sequence of day sections, each opened by a ``### <date>``
header. New tasks go at the end of today's section, which is created at the
end of the document when it does not exist yet.
"""

from typing import List, Sequence

from .classifier import HEADER_MARKER, is_header


def date_header(date_str: str, header_marker: str = HEADER_MARKER) -> str:
    """Build the header line for one day of the archive."""
    return f"{header_marker}{date_str}"


def _trim_trailing_blanks(lines: List[str]) -> None:
    while lines and not lines[-1].strip():
        lines.pop()


def merge(
    archive_lines: Sequence[str],
    completed_lines: Sequence[str],
    header: str,
    header_marker: str = HEADER_MARKER,
) -> List[str]:
    """Insert completed task lines under the given date header.

    Only the first line equal to ``header`` opens the target section. Any
    later header closes it, including a repeated copy of the same date.
    Everything else is kept verbatim and in order.

    Returns:
        The new archive lines without trailing blank lines
    """
    target = header.strip()
    merged: List[str] = []
    found = False
    inside = False

    for line in archive_lines:
        if not found and line.strip() == target:
            found = True
            inside = True
            merged.append(line)
            continue

        if inside and is_header(line, header_marker):
            merged.extend(completed_lines)
            inside = False

        merged.append(line)

    if inside:
        # Tasks go right after the section body, not after trailing blanks
        _trim_trailing_blanks(merged)
        merged.extend(completed_lines)
    elif not found:
        _trim_trailing_blanks(merged)
        if merged:
            merged.append("")
        merged.append(header)
        merged.extend(completed_lines)

    _trim_trailing_blanks(merged)
    return merged


def merge_text(
    archive_text: str,
    completed_lines: Sequence[str],
    header: str,
    header_marker: str = HEADER_MARKER,
) -> str:
    """Merge completed lines into archive text and return the new text."""
    lines = archive_text.split("\n") if archive_text.strip() else []
    return "\n".join(merge(lines, completed_lines, header, header_marker)).rstrip()
