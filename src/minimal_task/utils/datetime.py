"""Date helpers for formatting archive headers and task annotations.

Date patterns in the configuration follow the moment.js token style used by
note-taking tools (``YYYY-MM-DD``, ``HH:mm``). A pattern containing ``%`` is
treated as a plain strftime pattern instead.
"""

import re
from datetime import datetime, timedelta


DEFAULT_DATE_FORMAT = "YYYY-MM-DD"
DEFAULT_TIME_FORMAT = "HH:mm"

_MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

# Longer tokens must precede their prefixes
_TOKEN_RE = re.compile(
    r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s|A|a"
)


def now_local() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


def next_day(dt: datetime) -> datetime:
    """Return the same moment one calendar day later."""
    return dt + timedelta(days=1)


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _hour12(hour: int) -> int:
    return hour % 12 or 12


_TOKEN_RENDERERS = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "YY": lambda dt: f"{dt.year % 100:02d}",
    "MMMM": lambda dt: _MONTH_NAMES[dt.month - 1],
    "MMM": lambda dt: _MONTH_NAMES[dt.month - 1][:3],
    "MM": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: str(dt.month),
    "Do": lambda dt: _ordinal(dt.day),
    "DD": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: str(dt.day),
    "dddd": lambda dt: _WEEKDAY_NAMES[dt.weekday()],
    "ddd": lambda dt: _WEEKDAY_NAMES[dt.weekday()][:3],
    "HH": lambda dt: f"{dt.hour:02d}",
    "H": lambda dt: str(dt.hour),
    "hh": lambda dt: f"{_hour12(dt.hour):02d}",
    "h": lambda dt: str(_hour12(dt.hour)),
    "mm": lambda dt: f"{dt.minute:02d}",
    "m": lambda dt: str(dt.minute),
    "ss": lambda dt: f"{dt.second:02d}",
    "s": lambda dt: str(dt.second),
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
}


def format_date(dt: datetime, pattern: str = "") -> str:
    """Format a datetime with a moment-style or strftime pattern.

    Args:
        dt: Datetime to format
        pattern: Token pattern such as ``YYYY-MM-DD``; empty means the default

    Returns:
        The formatted string
    """
    pattern = pattern or DEFAULT_DATE_FORMAT
    if "%" in pattern:
        return dt.strftime(pattern)

    def render(match: "re.Match") -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        return _TOKEN_RENDERERS[match.group(0)](dt)

    return _TOKEN_RE.sub(render, pattern)
