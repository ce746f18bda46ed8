"""
Timestamp formatting for archive names.

Patterns use the Unicode date field symbols Xcode uses for its archives
(yyyy, MM, dd, HH, h, mm, ss, a; text in single quotes is literal). The
output does not depend on the process locale.
"""

import re
from datetime import datetime, timezone

DIRECTORY_DATE_PATTERN = "yyyy-MM-dd"
ARCHIVE_DATE_PATTERN = "MM-dd-yyyy, h.mm.ss a"
PLIST_DATE_PATTERN = "yyyy-MM-dd'T'HH:mm:ss'Z'"

_FIELD = re.compile(r"'[^']*'|yyyy|MM|dd|HH|h|mm|ss|a")


def format_timestamp(timestamp: datetime, pattern: str) -> str:
    """
    Format ``timestamp`` with a date pattern.

    Examples:
        >>> format_timestamp(datetime(2017, 3, 9, 14, 5, 7), "MM-dd-yyyy, h.mm.ss a")
        '03-09-2017, 2.05.07 PM'
    """

    def field(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("'"):
            return token[1:-1]
        if token == "yyyy":
            return f"{timestamp.year:04d}"
        if token == "MM":
            return f"{timestamp.month:02d}"
        if token == "dd":
            return f"{timestamp.day:02d}"
        if token == "HH":
            return f"{timestamp.hour:02d}"
        if token == "h":
            return str(timestamp.hour % 12 or 12)
        if token == "mm":
            return f"{timestamp.minute:02d}"
        if token == "ss":
            return f"{timestamp.second:02d}"
        return "AM" if timestamp.hour < 12 else "PM"

    return _FIELD.sub(field, pattern)


def directory_date(timestamp: datetime) -> str:
    return format_timestamp(timestamp, DIRECTORY_DATE_PATTERN)


def archive_date(timestamp: datetime) -> str:
    return format_timestamp(timestamp, ARCHIVE_DATE_PATTERN)


def plist_date(timestamp: datetime) -> str:
    """Format in UTC; naive timestamps are taken as local time."""
    return format_timestamp(timestamp.astimezone(timezone.utc), PLIST_DATE_PATTERN)
