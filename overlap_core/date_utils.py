"""Calendar-date parsing for assignment tables."""

from __future__ import annotations

import re
from datetime import date

from .errors import UnsupportedDateFormat

# Tried in order. DD/MM/YYYY precedes MM/DD/YYYY, so 01/02/2013 is 1 February.
DATE_LAYOUTS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("YYYY-MM-DD", re.compile(r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})", re.ASCII)),
    ("YYYY/MM/DD", re.compile(r"(?P<y>\d{4})/(?P<m>\d{2})/(?P<d>\d{2})", re.ASCII)),
    ("DD-MM-YYYY", re.compile(r"(?P<d>\d{2})-(?P<m>\d{2})-(?P<y>\d{4})", re.ASCII)),
    ("DD/MM/YYYY", re.compile(r"(?P<d>\d{2})/(?P<m>\d{2})/(?P<y>\d{4})", re.ASCII)),
    ("MM/DD/YYYY", re.compile(r"(?P<m>\d{2})/(?P<d>\d{2})/(?P<y>\d{4})", re.ASCII)),
)


def _match_layout(pattern: re.Pattern[str], text: str) -> date | None:
    m = pattern.fullmatch(text)
    if m is None:
        return None
    try:
        return date(int(m["y"]), int(m["m"]), int(m["d"]))
    except ValueError:
        # right shape, impossible date (month 13, 31 February)
        return None


def parse_date(value: str) -> date:
    """Parse a date string using the first matching layout.

    Impossible dates such as 31/02/2013 are rejected, not clamped to the
    last day of the month. Raises UnsupportedDateFormat when none of the
    layouts match.
    """
    text = value.strip()
    for _name, pattern in DATE_LAYOUTS:
        parsed = _match_layout(pattern, text)
        if parsed is not None:
            return parsed
    raise UnsupportedDateFormat(value)


def overlap_days(start_a: date, end_a: date, start_b: date, end_b: date) -> int:
    """Whole days shared by two date ranges, never negative.

    Counted from the later start to the earlier end, so ranges touching on a
    single day share 0 days. Inverted ranges also yield 0.
    """
    start = max(start_a, start_b)
    end = min(end_a, end_b)
    return max(0, (end - start).days)
