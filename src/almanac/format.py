"""
almanac.format
--------------
Pattern rendering for CalendarDate. Read-only: only the public accessors of
the date are used.

Tokens::

    yyyy  year, at least 4 digits, '-' for years before 0
    yy    last two digits of the year
    MMMM  month name            MMM  first three letters of the month name
    MM    month, 2 digits       M    month
    dd    day, 2 digits         d    day
    EEEE  weekday name          EEE  first three letters of the weekday name

Text in single quotes is copied verbatim; ``''`` is a literal quote.
Any other ASCII letter is rejected.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from .core.date import CalendarDate
from .core.errors import InvalidArgumentError

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|''|([A-Za-z])\1*|[^A-Za-z']+")


def _year4(d: CalendarDate) -> str:
    sign = "-" if d.year < 0 else ""
    return f"{sign}{abs(d.year):04d}"


_FIELDS: Dict[str, Callable[[CalendarDate], str]] = {
    "yyyy": _year4,
    "yy": lambda d: f"{abs(d.year) % 100:02d}",
    "MMMM": lambda d: d.month_name(),
    "MMM": lambda d: d.month_name()[:3],
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "dd": lambda d: f"{d.day:02d}",
    "d": lambda d: str(d.day),
    "EEEE": lambda d: d.weekday_name(),
    "EEE": lambda d: d.weekday_name()[:3],
}


def tokenize(pattern: str) -> List[str]:
    pos = 0
    out: List[str] = []
    while pos < len(pattern):
        m = _TOKEN_RE.match(pattern, pos)
        if m is None:
            # unterminated quote
            raise InvalidArgumentError(f"Unterminated quote in pattern {pattern!r}")
        out.append(m.group(0))
        pos = m.end()
    return out


def format_date(d: CalendarDate, pattern: str) -> str:
    parts: List[str] = []
    for tok in tokenize(pattern):
        if tok == "''":
            parts.append("'")
        elif tok.startswith("'"):
            parts.append(tok[1:-1].replace("''", "'"))
        elif tok[0].isascii() and tok[0].isalpha():
            fn = _FIELDS.get(tok)
            if fn is None:
                raise InvalidArgumentError(f"Unknown pattern token {tok!r}. Known: {sorted(_FIELDS)}")
            parts.append(fn(d))
        else:
            parts.append(tok)
    return "".join(parts)
