"""Date extraction helpers."""
from __future__ import annotations

import datetime as dt
import re
from typing import Callable, Optional, Tuple

DATE_ORDERS = ("MDY", "DMY")
DEFAULT_DATE_ORDER = "MDY"

MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

NUMERIC_DATE = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{2,4})", re.ASCII)
NUMERIC_SHORT_YEAR = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{2})", re.ASCII)
YEAR_FIRST = re.compile(r"(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})", re.ASCII)
DAY_MONTH_NAME = re.compile(
    r"(\d{1,2})\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\s+(\d{2,4})",
    re.IGNORECASE | re.ASCII,
)


def _expand_year(raw: str) -> int:
    year = int(raw)
    if len(raw) == 2:
        return year + 2000 if year < 50 else year + 1900
    return year


def _normalise(year: int, month: int, day: int) -> Optional[dt.date]:
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def _from_numeric(groups: Tuple[str, ...], date_order: str) -> Optional[dt.date]:
    first, second, year = groups
    if date_order == "DMY":
        day, month = int(first), int(second)
    else:
        month, day = int(first), int(second)
    return _normalise(_expand_year(year), month, day)


def _from_year_first(groups: Tuple[str, ...], date_order: str) -> Optional[dt.date]:
    year, month, day = groups
    return _normalise(int(year), int(month), int(day))


def _from_month_name(groups: Tuple[str, ...], date_order: str) -> Optional[dt.date]:
    day, month_name, year = groups
    month = MONTH_ABBREVIATIONS.get(month_name.lower())
    if month is None:
        return None
    return _normalise(_expand_year(year), month, int(day))


DateParser = Callable[[Tuple[str, ...], str], Optional[dt.date]]

DATE_PATTERNS: Tuple[Tuple[re.Pattern[str], DateParser], ...] = (
    (NUMERIC_DATE, _from_numeric),
    (NUMERIC_SHORT_YEAR, _from_numeric),
    (YEAR_FIRST, _from_year_first),
    (DAY_MONTH_NAME, _from_month_name),
)


def extract_date(text: Optional[str], date_order: str = DEFAULT_DATE_ORDER) -> Optional[str]:
    """Return the first parseable receipt date as ``YYYY-MM-DD``.

    Patterns are tried in priority order against the whole text. For each
    pattern only its first occurrence is considered; a shape that is not a
    real calendar date moves the search on to the next pattern.

    ``date_order`` decides how the two leading numbers of a numeric date are
    read: ``"MDY"`` (``03/14/2024`` is 14 March) or ``"DMY"``. Two digit years
    below 50 belong to the 2000s, the rest to the 1900s.

    Numeric patterns have no digit boundary and run before the year-first
    one, so ``2012/01/05`` is read from its ``12/01/05`` tail (2005-12-01 in
    ``MDY``). Year-first text is only recovered when that tail is not a real
    date, as with ``2024/03/14``. Digits and month names are ASCII only.
    """

    if not text:
        return None
    if date_order not in DATE_ORDERS:
        raise ValueError(f"unsupported date order: {date_order}")
    for pattern, parser in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = parser(match.groups(), date_order)
        if value is not None:
            return value.isoformat()
    return None


__all__ = ["DATE_ORDERS", "DATE_PATTERNS", "DEFAULT_DATE_ORDER", "extract_date"]
