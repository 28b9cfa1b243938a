"""Day counting and date formatting.

Only Actual/365 Fixed is supported: flat curves quoted on that basis are all
the analytic engine needs to turn a pair of dates into a time to maturity.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .core import InvalidInputError

__all__ = [
    "Actual365Fixed",
    "day_counter",
    "time_to_maturity",
    "parse_date",
    "format_long_date",
]


@dataclass(frozen=True)
class Actual365Fixed:
    """Actual number of days elapsed over a fixed 365-day year."""
    name: str = "Actual/365 (Fixed)"

    def day_count(self, start: dt.date, end: dt.date) -> int:
        return (end - start).days

    def year_fraction(self, start: dt.date, end: dt.date) -> float:
        return self.day_count(start, end) / 365.0

    def __str__(self) -> str:
        return self.name


_ALIASES = {
    "actual/365 (fixed)": Actual365Fixed,
    "actual/365 fixed": Actual365Fixed,
    "actual365fixed": Actual365Fixed,
    "act/365f": Actual365Fixed,
}


def day_counter(name: str) -> Actual365Fixed:
    """Resolve a day-count convention by name."""
    try:
        return _ALIASES[name.strip().lower()]()
    except KeyError:
        raise InvalidInputError(f"unsupported day counter: {name!r}") from None


def time_to_maturity(
    maturity: dt.date,
    evaluation_date: dt.date,
    *,
    settlement_date: dt.date | None = None,
    day_counter: Actual365Fixed | None = None,
) -> float:
    """Year fraction from the reference date to ``maturity``.

    The reference date is ``settlement_date`` when given, else
    ``evaluation_date``.  A maturity before the reference date is an error.
    """
    dc = day_counter or Actual365Fixed()
    reference = settlement_date if settlement_date is not None else evaluation_date
    if settlement_date is not None and settlement_date < evaluation_date:
        raise InvalidInputError(
            f"settlement date {settlement_date} precedes evaluation date {evaluation_date}"
        )
    if maturity < reference:
        raise InvalidInputError(f"maturity {maturity} precedes reference date {reference}")
    return dc.year_fraction(reference, maturity)


def parse_date(text: str) -> dt.date:
    """Parse an ISO ``YYYY-MM-DD`` date."""
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        raise InvalidInputError(f"invalid date {text!r}, expected YYYY-MM-DD") from None


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(date: dt.date) -> str:
    """``May 17th, 1999``."""
    return f"{date.strftime('%B')} {_ordinal(date.day)}, {date.year}"
