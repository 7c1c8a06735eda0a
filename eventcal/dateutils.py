"""Dates of the occurrences of a recurring event."""

import sys
from datetime import date, timedelta
from typing import Iterator, Optional, TextIO

from eventcal.event import RecurrenceUnit

_DAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _normalize(year: int, month: int, day: int) -> date:
    """Turn a possibly overflowing year/month/day into a real date."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except OverflowError as exc:
        raise ValueError(f"date out of range: {year}-{month}-{day}") from exc


def occurrences(year: int, month: int, day: int, measure: int, interval: int, count: int) -> Iterator[date]:
    """Yield ``count`` dates starting at the given day, stepping by ``interval`` units.

    Overflowing days and months roll over into the following month or year.
    An unknown ``measure`` repeats the same date.
    """
    for _ in range(count):
        current = _normalize(year, month, day)
        yield current
        year, month, day = current.year, current.month, current.day
        if measure == RecurrenceUnit.DAYS:
            day += interval
        elif measure == RecurrenceUnit.WEEKS:
            day += 7 * interval
        elif measure == RecurrenceUnit.MONTHS:
            month += interval
        elif measure == RecurrenceUnit.YEARS:
            year += interval


def format_occurrence(when: date) -> str:
    """Format a date as 'weekday, dd-mm-yyyy' in lower case."""
    return f"{_DAY_NAMES[when.weekday()]}, {when.day:02d}-{when.month:02d}-{when.year}"


def weekday(
    year: int,
    month: int,
    day: int,
    measure: int,
    interval: int,
    count: int,
    out: Optional[TextIO] = None,
) -> None:
    """Write one formatted line per occurrence to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    for when in occurrences(year, month, day, measure, interval, count):
        stream.write(format_occurrence(when) + "\n")