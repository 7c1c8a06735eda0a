"""Chronological ordering of events."""

import string
from functools import cmp_to_key
from typing import Iterable, List

from eventcal.event import Event

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def casefold_compare(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case; negative, zero or positive."""
    a, b = s1.translate(_LOWER), s2.translate(_LOWER)
    for c1, c2 in zip(a, b):
        if c1 != c2:
            return ord(c1) - ord(c2)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def compare_events_by_date(a: Event, b: Event) -> int:
    """Order by date, then start time, then name ignoring case."""
    for left, right in (
        (a.year, b.year),
        (a.month, b.month),
        (a.day, b.day),
        (a.start_hour, b.start_hour),
        (a.start_minute, b.start_minute),
    ):
        if left != right:
            return left - right
    return casefold_compare(a.name, b.name)


def sort_events(events: Iterable[Event]) -> List[Event]:
    """A new list of the events in chronological order."""
    return sorted(events, key=cmp_to_key(compare_events_by_date))