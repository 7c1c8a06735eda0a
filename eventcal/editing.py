"""Changing and removing events in a list."""

import sys
from typing import List, Optional, TextIO

from eventcal.event import Event
from eventcal.prompts import read_event


def _check_index(events: List[Event], index: int) -> None:
    if not 0 <= index < len(events):
        raise IndexError("invalid index")


def edit_event(
    events: List[Event],
    index: int,
    infile: Optional[TextIO] = None,
    outfile: Optional[TextIO] = None,
) -> Event:
    """Re-enter every field of ``events[index]`` interactively and return the new event."""
    _check_index(events, index)
    out = sys.stdout if outfile is None else outfile
    out.write(f"edit event: {events[index].name}\n")
    events[index] = read_event(infile, out)
    return events[index]


def delete_event(events: List[Event], index: int) -> Event:
    """Remove ``events[index]``, keeping the order of the rest, and return it."""
    _check_index(events, index)
    return events.pop(index)