"""Finding events by text or by date part."""

from operator import attrgetter
from typing import Iterable, List

from eventcal.event import Event

_STRING_FIELDS = {"name": attrgetter("name"), "category": attrgetter("category")}
_INT_FIELDS = {"year": attrgetter("year"), "month": attrgetter("month"), "day": attrgetter("day")}


def format_match(event: Event) -> str:
    """Render a search hit as 'name (category) on dd-mm-yyyy'."""
    return f"{event.name} ({event.category}) on {event.day:02d}-{event.month:02d}-{event.year:04d}"


def search_by_string(events: Iterable[Event], term: str, field: str) -> List[Event]:
    """Events whose name or category contains ``term`` (case-sensitive)."""
    try:
        getter = _STRING_FIELDS[field]
    except KeyError:
        raise ValueError(f"cannot search text field {field!r}") from None
    return [event for event in events if term in getter(event)]


def search_by_int(events: Iterable[Event], value: int, field: str) -> List[Event]:
    """Events whose year, month or day equals ``value``."""
    try:
        getter = _INT_FIELDS[field]
    except KeyError:
        raise ValueError(f"cannot search number field {field!r}") from None
    return [event for event in events if getter(event) == value]