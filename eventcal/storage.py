"""Reading and writing events as pipe-separated lines."""

import string
from typing import Iterable, List, Optional

from eventcal.event import CATEGORY_MAX_LENGTH, NAME_MAX_LENGTH, Event

_FIELD_COUNT = 15
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class StorageError(Exception):
    """Raised when an event file cannot be read, written or parsed."""


def _ascii_lower(text: str) -> str:
    return text.translate(_LOWER)


def format_event(event: Event) -> str:
    """Render an event as one line (without the newline); text is lower-cased."""
    name = _ascii_lower(event.name[:NAME_MAX_LENGTH])
    category = _ascii_lower(event.category[:CATEGORY_MAX_LENGTH])
    for text in (name, category):
        if "|" in text or "\n" in text:
            raise StorageError(f"text cannot hold '|' or a newline: {text!r}")
    numbers = (
        event.year,
        event.month,
        event.day,
        event.start_hour,
        event.start_minute,
        event.end_hour,
        event.end_minute,
        event.has_time,
        event.has_end_time,
        event.is_recurring,
        event.recurrence_count,
        event.recurrence_interval,
        event.recurrence_type,
    )
    return "|".join([name, category, *(str(int(n)) for n in numbers)])


def parse_event(line: str) -> Event:
    """Parse one stored line back into an event."""
    parts = line.lstrip().rstrip("\r\n").split("|")
    if len(parts) != _FIELD_COUNT:
        raise StorageError(f"expected {_FIELD_COUNT} fields, got {len(parts)}")
    name, category = parts[0], parts[1]
    if not name or len(name) > NAME_MAX_LENGTH:
        raise StorageError(f"bad event name: {name!r}")
    if not category or len(category) > CATEGORY_MAX_LENGTH:
        raise StorageError(f"bad event category: {category!r}")
    try:
        numbers = [int(part) for part in parts[2:]]
    except ValueError as exc:
        raise StorageError(f"bad number in line: {line!r}") from exc
    (year, month, day, start_hour, start_minute, end_hour, end_minute,
     has_time, has_end_time, is_recurring, count, interval, rtype) = numbers
    return Event(
        name=name,
        category=category,
        year=year,
        month=month,
        day=day,
        start_hour=start_hour,
        start_minute=start_minute,
        end_hour=end_hour,
        end_minute=end_minute,
        has_time=bool(has_time),
        has_end_time=bool(has_end_time),
        is_recurring=bool(is_recurring),
        recurrence_type=rtype,
        recurrence_count=count,
        recurrence_interval=interval,
    )


def save_event(event: Event, filename: str) -> None:
    """Append one event to the file."""
    line = format_event(event)
    try:
        with open(filename, "a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    except OSError as exc:
        raise StorageError(f"could not open file to save the event to: {exc}") from exc


def write_all_events(events: Iterable[Event], filename: str) -> None:
    """Replace the file's contents with the given events."""
    lines = [format_event(event) + "\n" for event in events]
    try:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.writelines(lines)
    except OSError as exc:
        raise StorageError(f"couldn't write events to file: {exc}") from exc


def read_events(filename: str, max_events: Optional[int] = None) -> List[Event]:
    """Read events until the first malformed line, the end of file or ``max_events``.

    A missing file holds no events.
    """
    try:
        handle = open(filename, "r", encoding="utf-8")
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise StorageError(f"couldn't read events from file: {exc}") from exc

    events: List[Event] = []
    with handle:
        for line in handle:
            if max_events is not None and len(events) >= max_events:
                break
            if not line.strip():
                continue
            try:
                events.append(parse_event(line))
            except StorageError:
                break
    return events