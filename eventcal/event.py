"""The calendar event record and its recurrence units."""

from dataclasses import dataclass
from enum import IntEnum

NAME_MAX_LENGTH = 99
CATEGORY_MAX_LENGTH = 49


class RecurrenceUnit(IntEnum):
    """The step by which a recurring event repeats."""

    DAYS = 0
    WEEKS = 1
    MONTHS = 2
    YEARS = 3


@dataclass
class Event:
    """A calendar entry, either all-day or timed, optionally recurring."""

    name: str
    category: str
    year: int
    month: int
    day: int
    start_hour: int = 0
    start_minute: int = 0
    end_hour: int = 0
    end_minute: int = 0
    has_time: bool = False
    has_end_time: bool = False
    is_recurring: bool = False
    recurrence_type: int = RecurrenceUnit.DAYS
    recurrence_count: int = 0
    recurrence_interval: int = 0