"""Interactive entry of a new event."""

import re
import sys
from typing import Optional, TextIO

from eventcal.event import CATEGORY_MAX_LENGTH, NAME_MAX_LENGTH, Event

_INTEGER = re.compile(r"[+-]?\d+")


class _Console:
    """Prompted reading of whole lines and whitespace-separated integers."""

    def __init__(self, infile: TextIO, outfile: TextIO) -> None:
        self._in = infile
        self._out = outfile
        self._rest = ""

    def _prompt(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _next_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("unexpected end of input")
        return line

    def ask_line(self, prompt: str) -> str:
        self._prompt(prompt)
        line, self._rest = (self._rest or self._next_line()), ""
        return line[:-1] if line.endswith("\n") else line

    def ask_int(self, prompt: str) -> int:
        self._prompt(prompt)
        text = self._rest.lstrip()
        while not text:
            text = self._next_line().lstrip()
        match = _INTEGER.match(text)
        if match is None:
            raise ValueError(f"expected an integer, got {text.split()[0]!r}")
        self._rest = text[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        self._rest = ""


def read_event(infile: Optional[TextIO] = None, outfile: Optional[TextIO] = None) -> Event:
    """Prompt for every field of an event and return it.

    Raises EOFError when input runs out and ValueError on a non-integer answer.
    """
    console = _Console(sys.stdin if infile is None else infile, sys.stdout if outfile is None else outfile)

    name = console.ask_line("enter event name: ")[:NAME_MAX_LENGTH]
    category = console.ask_line("enter event category: ")[:CATEGORY_MAX_LENGTH]
    year = console.ask_int("enter year: ")
    month = console.ask_int("enter month (1-12): ")
    day = console.ask_int("enter day (1-31): ")
    event = Event(name, category, year, month, day)

    event.has_time = bool(console.ask_int("is this a timed event? (0 = all day, 1 = yes): "))
    if event.has_time:
        event.start_hour = console.ask_int("start hour (0-23): ")
        event.start_minute = console.ask_int("start minute (0-59): ")
        event.has_end_time = bool(console.ask_int("does it have an end time? (0 = no, 1 = yes): "))
        if event.has_end_time:
            event.end_hour = console.ask_int("end hour (0-23): ")
            event.end_minute = console.ask_int("end minute (0-59): ")
        else:
            event.end_hour = (event.start_hour + 1) % 24
            event.end_minute = event.start_minute

    event.is_recurring = bool(console.ask_int("is this a recurring event? (0 = no, 1 = yes): "))
    if event.is_recurring:
        event.recurrence_type = console.ask_int(
            "recurrence type (0 = days, 1 = weeks, 2 = months, 3 = years): "
        )
        event.recurrence_count = console.ask_int("how many times do you want to repeat it? ")
        event.recurrence_interval = console.ask_int(
            "interval between occurences (e.g., every 2 weeks): "
        )

    console.discard_line()
    return event