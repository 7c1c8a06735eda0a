import io

import pytest

from eventcal.event import Event
from eventcal.prompts import read_event

FULL = "Dentist\nHealth\n2024\n5\n6\n1\n9\n30\n1\n10\n15\n1\n1\n3\n2\nNEXT\n"


def test_full_timed_recurring_event():
    infile, outfile = io.StringIO(FULL), io.StringIO()
    event = read_event(infile, outfile)
    assert event == Event(
        "Dentist", "Health", 2024, 5, 6,
        start_hour=9, start_minute=30, end_hour=10, end_minute=15,
        has_time=True, has_end_time=True, is_recurring=True,
        recurrence_type=1, recurrence_count=3, recurrence_interval=2,
    )
    assert infile.readline() == "NEXT\n"


def test_prompts_are_written():
    outfile = io.StringIO()
    read_event(io.StringIO(FULL), outfile)
    text = outfile.getvalue()
    assert text.startswith("enter event name: enter event category: enter year: ")
    assert "recurrence type (0 = days, 1 = weeks, 2 = months, 3 = years): " in text


def test_all_day_event_defaults_and_rest_of_line_dropped():
    infile = io.StringIO("Walk\nFun\n2024 1 1 0 0 extra\nnext\n")
    outfile = io.StringIO()
    event = read_event(infile, outfile)
    assert event == Event("Walk", "Fun", 2024, 1, 1)
    assert infile.readline() == "next\n"
    assert "start hour" not in outfile.getvalue()


def test_timed_without_end_lasts_one_hour_wrapping():
    event = read_event(io.StringIO("A\nB\n2024 1 1 1 23 45 0 0\n"), io.StringIO())
    assert event.has_end_time is False
    assert (event.end_hour, event.end_minute) == (0, 45)


def test_long_text_is_truncated():
    event = read_event(io.StringIO("x" * 150 + "\n" + "c" * 80 + "\n2024 1 1 0 0\n"), io.StringIO())
    assert len(event.name) == 99
    assert len(event.category) == 49


def test_non_integer_raises():
    with pytest.raises(ValueError):
        read_event(io.StringIO("A\nB\nabc\n"), io.StringIO())


@pytest.mark.parametrize("text", ["", "A\nB\n2024\n"])
def test_running_out_of_input_raises(text):
    with pytest.raises(EOFError):
        read_event(io.StringIO(text), io.StringIO())