import io
from datetime import date, timedelta

import pytest

from eventcal.dateutils import format_occurrence, occurrences, weekday
from eventcal.event import RecurrenceUnit


def test_daily_steps_are_even():
    dates = list(occurrences(2023, 12, 30, RecurrenceUnit.DAYS, 3, 5))
    assert len(dates) == 5
    assert dates[0] == date(2023, 12, 30)
    assert all(b - a == timedelta(days=3) for a, b in zip(dates, dates[1:]))


def test_weekly_steps_are_even():
    dates = list(occurrences(2024, 5, 6, RecurrenceUnit.WEEKS, 2, 4))
    assert all(b - a == timedelta(weeks=2) for a, b in zip(dates, dates[1:]))


def test_monthly_steps_roll_over_year():
    dates = list(occurrences(2024, 11, 15, RecurrenceUnit.MONTHS, 1, 3))
    assert [d.month for d in dates] == [11, 12, 1]
    assert [d.year for d in dates] == [2024, 2024, 2025]
    assert {d.day for d in dates} == {15}


def test_month_overflow_normalizes_into_next_month():
    dates = list(occurrences(2024, 1, 31, RecurrenceUnit.MONTHS, 1, 2))
    assert dates[1] == date(2024, 3, 2)


def test_leap_day_plus_year_rolls_forward():
    dates = list(occurrences(2024, 2, 29, RecurrenceUnit.YEARS, 1, 2))
    assert dates[1] == date(2025, 3, 1)


def test_unknown_measure_repeats_date():
    dates = list(occurrences(2024, 5, 6, 7, 1, 3))
    assert dates == [date(2024, 5, 6)] * 3


def test_zero_count_yields_nothing():
    assert list(occurrences(2024, 5, 6, RecurrenceUnit.DAYS, 1, 0)) == []


def test_out_of_range_raises():
    with pytest.raises(ValueError):
        list(occurrences(9999, 12, 31, RecurrenceUnit.DAYS, 1, 2))


def test_format_occurrence_known_day():
    assert format_occurrence(date(2024, 1, 1)) == "monday, 01-01-2024"


def test_format_occurrence_is_lower_case():
    text = format_occurrence(date(2030, 7, 4))
    assert text == text.lower()
    assert text.endswith(", 04-07-2030")


def test_weekday_writes_one_line_per_occurrence():
    out = io.StringIO()
    weekday(2024, 5, 6, RecurrenceUnit.WEEKS, 1, 3, out)
    expected = [format_occurrence(d) for d in occurrences(2024, 5, 6, RecurrenceUnit.WEEKS, 1, 3)]
    assert out.getvalue().splitlines() == expected