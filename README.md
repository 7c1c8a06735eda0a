# eventcal

A small interactive calendar for the terminal. It asks you about an event,
shows when it happens, including every occurrence of a recurring event, and
appends it to a plain text file.

## Installing

```
pip install .
```

## Adding an event

```
eventcal
```

By default the event is appended to `calendar.txt` in the current directory.
Use `-f`/`--file` to choose another file:

```
eventcal --file work.txt
```

You are asked, one prompt at a time, for:

- the event name and category
- the year, month (1-12) and day (1-31)
- whether it is a timed event (`0` = all day, `1` = timed). If it is, you
  give the start hour and minute and say whether it has an end time. Without
  an end time the event ends one hour after it starts.
- whether it recurs (`0` = no, `1` = yes). If it does, you give the
  recurrence unit (`0` = days, `1` = weeks, `2` = months, `3` = years), the
  number of occurrences, and the interval between them.

After the last answer a summary is printed. A recurring event also gets one
line per occurrence, in the form `friday, 05-01-2024`. Days and months that
run past the end of a month or year carry over into the next one.

The command exits with status 1 and a message on standard error in these
cases:

- the input ends early
- an answer that should be a number is not one
- the event cannot be written to the file

## The calendar file

Each event is one line of `|`-separated fields. The name and category are
stored in lower case and may not contain `|` or a newline:

```
name|category|year|month|day|start hour|start minute|end hour|end minute|timed|has end|recurring|count|interval|unit
```

## Using it as a library

```python
from eventcal.storage import read_events, write_all_events
from eventcal.ordering import sort_events
from eventcal.search import search_by_string, search_by_int, format_match
from eventcal.dateutils import occurrences, format_occurrence

events = read_events("calendar.txt", 100)
events = sort_events(events)
for event in search_by_string(events, "dentist", "name"):
    print(format_match(event))

for when in occurrences(2024, 1, 5, 1, 2, 3):
    print(format_occurrence(when))

write_all_events(events, "calendar.txt")
```

The modules:

- `eventcal.event` defines `Event` and `RecurrenceUnit`.
- `eventcal.storage` has `format_event`, `parse_event`, `save_event`,
  `write_all_events` and `read_events`, and raises `StorageError`.
  `read_events` returns an empty list for a missing file. It stops at the
  first malformed line.
- `eventcal.search` has `search_by_string`, which matches a substring of
  `"name"` or `"category"` and is case-sensitive. It also has
  `search_by_int`, which matches `"year"`, `"month"` or `"day"` exactly.
  Both raise `ValueError` for any other field name.
- `eventcal.ordering` has `sort_events` and `compare_events_by_date`.
  Events are ordered by date, then start time, then name ignoring case.
- `eventcal.editing` has `edit_event`, which re-prompts for every field, and
  `delete_event`. Both change a list of events in place and raise
  `IndexError` for an index out of range.
- `eventcal.prompts` has `read_event`, the interactive entry used by the
  command.

## What it does not do

The `eventcal` command only adds events. It cannot list, search, sort, edit
or delete events from the command line. Those operations are available only
through the library functions above.

## Running the tests

```
pip install .[test]
pytest
```