"""Command that adds one event to a calendar file."""

import argparse
import sys
from typing import List, Optional

from eventcal.dateutils import weekday
from eventcal.event import Event
from eventcal.prompts import read_event
from eventcal.storage import StorageError, save_event


def describe_event(event: Event) -> str:
    """Summary lines shown after an event has been entered."""
    lines = [f"you just added: {event.name} on {event.year:04d}-{event.month:02d}-{event.day:02d}"]
    if event.has_time:
        lines.append(f"starts at: {event.start_hour:02d}:{event.start_minute:02d}")
        if event.has_end_time:
            lines.append(f"ends at: {event.end_hour:02d}:{event.end_minute:02d}")
        else:
            lines.append("lasts all day!")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Prompt for an event, show it and its occurrences, and append it to the file."""
    parser = argparse.ArgumentParser(prog="eventcal", description="Add an event to a calendar file.")
    parser.add_argument("-f", "--file", default="calendar.txt", help="calendar file to append to")
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("***** add new event *****\n")
    try:
        event = read_event(sys.stdin, out)
        out.write("\n" + describe_event(event) + "\n")
        if event.is_recurring:
            out.write("all of its occurences are:\n")
            weekday(
                event.year, event.month, event.day,
                event.recurrence_type, event.recurrence_interval, event.recurrence_count,
                out,
            )
        save_event(event, args.file)
    except EOFError:
        print("eventcal: unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, StorageError) as exc:
        print(f"eventcal: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())