"""Entry point — prints one calendar page to the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional

from calendar_logic import DayCell
from calendar_state import CalendarController
from events import Event, EventIndex
from settings import load_settings

CELL_WIDTH = 5


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date: {text!r}")


def _event_arg(text: str) -> tuple[date, str]:
    day, _, title = text.partition("=")
    return _iso_date(day), title


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a calendar page.")
    parser.add_argument("--date", type=_iso_date, help="date to show (default: today)")
    parser.add_argument("--select", type=_iso_date, help="selected date")
    parser.add_argument("--min", dest="min_date", type=_iso_date, help="first selectable date")
    parser.add_argument("--max", dest="max_date", type=_iso_date, help="last selectable date")
    parser.add_argument("--week", action="store_true", help="page by week instead of month")
    parser.add_argument("--first-day", type=int, choices=range(7),
                        help="first weekday, 0=Sunday … 6=Saturday")
    parser.add_argument("--locale", help="locale used for the week start, e.g. de_CH")
    parser.add_argument("--six-weeks", action="store_true", help="always show 6 rows")
    parser.add_argument("--only-current-month", action="store_true",
                        help="leave adjacent-month days blank")
    parser.add_argument("--event", action="append", type=_event_arg, default=[],
                        metavar="DATE=TITLE", help="mark a day with an event")
    parser.add_argument("--config", help="settings file (default: ~/.mini-calendar-settings.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_cell(cell: Optional[DayCell]) -> str:
    if cell is None:
        return " " * CELL_WIDTH
    text = f"{cell.date.day:2d}"
    if cell.is_selected:
        text = f"[{text}]"
    elif cell.is_today:
        text = f"*{text}"
    if cell.has_events:
        text += "•"
    if not cell.is_selectable:
        text = "." * len(text)
    return text.rjust(CELL_WIDTH)


def render(controller: CalendarController) -> str:
    """Return the header, weekday labels and day grid as text."""
    lines = [controller.header_title().center(CELL_WIDTH * 7)]
    lines.append("".join(label.rjust(CELL_WIDTH) for label in controller.weekday_labels()))
    cells = controller.cells()
    for start in range(0, len(cells), 7):
        lines.append("".join(format_cell(c) for c in cells[start:start + 7]).rstrip())
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict = {}
    if args.date:
        overrides["target_date"] = args.date
    if args.select:
        overrides["selected_date"] = args.select
    if args.min_date:
        overrides["min_selected_date"] = args.min_date
    if args.max_date:
        overrides["max_selected_date"] = args.max_date
    if args.week:
        overrides["week_format"] = True
    if args.first_day is not None:
        overrides["first_day_of_week"] = args.first_day
    if args.locale:
        overrides["locale"] = args.locale
    if args.six_weeks:
        overrides["static_six_week_format"] = True
    if args.only_current_month:
        overrides["show_only_current_month_date"] = True

    try:
        config = load_settings(args.config, **overrides)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    events: EventIndex[Event] = EventIndex()
    for day, title in args.event:
        events.add(day, Event(day, title))

    print(render(CalendarController(config, events)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
