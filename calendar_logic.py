"""Pure calendar calculations — no UI dependencies.

Weekday numbers follow two conventions:

* ``date.isoweekday()``: Monday=1 … Sunday=7 (used for weekend sets).
* ``first_day_of_week``: Sunday=0, Monday=1 … Saturday=6.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, NamedTuple, Optional

DEFAULT_WEEKEND = frozenset({6, 7})  # Saturday, Sunday
STATIC_GRID_CELLS = 42  # 6 weeks


def day_key(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar day (time of day discarded)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date | datetime, months: int) -> date:
    """Return the first day of the month ``months`` after ``value``'s month."""
    y, m = divmod(value.year * 12 + (value.month - 1) + months, 12)
    return date(y, m + 1, 1)


def months_between(start: date | datetime, end: date | datetime) -> int:
    """Number of calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + end.month - start.month


def _utc_midday(value: date | datetime) -> datetime:
    # Midday keeps the calendar day stable when a local DST shift is applied.
    return datetime(value.year, value.month, value.day, 12, tzinfo=timezone.utc)


def first_day_of_week(value: date | datetime, first_day: int = 0) -> date:
    """Return the first day of ``value``'s week for the given week start."""
    day = _utc_midday(value)
    back = (day.isoweekday() - first_day) % 7
    return (day - timedelta(days=back)).date()


def days_in_range(start: date, end: date) -> list[date]:
    """Return every day in ``[start, end)``."""
    day = _utc_midday(start)
    return [(day + timedelta(days=i)).date() for i in range((end - start).days)]


def days_in_week(value: date | datetime, first_day: int = 0) -> list[date]:
    """Return the 7 days of the week containing ``value``."""
    start = first_day_of_week(value, first_day)
    return days_in_range(start, start + timedelta(days=7))


def leading_offset(value: date | datetime, first_day: int = 0) -> int:
    """Days borrowed from the previous month to fill the first grid row."""
    first = date(value.year, value.month, 1)
    return (first.isoweekday() - first_day) % 7


def trailing_offset(value: date | datetime, first_day: int = 0) -> int:
    """Days borrowed from the next month to fill the last grid row (1–7)."""
    following = add_months(value, 1)
    return 7 - (following.isoweekday() - first_day) % 7


def month_grid_length(
    value: date | datetime, first_day: int = 0, static_six_weeks: bool = False,
) -> int:
    """Return how many cells the month page of ``value`` needs."""
    if static_six_weeks:
        return STATIC_GRID_CELLS
    return (
        days_in_month(value.year, value.month)
        + leading_offset(value, first_day)
        + trailing_offset(value, first_day)
    )


class CellPosition(NamedTuple):
    date: date
    is_prev_month: bool
    is_this_month: bool
    is_next_month: bool


def classify_cell(
    index: int, month_anchor: date | datetime, leading: int, month_days: int,
) -> CellPosition:
    """Place grid cell ``index`` relative to the month of ``month_anchor``."""
    first = date(month_anchor.year, month_anchor.month, 1)
    day = first + timedelta(days=index - leading)
    if index < leading:
        return CellPosition(day, True, False, False)
    if index < leading + month_days:
        return CellPosition(day, False, True, False)
    return CellPosition(day, False, False, True)


def is_selectable(value: date | datetime, bounds: Any) -> bool:
    """True iff ``value`` lies within ``bounds`` (inclusive, by calendar day)."""
    return bounds.min_date <= day_key(value) <= bounds.max_date


@dataclass(frozen=True)
class DayCell:
    """Everything a host needs to draw one day."""

    date: date
    index: int
    is_prev_month: bool = False
    is_this_month: bool = True
    is_next_month: bool = False
    is_today: bool = False
    is_selectable: bool = True
    is_selected: bool = False
    is_weekend: bool = False
    events: tuple = field(default=(), compare=False)

    @property
    def has_events(self) -> bool:
        return bool(self.events)


def _make_cell(
    position: CellPosition,
    index: int,
    bounds: Any,
    selected: Optional[date],
    today: date,
    weekend: frozenset[int],
    events: Any,
) -> DayCell:
    day = position.date
    return DayCell(
        date=day,
        index=index,
        is_prev_month=position.is_prev_month,
        is_this_month=position.is_this_month,
        is_next_month=position.is_next_month,
        is_today=day == today,
        is_selectable=is_selectable(day, bounds),
        is_selected=selected is not None and day == day_key(selected),
        is_weekend=day.isoweekday() in weekend,
        events=tuple(events.get_events(day)) if events is not None else (),
    )


def month_cells(
    anchor: date | datetime,
    bounds: Any,
    *,
    first_day: int = 0,
    selected: Optional[date] = None,
    today: Optional[date] = None,
    static_six_weeks: bool = False,
    only_current_month: bool = False,
    weekend: frozenset[int] = DEFAULT_WEEKEND,
    events: Any = None,
) -> list[Optional[DayCell]]:
    """Return the cells of a month page.

    Adjacent-month cells are ``None`` when ``only_current_month`` is set so the
    host can leave the slot empty.
    """
    today = today or date.today()
    leading = leading_offset(anchor, first_day)
    month_days = days_in_month(anchor.year, anchor.month)
    total = month_grid_length(anchor, first_day, static_six_weeks)

    cells: list[Optional[DayCell]] = []
    for index in range(total):
        position = classify_cell(index, anchor, leading, month_days)
        if only_current_month and not position.is_this_month:
            cells.append(None)
            continue
        cells.append(_make_cell(position, index, bounds, selected, today, weekend, events))
    return cells


def week_cells(
    anchor: date | datetime,
    bounds: Any,
    *,
    first_day: int = 0,
    target: Optional[date] = None,
    selected: Optional[date] = None,
    today: Optional[date] = None,
    only_current_month: bool = False,
    weekend: frozenset[int] = DEFAULT_WEEKEND,
    events: Any = None,
) -> list[Optional[DayCell]]:
    """Return the 7 cells of a week page.

    Days are classified against the month of ``target`` (the anchor itself when
    omitted), so a week straddling two months shows the other month's days as
    adjacent-month cells.
    """
    today = today or date.today()
    ref = day_key(target or anchor)
    ref_month = (ref.year, ref.month)

    cells: list[Optional[DayCell]] = []
    for index, day in enumerate(days_in_week(anchor, first_day)):
        month = (day.year, day.month)
        position = CellPosition(day, month < ref_month, month == ref_month, month > ref_month)
        if only_current_month and not position.is_this_month:
            cells.append(None)
            continue
        cells.append(_make_cell(position, index, bounds, selected, today, weekend, events))
    return cells
