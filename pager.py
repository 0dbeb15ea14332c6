"""Page index ⇄ calendar date mapping for month and week paging."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from calendar_logic import (
    add_months,
    day_key,
    first_day_of_week,
    is_selectable,
    months_between,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_DATE = date(2018, 1, 1)


class InvalidBoundsError(ValueError):
    """Raised when the minimum date lies after the maximum date."""


def default_max_date(today: Optional[date] = None) -> date:
    """Return the same calendar day one year after ``today``."""
    today = today or date.today()
    try:
        return today.replace(year=today.year + 1)
    except ValueError:
        # Feb 29 -> Feb 28
        return today.replace(year=today.year + 1, day=28)


@dataclass(frozen=True)
class CalendarBounds:
    min_date: date
    max_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_date", day_key(self.min_date))
        object.__setattr__(self, "max_date", day_key(self.max_date))
        if self.min_date > self.max_date:
            raise InvalidBoundsError(
                f"min_date {self.min_date.isoformat()} is after "
                f"max_date {self.max_date.isoformat()}"
            )

    @classmethod
    def default(cls, today: Optional[date] = None) -> "CalendarBounds":
        return cls(DEFAULT_MIN_DATE, default_max_date(today))

    def clamp(self, value: date | datetime) -> date:
        """Return ``value`` moved onto the nearer bound when it lies outside."""
        day = day_key(value)
        if day < self.min_date:
            return self.min_date
        if day > self.max_date:
            return self.max_date
        return day

    def __contains__(self, value: date | datetime) -> bool:
        return is_selectable(value, self)


class PagingMode(enum.Enum):
    MONTH = "month"
    WEEK = "week"


@dataclass(frozen=True)
class PagerState:
    bounds: CalendarBounds
    mode: PagingMode
    first_day_of_week: int
    target: date
    page: int
    total_pages: int


def total_pages(
    bounds: CalendarBounds, mode: PagingMode, first_day: int = 0,
) -> int:
    """Number of pages between the bounds (both inclusive).

    Week mode counts the steps ``min + 7*k`` that stay within ``max + 7 days``.
    """
    if mode is PagingMode.MONTH:
        return months_between(bounds.min_date, bounds.max_date) + 1
    return ((bounds.max_date - bounds.min_date).days + 7) // 7 + 1


def advance(current: int, delta: int, total: int) -> Optional[int]:
    """Return ``current + delta`` or None when it would leave ``[0, total)``."""
    page = current + delta
    if page < 0 or page >= total:
        return None
    return page


class CalendarPager:
    """Converts between page indices and anchor dates for a pair of bounds."""

    def __init__(
        self,
        bounds: CalendarBounds,
        mode: PagingMode = PagingMode.MONTH,
        first_day: int = 0,
    ) -> None:
        if not 0 <= first_day <= 6:
            raise ValueError(f"first_day must be in 0..6, got {first_day!r}")
        self.bounds = bounds
        self.mode = mode
        self.first_day = first_day

    @property
    def total_pages(self) -> int:
        return total_pages(self.bounds, self.mode, self.first_day)

    def page_for_date(self, value: date | datetime) -> int:
        """Return the page holding ``value`` (clamped to the bounds)."""
        target = self.bounds.clamp(value)
        if self.mode is PagingMode.MONTH:
            return months_between(self.bounds.min_date, target)
        start = first_day_of_week(self.bounds.min_date, self.first_day)
        return (target - start).days // 7

    def page_to_anchor_date(self, page: int) -> date:
        """First day of the page's month, or first day of the page's week."""
        if self.mode is PagingMode.MONTH:
            return add_months(self.bounds.min_date, page)
        return first_day_of_week(
            self.bounds.min_date + timedelta(days=7 * page), self.first_day,
        )

    def advance(self, current: int, delta: int) -> Optional[int]:
        return advance(current, delta, self.total_pages)

    def initialize(
        self,
        target: Optional[date | datetime],
        selected: Optional[date | datetime] = None,
    ) -> PagerState:
        """Compute the starting page for ``target`` (or ``selected``)."""
        effective = target if target is not None else selected
        if effective is None:
            effective = date.today()
        clamped = self.bounds.clamp(effective)
        if clamped != day_key(effective):
            logger.debug("Target %s clamped to %s", day_key(effective), clamped)
        page = self.page_for_date(clamped)
        return PagerState(
            bounds=self.bounds,
            mode=self.mode,
            first_day_of_week=self.first_day,
            target=clamped,
            page=page,
            total_pages=self.total_pages,
        )


def initialize(
    bounds: CalendarBounds,
    target: Optional[date | datetime],
    selected: Optional[date | datetime],
    mode: PagingMode = PagingMode.MONTH,
    first_day: int = 0,
) -> PagerState:
    """Build a pager for ``bounds`` and return its starting state.

    ``bounds`` may also be a ``(min_date, max_date)`` pair; an inverted pair
    raises :class:`InvalidBoundsError`.
    """
    if not isinstance(bounds, CalendarBounds):
        bounds = CalendarBounds(*bounds)
    return CalendarPager(bounds, mode, first_day).initialize(target, selected)
