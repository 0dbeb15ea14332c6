"""Selection holder and host-facing callbacks for a paged calendar."""

from __future__ import annotations

import calendar as _cal
import logging
from datetime import date, datetime
from typing import Any, Callable, Optional

from calendar_logic import DayCell, day_key, is_selectable, month_cells, week_cells
from events import EventIndex
from locales import weekday_labels, weekend_days
from pager import CalendarPager, PagingMode
from settings import CalendarConfig

logger = logging.getLogger(__name__)

DayPressed = Callable[[date, list], None]
DatePicker = Callable[[date, date, date], Optional[date]]


class CalendarController:
    """Tracks the visible page and the selected day for one calendar instance.

    The host feeds user interaction in (day taps, arrow presses, swipes) and
    renders whatever :meth:`cells` returns. Notifications go out through the
    optional callbacks.
    """

    def __init__(
        self,
        config: Optional[CalendarConfig] = None,
        events: Optional[EventIndex] = None,
        *,
        on_day_pressed: Optional[DayPressed] = None,
        on_day_long_pressed: Optional[Callable[[date], None]] = None,
        on_calendar_changed: Optional[Callable[[date], None]] = None,
        on_left_arrow_pressed: Optional[Callable[[], None]] = None,
        on_right_arrow_pressed: Optional[Callable[[], None]] = None,
        on_header_title_pressed: Optional[Callable[[], None]] = None,
        date_picker: Optional[DatePicker] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.events = events if events is not None else EventIndex()
        self.on_day_pressed = on_day_pressed
        self.on_day_long_pressed = on_day_long_pressed
        self.on_calendar_changed = on_calendar_changed
        self.on_left_arrow_pressed = on_left_arrow_pressed
        self.on_right_arrow_pressed = on_right_arrow_pressed
        self.on_header_title_pressed = on_header_title_pressed
        self.date_picker = date_picker
        self._today = today or date.today
        self.selected: Optional[date] = None
        self.update_config(config or CalendarConfig())

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def update_config(self, config: CalendarConfig) -> None:
        """Apply a new configuration and recompute the visible page."""
        self.config = config
        self.pager = CalendarPager(config.bounds, config.mode, config.first_day)
        if config.selected_date is not None:
            self.selected = day_key(config.selected_date)
        elif self.selected is None:
            self.selected = self._today()
        state = self.pager.initialize(config.target_date, self.selected)
        self.page = state.page
        self.target = state.target
        logger.debug("Calendar initialised on page %d of %d (%s)",
                     self.page, state.total_pages, config.mode.value)

    @property
    def total_pages(self) -> int:
        return self.pager.total_pages

    @property
    def anchor_date(self) -> date:
        return self.pager.page_to_anchor_date(self.page)

    @property
    def weekend(self) -> frozenset[int]:
        return weekend_days(self.config.locale)

    def weekday_labels(self) -> list[str]:
        return weekday_labels(self.config.first_day, self.config.weekday_format)

    def header_title(self) -> str:
        """Month and year of the page's anchor, e.g. ``May 2024``."""
        anchor = self.anchor_date
        return f"{_cal.month_name[anchor.month]} {anchor.year}"

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def cells(self) -> list[Optional[DayCell]]:
        cfg = self.config
        common: dict[str, Any] = dict(
            first_day=cfg.first_day,
            selected=self.selected,
            today=self._today(),
            only_current_month=cfg.show_only_current_month_date,
            weekend=self.weekend,
            events=self.events,
        )
        if cfg.mode is PagingMode.WEEK:
            return week_cells(self.anchor_date, cfg.bounds, target=self.target, **common)
        return month_cells(
            self.anchor_date, cfg.bounds,
            static_six_weeks=cfg.static_six_week_format, **common,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def set_page(self, page: int) -> bool:
        """Show ``page``; returns False (and does nothing) when out of range."""
        if not 0 <= page < self.total_pages:
            return False
        self.page = page
        self.target = self.anchor_date
        logger.debug("Calendar moved to page %d (%s)", page, self.target)
        if self.on_calendar_changed is not None:
            self.on_calendar_changed(self.target)
        return True

    def _step(self, delta: int) -> bool:
        page = self.pager.advance(self.page, delta)
        if page is None:
            return False
        return self.set_page(page)

    def press_left_arrow(self) -> bool:
        if self.on_left_arrow_pressed is not None:
            self.on_left_arrow_pressed()
        return self._step(-1)

    def press_right_arrow(self) -> bool:
        if self.on_right_arrow_pressed is not None:
            self.on_right_arrow_pressed()
        return self._step(1)

    def go_to_date(self, value: date | datetime) -> bool:
        return self.set_page(self.pager.page_for_date(value))

    # ------------------------------------------------------------------
    # Day interaction
    # ------------------------------------------------------------------
    def _select(self, value: date | datetime) -> None:
        day = day_key(value)
        self.selected = day
        if self.on_day_pressed is not None:
            self.on_day_pressed(day, self.events.get_events(day))

    def press_day(self, value: date | datetime) -> bool:
        """Select ``value`` unless it lies outside the bounds."""
        if not is_selectable(value, self.config.bounds):
            logger.debug("Ignoring press on %s outside bounds", day_key(value))
            return False
        self._select(value)
        return True

    def long_press_day(self, cell: DayCell) -> bool:
        if cell.is_prev_month or cell.is_next_month:
            return False
        if self.on_day_long_pressed is not None:
            self.on_day_long_pressed(cell.date)
        return True

    def press_header_title(self) -> Optional[date]:
        """Run the header action: the host callback, or else the date picker."""
        if self.on_header_title_pressed is not None:
            self.on_header_title_pressed()
            return None
        if self.date_picker is None:
            return None
        bounds = self.config.bounds
        picked = self.date_picker(self.selected or self._today(), bounds.min_date, bounds.max_date)
        if picked is None:
            return None
        self._select(picked)
        return day_key(picked)
