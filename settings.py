"""JSON-based settings persistence and the calendar configuration record."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Optional

from locales import WEEKDAY_FORMATS, first_day_of_week
from pager import CalendarBounds, PagingMode

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-calendar-settings.json")

_DATE_KEYS = ("min_selected_date", "max_selected_date", "target_date", "selected_date")
_BOOL_KEYS = ("week_format", "static_six_week_format", "show_only_current_month_date")


@dataclass(frozen=True)
class CalendarConfig:
    """Immutable calendar options, validated once at construction.

    Unset bounds fall back to 2018-01-01 and one year from today.
    """

    min_selected_date: Optional[date] = None
    max_selected_date: Optional[date] = None
    target_date: Optional[date] = None
    selected_date: Optional[date] = None
    first_day_of_week: Optional[int] = None
    week_format: bool = False
    static_six_week_format: bool = False
    show_only_current_month_date: bool = False
    locale: str = "en"
    weekday_format: str = "short"
    bounds: CalendarBounds = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        default = CalendarBounds.default()
        bounds = CalendarBounds(
            self.min_selected_date or default.min_date,
            self.max_selected_date or default.max_date,
        )
        object.__setattr__(self, "bounds", bounds)
        if self.first_day_of_week is not None and not 0 <= self.first_day_of_week <= 6:
            raise ValueError(f"first_day_of_week must be in 0..6, got {self.first_day_of_week!r}")
        if self.weekday_format not in WEEKDAY_FORMATS:
            raise ValueError(f"unknown weekday_format {self.weekday_format!r}")

    @property
    def mode(self) -> PagingMode:
        return PagingMode.WEEK if self.week_format else PagingMode.MONTH

    @property
    def first_day(self) -> int:
        """Explicit first weekday, or the locale's convention."""
        if self.first_day_of_week is not None:
            return self.first_day_of_week
        return first_day_of_week(self.locale)

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("bounds", None)
        for key in _DATE_KEYS:
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


def _parse_date(value) -> Optional[date]:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def load_settings(path: Optional[str] = None, **overrides) -> CalendarConfig:
    """Load a config from disk, ignoring missing or malformed keys.

    ``overrides`` win over stored values. Inverted bounds still raise
    :class:`pager.InvalidBoundsError`.
    """
    path = path or _SETTINGS_PATH
    values: dict = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        stored = {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        stored = {}
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings in %s: expected an object", path)
        stored = {}

    for key in _DATE_KEYS:
        if stored.get(key) is not None:
            parsed = _parse_date(stored[key])
            if parsed is None:
                logger.warning("Ignoring %s=%r: not an ISO date", key, stored[key])
            else:
                values[key] = parsed
    for key in _BOOL_KEYS:
        if key in stored and isinstance(stored[key], bool):
            values[key] = stored[key]
    fdow = stored.get("first_day_of_week")
    if isinstance(fdow, int) and not isinstance(fdow, bool) and 0 <= fdow <= 6:
        values["first_day_of_week"] = fdow
    elif fdow is not None:
        logger.warning("Ignoring first_day_of_week=%r", fdow)
    if isinstance(stored.get("locale"), str):
        values["locale"] = stored["locale"]
    if stored.get("weekday_format") in WEEKDAY_FORMATS:
        values["weekday_format"] = stored["weekday_format"]

    values.update(overrides)
    return CalendarConfig(**values)


def save_settings(config: CalendarConfig, path: Optional[str] = None) -> None:
    """Persist settings to disk."""
    path = path or _SETTINGS_PATH
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
