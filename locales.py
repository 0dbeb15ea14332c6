"""Locale conventions: week start, weekend days and weekday labels."""

from __future__ import annotations

from calendar_logic import DEFAULT_WEEKEND

# Sunday=0, Monday=1 … Saturday=6
SUNDAY, MONDAY, SATURDAY = 0, 1, 6

# --- first day of week by region ------------------------------------------

_FIRST_DAY_BY_REGION: dict[str, int] = {
    "US": SUNDAY, "CA": SUNDAY, "MX": SUNDAY, "BR": SUNDAY, "JP": SUNDAY,
    "KR": SUNDAY, "TW": SUNDAY, "HK": SUNDAY, "IL": SUNDAY, "IN": SUNDAY,
    "PH": SUNDAY, "ZA": SUNDAY, "AU": MONDAY, "GB": MONDAY, "DE": MONDAY,
    "CH": MONDAY, "FR": MONDAY, "ES": MONDAY, "IT": MONDAY, "NL": MONDAY,
    "PL": MONDAY, "RU": MONDAY, "CN": MONDAY, "SE": MONDAY, "TR": MONDAY,
    "AE": SATURDAY, "EG": SATURDAY, "SA": SUNDAY, "IR": SATURDAY,
    "AF": SATURDAY, "DZ": SATURDAY, "QA": SATURDAY, "KW": SATURDAY,
}

# Used when only a language is given ("en", "de", …)
_FIRST_DAY_BY_LANGUAGE: dict[str, int] = {
    "en": SUNDAY, "ja": SUNDAY, "ko": SUNDAY, "he": SUNDAY, "pt": SUNDAY,
    "ar": SATURDAY, "fa": SATURDAY,
}

# --- weekend days (ISO weekday numbers, Monday=1 … Sunday=7) -----------------

_WEEKEND_BY_REGION: dict[str, frozenset[int]] = {
    "IL": frozenset({5, 6}),
    "SA": frozenset({5, 6}),
    "AE": frozenset({6, 7}),
    "EG": frozenset({5, 6}),
    "IR": frozenset({5}),
    "AF": frozenset({4, 5}),
    "IN": frozenset({7}),
}

WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

WEEKDAY_FORMATS = ("weekdays", "short", "narrow")


def _split(locale: str) -> tuple[str, str]:
    """Return (language, REGION) from tags like ``en_US``, ``de-CH`` or ``fr``."""
    parts = locale.replace("-", "_").split(".")[0].split("_")
    language = parts[0].lower()
    region = parts[1].upper() if len(parts) > 1 else ""
    return language, region


def first_day_of_week(locale: str) -> int:
    """Return the locale's first weekday (Sunday=0 … Saturday=6)."""
    language, region = _split(locale)
    if region in _FIRST_DAY_BY_REGION:
        return _FIRST_DAY_BY_REGION[region]
    return _FIRST_DAY_BY_LANGUAGE.get(language, MONDAY)


def weekend_days(locale: str) -> frozenset[int]:
    """Return the ISO weekday numbers treated as weekend in ``locale``."""
    _language, region = _split(locale)
    return _WEEKEND_BY_REGION.get(region, DEFAULT_WEEKEND)


def weekday_labels(first_day: int = 0, fmt: str = "short") -> list[str]:
    """Return 7 column labels starting at ``first_day``."""
    if fmt not in WEEKDAY_FORMATS:
        raise ValueError(f"unknown weekday format {fmt!r}")
    names = [WEEKDAY_NAMES[(first_day + i) % 7] for i in range(7)]
    if fmt == "short":
        return [n[:3] for n in names]
    if fmt == "narrow":
        return [n[0] for n in names]
    return names
