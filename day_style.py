"""Day text-style resolution as an ordered rule table (first match wins)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, NamedTuple, Optional

from calendar_logic import DayCell

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
TEXT_FG = "#333333"
WEEKEND_FG = "#CC0000"
ADJACENT_FG = "#AAAAAA"
INACTIVE_FG = "#CCCCCC"


@dataclass(frozen=True)
class DayStyle:
    fg: str = TEXT_FG
    bg: Optional[str] = None
    bold: bool = False


@dataclass(frozen=True)
class DayStyles:
    """Palette keyed by rule name. ``marked`` is unset unless configured."""

    day: DayStyle = DayStyle()
    today: DayStyle = DayStyle(fg=ACCENT, bold=True)
    selected: DayStyle = DayStyle(fg="black", bg=SEL_BG, bold=True)
    weekend: DayStyle = DayStyle(fg=WEEKEND_FG)
    prev_month: DayStyle = DayStyle(fg=ADJACENT_FG)
    next_month: DayStyle = DayStyle(fg=ADJACENT_FG)
    inactive: DayStyle = DayStyle(fg=INACTIVE_FG)
    inactive_weekend: DayStyle = DayStyle(fg="#E8A0A0")
    marked: Optional[DayStyle] = field(default=None)

    def with_overrides(self, **overrides: DayStyle) -> "DayStyles":
        return replace(self, **overrides)


class StyleRule(NamedTuple):
    name: str
    predicate: Callable[[DayCell, DayStyles], bool]


DEFAULT_RULES: list[StyleRule] = [
    StyleRule("selected", lambda c, s: c.is_selected),
    StyleRule("inactive_weekend",
              lambda c, s: not c.is_selectable and c.is_weekend and c.is_this_month
              and not c.is_today),
    StyleRule("inactive", lambda c, s: not c.is_selectable),
    StyleRule("weekend", lambda c, s: c.is_weekend and c.is_this_month and not c.is_today),
    StyleRule("prev_month", lambda c, s: c.is_prev_month),
    StyleRule("next_month", lambda c, s: c.is_next_month),
    StyleRule("marked", lambda c, s: c.has_events and s.marked is not None),
    StyleRule("today", lambda c, s: c.is_today),
    StyleRule("day", lambda c, s: True),
]


def matching_rule(
    cell: DayCell,
    styles: DayStyles = DayStyles(),
    rules: Optional[list[StyleRule]] = None,
) -> str:
    """Return the name of the first rule that applies to ``cell``."""
    for rule in rules if rules is not None else DEFAULT_RULES:
        if rule.predicate(cell, styles):
            return rule.name
    return "day"


def resolve_style(
    cell: DayCell,
    styles: DayStyles = DayStyles(),
    rules: Optional[list[StyleRule]] = None,
) -> DayStyle:
    name = matching_rule(cell, styles, rules)
    style = getattr(styles, name, None)
    return style if style is not None else styles.day
