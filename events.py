"""Day-keyed event storage and marker overlay helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Iterable, Iterator, NamedTuple, Optional, TypeVar

from calendar_logic import day_key

T = TypeVar("T")

MAX_DOTS = 5


@dataclass(frozen=True)
class Event:
    """A single calendar entry; ``icon`` and ``dot`` are host-defined markers."""

    date: datetime | date
    title: str = ""
    icon: Optional[str] = None
    dot: Optional[str] = None


class EventIndex(Generic[T]):
    """Multi-map from calendar day to an ordered list of events.

    Keys are normalized with :func:`calendar_logic.day_key`, so a datetime at
    10:00 and one at 23:59 on the same day share one list.
    """

    def __init__(self, events: Optional[dict[date | datetime, Iterable[T]]] = None) -> None:
        self._events: dict[date, list[T]] = {}
        for when, items in (events or {}).items():
            self.add_all(when, items)

    def add(self, when: date | datetime, event: T) -> None:
        self._events.setdefault(day_key(when), []).append(event)

    def add_all(self, when: date | datetime, events: Iterable[T]) -> None:
        """Append ``events`` after whatever the day already holds."""
        self._events.setdefault(day_key(when), []).extend(events)

    def remove(self, when: date | datetime, event: T) -> bool:
        """Remove the first entry equal to ``event``; False if none matched.

        The day's list is kept even when it becomes empty.
        """
        items = self._events.get(day_key(when))
        if not items:
            return False
        try:
            items.remove(event)
        except ValueError:
            return False
        return True

    def remove_all(self, when: date | datetime) -> list[T]:
        return self._events.pop(day_key(when), [])

    def clear(self) -> None:
        self._events.clear()

    def get_events(self, when: date | datetime) -> list[T]:
        return list(self._events.get(day_key(when), ()))

    def get_all_events(self) -> list[T]:
        return [event for items in self._events.values() for event in items]

    def dates(self) -> list[date]:
        """Sorted days that currently hold at least one event."""
        return sorted(day for day, items in self._events.items() if items)

    def __contains__(self, when: date | datetime) -> bool:
        return bool(self._events.get(day_key(when)))

    def __len__(self) -> int:
        """Number of days holding at least one event."""
        return len(self.dates())

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates())

    def __repr__(self) -> str:
        return f"EventIndex(events={self._events!r})"


class MarkerSummary(NamedTuple):
    shown: list
    more_label: Optional[str]


def marker_summary(
    events: list,
    show_icon: bool = False,
    max_shown: int = 2,
    show_total: bool = False,
) -> MarkerSummary:
    """Decide which event markers a day cell draws.

    Dot mode draws up to five dots and no badge. Icon mode draws ``max_shown``
    icons; hidden events are reported as ``"N+"``, or as the total count when
    ``show_total`` is set.
    """
    if not show_icon:
        return MarkerSummary(list(events[:MAX_DOTS]), None)

    shown = list(events[:max_shown])
    hidden = len(events) - len(shown)
    if hidden <= 0:
        return MarkerSummary(shown, None)
    label = str(len(events)) if show_total else f"{hidden}+"
    return MarkerSummary(shown, label)
