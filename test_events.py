from datetime import date, datetime

from events import Event, EventIndex, marker_summary

MAY_1 = date(2024, 5, 1)


def make_index():
    index = EventIndex()
    index.add(datetime(2024, 5, 1, 10, 0), Event(MAY_1, "standup"))
    index.add(datetime(2024, 5, 1, 18, 30), Event(MAY_1, "dinner"))
    index.add(date(2024, 5, 2), Event(date(2024, 5, 2), "review"))
    return index


def test_lookup_ignores_time_of_day():
    index = EventIndex()
    event = Event(datetime(2024, 5, 1, 10, 0), "standup")
    index.add(datetime(2024, 5, 1, 10, 0), event)
    assert index.get_events(datetime(2024, 5, 1, 0, 0)) == [event]
    assert index.get_events(MAY_1) == [event]


def test_insertion_order_kept():
    index = make_index()
    assert [e.title for e in index.get_events(MAY_1)] == ["standup", "dinner"]


def test_add_all_appends_after_existing():
    index = make_index()
    index.add_all(MAY_1, [Event(MAY_1, "a"), Event(MAY_1, "standup")])
    titles = [e.title for e in index.get_events(MAY_1)]
    assert titles == ["standup", "dinner", "a", "standup"]


def test_add_all_does_not_alias_input():
    items = ["x"]
    index = EventIndex()
    index.add_all(MAY_1, items)
    items.append("y")
    assert index.get_events(MAY_1) == ["x"]


def test_remove_first_match_only():
    index = EventIndex()
    index.add_all(MAY_1, ["a", "b", "a"])
    assert index.remove(datetime(2024, 5, 1, 12), "a") is True
    assert index.get_events(MAY_1) == ["b", "a"]


def test_remove_uses_value_equality():
    index = make_index()
    assert index.remove(MAY_1, Event(MAY_1, "dinner"))
    assert not index.remove(MAY_1, Event(MAY_1, "dinner"))


def test_remove_missing_is_false():
    index = EventIndex()
    assert index.remove(MAY_1, "a") is False
    index.add(MAY_1, "a")
    assert index.remove(MAY_1, "b") is False


def test_remove_last_event_keeps_empty_day():
    index = EventIndex()
    index.add(MAY_1, "a")
    assert index.remove(MAY_1, "a")
    assert index.get_events(MAY_1) == []
    assert MAY_1 not in index
    assert index.dates() == []


def test_remove_all():
    index = make_index()
    removed = index.remove_all(datetime(2024, 5, 1, 7))
    assert [e.title for e in removed] == ["standup", "dinner"]
    assert index.get_events(MAY_1) == []
    assert index.remove_all(date(2030, 1, 1)) == []


def test_remove_all_then_add_all_restores():
    index = make_index()
    before = index.get_events(MAY_1)
    index.add_all(MAY_1, index.remove_all(MAY_1))
    assert index.get_events(MAY_1) == before


def test_get_all_events_and_clear():
    index = make_index()
    assert sorted(e.title for e in index.get_all_events()) == ["dinner", "review", "standup"]
    assert len(index) == 2
    assert len(index) == len(list(index))
    assert list(index) == [MAY_1, date(2024, 5, 2)]
    index.clear()
    assert index.get_all_events() == []
    assert len(index) == 0


def test_initial_mapping():
    index = EventIndex({datetime(2024, 5, 1, 9): ["a"], MAY_1: ["b"]})
    assert index.get_events(MAY_1) == ["a", "b"]


def test_get_events_returns_copy():
    index = make_index()
    index.get_events(MAY_1).clear()
    assert len(index.get_events(MAY_1)) == 2


def test_marker_summary_dots():
    shown, more = marker_summary(list(range(7)))
    assert shown == [0, 1, 2, 3, 4]
    assert more is None


def test_marker_summary_icons():
    assert marker_summary([1, 2], show_icon=True) == ([1, 2], None)
    assert marker_summary([1, 2, 3, 4], show_icon=True) == ([1, 2], "2+")
    assert marker_summary([1, 2, 3, 4], show_icon=True, show_total=True) == ([1, 2], "4")
    assert marker_summary([1, 2, 3], show_icon=True, max_shown=1) == ([1], "2+")
