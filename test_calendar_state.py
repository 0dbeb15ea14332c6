from datetime import date, datetime
from unittest.mock import Mock

import pytest

from calendar_state import CalendarController
from events import Event, EventIndex
from settings import CalendarConfig

TODAY = date(2024, 5, 20)


def make_config(**kw):
    values = dict(
        min_selected_date=date(2024, 1, 1),
        max_selected_date=date(2024, 12, 31),
        target_date=date(2024, 5, 15),
        selected_date=date(2024, 5, 15),
        first_day_of_week=1,
    )
    values.update(kw)
    return CalendarConfig(**values)


@pytest.fixture
def events():
    index = EventIndex()
    index.add(datetime(2024, 5, 15, 9), Event(date(2024, 5, 15), "standup"))
    return index


@pytest.fixture
def controller(events):
    return CalendarController(
        make_config(), events,
        on_day_pressed=Mock(), on_day_long_pressed=Mock(),
        on_calendar_changed=Mock(), on_left_arrow_pressed=Mock(),
        on_right_arrow_pressed=Mock(), today=lambda: TODAY,
    )


def test_initial_page(controller):
    assert controller.page == 4
    assert controller.total_pages == 12
    assert controller.anchor_date == date(2024, 5, 1)
    assert controller.header_title() == "May 2024"
    assert controller.weekday_labels()[0] == "Mon"


def test_cells_carry_selection_and_events(controller):
    cells = controller.cells()
    assert len(cells) == 35
    selected = [c for c in cells if c.is_selected]
    assert [c.date for c in selected] == [date(2024, 5, 15)]
    assert selected[0].events[0].title == "standup"
    assert [c.date for c in cells if c.is_today] == [TODAY]


def test_arrows_move_and_notify(controller):
    assert controller.press_left_arrow()
    assert controller.page == 3
    controller.on_left_arrow_pressed.assert_called_once_with()
    controller.on_calendar_changed.assert_called_once_with(date(2024, 4, 1))
    assert controller.press_right_arrow()
    assert controller.page == 4


def test_arrows_stop_at_edges(controller):
    assert controller.set_page(0)
    controller.on_calendar_changed.reset_mock()
    assert not controller.press_left_arrow()
    assert controller.page == 0
    controller.on_left_arrow_pressed.assert_called_once_with()
    controller.on_calendar_changed.assert_not_called()

    assert controller.set_page(11)
    assert not controller.press_right_arrow()
    assert controller.page == 11


def test_set_page_out_of_range(controller):
    assert not controller.set_page(12)
    assert not controller.set_page(-1)
    assert controller.page == 4


def test_press_day(controller):
    assert controller.press_day(datetime(2024, 5, 15, 17))
    controller.on_day_pressed.assert_called_once()
    day, events = controller.on_day_pressed.call_args.args
    assert day == date(2024, 5, 15)
    assert [e.title for e in events] == ["standup"]
    assert controller.selected == date(2024, 5, 15)


def test_press_day_outside_bounds_ignored(controller):
    assert not controller.press_day(date(2023, 12, 31))
    controller.on_day_pressed.assert_not_called()
    assert controller.selected == date(2024, 5, 15)


def test_long_press_ignores_adjacent_months(controller):
    cells = controller.cells()
    assert not controller.long_press_day(cells[0])
    assert controller.long_press_day(cells[2])
    controller.on_day_long_pressed.assert_called_once_with(date(2024, 5, 1))


def test_header_uses_callback_first(events):
    on_title = Mock()
    picker = Mock()
    ctl = CalendarController(make_config(), events, on_header_title_pressed=on_title,
                             date_picker=picker)
    assert ctl.press_header_title() is None
    on_title.assert_called_once_with()
    picker.assert_not_called()


def test_header_falls_back_to_picker(events):
    on_day = Mock()
    picker = Mock(return_value=date(2024, 7, 4))
    ctl = CalendarController(make_config(), events, on_day_pressed=on_day, date_picker=picker)
    assert ctl.press_header_title() == date(2024, 7, 4)
    picker.assert_called_once_with(date(2024, 5, 15), date(2024, 1, 1), date(2024, 12, 31))
    on_day.assert_called_once_with(date(2024, 7, 4), [])
    assert ctl.selected == date(2024, 7, 4)


def test_picker_cancel(events):
    ctl = CalendarController(make_config(), events, date_picker=lambda *a: None)
    assert ctl.press_header_title() is None
    assert ctl.selected == date(2024, 5, 15)


def test_week_mode(events):
    changed = Mock()
    ctl = CalendarController(make_config(week_format=True), events,
                             on_calendar_changed=changed, today=lambda: TODAY)
    assert ctl.anchor_date == date(2024, 5, 13)
    assert ctl.header_title() == "May 2024"
    cells = ctl.cells()
    assert [c.date.day for c in cells] == [13, 14, 15, 16, 17, 18, 19]
    assert ctl.press_right_arrow()
    changed.assert_called_once_with(date(2024, 5, 20))


def test_update_config_reinitialises(controller):
    controller.update_config(make_config(target_date=date(2024, 9, 9)))
    assert controller.page == 8
    assert controller.selected == date(2024, 5, 15)


def test_selection_defaults_to_today():
    ctl = CalendarController(make_config(selected_date=None, target_date=None),
                             today=lambda: TODAY)
    assert ctl.selected == TODAY
    assert ctl.anchor_date == date(2024, 5, 1)


def test_go_to_date(controller):
    assert controller.go_to_date(datetime(2024, 9, 9, 14))
    assert controller.page == 8
    controller.on_calendar_changed.assert_called_once_with(date(2024, 9, 1))


def test_go_to_date_clamps_to_bounds(controller):
    assert controller.go_to_date(date(2030, 1, 1))
    assert controller.page == 11
    controller.on_calendar_changed.assert_called_with(date(2024, 12, 1))
    assert controller.go_to_date(date(2010, 1, 1))
    assert controller.page == 0
    controller.on_calendar_changed.assert_called_with(date(2024, 1, 1))
