from datetime import date

import pytest

from calendar_logic import month_grid
from calendar_state import CalendarState


class FakeClock:
    def __init__(self, today: date) -> None:
        self.value = today
        self.calls = 0

    def __call__(self) -> date:
        self.calls += 1
        return self.value


@pytest.fixture
def clock():
    return FakeClock(date(2025, 1, 15))


@pytest.fixture
def state(clock):
    return CalendarState(today=clock)


def test_starts_on_today(state):
    assert state.selected_date == date(2025, 1, 15)
    assert (state.viewed_year, state.viewed_month) == (2025, 1)


def test_default_clock_is_wall_clock():
    s = CalendarState()
    assert s.selected_date in (date.today(), date.fromordinal(date.today().toordinal() - 1))
    assert (s.viewed_year, s.viewed_month) == (s.selected_date.year, s.selected_date.month)


def test_fields_are_read_only(state):
    with pytest.raises(AttributeError):
        state.viewed_month = 5


def test_advance_forward_over_year_end(clock):
    clock.value = date(2025, 12, 1)
    s = CalendarState(today=clock)
    s.advance_month(1)
    assert (s.viewed_year, s.viewed_month) == (2026, 1)


def test_advance_backward_over_year_start(state):
    state.advance_month(-1)
    assert (state.viewed_year, state.viewed_month) == (2024, 12)


def test_twelve_steps_is_one_year(state):
    for _ in range(12):
        state.advance_month(1)
    assert (state.viewed_year, state.viewed_month) == (2026, 1)


@pytest.mark.parametrize("delta", [5, 13, 25, -7, -30])
def test_repeated_steps_match_single_delta(clock, delta):
    stepped = CalendarState(today=clock)
    step = 1 if delta > 0 else -1
    for _ in range(abs(delta)):
        stepped.advance_month(step)
    jumped = CalendarState(today=clock)
    jumped.advance_month(delta)
    assert (stepped.viewed_year, stepped.viewed_month) == (jumped.viewed_year, jumped.viewed_month)


def test_advance_keeps_selection(state):
    state.advance_month(3)
    assert state.selected_date == date(2025, 1, 15)


def test_select_date_keeps_viewed_month(state):
    state.advance_month(1)
    state.select_date(date(2025, 2, 10))
    assert state.selected_date == date(2025, 2, 10)
    assert (state.viewed_year, state.viewed_month) == (2025, 2)


def test_reset_to_today(clock):
    clock.value = date(2020, 6, 1)
    s = CalendarState(today=clock)
    s.select_date(date(2020, 6, 20))
    clock.value = date(2025, 3, 9)

    s.reset_to_today()

    assert s.selected_date == date(2025, 3, 9)
    assert (s.viewed_year, s.viewed_month) == (2025, 3)
    assert s.viewed_grid(0) == month_grid(2025, 3, 0)


def test_only_reset_reads_the_clock(state, clock):
    calls = clock.calls
    state.advance_month(1)
    state.select_date(date(2025, 2, 2))
    state.viewed_grid()
    assert clock.calls == calls
    state.reset_to_today()
    assert clock.calls == calls + 1


def test_listeners_notified_after_each_transition(state):
    seen = []
    state.subscribe(lambda s: seen.append((s.viewed_year, s.viewed_month, s.selected_date)))

    state.advance_month(1)
    state.select_date(date(2025, 2, 3))
    state.reset_to_today()

    assert seen == [
        (2025, 2, date(2025, 1, 15)),
        (2025, 2, date(2025, 2, 3)),
        (2025, 1, date(2025, 1, 15)),
    ]


def test_unsubscribe(state):
    seen = []
    unsubscribe = state.subscribe(seen.append)
    state.advance_month(1)
    unsubscribe()
    unsubscribe()
    state.advance_month(1)
    assert seen == [state]
