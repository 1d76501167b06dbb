"""Viewed month and selected day, with the transitions the UI may request."""

import logging
from datetime import date
from typing import Callable

from calendar_logic import DayCell, month_grid, shift_month

logger = logging.getLogger(__name__)

Listener = Callable[["CalendarState"], None]


class CalendarState:
    """Single owner of "which month is shown and which day is selected".

    Only the transition methods mutate it. Every transition notifies the
    subscribed listeners synchronously, so a view re-renders right after the
    call returns. ``today`` is the only place the wall clock is read.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        now = today()
        self._selected_date: date = now
        self._viewed_year: int = now.year
        self._viewed_month: int = now.month
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def viewed_year(self) -> int:
        return self._viewed_year

    @property
    def viewed_month(self) -> int:
        return self._viewed_month

    def today(self) -> date:
        return self._today()

    def viewed_grid(self, first_weekday: int = 0) -> list[DayCell]:
        """Grid of the month currently on screen."""
        return month_grid(self._viewed_year, self._viewed_month, first_weekday)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state)`` after every transition; returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def advance_month(self, delta: int) -> None:
        self._viewed_year, self._viewed_month = shift_month(
            self._viewed_year, self._viewed_month, delta
        )
        logger.debug("advance_month(%d) -> %04d-%02d",
                     delta, self._viewed_year, self._viewed_month)
        self._notify()

    def select_date(self, d: date) -> None:
        self._selected_date = d
        logger.debug("select_date(%s)", d)
        self._notify()

    def reset_to_today(self) -> None:
        now = self._today()
        self._selected_date = now
        self._viewed_year = now.year
        self._viewed_month = now.month
        logger.debug("reset_to_today -> %s", now)
        self._notify()

    def __repr__(self) -> str:
        return (f"CalendarState(viewed={self._viewed_year:04d}-{self._viewed_month:02d}, "
                f"selected={self._selected_date})")
