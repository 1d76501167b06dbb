"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Sequence


class InvalidInput(ValueError):
    """Raised when a caller passes a value outside a function's domain."""


@dataclass(frozen=True)
class DayCell:
    """One slot of a month grid: a real date, or padding when ``date`` is None."""

    date: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.date is None

    @property
    def day(self) -> int | None:
        return None if self.date is None else self.date.day


EMPTY = DayCell()


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidInput(f"month must be in 1..12, got {month!r}")


def _check_weekday(first_weekday: int) -> None:
    if not 0 <= first_weekday <= 6:
        raise InvalidInput(f"first_weekday must be in 0..6, got {first_weekday!r}")


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the month (leap-year aware)."""
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def month_grid(year: int, month: int, first_weekday: int = 0) -> list[DayCell]:
    """Return the day cells for the given month.

    ``first_weekday`` picks the leftmost column (0 = Monday … 6 = Sunday).
    The grid starts with 0–6 empty cells so day 1 lands under its weekday,
    followed by one cell per day. There is no trailing padding, so the last
    week may be short.
    """
    _check_month(month)
    _check_weekday(first_weekday)
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidInput(f"year must be in {MINYEAR}..{MAXYEAR}, got {year!r}")

    first, num_days = calendar.monthrange(year, month)  # first: 0 = Monday
    padding = (first - first_weekday) % 7

    cells = [EMPTY] * padding
    cells.extend(DayCell(date(year, month, d)) for d in range(1, num_days + 1))
    return cells


def grid_rows(cells: Sequence[DayCell]) -> list[list[DayCell]]:
    """Split a flat grid into weeks of seven; the last week may be short."""
    return [list(cells[i:i + 7]) for i in range(0, len(cells), 7)]


def rotate_weekday_labels(labels: Sequence[str], start: int) -> list[str]:
    """Rotate a week of labels left so that ``labels[start % 7]`` comes first."""
    if not labels:
        return []
    if len(labels) != 7:
        raise InvalidInput(f"expected 7 weekday labels, got {len(labels)}")
    n = len(labels)
    k = (start % n + n) % n
    return list(labels[k:]) + list(labels[:k])


def weekday_labels(first_weekday: int = 0, locale: str | None = None) -> list[str]:
    """Short weekday names, starting with ``first_weekday``."""
    _check_weekday(first_weekday)
    if locale is None:
        names = list(calendar.day_abbr)
    else:
        cal = calendar.LocaleTextCalendar(locale=locale)
        names = [cal.formatweekday(i, 3).strip() for i in range(7)]
    return rotate_weekday_labels(names, first_weekday)


def is_same_day(a: date, b: date) -> bool:
    """True if both values fall on the same calendar day (time is ignored)."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) moved by ``delta`` months, rolling over years."""
    y, m0 = divmod(year * 12 + (month - 1) + delta, 12)
    return y, m0 + 1


def month_display_name(year: int, month: int, locale: str | None = None) -> str:
    """Long month name, e.g. "January", optionally in another locale."""
    _check_month(month)
    if locale is None:
        return calendar.month_name[month]
    cal = calendar.LocaleTextCalendar(locale=locale)
    return cal.formatmonthname(year, month, 0, withyear=False).strip()


def year_display_name(year: int) -> str:
    # Calendar year, not the ISO week-based year: 2024-12-30 is still "2024".
    return f"{year:04d}"


def long_date_display(d: date, locale: str | None = None) -> str:
    """Return e.g. "December 26, 2024"."""
    return f"{month_display_name(d.year, d.month, locale)} {d.day}, {year_display_name(d.year)}"
