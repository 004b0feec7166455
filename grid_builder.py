"""Month grid construction: reference month -> rows of 7 day cells."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from typing import Iterator

from calendar_logic import (
    MONDAY,
    add_days,
    as_month,
    iso_week_number,
    last_of_month,
    weekday,
)
from errors import InvalidConfig


class MonthOffset(enum.Enum):
    PREVIOUS = -1
    CURRENT = 0
    NEXT = 1


@dataclass(frozen=True)
class DayCell:
    day: int
    owner: MonthOffset
    date: date

    @property
    def in_current_month(self) -> bool:
        return self.owner is MonthOffset.CURRENT


WeekRow = tuple[DayCell, ...]


@dataclass(frozen=True)
class CalendarGrid:
    """Rectangular month view: 4–6 rows of exactly 7 cells."""

    reference: date
    week_start: int
    rows: tuple[WeekRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[WeekRow]:
        return iter(self.rows)

    def cells(self) -> Iterator[DayCell]:
        """Yield every cell in row-major order."""
        for row in self.rows:
            yield from row

    def find(self, d: date) -> DayCell | None:
        for cell in self.cells():
            if cell.date == d:
                return cell
        return None

    def week_numbers(self) -> list[int]:
        """ISO week number of each row, taken from the row's Monday."""
        monday = (MONDAY - self.week_start) % 7
        return [iso_week_number(row[monday].date) for row in self.rows]


def check_week_start(week_start) -> int:
    """Validate a Sunday-first weekday index (0..6)."""
    if isinstance(week_start, bool) or not isinstance(week_start, int):
        raise InvalidConfig(f"Week start must be an integer 0..6, got {week_start!r}")
    if not 0 <= week_start <= 6:
        raise InvalidConfig(f"Week start must be in 0..6, got {week_start}")
    return week_start


def leading_blanks(reference, week_start: int = MONDAY) -> int:
    """Number of cells before day 1 in the first row."""
    check_week_start(week_start)
    first = as_month(reference)
    return (weekday(first) - week_start) % 7


def build_grid(reference, week_start: int = MONDAY) -> CalendarGrid:
    """Build the month grid for ``reference`` (a date or ``(year, month)``).

    Only the year and month of ``reference`` matter.  ``week_start`` names the
    weekday of column 0 (0=Sunday .. 6=Saturday).  Cells before the 1st and
    after the last day are filled with the real adjacent-month dates.
    """
    check_week_start(week_start)
    first = as_month(reference)
    last = last_of_month(first)
    n_days = last.day

    leading = (weekday(first) - week_start) % 7
    trailing = (7 - (leading + n_days) % 7) % 7

    cells: list[DayCell] = []

    # Previous month: walk back from the day before the 1st, oldest first
    for offset in range(leading, 0, -1):
        d = add_days(first, -offset)
        cells.append(DayCell(d.day, MonthOffset.PREVIOUS, d))

    for day in range(1, n_days + 1):
        cells.append(DayCell(day, MonthOffset.CURRENT, first.replace(day=day)))

    for offset in range(1, trailing + 1):
        d = add_days(last, offset)
        cells.append(DayCell(d.day, MonthOffset.NEXT, d))

    rows = tuple(tuple(cells[i:i + 7]) for i in range(0, len(cells), 7))
    return CalendarGrid(reference=first, week_start=week_start, rows=rows)
