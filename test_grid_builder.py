from datetime import date, timedelta

import pytest

from calendar_logic import days_in_month
from errors import InvalidConfig, InvalidDate
from grid_builder import MonthOffset, build_grid, leading_blanks

MONTHS = [(y, m) for y in range(1999, 2027) for m in range(1, 13)]


def _owned(grid, owner):
    return [c for c in grid.cells() if c.owner is owner]


@pytest.mark.parametrize("week_start", range(7))
def test_grid_shape_and_current_days(week_start):
    for y, m in MONTHS:
        grid = build_grid(date(y, m, 1), week_start)
        assert len(grid) in (4, 5, 6)
        assert all(len(row) == 7 for row in grid)
        current = [c.day for c in _owned(grid, MonthOffset.CURRENT)]
        assert current == list(range(1, days_in_month(y, m) + 1))


@pytest.mark.parametrize("week_start", range(7))
def test_adjacent_cells_are_contiguous(week_start):
    for y, m in MONTHS:
        first = date(y, m, 1)
        grid = build_grid(first, week_start)
        cells = list(grid.cells())
        # every cell is exactly one day after the previous one
        for a, b in zip(cells, cells[1:]):
            assert b.date - a.date == timedelta(days=1)

        prev = _owned(grid, MonthOffset.PREVIOUS)
        n = leading_blanks(first, week_start)
        assert len(prev) == n
        assert [c.date for c in prev] == [first - timedelta(days=n - i) for i in range(n)]

        last = date(y, m, days_in_month(y, m))
        nxt = _owned(grid, MonthOffset.NEXT)
        assert all(c.date > last for c in nxt)
        assert len(nxt) < 7
        assert grid.rows[0][0].date.weekday() == (week_start - 1) % 7


def test_cells_carry_day_of_their_date():
    grid = build_grid(date(2024, 3, 1), 0)
    assert all(c.day == c.date.day for c in grid.cells())


def test_february_2024_monday_first():
    grid = build_grid(date(2024, 2, 1), 1)
    assert len(grid) == 5
    row0 = [(c.owner, c.day) for c in grid.rows[0]]
    assert row0 == [
        (MonthOffset.PREVIOUS, 29), (MonthOffset.PREVIOUS, 30), (MonthOffset.PREVIOUS, 31),
        (MonthOffset.CURRENT, 1), (MonthOffset.CURRENT, 2),
        (MonthOffset.CURRENT, 3), (MonthOffset.CURRENT, 4),
    ]
    assert grid.rows[0][0].date == date(2024, 1, 29)
    row4 = grid.rows[4]
    assert [c.day for c in row4] == [26, 27, 28, 29, 1, 2, 3]
    assert [c.owner for c in row4[4:]] == [MonthOffset.NEXT] * 3
    assert row4[-1].date == date(2024, 3, 3)


def test_day_of_reference_is_ignored():
    assert build_grid(date(2024, 2, 17), 1) == build_grid(date(2024, 2, 1), 1)
    assert build_grid((2024, 2), 1) == build_grid(date(2024, 2, 1), 1)


def test_month_starting_on_week_start_has_no_leading_cells():
    # 1 Jan 2024 is a Monday
    grid = build_grid(date(2024, 1, 1), 1)
    assert leading_blanks(date(2024, 1, 1), 1) == 0
    assert grid.rows[0][0].owner is MonthOffset.CURRENT
    assert grid.rows[0][0].day == 1


def test_six_row_month():
    # 1 Dec 2024 is a Sunday, one day before a Monday week start
    grid = build_grid(date(2024, 12, 1), 1)
    assert len(grid) == 6
    assert grid.rows[0][-1].date == date(2024, 12, 1)
    assert grid.rows[5][1].date == date(2024, 12, 31)
    assert grid.rows[5][-1].date == date(2025, 1, 5)


def test_four_row_month():
    # February 2015 starts on a Sunday and has 28 days
    grid = build_grid(date(2015, 2, 1), 0)
    assert len(grid) == 4
    assert not _owned(grid, MonthOffset.PREVIOUS)
    assert not _owned(grid, MonthOffset.NEXT)


def test_previous_month_length_is_its_own():
    # March 2023 Sunday-first: leading days come from a 28-day February
    grid = build_grid(date(2023, 3, 1), 0)
    assert [c.day for c in _owned(grid, MonthOffset.PREVIOUS)] == [26, 27, 28]


def test_year_boundaries():
    jan = build_grid(date(2023, 1, 1), 1)
    assert jan.rows[0][0].date == date(2022, 12, 26)
    dec = build_grid(date(2022, 12, 1), 1)
    assert dec.rows[-1][-1].date == date(2023, 1, 1)


@pytest.mark.parametrize("week_start", [-1, 7, 1.0, "1", True, None])
def test_invalid_week_start(week_start):
    with pytest.raises(InvalidConfig):
        build_grid(date(2024, 2, 1), week_start)


def test_invalid_reference_month():
    with pytest.raises(InvalidDate):
        build_grid((2024, 13), 1)


def test_find_and_week_numbers():
    grid = build_grid(date(2024, 1, 1), 1)
    assert grid.find(date(2024, 1, 15)).owner is MonthOffset.CURRENT
    assert grid.find(date(2024, 2, 4)).owner is MonthOffset.NEXT
    assert grid.find(date(2024, 3, 1)) is None
    assert grid.week_numbers() == [1, 2, 3, 4, 5]


def test_build_grid_is_deterministic():
    assert build_grid(date(2024, 7, 1), 3) == build_grid(date(2024, 7, 1), 3)


def test_in_current_month():
    grid = build_grid(date(2024, 2, 1), 1)
    assert not grid.rows[0][0].in_current_month
    assert grid.rows[0][3].in_current_month


def test_week_numbers_sunday_first():
    # row 0 runs 31 Dec 2023 .. 6 Jan 2024; its Monday is 1 Jan (ISO week 1)
    grid = build_grid(date(2024, 1, 1), 0)
    assert grid.rows[0][0].date == date(2023, 12, 31)
    assert grid.week_numbers() == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("week_start", range(7))
def test_week_numbers_follow_row_monday(week_start):
    grid = build_grid(date(2024, 1, 1), week_start)
    for row, number in zip(grid, grid.week_numbers()):
        monday = next(c.date for c in row if c.date.weekday() == 0)
        assert number == monday.isocalendar()[1]
