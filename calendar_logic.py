"""Pure calendar calculations, no UI dependencies.

Dates are plain ``datetime.date`` values.  Weekdays use the Sunday-first
numbering (0=Sunday .. 6=Saturday) everywhere in this package.
"""

import calendar
from datetime import date, timedelta

from errors import InvalidDate

SUNDAY = 0
MONDAY = 1
SATURDAY = 6


def make_date(year: int, month: int, day: int = 1) -> date:
    """Return ``date(year, month, day)`` or raise InvalidDate."""
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as exc:
        raise InvalidDate(f"Invalid date {year!r}-{month!r}-{day!r}: {exc}") from exc


def as_month(reference) -> date:
    """Normalise a date or a ``(year, month)`` pair to the first of its month."""
    if isinstance(reference, date):
        return date(reference.year, reference.month, 1)
    try:
        year, month = reference
    except (TypeError, ValueError) as exc:
        raise InvalidDate(f"Not a month reference: {reference!r}") from exc
    return make_date(year, month, 1)


def days_in_month(year: int, month: int) -> int:
    """Return 28–31 following Gregorian leap-year rules."""
    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid month {month!r}")
    return calendar.monthrange(year, month)[1]


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def last_of_month(d: date) -> date:
    return d.replace(day=days_in_month(d.year, d.month))


def weekday(d: date) -> int:
    """Return the Sunday-first weekday (0=Sunday .. 6=Saturday)."""
    return (d.weekday() + 1) % 7


def add_days(d: date, n: int) -> date:
    try:
        return d + timedelta(days=n)
    except OverflowError as exc:
        raise InvalidDate(f"{d.isoformat()} + {n} days is out of range") from exc


def add_months(d: date, n: int) -> date:
    """Shift ``d`` by ``n`` whole months, clamping to the target month's last day.

    Jan 31 + 1 month is Feb 28 (or 29); Mar 31 - 1 month is Feb 28/29.
    """
    index = d.year * 12 + (d.month - 1) + n
    year, month0 = divmod(index, 12)
    if not 1 <= year <= 9999:
        raise InvalidDate(f"{d.isoformat()} + {n} months is out of range")
    month = month0 + 1
    return date(year, month, min(d.day, days_in_month(year, month)))


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def iso_week_number(d: date) -> int:
    return d.isocalendar()[1]


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday
