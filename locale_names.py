"""Month and weekday names per locale.

Lookup order: the registered tables below, then the C library's locale
data through ``calendar.different_locale``.  A locale neither of them knows
raises UnsupportedLocale; callers fall back with :func:`with_fallback`.
"""

from __future__ import annotations

import calendar
import locale as _locale
import logging
from typing import Callable, TypeVar

from calendar_logic import MONDAY, SUNDAY
from errors import UnsupportedLocale

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LOCALE = "en_US"

# name tables: months January..December, weekdays Sunday-first
_NAME_TABLES: dict[str, dict[str, tuple[str, ...]]] = {
    "en": {
        "months": ("January", "February", "March", "April", "May", "June",
                   "July", "August", "September", "October", "November", "December"),
        "days": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    },
    "ru": {
        "months": ("Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
                   "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь"),
        "days": ("Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб"),
    },
    "de": {
        "months": ("Januar", "Februar", "März", "April", "Mai", "Juni",
                   "Juli", "August", "September", "Oktober", "November", "Dezember"),
        "days": ("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
    },
}
_NAME_TABLES["C"] = _NAME_TABLES["en"]
_NAME_TABLES["POSIX"] = _NAME_TABLES["en"]

# Territories whose weeks start on Sunday; everything else starts on Monday
_SUNDAY_FIRST = {"US", "CA", "JP", "IL", "BR", "MX", "PH", "KR", "TW", "HK", "IN", "ZA"}


def normalize(locale_id: str) -> str:
    """``en-us.UTF-8`` -> ``en_US``."""
    if not isinstance(locale_id, str) or not locale_id.strip():
        raise UnsupportedLocale(str(locale_id))
    base = locale_id.strip().split(".")[0].split("@")[0].replace("-", "_")
    lang, _, territory = base.partition("_")
    if territory:
        return f"{lang.lower()}_{territory.upper()}"
    return lang if lang in ("C", "POSIX") else lang.lower()


def _table_for(locale_id: str) -> dict[str, tuple[str, ...]] | None:
    loc = normalize(locale_id)
    table = _NAME_TABLES.get(loc)
    if table is None:
        table = _NAME_TABLES.get(loc.partition("_")[0])
    return table


def _system_names(locale_id: str, fetch: Callable[[], T]) -> T:
    # different_locale switches LC_TIME for the duration of the block
    candidates = [locale_id]
    loc = normalize(locale_id)
    if "." not in locale_id:
        candidates += [f"{loc}.UTF-8", f"{loc}.utf8"]
    for candidate in candidates:
        try:
            with calendar.different_locale(candidate):
                return fetch()
        except _locale.Error:
            continue
    raise UnsupportedLocale(locale_id)


def month_name(month: int, locale_id: str) -> str:
    """Name of ``month`` (1..12) in ``locale_id``."""
    table = _table_for(locale_id)
    if table is not None:
        return table["months"][month - 1]
    return _system_names(locale_id, lambda: calendar.month_name[month]).capitalize()


def weekday_name(weekday: int, locale_id: str) -> str:
    """Abbreviated name of the Sunday-first ``weekday`` (0..6)."""
    table = _table_for(locale_id)
    if table is not None:
        return table["days"][weekday]
    # calendar.day_abbr is Monday-first
    return _system_names(locale_id, lambda: calendar.day_abbr[(weekday - 1) % 7])


def weekday_names(week_start: int, locale_id: str) -> list[str]:
    """Seven weekday abbreviations, column order for ``week_start``."""
    return [weekday_name((week_start + i) % 7, locale_id) for i in range(7)]


def locale_week_start(locale_id: str) -> int:
    """Sunday-first index of the weekday that starts a row in ``locale_id``."""
    territory = normalize(locale_id).partition("_")[2]
    return SUNDAY if territory in _SUNDAY_FIRST else MONDAY


def with_fallback(fn: Callable[[str], T], locale_id: str,
                  default: str = DEFAULT_LOCALE) -> T:
    """Call ``fn(locale_id)``; on UnsupportedLocale retry with ``default``."""
    try:
        return fn(locale_id)
    except UnsupportedLocale:
        logger.warning("Locale %r unsupported, falling back to %r", locale_id, default)
        return fn(default)
