"""Visible month / selected date state machine behind the datepicker."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

import locale_names
from calendar_logic import add_months, first_of_month, same_month
from errors import OutOfViewSelection
from grid_builder import CalendarGrid, DayCell, build_grid, check_week_start

logger = logging.getLogger(__name__)

SelectionListener = Callable[["date | None"], None]


class DatepickerState:
    """State of one datepicker widget.

    ``now`` is read once, here; it sets the initial visible month and is kept
    as ``today`` for highlighting and :meth:`go_today`.  ``week_start``
    overrides the locale's default first weekday (0=Sunday .. 6=Saturday).

    The visible month moves only through :meth:`navigate` and its shortcuts
    or through :meth:`select`.  Every listener passed to :meth:`subscribe` is
    called exactly once per selection with the selected date.
    """

    def __init__(self, now: date, locale: str = locale_names.DEFAULT_LOCALE,
                 week_start: int | None = None,
                 allow_adjacent_selection: bool = True) -> None:
        if week_start is not None:
            check_week_start(week_start)
        self.today = date(now.year, now.month, now.day)
        self.visible_month: date = first_of_month(self.today)
        self.selected_date: date | None = None
        self.locale = locale
        self.allow_adjacent_selection = allow_adjacent_selection
        self._week_start_override = week_start
        self._listeners: list[SelectionListener] = []

    @classmethod
    def from_settings(cls, settings: dict, now: date) -> "DatepickerState":
        """Fresh state configured from persisted settings.

        The last pick stored in ``settings`` is not replayed: a new widget
        always opens on ``now``'s month with nothing selected.
        """
        return cls(
            now,
            locale=settings["locale"],
            week_start=settings["week_start"],
            allow_adjacent_selection=settings["allow_adjacent_selection"],
        )

    def __repr__(self) -> str:
        return (f"DatepickerState(visible_month={self.visible_month!r}, "
                f"selected_date={self.selected_date!r}, locale={self.locale!r})")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def week_start(self) -> int:
        if self._week_start_override is not None:
            return self._week_start_override
        return locale_names.locale_week_start(self.locale)

    @property
    def week_start_override(self) -> int | None:
        return self._week_start_override

    def set_week_start(self, week_start: int | None) -> None:
        """Override the first weekday; ``None`` follows the locale again."""
        if week_start is not None:
            check_week_start(week_start)
        self._week_start_override = week_start

    def set_locale(self, locale: str) -> None:
        self.locale = locale

    def subscribe(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SelectionListener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def navigate(self, delta: int) -> None:
        """Shift the visible month by ``delta`` whole months."""
        self.visible_month = add_months(self.visible_month, delta)
        logger.debug("Navigated %+d month(s) to %s", delta, self.visible_month)

    def navigate_year(self, delta: int) -> None:
        self.navigate(12 * delta)

    def go_today(self) -> None:
        self.visible_month = first_of_month(self.today)

    def select(self, d: date) -> None:
        """Select ``d``, bringing its month into view if needed."""
        d = date(d.year, d.month, d.day)
        out_of_view = not same_month(d, self.visible_month)
        if out_of_view and not self.allow_adjacent_selection:
            raise OutOfViewSelection(
                f"{d.isoformat()} is outside {self.visible_month:%Y-%m}")
        self.selected_date = d
        if out_of_view:
            self.visible_month = first_of_month(d)
        logger.debug("Selected %s", d)
        self._notify(d)

    def clear_selection(self) -> None:
        self.selected_date = None
        self._notify(None)

    def _notify(self, d: date | None) -> None:
        for listener in list(self._listeners):
            listener(d)

    # ------------------------------------------------------------------
    # Derived view data
    # ------------------------------------------------------------------
    def current_grid(self) -> CalendarGrid:
        return build_grid(self.visible_month, self.week_start)

    def is_selected(self, cell: DayCell) -> bool:
        return self.selected_date is not None and self.selected_date == cell.date

    def is_today(self, cell: DayCell) -> bool:
        return cell.date == self.today

    def month_label(self) -> str:
        """Name of the visible month; raises UnsupportedLocale."""
        return locale_names.month_name(self.visible_month.month, self.locale)

    def title(self) -> str:
        return f"{self.month_label()} {self.visible_month.year}"

    def weekday_labels(self) -> list[str]:
        """Column headers matching :meth:`current_grid`; raises UnsupportedLocale."""
        return locale_names.weekday_names(self.week_start, self.locale)
