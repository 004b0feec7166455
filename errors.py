"""Exceptions raised by the datepicker core."""


class DatepickerError(Exception):
    """Base class for every datepicker failure."""


class InvalidDate(DatepickerError, ValueError):
    """A year/month/day combination that does not exist."""


class InvalidConfig(DatepickerError, ValueError):
    """A configuration value outside its allowed range (e.g. week start)."""


class UnsupportedLocale(DatepickerError, LookupError):
    """Neither a name table nor the system formatter knows the locale."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Unsupported locale: {locale!r}")
        self.locale = locale


class OutOfViewSelection(DatepickerError):
    """Selecting an adjacent-month day while that is disabled."""
