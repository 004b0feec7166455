import calendar
import contextlib
import locale

import pytest

import locale_names
from errors import UnsupportedLocale


def test_registered_tables():
    assert locale_names.month_name(2, "en_US") == "February"
    assert locale_names.month_name(2, "ru_RU") == "Февраль"
    assert locale_names.month_name(3, "de_CH") == "März"
    assert locale_names.weekday_name(0, "ru_RU") == "Вс"


def test_identifier_normalisation():
    assert locale_names.normalize("en-us.UTF-8") == "en_US"
    assert locale_names.normalize("de_DE@euro") == "de_DE"
    assert locale_names.normalize("C") == "C"
    assert locale_names.month_name(1, "en-GB") == "January"


def test_weekday_names_follow_week_start():
    assert locale_names.weekday_names(0, "en_US") == [
        "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert locale_names.weekday_names(1, "de_DE") == [
        "Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]


def test_locale_week_start():
    assert locale_names.locale_week_start("en_US") == 0
    assert locale_names.locale_week_start("en_GB") == 1
    assert locale_names.locale_week_start("ru_RU") == 1
    assert locale_names.locale_week_start("de") == 1


def test_system_formatter_used_without_table(monkeypatch):
    seen = []

    def fake_different_locale(loc):
        seen.append(loc)
        return contextlib.nullcontext()

    monkeypatch.setattr(calendar, "different_locale", fake_different_locale)
    # C-locale names come back through the system tier
    assert locale_names.month_name(1, "fr_FR") == calendar.month_name[1].capitalize()
    assert locale_names.weekday_name(1, "fr_FR") == calendar.day_abbr[0]
    assert seen[0] == "fr_FR"


def test_system_formatter_failure_is_unsupported(monkeypatch):
    def failing(loc):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(calendar, "different_locale", failing)
    with pytest.raises(UnsupportedLocale) as exc_info:
        locale_names.month_name(1, "fr_FR")
    assert exc_info.value.locale == "fr_FR"


def test_unknown_locale_raises():
    with pytest.raises(UnsupportedLocale):
        locale_names.month_name(1, "xx_XX")
    with pytest.raises(UnsupportedLocale):
        locale_names.weekday_names(1, "xx_XX")
    with pytest.raises(UnsupportedLocale):
        locale_names.month_name(1, "")


def test_with_fallback(caplog):
    name = locale_names.with_fallback(lambda loc: locale_names.month_name(5, loc), "xx_XX")
    assert name == "May"
    assert "falling back" in caplog.text
