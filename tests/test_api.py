# tests/test_api.py

from datetime import date

import pytest

import almanac
from almanac import api
from almanac.bootstrap import build_registry
from almanac.core.config import load_settings
from almanac.systems import JulianRules
from almanac.systems.gregorian import GREGORIAN_MONTH_NAMES


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ALMANAC_CALENDAR", "ALMANAC_DATE_FORMAT", "ALMANAC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fresh_registry(monkeypatch):
    monkeypatch.setattr(api, "_registry", build_registry())


def test_list_calendars():
    assert almanac.list_calendars() == ["gregorian", "julian"]


def test_calendar_info():
    info = almanac.calendar_info("julian")
    assert info["name"] == "Julian Calendar"
    assert info["system"] == "julian"
    assert info["month_names"][0] == "IANVARIVS"
    assert len(info["weekday_names"]) == info["days_in_week"] == 7


def test_unknown_calendar():
    with pytest.raises(almanac.UnknownCalendarError):
        almanac.get_rules("hebrew")
    with pytest.raises(KeyError):
        almanac.make_date(2000, 1, 1, calendar="mayan")


def test_default_calendar_from_env(monkeypatch):
    assert load_settings().calendar == "gregorian"
    with pytest.raises(almanac.InvalidDateError):
        almanac.make_date(1900, 2, 29)
    monkeypatch.setenv("ALMANAC_CALENDAR", "Julian")
    assert almanac.make_date(1900, 2, 29).system is almanac.CalendarSystem.JULIAN
    assert almanac.is_leap_year(1900)


def test_settings_defaults_and_blank_values(monkeypatch):
    monkeypatch.setenv("ALMANAC_DATE_FORMAT", "   ")
    monkeypatch.setenv("ALMANAC_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.date_format == "yyyy-MM-dd"
    assert s.log_level == "DEBUG"


def test_register_rules(fresh_registry):
    english = JulianRules(name="Julian Calendar (English)", month_names=GREGORIAN_MONTH_NAMES)
    almanac.register_rules("julian-en", english)
    assert "julian-en" in almanac.list_calendars()
    d = almanac.make_date(1582, 10, 5, calendar="julian-en")
    assert d.month_name() == "October"
    assert almanac.convert(d, "gregorian").ymd() == (1582, 10, 15)
    # same system, same day: equal regardless of names
    assert d == almanac.make_date(1582, 10, 5, calendar="julian")
    with pytest.raises(KeyError):
        almanac.register_rules("julian-en", english)
    almanac.register_rules("julian-en", english, overwrite=True)


def test_julian_day_api():
    d = almanac.make_date(2000, 1, 1, calendar="gregorian")
    jd = almanac.to_julian_day(d)
    assert jd.value == 2451544.5
    assert almanac.from_julian_day(jd, calendar="julian").ymd() == (1999, 12, 19)
    assert almanac.from_julian_day(2451545.0, calendar="gregorian") == d


def test_days_in_month_api():
    assert almanac.days_in_month(2, 1900, calendar="julian") == 29
    assert almanac.days_in_month(2, 1900, calendar="gregorian") == 28
    with pytest.raises(almanac.InvalidArgumentError):
        almanac.days_in_month(13, 1900)


def test_today_uses_host_clock():
    d = almanac.today(calendar="julian", clock=date(2024, 3, 14))
    assert d == almanac.CalendarDate.julian(2024, 3, 1)
    g = almanac.today(calendar="gregorian")
    assert g.system is almanac.CalendarSystem.GREGORIAN


def test_month_calendar():
    weeks = almanac.month_calendar(2000, 1, calendar="gregorian")
    assert weeks[0] == [None] * 6 + [1]
    assert weeks[-1] == [30, 31] + [None] * 5
    assert all(len(w) == 7 for w in weeks)
    feb = almanac.month_calendar(2015, 2, calendar="gregorian")
    assert len(feb) == 4
    assert feb[0] == [1, 2, 3, 4, 5, 6, 7]


def test_day_info_and_attributes():
    d = almanac.CalendarDate.julian(4, 3, 1)
    info = almanac.day_info(d, attributes=("day_of_year", "leap_year", "month", "equivalents"))
    assert info.julian_day == d.julian_day()
    assert info.attributes["day_of_year"] == 61
    assert info.attributes["leap_year"] is True
    assert info.attributes["days_in_year"] == 366
    assert info.attributes["month_name"] == "MARTIVS"
    assert info.attributes["equivalents"]["julian"] == (4, 3, 1)
    assert info.attributes["equivalents"]["gregorian"] == (4, 2, 28)
    assert almanac.day_info(d).attributes is None
    with pytest.raises(KeyError):
        almanac.day_info(d, attributes=("moon_phase",))
    # the snapshot is independent of the cursor
    d.next_day()
    assert info.date.ymd() == (4, 3, 1)
