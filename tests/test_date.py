# tests/test_date.py

import random

import pytest

from almanac import (
    CalendarDate,
    InvalidArgumentError,
    InvalidDateError,
    dates_are_chronological,
    dates_are_reverse_chronological,
)
from almanac.core.types import CalendarSystem


def jul(y, m, d):
    return CalendarDate.julian(y, m, d)


def test_construction_validates():
    with pytest.raises(InvalidDateError):
        jul(1, 2, 29)
    with pytest.raises(InvalidDateError):
        CalendarDate.gregorian(1900, 2, 29)
    assert jul(1900, 2, 29).ymd() == (1900, 2, 29)


def test_accessors():
    d = jul(-43, 3, 15)
    assert (d.year, d.month, d.day) == (-43, 3, 15)
    assert d.system is CalendarSystem.JULIAN
    assert d.month_name() == "MARTIVS"
    assert d.days_in_month() == 31
    assert not d.is_leap_year()


def test_month_rollover_common_year():
    d = jul(1, 2, 28)
    assert d.next_day().ymd() == (1, 3, 1)


def test_month_rollover_leap_year():
    d = jul(4, 2, 28)
    assert d.next_day().ymd() == (4, 2, 29)
    assert d.next_day().ymd() == (4, 3, 1)


def test_year_rollover():
    d = jul(1, 12, 31)
    assert d.next_day().ymd() == (2, 1, 1)
    assert d.prev_day().ymd() == (1, 12, 31)


def test_prev_day_uses_new_month_length():
    assert jul(4, 3, 1).prev_day().ymd() == (4, 2, 29)
    assert jul(5, 3, 1).prev_day().ymd() == (5, 2, 28)
    assert jul(5, 5, 1).prev_day().ymd() == (5, 4, 30)
    assert jul(0, 1, 1).prev_day().ymd() == (-1, 12, 31)


def test_stepping_is_in_place_and_chains():
    d = jul(2000, 1, 1)
    same = d.next_day().next_day().prev_day()
    assert same is d
    assert d.ymd() == (2000, 1, 2)


def test_add_days_matches_stepping_across_year_zero():
    for system in CalendarSystem:
        start = CalendarDate(-2, 11, 20, system)
        stepped = start.copy()
        for n in range(0, 1200):
            assert start.copy().add_days(n) == stepped
            stepped.next_day()


def test_subtract_days_matches_stepping_across_year_zero():
    for system in CalendarSystem:
        start = CalendarDate(2, 2, 3, system)
        stepped = start.copy()
        for n in range(0, 1200):
            assert start.copy().subtract_days(n) == stepped
            stepped.prev_day()


def test_add_days_monotonic():
    random.seed(3)
    for system in CalendarSystem:
        for _ in range(2000):
            d = CalendarDate.from_julian_day(random.randint(-2_000_000, 4_000_000) - 0.5, system)
            n = random.randint(0, 100_000)
            before = d.julian_day().value
            assert d.add_days(n).julian_day().value == before + n


def test_negative_counts_move_backwards():
    assert jul(2000, 1, 1).add_days(-1).ymd() == (1999, 12, 31)
    assert jul(2000, 1, 1).subtract_days(-1).ymd() == (2000, 1, 2)


@pytest.mark.parametrize("bad", [1.5, "3", None, True])
def test_add_days_rejects_non_integers(bad):
    with pytest.raises(InvalidArgumentError):
        jul(2000, 1, 1).add_days(bad)


def test_is_before_after_same_system():
    a = jul(1, 1, 1)
    b = jul(1, 1, 2)
    assert a.is_before(b)
    assert b.is_after(a)
    assert not a.is_before(a.copy())
    assert not a.is_after(a.copy())


def test_is_before_across_systems():
    # Same triple, different instants: Julian dates lag Gregorian ones
    j = CalendarDate.julian(2000, 1, 1)
    g = CalendarDate.gregorian(2000, 1, 1)
    assert g.is_before(j)
    assert j.is_after(g)
    assert j != g
    assert not j.is_before(CalendarDate.gregorian(2000, 1, 14))
    assert not j.is_after(CalendarDate.gregorian(2000, 1, 14))


def test_chronological_checks():
    a, b, c = jul(1, 1, 1), jul(1, 1, 2), jul(1, 1, 1)
    assert dates_are_chronological(a, b)
    assert not dates_are_chronological(b, a)
    assert dates_are_chronological(a, c)
    assert dates_are_chronological(a)
    assert dates_are_reverse_chronological(b, a, c)
    assert not dates_are_reverse_chronological(a, b)
    assert CalendarDate.dates_are_chronological(a, b, b)


def test_chronological_mixed_systems():
    seq = [
        CalendarDate.gregorian(1582, 10, 14),
        CalendarDate.julian(1582, 10, 5),
        CalendarDate.gregorian(1582, 10, 15),
        CalendarDate.julian(1582, 10, 6),
    ]
    assert dates_are_chronological(*seq)
    assert dates_are_reverse_chronological(*reversed(seq))


def test_chronological_requires_dates():
    with pytest.raises(InvalidArgumentError):
        dates_are_chronological()
    with pytest.raises(InvalidArgumentError):
        dates_are_reverse_chronological()


def test_weekday_number():
    assert CalendarDate.gregorian(2000, 1, 1).weekday_number() == 6
    assert CalendarDate.gregorian(2000, 1, 1).weekday_name() == "Saturday"
    assert CalendarDate.gregorian(1970, 1, 1).weekday_number() == 4
    assert CalendarDate.julian(-4712, 1, 1).weekday_number() == 1
    # Thursday 4 October 1582 (Julian) was followed by Friday 15 October (Gregorian)
    assert CalendarDate.julian(1582, 10, 4).weekday_name() == "Thursday"
    assert CalendarDate.gregorian(1582, 10, 15).weekday_name() == "Friday"


def test_weekday_cycles_and_stays_in_range():
    d = jul(-10, 6, 1)
    w = d.weekday_number()
    for _ in range(3000):
        d.next_day()
        nw = d.weekday_number()
        assert 0 <= nw < d.rules.days_in_week()
        assert nw == (w + 1) % 7
        w = nw


def test_conversion_constructors():
    j = CalendarDate.julian(1582, 10, 5)
    g = CalendarDate.from_date(j, CalendarSystem.GREGORIAN)
    assert g.ymd() == (1582, 10, 15)
    assert j.to("gregorian") == g
    cp = CalendarDate.from_date(j)
    assert cp == j and cp is not j
    assert CalendarDate.from_julian_day(2299160.5, "julian") == j


def test_operators():
    d = CalendarDate.gregorian(2024, 2, 28)
    assert (d + 1).ymd() == (2024, 2, 29)
    assert (1 + d).ymd() == (2024, 2, 29)
    assert (d - 28).ymd() == (2024, 1, 31)
    assert d.ymd() == (2024, 2, 28)  # operators do not mutate
    assert CalendarDate.gregorian(2024, 3, 1) - d == 2
    assert d.days_until(CalendarDate.gregorian(2023, 2, 28)) == -365
    assert d < CalendarDate.gregorian(2024, 2, 29)
    assert CalendarDate.julian(2024, 2, 16) >= d
    assert CalendarDate.julian(2024, 2, 15) <= d
    assert sorted([d + 3, d, d - 3]) == [d - 3, d, d + 3]


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(jul(1, 1, 1))


def test_str_and_repr():
    assert str(jul(1, 1, 1)) == "Julian Calendar: IANVARIVS 1, 1"
    assert str(CalendarDate.gregorian(2000, 7, 4)) == "Gregorian Calendar: July 4, 2000"
    assert repr(jul(-5, 2, 3)) == "CalendarDate(-5, 2, 3, 'julian')"
