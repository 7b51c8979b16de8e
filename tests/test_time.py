# tests/test_time.py

import random
from datetime import date, timedelta

from almanac import CalendarDate, JulianDayNumber
from almanac.core import time as t


def test_python_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(5000):
        jdn_in = random.randint(1721426, 5373484)
        d = t.to_python_date(JulianDayNumber.from_jdn(jdn_in))
        assert t.from_python_date(d).jdn == jdn_in


def test_python_date_agrees_with_ordinals():
    base = date(2000, 1, 1)
    for k in range(-1000, 1000, 37):
        d = base + timedelta(days=k)
        assert t.from_python_date(d).jdn == 2451545 + k


def test_from_civil():
    assert t.from_civil(date(1582, 10, 15), "julian") == CalendarDate.julian(1582, 10, 5)
    assert t.today("gregorian", clock=date(2001, 9, 9)).ymd() == (2001, 9, 9)
