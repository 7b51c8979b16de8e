"""
almanac.vector
--------------
Array versions of the converter's day counts, for bulk work (tables,
diagnostics). Same formulas as ``almanac.core.converter``, evaluated with
NumPy integer floor division, so the results match the scalar path exactly.

Needs numpy (``pip install almanac[vector]``).
"""

from __future__ import annotations

from typing import Any, Tuple

from .core.errors import InvalidDateError
from .core.types import CalendarSystem
from .systems.factory import SystemLike, as_system


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install numpy') from e


def _leap_mask(system: CalendarSystem, years: Any) -> Any:
    if system is CalendarSystem.JULIAN:
        return years % 4 == 0
    return (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))


def days_in_month(months: Any, years: Any, system: SystemLike) -> Any:
    np = _need_numpy()
    sysm = as_system(system)
    m = np.asarray(months, dtype=np.int64)
    y = np.asarray(years, dtype=np.int64)
    table = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)
    out = table[np.clip(m, 1, 12) - 1] + ((m == 2) & _leap_mask(sysm, y))
    return np.where((m >= 1) & (m <= 12), out, 0)


def day_numbers(years: Any, months: Any, days: Any, system: SystemLike) -> Any:
    """Integer Julian Day Numbers (noon) for arrays of civil dates."""
    np = _need_numpy()
    sysm = as_system(system)
    y, m, d = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64),
        np.asarray(months, dtype=np.int64),
        np.asarray(days, dtype=np.int64),
    )

    bad = (d < 1) | (d > days_in_month(m, y, sysm))
    if np.any(bad):
        k = int(np.flatnonzero(bad)[0])
        raise InvalidDateError(sysm, int(y.flat[k]), int(m.flat[k]), int(d.flat[k]))

    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4
    if sysm is CalendarSystem.JULIAN:
        return jdn - 32083
    return jdn - y2 // 100 + y2 // 400 - 32045


def julian_days(years: Any, months: Any, days: Any, system: SystemLike) -> Any:
    """Julian Day values (midnight, ``x.5``) as float64."""
    return day_numbers(years, months, days, system).astype("float64") - 0.5


def civil_dates(jd: Any, system: SystemLike) -> Tuple[Any, Any, Any]:
    """Inverse of julian_days: (years, months, days) arrays for Julian Day values."""
    np = _need_numpy()
    sysm = as_system(system)
    jdn = np.floor(np.asarray(jd, dtype=np.float64) + 0.5).astype(np.int64)

    if sysm is CalendarSystem.JULIAN:
        c = jdn + 32082
        century = 0
    else:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
        century = 100 * b
    dd = (4 * c + 3) // 1461
    e = c - (1461 * dd) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = century + dd - 4800 + (m // 10)
    return year, month, day
