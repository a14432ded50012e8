"""Proleptic Gregorian calendar arithmetic.

Absolute day numbers count days from Monday, 1 January of Gregorian
year 1 (absolute day 1), the same numbering :meth:`datetime.date.toordinal`
uses.  Unlike :mod:`datetime`, the helpers here accept years before 1
(astronomical numbering: year 0 is 1 BCE), which the Hebrew calendar
needs for its first four millennia.  The Gregorian leap rule is applied
uniformly to all years; there is no switch to the Julian calendar
before 1582.

The conversion goes through the Julian Day Number using integer floor
division only, so it stays exact over the whole supported range.
"""

from __future__ import annotations

from typing import Tuple

# Julian Day Number of absolute day 0 (31 December, 1 BCE).
JD_OFFSET = 1721425

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    """True if *year* has a 29th of February."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(year: int, month: int) -> int:
    """Number of days in *month* (1..12) of *year*."""
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def _jd(y: int, m: int, d: int) -> int:
    a = (14 - m) // 12
    yy = y + 4800 - a
    mm = m + 12 * a - 3
    return d + (153 * mm + 2) // 5 + 365 * yy + yy // 4 - yy // 100 + yy // 400 - 32045


def _greg(jd: int) -> Tuple[int, int, int]:
    a = jd + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d2 = (4 * c + 3) // 1461
    e = c - (1461 * d2) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d2 - 4800 + m // 10
    return year, month, day


def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    """Absolute day number of a Gregorian date.  No validation is done."""
    return _jd(year, month, day) - JD_OFFSET


def absolute_to_gregorian(absolute: int) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` for an absolute day number."""
    return _greg(absolute + JD_OFFSET)


__all__ = [
    "JD_OFFSET",
    "is_gregorian_leap_year",
    "days_in_gregorian_month",
    "gregorian_to_absolute",
    "absolute_to_gregorian",
]
