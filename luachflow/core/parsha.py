"""
parsha.py – weekly Torah reading and the four special Shabbosos.

The weekly reading is looked up in
:data:`luachflow.data.parshiyos.PARSHA_TABLE`.  The row is chosen from
the year's kviah (leap year, weekday of Rosh Hashana, Cheshvan/Kislev
pattern) and, for the years where the second day of Pesach or Shavuos
falls on Shabbos, from whether the reading follows Israel or the
diaspora.  The column is the week of the year counted from the Sunday
on or before Rosh Hashana.
"""

from __future__ import annotations

from typing import Optional

from ..data.parshiyos import PARSHA_TABLE, Parsha
from .hebrew_date import (
    ADAR,
    ADAR_II,
    MONDAY,
    NISSAN,
    SATURDAY,
    SHEVAT,
    THURSDAY,
    TUESDAY,
    HebrewDate,
    elapsed_days,
    is_cheshvan_long,
    is_kislev_short,
    is_leap_year,
)


def _leap_year_type(rosh_hashana_dow: int, kislev_short: bool, cheshvan_long: bool,
                    in_israel: bool) -> Optional[int]:
    if rosh_hashana_dow == MONDAY:
        if kislev_short:
            return 14 if in_israel else 6
        if cheshvan_long:
            return 15 if in_israel else 7
    elif rosh_hashana_dow == TUESDAY:
        return 15 if in_israel else 7
    elif rosh_hashana_dow == THURSDAY:
        if kislev_short:
            return 8
        if cheshvan_long:
            return 9
    elif rosh_hashana_dow == SATURDAY:
        if kislev_short:
            return 10
        if cheshvan_long:
            return 16 if in_israel else 11
    return None


def _regular_year_type(rosh_hashana_dow: int, kislev_short: bool, cheshvan_long: bool,
                       in_israel: bool) -> Optional[int]:
    if rosh_hashana_dow == MONDAY:
        if kislev_short:
            return 0
        if cheshvan_long:
            return 12 if in_israel else 1
    elif rosh_hashana_dow == TUESDAY:
        return 12 if in_israel else 1
    elif rosh_hashana_dow == THURSDAY:
        if cheshvan_long:
            return 3
        if not kislev_short:
            return 13 if in_israel else 2
    elif rosh_hashana_dow == SATURDAY:
        if kislev_short:
            return 4
        if cheshvan_long:
            return 5
    return None


def parsha_year_type(date: HebrewDate, in_israel: bool = False) -> Optional[int]:
    """Return the row of the reading table for the year of *date*.

    ``None`` is returned for a kviah that the calendar never produces;
    any year built by :mod:`luachflow.core.hebrew_date` has a row.
    """
    year = date.hebrew_year
    rosh_hashana_dow = date.classification.rosh_hashana_day_of_week
    kislev_short = is_kislev_short(year)
    cheshvan_long = is_cheshvan_long(year)
    if is_leap_year(year):
        return _leap_year_type(rosh_hashana_dow, kislev_short, cheshvan_long, in_israel)
    return _regular_year_type(rosh_hashana_dow, kislev_short, cheshvan_long, in_israel)


def parsha_of_week(date: HebrewDate, in_israel: bool = False) -> Parsha:
    """Return the weekly reading if *date* is a Shabbos.

    Weekdays, and a Shabbos on which a Yom Tov reading replaces the
    weekly portion, give ``Parsha.NONE``.
    """
    if date.day_of_week != SATURDAY:
        return Parsha.NONE
    year_type = parsha_year_type(date, in_israel)
    if year_type is None:
        return Parsha.NONE
    # weeks start on the Sunday on or before Rosh Hashana
    rosh_hashana_dow0 = elapsed_days(date.hebrew_year) % 7
    week = (rosh_hashana_dow0 + date.days_since_start_of_year) // 7
    return PARSHA_TABLE[year_type][week]


def special_shabbos(date: HebrewDate) -> Parsha:
    """Return Shkalim, Zachor, Para or Hachodesh, or ``Parsha.NONE``.

    Shkalim is read on the Shabbos on or before Rosh Chodesh Adar (Adar II
    in a leap year), Zachor on the Shabbos before Purim, Para on the
    Shabbos before Hachodesh, and Hachodesh on the Shabbos on or before
    Rosh Chodesh Nissan.
    """
    if date.day_of_week != SATURDAY:
        return Parsha.NONE
    month = date.hebrew_month
    day = date.hebrew_day
    leap = date.is_leap_year
    if (month == SHEVAT and not leap) or (month == ADAR and leap):
        if day in (25, 27, 29):
            return Parsha.SHKALIM
    if (month == ADAR and not leap) or month == ADAR_II:
        if day == 1:
            return Parsha.SHKALIM
        if day in (8, 9, 11, 13):
            return Parsha.ZACHOR
        if day in (18, 20, 22, 23):
            return Parsha.PARA
        if day in (25, 27, 29):
            return Parsha.HACHODESH
    if month == NISSAN and day == 1:
        return Parsha.HACHODESH
    return Parsha.NONE


__all__ = ["Parsha", "parsha_year_type", "parsha_of_week", "special_shabbos"]
