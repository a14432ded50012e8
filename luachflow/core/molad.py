"""
molad.py – the molad (mean lunar conjunction) of a Hebrew month.

The molad is kept as an exact count of chalakim since molad BaHaRaD and
presented the traditional way: a civil day plus hours, minutes and
chalakim (1 hour = 1080 chalakim, 1 minute = 18 chalakim).  The molad
day begins at 18:00 of the previous evening, so a molad in the first
six hours of its day belongs to the evening of the preceding civil day.

:meth:`Molad.as_datetime` converts the traditional local mean time of
Har Habayis to Jerusalem standard time (GMT+2).  The Kiddush Levana
helpers are plain offsets from that instant and ignore whether the
result falls by day or by night.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Tuple

from .errors import UnsupportedRangeError
from .hebrew_date import (
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_HOUR,
    CHALAKIM_PER_MINUTE,
    JEWISH_EPOCH,
    HebrewDate,
    chalakim_since_molad_tohu,
    validate_hebrew,
)

JERUSALEM_STANDARD_TIME = _dt.timezone(_dt.timedelta(hours=2), "IST")

# Har Habayis (35.2354 E) is 20 m 56.496 s ahead of the GMT+2 meridian
_LOCAL_MEAN_TIME_OFFSET = _dt.timedelta(minutes=20, seconds=56, microseconds=496000)

# half of 29d 12h 793p
_HALF_MONTH = _dt.timedelta(days=14, hours=18, minutes=22, seconds=1, milliseconds=666)


@dataclass(frozen=True)
class Molad:
    """The molad of one month.

    :param chalakim_since_epoch: exact time since the epoch in chalakim.
    :param date: the civil day the molad falls on.
    :param hours: hour of the civil day, 0-23.
    :param minutes: 0-59.
    :param chalakim: 0-17.
    """

    chalakim_since_epoch: int
    date: HebrewDate
    hours: int
    minutes: int
    chalakim: int

    @property
    def days_since_epoch(self) -> int:
        return self.chalakim_since_epoch // CHALAKIM_PER_DAY

    @property
    def weeks_since_epoch(self) -> int:
        return self.days_since_epoch // 7

    @property
    def day_of_week(self) -> int:
        """Weekday of the molad day, 1 (Sunday) to 7 (Shabbos).

        This is the day in the traditional reckoning, which starts at
        18:00, and can differ from ``date.day_of_week``.
        """
        return self.days_since_epoch % 7 + 1

    def traditional(self) -> Tuple[int, int, int]:
        """Return ``(day_of_week, hour, chalakim)`` as the molad is announced.

        Hours are counted from 18:00 of the previous evening, as in
        "molad BaHaRaD: day 2, 5 hours, 204 chalakim".
        """
        parts = self.chalakim_since_epoch % CHALAKIM_PER_DAY
        hours, chalakim = divmod(parts, CHALAKIM_PER_HOUR)
        return self.day_of_week, hours, chalakim

    def as_datetime(self) -> _dt.datetime:
        """The molad instant in Jerusalem standard time.

        :raises UnsupportedRangeError: if the civil day falls outside the
            years :mod:`datetime` can represent.
        """
        if not _dt.MINYEAR <= self.date.gregorian_year <= _dt.MAXYEAR:
            raise UnsupportedRangeError(
                f"Molad on Gregorian year {self.date.gregorian_year} cannot be "
                "represented as a datetime"
            )
        local = _dt.datetime(
            self.date.gregorian_year,
            self.date.gregorian_month,
            self.date.gregorian_day,
            self.hours,
            self.minutes,
            tzinfo=JERUSALEM_STANDARD_TIME,
        )
        # one chelek is 10/3 seconds
        local += _dt.timedelta(microseconds=self.chalakim * 10_000_000 // 3)
        return local - _LOCAL_MEAN_TIME_OFFSET

    def tchilas_zman_kidush_levana_3_days(self) -> _dt.datetime:
        return self.as_datetime() + _dt.timedelta(days=3)

    def tchilas_zman_kidush_levana_7_days(self) -> _dt.datetime:
        return self.as_datetime() + _dt.timedelta(days=7)

    def sof_zman_kidush_levana_between_moldos(self) -> _dt.datetime:
        """Halfway between this molad and the next."""
        return self.as_datetime() + _HALF_MONTH

    def sof_zman_kidush_levana_15_days(self) -> _dt.datetime:
        return self.as_datetime() + _dt.timedelta(days=15)


def molad(year: int, month: int) -> Molad:
    """Return the molad of *month* in Hebrew *year*.

    :raises InvalidDateError: if the month does not exist in that year.
    :raises UnsupportedRangeError: if the civil day lies outside the
        supported range (the molad of Tishrei of year 1 falls on the
        evening before the calendar starts).
    """
    validate_hebrew(year, month, 1)
    chalakim = chalakim_since_molad_tohu(year, month)
    days, parts = divmod(chalakim, CHALAKIM_PER_DAY)
    hours, parts = divmod(parts, CHALAKIM_PER_HOUR)
    minutes, remainder = divmod(parts, CHALAKIM_PER_MINUTE)
    absolute = days + JEWISH_EPOCH
    if hours >= 6:
        absolute += 1
    hours = (hours + 18) % 24
    return Molad(
        chalakim_since_epoch=chalakim,
        date=HebrewDate.from_absolute(absolute),
        hours=hours,
        minutes=minutes,
        chalakim=remainder,
    )


__all__ = ["Molad", "molad", "JERUSALEM_STANDARD_TIME"]
