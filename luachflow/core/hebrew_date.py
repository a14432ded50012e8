"""
hebrew_date.py – the Hebrew date engine.

Provides:
  - Exact molad arithmetic in chalakim (1/1080 of an hour) counted from
    molad BaHaRaD, the molad of Tishrei of year 1.
  - The dechiyos (postponements) that move Rosh Hashana off the day of
    the molad.
  - Leap years, month and year lengths and the year classification
    (kviah) that the holiday and parsha engines are keyed on.
  - Conversion between absolute day numbers, Hebrew dates and proleptic
    Gregorian dates, wrapped in the immutable :class:`HebrewDate`.

Absolute day numbers are shared with :mod:`luachflow.utils.gregorian`:
absolute day 1 is 1 January of Gregorian year 1.  Everything in this
module is integer arithmetic; there is no floating point anywhere, so
results do not drift over millennia.

Months are numbered from Nissan (1) as in the Torah.  Tishrei, the
first month of the civil year, is month 7.  In a leap year month 12 is
Adar I and month 13 is Adar II; in other years month 12 is plain Adar
and month 13 does not exist.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Tuple

from ..utils.gregorian import (
    absolute_to_gregorian,
    days_in_gregorian_month,
    gregorian_to_absolute,
)
from .errors import InvalidDateError, UnsupportedRangeError

if TYPE_CHECKING:
    from .molad import Molad

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NISSAN = 1
IYAR = 2
SIVAN = 3
TAMMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
CHESHVAN = 8
KISLEV = 9
TEVES = 10
SHEVAT = 11
ADAR = 12
ADAR_II = 13

SUNDAY = 1
MONDAY = 2
TUESDAY = 3
WEDNESDAY = 4
THURSDAY = 5
FRIDAY = 6
SATURDAY = 7

CHALAKIM_PER_MINUTE = 18
CHALAKIM_PER_HOUR = 1080
CHALAKIM_PER_DAY = 25920
# 29 days, 12 hours and 793 chalakim
CHALAKIM_PER_MONTH = 765433
# molad BaHaRaD: day 2 (Monday), 5 hours, 204 chalakim
CHALAKIM_MOLAD_TOHU = 31524

# 1 Tishrei of year Y is absolute day JEWISH_EPOCH + elapsed_days(Y) + 1
JEWISH_EPOCH = -1373429

MIN_YEAR = 1
MAX_YEAR = 999999

# Thresholds of the dechiyos, in chalakim after the start of the molad day
_MOLAD_ZAKEN = 18 * CHALAKIM_PER_HOUR
_GATRAD = 9 * CHALAKIM_PER_HOUR + 204
_BETUTAKPAT = 15 * CHALAKIM_PER_HOUR + 589


class CheshvanKislevPattern(IntEnum):
    """Lengths of Cheshvan and Kislev in a given year."""

    CHASERIM = 0  # both 29
    KESIDRAN = 1  # Cheshvan 29, Kislev 30
    SHELAIMIM = 2  # both 30


# ---------------------------------------------------------------------------
# Year arithmetic
# ---------------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """True if the Hebrew year has 13 months.

    Years 3, 6, 8, 11, 14, 17 and 19 of each 19-year cycle are leap years.
    """
    return (7 * year + 1) % 19 < 7


def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def last_month_of_year(year: int) -> int:
    """Adar II in leap years, Adar otherwise."""
    return ADAR_II if is_leap_year(year) else ADAR


def _month_of_year(year: int, month: int) -> int:
    """Position of *month* counted from Tishrei (Tishrei = 1)."""
    leap = is_leap_year(year)
    return (month + (6 if leap else 5)) % (13 if leap else 12) + 1


def months_elapsed(year: int, month: int) -> int:
    """Months from molad BaHaRaD to the molad of *month* in *year*."""
    cycles, year_of_cycle = divmod(year - 1, 19)
    return (235 * cycles
            + 12 * year_of_cycle
            + (7 * year_of_cycle + 1) // 19
            + _month_of_year(year, month) - 1)


def chalakim_since_molad_tohu(year: int, month: int) -> int:
    """Exact time of the molad of *month* in *year*, in chalakim since the epoch."""
    return CHALAKIM_MOLAD_TOHU + CHALAKIM_PER_MONTH * months_elapsed(year, month)


def add_dechiyos(year: int, molad_day: int, molad_parts: int) -> int:
    """Return the day of Rosh Hashana for a molad Tishrei.

    *molad_day* is the day of the molad counted from the epoch (day 0 is
    a Sunday) and *molad_parts* the chalakim elapsed in that day, which
    starts at 18:00 of the previous evening.

    Molad Zaken, GaTRaD and BeTUTaKPaT are all tested against the raw
    molad and together move Rosh Hashana by at most one day.  Lo ADU Rosh
    is tested afterwards against the (possibly postponed) day.
    """
    rosh_hashana_day = molad_day
    weekday = molad_day % 7
    molad_zaken = molad_parts >= _MOLAD_ZAKEN
    # Tuesday at or after 9h 204p in a regular year
    gatrad = weekday == 2 and molad_parts >= _GATRAD and not is_leap_year(year)
    # Monday at or after 15h 589p in the year after a leap year
    betutakpat = weekday == 1 and molad_parts >= _BETUTAKPAT and is_leap_year(year - 1)
    if molad_zaken or gatrad or betutakpat:
        rosh_hashana_day += 1
    # Lo ADU Rosh: never on Sunday, Wednesday or Friday
    if rosh_hashana_day % 7 in (0, 3, 5):
        rosh_hashana_day += 1
    return rosh_hashana_day


@lru_cache(maxsize=4096)
def elapsed_days(year: int) -> int:
    """Days from the epoch to Rosh Hashana of *year*."""
    molad_day, molad_parts = divmod(chalakim_since_molad_tohu(year, TISHREI), CHALAKIM_PER_DAY)
    return add_dechiyos(year, molad_day, molad_parts)


def year_length(year: int) -> int:
    """353, 354 or 355 days in a regular year; 383, 384 or 385 in a leap year."""
    return elapsed_days(year + 1) - elapsed_days(year)


def is_cheshvan_long(year: int) -> bool:
    return year_length(year) % 10 == 5


def is_kislev_short(year: int) -> bool:
    return year_length(year) % 10 == 3


def cheshvan_kislev_pattern(year: int) -> CheshvanKislevPattern:
    if is_kislev_short(year):
        return CheshvanKislevPattern.CHASERIM
    if is_cheshvan_long(year):
        return CheshvanKislevPattern.SHELAIMIM
    return CheshvanKislevPattern.KESIDRAN


def month_length(year: int, month: int) -> int:
    """Number of days in *month* of *year*.

    :raises InvalidDateError: if the month does not exist in that year.
    """
    if not NISSAN <= month <= last_month_of_year(year):
        raise InvalidDateError(f"Hebrew year {year} has no month {month}")
    if month in (IYAR, TAMMUZ, ELUL, TEVES, ADAR_II):
        return 29
    if month == ADAR and not is_leap_year(year):
        return 29
    if month == CHESHVAN and not is_cheshvan_long(year):
        return 29
    if month == KISLEV and is_kislev_short(year):
        return 29
    return 30


def days_since_start_of_year(year: int, month: int, day: int) -> int:
    """Day of the year, counting 1 Tishrei as day 1."""
    elapsed = day
    if month < TISHREI:
        for m in range(TISHREI, last_month_of_year(year) + 1):
            elapsed += month_length(year, m)
        for m in range(NISSAN, month):
            elapsed += month_length(year, m)
    else:
        for m in range(TISHREI, month):
            elapsed += month_length(year, m)
    return elapsed


def rosh_hashana_absolute(year: int) -> int:
    """Absolute day of 1 Tishrei of *year*."""
    return JEWISH_EPOCH + elapsed_days(year) + 1


def hebrew_to_absolute(year: int, month: int, day: int) -> int:
    """Absolute day of a Hebrew date.  The date is not validated."""
    return JEWISH_EPOCH + elapsed_days(year) + days_since_start_of_year(year, month, day)


def day_of_week(absolute: int) -> int:
    """Day of the week of an absolute day, 1 (Sunday) to 7 (Shabbos)."""
    return absolute % 7 + 1


MIN_ABSOLUTE_DAY = rosh_hashana_absolute(MIN_YEAR)
MAX_ABSOLUTE_DAY = rosh_hashana_absolute(MAX_YEAR + 1) - 1


def check_absolute(absolute: int) -> None:
    """Raise :class:`UnsupportedRangeError` if *absolute* has no Hebrew date here."""
    if not MIN_ABSOLUTE_DAY <= absolute <= MAX_ABSOLUTE_DAY:
        raise UnsupportedRangeError(
            f"Absolute day {absolute} is outside the supported range "
            f"{MIN_ABSOLUTE_DAY}..{MAX_ABSOLUTE_DAY}"
        )


def absolute_to_hebrew(absolute: int) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` of the Hebrew date of an absolute day."""
    check_absolute(absolute)
    # Tishrei to December is Gregorian year + 3761, the rest + 3760
    year = absolute_to_gregorian(absolute)[0] + 3760
    while absolute >= rosh_hashana_absolute(year + 1):
        year += 1
    while absolute < rosh_hashana_absolute(year):
        year -= 1
    month = TISHREI if absolute < hebrew_to_absolute(year, NISSAN, 1) else NISSAN
    while absolute > hebrew_to_absolute(year, month, month_length(year, month)):
        month += 1
    day = absolute - hebrew_to_absolute(year, month, 1) + 1
    return year, month, day


def validate_hebrew(year: int, month: int, day: int) -> None:
    """Reject Hebrew dates that do not exist.

    Day 30 of a 29-day month is an error, never silently moved to the 29th.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise UnsupportedRangeError(
            f"Hebrew year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )
    if month == ADAR_II and not is_leap_year(year):
        raise InvalidDateError(f"Hebrew year {year} is not a leap year and has no Adar II")
    if not NISSAN <= month <= ADAR_II:
        raise InvalidDateError(f"Hebrew month must be between 1 and 13, got {month}")
    length = month_length(year, month)
    if not 1 <= day <= length:
        raise InvalidDateError(
            f"Day {day} is invalid: month {month} of {year} has {length} days"
        )


def validate_gregorian(year: int, month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Gregorian month must be between 1 and 12, got {month}")
    length = days_in_gregorian_month(year, month)
    if not 1 <= day <= length:
        raise InvalidDateError(
            f"Day {day} is invalid: {year}-{month:02d} has {length} days"
        )


# ---------------------------------------------------------------------------
# Year classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearClassification:
    """The kviah of a year.

    ``rosh_hashana_day_of_week`` and ``pesach_day_of_week`` use 1 for
    Sunday and 7 for Shabbos.  The triple fixes the length of the year:
    Rosh Hashana to Pesach spans 190-192 days in a regular year and
    220-222 days in a leap year, one day more for each long month of
    the pattern, so the weekday gap and the pattern tell the two apart.
    """

    rosh_hashana_day_of_week: int
    pattern: CheshvanKislevPattern
    pesach_day_of_week: int

    @property
    def is_leap_year(self) -> bool:
        gap = (self.pesach_day_of_week - self.rosh_hashana_day_of_week) % 7
        return gap != 1 + int(self.pattern)

    @property
    def year_length(self) -> int:
        return (383 if self.is_leap_year else 353) + int(self.pattern)


@lru_cache(maxsize=1024)
def classify_year(year: int) -> YearClassification:
    return YearClassification(
        rosh_hashana_day_of_week=day_of_week(rosh_hashana_absolute(year)),
        pattern=cheshvan_kislev_pattern(year),
        pesach_day_of_week=day_of_week(hebrew_to_absolute(year, NISSAN, 15)),
    )


# ---------------------------------------------------------------------------
# HebrewDate
# ---------------------------------------------------------------------------

def _derive(absolute: int) -> Tuple[int, int, int, int, int, int, int]:
    hebrew = absolute_to_hebrew(absolute)
    gregorian = absolute_to_gregorian(absolute)
    return gregorian + hebrew + (absolute,)


@dataclass(frozen=True, order=True)
class HebrewDate:
    """A single day, in both the Gregorian and the Hebrew calendar.

    ``absolute_day`` is the source of truth; the other fields are derived
    from it when the snapshot is built and are checked against it on
    construction, so an inconsistent ``HebrewDate`` cannot exist.  Use the
    ``from_*`` constructors rather than passing all seven fields.

    Instances are immutable.  :meth:`forward`, :meth:`back` and the
    ``with_*`` methods return new snapshots.
    """

    gregorian_year: int
    gregorian_month: int
    gregorian_day: int
    hebrew_year: int
    hebrew_month: int
    hebrew_day: int
    absolute_day: int

    def __post_init__(self) -> None:
        fields = (
            self.gregorian_year,
            self.gregorian_month,
            self.gregorian_day,
            self.hebrew_year,
            self.hebrew_month,
            self.hebrew_day,
            self.absolute_day,
        )
        if fields != _derive(self.absolute_day):
            raise InvalidDateError(f"Inconsistent HebrewDate fields {fields}")

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_absolute(cls, absolute: int) -> "HebrewDate":
        return cls(*_derive(absolute))

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> "HebrewDate":
        """Build the snapshot of a proleptic Gregorian date.

        :raises InvalidDateError: if the month or day does not exist.
        :raises UnsupportedRangeError: if the day precedes 1 Tishrei of year 1.
        """
        validate_gregorian(year, month, day)
        return cls.from_absolute(gregorian_to_absolute(year, month, day))

    @classmethod
    def from_hebrew(cls, year: int, month: int, day: int) -> "HebrewDate":
        """Build the snapshot of a Hebrew date.

        :raises InvalidDateError: for Adar II in a regular year or a day
            past the end of the month.
        """
        validate_hebrew(year, month, day)
        return cls.from_absolute(hebrew_to_absolute(year, month, day))

    @classmethod
    def from_date(cls, date: _dt.date) -> "HebrewDate":
        return cls.from_absolute(date.toordinal())

    @classmethod
    def today(cls) -> "HebrewDate":
        return cls.from_date(_dt.date.today())

    # -- navigation ---------------------------------------------------------

    def forward(self, days: int = 1) -> "HebrewDate":
        """Return the date *days* days later (earlier if negative)."""
        return HebrewDate.from_absolute(self.absolute_day + days)

    def back(self, days: int = 1) -> "HebrewDate":
        return self.forward(-days)

    def with_hebrew(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> "HebrewDate":
        """Return a new date with some Hebrew fields replaced."""
        return HebrewDate.from_hebrew(
            self.hebrew_year if year is None else year,
            self.hebrew_month if month is None else month,
            self.hebrew_day if day is None else day,
        )

    def with_gregorian(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> "HebrewDate":
        """Return a new date with some Gregorian fields replaced."""
        return HebrewDate.from_gregorian(
            self.gregorian_year if year is None else year,
            self.gregorian_month if month is None else month,
            self.gregorian_day if day is None else day,
        )

    # -- derived facts ------------------------------------------------------

    @property
    def day_of_week(self) -> int:
        """1 (Sunday) to 7 (Shabbos)."""
        return day_of_week(self.absolute_day)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.hebrew_year)

    @property
    def days_in_month(self) -> int:
        return month_length(self.hebrew_year, self.hebrew_month)

    @property
    def days_in_year(self) -> int:
        return year_length(self.hebrew_year)

    @property
    def days_since_start_of_year(self) -> int:
        """Day of the Hebrew year, 1 Tishrei being day 1."""
        return days_since_start_of_year(self.hebrew_year, self.hebrew_month, self.hebrew_day)

    @property
    def is_cheshvan_long(self) -> bool:
        return is_cheshvan_long(self.hebrew_year)

    @property
    def is_kislev_short(self) -> bool:
        return is_kislev_short(self.hebrew_year)

    @property
    def classification(self) -> YearClassification:
        return classify_year(self.hebrew_year)

    def chalakim_since_molad_tohu(self) -> int:
        return chalakim_since_molad_tohu(self.hebrew_year, self.hebrew_month)

    def molad(self) -> "Molad":
        """The molad of this date's month."""
        from .molad import molad

        return molad(self.hebrew_year, self.hebrew_month)

    def to_date(self) -> _dt.date:
        """The Gregorian day as a :class:`datetime.date`.

        :raises UnsupportedRangeError: for years :mod:`datetime` cannot hold.
        """
        if not _dt.MINYEAR <= self.gregorian_year <= _dt.MAXYEAR:
            raise UnsupportedRangeError(
                f"Gregorian year {self.gregorian_year} cannot be represented as datetime.date"
            )
        return _dt.date(self.gregorian_year, self.gregorian_month, self.gregorian_day)


__all__ = [
    "NISSAN", "IYAR", "SIVAN", "TAMMUZ", "AV", "ELUL", "TISHREI", "CHESHVAN",
    "KISLEV", "TEVES", "SHEVAT", "ADAR", "ADAR_II",
    "SUNDAY", "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY",
    "CHALAKIM_PER_MINUTE", "CHALAKIM_PER_HOUR", "CHALAKIM_PER_DAY",
    "CHALAKIM_PER_MONTH", "CHALAKIM_MOLAD_TOHU", "JEWISH_EPOCH",
    "MIN_YEAR", "MAX_YEAR", "MIN_ABSOLUTE_DAY", "MAX_ABSOLUTE_DAY",
    "CheshvanKislevPattern", "YearClassification", "HebrewDate",
    "is_leap_year", "months_in_year", "last_month_of_year", "months_elapsed",
    "chalakim_since_molad_tohu", "add_dechiyos", "elapsed_days", "year_length",
    "is_cheshvan_long", "is_kislev_short", "cheshvan_kislev_pattern",
    "month_length", "days_since_start_of_year", "rosh_hashana_absolute",
    "hebrew_to_absolute", "absolute_to_hebrew", "day_of_week", "classify_year",
    "check_absolute", "validate_hebrew", "validate_gregorian",
]
