"""
holidays.py – holidays, fasts, Rosh Chodesh, Omer and Chanukah.

Provides:
  - :class:`HolidayCode`, the holiday or fast that falls on a day.
  - :class:`HolidayEngine`, which wraps a :class:`HebrewDate` together
    with the Israel / diaspora and modern-holiday flags and answers every
    holiday question about that day.
  - :class:`HolidayFact`, a flat summary of the common answers.

Holidays are resolved by a per-month rule function, mirroring the way
the calendar is laid out.  Weekday shifts are part of the rules: a fast
that would fall on Shabbos is postponed to Sunday (the Fast of Esther is
moved back to Thursday instead), and the modern Israeli days carry their
own shifts so they never touch Shabbos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, Optional

from ..data.parshiyos import Parsha
from . import parsha as _parsha
from .hebrew_date import (
    ADAR,
    ADAR_II,
    AV,
    ELUL,
    FRIDAY,
    IYAR,
    KISLEV,
    MONDAY,
    NISSAN,
    SATURDAY,
    SHEVAT,
    SIVAN,
    SUNDAY,
    TAMMUZ,
    TEVES,
    THURSDAY,
    TISHREI,
    TUESDAY,
    WEDNESDAY,
    HebrewDate,
    elapsed_days,
)

logger = logging.getLogger(__name__)

# Solar cycle of 28 years of 365.25 days
_BIRKAS_HACHAMAH_CYCLE = 10227
# Day of the cycle on which the tekufa of Nissan falls on Wednesday
_BIRKAS_HACHAMAH_DAY = 172


class HolidayCode(IntEnum):
    """Holidays and fasts.  Values are stable and may be stored."""

    EREV_PESACH = 0
    PESACH = 1
    CHOL_HAMOED_PESACH = 2
    PESACH_SHENI = 3
    EREV_SHAVUOS = 4
    SHAVUOS = 5
    SEVENTEEN_OF_TAMMUZ = 6
    TISHA_BEAV = 7
    TU_BEAV = 8
    EREV_ROSH_HASHANA = 9
    ROSH_HASHANA = 10
    FAST_OF_GEDALYAH = 11
    EREV_YOM_KIPPUR = 12
    YOM_KIPPUR = 13
    EREV_SUCCOS = 14
    SUCCOS = 15
    CHOL_HAMOED_SUCCOS = 16
    HOSHANA_RABBA = 17
    SHEMINI_ATZERES = 18
    SIMCHAS_TORAH = 19
    CHANUKAH = 21
    TENTH_OF_TEVES = 22
    TU_BESHVAT = 23
    FAST_OF_ESTHER = 24
    PURIM = 25
    SHUSHAN_PURIM = 26
    PURIM_KATAN = 27
    EREV_ROSH_CHODESH = 28
    ROSH_CHODESH = 29
    YOM_HASHOAH = 30
    YOM_HAZIKARON = 31
    YOM_HAATZMAUT = 32
    YOM_YERUSHALAYIM = 33
    LAG_BAOMER = 34
    SHUSHAN_PURIM_KATAN = 35


_EREV_YOM_TOV = frozenset({
    HolidayCode.EREV_PESACH,
    HolidayCode.EREV_SHAVUOS,
    HolidayCode.EREV_ROSH_HASHANA,
    HolidayCode.EREV_YOM_KIPPUR,
    HolidayCode.EREV_SUCCOS,
    HolidayCode.HOSHANA_RABBA,
})

_TAANIS = frozenset({
    HolidayCode.SEVENTEEN_OF_TAMMUZ,
    HolidayCode.TISHA_BEAV,
    HolidayCode.YOM_KIPPUR,
    HolidayCode.FAST_OF_GEDALYAH,
    HolidayCode.TENTH_OF_TEVES,
    HolidayCode.FAST_OF_ESTHER,
})

_ASSUR_BEMELACHA = frozenset({
    HolidayCode.PESACH,
    HolidayCode.SHAVUOS,
    HolidayCode.SUCCOS,
    HolidayCode.SHEMINI_ATZERES,
    HolidayCode.SIMCHAS_TORAH,
    HolidayCode.ROSH_HASHANA,
    HolidayCode.YOM_KIPPUR,
})


# ---------------------------------------------------------------------------
# Per-month rules
# ---------------------------------------------------------------------------

def _nissan(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    if day == 14:
        return HolidayCode.EREV_PESACH
    if day in (15, 21) or (not in_israel and day in (16, 22)):
        return HolidayCode.PESACH
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return HolidayCode.CHOL_HAMOED_PESACH
    # 27 Nissan, moved off Friday and Sunday
    if modern and ((day == 26 and dow == THURSDAY)
                   or (day == 28 and dow == MONDAY)
                   or (day == 27 and dow not in (SUNDAY, FRIDAY))):
        return HolidayCode.YOM_HASHOAH
    return None


def _iyar(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    if modern and ((day == 4 and dow == TUESDAY)
                   or (day in (2, 3) and dow == WEDNESDAY)
                   or (day == 5 and dow == MONDAY)):
        return HolidayCode.YOM_HAZIKARON
    # 5 Iyar; Friday or Shabbos moves back to Thursday, Monday forward to Tuesday
    if modern and ((day == 5 and dow == WEDNESDAY)
                   or (day in (3, 4) and dow == THURSDAY)
                   or (day == 6 and dow == TUESDAY)):
        return HolidayCode.YOM_HAATZMAUT
    if day == 14:
        return HolidayCode.PESACH_SHENI
    if day == 18:
        return HolidayCode.LAG_BAOMER
    if modern and day == 28:
        return HolidayCode.YOM_YERUSHALAYIM
    return None


def _sivan(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day = date.hebrew_day
    if day == 5:
        return HolidayCode.EREV_SHAVUOS
    if day == 6 or (day == 7 and not in_israel):
        return HolidayCode.SHAVUOS
    return None


def _tammuz(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    if (day == 17 and dow != SATURDAY) or (day == 18 and dow == SUNDAY):
        return HolidayCode.SEVENTEEN_OF_TAMMUZ
    return None


def _av(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    if (day == 9 and dow != SATURDAY) or (day == 10 and dow == SUNDAY):
        return HolidayCode.TISHA_BEAV
    if day == 15:
        return HolidayCode.TU_BEAV
    return None


def _elul(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    if date.hebrew_day == 29:
        return HolidayCode.EREV_ROSH_HASHANA
    return None


def _tishrei(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    if day in (1, 2):
        return HolidayCode.ROSH_HASHANA
    if (day == 3 and dow != SATURDAY) or (day == 4 and dow == SUNDAY):
        return HolidayCode.FAST_OF_GEDALYAH
    if day == 9:
        return HolidayCode.EREV_YOM_KIPPUR
    if day == 10:
        return HolidayCode.YOM_KIPPUR
    if day == 14:
        return HolidayCode.EREV_SUCCOS
    if day == 15 or (day == 16 and not in_israel):
        return HolidayCode.SUCCOS
    if 17 <= day <= 20 or (day == 16 and in_israel):
        return HolidayCode.CHOL_HAMOED_SUCCOS
    if day == 21:
        return HolidayCode.HOSHANA_RABBA
    if day == 22:
        return HolidayCode.SHEMINI_ATZERES
    if day == 23 and not in_israel:
        return HolidayCode.SIMCHAS_TORAH
    return None


def _kislev(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    if date.hebrew_day >= 25:
        return HolidayCode.CHANUKAH
    return None


def _teves(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    day = date.hebrew_day
    if day in (1, 2) or (day == 3 and date.is_kislev_short):
        return HolidayCode.CHANUKAH
    if day == 10:
        return HolidayCode.TENTH_OF_TEVES
    return None


def _shevat(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    if date.hebrew_day == 15:
        return HolidayCode.TU_BESHVAT
    return None


def _purim_month(date: HebrewDate) -> Optional[HolidayCode]:
    day, dow = date.hebrew_day, date.day_of_week
    # 13 Adar on Friday or Shabbos moves back to Thursday
    if (day in (11, 12) and dow == THURSDAY) or (day == 13 and dow not in (FRIDAY, SATURDAY)):
        return HolidayCode.FAST_OF_ESTHER
    if day == 14:
        return HolidayCode.PURIM
    if day == 15:
        return HolidayCode.SHUSHAN_PURIM
    return None


def _adar(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    if not date.is_leap_year:
        return _purim_month(date)
    if date.hebrew_day == 14:
        return HolidayCode.PURIM_KATAN
    if date.hebrew_day == 15:
        return HolidayCode.SHUSHAN_PURIM_KATAN
    return None


def _adar_ii(date: HebrewDate, in_israel: bool, modern: bool) -> Optional[HolidayCode]:
    return _purim_month(date)


_MONTH_RULES: Dict[int, Callable[[HebrewDate, bool, bool], Optional[HolidayCode]]] = {
    NISSAN: _nissan,
    IYAR: _iyar,
    SIVAN: _sivan,
    TAMMUZ: _tammuz,
    AV: _av,
    ELUL: _elul,
    TISHREI: _tishrei,
    KISLEV: _kislev,
    TEVES: _teves,
    SHEVAT: _shevat,
    ADAR: _adar,
    ADAR_II: _adar_ii,
}


def yom_tov_index(
    date: HebrewDate,
    in_israel: bool = False,
    use_modern_holidays: bool = False,
) -> Optional[HolidayCode]:
    """Return the holiday or fast on *date*, or ``None``.

    Cheshvan has no holidays.  Rosh Chodesh and Erev Rosh Chodesh are
    never returned here; see :meth:`HolidayEngine.is_rosh_chodesh`.
    """
    rule = _MONTH_RULES.get(date.hebrew_month)
    if rule is None:
        return None
    return rule(date, in_israel, use_modern_holidays)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HolidayFact:
    """Summary of the holiday status of one day."""

    holiday_code: Optional[HolidayCode]
    is_yom_tov: bool
    is_erev_yom_tov: bool
    is_taanis: bool
    is_chol_hamoed: bool
    is_rosh_chodesh: bool
    omer_day: Optional[int]


@dataclass(frozen=True)
class HolidayEngine:
    """Holiday questions about a single day.

    :param date: the day.
    :param in_israel: use the Israeli schedule (one day of Yom Tov, the
        Israeli parsha cycle).
    :param use_modern_holidays: include Yom HaShoah, Yom HaZikaron,
        Yom HaAtzmaut and Yom Yerushalayim.
    """

    date: HebrewDate
    in_israel: bool = False
    use_modern_holidays: bool = False

    @classmethod
    def from_config(cls, date: HebrewDate, config: Any) -> "HolidayEngine":
        """Build an engine using the ``calendar`` section of an ``AppConfig``."""
        in_israel = bool(config.get("calendar", "in_israel", default=False))
        modern = bool(config.get("calendar", "use_modern_holidays", default=False))
        logger.debug("HolidayEngine for %s: in_israel=%s modern=%s",
                     date, in_israel, modern)
        return cls(date, in_israel=in_israel, use_modern_holidays=modern)

    def forward(self, days: int = 1) -> "HolidayEngine":
        """The same engine settings applied to a day *days* later."""
        return HolidayEngine(self.date.forward(days), self.in_israel, self.use_modern_holidays)

    # -- holiday code -------------------------------------------------------

    def yom_tov_index(self) -> Optional[HolidayCode]:
        return yom_tov_index(self.date, self.in_israel, self.use_modern_holidays)

    def is_yom_tov(self) -> bool:
        """True on any day with a holiday code, with two exceptions.

        Erev Yom Tov is not Yom Tov, except Hoshana Rabba and the last day
        of Chol Hamoed Pesach.  Fasts are not Yom Tov, except Yom Kippur.
        """
        code = self.yom_tov_index()
        if code is None:
            return False
        if self.is_erev_yom_tov() and not (
            code == HolidayCode.HOSHANA_RABBA
            or (code == HolidayCode.CHOL_HAMOED_PESACH and self.date.hebrew_day == 20)
        ):
            return False
        if code in _TAANIS and code != HolidayCode.YOM_KIPPUR:
            return False
        return True

    def is_erev_yom_tov(self) -> bool:
        code = self.yom_tov_index()
        return code in _EREV_YOM_TOV or (
            code == HolidayCode.CHOL_HAMOED_PESACH and self.date.hebrew_day == 20
        )

    def is_erev_yom_tov_sheni(self) -> bool:
        """True on a day followed by a second day of Yom Tov."""
        month, day = self.date.hebrew_month, self.date.hebrew_day
        if month == TISHREI and day == 1:
            return True
        if self.in_israel:
            return False
        return ((month == NISSAN and day in (15, 21))
                or (month == TISHREI and day in (15, 22))
                or (month == SIVAN and day == 6))

    def is_yom_tov_assur_bemelacha(self) -> bool:
        return self.yom_tov_index() in _ASSUR_BEMELACHA

    def is_assur_bemelacha(self) -> bool:
        """Shabbos or a Yom Tov on which work is forbidden."""
        return self.date.day_of_week == SATURDAY or self.is_yom_tov_assur_bemelacha()

    def is_tomorrow_shabbos_or_yom_tov(self) -> bool:
        return (self.date.day_of_week == FRIDAY
                or self.is_erev_yom_tov()
                or self.is_erev_yom_tov_sheni())

    def has_candle_lighting(self) -> bool:
        return self.is_tomorrow_shabbos_or_yom_tov()

    def is_aseres_yemei_teshuva(self) -> bool:
        return self.date.hebrew_month == TISHREI and self.date.hebrew_day <= 10

    def is_taanis(self) -> bool:
        return self.yom_tov_index() in _TAANIS

    def is_chol_hamoed_pesach(self) -> bool:
        return self.yom_tov_index() == HolidayCode.CHOL_HAMOED_PESACH

    def is_chol_hamoed_succos(self) -> bool:
        return self.yom_tov_index() == HolidayCode.CHOL_HAMOED_SUCCOS

    def is_chol_hamoed(self) -> bool:
        return self.is_chol_hamoed_pesach() or self.is_chol_hamoed_succos()

    def is_isru_chag(self) -> bool:
        """The day after Pesach, Shavuos or Succos."""
        month, day = self.date.hebrew_month, self.date.hebrew_day
        if self.in_israel:
            return ((month == NISSAN and day == 22)
                    or (month == SIVAN and day == 7)
                    or (month == TISHREI and day == 23))
        return ((month == NISSAN and day == 23)
                or (month == SIVAN and day == 8)
                or (month == TISHREI and day == 24))

    # -- months -------------------------------------------------------------

    def is_rosh_chodesh(self) -> bool:
        # Rosh Hashana is not Rosh Chodesh; Elul never has 30 days
        day = self.date.hebrew_day
        return (day == 1 and self.date.hebrew_month != TISHREI) or day == 30

    def is_erev_rosh_chodesh(self) -> bool:
        return self.date.hebrew_day == 29 and self.date.hebrew_month != ELUL

    def is_machar_chodesh(self) -> bool:
        """Shabbos followed by Rosh Chodesh on Sunday.

        Only the 29th counts.  A Shabbos on the 30th is itself Rosh
        Chodesh, and 29 Elul precedes Rosh Hashana, so both are excluded
        even though some calendars report them as Machar Chodesh.
        """
        return (self.date.day_of_week == SATURDAY
                and self.date.hebrew_day == 29
                and self.date.hebrew_month != ELUL)

    def is_shabbos_mevorchim(self) -> bool:
        """The Shabbos before Rosh Chodesh, on which the new month is blessed."""
        return (self.date.day_of_week == SATURDAY
                and 23 <= self.date.hebrew_day <= 29
                and self.date.hebrew_month != ELUL)

    # -- counted days -------------------------------------------------------

    def is_chanukah(self) -> bool:
        return self.yom_tov_index() == HolidayCode.CHANUKAH

    def day_of_chanukah(self) -> Optional[int]:
        """1-8 during Chanukah, otherwise ``None``."""
        if not self.is_chanukah():
            return None
        day = self.date.hebrew_day
        if self.date.hebrew_month == KISLEV:
            return day - 24
        return day + 5 if self.date.is_kislev_short else day + 6

    def omer_day(self) -> Optional[int]:
        """Day of the Omer, 1 on 16 Nissan through 49 on 5 Sivan."""
        month, day = self.date.hebrew_month, self.date.hebrew_day
        if month == NISSAN and day >= 16:
            return day - 15
        if month == IYAR:
            return day + 15
        if month == SIVAN and day < 6:
            return day + 44
        return None

    def is_birkas_hachamah(self) -> bool:
        """True on the day the sun blessing is said, once every 28 years."""
        days = elapsed_days(self.date.hebrew_year) + self.date.days_since_start_of_year
        return days % _BIRKAS_HACHAMAH_CYCLE == _BIRKAS_HACHAMAH_DAY

    # -- readings -----------------------------------------------------------

    def parsha(self) -> Parsha:
        return _parsha.parsha_of_week(self.date, self.in_israel)

    def special_shabbos(self) -> Parsha:
        return _parsha.special_shabbos(self.date)

    # -- summary ------------------------------------------------------------

    def fact(self) -> HolidayFact:
        return HolidayFact(
            holiday_code=self.yom_tov_index(),
            is_yom_tov=self.is_yom_tov(),
            is_erev_yom_tov=self.is_erev_yom_tov(),
            is_taanis=self.is_taanis(),
            is_chol_hamoed=self.is_chol_hamoed(),
            is_rosh_chodesh=self.is_rosh_chodesh(),
            omer_day=self.omer_day(),
        )


def holiday_fact(
    date: HebrewDate,
    in_israel: bool = False,
    use_modern_holidays: bool = False,
) -> HolidayFact:
    """Shortcut for ``HolidayEngine(date, ...).fact()``."""
    return HolidayEngine(date, in_israel, use_modern_holidays).fact()


__all__ = [
    "HolidayCode",
    "HolidayFact",
    "HolidayEngine",
    "yom_tov_index",
    "holiday_fact",
]
