"""
tefila_rules.py – when Tachanun is said.

Customs differ between communities, so every rule that is not universal
is a flag on :class:`TefilaRules`.  The defaults follow the common
Ashkenazic practice.  Flags can be set from the ``tefila`` section of
the application config.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from .holidays import HolidayCode, HolidayEngine
from .hebrew_date import (
    ADAR,
    ADAR_II,
    FRIDAY,
    IYAR,
    NISSAN,
    SATURDAY,
    SIVAN,
    SUNDAY,
    TISHREI,
)

logger = logging.getLogger(__name__)

# A day without Tachanun also removes it from the previous Mincha,
# except for these days
_MINCHA_BEFORE_EXEMPT = frozenset({
    HolidayCode.EREV_ROSH_HASHANA,
    HolidayCode.EREV_YOM_KIPPUR,
    HolidayCode.PESACH_SHENI,
})


@dataclass(frozen=True)
class TefilaRules:
    """Minhag flags for Tachanun.

    :param tachanun_recited_end_of_tishrei: said from 22 Tishrei on;
        otherwise not until Cheshvan.
    :param tachanun_recited_week_after_shavuos: said from 7 Sivan on;
        otherwise not until 13 Sivan (14 outside Israel, see below).
    :param tachanun_recited_13_sivan_out_of_israel: outside Israel, said
        on 13 Sivan (the Israeli Isru Chag timing).
    :param tachanun_recited_pesach_sheni: said on 14 Iyar.
    :param tachanun_recited_15_iyar_out_of_israel: outside Israel, said
        on 15 Iyar (the second day of Pesach Sheni in some communities).
    :param tachanun_recited_mincha_erev_lag_baomer: said at Mincha on
        17 Iyar.
    :param tachanun_recited_shivas_yemei_hamiluim: said from 23 Adar
        (Adar II in a leap year) to the end of the month.
    :param tachanun_recited_week_of_hod: said from 14 to 20 Iyar.
    :param tachanun_recited_week_of_purim: said from 11 to 17 Adar.
    :param tachanun_recited_fridays: said on Friday mornings.
    :param tachanun_recited_sundays: said on Sundays.
    :param tachanun_recited_mincha_all_year: said at Mincha at all.
    """

    tachanun_recited_end_of_tishrei: bool = True
    tachanun_recited_week_after_shavuos: bool = False
    tachanun_recited_13_sivan_out_of_israel: bool = True
    tachanun_recited_pesach_sheni: bool = False
    tachanun_recited_15_iyar_out_of_israel: bool = True
    tachanun_recited_mincha_erev_lag_baomer: bool = False
    tachanun_recited_shivas_yemei_hamiluim: bool = True
    tachanun_recited_week_of_hod: bool = True
    tachanun_recited_week_of_purim: bool = True
    tachanun_recited_fridays: bool = True
    tachanun_recited_sundays: bool = True
    tachanun_recited_mincha_all_year: bool = True

    @classmethod
    def from_config(cls, config: Any) -> "TefilaRules":
        """Build the rules from the ``tefila`` section of an ``AppConfig``.

        Unknown keys are ignored with a warning; missing keys keep their
        defaults.
        """
        section: Dict[str, Any] = config.get("tefila", default={}) or {}
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in section.items():
            if key not in known:
                logger.warning("Ignoring unknown tefila setting %r", key)
                continue
            kwargs[key] = bool(value)
        return cls(**kwargs)

    # -- Shacharis ----------------------------------------------------------

    def _is_purim_month(self, engine: HolidayEngine) -> bool:
        month = engine.date.hebrew_month
        if engine.date.is_leap_year:
            return month == ADAR_II
        return month == ADAR

    def _sivan_resumes(self, engine: HolidayEngine) -> int:
        if self.tachanun_recited_week_after_shavuos:
            return 7
        if not engine.in_israel and not self.tachanun_recited_13_sivan_out_of_israel:
            return 14
        return 13

    def _is_yom_tov_without_tachanun(self, engine: HolidayEngine) -> bool:
        code = engine.yom_tov_index()
        if code == HolidayCode.PESACH_SHENI:
            return not self.tachanun_recited_pesach_sheni
        # Erev Yom Tov counts as Yom Tov here
        return engine.is_yom_tov() or engine.is_erev_yom_tov()

    def is_tachanun_recited_shacharis(self, engine: HolidayEngine) -> bool:
        """True if Tachanun is said at Shacharis on the engine's day."""
        date = engine.date
        code = engine.yom_tov_index()
        day = date.hebrew_day
        month = date.hebrew_month
        dow = date.day_of_week

        if dow == SATURDAY:
            return False
        if dow == SUNDAY and not self.tachanun_recited_sundays:
            return False
        if dow == FRIDAY and not self.tachanun_recited_fridays:
            return False
        if month == NISSAN:
            return False
        if month == TISHREI:
            if self.tachanun_recited_end_of_tishrei:
                if 8 < day < 22:
                    return False
            elif day > 8:
                return False
        if month == SIVAN and day < self._sivan_resumes(engine):
            return False
        if self._is_yom_tov_without_tachanun(engine):
            return False
        if (not engine.in_israel
                and not self.tachanun_recited_pesach_sheni
                and not self.tachanun_recited_15_iyar_out_of_israel
                and month == IYAR and day == 15):
            return False
        if code == HolidayCode.TISHA_BEAV or engine.is_isru_chag() or engine.is_rosh_chodesh():
            return False
        if (not self.tachanun_recited_shivas_yemei_hamiluim
                and self._is_purim_month(engine) and day > 22):
            return False
        if (not self.tachanun_recited_week_of_purim
                and self._is_purim_month(engine) and 10 < day < 18):
            return False
        if engine.use_modern_holidays and code in (HolidayCode.YOM_HAATZMAUT,
                                                   HolidayCode.YOM_YERUSHALAYIM):
            return False
        if not self.tachanun_recited_week_of_hod and month == IYAR and 13 < day < 21:
            return False
        return True

    # -- Mincha -------------------------------------------------------------

    def is_tachanun_recited_mincha(self, engine: HolidayEngine) -> bool:
        """True if Tachanun is said at Mincha on the engine's day.

        Mincha follows Shacharis, and is also skipped on the afternoon
        before a day without Tachanun, except before Erev Rosh Hashana,
        Erev Yom Kippur and Pesach Sheni.
        """
        if not self.tachanun_recited_mincha_all_year:
            return False
        if engine.date.day_of_week == FRIDAY:
            return False
        if not self.is_tachanun_recited_shacharis(engine):
            return False
        tomorrow = engine.forward()
        tomorrow_code = tomorrow.yom_tov_index()
        if (not self.is_tachanun_recited_shacharis(tomorrow)
                and tomorrow_code not in _MINCHA_BEFORE_EXEMPT):
            return False
        if (not self.tachanun_recited_mincha_erev_lag_baomer
                and tomorrow_code == HolidayCode.LAG_BAOMER):
            return False
        return True


__all__ = ["TefilaRules"]
