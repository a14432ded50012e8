"""
year_events.py – every event of a Hebrew year, and its parsha schedule.

Both listings walk the year from 1 Tishrei and ask the holiday and
parsha engines about each day, so they can never disagree with the
single-day answers.  Labels are enum names (``"PESACH"``,
``"ROSH_CHODESH"``, ``"SHKALIM"``...), not display text.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from ..data.parshiyos import Parsha
from .hebrew_date import SATURDAY, TISHREI, HebrewDate
from .holidays import HolidayCode, HolidayEngine

logger = logging.getLogger(__name__)

SHABBOS_ROSH_CHODESH = "SHABBOS_ROSH_CHODESH"


def _add(r: Dict[HebrewDate, List[str]], d: HebrewDate, lbl: str) -> None:
    r.setdefault(d, []).append(lbl)


def _first_shabbos(year: int) -> HebrewDate:
    rosh_hashana = HebrewDate.from_hebrew(year, TISHREI, 1)
    return rosh_hashana.forward((SATURDAY - rosh_hashana.day_of_week) % 7)


def get_year_events(
    year: int,
    in_israel: bool = False,
    use_modern_holidays: bool = False,
) -> Dict[HebrewDate, List[str]]:
    """All events (holidays, Rosh Chodesh, special Shabbosos) of a Hebrew year.

    Days without events are omitted.  Keys are in calendar order.
    """
    result: Dict[HebrewDate, List[str]] = {}
    date = HebrewDate.from_hebrew(year, TISHREI, 1)
    for _ in range(date.days_in_year):
        engine = HolidayEngine(date, in_israel, use_modern_holidays)
        code = engine.yom_tov_index()
        if code is not None:
            _add(result, date, code.name)
        if engine.is_rosh_chodesh():
            _add(result, date, HolidayCode.ROSH_CHODESH.name)
            if date.day_of_week == SATURDAY:
                _add(result, date, SHABBOS_ROSH_CHODESH)
        special = engine.special_shabbos()
        if special is not Parsha.NONE:
            _add(result, date, special.name)
        date = date.forward()
    logger.debug("Year %d: %d days with events", year, len(result))
    return result


def get_parsha_schedule(year: int, in_israel: bool = False) -> List[Tuple[HebrewDate, Parsha]]:
    """Every Shabbos of the year with its weekly reading.

    A Shabbos on which a Yom Tov reading replaces the weekly portion is
    left out.
    """
    schedule: List[Tuple[HebrewDate, Parsha]] = []
    shabbos = _first_shabbos(year)
    while shabbos.hebrew_year == year:
        reading = HolidayEngine(shabbos, in_israel).parsha()
        if reading is not Parsha.NONE:
            schedule.append((shabbos, reading))
        shabbos = shabbos.forward(7)
    return schedule


__all__ = ["get_year_events", "get_parsha_schedule", "SHABBOS_ROSH_CHODESH"]
