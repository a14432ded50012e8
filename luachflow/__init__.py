"""
Top-level package for luachflow.

luachflow computes the facts of the Hebrew calendar: conversion between
Gregorian and Hebrew dates, leap years and year types, the molad,
holidays and fasts, the Omer, the weekly parsha, the four special
Shabbosos and the Tachanun rules.

Example usage::

    from luachflow import HebrewDate, HolidayEngine

    date = HebrewDate.from_gregorian(2022, 5, 28)
    engine = HolidayEngine(date, in_israel=True)
    engine.parsha()          # Parsha.BAMIDBAR
    engine.fact().omer_day   # 42

All values are immutable.  If you need lower-level functionality, import
directly from the subpackages (``luachflow.core`` or ``luachflow.data``).
"""

from .config import AppConfig, get_app_config, load_config  # noqa: F401
from .core import (  # noqa: F401
    CalendarError,
    CheshvanKislevPattern,
    HebrewDate,
    HolidayCode,
    HolidayEngine,
    HolidayFact,
    InvalidDateError,
    Molad,
    TefilaRules,
    UnsupportedRangeError,
    YearClassification,
    get_parsha_schedule,
    get_year_events,
    holiday_fact,
    molad,
)
from .data import Parsha  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    "AppConfig",
    "get_app_config",
    "load_config",
    "CalendarError",
    "InvalidDateError",
    "UnsupportedRangeError",
    "CheshvanKislevPattern",
    "HebrewDate",
    "YearClassification",
    "HolidayCode",
    "HolidayEngine",
    "HolidayFact",
    "holiday_fact",
    "Molad",
    "molad",
    "Parsha",
    "TefilaRules",
    "get_parsha_schedule",
    "get_year_events",
]
