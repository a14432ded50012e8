"""Calendar engines: Hebrew dates, molad, holidays, parsha and tefila rules."""

from .errors import CalendarError, InvalidDateError, UnsupportedRangeError
from .hebrew_date import CheshvanKislevPattern, HebrewDate, YearClassification
from .holidays import HolidayCode, HolidayEngine, HolidayFact, holiday_fact
from .molad import Molad, molad
from .parsha import parsha_of_week, parsha_year_type, special_shabbos
from .tefila_rules import TefilaRules
from .year_events import get_parsha_schedule, get_year_events

__all__ = [
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
    "parsha_of_week",
    "parsha_year_type",
    "special_shabbos",
    "TefilaRules",
    "get_parsha_schedule",
    "get_year_events",
]
