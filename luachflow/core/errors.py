"""Exceptions raised by the calendar engines.

Both error types derive from :class:`ValueError` so that callers which
already guard user input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for all calendar errors."""


class InvalidDateError(CalendarError):
    """A Gregorian or Hebrew year/month/day that does not exist.

    Raised for months outside 1..12 (Gregorian) or 1..13 (Hebrew),
    Adar II in a year that is not a leap year, and days past the end of
    the month (for example the 30th of a 29-day Kislev).
    """


class UnsupportedRangeError(CalendarError):
    """A date outside the range the engines support.

    The Hebrew calendar starts at 1 Tishrei of year 1; dates before it
    have no Hebrew representation.  Dates after the last supported
    Hebrew year are rejected as well.
    """


__all__ = ["CalendarError", "InvalidDateError", "UnsupportedRangeError"]
