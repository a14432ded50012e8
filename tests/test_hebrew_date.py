"""Tests for the Hebrew date engine."""

import datetime

import pytest

from luachflow.core.errors import CalendarError, InvalidDateError, UnsupportedRangeError
from luachflow.core.hebrew_date import (
    ADAR,
    ADAR_II,
    CHESHVAN,
    ELUL,
    IYAR,
    KISLEV,
    MIN_ABSOLUTE_DAY,
    NISSAN,
    SHEVAT,
    TEVES,
    TISHREI,
    CheshvanKislevPattern,
    HebrewDate,
    add_dechiyos,
    days_since_start_of_year,
    elapsed_days,
    hebrew_to_absolute,
    is_leap_year,
    month_length,
    rosh_hashana_absolute,
    year_length,
)

CHASERIM_YEARS = [5773, 5777, 5781]
CHASERIM_LEAP_YEARS = [5784, 5790, 5793]
KESIDRAN_YEARS = [5769, 5772, 5778, 5786, 5789, 5792]
KESIDRAN_LEAP_YEARS = [5782]
SHELAIMIM_YEARS = [5770, 5780, 5783, 5785, 5788, 5791, 5794]
SHELAIMIM_LEAP_YEARS = [5771, 5774, 5776, 5779, 5787, 5795]

LEAP_YEARS = {5160, 5771, 5774, 5776, 5779, 5782, 5784, 5787, 5790, 5793, 5795}


def _month_lengths(year):
    months = [TISHREI, CHESHVAN, KISLEV, TEVES, SHEVAT, ADAR]
    if is_leap_year(year):
        months.append(ADAR_II)
    months += [NISSAN, IYAR, 3, 4, 5, ELUL]
    return [month_length(year, m) for m in months]


class TestLeapYears:
    """Leap years follow the 19-year cycle."""

    @pytest.mark.parametrize("year", [5160, 5536] + list(range(5770, 5796)))
    def test_known_years(self, year):
        assert is_leap_year(year) is (year in LEAP_YEARS)

    def test_cycle_positions(self):
        positions = {y % 19 or 19 for y in range(1, 20) if is_leap_year(y)}
        assert positions == {3, 6, 8, 11, 14, 17, 19}

    def test_seven_leap_years_per_cycle(self):
        for start in range(1, 19 * 50, 19):
            assert sum(is_leap_year(y) for y in range(start, start + 19)) == 7


class TestMonthLengths:
    """Cheshvan and Kislev vary; every other month is fixed."""

    @pytest.mark.parametrize("year", CHASERIM_YEARS)
    def test_chaserim(self, year):
        assert _month_lengths(year) == [30, 29, 29, 29, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 353

    @pytest.mark.parametrize("year", CHASERIM_LEAP_YEARS)
    def test_chaserim_leap(self, year):
        assert _month_lengths(year) == [30, 29, 29, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 383

    @pytest.mark.parametrize("year", KESIDRAN_YEARS)
    def test_kesidran(self, year):
        assert _month_lengths(year) == [30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 354

    @pytest.mark.parametrize("year", KESIDRAN_LEAP_YEARS)
    def test_kesidran_leap(self, year):
        assert _month_lengths(year) == [30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 384

    @pytest.mark.parametrize("year", SHELAIMIM_YEARS)
    def test_shelaimim(self, year):
        assert _month_lengths(year) == [30, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 355

    @pytest.mark.parametrize("year", SHELAIMIM_LEAP_YEARS)
    def test_shelaimim_leap(self, year):
        assert _month_lengths(year) == [30, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29]
        assert year_length(year) == 385

    def test_months_sum_to_year_length(self):
        for year in range(5600, 5900):
            assert sum(_month_lengths(year)) == year_length(year)

    def test_year_lengths_are_valid(self):
        lengths = {year_length(y) for y in range(1, 3000)}
        assert lengths == {353, 354, 355, 383, 384, 385}

    def test_adar_ii_missing_in_regular_year(self):
        with pytest.raises(InvalidDateError):
            month_length(5783, ADAR_II)


class TestDechiyos:
    """Rosh Hashana postponements."""

    @pytest.mark.parametrize("year", range(5700, 5800))
    def test_never_on_sunday_wednesday_friday(self, year):
        assert HebrewDate.from_hebrew(year, TISHREI, 1).day_of_week not in (1, 4, 6)

    @pytest.mark.parametrize("year", range(5700, 5800))
    def test_reapplying_is_a_no_op(self, year):
        day = elapsed_days(year)
        assert add_dechiyos(year, day, 0) == day

    def test_molad_zaken(self):
        # Monday molad after noon moves to Tuesday; 5784 follows a regular year
        assert add_dechiyos(5784, 1, 19440) == 2
        assert add_dechiyos(5784, 1, 19439) == 1

    def test_lo_adu_rosh(self):
        assert add_dechiyos(5785, 0, 0) == 1
        assert add_dechiyos(5785, 3, 0) == 4
        assert add_dechiyos(5785, 5, 0) == 6

    def test_gatrad_only_in_regular_years(self):
        # 5783 is a regular year, 5784 a leap year
        assert add_dechiyos(5783, 2, 9924) == 4
        assert add_dechiyos(5784, 2, 9924) == 2

    def test_betutakpat_only_after_leap_year(self):
        # 5785 follows leap year 5784; 5784 follows regular 5783
        assert add_dechiyos(5785, 1, 16789) == 2
        assert add_dechiyos(5784, 1, 16789) == 1


class TestConversion:
    """Gregorian to Hebrew conversion and back."""

    def test_rosh_hashana_5771(self):
        date = HebrewDate.from_hebrew(5771, TISHREI, 1)
        assert (date.gregorian_year, date.gregorian_month, date.gregorian_day) == (2010, 9, 9)

    def test_nissan_5771(self):
        date = HebrewDate.from_hebrew(5771, NISSAN, 1)
        assert (date.gregorian_year, date.gregorian_month, date.gregorian_day) == (2011, 4, 5)

    def test_epoch(self):
        first = HebrewDate.from_hebrew(1, TISHREI, 1)
        assert first.absolute_day == MIN_ABSOLUTE_DAY == -1373427
        assert first.day_of_week == 2
        assert rosh_hashana_absolute(1) == -1373427

    def test_first_day_of_common_era(self):
        date = HebrewDate.from_gregorian(1, 1, 1)
        assert date.absolute_day == 1
        assert (date.hebrew_year, date.hebrew_month, date.hebrew_day) == (3761, TEVES, 18)

    def test_round_trip_absolute(self):
        start = hebrew_to_absolute(5700, TISHREI, 1)
        for absolute in range(start, start + 40000, 7):
            date = HebrewDate.from_absolute(absolute)
            assert hebrew_to_absolute(date.hebrew_year, date.hebrew_month, date.hebrew_day) == absolute
            assert HebrewDate.from_gregorian(
                date.gregorian_year, date.gregorian_month, date.gregorian_day
            ) == date

    def test_round_trip_over_two_millennia(self):
        start = datetime.date(1000, 1, 1).toordinal()
        end = datetime.date(3000, 1, 1).toordinal()
        for ordinal in range(start, end, 101):
            day = datetime.date.fromordinal(ordinal)
            date = HebrewDate.from_gregorian(day.year, day.month, day.day)
            assert HebrewDate.from_hebrew(date.hebrew_year, date.hebrew_month, date.hebrew_day) == date
            assert date.to_date() == day

    def test_from_date_and_to_date(self):
        day = datetime.date(2024, 4, 23)
        date = HebrewDate.from_date(day)
        assert date.to_date() == day
        assert (date.hebrew_year, date.hebrew_month, date.hebrew_day) == (5784, NISSAN, 15)

    def test_today(self):
        assert HebrewDate.today().to_date() == datetime.date.today()

    def test_days_since_start_of_year(self):
        assert days_since_start_of_year(5784, TISHREI, 1) == 1
        assert days_since_start_of_year(5784, ELUL, 29) == 383
        assert HebrewDate.from_hebrew(5782, IYAR, 27).days_since_start_of_year == 264


class TestNavigation:
    """Moving through months in both directions."""

    def test_forward_into_february(self):
        date = HebrewDate.from_gregorian(2011, 1, 31)
        assert (date.hebrew_year, date.hebrew_month, date.hebrew_day) == (5771, SHEVAT, 26)
        nxt = date.forward()
        assert (nxt.gregorian_month, nxt.gregorian_day) == (2, 1)
        assert (nxt.hebrew_month, nxt.hebrew_day) == (SHEVAT, 27)
        assert date.hebrew_day == 26

    def test_end_of_february_2011(self):
        # 5771 is a leap year, so this is Adar I
        date = HebrewDate.from_gregorian(2011, 2, 28)
        assert date.is_leap_year
        assert (date.hebrew_month, date.hebrew_day) == (ADAR, 24)

    @pytest.mark.parametrize(
        "last_day, first_day, hebrew",
        [
            ((2011, 2, 28), (2011, 3, 1), (5771, ADAR, 25)),
            ((2011, 3, 31), (2011, 4, 1), (5771, ADAR_II, 26)),
            ((2011, 4, 30), (2011, 5, 1), (5771, NISSAN, 27)),
            ((2011, 5, 31), (2011, 6, 1), (5771, IYAR, 28)),
            ((2011, 6, 30), (2011, 7, 1), (5771, 3, 29)),
            ((2011, 7, 31), (2011, 8, 1), (5771, 5, 1)),
            ((2011, 8, 31), (2011, 9, 1), (5771, ELUL, 2)),
            ((2011, 9, 30), (2011, 10, 1), (5772, TISHREI, 3)),
            ((2011, 10, 31), (2011, 11, 1), (5772, CHESHVAN, 4)),
            ((2011, 11, 30), (2011, 12, 1), (5772, KISLEV, 5)),
            ((2011, 12, 31), (2012, 1, 1), (5772, TEVES, 6)),
        ],
    )
    def test_forward_month_to_month(self, last_day, first_day, hebrew):
        date = HebrewDate.from_gregorian(*last_day).forward()
        assert (date.gregorian_year, date.gregorian_month, date.gregorian_day) == first_day
        assert (date.hebrew_year, date.hebrew_month, date.hebrew_day) == hebrew

    @pytest.mark.parametrize(
        "first_day, last_day, hebrew",
        [
            ((2011, 1, 1), (2010, 12, 31), (TEVES, 24)),
            ((2010, 12, 1), (2010, 11, 30), (KISLEV, 23)),
            ((2010, 11, 1), (2010, 10, 31), (CHESHVAN, 23)),
            ((2010, 10, 1), (2010, 9, 30), (TISHREI, 22)),
        ],
    )
    def test_back_month_to_month(self, first_day, last_day, hebrew):
        date = HebrewDate.from_gregorian(*first_day).back()
        assert (date.gregorian_year, date.gregorian_month, date.gregorian_day) == last_day
        assert (date.hebrew_month, date.hebrew_day) == hebrew

    def test_back_is_negative_forward(self):
        date = HebrewDate.from_hebrew(5784, ADAR_II, 14)
        assert date.back(400) == date.forward(-400)
        assert date.forward(400).back(400) == date

    def test_forward_is_monotonic(self):
        date = HebrewDate.from_hebrew(5783, ELUL, 1)
        for _ in range(800):
            nxt = date.forward()
            assert nxt > date
            assert nxt.absolute_day == date.absolute_day + 1
            date = nxt

    def test_with_hebrew(self):
        date = HebrewDate.from_gregorian(2024, 4, 23)
        moved = date.with_hebrew(month=TISHREI, day=1)
        assert (moved.hebrew_year, moved.hebrew_month, moved.hebrew_day) == (5784, TISHREI, 1)
        assert (moved.gregorian_year, moved.gregorian_month, moved.gregorian_day) == (2023, 9, 16)

    def test_with_gregorian(self):
        date = HebrewDate.from_gregorian(2024, 4, 23)
        assert date.with_gregorian(day=24).hebrew_day == 16


class TestValidation:
    """Invalid input is rejected, never adjusted."""

    def test_invalid_gregorian_month(self):
        with pytest.raises(InvalidDateError):
            HebrewDate.from_gregorian(2024, 13, 1)

    def test_invalid_gregorian_day(self):
        with pytest.raises(InvalidDateError):
            HebrewDate.from_gregorian(2023, 2, 29)

    def test_adar_ii_in_regular_year(self):
        with pytest.raises(InvalidDateError):
            HebrewDate.from_hebrew(5783, ADAR_II, 1)

    def test_day_thirty_of_short_month(self):
        # Kislev 5784 has 29 days
        with pytest.raises(InvalidDateError):
            HebrewDate.from_hebrew(5784, KISLEV, 30)
        with pytest.raises(InvalidDateError):
            HebrewDate.from_hebrew(5784, IYAR, 30)

    def test_month_out_of_range(self):
        with pytest.raises(InvalidDateError):
            HebrewDate.from_hebrew(5784, 14, 1)
        with pytest.raises(InvalidDateError):
            HebrewDate.from_hebrew(5784, 0, 1)

    def test_before_epoch(self):
        with pytest.raises(UnsupportedRangeError):
            HebrewDate.from_absolute(MIN_ABSOLUTE_DAY - 1)
        with pytest.raises(UnsupportedRangeError):
            HebrewDate.from_gregorian(-3760, 9, 6)

    def test_year_out_of_range(self):
        with pytest.raises(UnsupportedRangeError):
            HebrewDate.from_hebrew(0, TISHREI, 1)
        with pytest.raises(UnsupportedRangeError):
            HebrewDate.from_hebrew(1000000, TISHREI, 1)

    def test_inconsistent_fields(self):
        with pytest.raises(InvalidDateError):
            HebrewDate(2024, 4, 23, 5784, NISSAN, 16, 738999)

    def test_to_date_before_year_one(self):
        with pytest.raises(UnsupportedRangeError):
            HebrewDate.from_hebrew(3760, TISHREI, 1).to_date()

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidDateError, CalendarError)
        assert issubclass(UnsupportedRangeError, ValueError)


class TestClassification:
    """Year classification (kviah)."""

    def test_5784(self):
        kviah = HebrewDate.from_hebrew(5784, TISHREI, 1).classification
        assert kviah.rosh_hashana_day_of_week == 7
        assert kviah.pattern is CheshvanKislevPattern.CHASERIM
        assert kviah.pesach_day_of_week == 3
        assert kviah.is_leap_year
        assert kviah.year_length == 383

    @pytest.mark.parametrize("year", range(5700, 5800))
    def test_classification_matches_year(self, year):
        kviah = HebrewDate.from_hebrew(year, TISHREI, 1).classification
        assert kviah.is_leap_year == is_leap_year(year)
        assert kviah.year_length == year_length(year)

    def test_date_properties(self):
        date = HebrewDate.from_hebrew(5784, KISLEV, 1)
        assert date.is_kislev_short
        assert not date.is_cheshvan_long
        assert date.days_in_month == 29
        assert date.days_in_year == 383
