"""Tests for the molad and the Kiddush Levana times."""

import datetime

import pytest

from luachflow.core.errors import InvalidDateError, UnsupportedRangeError
from luachflow.core.hebrew_date import ADAR_II, CHESHVAN, NISSAN, TISHREI, HebrewDate
from luachflow.core.molad import JERUSALEM_STANDARD_TIME, molad


class TestMoladValue:
    """The traditional presentation of the molad."""

    def test_tishrei_5784(self):
        m = molad(5784, TISHREI)
        assert (m.date.gregorian_year, m.date.gregorian_month, m.date.gregorian_day) == (2023, 9, 15)
        assert (m.hours, m.minutes, m.chalakim) == (5, 49, 0)
        assert m.day_of_week == 6
        assert m.chalakim_since_epoch == 54748392282

    def test_evening_molad_belongs_to_next_molad_day(self):
        # Motzei Shabbos, 18:33 and 1 chelek
        m = molad(5784, CHESHVAN)
        assert (m.date.gregorian_month, m.date.gregorian_day) == (10, 14)
        assert m.date.day_of_week == 7
        assert (m.hours, m.minutes, m.chalakim) == (18, 33, 1)
        assert m.day_of_week == 1

    def test_traditional_announcement(self):
        m = molad(5784, TISHREI)
        # day 6, 11 hours after 18:00 Thursday, 882 chalakim (49 minutes)
        assert m.traditional() == (6, 11, 882)

    def test_consecutive_months(self):
        first = molad(5784, TISHREI)
        second = molad(5784, CHESHVAN)
        assert second.chalakim_since_epoch - first.chalakim_since_epoch == 765433

    def test_derived_counts(self):
        m = molad(5784, TISHREI)
        assert m.days_since_epoch == 2112206
        assert m.weeks_since_epoch == 2112206 // 7

    def test_from_hebrew_date(self):
        date = HebrewDate.from_hebrew(5784, TISHREI, 20)
        assert date.molad() == molad(5784, TISHREI)
        assert date.chalakim_since_molad_tohu() == molad(5784, TISHREI).chalakim_since_epoch

    def test_molad_of_year_one_is_before_range(self):
        with pytest.raises(UnsupportedRangeError):
            molad(1, TISHREI)

    def test_missing_month(self):
        with pytest.raises(InvalidDateError):
            molad(5783, ADAR_II)


class TestMoladInstant:
    """Conversion to Jerusalem standard time."""

    def test_as_datetime(self):
        instant = molad(5784, TISHREI).as_datetime()
        assert instant == datetime.datetime(
            2023, 9, 15, 5, 28, 3, 504000, tzinfo=JERUSALEM_STANDARD_TIME
        )
        assert instant.utcoffset() == datetime.timedelta(hours=2)

    def test_chalakim_become_seconds(self):
        instant = molad(5784, CHESHVAN).as_datetime()
        assert instant == datetime.datetime(
            2023, 10, 14, 18, 12, 6, 837333, tzinfo=JERUSALEM_STANDARD_TIME
        )

    def test_kiddush_levana_window(self):
        m = molad(5782, NISSAN)
        start = m.as_datetime()
        assert m.tchilas_zman_kidush_levana_3_days() - start == datetime.timedelta(days=3)
        assert m.tchilas_zman_kidush_levana_7_days() - start == datetime.timedelta(days=7)
        assert m.sof_zman_kidush_levana_15_days() - start == datetime.timedelta(days=15)
        assert m.sof_zman_kidush_levana_between_moldos() - start == datetime.timedelta(
            days=14, hours=18, minutes=22, seconds=1, milliseconds=666
        )

    def test_before_year_one(self):
        with pytest.raises(UnsupportedRangeError):
            molad(3760, TISHREI).as_datetime()
