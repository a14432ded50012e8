"""Tests for the whole-year listings."""

from luachflow.core.hebrew_date import (
    ADAR,
    ADAR_II,
    CHESHVAN,
    NISSAN,
    SIVAN,
    TEVES,
    TISHREI,
    HebrewDate,
)
from luachflow.core.year_events import (
    SHABBOS_ROSH_CHODESH,
    get_parsha_schedule,
    get_year_events,
)
from luachflow.data.parshiyos import Parsha


class TestYearEvents:
    """Events of 5784."""

    def test_labels(self):
        events = get_year_events(5784)
        assert events[HebrewDate.from_hebrew(5784, TISHREI, 1)] == ["ROSH_HASHANA"]
        assert events[HebrewDate.from_hebrew(5784, TISHREI, 30)] == ["ROSH_CHODESH"]
        assert events[HebrewDate.from_hebrew(5784, CHESHVAN, 1)] == ["ROSH_CHODESH"]
        assert events[HebrewDate.from_hebrew(5784, TEVES, 1)] == ["CHANUKAH", "ROSH_CHODESH"]
        assert events[HebrewDate.from_hebrew(5784, ADAR, 29)] == ["SHKALIM"]
        assert events[HebrewDate.from_hebrew(5784, ADAR_II, 13)] == ["ZACHOR"]
        assert events[HebrewDate.from_hebrew(5784, ADAR_II, 11)] == ["FAST_OF_ESTHER"]

    def test_shabbos_rosh_chodesh(self):
        events = get_year_events(5784)
        assert events[HebrewDate.from_hebrew(5784, SIVAN, 30)] == [
            "ROSH_CHODESH", SHABBOS_ROSH_CHODESH]

    def test_days_without_events_are_omitted(self):
        events = get_year_events(5784)
        assert HebrewDate.from_hebrew(5784, CHESHVAN, 12) not in events

    def test_keys_in_calendar_order(self):
        keys = list(get_year_events(5784))
        assert keys == sorted(keys)
        assert keys[0] == HebrewDate.from_hebrew(5784, TISHREI, 1)
        assert all(k.hebrew_year == 5784 for k in keys)

    def test_israel_drops_second_days(self):
        diaspora = get_year_events(5784)
        israel = get_year_events(5784, in_israel=True)
        day = HebrewDate.from_hebrew(5784, NISSAN, 22)
        assert diaspora[day] == ["PESACH"]
        assert day not in israel

    def test_modern_holidays(self):
        day = HebrewDate.from_hebrew(5784, 2, 6)
        assert day not in get_year_events(5784)
        assert get_year_events(5784, use_modern_holidays=True)[day] == ["YOM_HAATZMAUT"]


class TestParshaSchedule:
    """The Shabbos readings of a year."""

    def test_5784(self):
        schedule = get_parsha_schedule(5784)
        assert len(schedule) == 51
        first_date, first = schedule[0]
        assert first_date == HebrewDate.from_gregorian(2023, 9, 23)
        assert first is Parsha.HAAZINU
        last_date, last = schedule[-1]
        assert last_date == HebrewDate.from_gregorian(2024, 9, 28)
        assert last is Parsha.NITZAVIM_VAYEILECH

    def test_all_shabbosos(self):
        for date, reading in get_parsha_schedule(5784, in_israel=True):
            assert date.day_of_week == 7
            assert reading is not Parsha.NONE
            assert not reading.is_special

    def test_israel_reads_an_extra_week_in_5782(self):
        assert len(get_parsha_schedule(5782)) == 52
        assert len(get_parsha_schedule(5782, in_israel=True)) == 53
