"""Shared fixtures for the luachflow test suite."""

import json
import logging

import pytest

from luachflow.config import AppConfig, load_config
from luachflow.core.hebrew_date import HebrewDate
from luachflow.core.holidays import HolidayEngine
from luachflow.utils.calendar_logger import LOGGER_NAME


@pytest.fixture
def make_engine():
    """Build a HolidayEngine for a Gregorian date."""

    def _make(year, month, day, in_israel=False, use_modern_holidays=False):
        return HolidayEngine(
            HebrewDate.from_gregorian(year, month, day),
            in_israel=in_israel,
            use_modern_holidays=use_modern_holidays,
        )

    return _make


@pytest.fixture
def hebrew_engine():
    """Build a HolidayEngine for a Hebrew date."""

    def _make(year, month, day, in_israel=False, use_modern_holidays=False):
        return HolidayEngine(
            HebrewDate.from_hebrew(year, month, day),
            in_israel=in_israel,
            use_modern_holidays=use_modern_holidays,
        )

    return _make


@pytest.fixture
def default_config() -> AppConfig:
    """The packaged defaults with no user overrides."""
    return load_config()


@pytest.fixture
def user_config_file(tmp_path):
    """Write a JSON override file and return its path."""

    def _write(data):
        path = tmp_path / "luachflow.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and settings a test added to the ``luachflow`` logger."""
    pkg_logger = logging.getLogger(LOGGER_NAME)
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield
    for h in list(pkg_logger.handlers):
        if h not in handlers:
            pkg_logger.removeHandler(h)
            h.close()
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
