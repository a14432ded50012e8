"""luachflow command line entry point.

This script can be invoked directly (``python -m luachflow.main``), via
the package's ``__main__`` module, or through the ``luachflow`` console
script.  It prints the calendar facts of one day as JSON::

    luachflow 2022-05-28 --israel
    luachflow --hebrew 5784 1 15 --modern

With no date the current day is used.  Flags left off the command line
fall back to the ``calendar`` section of the configuration (see
:mod:`luachflow.config`).
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import AppConfig, get_app_config
from .core.errors import CalendarError
from .core.hebrew_date import HebrewDate
from .core.holidays import HolidayEngine
from .core.tefila_rules import TefilaRules
from .utils.calendar_logger import configure_calendar_logger

logger = logging.getLogger(__name__)


def _parse_gregorian(text: str) -> HebrewDate:
    try:
        year_s, month_s, day_s = text.rsplit("-", 2)
        year, month, day = int(year_s), int(month_s), int(day_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {text!r}")
    return HebrewDate.from_gregorian(year, month, day)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luachflow",
        description="Print the Hebrew calendar facts of a day as JSON.",
    )
    parser.add_argument("date", nargs="?", help="Gregorian date, YYYY-MM-DD (default: today)")
    parser.add_argument("--hebrew", nargs=3, type=int, metavar=("YEAR", "MONTH", "DAY"),
                        help="Hebrew date instead of a Gregorian one (Nissan = 1, Adar II = 13)")
    parser.add_argument("--israel", action="store_true", default=None,
                        help="use the Israeli holiday and parsha schedule")
    parser.add_argument("--modern", action="store_true", default=None,
                        help="include the modern Israeli holidays")
    parser.add_argument("--log-level", default=None,
                        help="log level (default: from configuration)")
    return parser


def describe(engine: HolidayEngine, rules: TefilaRules) -> Dict[str, Any]:
    """Return the facts of the engine's day as a JSON-serialisable dict."""
    date = engine.date
    fact = engine.fact()
    classification = date.classification
    return {
        "gregorian": {
            "year": date.gregorian_year,
            "month": date.gregorian_month,
            "day": date.gregorian_day,
        },
        "hebrew": {
            "year": date.hebrew_year,
            "month": date.hebrew_month,
            "day": date.hebrew_day,
        },
        "absolute_day": date.absolute_day,
        "day_of_week": date.day_of_week,
        "is_leap_year": date.is_leap_year,
        "year_length": date.days_in_year,
        "kviah": {
            "rosh_hashana_day_of_week": classification.rosh_hashana_day_of_week,
            "pattern": classification.pattern.name,
            "pesach_day_of_week": classification.pesach_day_of_week,
        },
        "holiday": fact.holiday_code.name if fact.holiday_code is not None else None,
        "is_yom_tov": fact.is_yom_tov,
        "is_erev_yom_tov": fact.is_erev_yom_tov,
        "is_taanis": fact.is_taanis,
        "is_chol_hamoed": fact.is_chol_hamoed,
        "is_rosh_chodesh": fact.is_rosh_chodesh,
        "omer_day": fact.omer_day,
        "day_of_chanukah": engine.day_of_chanukah(),
        "has_candle_lighting": engine.has_candle_lighting(),
        "is_assur_bemelacha": engine.is_assur_bemelacha(),
        "parsha": engine.parsha().name,
        "special_shabbos": engine.special_shabbos().name,
        "tachanun_shacharis": rules.is_tachanun_recited_shacharis(engine),
        "tachanun_mincha": rules.is_tachanun_recited_mincha(engine),
    }


def run(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = config if config is not None else get_app_config()

    try:
        configure_calendar_logger(
            args.log_level or cfg.get("logging", "level", default="WARNING"),
            cfg.get("logging", "file", default=None),
        )
    except ValueError as exc:
        print(f"luachflow: error: {exc}", file=sys.stderr)
        return 2

    in_israel = args.israel if args.israel is not None else bool(
        cfg.get("calendar", "in_israel", default=False))
    modern = args.modern if args.modern is not None else bool(
        cfg.get("calendar", "use_modern_holidays", default=False))

    try:
        if args.hebrew is not None:
            date = HebrewDate.from_hebrew(*args.hebrew)
        elif args.date is not None:
            date = _parse_gregorian(args.date)
        else:
            date = HebrewDate.from_date(_dt.date.today())
    except (CalendarError, argparse.ArgumentTypeError) as exc:
        logger.debug("Rejected input: %s", exc)
        print(f"luachflow: error: {exc}", file=sys.stderr)
        return 2

    engine = HolidayEngine(date, in_israel=in_israel, use_modern_holidays=modern)
    rules = TefilaRules.from_config(cfg)
    print(json.dumps(describe(engine, rules), indent=2))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
