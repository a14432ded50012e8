"""Static calendar data."""

from .parshiyos import PARSHA_TABLE, Parsha

__all__ = ["PARSHA_TABLE", "Parsha"]
