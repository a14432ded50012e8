"""Helpers shared by the calendar engines."""
