"""Utility helpers for Minimal Task."""

from .datetime import now_local, format_date, next_day, DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT

__all__ = ["now_local", "format_date", "next_day", "DEFAULT_DATE_FORMAT", "DEFAULT_TIME_FORMAT"]
