"""Utility helpers for reusable functionality."""

from .datetime import (
    get_app_timezone,
    is_iso_date,
    now_in_app_timezone,
    now_iso,
    today_iso,
)

__all__ = [
    "get_app_timezone",
    "is_iso_date",
    "now_in_app_timezone",
    "now_iso",
    "today_iso",
]
