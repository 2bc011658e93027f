"""
Cross-cutting utilities for Bandroom.

Contains:
- dates: local calendar-date helpers
"""

from .dates import *

__all__ = [
    'compare_date_strings',
    'format_date',
    'get_date_strings_between',
    'get_month_bounds',
    'get_today_string',
    'get_yesterday',
    'is_date_future_or_today',
    'is_date_in_past',
    'parse_date_string',
    'sort_date_strings',
]
