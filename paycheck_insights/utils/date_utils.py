"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List

FRIDAY = 4  # date.weekday(): Monday=0 ... Sunday=6


def generate_date_range(start: date, num_days: int) -> List[date]:
    """Generate num_days consecutive dates beginning at start"""
    return [start + timedelta(days=i) for i in range(max(num_days, 0))]


def window_start(end: date, num_days: int) -> date:
    """First day of a num_days window that ends on (and includes) end"""
    return end - timedelta(days=num_days - 1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def calendar_months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, ignoring day of month. May be negative."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def days_until_weekday(from_date: date, weekday: int) -> int:
    """Days until the next given weekday, 1..7 (same weekday counts as a full week)"""
    return (weekday - from_date.weekday()) % 7 or 7
