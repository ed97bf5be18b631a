"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import List


def add_months(from_date: date, months: int) -> date:
    """Shift a date by whole calendar months, clamping the day to the month's end"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def monthly_due_dates(start: date, count: int) -> List[date]:
    """Generate `count` monthly due dates anchored on `start` (inclusive)"""
    return [add_months(start, i) for i in range(count)]
