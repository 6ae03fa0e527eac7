"""
Date/time helpers for attendance day boundaries and leave day counts
"""
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo


def local_now(tz_name: Optional[str] = None) -> datetime:
    """
    Current wall-clock time used to derive the attendance day

    With no zone configured the server's local time is used.
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name))
    return datetime.now()


def count_working_days(start: date, end: date) -> int:
    """Count Monday-Friday days between start and end, both inclusive"""
    if end < start:
        return 0

    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5:
            days += 1
        current += timedelta(days=1)
    return days
