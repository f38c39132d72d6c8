import calendar
from datetime import date, datetime
from typing import Dict

from app.schemas.analytics import DailyBucket


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def build_month_skeleton(start: datetime) -> Dict[str, DailyBucket]:
    """One zeroed bucket per day of the month containing ``start``, keyed by ISO date."""
    buckets: Dict[str, DailyBucket] = {}
    for day in range(1, days_in_month(start.year, start.month) + 1):
        key = date(start.year, start.month, day).isoformat()
        buckets[key] = DailyBucket(date=key)
    return buckets
