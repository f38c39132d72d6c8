import calendar
import re
from datetime import date, datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from app.core.config import get_settings
from app.schemas.analytics import DateRange

DAY_START = "00:00:00"
DAY_END = "23:59:59"

FIELD_PATTERN = re.compile(r"[0-9]+")


class MalformedTimestamp(ValueError):
    """A sale timestamp that does not read as "MM/DD/YYYY, HH:MM:SS"."""


def _split_numbers(part: str, separator: str, raw: str) -> List[int]:
    if separator not in part:
        raise MalformedTimestamp(f"Missing '{separator}' separator in timestamp {raw!r}")
    pieces = part.split(separator)
    if len(pieces) != 3:
        raise MalformedTimestamp(f"Expected three '{separator}'-separated fields in timestamp {raw!r}")
    fields = [piece.strip() for piece in pieces]
    if not all(FIELD_PATTERN.fullmatch(field) for field in fields):
        raise MalformedTimestamp(f"Non-numeric component in timestamp {raw!r}")
    return [int(field) for field in fields]


def parse_sale_timestamp(value: str) -> datetime:
    """Parse a store-local "MM/DD/YYYY, HH:MM:SS" string.

    The date part is always read as month/day/year. Month, day and time
    fields may or may not be zero-padded.

    Raises:
        MalformedTimestamp: if a separator is missing, a field is not an
            integer or the fields do not form a real date and time.
    """
    if not isinstance(value, str) or "," not in value:
        raise MalformedTimestamp(f"Missing ',' separator in timestamp {value!r}")

    date_part, _, time_part = value.partition(",")
    month, day, year = _split_numbers(date_part.strip(), "/", value)
    hour, minute, second = _split_numbers(time_part.strip(), ":", value)

    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise MalformedTimestamp(f"Invalid date or time in timestamp {value!r}: {e}") from None


def format_sale_timestamp(moment: datetime) -> str:
    """Render an instant the way sales are stamped, e.g. "04/06/2025, 10:59:36"."""
    return (
        f"{moment.month:02d}/{moment.day:02d}/{moment.year:04d}, "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def store_now() -> datetime:
    """Current wall-clock time in the store timezone, without tzinfo."""
    tz = ZoneInfo(get_settings().TIMEZONE)
    return datetime.now(tz).replace(tzinfo=None)


def resolve_date_range(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    today: Optional[date] = None
) -> DateRange:
    """Turn optional "MM/DD/YYYY" bounds into a concrete report window.

    Missing bounds default to the first and last day of the current month.
    An inverted range is returned as-is; it simply matches no sales.
    """
    today = today or store_now().date()

    if start_date:
        start = parse_sale_timestamp(f"{start_date}, {DAY_START}")
    else:
        start = datetime(today.year, today.month, 1)

    if end_date:
        end = parse_sale_timestamp(f"{end_date}, {DAY_END}")
    else:
        last_day = calendar.monthrange(today.year, today.month)[1]
        end = datetime(today.year, today.month, last_day, 23, 59, 59)

    return DateRange(start=start, end=end)
