"""Date utilities: patient age and days since surgery.

Both functions depend on "now"; callers may pass it explicitly so the
result is deterministic.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Optional, Union

from ..core.exceptions.domain_errors import InvalidArgumentError

SECONDS_PER_DAY = 24 * 60 * 60

DateLike = Union[date, datetime, str]


def _to_date(value: DateLike, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidArgumentError(f"{name} is not an ISO date: {value!r}") from None


def _to_utc_datetime(value: DateLike, name: str) -> datetime:
    """Date-only values mean midnight UTC; naive datetimes are taken as UTC."""
    if isinstance(value, str):
        text = value.replace("Z", "+00:00")
        try:
            value = date.fromisoformat(text) if len(text) == 10 else datetime.fromisoformat(text)
        except ValueError:
            raise InvalidArgumentError(f"{name} is not an ISO date: {value!r}") from None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def calculate_age(dob: DateLike, today: Optional[date] = None) -> int:
    """Age in whole years on ``today``.

    The year difference is reduced by one when the birthday has not yet
    happened this year (earlier month, or same month and earlier day).

    Args:
        dob: Date of birth
        today: Reference date (defaults to the current local date)

    Raises:
        InvalidArgumentError: If dob is not a date or lies after today
    """
    birth_date = _to_date(dob, "dob")
    today = _to_date(today, "today") if today is not None else date.today()

    if birth_date > today:
        raise InvalidArgumentError(f"dob {birth_date} is after {today}")

    age = today.year - birth_date.year
    month_diff = today.month - birth_date.month
    if month_diff < 0 or (month_diff == 0 and today.day < birth_date.day):
        age -= 1
    return age


def days_since_surgery(surgery_date: DateLike, now: Optional[DateLike] = None) -> int:
    """Whole days between surgery and now, rounded up.

    ``ceil(|now - surgery_date| / 1 day)``. The difference is absolute, so a
    surgery scheduled in the future also yields a positive count.

    Args:
        surgery_date: Date (or datetime) of surgery
        now: Reference instant (defaults to the current UTC time)
    """
    surgery = _to_utc_datetime(surgery_date, "surgery_date")
    current = _to_utc_datetime(now, "now") if now is not None else datetime.now(timezone.utc)

    elapsed = abs((current - surgery).total_seconds())
    return int(math.ceil(elapsed / SECONDS_PER_DAY))
