"""Booking date-range validation and stay arithmetic.

Pure functions. Plain dates are treated as midnight of that day. A naive value
sharing a computation with an offset-aware one is read in the aware one's zone.
"""

import math
from datetime import date, datetime, time, timedelta
from enum import StrEnum

SECONDS_PER_DAY = 86_400
BOOKING_HORIZON_DAYS = 365


class ValidationVerdict(StrEnum):
    valid = "valid"
    invalid_date_range = "invalidDateRange"
    past_date = "pastDate"


VERDICT_MESSAGES: dict[ValidationVerdict, str] = {
    ValidationVerdict.invalid_date_range: "Check-out date must be after check-in date.",
    ValidationVerdict.past_date: "Check-in date cannot be in the past.",
}


def as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def midnight(value: date | datetime) -> datetime:
    """Naive start of the calendar day *value* falls on, in its own zone."""
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    return datetime.combine(value, time.min)


def align(first: date | datetime, second: date | datetime) -> tuple[datetime, datetime]:
    """Both values as datetimes that can be compared and subtracted."""
    start, end = as_datetime(first), as_datetime(second)
    if start.tzinfo is None and end.tzinfo is not None:
        start = start.replace(tzinfo=end.tzinfo)
    elif end.tzinfo is None and start.tzinfo is not None:
        end = end.replace(tzinfo=start.tzinfo)
    return start, end


def validate_date_range(
    checkin: date | datetime | None,
    checkout: date | datetime | None,
    today: date | datetime,
) -> ValidationVerdict:
    """Return the single verdict for a proposed stay.

    A checkout on or before the checkin wins over a checkin in the past.
    Missing dates are not this function's concern and yield ``valid``.
    """
    if checkin is None or checkout is None:
        return ValidationVerdict.valid

    start, end = align(checkin, checkout)
    if end <= start:
        return ValidationVerdict.invalid_date_range

    # wall-clock checkin against the calendar day
    if start.replace(tzinfo=None) < midnight(today):
        return ValidationVerdict.past_date

    return ValidationVerdict.valid


def verdict_message(verdict: ValidationVerdict) -> str | None:
    return VERDICT_MESSAGES.get(verdict)


def count_nights(checkin: date | datetime, checkout: date | datetime) -> int:
    """Nights between two dates, rounding any partial day up."""
    start, end = align(checkin, checkout)
    delta = end - start
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def total_price(price_per_day: float, nights: int) -> float:
    return price_per_day * nights


def booking_window(today: date | datetime) -> tuple[date, date]:
    """Earliest and latest selectable check-in day: today up to one year out."""
    start = midnight(today).date()
    try:
        end = start.replace(year=start.year + 1)
    except ValueError:  # Feb 29
        end = start + timedelta(days=BOOKING_HORIZON_DAYS)
    return start, end


def beyond_booking_window(checkin: date | datetime, today: date | datetime) -> bool:
    """True when *checkin* falls after the last selectable check-in day."""
    _, latest = booking_window(today)
    return midnight(checkin).date() > latest
