"""Partition a user's bookings into upcoming / current / past buckets.

Pure functions, no I/O. Classification is day-granular: time-of-day on
``today`` and on the booking dates is discarded before comparing.
"""

from datetime import date, datetime

from staybook.schemas.booking import Booking, BookingBuckets, BookingStatus, Bucket

_ACTIVE_STATUSES = {BookingStatus.CONFIRMED, BookingStatus.PENDING}


def as_day(value: date | datetime) -> date:
    """Strip the time-of-day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def bucket_of(booking: Booking, today: date | datetime) -> Bucket:
    """Classify a single booking relative to *today*.

    Rules:
      - CONFIRMED/PENDING with check-in after today -> upcoming
      - CONFIRMED/PENDING with check-in <= today <= check-out -> current
      - CONFIRMED/PENDING with check-out before today -> past
      - any other status -> past, whatever the dates
    """
    if booking.isBookingStatus not in _ACTIVE_STATUSES:
        return Bucket.past

    day = as_day(today)
    checkin = as_day(booking.checkinDate)
    checkout = as_day(booking.checkoutDate)

    if checkin > day:
        return Bucket.upcoming
    if checkin <= day <= checkout:
        return Bucket.current
    return Bucket.past


def _checkin_key(booking: Booking) -> date:
    return as_day(booking.checkinDate)


def classify_bookings(bookings: list[Booking], today: date | datetime) -> BookingBuckets:
    """Split *bookings* into buckets and order each one.

    upcoming and current are ordered by check-in, earliest first; past is
    ordered by check-in, most recent first. Equal check-in dates keep their
    input order.
    """
    grouped: dict[Bucket, list[Booking]] = {b: [] for b in Bucket}
    for booking in bookings:
        grouped[bucket_of(booking, today)].append(booking)

    return BookingBuckets(
        upcoming=sorted(grouped[Bucket.upcoming], key=_checkin_key),
        current=sorted(grouped[Bucket.current], key=_checkin_key),
        past=sorted(grouped[Bucket.past], key=_checkin_key, reverse=True),
    )


def is_booking_actionable(booking: Booking, today: date | datetime) -> bool:
    """True when a booking may still be cancelled or modified.

    Only confirmed bookings whose whole stay lies after *today* qualify.
    """
    if booking.isBookingStatus != BookingStatus.CONFIRMED:
        return False
    reference = as_day(today)
    return as_day(booking.checkinDate) > reference and as_day(booking.checkoutDate) > reference
