from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel


class BookingStatus(StrEnum):
    CONFIRMED = "CONFIRMED"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class Bucket(StrEnum):
    upcoming = "upcoming"
    current = "current"
    past = "past"


class Booking(BaseModel):
    bookingId: int
    propertyId: int
    propertyName: str | None = None
    propertyImage: str | None = None
    city: str | None = None
    userId: int
    username: str | None = None
    checkinDate: date | datetime
    checkoutDate: date | datetime
    isPaymentStatus: bool = False
    isBookingStatus: str  # BookingStatus value, unknown statuses kept as-is
    hasExtraCot: bool = False
    hasDeepClean: bool = False


class BookingBuckets(BaseModel):
    upcoming: list[Booking] = []
    current: list[Booking] = []
    past: list[Booking] = []


class BookingRequest(BaseModel):
    """Payload accepted by the backend's makeBooking endpoint."""

    propertyId: int
    userId: int
    checkinDate: date
    checkoutDate: date
    hasExtraCot: bool = False
    hasDeepClean: bool = False


class BookingForm(BaseModel):
    propertyId: int
    checkinDate: date | datetime | None = None
    checkoutDate: date | datetime | None = None
    hasExtraCot: bool = False
    hasDeepClean: bool = False
