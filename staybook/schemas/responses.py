from __future__ import annotations

from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel

from staybook.schemas.booking import Booking
from staybook.schemas.property import Amenity, Property

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every backend response."""

    success: bool
    message: str = ""
    data: T | None = None


class BookingsOverview(BaseModel):
    user_id: int
    upcoming: list[Booking]
    current: list[Booking]
    past: list[Booking]
    total: int


class BookingDetails(BaseModel):
    booking: Booking
    property: Property | None = None
    nights: int
    total_price: float | None = None
    payment_status: str
    actionable: bool


class BookingSubmitted(BaseModel):
    success: bool
    message: str


class DateRangeCheck(BaseModel):
    verdict: str  # "valid" | "invalidDateRange" | "pastDate"
    message: str | None = None
    nights: int | None = None
    earliest_checkin: date
    latest_checkin: date


class SearchResponse(BaseModel):
    total_found: int
    properties: list[Property]


class AmenityOption(BaseModel):
    key: Amenity
    label: str


class FilterOptions(BaseModel):
    cities: list[str]
    states: list[str]
    amenities: list[AmenityOption] = []
