from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel

AVAILABLE = "AVAILABLE"


class Amenity(StrEnum):
    wifi = "wifi"
    parking = "parking"
    pool = "pool"
    ac = "ac"
    heater = "heater"
    pet_friendly = "pet_friendly"


AMENITY_LABELS: dict[Amenity, str] = {
    Amenity.wifi: "WiFi",
    Amenity.parking: "Parking",
    Amenity.pool: "Pool",
    Amenity.ac: "Air Conditioning",
    Amenity.heater: "Heater",
    Amenity.pet_friendly: "Pet Friendly",
}


class Property(BaseModel):
    propertyId: int
    propertyName: str | None = None
    propertyDescription: str | None = None
    noOfRooms: int = 0
    noOfBathrooms: int = 0
    maxNoOfGuests: int = 0
    pricePerDay: float = 0.0
    imageURL: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    propertyStatus: str | None = None
    propertyRate: float = 0.0
    propertyRatingCount: int = 0
    hasWifi: bool = False
    hasParking: bool = False
    hasPool: bool = False
    hasAc: bool = False
    hasHeater: bool = False
    hasPetFriendly: bool = False
    # Only present on the detail endpoint
    buildingNo: str | None = None
    street: str | None = None
    postalCode: str | None = None
    hostId: int | None = None
    hostName: str | None = None
    hostPhone: str | None = None


class SortBy(StrEnum):
    price = "price"
    rating = "rating"
    name = "name"
    rooms = "rooms"


class SortOrder(StrEnum):
    asc = "asc"
    desc = "desc"


class SearchFilters(BaseModel):
    search_term: str = ""
    city: str | None = None
    state: str | None = None
    min_price: float = 0
    max_price: float | None = None
    min_rooms: int = 0
    # Guests needed: matches listings whose capacity is at least this value
    max_guests: int = 0
    amenities: set[Amenity] = set()


class SortSpec(BaseModel):
    sort_by: SortBy = SortBy.price
    sort_order: SortOrder = SortOrder.asc


class SearchCriteria(BaseModel):
    """Server-side search request. An empty object returns every listing."""

    checkinDate: date | None = None
    checkoutDate: date | None = None
    noOfGuests: int | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
