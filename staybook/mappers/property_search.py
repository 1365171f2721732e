"""Filtering and sorting over a property result set.

No I/O, no side effects. Every predicate is vacuously true when its filter
field sits at its default value.
"""

import operator
import unicodedata
from collections.abc import Callable, Iterable

from staybook.schemas.property import (
    AMENITY_LABELS,
    AVAILABLE,
    Amenity,
    Property,
    SearchFilters,
    SortBy,
    SortOrder,
    SortSpec,
)
from staybook.schemas.responses import AmenityOption, FilterOptions

AMENITY_FLAGS: dict[Amenity, Callable[[Property], bool]] = {
    Amenity.wifi: operator.attrgetter("hasWifi"),
    Amenity.parking: operator.attrgetter("hasParking"),
    Amenity.pool: operator.attrgetter("hasPool"),
    Amenity.ac: operator.attrgetter("hasAc"),
    Amenity.heater: operator.attrgetter("hasHeater"),
    Amenity.pet_friendly: operator.attrgetter("hasPetFriendly"),
}


def _contains(haystack: str | None, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def _collation_key(text: str) -> str:
    """Accent-insensitive, case-insensitive key for name ordering."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c)).casefold()


def matches_text(prop: Property, term: str) -> bool:
    if not term:
        return True
    return (
        _contains(prop.propertyName, term)
        or _contains(prop.city, term)
        or _contains(prop.state, term)
    )


def has_amenities(prop: Property, required: Iterable[Amenity]) -> bool:
    """All required amenity flags must be set; an empty set always matches."""
    return all(AMENITY_FLAGS[amenity](prop) for amenity in required)


def matches_filters(prop: Property, filters: SearchFilters) -> bool:
    if not matches_text(prop, filters.search_term):
        return False
    if filters.city and not _contains(prop.city, filters.city):
        return False
    if filters.state and not _contains(prop.state, filters.state):
        return False
    if prop.pricePerDay < filters.min_price:
        return False
    if filters.max_price is not None and prop.pricePerDay > filters.max_price:
        return False
    if prop.noOfRooms < filters.min_rooms:
        return False
    if prop.maxNoOfGuests < filters.max_guests:
        return False
    if not has_amenities(prop, filters.amenities):
        return False
    return prop.propertyStatus == AVAILABLE


_SORT_KEYS: dict[SortBy, Callable[[Property], float | str]] = {
    SortBy.price: lambda p: p.pricePerDay,
    SortBy.rating: lambda p: p.propertyRate,
    SortBy.name: lambda p: _collation_key(p.propertyName or ""),
    SortBy.rooms: lambda p: p.noOfRooms,
}


def sort_properties(properties: Iterable[Property], sort: SortSpec) -> list[Property]:
    """Stable sort on a single key; descending keeps equal keys in input order."""
    key = _SORT_KEYS.get(sort.sort_by, _SORT_KEYS[SortBy.price])
    return sorted(properties, key=key, reverse=sort.sort_order == SortOrder.desc)


def search_properties(
    properties: list[Property],
    filters: SearchFilters,
    sort: SortSpec | None = None,
) -> list[Property]:
    """Filter *properties* with *filters*, then order the survivors by *sort*."""
    matched = [p for p in properties if matches_filters(p, filters)]
    return sort_properties(matched, sort or SortSpec())


def _distinct_sorted(values: Iterable[str | None]) -> list[str]:
    return sorted({v for v in values if v})


def distinct_cities(properties: list[Property]) -> list[str]:
    return _distinct_sorted(p.city for p in properties)


def distinct_states(properties: list[Property]) -> list[str]:
    return _distinct_sorted(p.state for p in properties)


def filter_options(properties: list[Property]) -> FilterOptions:
    """Choices for the filter inputs. Cities and states come from the unfiltered set."""
    return FilterOptions(
        cities=distinct_cities(properties),
        states=distinct_states(properties),
        amenities=[AmenityOption(key=a, label=label) for a, label in AMENITY_LABELS.items()],
    )
