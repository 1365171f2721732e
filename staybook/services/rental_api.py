import logging
from typing import Any

import httpx

from staybook.exceptions.custom import BackendUnavailableError, RateLimitError, RentalApiError
from staybook.schemas.booking import Booking, BookingRequest
from staybook.schemas.property import Property, SearchCriteria
from staybook.schemas.responses import ApiResponse

logger = logging.getLogger(__name__)

VIEW_BOOKINGS_PATH = "/client/viewBooking"
VIEW_PROPERTY_PATH = "/client/viewClickedProperty"
SEARCH_PATH = "/client/searchByFields"
MAKE_BOOKING_PATH = "/client/makeBooking"

NO_BOOKINGS_MESSAGE = "No bookings found."
PROPERTY_NOT_FOUND_MESSAGE = "Property not found."
NO_PROPERTIES_MESSAGE = "No properties found."


class RentalApiService:
    """Thin client for the rental backend. Unwraps the response envelope."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        not_found_message: str | None = None,
    ) -> dict:
        url = f"{self._base_url}{path}"
        try:
            resp = await self._client.request(method, url, json=json)
        except httpx.TransportError as exc:
            raise BackendUnavailableError(f"{method} {url}: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Rental API")
        if resp.status_code >= 400:
            raise RentalApiError(
                _error_message(resp),
                status_code=resp.status_code,
                not_found_message=not_found_message,
            )

        return resp.json()

    async def get_bookings(self, user_id: int) -> list[Booking]:
        body = await self._request(
            "GET", f"{VIEW_BOOKINGS_PATH}/{user_id}", not_found_message=NO_BOOKINGS_MESSAGE
        )
        envelope = ApiResponse[list[Booking]](**body)
        _ensure_success(envelope, "Failed to load bookings")
        bookings = envelope.data or []
        logger.info("Loaded %d bookings for user %s", len(bookings), user_id)
        return bookings

    async def get_property(self, property_id: int) -> Property:
        body = await self._request(
            "GET",
            f"{VIEW_PROPERTY_PATH}/{property_id}",
            not_found_message=PROPERTY_NOT_FOUND_MESSAGE,
        )
        envelope = ApiResponse[Property](**body)
        _ensure_success(envelope, "Failed to load property details")
        if envelope.data is None:
            raise RentalApiError("Failed to load property details")
        return envelope.data

    async def search_properties(self, criteria: SearchCriteria | None = None) -> list[Property]:
        payload = (criteria or SearchCriteria()).model_dump(mode="json", exclude_none=True)
        body = await self._request(
            "POST", SEARCH_PATH, json=payload, not_found_message=NO_PROPERTIES_MESSAGE
        )
        envelope = ApiResponse[list[Property]](**body)
        _ensure_success(envelope, "Failed to load properties")
        properties = envelope.data or []
        logger.info("Search returned %d properties", len(properties))
        return properties

    async def make_booking(self, request: BookingRequest) -> ApiResponse[Any]:
        body = await self._request(
            "POST", MAKE_BOOKING_PATH, json=request.model_dump(mode="json")
        )
        envelope = ApiResponse[Any](**body)
        _ensure_success(envelope, "Failed to submit booking")
        logger.info(
            "Booking submitted for property %s (user %s)",
            request.propertyId, request.userId,
        )
        return envelope


def _ensure_success(envelope: ApiResponse, fallback: str) -> None:
    if not envelope.success:
        raise RentalApiError(envelope.message or fallback)


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return resp.text
