import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    BackendUnavailableError,
    BookingNotFoundError,
    InvalidBookingDatesError,
    RateLimitError,
    RentalApiError,
)

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Cannot connect to server. Please check if the backend is running."
UNAUTHORIZED_MESSAGE = "Unauthorized. Please login again."
NOT_FOUND_MESSAGE = "Not found."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
FALLBACK_MESSAGE = "An unexpected error occurred."


def map_upstream_status(
    status_code: int | None,
    message: str | None = None,
    not_found_message: str | None = None,
) -> tuple[int, str]:
    """Translate a backend status code into (response status, user-facing detail).

    A 404 uses the caller's *not_found_message* when one was given.
    """
    if status_code == 401:
        return 401, UNAUTHORIZED_MESSAGE
    if status_code == 404:
        return 404, not_found_message or NOT_FOUND_MESSAGE
    if status_code is not None and status_code >= 500:
        return 502, SERVER_ERROR_MESSAGE
    return 400, message or FALLBACK_MESSAGE


async def rental_api_error_handler(_request: Request, exc: RentalApiError) -> JSONResponse:
    logger.error("Rental API error: %s (status=%s)", exc.message, exc.status_code)
    status_code, detail = map_upstream_status(
        exc.status_code, exc.message, exc.not_found_message
    )
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def backend_unavailable_handler(
    _request: Request, exc: BackendUnavailableError
) -> JSONResponse:
    logger.error("Rental API unreachable: %s", exc.message)
    return JSONResponse(status_code=503, content={"detail": UNREACHABLE_MESSAGE})


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def booking_not_found_handler(_request: Request, exc: BookingNotFoundError) -> JSONResponse:
    logger.info("Booking %s not found", exc.booking_id)
    return JSONResponse(status_code=404, content={"detail": "Booking not found."})


async def invalid_booking_dates_handler(
    _request: Request, exc: InvalidBookingDatesError
) -> JSONResponse:
    logger.info("Rejected booking dates: %s", exc.verdict)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "verdict": exc.verdict},
    )
