import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from staybook.config import Settings
from staybook.exceptions.custom import (
    BackendUnavailableError,
    BookingNotFoundError,
    InvalidBookingDatesError,
    RateLimitError,
    RentalApiError,
)
from staybook.exceptions.handlers import (
    backend_unavailable_handler,
    booking_not_found_handler,
    invalid_booking_dates_handler,
    rate_limit_error_handler,
    rental_api_error_handler,
)
from staybook.routers.bookings import router as bookings_router
from staybook.routers.properties import router as properties_router
from staybook.services.bookings import BookingsService
from staybook.services.rental_api import RentalApiService
from staybook.services.search import SearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.rental_api_timeout) as client:
        api = RentalApiService(client, settings.rental_api_base_url)

        app.state.bookings_service = BookingsService(api)
        app.state.search_service = SearchService(api)

        yield


app = FastAPI(title="Staybook", lifespan=lifespan)

app.add_exception_handler(RentalApiError, rental_api_error_handler)
app.add_exception_handler(BackendUnavailableError, backend_unavailable_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(BookingNotFoundError, booking_not_found_handler)
app.add_exception_handler(InvalidBookingDatesError, invalid_booking_dates_handler)

app.include_router(bookings_router)
app.include_router(properties_router)
