from typing import Annotated

from fastapi import Depends, Request

from staybook.services.bookings import BookingsService
from staybook.services.search import SearchService


def get_bookings_service(request: Request) -> BookingsService:
    return request.app.state.bookings_service


def get_search_service(request: Request) -> SearchService:
    return request.app.state.search_service


BookingsDep = Annotated[BookingsService, Depends(get_bookings_service)]
SearchDep = Annotated[SearchService, Depends(get_search_service)]
