from datetime import date, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from staybook.dependencies import BookingsDep
from staybook.mappers.date_range import (
    ValidationVerdict,
    booking_window,
    count_nights,
    validate_date_range,
    verdict_message,
)
from staybook.schemas.booking import BookingForm
from staybook.schemas.responses import (
    BookingDetails,
    BookingsOverview,
    BookingSubmitted,
    DateRangeCheck,
)

router = APIRouter()


class DateRangeRequest(BaseModel):
    checkinDate: date | datetime | None = None
    checkoutDate: date | datetime | None = None
    today: date | None = None


@router.get("/users/{user_id}/bookings", response_model=BookingsOverview)
async def list_bookings(
    user_id: int,
    service: BookingsDep,
    today: date | None = None,
) -> BookingsOverview:
    return await service.overview(user_id, today or date.today())


@router.get("/users/{user_id}/bookings/{booking_id}", response_model=BookingDetails)
async def get_booking(
    user_id: int,
    booking_id: int,
    service: BookingsDep,
    today: date | None = None,
) -> BookingDetails:
    return await service.details(user_id, booking_id, today or date.today())


@router.post("/users/{user_id}/bookings", response_model=BookingSubmitted, status_code=201)
async def create_booking(
    user_id: int,
    form: BookingForm,
    service: BookingsDep,
    today: date | None = None,
) -> BookingSubmitted:
    return await service.submit(user_id, form, today or date.today())


@router.post("/bookings/validate", response_model=DateRangeCheck)
async def check_dates(request: DateRangeRequest) -> DateRangeCheck:
    today = request.today or date.today()
    verdict = validate_date_range(request.checkinDate, request.checkoutDate, today)
    earliest, latest = booking_window(today)
    nights = None
    if (
        verdict == ValidationVerdict.valid
        and request.checkinDate is not None
        and request.checkoutDate is not None
    ):
        nights = count_nights(request.checkinDate, request.checkoutDate)
    return DateRangeCheck(
        verdict=verdict.value,
        message=verdict_message(verdict),
        nights=nights,
        earliest_checkin=earliest,
        latest_checkin=latest,
    )
