import logging
from datetime import date, datetime

from staybook.exceptions.custom import (
    BackendUnavailableError,
    BookingNotFoundError,
    InvalidBookingDatesError,
    RateLimitError,
    RentalApiError,
)
from staybook.mappers.booking_classifier import as_day, classify_bookings, is_booking_actionable
from staybook.mappers.date_range import (
    ValidationVerdict,
    beyond_booking_window,
    count_nights,
    total_price,
    validate_date_range,
    verdict_message,
)
from staybook.mappers.display import payment_status_text
from staybook.schemas.booking import BookingForm, BookingRequest
from staybook.schemas.property import Property
from staybook.schemas.responses import BookingDetails, BookingsOverview, BookingSubmitted
from staybook.services.rental_api import RentalApiService

logger = logging.getLogger(__name__)


class BookingsService:
    def __init__(self, api: RentalApiService):
        self._api = api

    async def overview(self, user_id: int, today: date | datetime) -> BookingsOverview:
        bookings = await self._api.get_bookings(user_id)
        buckets = classify_bookings(bookings, today)
        logger.info(
            "User %s bookings: %d upcoming, %d current, %d past",
            user_id, len(buckets.upcoming), len(buckets.current), len(buckets.past),
        )
        return BookingsOverview(
            user_id=user_id,
            upcoming=buckets.upcoming,
            current=buckets.current,
            past=buckets.past,
            total=len(bookings),
        )

    async def details(
        self, user_id: int, booking_id: int, today: date | datetime
    ) -> BookingDetails:
        """Look up one booking, then the property it belongs to.

        The property is best-effort: if it cannot be loaded the details are
        returned without it (and without a total price).
        """
        try:
            bookings = await self._api.get_bookings(user_id)
        except RentalApiError as exc:
            if exc.status_code == 404:
                raise BookingNotFoundError(booking_id) from exc
            raise
        booking = next((b for b in bookings if b.bookingId == booking_id), None)
        if booking is None:
            raise BookingNotFoundError(booking_id)

        prop: Property | None = None
        try:
            prop = await self._api.get_property(booking.propertyId)
        except (RentalApiError, BackendUnavailableError, RateLimitError) as exc:
            logger.warning(
                "Failed to load property %s for booking %s: %s",
                booking.propertyId, booking_id, exc,
            )

        nights = count_nights(booking.checkinDate, booking.checkoutDate)
        return BookingDetails(
            booking=booking,
            property=prop,
            nights=nights,
            total_price=total_price(prop.pricePerDay, nights) if prop else None,
            payment_status=payment_status_text(booking.isPaymentStatus),
            actionable=is_booking_actionable(booking, today),
        )

    async def submit(
        self, user_id: int, form: BookingForm, today: date | datetime
    ) -> BookingSubmitted:
        if form.checkinDate is None or form.checkoutDate is None:
            raise InvalidBookingDatesError(
                "required", "Check-in and check-out dates are required."
            )
        verdict = validate_date_range(form.checkinDate, form.checkoutDate, today)
        if verdict != ValidationVerdict.valid:
            raise InvalidBookingDatesError(verdict.value, verdict_message(verdict))
        if beyond_booking_window(form.checkinDate, today):
            raise InvalidBookingDatesError(
                "beyondBookingWindow", "Check-in date must be within one year from today."
            )

        request = BookingRequest(
            propertyId=form.propertyId,
            userId=user_id,
            checkinDate=as_day(form.checkinDate),
            checkoutDate=as_day(form.checkoutDate),
            hasExtraCot=form.hasExtraCot,
            hasDeepClean=form.hasDeepClean,
        )
        envelope = await self._api.make_booking(request)
        return BookingSubmitted(
            success=envelope.success,
            message=envelope.message or "Booking submitted successfully!",
        )
