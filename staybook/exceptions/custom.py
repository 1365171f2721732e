class RentalApiError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        not_found_message: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.not_found_message = not_found_message
        super().__init__(message)


class BackendUnavailableError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class BookingNotFoundError(Exception):
    def __init__(self, booking_id: int):
        self.booking_id = booking_id
        super().__init__(f"Booking {booking_id} not found")


class InvalidBookingDatesError(Exception):
    def __init__(self, verdict: str, message: str):
        self.verdict = verdict
        self.message = message
        super().__init__(message)
