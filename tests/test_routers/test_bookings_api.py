import json

import respx
from httpx import ConnectError, Response

BASE_URL = "http://rental.test/v1/api"
BOOKINGS_URL = f"{BASE_URL}/client/viewBooking/7"
PROPERTY_URL = f"{BASE_URL}/client/viewClickedProperty/42"
MAKE_BOOKING_URL = f"{BASE_URL}/client/makeBooking"


def _booking(booking_id, checkin, checkout, status="CONFIRMED"):
    return {
        "bookingId": booking_id,
        "propertyId": 42,
        "propertyName": "Sea Breeze",
        "propertyImage": None,
        "city": "Goa",
        "userId": 7,
        "username": "asha",
        "checkinDate": checkin,
        "checkoutDate": checkout,
        "isPaymentStatus": False,
        "isBookingStatus": status,
        "hasExtraCot": False,
        "hasDeepClean": False,
    }


def _mock_bookings(*bookings):
    respx.get(BOOKINGS_URL).mock(
        return_value=Response(200, json={"success": True, "message": "OK", "data": list(bookings)})
    )


@respx.mock
async def test_list_bookings_buckets(client):
    _mock_bookings(
        _booking(1, "2024-06-01", "2024-06-03", status="COMPLETED"),
        _booking(2, "2024-06-20", "2024-06-25"),
        _booking(3, "2024-06-14", "2024-06-15", status="PENDING"),
        _booking(4, "2024-06-18", "2024-06-19"),
    )

    resp = await client.get("/users/7/bookings", params={"today": "2024-06-15"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["user_id"] == 7
    assert [b["bookingId"] for b in data["upcoming"]] == [4, 2]
    assert [b["bookingId"] for b in data["current"]] == [3]
    assert [b["bookingId"] for b in data["past"]] == [1]
    assert data["total"] == 4


@respx.mock
async def test_list_bookings_backend_down(client):
    respx.get(BOOKINGS_URL).mock(side_effect=ConnectError("refused"))

    resp = await client.get("/users/7/bookings")

    assert resp.status_code == 503
    assert resp.json()["detail"] == (
        "Cannot connect to server. Please check if the backend is running."
    )


@respx.mock
async def test_list_bookings_unauthorized(client):
    respx.get(BOOKINGS_URL).mock(return_value=Response(401, text="no session"))

    resp = await client.get("/users/7/bookings")

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Unauthorized. Please login again."


@respx.mock
async def test_list_bookings_server_error(client):
    respx.get(BOOKINGS_URL).mock(return_value=Response(500, text="boom"))

    resp = await client.get("/users/7/bookings")

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Server error. Please try again later."


@respx.mock
async def test_booking_details(client):
    _mock_bookings(_booking(5, "2024-06-20", "2024-06-22"))
    respx.get(PROPERTY_URL).mock(
        return_value=Response(200, json={
            "success": True,
            "message": "OK",
            "data": {"propertyId": 42, "propertyName": "Sea Breeze", "pricePerDay": 2000.0},
        })
    )

    resp = await client.get("/users/7/bookings/5", params={"today": "2024-06-15"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["booking"]["bookingId"] == 5
    assert data["property"]["propertyName"] == "Sea Breeze"
    assert data["nights"] == 2
    assert data["total_price"] == 4000.0
    assert data["payment_status"] == "Pending"
    assert data["actionable"] is True


@respx.mock
async def test_booking_details_not_found(client):
    _mock_bookings(_booking(5, "2024-06-20", "2024-06-22"))

    resp = await client.get("/users/7/bookings/6")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Booking not found."


@respx.mock
async def test_create_booking(client):
    route = respx.post(MAKE_BOOKING_URL).mock(
        return_value=Response(200, json={"success": True, "message": "Booking created", "data": None})
    )

    resp = await client.post(
        "/users/7/bookings",
        params={"today": "2024-06-15"},
        json={
            "propertyId": 42,
            "checkinDate": "2024-06-20",
            "checkoutDate": "2024-06-22",
            "hasDeepClean": True,
        },
    )

    assert resp.status_code == 201
    assert resp.json() == {"success": True, "message": "Booking created"}
    sent = json.loads(route.calls.last.request.content)
    assert sent["userId"] == 7
    assert sent["checkinDate"] == "2024-06-20"
    assert sent["hasDeepClean"] is True


@respx.mock(assert_all_called=False)
async def test_create_booking_invalid_range(client):
    route = respx.post(MAKE_BOOKING_URL).mock(return_value=Response(200, json={}))

    resp = await client.post(
        "/users/7/bookings",
        params={"today": "2024-06-15"},
        json={"propertyId": 42, "checkinDate": "2024-06-22", "checkoutDate": "2024-06-20"},
    )

    assert resp.status_code == 422
    assert resp.json() == {
        "detail": "Check-out date must be after check-in date.",
        "verdict": "invalidDateRange",
    }
    assert not route.called


async def test_validate_dates_valid(client):
    resp = await client.post("/bookings/validate", json={
        "checkinDate": "2024-06-20",
        "checkoutDate": "2024-06-23",
        "today": "2024-06-15",
    })

    assert resp.status_code == 200
    assert resp.json() == {
        "verdict": "valid",
        "message": None,
        "nights": 3,
        "earliest_checkin": "2024-06-15",
        "latest_checkin": "2025-06-15",
    }


async def test_validate_dates_precedence(client):
    resp = await client.post("/bookings/validate", json={
        "checkinDate": "2024-06-10",
        "checkoutDate": "2024-06-05",
        "today": "2024-06-15",
    })

    assert resp.json()["verdict"] == "invalidDateRange"
    assert resp.json()["nights"] is None


async def test_validate_dates_past(client):
    resp = await client.post("/bookings/validate", json={
        "checkinDate": "2024-06-10",
        "checkoutDate": "2024-06-20",
        "today": "2024-06-15",
    })

    data = resp.json()
    assert data["verdict"] == "pastDate"
    assert data["message"] == "Check-in date cannot be in the past."
    assert data["nights"] is None


async def test_validate_dates_incomplete(client):
    resp = await client.post("/bookings/validate", json={"checkinDate": "2024-06-20"})

    data = resp.json()
    assert data["verdict"] == "valid"
    assert data["nights"] is None


async def test_validate_dates_with_utc_offsets(client):
    resp = await client.post("/bookings/validate", json={
        "checkinDate": "2030-01-02T14:00:00Z",
        "checkoutDate": "2030-01-04T11:00:00Z",
        "today": "2029-12-01",
    })

    assert resp.status_code == 200
    assert resp.json() == {
        "verdict": "valid",
        "message": None,
        "nights": 2,
        "earliest_checkin": "2029-12-01",
        "latest_checkin": "2030-12-01",
    }


async def test_validate_dates_offset_checkin_plain_checkout(client):
    resp = await client.post("/bookings/validate", json={
        "checkinDate": "2030-01-02T14:00:00+05:30",
        "checkoutDate": "2030-01-05",
        "today": "2029-12-01",
    })

    assert resp.status_code == 200
    assert resp.json()["verdict"] == "valid"
    assert resp.json()["nights"] == 3


@respx.mock
async def test_create_booking_with_utc_offsets(client):
    route = respx.post(MAKE_BOOKING_URL).mock(
        return_value=Response(200, json={"success": True, "message": "Booking created", "data": None})
    )

    resp = await client.post(
        "/users/7/bookings",
        params={"today": "2029-12-01"},
        json={
            "propertyId": 42,
            "checkinDate": "2030-01-02T14:00:00Z",
            "checkoutDate": "2030-01-04T11:00:00Z",
        },
    )

    assert resp.status_code == 201
    sent = json.loads(route.calls.last.request.content)
    assert sent["checkinDate"] == "2030-01-02"
    assert sent["checkoutDate"] == "2030-01-04"


@respx.mock(assert_all_called=False)
async def test_create_booking_beyond_window(client):
    route = respx.post(MAKE_BOOKING_URL).mock(return_value=Response(200, json={}))

    resp = await client.post(
        "/users/7/bookings",
        params={"today": "2024-06-15"},
        json={"propertyId": 42, "checkinDate": "2029-06-20", "checkoutDate": "2029-06-22"},
    )

    assert resp.status_code == 422
    assert resp.json() == {
        "detail": "Check-in date must be within one year from today.",
        "verdict": "beyondBookingWindow",
    }
    assert not route.called


@respx.mock
async def test_list_bookings_not_found(client):
    respx.get(BOOKINGS_URL).mock(return_value=Response(404, text="missing"))

    resp = await client.get("/users/7/bookings")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "No bookings found."


@respx.mock
async def test_booking_details_when_bookings_missing(client):
    respx.get(BOOKINGS_URL).mock(return_value=Response(404, text="missing"))

    resp = await client.get("/users/7/bookings/5")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Booking not found."
