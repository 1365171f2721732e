import math

MAX_STARS = 5


def rating_stars(rating: float) -> str:
    """Render a 0-5 rating as stars, e.g. 3.6 -> "★★★½☆"."""
    full = max(0, min(MAX_STARS, math.floor(rating)))
    half = 1 if full < MAX_STARS and rating % 1 >= 0.5 else 0
    empty = MAX_STARS - full - half
    return "★" * full + ("½" if half else "") + "☆" * empty


def payment_status_text(is_paid: bool) -> str:
    return "Paid" if is_paid else "Pending"
