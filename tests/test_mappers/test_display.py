from staybook.mappers.display import payment_status_text, rating_stars


def test_whole_rating():
    assert rating_stars(4) == "★★★★☆"


def test_half_star_from_point_five():
    assert rating_stars(3.5) == "★★★½☆"
    assert rating_stars(3.7) == "★★★½☆"


def test_fraction_below_half_is_dropped():
    assert rating_stars(3.4) == "★★★☆☆"


def test_zero_and_full_ratings():
    assert rating_stars(0) == "☆☆☆☆☆"
    assert rating_stars(5) == "★★★★★"


def test_payment_status_text():
    assert payment_status_text(True) == "Paid"
    assert payment_status_text(False) == "Pending"
