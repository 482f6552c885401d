from craftsymphony.catalog.pricing import format_price, format_size, size_bounds, to_number


def test_pln_in_polish_mode():
    assert format_price(100, "pl") == "100 PLN"


def test_usd_in_english_mode_is_quarter_of_pln():
    assert format_price(100, "en") == "$25.00"
    assert format_price(10000, "en") == "$2,500.00"
    assert format_price(99, "en") == "$24.75"


def test_polish_grouping_starts_at_five_digits():
    assert format_price(1000, "pl") == "1000 PLN"
    assert format_price(12500, "pl") == "12\u00a0500 PLN"
    assert format_price(149.5, "pl") == "149,5 PLN"


def test_missing_price_is_a_dash():
    assert format_price(None, "pl") == "—"
    assert format_price(None, "en") == "—"


def test_string_prices():
    assert format_price("120 PLN", "pl") == "120 PLN"
    assert format_price("120 PLN", "en") == "$30.00"
    assert format_price("na zapytanie", "en") == "na zapytanie"


def test_sizes():
    assert size_bounds(110, 90) == ("110 cm", "90 cm")
    assert size_bounds("95.5", 100) == ("100 cm", "95.5 cm")
    assert size_bounds(None, 100) == ("—", "—")
    assert format_size(4) == "4 cm"
    assert format_size("") is None


def test_to_number():
    assert to_number("12,5") == 12.5
    assert to_number("abc") is None
    assert to_number(True) is None
    assert to_number(float("nan")) is None
