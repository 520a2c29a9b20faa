import pytest

from coinquote.formatting import (
    CURRENCY_SYMBOLS,
    currency_symbol,
    format_large_number,
    format_number,
)


@pytest.mark.parametrize(
    "code, symbol",
    [("usd", "$"), ("eur", "€"), ("gbp", "£"), ("jpy", "¥"), ("cad", "C$"), ("chf", "CHF "), ("eth", "Ξ")],
)
def test_known_currency_symbols(code, symbol):
    assert currency_symbol(code) == symbol
    assert currency_symbol(code.upper()) == symbol


def test_every_table_entry_is_returned():
    for code, symbol in CURRENCY_SYMBOLS.items():
        assert currency_symbol(code) == symbol


def test_unknown_currency_is_upper_cased_with_space():
    assert currency_symbol("xyz") == "XYZ "
    assert currency_symbol("Sek") == "SEK "


def _decimals(text):
    return len(text.split(".")[1])


@pytest.mark.parametrize("value", [1.0, 2.5, 43250.123, 1e6])
def test_format_number_two_decimals_from_one(value):
    text = format_number(value)
    assert _decimals(text) == 2
    assert float(text) == pytest.approx(value, abs=0.005)


@pytest.mark.parametrize("value", [0.01, 0.5, 0.98765])
def test_format_number_four_decimals_below_one(value):
    text = format_number(value)
    assert _decimals(text) == 4
    assert float(text) == pytest.approx(value, abs=0.00005)


@pytest.mark.parametrize("value", [0.0, 0.001, 0.0000123, -5.0])
def test_format_number_eight_decimals_for_tiny_and_negative(value):
    text = format_number(value)
    assert _decimals(text) == 8
    assert float(text) == pytest.approx(value, abs=1e-8)


def test_format_number_pinned_value():
    assert format_number(1.5) == "1.50"


@pytest.mark.parametrize(
    "value, suffix, divisor",
    [
        (1e12, "T", 1e12),
        (2.5e12, "T", 1e12),
        (1e9, "B", 1e9),
        (8.47e11, "B", 1e9),
        (1e6, "M", 1e6),
        (3.2e7, "M", 1e6),
        (1e3, "K", 1e3),
        (999999.0, "K", 1e3),
    ],
)
def test_format_large_number_suffixes(value, suffix, divisor):
    text = format_large_number(value)
    assert text.endswith(suffix)
    assert _decimals(text[:-1]) == 2
    assert float(text[:-1]) == pytest.approx(value / divisor, abs=0.005)


@pytest.mark.parametrize("value", [999.0, 5.0, 0.5, 0.0001, -2e6])
def test_format_large_number_small_values_fall_back(value):
    assert format_large_number(value) == format_number(value)