"""Formatting of prices, large amounts and currency symbols."""

from __future__ import annotations

# Prefix printed before an amount, with the currency codes that use it.
_PREFIXES: dict[str, tuple[str, ...]] = {
    "$": ("usd",),
    "€": ("eur",),
    "£": ("gbp",),
    "¥": ("jpy", "cny"),
    "₩": ("krw",),
    "₹": ("inr",),
    "C$": ("cad",),
    "A$": ("aud",),
    "CHF ": ("chf",),
    "₿": ("btc",),
    "Ξ": ("eth",),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    code: prefix for prefix, codes in _PREFIXES.items() for code in codes
}

# Smallest value for each number of decimals; anything below gets eight.
_PRECISIONS = ((1.0, 2), (0.01, 4))
_FINEST_PRECISION = 8

_SCALES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def currency_symbol(currency: str) -> str:
    """Return the prefix for amounts in ``currency``; unknown codes become ``"CODE "``."""
    return CURRENCY_SYMBOLS.get(currency.lower(), f"{currency.upper()} ")


def format_number(num: float) -> str:
    """Format a price with more decimals the smaller it is."""
    digits = next(
        (places for floor, places in _PRECISIONS if num >= floor),
        _FINEST_PRECISION,
    )
    return f"{num:.{digits}f}"


def format_large_number(num: float) -> str:
    """Abbreviate with a T/B/M/K suffix, falling back to :func:`format_number`."""
    for threshold, suffix in _SCALES:
        if num >= threshold:
            return f"{num / threshold:.2f}{suffix}"
    return format_number(num)