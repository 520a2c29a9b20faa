"""Client for the CoinGecko market data API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import requests

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_TIMEOUT = 15.0
DEFAULT_CURRENCY = "usd"
DEFAULT_LIMIT = 10
MAX_LIMIT = 250

# Coin id followed by every lower-case name or ticker that resolves to it
# without a network round trip.
_KNOWN_ALIASES: dict[str, tuple[str, ...]] = {
    "bitcoin": ("bitcoin", "btc"),
    "ethereum": ("ethereum", "eth"),
    "binancecoin": ("binancecoin", "bnb"),
    "cardano": ("cardano", "ada"),
    "solana": ("solana", "sol"),
    "ripple": ("ripple", "xrp"),
    "polkadot": ("polkadot", "dot"),
    "dogecoin": ("dogecoin", "doge"),
    "avalanche-2": ("avalanche", "avax"),
    "shiba-inu": ("shiba", "shib"),
    "matic-network": ("polygon", "matic"),
    "chainlink": ("chainlink", "link"),
    "litecoin": ("litecoin", "ltc"),
    "uniswap": ("uniswap", "uni"),
    "cosmos": ("cosmos", "atom"),
    "algorand": ("algorand", "algo"),
    "tron": ("tron", "trx"),
    "stellar": ("stellar", "xlm"),
    "monero": ("monero", "xmr"),
    "ethereum-classic": ("ethereum-classic", "etc"),
    "vechain": ("vechain", "vet"),
    "filecoin": ("filecoin", "fil"),
    "tether": ("tether", "usdt"),
    "usd-coin": ("usd-coin", "usdc"),
    "binance-usd": ("binance-usd", "busd"),
}

COMMON_COINS: dict[str, str] = {
    alias: coin_id
    for coin_id, aliases in _KNOWN_ALIASES.items()
    for alias in aliases
}


class ApiError(Exception):
    """Raised when the API cannot be reached or returns unusable data."""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _float(value: Any) -> float:
    return 0.0 if value is None else float(value)


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class PriceData:
    """Market data for one coin in one quote currency."""

    id: str = ""
    symbol: str = ""
    name: str = ""
    current_price: float = 0.0
    market_cap: float = 0.0
    market_cap_rank: int = 0
    total_volume: float = 0.0
    price_change_24h: float = 0.0
    price_change_percentage_24h: float = 0.0
    last_updated: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "PriceData":
        """Build from one item of a ``/coins/markets`` response; missing fields are zero."""
        data = _require_mapping(data)
        return cls(
            id=_text(data.get("id")),
            symbol=_text(data.get("symbol")),
            name=_text(data.get("name")),
            current_price=_float(data.get("current_price")),
            market_cap=_float(data.get("market_cap")),
            market_cap_rank=_int(data.get("market_cap_rank")),
            total_volume=_float(data.get("total_volume")),
            price_change_24h=_float(data.get("price_change_24h")),
            price_change_percentage_24h=_float(data.get("price_change_percentage_24h")),
            last_updated=_text(data.get("last_updated")),
        )


@dataclass(frozen=True)
class CoinInfo:
    """A coin's identifier, ticker symbol and name."""

    id: str = ""
    symbol: str = ""
    name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "CoinInfo":
        """Build from a search result entry."""
        data = _require_mapping(data)
        return cls(
            id=_text(data.get("id")),
            symbol=_text(data.get("symbol")),
            name=_text(data.get("name")),
        )


class CoinGeckoAPI:
    """Thin client over the CoinGecko REST endpoints used by the CLI."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get_json(
        self,
        path: str,
        params: Mapping[str, str],
        fetch_error: str = "failed to fetch data",
        decode_error: str = "failed to unmarshal response",
    ) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"{fetch_error}: {exc}") from exc
        with response:
            if response.status_code != 200:
                raise ApiError(f"API request failed with status: {response.status_code}")
            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(f"{decode_error}: {exc}") from exc

    def _markets(self, params: Mapping[str, str]) -> list[PriceData]:
        payload = self._get_json("coins/markets", params)
        if payload is None:
            return []
        try:
            if not isinstance(payload, list):
                raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
            return [PriceData.from_json(item) for item in payload]
        except (TypeError, ValueError) as exc:
            raise ApiError(f"failed to unmarshal response: {exc}") from exc

    @staticmethod
    def _market_params(currency: str, per_page: int) -> dict[str, str]:
        return {
            "vs_currency": currency or DEFAULT_CURRENCY,
            "order": "market_cap_desc",
            "per_page": str(per_page),
            "page": "1",
            "sparkline": "false",
        }

    def get_price(self, coin_id: str, currency: str = DEFAULT_CURRENCY) -> PriceData:
        """Return current market data for ``coin_id`` quoted in ``currency``."""
        params = {"ids": coin_id, **self._market_params(currency, 1)}
        prices = self._markets(params)
        if not prices:
            raise ApiError(f"cryptocurrency not found: {coin_id}")
        return prices[0]

    def get_top_coins(
        self, limit: int = DEFAULT_LIMIT, currency: str = DEFAULT_CURRENCY
    ) -> list[PriceData]:
        """Return the top coins by market cap; out-of-range limits fall back to 10."""
        if not 0 < limit <= MAX_LIMIT:
            limit = DEFAULT_LIMIT
        return self._markets(self._market_params(currency, limit))

    def search_coin(self, query: str) -> str:
        """Resolve a symbol or name to a coin id, trying the built-in table first."""
        known = COMMON_COINS.get(query.lower())
        if known is not None:
            return known
        return self._search_remote(query)

    def _search_remote(self, query: str) -> str:
        payload = self._get_json(
            "search",
            {"query": query},
            fetch_error="failed to search cryptocurrency",
            decode_error="failed to unmarshal search response",
        )
        try:
            if payload is None:
                coins: list[CoinInfo] = []
            else:
                raw = _require_mapping(payload).get("coins") or []
                if not isinstance(raw, list):
                    raise TypeError("'coins' is not a JSON array")
                coins = [CoinInfo.from_json(item) for item in raw]
        except (TypeError, ValueError) as exc:
            raise ApiError(f"failed to unmarshal search response: {exc}") from exc

        if not coins:
            raise ApiError(f"cryptocurrency not found: {query}")

        wanted = query.lower()
        exact = next(
            (c for c in coins if wanted in (c.symbol.lower(), c.name.lower())),
            coins[0],
        )
        return exact.id