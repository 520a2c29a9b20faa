"""The ``crypto`` command line: price lookups and top-coin listings."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml
from tabulate import tabulate
from termcolor import colored

from coinquote.api import ApiError, CoinGeckoAPI, PriceData
from coinquote.formatting import currency_symbol, format_large_number, format_number

CONFIG_NAME = ".crypto-cli"
_CONFIG_SUFFIXES = (".yaml", ".yml", "")

ROOT_DESCRIPTION = """\
Crypto Price CLI is a command-line tool that allows you to quickly
query cryptocurrency prices from various exchanges.

Examples:
  crypto price btc
  crypto price eth usd
  crypto list
  crypto compare btc eth"""

PRICE_DESCRIPTION = """\
Get the current price of a cryptocurrency in a specified currency.
The currency parameter is optional and defaults to USD.

Examples:
  crypto price bitcoin
  crypto price btc
  crypto price ethereum usd
  crypto price eth eur
  crypto price bitcoin jpy"""

LIST_DESCRIPTION = """\
List the top cryptocurrencies by market capitalization.
You can specify the number of coins to display and the currency.

Examples:
  crypto list
  crypto list --limit 20
  crypto list --currency eur
  crypto list -l 50 -c jpy"""

LIST_HEADERS = ["RANK", "NAME", "SYMBOL", "PRICE", "24H CHANGE", "MARKET CAP", "VOLUME"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``crypto`` command and its subcommands."""
    config_help = "config file (default is $HOME/.crypto-cli.yaml)"
    inherited = argparse.ArgumentParser(add_help=False)
    inherited.add_argument("--config", default=argparse.SUPPRESS, help=config_help)

    parser = argparse.ArgumentParser(
        prog="crypto",
        description=ROOT_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default="", help=config_help)
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")

    price = commands.add_parser(
        "price",
        parents=[inherited],
        help="Get the current price of a cryptocurrency",
        description=PRICE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    price.add_argument("coin", metavar="cryptocurrency", help="coin name or symbol")
    price.add_argument(
        "target_currency", metavar="currency", nargs="?", default=None, help="quote currency"
    )
    price.add_argument("-c", "--currency", default="", help="Target currency (default: usd)")

    listing = commands.add_parser(
        "list",
        parents=[inherited],
        help="List top cryptocurrencies by market cap",
        description=LIST_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    listing.add_argument(
        "-l", "--limit", type=int, default=10,
        help="Number of cryptocurrencies to display (max 250)",
    )
    listing.add_argument("-c", "--currency", default="usd", help="Target currency for prices")
    return parser


def _config_candidates(path: str | None) -> list[Path]:
    if path:
        return [Path(path)]
    home = Path.home()
    return [home / f"{CONFIG_NAME}{suffix}" for suffix in _CONFIG_SUFFIXES]


def load_config(path: str | None = None) -> dict[str, Any]:
    """Read the YAML config file, if any, announcing it on stderr.

    With no ``path`` the file is looked for as ``~/.crypto-cli.yaml``.
    A missing or unreadable file yields an empty mapping.
    """
    for candidate in _config_candidates(path):
        try:
            text = candidate.read_text(encoding="utf-8")
        except OSError:
            continue
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            return {}
        print(f"Using config file: {candidate}", file=sys.stderr)
        return data if isinstance(data, dict) else {}
    return {}


def render_price(data: PriceData, currency: str) -> str:
    """Render the detailed price view of a single coin."""
    symbol = currency_symbol(currency)
    title = f"{data.name} ({data.symbol.upper()})"
    rule = "=" * (len(data.name.encode()) + len(data.symbol.encode()) + 3)
    pct = data.price_change_percentage_24h
    change_color, icon = ("green", "📈") if pct > 0 else ("red", "📉")

    lines = [
        "",
        colored(title, "cyan", attrs=["bold"]),
        colored(rule, "blue"),
        colored(
            f"💰 Current Price: {symbol}{format_number(data.current_price)}",
            "green",
            attrs=["bold"],
        ),
        colored(
            f"{icon} 24h Change: {symbol}{format_number(data.price_change_24h)} ({pct:.2f}%)",
            change_color,
        ),
        f"📊 Market Cap: {symbol}{format_large_number(data.market_cap)}",
        f"📊 Market Cap Rank: #{data.market_cap_rank}",
        f"📊 24h Volume: {symbol}{format_large_number(data.total_volume)}",
        "",
        colored(f"🕒 Last Updated: {data.last_updated}", "white"),
        "",
        "",
    ]
    return "\n".join(lines)


def _list_row(coin: PriceData, symbol: str) -> list[str]:
    change = f"{coin.price_change_percentage_24h:.2f}%"
    if coin.price_change_percentage_24h > 0:
        change = "+" + change
    return [
        f"#{coin.market_cap_rank}",
        coin.name,
        coin.symbol.upper(),
        f"{symbol}{format_number(coin.current_price)}",
        change,
        symbol + format_large_number(coin.market_cap),
        symbol + format_large_number(coin.total_volume),
    ]


def render_coin_list(coins: Sequence[PriceData], currency: str) -> str:
    """Render the table of top coins with its title and footer."""
    symbol = currency_symbol(currency)
    table = tabulate(
        [_list_row(coin, symbol) for coin in coins],
        headers=LIST_HEADERS,
        tablefmt="plain",
        disable_numparse=True,
        stralign="left",
    )
    lines = [
        colored(f"📈 Top {len(coins)} Cryptocurrencies (by Market Cap)", "cyan", attrs=["bold"]),
        colored("=" * 50, "blue"),
        table,
        "",
        "💡 Use 'crypto price <coin>' for detailed information",
        f"💡 Currency: {currency.upper()}",
        "",
        "",
    ]
    return "\n".join(lines)


def _error(message: str) -> None:
    print(colored(message, "red"))


def _run_price(client: CoinGeckoAPI, args: argparse.Namespace) -> int:
    target = "usd"
    if args.target_currency:
        target = args.target_currency.lower()
    if args.currency:
        target = args.currency.lower()

    try:
        coin_id = client.search_coin(args.coin)
    except ApiError as exc:
        _error(f"Error: {exc}")
        return 0
    try:
        data = client.get_price(coin_id, target)
    except ApiError as exc:
        _error(f"Error fetching price: {exc}")
        return 0
    print(render_price(data, target), end="")
    return 0


def _run_list(client: CoinGeckoAPI, args: argparse.Namespace) -> int:
    target = args.currency.lower() if args.currency else "usd"
    print(f"🔄 Fetching top {args.limit} cryptocurrencies...\n")
    try:
        coins = client.get_top_coins(args.limit, target)
    except ApiError as exc:
        _error(f"Error fetching cryptocurrency list: {exc}")
        return 0
    print(render_coin_list(coins, target), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``crypto`` command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    load_config(args.config or None)

    if args.command is None:
        parser.print_help()
        return 0

    client = CoinGeckoAPI()
    if args.command == "price":
        return _run_price(client, args)
    return _run_list(client, args)


if __name__ == "__main__":
    sys.exit(main())