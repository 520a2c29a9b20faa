# coinquote

A small command-line tool for checking cryptocurrency prices. Data comes from
the public CoinGecko API; no account or key is needed.

## Installation

```
pip install .
```

This installs the `crypto` command.

## Usage

### Price of a single coin

```
crypto price bitcoin
crypto price btc
crypto price ethereum usd
crypto price eth eur
crypto price bitcoin --currency jpy
```

The coin may be given by its name or its ticker symbol. Common coins
(BTC, ETH, BNB, ADA, SOL, XRP, DOGE, USDT, USDC and others) are resolved
from a built-in table without a network lookup. Anything else is looked up
with CoinGecko's search: a case-insensitive exact match on symbol or name is
preferred, otherwise the first result is taken.

The target currency is optional and defaults to USD. It can be given as a
second argument or with `-c/--currency`; the option wins when both are used.

The output shows the current price, the 24-hour change (in currency and
percent, green when rising and red otherwise), market cap, market cap rank,
24-hour volume and the time of the last update.

### Top coins by market cap

```
crypto list
crypto list --limit 20
crypto list --currency eur
crypto list -l 50 -c jpy
```

The table has the columns RANK, NAME, SYMBOL, PRICE, 24H CHANGE, MARKET CAP
and VOLUME. `--limit` defaults to 10 and accepts 1 to 250; values outside
that range fall back to 10. `--currency` defaults to `usd`.

### Errors

When a coin cannot be found or a request fails, the message is printed in
red on standard output and the command still exits with status 0.

### Number formatting

Prices of 1 or more are shown with two decimals, prices from 0.01 with four,
and smaller prices with eight. Market cap and volume are shortened with
K, M, B and T suffixes. Well-known currencies use their symbol
(`$`, `€`, `£`, `¥`, `₩`, `₹`, `C$`, `A$`, `CHF`, `₿`, `Ξ`); any other
currency is shown by its upper-case code followed by a space.

## Configuration

A YAML file is read from `~/.crypto-cli.yaml` (then `~/.crypto-cli.yml` and
`~/.crypto-cli`) if one exists, or from the path given with `--config`, which
may be placed before or after the subcommand:

```
crypto --config ./settings.yaml list
crypto list --config ./settings.yaml
```

When a file is read and parses as YAML, its path is reported on standard
error. A missing or unparsable file is ignored.

## What it does not do

- The configuration file is read but none of its settings change how the
  commands behave.
- The `-t/--toggle` flag is accepted but has no effect.
- There is no `compare` command, even though the top-level help text shows
  `crypto compare btc eth` as an example.
- Nothing is cached or stored; every run queries CoinGecko afresh.

## Library use

The API client can be used directly:

```python
from coinquote.api import CoinGeckoAPI

client = CoinGeckoAPI()
coin_id = client.search_coin("eth")
data = client.get_price(coin_id, "usd")
print(data.name, data.current_price)

for coin in client.get_top_coins(5, "eur"):
    print(coin.market_cap_rank, coin.symbol)
```

`CoinGeckoAPI` takes an optional `base_url`, a `requests.Session` and a
`timeout` in seconds (15 by default). Results are `PriceData` dataclasses.
Failed requests, non-200 responses, malformed JSON and unknown coins raise
`coinquote.api.ApiError`.

The formatting helpers are available in `coinquote.formatting`:
`currency_symbol`, `format_number` and `format_large_number`. The rendered
views used by the command are `coinquote.cli.render_price` and
`coinquote.cli.render_coin_list`.

## Running the tests

```
pip install ".[test]"
pytest
```