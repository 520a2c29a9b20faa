"""Look up cryptocurrency prices and market rankings from CoinGecko on the command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]