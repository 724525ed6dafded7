import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Optional

from ..contracts.market import IPriceOracle
from ..core.logger import logger

CENT = Decimal("0.01")
MULTIPLIER_PRECISION = Decimal("0.0001")

MIN_DERIVED_PRICE = 10
DERIVED_PRICE_SPAN = 990
VOLATILITY = 0.05

SEED_PRICES = {
    "AAPL": Decimal("175.50"),
    "GOOGL": Decimal("2850.75"),
    "MSFT": Decimal("415.20"),
    "TSLA": Decimal("245.80"),
    "AMZN": Decimal("3150.40"),
    "NVDA": Decimal("485.60"),
    "META": Decimal("325.90"),
    "NFLX": Decimal("485.30"),
    "AMD": Decimal("125.40"),
    "INTC": Decimal("45.80"),
}


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


class PriceCache:
    """Memo table of symbol -> price owned by a single oracle."""

    def __init__(self, initial: Optional[Dict[str, Decimal]] = None):
        self._prices: Dict[str, Decimal] = dict(initial or {})

    def get(self, symbol: str) -> Optional[Decimal]:
        return self._prices.get(symbol)

    def set(self, symbol: str, price: Decimal) -> None:
        self._prices[symbol] = price

    def symbols(self):
        return list(self._prices.keys())

    def snapshot(self) -> Dict[str, Decimal]:
        return dict(self._prices)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._prices

    def __len__(self) -> int:
        return len(self._prices)


class MockPriceOracle(IPriceOracle):
    """Mock market data backed by a seed table.

    Unknown symbols get a deterministic price in [10, 1000] derived from the
    symbol itself, cached for the lifetime of the oracle.
    """

    def __init__(self, cache: Optional[PriceCache] = None, rng: Optional[random.Random] = None):
        self.cache = cache if cache is not None else PriceCache(SEED_PRICES)
        self._rng = rng or random.Random()

    def get_current_price(self, symbol: str) -> Decimal:
        key = normalize_symbol(symbol)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        price = self._derive_price(key)
        self.cache.set(key, price)
        logger.debug(f"Derived mock price for {key}: {price}")
        return price

    def get_current_prices(self, symbols: Iterable[str]) -> Dict[str, Decimal]:
        return {symbol: self.get_current_price(symbol) for symbol in dict.fromkeys(symbols)}

    def get_volatile_price(self, symbol: str) -> Decimal:
        base_price = self.get_current_price(symbol)
        variation = -VOLATILITY + self._rng.random() * (2 * VOLATILITY)
        multiplier = Decimal(1 + variation).quantize(MULTIPLIER_PRECISION, rounding=ROUND_HALF_UP)
        return (base_price * multiplier).quantize(CENT, rounding=ROUND_HALF_UP)

    def refresh_prices(self) -> Dict[str, Decimal]:
        """Perturb every cached price in place. Not exposed over HTTP."""
        for symbol in self.cache.symbols():
            self.cache.set(symbol, self.get_volatile_price(symbol))
        logger.info(f"Refreshed {len(self.cache)} mock prices")
        return self.cache.snapshot()

    @staticmethod
    def _derive_price(symbol: str) -> Decimal:
        seeded = random.Random(symbol)
        base_price = MIN_DERIVED_PRICE + seeded.random() * DERIVED_PRICE_SPAN
        return Decimal(base_price).quantize(CENT, rounding=ROUND_HALF_UP)
