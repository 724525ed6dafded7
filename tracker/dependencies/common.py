from functools import lru_cache

from ..contracts.market import IPriceOracle
from ..services.market_data_service import MockPriceOracle


@lru_cache
def get_price_oracle() -> IPriceOracle:
    return MockPriceOracle()
