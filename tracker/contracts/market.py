from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Protocol


class IPriceOracle(Protocol):
    def get_current_price(self, symbol: str) -> Decimal: ...

    def get_current_prices(self, symbols: Iterable[str]) -> Dict[str, Decimal]: ...


class IIpoCalendarProvider(Protocol):
    source: str

    async def fetch_calendar(self, from_date: date, to_date: date) -> List[Dict[str, Any]]: ...
