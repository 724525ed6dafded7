from typing import List, Optional

from .base import CamelModel


class IpoOffering(CamelModel):
    date: Optional[str] = None
    company: Optional[str] = None
    symbol: Optional[str] = None
    exchange: Optional[str] = None
    action: Optional[str] = None
    shares: Optional[int] = None
    price: Optional[str] = None
    currency: Optional[str] = None


class IpoCalendarResponse(CamelModel):
    ipo_offerings: List[IpoOffering]
    count: int
    source: str
    period: Optional[str] = None
