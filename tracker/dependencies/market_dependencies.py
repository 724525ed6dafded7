from fastapi import Depends

from ..config import settings
from ..contracts.market import IIpoCalendarProvider
from ..services.ipo_service import FinnhubIpoProvider, IpoService


def get_ipo_provider() -> IIpoCalendarProvider:
    return FinnhubIpoProvider(
        base_url=settings.FINNHUB_BASE_URL,
        api_key=settings.FINNHUB_API_KEY,
        timeout_seconds=settings.FINNHUB_TIMEOUT_SECONDS,
    )


def get_ipo_service(
    provider: IIpoCalendarProvider = Depends(get_ipo_provider),
) -> IpoService:
    return IpoService(provider=provider)
