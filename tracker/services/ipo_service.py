import asyncio
import calendar
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

import aiohttp

from ..contracts.market import IIpoCalendarProvider
from ..core.exceptions import UpstreamError, ValidationError
from ..core.logger import logger

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_WINDOW_DAYS = 30


def parse_ipo_offering(node: Dict[str, Any]) -> Dict[str, Any]:
    """Map one Finnhub calendar entry onto an offering, keeping only present keys."""
    offering: Dict[str, Any] = {}

    if node.get("date") is not None:
        offering["date"] = str(node["date"])

    company = node.get("name", node.get("company"))
    if company is not None:
        offering["company"] = str(company)

    if node.get("symbol") is not None:
        offering["symbol"] = str(node["symbol"])
    if node.get("exchange") is not None:
        offering["exchange"] = str(node["exchange"])

    action = node.get("status", node.get("action"))
    if action is not None:
        offering["action"] = str(action)

    shares = node.get("numberOfShares", node.get("shares"))
    if shares is not None:
        try:
            offering["shares"] = int(shares)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable share count in IPO entry: {shares!r}")

    if node.get("price") is not None:
        offering["price"] = str(node["price"])
    if node.get("currency") is not None:
        offering["currency"] = str(node["currency"])

    return offering


def parse_ipo_calendar(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    entries = payload.get("ipoCalendar") or []
    return [parse_ipo_offering(entry) for entry in entries if isinstance(entry, dict)]


class FinnhubIpoProvider(IIpoCalendarProvider):
    source = "Finnhub API"

    def __init__(self, base_url: str, api_key: str, timeout_seconds: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_calendar(self, from_date: date, to_date: date) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/calendar/ipo"
        params = {
            "from": from_date.strftime(DATE_FORMAT),
            "to": to_date.strftime(DATE_FORMAT),
            "token": self.api_key,
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url, params=params) as response:
                    if response.status != 200:
                        logger.error(f"Finnhub API error: {response.status}")
                        raise UpstreamError(f"IPO provider returned status {response.status}")
                    data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error(f"Network error fetching IPO calendar: {e}")
            raise UpstreamError(str(e) or "Network error")
        except asyncio.TimeoutError:
            logger.error("Timed out fetching IPO calendar")
            raise UpstreamError("Timed out contacting IPO provider")

        if not isinstance(data, dict):
            raise UpstreamError("Unexpected IPO provider response")

        offerings = parse_ipo_calendar(data)
        logger.info(f"Fetched {len(offerings)} IPO offerings for {params['from']}..{params['to']}")
        return offerings


def parse_date(value: str, field: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid '{field}' date, expected YYYY-MM-DD")


class IpoService:
    def __init__(self, provider: IIpoCalendarProvider):
        self.provider = provider

    @property
    def source(self) -> str:
        return self.provider.source

    async def get_calendar(self, from_date: Optional[str], to_date: Optional[str],
                           today: Optional[date] = None) -> List[Dict[str, Any]]:
        if from_date is None or to_date is None:
            return await self.next_30_days(today)

        start = parse_date(from_date, "from")
        end = parse_date(to_date, "to")
        if start > end:
            raise ValidationError("'from' must not be after 'to'")
        return await self.provider.fetch_calendar(start, end)

    async def current_month(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        today = today or date.today()
        last_day = calendar.monthrange(today.year, today.month)[1]
        return await self.provider.fetch_calendar(today.replace(day=1), today.replace(day=last_day))

    async def next_30_days(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        today = today or date.today()
        return await self.provider.fetch_calendar(today, today + timedelta(days=DEFAULT_WINDOW_DAYS))
