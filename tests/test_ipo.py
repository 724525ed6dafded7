import asyncio
from datetime import date

import pytest

from tests.conftest import FakeIpoProvider
from tracker.core.exceptions import UpstreamError, ValidationError
from tracker.dependencies.market_dependencies import get_ipo_provider
from tracker.main import app as tracker_app
from tracker.services.ipo_service import IpoService, parse_date, parse_ipo_calendar, parse_ipo_offering


def test_parse_offering_maps_finnhub_fields():
    offering = parse_ipo_offering({
        "date": "2024-05-02",
        "name": "Globex Corp",
        "symbol": "GBX",
        "exchange": "NYSE",
        "status": "priced",
        "numberOfShares": 1200000,
        "price": 21,
        "totalSharesValue": 25200000,
    })

    assert offering == {
        "date": "2024-05-02",
        "company": "Globex Corp",
        "symbol": "GBX",
        "exchange": "NYSE",
        "action": "priced",
        "shares": 1200000,
        "price": "21",
    }


def test_parse_offering_keeps_only_present_keys():
    assert parse_ipo_offering({"symbol": "ONLY"}) == {"symbol": "ONLY"}


def test_parse_calendar_handles_missing_list():
    assert parse_ipo_calendar({}) == []
    assert parse_ipo_calendar({"ipoCalendar": None}) == []
    assert len(parse_ipo_calendar({"ipoCalendar": [{"symbol": "A"}, {"symbol": "B"}]})) == 2


def test_parse_date():
    assert parse_date("2024-02-29", "from") == date(2024, 2, 29)
    with pytest.raises(ValidationError):
        parse_date("29/02/2024", "from")


def test_current_month_window():
    provider = FakeIpoProvider()
    asyncio.run(IpoService(provider).current_month(today=date(2024, 2, 14)))
    assert provider.calls == [(date(2024, 2, 1), date(2024, 2, 29))]


def test_next_30_days_window():
    provider = FakeIpoProvider()
    asyncio.run(IpoService(provider).next_30_days(today=date(2024, 12, 15)))
    assert provider.calls == [(date(2024, 12, 15), date(2025, 1, 14))]


def test_calendar_defaults_when_bound_missing():
    provider = FakeIpoProvider()
    asyncio.run(IpoService(provider).get_calendar("2024-01-01", None, today=date(2024, 6, 1)))
    assert provider.calls == [(date(2024, 6, 1), date(2024, 7, 1))]


def test_calendar_rejects_inverted_range():
    service = IpoService(FakeIpoProvider())
    with pytest.raises(ValidationError):
        asyncio.run(service.get_calendar("2024-02-01", "2024-01-01"))


def test_calendar_route(client, ipo_provider):
    response = client.get("/api/ipo/calendar", params={"from": "2024-03-01", "to": "2024-03-31"})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert body["source"] == "Finnhub API"
    assert body["ipoOfferings"][0]["company"] == "Acme Robotics"
    assert body["ipoOfferings"][0]["shares"] == 5000000
    assert ipo_provider.calls == [(date(2024, 3, 1), date(2024, 3, 31))]


@pytest.mark.parametrize("path, period", [
    ("/api/ipo/calendar/current-month", "Current Month"),
    ("/api/ipo/calendar/next-30-days", "Next 30 Days"),
])
def test_fixed_window_routes(client, path, period):
    response = client.get(path)

    assert response.status_code == 200
    assert response.json()["period"] == period
    assert response.json()["count"] == 1


def test_calendar_route_bad_date(client):
    response = client.get("/api/ipo/calendar", params={"from": "March", "to": "2024-03-31"})

    assert response.status_code == 400
    assert "YYYY-MM-DD" in response.json()["message"]


def test_calendar_route_upstream_failure(client):
    tracker_app.dependency_overrides[get_ipo_provider] = lambda: FakeIpoProvider(
        error=UpstreamError("IPO provider returned status 503")
    )

    response = client.get("/api/ipo/calendar/next-30-days")

    assert response.status_code == 400
    assert response.json() == {"message": "IPO provider returned status 503"}
