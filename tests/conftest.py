import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("AUTH_TOKEN_SCHEME", "simple")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracker.database import Base, get_db
from tracker.dependencies.common import get_price_oracle
from tracker.dependencies.market_dependencies import get_ipo_provider
from tracker.main import app as tracker_app
from tracker.services.market_data_service import MockPriceOracle


class FakeIpoProvider:
    source = "Finnhub API"

    def __init__(self, offerings=None, error=None):
        self.offerings = offerings or []
        self.error = error
        self.calls = []

    async def fetch_calendar(self, from_date: date, to_date: date):
        self.calls.append((from_date, to_date))
        if self.error is not None:
            raise self.error
        return list(self.offerings)


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def price_oracle():
    return MockPriceOracle()


@pytest.fixture()
def ipo_provider():
    return FakeIpoProvider(offerings=[
        {"date": "2024-03-01", "company": "Acme Robotics", "symbol": "ACMR",
         "exchange": "NASDAQ", "action": "expected", "shares": 5000000,
         "price": "18-20", "currency": "USD"},
    ])


@pytest.fixture()
def client(db_engine, price_oracle, ipo_provider):
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    tracker_app.dependency_overrides[get_db] = override_get_db
    tracker_app.dependency_overrides[get_price_oracle] = lambda: price_oracle
    tracker_app.dependency_overrides[get_ipo_provider] = lambda: ipo_provider

    with TestClient(tracker_app) as test_client:
        yield test_client

    tracker_app.dependency_overrides.clear()


def register(client, email="alice@tracker.io", password="secret123",
             first_name="Alice", last_name="Smith"):
    response = client.post("/api/auth/register", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
    })
    assert response.status_code == 200, response.text
    return response.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def alice(client):
    return register(client)


@pytest.fixture()
def bob(client):
    return register(client, email="bob@tracker.io", first_name="Bob", last_name="Jones")
