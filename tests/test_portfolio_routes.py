import pytest

from tests.conftest import auth_headers
from tracker.database.models import Investment


def create_portfolio(client, token, name="Retirement", description="Long term"):
    response = client.post(
        "/api/portfolios",
        json={"name": name, "description": description},
        headers=auth_headers(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


def add_investment(client, token, portfolio_id, symbol="AAPL", shares=10, price=150):
    response = client.post(
        f"/api/portfolios/{portfolio_id}/investments",
        json={
            "symbol": symbol,
            "name": f"{symbol} Inc.",
            "shares": shares,
            "purchasePrice": price,
            "purchaseDate": "2024-01-15",
        },
        headers=auth_headers(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_list_portfolios(client, alice):
    token = alice["token"]
    create_portfolio(client, token, name="Retirement")
    create_portfolio(client, token, name="Trading", description=None)

    response = client.get("/api/portfolios", headers=auth_headers(token))

    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == ["Trading", "Retirement"]
    assert all(p["investments"] is None for p in response.json())


def test_portfolios_are_scoped_to_owner(client, alice, bob):
    create_portfolio(client, alice["token"])

    response = client.get("/api/portfolios", headers=auth_headers(bob["token"]))

    assert response.json() == []


def test_get_portfolio_includes_investments(client, alice):
    token = alice["token"]
    portfolio = create_portfolio(client, token)
    add_investment(client, token, portfolio["id"])

    response = client.get(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(token))

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Retirement"
    assert [i["symbol"] for i in body["investments"]] == ["AAPL"]


def test_update_portfolio(client, alice):
    token = alice["token"]
    portfolio = create_portfolio(client, token)

    response = client.put(
        f"/api/portfolios/{portfolio['id']}",
        json={"name": "Pension", "description": "Renamed"},
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Pension"
    assert response.json()["description"] == "Renamed"


def test_blank_portfolio_name_rejected(client, alice):
    response = client.post("/api/portfolios", json={"name": "   "}, headers=auth_headers(alice["token"]))
    assert response.status_code == 400


def test_missing_portfolio_is_404(client, alice):
    response = client.get("/api/portfolios/12345", headers=auth_headers(alice["token"]))

    assert response.status_code == 404
    assert response.json() == {"message": "Portfolio not found"}


def test_delete_by_other_user_is_forbidden(client, alice, bob):
    portfolio = create_portfolio(client, alice["token"])

    response = client.delete(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(bob["token"]))

    assert response.status_code == 403
    assert response.json() == {"message": "Access denied"}
    still_there = client.get(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(alice["token"]))
    assert still_there.status_code == 200


def test_read_and_update_by_other_user_are_forbidden(client, alice, bob):
    portfolio = create_portfolio(client, alice["token"])
    headers = auth_headers(bob["token"])

    assert client.get(f"/api/portfolios/{portfolio['id']}", headers=headers).status_code == 403
    response = client.put(f"/api/portfolios/{portfolio['id']}", json={"name": "Mine"}, headers=headers)
    assert response.status_code == 403


def test_delete_portfolio_cascades_investments(client, alice, db_session):
    token = alice["token"]
    portfolio = create_portfolio(client, token)
    add_investment(client, token, portfolio["id"])
    add_investment(client, token, portfolio["id"], symbol="MSFT", shares=2, price=300)

    response = client.delete(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(token))

    assert response.status_code == 200
    assert response.json() == {"message": "Portfolio deleted successfully"}
    assert db_session.query(Investment).count() == 0
    assert client.get(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(token)).status_code == 404


def test_summary_uses_oracle_prices(client, alice):
    token = alice["token"]
    retirement = create_portfolio(client, token, name="Retirement")
    add_investment(client, token, retirement["id"], symbol="AAPL", shares=10, price=150)
    create_portfolio(client, token, name="Empty")

    response = client.get("/api/portfolios/summary", headers=auth_headers(token))

    assert response.status_code == 200
    summaries = {s["name"]: s for s in response.json()}
    assert summaries["Retirement"]["investmentCount"] == 1
    assert summaries["Retirement"]["totalCost"] == "1500"
    assert summaries["Retirement"]["totalValue"] == "1755"
    assert summaries["Retirement"]["totalGainLoss"] == "255"
    assert summaries["Retirement"]["totalGainLossPercentage"] == "17"
    assert summaries["Empty"]["investmentCount"] == 0
    assert summaries["Empty"]["totalValue"] == "0"
    assert summaries["Empty"]["totalGainLossPercentage"] == "0"


def test_portfolio_routes_require_credential(client):
    assert client.get("/api/portfolios").status_code == 401
    assert client.get("/api/portfolios", headers={"Authorization": "Bearer nope"}).status_code == 401


@pytest.mark.parametrize("portfolio_id", ["99999999999999999999", "0", "-1"])
def test_out_of_range_portfolio_id_is_400(client, alice, portfolio_id):
    headers = auth_headers(alice["token"])

    assert client.get(f"/api/portfolios/{portfolio_id}", headers=headers).status_code == 400
    assert client.delete(f"/api/portfolios/{portfolio_id}", headers=headers).status_code == 400


def test_largest_storable_portfolio_id_is_404(client, alice):
    response = client.get(f"/api/portfolios/{2 ** 63 - 1}", headers=auth_headers(alice["token"]))
    assert response.status_code == 404


def test_portfolio_detail_orders_investments_like_list(client, alice):
    token = alice["token"]
    headers = auth_headers(token)
    portfolio = create_portfolio(client, token)
    for symbol in ("AAPL", "NVDA", "MSFT"):
        add_investment(client, token, portfolio["id"], symbol=symbol)

    detail = client.get(f"/api/portfolios/{portfolio['id']}", headers=headers).json()
    listing = client.get(f"/api/portfolios/{portfolio['id']}/investments", headers=headers).json()

    assert [i["id"] for i in detail["investments"]] == [i["id"] for i in listing]
    assert [i["symbol"] for i in listing] == ["MSFT", "NVDA", "AAPL"]
