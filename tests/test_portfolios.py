import asyncio
import json
from concurrent.futures import ThreadPoolExecutor

from artfolio_api.app.core.errors import Conflict
from artfolio_api.app.schemas.portfolio import PortfolioCreate
from artfolio_api.app.services.portfolio_service import PortfolioService
from conftest import auth_headers, login, portfolio_payload, register


def add(client, member, **kwargs):
    return client.post("/addPortfolio", json=portfolio_payload(**kwargs), headers=member["headers"])


def test_add_portfolio(client, member):
    resp = add(client, member)
    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Harbour at dusk"
    assert body["price"] == 25
    assert body["memberId"] == member["id"]


def test_add_portfolio_requires_token(client, member):
    resp = client.post("/addPortfolio", json=portfolio_payload())
    assert resp.status_code == 401
    assert client.get("/allPortfolios").json() == []


def test_add_portfolio_for_another_member_rejected(client, member):
    other = register(client, username="hayley").json()
    payload = portfolio_payload()
    payload["memberId"] = other["id"]
    resp = client.post("/addPortfolio", json=payload, headers=member["headers"])
    assert resp.status_code == 401


def test_add_portfolio_with_own_member_id(client, member):
    payload = portfolio_payload()
    payload["memberId"] = member["id"]
    resp = client.post("/addPortfolio", json=payload, headers=member["headers"])
    assert resp.status_code == 201


def test_duplicate_title_conflicts(client, member):
    assert add(client, member).status_code == 201
    resp = add(client, member, price=40)
    assert resp.status_code == 409
    assert resp.json() == {
        "error": "conflict",
        "detail": "Title taken already, please try another one",
    }
    assert len(client.get("/allPortfolios").json()) == 1


def test_missing_field_is_invalid_input(client, member):
    payload = portfolio_payload()
    del payload["image"]
    resp = client.post("/addPortfolio", json=payload, headers=member["headers"])
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_input"


def test_negative_price_is_invalid_input(client, member):
    assert add(client, member, price=-1).status_code == 422


def test_my_portfolios(client, member):
    add(client, member, title="One")
    add(client, member, title="Two")
    register(client, username="hayley")
    other = login(client, username="hayley").json()
    client.post(
        "/addPortfolio",
        json=portfolio_payload(title="Three"),
        headers=auth_headers(other["access_token"]),
    )
    titles = [p["title"] for p in client.get(f"/myPortfolios/{member['id']}").json()]
    assert titles == ["One", "Two"]


def test_my_portfolios_empty(client, member):
    resp = client.get(f"/myPortfolios/{member['id']}")
    assert resp.status_code == 200
    assert resp.json() == []


def test_portfolios_and_authors(client, member):
    add(client, member)
    feed = client.get("/portfoliosAndAuthors").json()
    assert len(feed) == 1
    assert feed[0]["authorInfo"] == {
        "id": member["id"],
        "username": "yana",
        "location": "Wellington",
        "website": "https://yana.art",
    }
    assert "password" not in feed[0]["authorInfo"]


def test_portfolio_with_author_is_single_element_list(client, member):
    portfolio_id = add(client, member).json()["id"]
    resp = client.get(f"/portfolioWithAuthor/{portfolio_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert body[0]["id"] == portfolio_id
    assert body[0]["authorInfo"]["username"] == "yana"
    assert body[0]["comments"] == []


def test_portfolio_with_author_unknown_id(client):
    resp = client.get("/portfolioWithAuthor/999")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_filter_price_bounds_are_exclusive(client, member):
    for title, price in (("Ten", 10), ("Twenty five", 25), ("Fifty", 50)):
        add(client, member, title=title, price=price)
    resp = client.get("/filterPortfolios/10/50/all")
    assert resp.status_code == 200
    assert [p["title"] for p in resp.json()] == ["Twenty five"]


def test_filter_by_category(client, member):
    add(client, member, title="Painting", category="painting")
    add(client, member, title="Photo", category="photography")
    resp = client.get("/filterPortfolios/0/100/photography")
    assert [p["title"] for p in resp.json()] == ["Photo"]
    assert resp.json()[0]["authorInfo"]["username"] == "yana"


def test_filter_no_match_is_empty_list(client, member):
    add(client, member)
    resp = client.get("/filterPortfolios/0/100/sculpture")
    assert resp.status_code == 200
    assert resp.json() == []


def test_filter_non_numeric_price_is_invalid_input(client):
    resp = client.get("/filterPortfolios/cheap/100/all")
    assert resp.status_code == 422


def test_infinite_price_is_invalid_input(client, member):
    payload = portfolio_payload()
    body = json.dumps(payload).replace('"price": 25', '"price": 1e999')
    resp = client.post(
        "/addPortfolio",
        content=body,
        headers={**member["headers"], "Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_input"
    assert resp.json()["detail"][0]["loc"] == ["body", "price"]
    assert client.get("/allPortfolios").json() == []


def test_ids_beyond_integer_range_are_invalid_input(client, member):
    for path in ("/portfolioWithAuthor/99999999999999999999", "/myPortfolios/99999999999999999999"):
        resp = client.get(path)
        assert resp.status_code == 422, path
        assert resp.json()["error"] == "invalid_input"
    payload = portfolio_payload()
    payload["memberId"] = 10**20
    resp = client.post("/addPortfolio", json=payload, headers=member["headers"])
    assert resp.status_code == 422


def test_concurrent_uploads_store_one_portfolio(client, member):
    data = PortfolioCreate(**portfolio_payload())
    owner = {"member_id": member["id"]}

    def attempt(_):
        try:
            asyncio.run(PortfolioService.create_portfolio(data, owner))
        except Conflict:
            return 409
        return 201

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert sorted(results) == [201] + [409] * 7
    assert [p["title"] for p in client.get("/allPortfolios").json()] == ["Harbour at dusk"]
