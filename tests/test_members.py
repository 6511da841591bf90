import asyncio
from concurrent.futures import ThreadPoolExecutor

from artfolio_api.app.core.errors import Conflict
from artfolio_api.app.schemas.member import MemberCreate
from artfolio_api.app.services.member_service import MemberService
from conftest import auth_headers, login, register


def test_register_returns_public_record(client):
    resp = register(client, about="Oil painter", location="Wellington")
    assert resp.status_code == 201
    body = resp.json()
    assert body["username"] == "yana"
    assert body["location"] == "Wellington"
    assert isinstance(body["id"], int)
    assert "password" not in body


def test_duplicate_username_conflicts(client):
    assert register(client).status_code == 201
    resp = register(client, password="other")
    assert resp.status_code == 409
    assert resp.json() == {
        "error": "conflict",
        "detail": "Username already taken. Please try another one",
    }
    members = client.get("/allMembers").json()
    assert [m["username"] for m in members] == ["yana"]


def test_register_missing_fields_is_invalid_input(client):
    resp = client.post("/registerMember", json={"username": "yana", "password": "x"})
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_input"


def test_register_blank_username_is_invalid_input(client):
    resp = register(client, username="   ")
    assert resp.status_code == 422


def test_login_success_returns_token(client):
    register(client)
    resp = login(client)
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "yana"
    assert body["email"] == "yana@example.com"
    assert body["token_type"] == "bearer"
    assert body["access_token"].count(".") == 2
    assert "password" not in body


def test_login_wrong_password(client):
    register(client)
    resp = login(client, password="wrong")
    assert resp.status_code == 401
    assert resp.json()["error"] == "unauthorized"
    assert resp.headers["WWW-Authenticate"] == "Bearer"


def test_login_unknown_member(client):
    resp = login(client, username="ghost")
    assert resp.status_code == 404
    assert resp.json() == {"error": "not_found", "detail": "Member not found. Please register"}


def test_all_members_empty(client):
    resp = client.get("/allMembers")
    assert resp.status_code == 200
    assert resp.json() == []


def test_all_members_in_registration_order(client):
    register(client, username="yana")
    register(client, username="hayley")
    names = [m["username"] for m in client.get("/allMembers").json()]
    assert names == ["yana", "hayley"]


def test_my_account_info_requires_token(client, member):
    resp = client.get(f"/myAccountInfo/{member['id']}")
    assert resp.status_code == 401


def test_my_account_info_returns_own_profile(client, member):
    resp = client.get(f"/myAccountInfo/{member['id']}", headers=member["headers"])
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "yana"
    assert body["website"] == "https://yana.art"


def test_my_account_info_rejects_other_member(client, member):
    other = register(client, username="hayley").json()
    resp = client.get(f"/myAccountInfo/{other['id']}", headers=member["headers"])
    assert resp.status_code == 401


def test_invalid_token_rejected(client, member):
    resp = client.get(f"/myAccountInfo/{member['id']}", headers=auth_headers("not.a.token"))
    assert resp.status_code == 401
    assert resp.json()["error"] == "unauthorized"


def test_login_strips_username_like_registration(client):
    assert register(client, username=" yana").json()["username"] == "yana"
    resp = login(client, username=" yana")
    assert resp.status_code == 200
    assert resp.json()["username"] == "yana"


def test_account_id_beyond_integer_range_is_invalid_input(client, member):
    resp = client.get("/myAccountInfo/99999999999999999999", headers=member["headers"])
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_input"


def test_concurrent_registrations_store_one_member(client):
    data = MemberCreate(username="yana", email="yana@example.com", password="secret")

    def attempt(_):
        try:
            asyncio.run(MemberService.register(data))
        except Conflict:
            return 409
        return 201

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert sorted(results) == [201] + [409] * 7
    assert [m["username"] for m in client.get("/allMembers").json()] == ["yana"]
