import json

from artfolio_client.session import (
    ACCESS_TOKEN,
    CURRENT_PORTFOLIO,
    MEMBER_ID,
    USERS_NAME,
    SessionStore,
)


def test_remember_member():
    store = SessionStore()
    assert not store.logged_in
    store.remember_member({"id": 1, "username": "yana", "email": "y@example.com", "access_token": "t"})
    assert store.logged_in
    assert store.get(MEMBER_ID) == 1
    assert store.get(USERS_NAME) == "yana"
    assert store.get(ACCESS_TOKEN) == "t"


def test_clear_logs_out():
    store = SessionStore()
    store.remember_member({"id": 1, "username": "yana"})
    store.set(CURRENT_PORTFOLIO, 4)
    store.clear()
    assert not store.logged_in
    assert CURRENT_PORTFOLIO not in store


def test_remove_missing_key_is_noop():
    store = SessionStore()
    store.remove(CURRENT_PORTFOLIO)
    assert store.as_dict() == {}


def test_persists_to_file(tmp_path):
    path = tmp_path / "session.json"
    store = SessionStore(str(path))
    store.remember_member({"id": 1, "username": "yana"})
    assert json.loads(path.read_text())[USERS_NAME] == "yana"
    assert SessionStore(str(path)).logged_in


def test_unreadable_file_is_ignored(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")
    assert SessionStore(str(path)).as_dict() == {}
