from artfolio_api.app.core.config import settings


def test_config_json(client):
    resp = client.get("/config.json")
    assert resp.status_code == 200
    assert resp.json() == {"SERVER_URL": settings.server_url, "SERVER_PORT": settings.server_port}


def test_health_lists_tables(client):
    body = client.get("/health").json()
    assert body["database"] == "connected"
    for table in ("members", "portfolios", "comments", "migrations"):
        assert table in body["tables"]


def test_migrations_are_idempotent(db_path):
    from artfolio_api.app.core.db import MIGRATIONS, get_connection, init_db

    init_db()
    init_db()
    conn = get_connection()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == [v for v, _ in MIGRATIONS]


def test_cors_headers(client):
    resp = client.get("/allMembers", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"
