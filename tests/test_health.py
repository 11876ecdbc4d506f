from flowing_links.infrastructure.persistence import Database


def test_health(client):
    res = client.get("/Health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["timestamp"]


def test_health_detailed_reports_database(client):
    res = client.get("/Health/detailed")
    assert res.status_code == 200
    assert res.json()["database"] == "connected"


def test_live_and_ready(client):
    assert client.get("/Health/live").status_code == 200
    assert client.get("/Health/ready").status_code == 200


def test_unreachable_database_is_503(client, monkeypatch):
    async def failing_ping(self):
        return False

    monkeypatch.setattr(Database, "ping", failing_ping)

    detailed = client.get("/Health/detailed")
    assert detailed.status_code == 503
    assert detailed.json()["status"] == "unhealthy"
    assert client.get("/Health/ready").status_code == 503


def test_validation_error_shape(client, auth_headers):
    res = client.get("/Link/not-a-number", headers=auth_headers)
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Validation error"
    assert body["details"]
