from __future__ import annotations

from datetime import datetime


def test_health_returns_status_and_metadata(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert isinstance(data["uptime"], float)
    assert data["uptime"] >= 0
    assert data["version"] == "1.0.0"


def test_health_timestamp_is_iso8601_utc(client):
    data = client.get("/api/v1/health").json()
    assert data["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_health_uptime_does_not_go_backwards(client):
    first = client.get("/api/v1/health").json()["uptime"]
    second = client.get("/api/v1/health").json()["uptime"]
    assert second >= first


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
