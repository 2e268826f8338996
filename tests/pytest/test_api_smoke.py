from __future__ import annotations


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["storage"] == "memory"
    assert payload["walks"] == 0
    assert payload["favorites"] == 0
    assert "X-Request-ID" in response.headers


def test_root_banner(client):
    payload = client.get("/").json()
    assert payload["message"] == "WalkPace API"
    assert payload["docs"] == "/docs"


def test_routes_also_served_under_api_prefix(client):
    assert client.get("/api/profile").status_code == 200
    assert client.get("/api/walks").status_code == 200


def test_default_profile(client):
    payload = client.get("/profile").json()
    assert payload["base_walking_speed"] == 80.0
    assert payload["preferred_pace"] == "normal"
    assert payload["walking_history"] == []
    assert payload["favorite_locations"] == []


def test_pace_options(client):
    payload = client.get("/paces").json()
    assert [p["id"] for p in payload] == ["slow", "normal", "fast"]
    assert [p["speed_multiplier"] for p in payload] == [0.8, 1.0, 1.2]
