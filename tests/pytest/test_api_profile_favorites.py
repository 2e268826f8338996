from __future__ import annotations

from fastapi.testclient import TestClient


def test_update_settings(client):
    response = client.put("/profile/settings", json={"base_walking_speed": 100, "preferred_pace": "fast"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["base_walking_speed"] == 100.0
    assert payload["preferred_pace"] == "fast"

    speed = client.get("/profile/recommended-speed").json()
    assert speed["speed_m_per_min"] == 100.0


def test_update_settings_rejects_out_of_range_speed(client):
    response = client.put("/profile/settings", json={"base_walking_speed": 150})
    assert response.status_code == 400
    assert client.get("/profile").json()["base_walking_speed"] == 80.0


def test_update_settings_rejects_unknown_pace(client):
    response = client.put("/profile/settings", json={"preferred_pace": "sprint"})
    assert response.status_code == 422


def test_favorites_add_list_delete(client):
    response = client.post(
        "/favorites",
        json={"name": "Home", "address": "Setagaya 3-1", "coordinates": {"lat": 35.64, "lng": 139.65}, "category": "home"},
    )
    assert response.status_code == 200
    home = response.json()
    assert home["category"] == "home"

    favorites = client.get("/favorites").json()["favorites"]
    assert [f["id"] for f in favorites] == [home["id"]]

    assert client.delete(f"/favorites/{home['id']}").status_code == 200
    assert client.delete(f"/favorites/{home['id']}").status_code == 404
    assert client.get("/favorites").json()["favorites"] == []


def test_favorite_category_is_validated(client):
    response = client.post(
        "/favorites",
        json={"name": "Cafe", "coordinates": {"lat": 0, "lng": 0}, "category": "cafe"},
    )
    assert response.status_code == 422


def test_profile_survives_restart_with_file_storage(monkeypatch, tmp_path, arrival_payload):
    monkeypatch.setenv("WALKPACE_DATA_DIR", str(tmp_path / "profile"))
    monkeypatch.setenv("WALKPACE_LOG_DIR", str(tmp_path / "logs"))

    from walkpace.api.main import app

    with TestClient(app) as client:
        assert client.post("/walks/arrival", json=arrival_payload(20, 22)).status_code == 200
        assert client.put("/profile/settings", json={"base_walking_speed": 70}).status_code == 200

    with TestClient(app) as client:
        profile = client.get("/profile").json()
        assert profile["base_walking_speed"] == 70.0
        assert len(profile["walking_history"]) == 1
        assert profile["walking_history"][0]["actual_time"] == 22

        health = client.get("/health").json()
        assert health["storage"] == "json_file"
        assert health["walks"] == 1
