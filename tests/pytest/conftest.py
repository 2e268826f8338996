from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setenv("WALKPACE_DATA_DIR", ":memory:")
    monkeypatch.setenv("WALKPACE_LOG_DIR", str(tmp_path / "logs"))

    from walkpace.api.main import app

    with TestClient(app) as c:
        yield c


def _arrival_payload(estimated: float, actual_minutes: int, *, distance: float = 1600.0) -> dict:
    return {
        "estimated_time": estimated,
        "distance": distance,
        "route": {
            "start": "Shibuya Station",
            "end": "Yoyogi Park",
            "start_coords": {"lat": 35.658, "lng": 139.7016},
            "end_coords": {"lat": 35.6717, "lng": 139.6949},
        },
        "start_time": "2026-03-02T12:00:00",
        "actual_arrival_time": f"2026-03-02T12:{actual_minutes:02d}:00",
    }


@pytest.fixture
def arrival_payload():
    return _arrival_payload
