from __future__ import annotations

from datetime import datetime, timedelta

from tests.unit._bootstrap import ensure_project_on_path


ensure_project_on_path()

from walkpace.core.models import Coordinates, RouteDescriptor, UserProfile, WalkingRecord  # noqa: E402


T0 = datetime(2026, 3, 2, 12, 0, 0)


def make_route(start: str = "Station", end: str = "Office") -> RouteDescriptor:
    return RouteDescriptor(
        start=start,
        end=end,
        start_coords=Coordinates(lat=35.681, lng=139.767),
        end_coords=Coordinates(lat=35.690, lng=139.700),
    )


def make_record(
    idx: int = 0,
    *,
    accuracy: float = 1.0,
    estimated_time: float = 20,
    actual_time: int | None = None,
) -> WalkingRecord:
    if actual_time is None:
        actual_time = int(round(estimated_time * accuracy))
    return WalkingRecord(
        id=f"rec-{idx}",
        estimated_time=estimated_time,
        actual_time=actual_time,
        distance=1600.0,
        route=make_route(),
        timestamp=T0 + timedelta(days=idx),
        accuracy=accuracy,
    )


def make_profile(accuracies: list[float], *, base: float = 80.0) -> UserProfile:
    return UserProfile(
        base_walking_speed=base,
        walking_history=tuple(make_record(i, accuracy=a) for i, a in enumerate(accuracies)),
    )
