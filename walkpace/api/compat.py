"""Adapters entre schemas API (pydantic) et modeles core (dataclasses)."""

from __future__ import annotations

from walkpace.api.schemas import (
    CoordinatesModel,
    ProfileResponse,
    RouteModel,
    SavedLocationModel,
    WalkingRecordModel,
)
from walkpace.core.models import Coordinates, RouteDescriptor, SavedLocation, UserProfile, WalkingRecord
from walkpace.services.serialization import to_jsonable


def model_to_dict(model):
    if hasattr(model, "model_dump"):
        return model.model_dump()
    return model.dict()


def coordinates_from_model(model: CoordinatesModel) -> Coordinates:
    return Coordinates(lat=model.lat, lng=model.lng)


def route_from_model(model: RouteModel) -> RouteDescriptor:
    return RouteDescriptor(
        start=model.start,
        end=model.end,
        start_coords=coordinates_from_model(model.start_coords),
        end_coords=coordinates_from_model(model.end_coords),
    )


def record_to_model(record: WalkingRecord) -> WalkingRecordModel:
    return WalkingRecordModel(**to_jsonable(record))


def location_to_model(location: SavedLocation) -> SavedLocationModel:
    return SavedLocationModel(**to_jsonable(location))


def profile_to_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(
        base_walking_speed=profile.base_walking_speed,
        preferred_pace=profile.preferred_pace,
        walking_history=[record_to_model(r) for r in profile.walking_history],
        favorite_locations=[location_to_model(loc) for loc in profile.favorite_locations],
    )
