"""Helpers de serialisation (sans FastAPI).

Convertit le profil utilisateur vers/depuis la forme JSON persistee (cles
camelCase, horodatages ISO-8601), et les dataclasses de resultat en
structures 100% JSON-serialisables pour l'API.

Ce module ne doit pas importer FastAPI.
"""

from __future__ import annotations

import json
import math
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Any

from walkpace.core.constants import (
    DEFAULT_BASE_WALKING_SPEED,
    DEFAULT_PACE,
    LOCATION_CATEGORIES,
    PACE_MULTIPLIERS,
)
from walkpace.core.models import (
    Coordinates,
    RouteDescriptor,
    SavedLocation,
    UserProfile,
    WalkingRecord,
)


def _dt_to_iso(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        # Conserve l'info timezone si presente.
        return value.isoformat()
    return None


def parse_iso_datetime(value: str) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"Horodatage ISO attendu, recu {type(value).__name__}")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def to_jsonable(obj: Any) -> Any:
    """Convertit obj en primitives JSON-serialisables.

    - dataclasses -> dict (recursif)
    - datetime/date -> ISO string
    - NaN/inf -> None
    """

    if obj is None or isinstance(obj, (str, bool, int)):
        return obj
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, (datetime, date)):
        return _dt_to_iso(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(v) for v in obj]
    return str(obj)


# --- Forme persistee (cles camelCase) ---


def _coords_to_dict(coords: Coordinates) -> dict[str, float]:
    return {"lat": coords.lat, "lng": coords.lng}


def _coords_from_dict(data: dict[str, Any]) -> Coordinates:
    return Coordinates(lat=float(data["lat"]), lng=float(data["lng"]))


def record_to_dict(record: WalkingRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "estimatedTime": record.estimated_time,
        "actualTime": record.actual_time,
        "distance": record.distance,
        "route": {
            "start": record.route.start,
            "end": record.route.end,
            "startCoords": _coords_to_dict(record.route.start_coords),
            "endCoords": _coords_to_dict(record.route.end_coords),
        },
        "timestamp": _dt_to_iso(record.timestamp),
        "accuracy": record.accuracy,
    }


def record_from_dict(data: dict[str, Any]) -> WalkingRecord:
    route = data["route"]
    return WalkingRecord(
        id=str(data["id"]),
        estimated_time=float(data["estimatedTime"]),
        actual_time=int(data["actualTime"]),
        distance=float(data["distance"]),
        route=RouteDescriptor(
            start=str(route["start"]),
            end=str(route["end"]),
            start_coords=_coords_from_dict(route["startCoords"]),
            end_coords=_coords_from_dict(route["endCoords"]),
        ),
        timestamp=parse_iso_datetime(data["timestamp"]),
        # Valeur stockee telle quelle: jamais recalculee au chargement.
        accuracy=float(data["accuracy"]),
    )


def location_to_dict(location: SavedLocation) -> dict[str, Any]:
    return {
        "id": location.id,
        "name": location.name,
        "address": location.address,
        "coordinates": _coords_to_dict(location.coordinates),
        "category": location.category,
    }


def location_from_dict(data: dict[str, Any]) -> SavedLocation:
    category = data["category"]
    if category not in LOCATION_CATEGORIES:
        raise ValueError(f"Categorie de lieu inconnue: {category!r}")
    return SavedLocation(
        id=str(data["id"]),
        name=str(data["name"]),
        address=str(data.get("address", "")),
        coordinates=_coords_from_dict(data["coordinates"]),
        category=category,
    )


def profile_to_dict(profile: UserProfile) -> dict[str, Any]:
    return {
        "baseWalkingSpeed": profile.base_walking_speed,
        "preferredPace": profile.preferred_pace,
        "walkingHistory": [record_to_dict(r) for r in profile.walking_history],
        "favoriteLocations": [location_to_dict(loc) for loc in profile.favorite_locations],
    }


def profile_from_dict(data: dict[str, Any]) -> UserProfile:
    """Cles de premier niveau absentes -> valeurs par defaut; entrees mal formees -> erreur."""

    if not isinstance(data, dict):
        raise ValueError("Profil JSON attendu sous forme d'objet.")
    pace = data.get("preferredPace", DEFAULT_PACE)
    if pace not in PACE_MULTIPLIERS:
        raise ValueError(f"Allure inconnue: {pace!r}")
    return UserProfile(
        base_walking_speed=float(data.get("baseWalkingSpeed", DEFAULT_BASE_WALKING_SPEED)),
        preferred_pace=pace,
        walking_history=tuple(record_from_dict(r) for r in data.get("walkingHistory", [])),
        favorite_locations=tuple(location_from_dict(loc) for loc in data.get("favoriteLocations", [])),
    )


def dumps_profile(profile: UserProfile) -> str:
    return json.dumps(profile_to_dict(profile), ensure_ascii=False)


def loads_profile(text: str) -> UserProfile:
    return profile_from_dict(json.loads(text))
