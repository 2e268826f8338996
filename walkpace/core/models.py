from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from walkpace.core.constants import DEFAULT_BASE_WALKING_SPEED, DEFAULT_PACE


Pace = Literal["slow", "normal", "fast"]
LocationCategory = Literal["home", "work", "gym", "favorite"]
SpeedReason = Literal["cold_start", "learned", "degenerate_accuracy"]
ArrivalStatus = Literal["late", "early", "on_time"]
ArrivalGrade = Literal["good", "fair", "poor"]


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class RouteDescriptor:
    start: str
    end: str
    start_coords: Coordinates
    end_coords: Coordinates


@dataclass(frozen=True)
class WalkingRecord:
    id: str
    estimated_time: float
    actual_time: int
    distance: float
    route: RouteDescriptor
    timestamp: datetime
    accuracy: float


@dataclass(frozen=True)
class SavedLocation:
    id: str
    name: str
    address: str
    coordinates: Coordinates
    category: LocationCategory


@dataclass(frozen=True)
class UserProfile:
    base_walking_speed: float = DEFAULT_BASE_WALKING_SPEED
    preferred_pace: Pace = DEFAULT_PACE
    walking_history: tuple[WalkingRecord, ...] = field(default_factory=tuple)
    favorite_locations: tuple[SavedLocation, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PaceOption:
    id: Pace
    label: str
    description: str
    speed_multiplier: float


@dataclass(frozen=True)
class SpeedEstimate:
    speed_m_per_min: float
    base_walking_speed: float
    average_accuracy: float | None
    time_adjustment: float
    window_size: int
    reason: SpeedReason


@dataclass(frozen=True)
class WalkingStats:
    total_walks: int
    average_accuracy: float
    recent_accuracy: float
    is_improving: bool


@dataclass(frozen=True)
class ArrivalSummary:
    estimated_time: float
    actual_time: int
    time_difference: float
    accuracy: float
    accuracy_percent: float
    status: ArrivalStatus
    grade: ArrivalGrade


@dataclass(frozen=True)
class RoutePlan:
    distance_m: float
    pace: Pace
    speed_m_per_min: float
    estimated_minutes: int
