from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import datetime


PaceId = Literal["slow", "normal", "fast"]
CategoryId = Literal["home", "work", "gym", "favorite"]


class CoordinatesModel(BaseModel):
    lat: float
    lng: float


class RouteModel(BaseModel):
    start: str
    end: str
    start_coords: CoordinatesModel
    end_coords: CoordinatesModel


# 1. Profil
class WalkingRecordModel(BaseModel):
    id: str
    estimated_time: float
    actual_time: int
    distance: float
    route: RouteModel
    timestamp: datetime
    accuracy: float


class SavedLocationModel(BaseModel):
    id: str
    name: str
    address: str
    coordinates: CoordinatesModel
    category: CategoryId


class ProfileResponse(BaseModel):
    base_walking_speed: float
    preferred_pace: PaceId
    walking_history: List[WalkingRecordModel]
    favorite_locations: List[SavedLocationModel]


class SettingsUpdateRequest(BaseModel):
    base_walking_speed: Optional[float] = Field(None, description="m/min, 30-120")
    preferred_pace: Optional[PaceId] = None


# 2. Estimation / stats
class SpeedEstimateResponse(BaseModel):
    speed_m_per_min: float
    base_walking_speed: float
    average_accuracy: Optional[float] = None
    time_adjustment: float
    window_size: int
    reason: Literal["cold_start", "learned", "degenerate_accuracy"]


class WalkingStatsResponse(BaseModel):
    total_walks: int
    average_accuracy: float
    recent_accuracy: float
    is_improving: bool


class PaceOptionModel(BaseModel):
    id: PaceId
    label: str
    description: str
    speed_multiplier: float


class RouteEstimateRequest(BaseModel):
    distance_m: float = Field(..., ge=0, description="Distance du trajet (fournisseur carto)")
    pace: Optional[PaceId] = None


class RouteEstimateResponse(BaseModel):
    distance_m: float
    pace: PaceId
    speed_m_per_min: float
    estimated_minutes: int


# 3. Arrivees
class ArrivalPreviewRequest(BaseModel):
    estimated_time: float = Field(..., ge=0)
    start_time: datetime
    actual_arrival_time: Optional[datetime] = None


class ArrivalRequest(ArrivalPreviewRequest):
    distance: float = Field(..., ge=0)
    route: RouteModel


class ArrivalSummaryResponse(BaseModel):
    estimated_time: float
    actual_time: int
    time_difference: float
    accuracy: float
    accuracy_percent: float
    status: Literal["late", "early", "on_time"]
    grade: Literal["good", "fair", "poor"]


class WalkingHistoryResponse(BaseModel):
    walks: List[WalkingRecordModel]


# 4. Favoris
class FavoriteCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = ""
    coordinates: CoordinatesModel
    category: CategoryId = "favorite"


class FavoritesResponse(BaseModel):
    favorites: List[SavedLocationModel]
