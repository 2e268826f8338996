from __future__ import annotations

"""Facade cote presentation (sans FastAPI).

Regroupe le stockage du profil, l'estimation de vitesse, les statistiques et
l'enregistrement des arrivees derriere une seule API appelable sans UI.
"""

import logging
from datetime import datetime
from typing import Callable

from walkpace.core.arrival import build_walking_record, new_record_id, summarize_arrival
from walkpace.core.constants import PACE_MULTIPLIERS
from walkpace.core.estimator import estimate_walking_speed
from walkpace.core.models import (
    ArrivalSummary,
    Coordinates,
    PaceOption,
    RouteDescriptor,
    RoutePlan,
    SavedLocation,
    SpeedEstimate,
    UserProfile,
    WalkingRecord,
    WalkingStats,
)
from walkpace.core.stats.walking_stats import compute_walking_stats
from walkpace.core.utils import estimate_walk_minutes, pace_multiplier
from walkpace.storage.profile_store import ProfileStore


logger = logging.getLogger("walkpace.service")


PACE_OPTIONS: tuple[PaceOption, ...] = (
    PaceOption(id="slow", label="Slow", description="0.8x the usual pace", speed_multiplier=PACE_MULTIPLIERS["slow"]),
    PaceOption(id="normal", label="Normal", description="Usual pace", speed_multiplier=PACE_MULTIPLIERS["normal"]),
    PaceOption(id="fast", label="Hurry", description="1.2x the usual pace", speed_multiplier=PACE_MULTIPLIERS["fast"]),
)


class ProfileService:
    def __init__(self, store: ProfileStore, *, clock: Callable[[], datetime] = datetime.now):
        self._store = store
        self._clock = clock

    @property
    def store(self) -> ProfileStore:
        return self._store

    def now(self) -> datetime:
        return self._clock()

    def _arrival_or_now(self, start_time: datetime, actual_arrival_time: datetime | None) -> datetime:
        """Arrivee confirmee, ou "maintenant" dans le fuseau du depart."""

        if actual_arrival_time is not None:
            return actual_arrival_time
        now = self.now()
        if start_time.tzinfo is not None:
            if now.tzinfo is None:
                now = now.astimezone()
            return now.astimezone(start_time.tzinfo)
        if now.tzinfo is not None:
            return now.astimezone().replace(tzinfo=None)
        return now

    def load_profile(self) -> UserProfile:
        return self._store.load()

    @property
    def profile(self) -> UserProfile:
        return self._store.profile

    # --- Estimation / stats ---

    def speed_estimate(self) -> SpeedEstimate:
        return estimate_walking_speed(self._store.profile, now=self.now())

    def recommended_speed(self) -> float:
        return self.speed_estimate().speed_m_per_min

    def stats(self) -> WalkingStats | None:
        return compute_walking_stats(self._store.profile.walking_history)

    def plan_route(self, distance_m: float, pace: str | None = None) -> RoutePlan:
        """ETA d'un trajet dont la distance vient du fournisseur cartographique."""

        pace = pace or self._store.profile.preferred_pace
        speed = self.recommended_speed() * pace_multiplier(pace)
        return RoutePlan(
            distance_m=float(distance_m),
            pace=pace,
            speed_m_per_min=speed,
            estimated_minutes=estimate_walk_minutes(distance_m, speed),
        )

    # --- Arrivees ---

    def preview_arrival(
        self,
        *,
        estimated_time: float,
        start_time: datetime,
        actual_arrival_time: datetime | None = None,
    ) -> ArrivalSummary:
        return summarize_arrival(
            estimated_time=estimated_time,
            start_time=start_time,
            actual_arrival_time=self._arrival_or_now(start_time, actual_arrival_time),
        )

    def record_arrival(
        self,
        *,
        estimated_time: float,
        distance: float,
        route: RouteDescriptor,
        start_time: datetime,
        actual_arrival_time: datetime | None = None,
    ) -> WalkingRecord:
        """Construit l'enregistrement, l'ajoute a l'historique et persiste.

        Chaque appel cree un nouvel enregistrement (pas de deduplication).
        """

        record = build_walking_record(
            estimated_time=estimated_time,
            distance=distance,
            route=route,
            start_time=start_time,
            actual_arrival_time=self._arrival_or_now(start_time, actual_arrival_time),
        )
        self._store.append(record)
        logger.info(
            "arrival_recorded",
            extra={
                "request_id": "-",
                "record_id": record.id,
                "estimated_time": record.estimated_time,
                "actual_time": record.actual_time,
                "accuracy": record.accuracy,
            },
        )
        return record

    # --- Reglages / favoris ---

    def update_settings(
        self,
        *,
        base_walking_speed: float | None = None,
        preferred_pace: str | None = None,
    ) -> UserProfile:
        return self._store.update_settings(base_walking_speed=base_walking_speed, preferred_pace=preferred_pace)

    def add_favorite(
        self,
        *,
        name: str,
        address: str,
        coordinates: Coordinates,
        category: str = "favorite",
    ) -> SavedLocation:
        location = SavedLocation(
            id=new_record_id(),
            name=name,
            address=address,
            coordinates=coordinates,
            category=category,
        )
        self._store.add_favorite(location)
        return location

    def remove_favorite(self, location_id: str) -> bool:
        return self._store.remove_favorite(location_id)
