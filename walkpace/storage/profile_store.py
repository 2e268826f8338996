from __future__ import annotations

import json
import logging
from dataclasses import replace

from walkpace.core.constants import (
    HISTORY_MAX_ITEMS,
    LOCATION_CATEGORIES,
    MAX_BASE_WALKING_SPEED,
    MIN_BASE_WALKING_SPEED,
    PACE_MULTIPLIERS,
    STORAGE_KEY,
)
from walkpace.core.models import SavedLocation, UserProfile, WalkingRecord
from walkpace.services.history_service import append_history, remove_location, trim_oldest, upsert_location
from walkpace.services.serialization import dumps_profile, loads_profile
from walkpace.storage.kv_store import KeyValueStorage


logger = logging.getLogger("walkpace.storage")


def default_profile() -> UserProfile:
    return UserProfile()


def validate_base_walking_speed(speed: float) -> float:
    speed = float(speed)
    if not (MIN_BASE_WALKING_SPEED <= speed <= MAX_BASE_WALKING_SPEED):
        raise ValueError(
            f"Vitesse de base hors bornes ({MIN_BASE_WALKING_SPEED:g}-{MAX_BASE_WALKING_SPEED:g} m/min): {speed:g}"
        )
    return speed


class ProfileStore:
    """Profil utilisateur en memoire + persistance complete a chaque mutation.

    Le snapshot en memoire reste la source de verite de la session, meme si
    l'ecriture echoue. Pas de verrou interne: l'appelant serialise les
    mutations.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._profile = default_profile()

    @property
    def profile(self) -> UserProfile:
        return self._profile

    def load(self) -> UserProfile:
        """Charge le profil; absent ou illisible -> profil par defaut."""

        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.exception("profile_read_failed", extra={"request_id": "-", "key": self._key})
            raw = None

        if raw is None:
            logger.info("profile_missing_using_default", extra={"request_id": "-", "key": self._key})
            self._profile = default_profile()
            return self._profile

        try:
            profile = loads_profile(raw)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "profile_load_malformed",
                extra={"request_id": "-", "key": self._key, "error": str(e)},
            )
            self._profile = default_profile()
            return self._profile

        if len(profile.walking_history) > HISTORY_MAX_ITEMS:
            profile = replace(profile, walking_history=trim_oldest(profile.walking_history))

        self._profile = profile
        logger.info(
            "profile_loaded",
            extra={
                "request_id": "-",
                "walks": len(profile.walking_history),
                "favorites": len(profile.favorite_locations),
            },
        )
        return self._profile

    def save(self, profile: UserProfile) -> bool:
        """Ecrit le profil complet; retourne False si l'ecriture a echoue."""

        self._profile = profile
        try:
            self._storage.set(self._key, dumps_profile(profile))
        except Exception:
            logger.exception("profile_save_failed", extra={"request_id": "-", "key": self._key})
            return False
        logger.info(
            "profile_saved",
            extra={
                "request_id": "-",
                "walks": len(profile.walking_history),
                "favorites": len(profile.favorite_locations),
            },
        )
        return True

    def append(self, record: WalkingRecord) -> UserProfile:
        profile = replace(self._profile, walking_history=append_history(self._profile.walking_history, record))
        self.save(profile)
        return profile

    def add_favorite(self, location: SavedLocation) -> UserProfile:
        if location.category not in LOCATION_CATEGORIES:
            raise ValueError(f"Categorie de lieu inconnue: {location.category!r}")
        profile = replace(
            self._profile,
            favorite_locations=upsert_location(self._profile.favorite_locations, location),
        )
        self.save(profile)
        return profile

    def remove_favorite(self, location_id: str) -> bool:
        remaining = remove_location(self._profile.favorite_locations, location_id)
        if len(remaining) == len(self._profile.favorite_locations):
            return False
        self.save(replace(self._profile, favorite_locations=remaining))
        return True

    def update_settings(
        self,
        *,
        base_walking_speed: float | None = None,
        preferred_pace: str | None = None,
    ) -> UserProfile:
        changes: dict = {}
        if base_walking_speed is not None:
            changes["base_walking_speed"] = validate_base_walking_speed(base_walking_speed)
        if preferred_pace is not None:
            if preferred_pace not in PACE_MULTIPLIERS:
                raise ValueError(f"Allure inconnue: {preferred_pace!r}")
            changes["preferred_pace"] = preferred_pace
        if not changes:
            return self._profile
        profile = replace(self._profile, **changes)
        self.save(profile)
        return profile
