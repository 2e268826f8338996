from __future__ import annotations

"""Helpers de manipulation d'historique (fonctions pures).

Les fonctions retournent de nouveaux tuples: les snapshots de profil ne sont
jamais modifies en place.
"""

from typing import Iterable, TypeVar

from walkpace.core.constants import HISTORY_MAX_ITEMS
from walkpace.core.models import SavedLocation, WalkingRecord


T = TypeVar("T")


def append_history(
    history: Iterable[WalkingRecord], entry: WalkingRecord, max_items: int = HISTORY_MAX_ITEMS
) -> tuple[WalkingRecord, ...]:
    """Ajoute une entree en fin, puis tronque par le debut (FIFO)."""

    items = list(history)
    items.append(entry)
    return trim_oldest(items, max_items)


def trim_oldest(items: Iterable[T], max_items: int = HISTORY_MAX_ITEMS) -> tuple[T, ...]:
    items = list(items)
    if max_items and len(items) > max_items:
        del items[: len(items) - max_items]
    return tuple(items)


def upsert_location(locations: Iterable[SavedLocation], entry: SavedLocation) -> tuple[SavedLocation, ...]:
    """Insere un lieu, dedupe par id (le nouveau remplace l'ancien)."""

    items = [item for item in locations if item.id != entry.id]
    items.append(entry)
    return tuple(items)


def remove_location(locations: Iterable[SavedLocation], location_id: str) -> tuple[SavedLocation, ...]:
    return tuple(item for item in locations if item.id != location_id)
