"""Statistiques d'apprentissage (sans couche UI).

Resume l'historique complet (non fenetre) pour l'affichage: nombre de
marches, precision moyenne, precision recente et indicateur de progression.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from walkpace.core.constants import STATS_RECENT_WINDOW
from walkpace.core.models import WalkingRecord, WalkingStats


HISTORY_COLUMNS = ["id", "timestamp", "estimated_time", "actual_time", "distance_m", "accuracy"]


def history_to_dataframe(history: Sequence[WalkingRecord]) -> pd.DataFrame:
    """Une ligne par marche, dans l'ordre d'insertion."""

    rows = [
        {
            "id": record.id,
            "timestamp": record.timestamp,
            "estimated_time": float(record.estimated_time),
            "actual_time": int(record.actual_time),
            "distance_m": float(record.distance),
            "accuracy": float(record.accuracy),
        }
        for record in history
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def compute_walking_stats(history: Sequence[WalkingRecord]) -> WalkingStats | None:
    """Retourne None si l'historique est vide.

    is_improving signifie seulement que la precision recente est
    numeriquement inferieure a la moyenne globale (pas de tendance robuste).
    """

    if not history:
        return None

    accuracy = history_to_dataframe(history)["accuracy"]
    average_accuracy = float(accuracy.mean())
    recent_accuracy = float(accuracy.tail(STATS_RECENT_WINDOW).mean())

    return WalkingStats(
        total_walks=int(len(accuracy)),
        average_accuracy=average_accuracy,
        recent_accuracy=recent_accuracy,
        is_improving=bool(recent_accuracy < average_accuracy),
    )
