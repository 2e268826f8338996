"""Estimation de la vitesse de marche personnelle (sans couche UI).

Regle d'apprentissage proportionnelle: la vitesse de base est divisee par la
precision moyenne des dernieres marches (rapport temps reel / temps prevu),
puis corrigee selon l'heure de la journee. Pas de lissage ni de rejet
d'outliers.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Sequence

import numpy as np

from walkpace.core.constants import (
    EVENING_RUSH_FACTOR,
    EVENING_RUSH_HOURS,
    MORNING_RUSH_FACTOR,
    MORNING_RUSH_HOURS,
    SPEED_MIN_RECORDS,
    SPEED_RECENT_WINDOW,
)
from walkpace.core.models import SpeedEstimate, UserProfile, WalkingRecord


logger = logging.getLogger("walkpace.estimator")


def time_adjustment_factor(hour: int) -> float:
    """Facteur horaire: heures de pointe du matin et du soir plus lentes."""

    if MORNING_RUSH_HOURS[0] <= hour <= MORNING_RUSH_HOURS[1]:
        return MORNING_RUSH_FACTOR
    if EVENING_RUSH_HOURS[0] <= hour <= EVENING_RUSH_HOURS[1]:
        return EVENING_RUSH_FACTOR
    return 1.0


def recent_window(history: Sequence[WalkingRecord], size: int = SPEED_RECENT_WINDOW) -> list[WalkingRecord]:
    if size <= 0:
        return []
    return list(history[-size:])


def estimate_walking_speed(profile: UserProfile, *, now: datetime | None = None) -> SpeedEstimate:
    """Calcule la vitesse recommandee (m/min) pour la prochaine marche.

    - moins de SPEED_MIN_RECORDS marches dans la fenetre: vitesse de base
      telle quelle (demarrage a froid, sans correction horaire);
    - precision moyenne <= 0 ou resultat non fini: vitesse de base, avec un
      warning (cas degenere, ex: toutes les durees reelles a 0).
    """

    base = float(profile.base_walking_speed)
    window = recent_window(profile.walking_history)

    if len(window) < SPEED_MIN_RECORDS:
        return SpeedEstimate(
            speed_m_per_min=base,
            base_walking_speed=base,
            average_accuracy=None,
            time_adjustment=1.0,
            window_size=len(window),
            reason="cold_start",
        )

    accuracies = np.array([record.accuracy for record in window], dtype=float)
    average_accuracy = float(accuracies.mean())

    hour = (now or datetime.now()).hour
    factor = time_adjustment_factor(hour)

    speed = base / average_accuracy * factor if average_accuracy > 0 else math.nan
    if not math.isfinite(speed):
        logger.warning(
            "speed_estimate_degenerate_accuracy",
            extra={"request_id": "-", "average_accuracy": average_accuracy, "window_size": len(window)},
        )
        return SpeedEstimate(
            speed_m_per_min=base,
            base_walking_speed=base,
            average_accuracy=average_accuracy,
            time_adjustment=factor,
            window_size=len(window),
            reason="degenerate_accuracy",
        )

    return SpeedEstimate(
        speed_m_per_min=speed,
        base_walking_speed=base,
        average_accuracy=average_accuracy,
        time_adjustment=factor,
        window_size=len(window),
        reason="learned",
    )


def compute_personal_walking_speed(profile: UserProfile, *, now: datetime | None = None) -> float:
    return estimate_walking_speed(profile, now=now).speed_m_per_min
