"""Enregistrement d'une arrivee confirmee (fonctions pures).

Transforme (temps prevu, distance, trajet, depart, arrivee confirmee) en
WalkingRecord. La precision est calculee une seule fois ici puis stockee.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta

from walkpace.core.constants import FAIR_ARRIVAL_DIFF_MIN, GOOD_ARRIVAL_DIFF_MIN
from walkpace.core.models import ArrivalSummary, RouteDescriptor, WalkingRecord
from walkpace.core.utils import minutes_between, round_half_up


def new_record_id() -> str:
    return uuid.uuid4().hex


def compute_actual_minutes(start_time: datetime, arrival_time: datetime) -> int:
    """Duree reelle en minutes entieres. Negative si l'arrivee precede le depart."""

    return round_half_up(minutes_between(start_time, arrival_time))


def compute_accuracy(actual_time: float, estimated_time: float) -> float:
    """Rapport reel/prevu; 1.0 quand aucune prevision n'est disponible."""

    if estimated_time > 0:
        return actual_time / estimated_time
    return 1.0


def build_walking_record(
    *,
    estimated_time: float,
    distance: float,
    route: RouteDescriptor,
    start_time: datetime,
    actual_arrival_time: datetime,
    record_id: str | None = None,
) -> WalkingRecord:
    if estimated_time < 0:
        raise ValueError("Le temps estime doit etre >= 0.")
    if distance < 0:
        raise ValueError("La distance doit etre >= 0.")

    actual_time = compute_actual_minutes(start_time, actual_arrival_time)
    return WalkingRecord(
        id=record_id or new_record_id(),
        estimated_time=estimated_time,
        actual_time=actual_time,
        distance=float(distance),
        route=route,
        timestamp=actual_arrival_time,
        accuracy=compute_accuracy(actual_time, estimated_time),
    )


def adjust_arrival_time(arrival_time: datetime, minutes: int) -> datetime:
    """Decale l'heure d'arrivee (boutons -5/-1/+1/+5)."""

    return arrival_time + timedelta(minutes=minutes)


def set_arrival_clock_time(arrival_time: datetime, hour: int, minute: int) -> datetime:
    """Fixe HH:MM sur la meme date, secondes remises a zero."""

    return arrival_time.replace(hour=hour, minute=minute, second=0, microsecond=0)


def summarize_arrival(
    *,
    estimated_time: float,
    start_time: datetime,
    actual_arrival_time: datetime,
) -> ArrivalSummary:
    """Apercu affiche avant confirmation (ecart, statut, note)."""

    actual_time = compute_actual_minutes(start_time, actual_arrival_time)
    accuracy = compute_accuracy(actual_time, estimated_time)
    difference = actual_time - estimated_time

    if difference > 0:
        status = "late"
    elif difference < 0:
        status = "early"
    else:
        status = "on_time"

    if abs(difference) <= GOOD_ARRIVAL_DIFF_MIN:
        grade = "good"
    elif abs(difference) <= FAIR_ARRIVAL_DIFF_MIN:
        grade = "fair"
    else:
        grade = "poor"

    return ArrivalSummary(
        estimated_time=estimated_time,
        actual_time=actual_time,
        time_difference=difference,
        accuracy=accuracy,
        accuracy_percent=round(accuracy * 100.0, 1),
        status=status,
        grade=grade,
    )
