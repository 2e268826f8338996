import math
from datetime import datetime
from typing import Union

from walkpace.core.constants import PACE_MULTIPLIERS


Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """
    Arrondi "demi vers le haut" (2.5 -> 3, -2.5 -> -2), comme l'arrondi des
    ecrans de navigation. round() de Python arrondit au pair, ce qui decale
    les durees de marche d'une minute sur les valeurs .5.
    """
    return int(math.floor(value + 0.5))


def pace_multiplier(pace: str) -> float:
    """
    Retourne le multiplicateur de vitesse d'une allure (slow/normal/fast).
    """
    try:
        return PACE_MULTIPLIERS[pace]
    except KeyError:
        raise ValueError(f"Allure inconnue: {pace!r}. Attendu: {', '.join(PACE_MULTIPLIERS)}.")


def estimate_walk_minutes(distance_m: Number, speed_m_per_min: Number) -> int:
    """
    Duree de marche estimee (minutes entieres) pour une distance de trajet.
    """
    if speed_m_per_min <= 0 or not math.isfinite(speed_m_per_min):
        raise ValueError("La vitesse doit etre un nombre positif.")
    if distance_m < 0:
        raise ValueError("Distance negative interdite.")
    return round_half_up(distance_m / speed_m_per_min)


def adjusted_minutes_for_pace(estimated_minutes: Number, pace: str) -> int:
    """
    Reprojette une duree calculee a allure normale sur l'allure choisie.
    """
    return round_half_up(estimated_minutes / pace_multiplier(pace))


def minutes_between(start: datetime, end: datetime) -> float:
    """
    Ecart en minutes (non arrondi, signe) entre deux instants.
    """
    return (end - start).total_seconds() / 60.0
