"""Constantes partagees (sans FastAPI).

Ce module centralise les seuils et valeurs par defaut utilises dans core/,
services/ et storage/. Garder ce module sans dependances (hors stdlib).
"""

from __future__ import annotations


# Vitesse de marche de base (m/min) et bornes reglables par l'utilisateur.
DEFAULT_BASE_WALKING_SPEED: float = 80.0
MIN_BASE_WALKING_SPEED: float = 30.0
MAX_BASE_WALKING_SPEED: float = 120.0

# Allures proposees et multiplicateurs de vitesse associes.
DEFAULT_PACE: str = "normal"
PACE_MULTIPLIERS: dict[str, float] = {
    "slow": 0.8,
    "normal": 1.0,
    "fast": 1.2,
}

LOCATION_CATEGORIES: tuple[str, ...] = ("home", "work", "gym", "favorite")

# Historique: on ne garde que les N dernieres marches (FIFO).
HISTORY_MAX_ITEMS: int = 50

# Apprentissage de la vitesse personnelle.
SPEED_RECENT_WINDOW: int = 10
SPEED_MIN_RECORDS: int = 3

# Statistiques: fenetre "recente".
STATS_RECENT_WINDOW: int = 5

# Correction horaire (heures incluses, horloge locale).
MORNING_RUSH_HOURS: tuple[int, int] = (7, 9)
MORNING_RUSH_FACTOR: float = 0.9
EVENING_RUSH_HOURS: tuple[int, int] = (17, 19)
EVENING_RUSH_FACTOR: float = 0.85

# Ecart arrivee/prevision (minutes) pour la note affichee.
GOOD_ARRIVAL_DIFF_MIN: int = 2
FAIR_ARRIVAL_DIFF_MIN: int = 5

# Cle unique du profil dans le stockage cle/valeur.
STORAGE_KEY: str = "walkpace:user_profile"
