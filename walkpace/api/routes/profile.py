import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request

from walkpace.api.compat import model_to_dict, profile_to_response
from walkpace.api.schemas import (
    PaceOptionModel,
    ProfileResponse,
    RouteEstimateRequest,
    RouteEstimateResponse,
    SettingsUpdateRequest,
    SpeedEstimateResponse,
    WalkingStatsResponse,
)
from walkpace.services.profile_service import PACE_OPTIONS, ProfileService
from walkpace.services.serialization import to_jsonable


router = APIRouter()


def _get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def _get_request_id(request: Request) -> str:
    return getattr(getattr(request, "state", None), "request_id", "-")


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.service


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(request: Request):
    """Profil courant (reglages, historique, favoris)"""
    service = get_profile_service(request)
    return profile_to_response(service.profile)


@router.put("/profile/settings", response_model=ProfileResponse)
async def update_settings(request: Request, payload: SettingsUpdateRequest):
    """Met a jour la vitesse de base et/ou l'allure preferee"""
    logger = _get_logger(request)
    request_id = _get_request_id(request)
    service = get_profile_service(request)

    try:
        profile = service.update_settings(
            base_walking_speed=payload.base_walking_speed,
            preferred_pace=payload.preferred_pace,
        )
    except ValueError as e:
        logger.warning(
            "settings_validation_failed",
            extra={"request_id": request_id, "error": str(e), **model_to_dict(payload)},
        )
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "settings_updated",
        extra={
            "request_id": request_id,
            "base_walking_speed": profile.base_walking_speed,
            "preferred_pace": profile.preferred_pace,
        },
    )
    return profile_to_response(profile)


@router.get("/profile/recommended-speed", response_model=SpeedEstimateResponse)
async def recommended_speed(request: Request):
    """Vitesse de marche personnelle pour le prochain trajet"""
    service = get_profile_service(request)
    return SpeedEstimateResponse(**to_jsonable(service.speed_estimate()))


@router.get("/stats", response_model=Optional[WalkingStatsResponse])
async def walking_stats(request: Request):
    """Statistiques d'apprentissage (null si aucun historique)"""
    service = get_profile_service(request)
    stats = service.stats()
    if stats is None:
        return None
    return WalkingStatsResponse(**to_jsonable(stats))


@router.get("/paces", response_model=List[PaceOptionModel])
async def list_paces():
    return [PaceOptionModel(**to_jsonable(option)) for option in PACE_OPTIONS]


@router.post("/route/estimate", response_model=RouteEstimateResponse)
async def estimate_route(request: Request, payload: RouteEstimateRequest):
    """Temps de marche estime pour une distance calculee par le fournisseur carto"""
    service = get_profile_service(request)
    try:
        plan = service.plan_route(payload.distance_m, payload.pace)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RouteEstimateResponse(**to_jsonable(plan))
