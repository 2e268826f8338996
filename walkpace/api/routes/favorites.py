import logging

from fastapi import APIRouter, HTTPException, Request

from walkpace.api.compat import coordinates_from_model, location_to_model
from walkpace.api.schemas import FavoriteCreateRequest, FavoritesResponse, SavedLocationModel
from walkpace.services.profile_service import ProfileService


router = APIRouter()


def _get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def _get_request_id(request: Request) -> str:
    return getattr(getattr(request, "state", None), "request_id", "-")


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.service


@router.get("/favorites", response_model=FavoritesResponse)
async def list_favorites(request: Request):
    service = get_profile_service(request)
    return FavoritesResponse(favorites=[location_to_model(loc) for loc in service.profile.favorite_locations])


@router.post("/favorites", response_model=SavedLocationModel)
async def add_favorite(request: Request, payload: FavoriteCreateRequest):
    """Ajoute un lieu favori"""
    logger = _get_logger(request)
    service = get_profile_service(request)
    try:
        location = service.add_favorite(
            name=payload.name,
            address=payload.address,
            coordinates=coordinates_from_model(payload.coordinates),
            category=payload.category,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "favorite_added",
        extra={"request_id": _get_request_id(request), "location_id": location.id, "category": location.category},
    )
    return location_to_model(location)


@router.delete("/favorites/{location_id}")
async def remove_favorite(request: Request, location_id: str):
    """Supprime un lieu favori"""
    service = get_profile_service(request)
    if not service.remove_favorite(location_id):
        raise HTTPException(status_code=404, detail=f"Favorite {location_id} not found")
    return {"message": f"Favorite {location_id} deleted successfully"}
