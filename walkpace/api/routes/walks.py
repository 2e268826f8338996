import logging

from fastapi import APIRouter, HTTPException, Request

from walkpace.api.compat import record_to_model, route_from_model
from walkpace.api.schemas import (
    ArrivalPreviewRequest,
    ArrivalRequest,
    ArrivalSummaryResponse,
    WalkingHistoryResponse,
    WalkingRecordModel,
)
from walkpace.services.profile_service import ProfileService
from walkpace.services.serialization import to_jsonable


router = APIRouter()


def _get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def _get_request_id(request: Request) -> str:
    return getattr(getattr(request, "state", None), "request_id", "-")


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.service


@router.get("/walks", response_model=WalkingHistoryResponse)
async def list_walks(request: Request):
    """Historique des marches (ordre chronologique de confirmation)"""
    service = get_profile_service(request)
    return WalkingHistoryResponse(walks=[record_to_model(r) for r in service.profile.walking_history])


@router.post("/walks/preview", response_model=ArrivalSummaryResponse)
async def preview_arrival(request: Request, payload: ArrivalPreviewRequest):
    """Apercu de l'ecart prevu/reel avant confirmation (rien n'est enregistre)"""
    service = get_profile_service(request)
    try:
        summary = service.preview_arrival(
            estimated_time=payload.estimated_time,
            start_time=payload.start_time,
            actual_arrival_time=payload.actual_arrival_time,
        )
    except (TypeError, ValueError) as e:
        # ex: datetimes naive/aware melanges
        raise HTTPException(status_code=400, detail=str(e))
    return ArrivalSummaryResponse(**to_jsonable(summary))


@router.post("/walks/arrival", response_model=WalkingRecordModel)
async def record_arrival(request: Request, payload: ArrivalRequest):
    """Enregistre une arrivee confirmee"""
    logger = _get_logger(request)
    request_id = _get_request_id(request)
    service = get_profile_service(request)

    try:
        record = service.record_arrival(
            estimated_time=payload.estimated_time,
            distance=payload.distance,
            route=route_from_model(payload.route),
            start_time=payload.start_time,
            actual_arrival_time=payload.actual_arrival_time,
        )
    except (TypeError, ValueError) as e:
        logger.warning(
            "arrival_validation_failed",
            extra={"request_id": request_id, "error": str(e)},
        )
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "arrival_stored",
        extra={
            "request_id": request_id,
            "record_id": record.id,
            "walks": len(service.profile.walking_history),
        },
    )
    return record_to_model(record)
