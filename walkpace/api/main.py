import logging
import os
import time
import uuid
from datetime import datetime
from pathlib import Path
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from walkpace.services.profile_service import ProfileService
from walkpace.storage.kv_store import InMemoryKeyValueStorage, JsonFileKeyValueStorage, KeyValueStorage
from walkpace.storage.profile_store import ProfileStore


DATA_DIR_ENV_VAR = "WALKPACE_DATA_DIR"
LOG_DIR_ENV_VAR = "WALKPACE_LOG_DIR"
DEFAULT_DATA_DIR = "./data/profile"
MEMORY_STORAGE = ":memory:"
API_VERSION = "1.0.0"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [request_id=%(request_id)s] %(message)s"


class _DefaultRequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def _configure_logging() -> logging.Logger:
    """Logger `walkpace`: fichier horodate + console, request_id par defaut a "-".

    Les loggers enfants (walkpace.storage, walkpace.service, ...) remontent ici.
    """

    logs_dir = Path(os.environ.get(LOG_DIR_ENV_VAR) or Path(__file__).resolve().parents[2] / "logs")
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"walkpace_{datetime.now():%Y%m%d_%H%M%S}.log"

    logger = logging.getLogger("walkpace")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    # Relance du lifespan (reload, TestClient): on repart de zero.
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in (logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()):
        handler.setLevel(logging.INFO)
        handler.setFormatter(formatter)
        handler.addFilter(_DefaultRequestIdFilter())
        logger.addHandler(handler)

    logger.info("walkpace_start", extra={"request_id": "-", "log_file": str(log_path)})
    return logger


def _build_storage() -> KeyValueStorage:
    data_dir = os.environ.get(DATA_DIR_ENV_VAR) or DEFAULT_DATA_DIR
    if data_dir == MEMORY_STORAGE:
        return InMemoryKeyValueStorage()
    return JsonFileKeyValueStorage(data_dir)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = _configure_logging()
    storage = _build_storage()
    service = ProfileService(ProfileStore(storage))
    profile = service.load_profile()
    logger.info(
        "profile_ready",
        extra={
            "request_id": "-",
            "storage": type(storage).__name__,
            "walks": len(profile.walking_history),
            "favorites": len(profile.favorite_locations),
        },
    )

    app.state.service = service
    app.state.storage_kind = "memory" if isinstance(storage, InMemoryKeyValueStorage) else "json_file"
    app.state.logger = logger

    yield


app = FastAPI(
    title="WalkPace API",
    description="Estimation personnalisee des temps de marche",
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    logger: logging.Logger = request.app.state.logger
    request_id = uuid.uuid4().hex
    request.state.request_id = request_id
    extra = {"request_id": request_id, "method": request.method, "path": request.url.path}

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_unhandled_exception", extra=extra)
        response = JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error", "request_id": request_id},
        )
    response.headers["X-Request-ID"] = request_id

    extra["status"] = response.status_code
    extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
    logger.info("request", extra=extra)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from walkpace.api.routes.profile import router as profile_router
from walkpace.api.routes.walks import router as walks_router
from walkpace.api.routes.favorites import router as favorites_router

for _router in (profile_router, walks_router, favorites_router):
    app.include_router(_router)
    # Compatibilite: memes routes sous /api/*
    app.include_router(_router, prefix="/api", include_in_schema=False)


@app.get("/")
async def root():
    return {"message": "WalkPace API", "version": API_VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check(request: Request):
    """Etat du service: profil charge, backend de stockage, taille de l'historique"""
    service: ProfileService = request.app.state.service
    profile = service.profile
    return {
        "status": "healthy",
        "storage": request.app.state.storage_kind,
        "walks": len(profile.walking_history),
        "favorites": len(profile.favorite_locations),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("walkpace.api.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
