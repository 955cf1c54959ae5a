# app/bootstrap.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import EntityNotFoundError
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.api.router import api_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title=settings.app_name)

    # -------------------------
    # Middleware
    # -------------------------
    app.add_middleware(RequestLoggingMiddleware)

    origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------
    # Errors
    # -------------------------
    @app.exception_handler(EntityNotFoundError)
    async def entity_not_found(request: Request, exc: EntityNotFoundError):
        logger.info("Not found: %s", exc.message)
        return JSONResponse(status_code=404, content={"error": "Not Found"})

    # -------------------------
    # Routers
    # -------------------------
    app.include_router(api_router, prefix=settings.api_prefix)

    # -------------------------
    # Health
    # -------------------------
    @app.get("/health/live", tags=["health"])
    def live():
        return {"status": "alive"}

    @app.get("/health/ready", tags=["health"])
    def ready():
        stores = getattr(app.state, "stores", None)
        if stores is None:
            return {"status": "degraded", "stores": {}}
        return {
            "status": "ready",
            "stores": {kind: store.count() for kind, store in stores.items()},
        }

    # -------------------------
    # Root
    # -------------------------
    @app.get("/", tags=["root"])
    def root():
        return {
            "status": "ok",
            "service": settings.app_name,
            "api_prefix": settings.api_prefix,
            "delete_mode": settings.delete_mode,
        }

    return app
