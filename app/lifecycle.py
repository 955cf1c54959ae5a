# app/lifecycle.py
import logging
from fastapi import FastAPI

from app.dependencies import init_stores

logger = logging.getLogger(__name__)


def register_lifecycle(app: FastAPI) -> None:
    @app.on_event("startup")
    def on_startup() -> None:
        logger.info("Application startup begin")
        init_stores(app)
        logger.info("Application startup completed")

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        logger.info("Application shutdown begin")

        # nothing is persisted; stores go away with the process
        stores = getattr(app.state, "stores", None) or {}
        for kind, store in stores.items():
            logger.info("Dropping %s store (%s entities)", kind, store.count())

        logger.info("Application shutdown completed")
