# app/dependencies.py
import logging
from typing import Callable, Dict

from fastapi import FastAPI, Request

from app.core.config import settings
from app.repositories.base import EntityRepository
from app.repositories.memory_repo import MemoryEntityStore
from app.schemas.law_case import LawCase
from app.schemas.law_client import LawClient
from app.schemas.lawyer import Lawyer
from app.services.seed_data_loader import load_seed_file, seed_stores

logger = logging.getLogger(__name__)

# kind -> (model, label used in messages)
STORE_KINDS = {
    "lawcase": (LawCase, "LawCase"),
    "lawclient": (LawClient, "LawClient"),
    "lawyer": (Lawyer, "Lawyer"),
}


def build_stores(delete_mode: str = "identity") -> Dict[str, EntityRepository]:
    return {
        kind: MemoryEntityStore(model, label, delete_mode=delete_mode)
        for kind, (model, label) in STORE_KINDS.items()
    }


def init_stores(app: FastAPI) -> None:
    """
    Initialize one store per entity kind.
    Must be idempotent.
    """
    if getattr(app.state, "stores", None) is not None:
        return

    app.state.stores = build_stores(settings.delete_mode)
    logger.info("Stores initialized (delete_mode=%s)", settings.delete_mode)

    if settings.seed_file:
        summary = seed_stores(app.state.stores, load_seed_file(settings.seed_file))
        logger.info("Seed data loaded", extra={"props": {"seeded": summary}})


def get_store(kind: str) -> Callable[[Request], EntityRepository]:
    """
    FastAPI dependency bound to one store kind.
    """

    def _dependency(request: Request) -> EntityRepository:
        return request.app.state.stores[kind]

    return _dependency
