from fastapi import APIRouter

from app.api.entities import build_entity_router
from app.dependencies import STORE_KINDS

api_router = APIRouter()

# -------------------------------------------------
# one resource per store: /lawcase, /lawclient, /lawyer
# -------------------------------------------------
for kind, (model, _label) in STORE_KINDS.items():
    api_router.include_router(
        build_entity_router(kind, model),
        prefix=f"/{kind}",
    )
