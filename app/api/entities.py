# app/api/entities.py

from typing import List, Type

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.dependencies import get_store
from app.repositories.base import EntityRepository


def build_entity_router(kind: str, model: Type[BaseModel]) -> APIRouter:
    """
    Same six CRUD routes for every entity kind.
    The kind selects the store on app.state.stores.
    """
    router = APIRouter(tags=[kind])
    store_dep = get_store(kind)

    # =================================================
    # Create
    # =================================================
    @router.post("/", response_model=model, status_code=status.HTTP_201_CREATED)
    def add_entity(entity: model, store: EntityRepository = Depends(store_dep)):
        return store.add(entity)

    # =================================================
    # Read
    # =================================================
    @router.get("/", response_model=List[model])
    def get_all_entities(store: EntityRepository = Depends(store_dep)):
        return store.get_all()

    @router.get("/{entity_id}", response_model=model)
    def get_entity(
        entity_id: int = Path(..., description=f"{kind} id"),
        store: EntityRepository = Depends(store_dep),
    ):
        return store.get_by_id(entity_id)

    # =================================================
    # Update
    # =================================================
    @router.put("/{entity_id}", response_model=model)
    def update_entity(
        entity: model,
        entity_id: int = Path(..., description=f"{kind} id"),
        store: EntityRepository = Depends(store_dep),
    ):
        return store.update(entity_id, entity)

    # =================================================
    # Delete
    # =================================================
    @router.delete("/{entity_id}", response_class=PlainTextResponse)
    def delete_entity(
        entity_id: int = Path(..., description=f"{kind} id"),
        store: EntityRepository = Depends(store_dep),
    ):
        return store.delete_by_id(entity_id)

    @router.delete("/", response_class=PlainTextResponse)
    def delete_all_entities(store: EntityRepository = Depends(store_dep)):
        return store.delete_all()

    return router
