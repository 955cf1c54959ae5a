import logging
import threading
from typing import Iterable, List, Optional, Type

from app.core.exceptions import EntityNotFoundError
from app.repositories.base import EntityRepository, T

logger = logging.getLogger(__name__)

DELETE_BY_IDENTITY = "identity"
DELETE_BY_POSITION = "position"

EMPTY_MESSAGE = "Database is empty!"


class MemoryEntityStore(EntityRepository[T]):
    """
    Process-local store for one entity kind.

    - keeps insertion order, duplicates allowed
    - values in and out are deep copies of the stored models
    - every operation holds the store lock
    """

    def __init__(
        self,
        model: Type[T],
        label: str,
        mutable_fields: Optional[Iterable[str]] = None,
        delete_mode: str = DELETE_BY_IDENTITY,
    ):
        if delete_mode not in (DELETE_BY_IDENTITY, DELETE_BY_POSITION):
            raise ValueError(f"Unknown delete mode: {delete_mode}")

        self.model = model
        self.label = label
        self.delete_mode = delete_mode
        if mutable_fields is None:
            mutable_fields = [f for f in model.model_fields if f != "id"]
        self.mutable_fields = tuple(mutable_fields)

        self._items: List[T] = []
        self._lock = threading.RLock()

    # -------------------------
    # Helpers
    # -------------------------
    def _find(self, entity_id: int) -> T:
        found = next((e for e in self._items if e.id == entity_id), None)
        if found is None:
            logger.debug("%s %s not found", self.label, entity_id)
            raise EntityNotFoundError(self.label, entity_id)
        return found

    # -------------------------
    # Write
    # -------------------------
    def add(self, entity: T) -> T:
        with self._lock:
            self._items.append(entity.model_copy(deep=True))
            logger.debug("%s %s added", self.label, entity.id)
        return entity

    def update(self, entity_id: int, replacement: T) -> T:
        with self._lock:
            stored = self._find(entity_id)
            for field in self.mutable_fields:
                setattr(stored, field, _copy_value(getattr(replacement, field)))
            logger.info("%s %s updated", self.label, entity_id)
        # echo what the caller sent, not the stored instance
        return replacement

    def delete_by_id(self, entity_id: int) -> str:
        with self._lock:
            target = self._find(entity_id)
            message = (
                f"{self.label} with id: {target.id} "
                f"and with name: {target.name} was deleted!"
            )

            if self.delete_mode == DELETE_BY_POSITION:
                if 0 <= entity_id < len(self._items):
                    del self._items[entity_id]
                else:
                    logger.warning(
                        "%s position %s out of range (size %s), nothing removed",
                        self.label,
                        entity_id,
                        len(self._items),
                    )
            else:
                self._items.remove(target)

            logger.info("%s %s deleted", self.label, entity_id)
        return message

    def delete_all(self) -> str:
        with self._lock:
            self._items = []
            logger.info("%s store cleared", self.label)
        return EMPTY_MESSAGE

    # -------------------------
    # Read
    # -------------------------
    def get_by_id(self, entity_id: int) -> T:
        with self._lock:
            return self._find(entity_id).model_copy(deep=True)

    def get_all(self) -> List[T]:
        with self._lock:
            return [e.model_copy(deep=True) for e in self._items]

    def count(self) -> int:
        with self._lock:
            return len(self._items)


def _copy_value(value):
    # nested models / lists must not be shared with the caller
    if isinstance(value, list):
        return [_copy_value(v) for v in value]
    if hasattr(value, "model_copy"):
        return value.model_copy(deep=True)
    return value
