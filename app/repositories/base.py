from abc import ABC, abstractmethod
from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class EntityRepository(ABC, Generic[T]):
    """
    Abstract Base Class for keyed entity storage.
    One instance per entity kind (law case, law client, lawyer).

    Lookups by id resolve to the FIRST matching entity in insertion order.
    Missing ids raise EntityNotFoundError.
    """

    model: Type[T]
    label: str

    @abstractmethod
    def add(self, entity: T) -> T:
        """Append an entity. No uniqueness check."""
        pass

    @abstractmethod
    def update(self, entity_id: int, replacement: T) -> T:
        """Overwrite the mutable fields of the stored entity; echo the replacement."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T:
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """All entities in insertion order."""
        pass

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> str:
        """Remove one entity and return a confirmation message."""
        pass

    @abstractmethod
    def delete_all(self) -> str:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
