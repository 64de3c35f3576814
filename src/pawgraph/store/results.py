from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from pawgraph.store.errors import EntityNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    """
    Mutation target did not resolve in the store.
    """

    entity: str
    entity_id: str

    @property
    def message(self) -> str:
        return f"{self.entity} Not found"


@dataclass(frozen=True)
class MutationResult(Generic[T]):
    """
    Outcome of a store mutation: the updated entity, or the miss.
    """

    value: Optional[T] = None
    error: Optional[NotFound] = None

    @staticmethod
    def success(value: T) -> "MutationResult[T]":
        return MutationResult(value=value)

    @staticmethod
    def missing(entity: str, entity_id: str) -> "MutationResult[T]":
        return MutationResult(error=NotFound(entity=entity, entity_id=entity_id))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise EntityNotFoundError(self.error.entity, self.error.entity_id)
        return self.value
