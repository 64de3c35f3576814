"""
Entity store subsystem for pawgraph.

Holds People and Dogs for the process lifetime and exposes
lookup and field-level mutation primitives.
"""

from pawgraph.store.entity_schema import Breed, Person, Dog
from pawgraph.store.entity_store import EntityStore
from pawgraph.store.results import MutationResult, NotFound
from pawgraph.store.errors import (
    EntityStoreError,
    DuplicateEntityError,
    UnknownOwnerError,
    StoreSealedError,
    EntityNotFoundError,
)

__all__ = [
    "Breed",
    "Person",
    "Dog",
    "EntityStore",
    "MutationResult",
    "NotFound",
    "EntityStoreError",
    "DuplicateEntityError",
    "UnknownOwnerError",
    "StoreSealedError",
    "EntityNotFoundError",
]
