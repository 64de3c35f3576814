from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from pawgraph.store.entity_schema import Breed, Person


class SeedError(Exception):
    """Raised when startup data cannot be produced."""


class SeedProvider(ABC):
    """
    Abstract source of startup entities.

    The seeder asks for values one entity at a time, passing the
    entity's position so deterministic providers can be index-based.
    How names, breeds and photos are produced is up to the provider.
    """

    @abstractmethod
    def person_name(self, index: int) -> Tuple[str, str]:
        """
        Return (first_name, last_name) for the index-th person.
        """
        raise NotImplementedError

    @abstractmethod
    def dog_name(self, index: int) -> str:
        raise NotImplementedError

    @abstractmethod
    def dog_breed(self, index: int) -> Breed:
        raise NotImplementedError

    @abstractmethod
    def dog_photo(self, index: int) -> str:
        raise NotImplementedError

    @abstractmethod
    def choose_owner(self, index: int, people: Sequence[Person]) -> Person:
        """
        Pick the owner of the index-th dog among the seeded people.
        """
        raise NotImplementedError
