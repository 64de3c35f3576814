from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from pawgraph.seed.provider import SeedProvider
from pawgraph.store.entity_schema import Breed, Person


@dataclass(frozen=True)
class FixtureDog:
    name: str
    breed: Breed
    photo: str
    owner_index: int


DEFAULT_PEOPLE: Tuple[Tuple[str, str], ...] = (
    ("Ada", "Lovelace"),
    ("Alan", "Turing"),
)

DEFAULT_DOGS: Tuple[FixtureDog, ...] = (
    FixtureDog("Mr. Biscuit", Breed.LABRADOR, "https://example.test/dogs/biscuit.jpg", 0),
    FixtureDog("Dr. Noodle", Breed.POODLE, "https://example.test/dogs/noodle.jpg", 1),
    FixtureDog("Ms. Pepper", Breed.LABRADOR, "https://example.test/dogs/pepper.jpg", 0),
)


class FixtureSeedProvider(SeedProvider):
    """
    Deterministic provider for tests and offline runs.

    Fixture lists are cycled when more entities are requested
    than fixtures exist.
    """

    def __init__(
        self,
        people: Sequence[Tuple[str, str]] = DEFAULT_PEOPLE,
        dogs: Sequence[FixtureDog] = DEFAULT_DOGS,
    ) -> None:
        if not people or not dogs:
            raise ValueError("fixture provider needs at least one person and one dog")
        self.people = list(people)
        self.dogs = list(dogs)

    def person_name(self, index: int) -> Tuple[str, str]:
        return self.people[index % len(self.people)]

    def dog_name(self, index: int) -> str:
        return self._dog(index).name

    def dog_breed(self, index: int) -> Breed:
        return self._dog(index).breed

    def dog_photo(self, index: int) -> str:
        return self._dog(index).photo

    def choose_owner(self, index: int, people: Sequence[Person]) -> Person:
        return people[self._dog(index).owner_index % len(people)]

    def _dog(self, index: int) -> FixtureDog:
        return self.dogs[index % len(self.dogs)]
