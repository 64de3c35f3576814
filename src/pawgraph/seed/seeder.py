from __future__ import annotations

import logging
from typing import List

from pawgraph.seed.provider import SeedError, SeedProvider
from pawgraph.store.entity_schema import Dog, Person
from pawgraph.store.entity_store import EntityStore

logger = logging.getLogger("pawgraph.seed")


class StoreSeeder:
    """
    Populates an empty store with People and Dogs, then seals it.

    Every entity is built (photos included) before the first insert,
    so a provider failure leaves the store untouched.
    """

    def __init__(self, store: EntityStore, provider: SeedProvider) -> None:
        self.store = store
        self.provider = provider

    def seed(self, *, people_count: int, dog_count: int) -> None:
        if people_count < 1 and dog_count > 0:
            raise SeedError("dogs need at least one person to own them")

        people = self._build_people(people_count)
        dogs = self._build_dogs(dog_count, people)

        for person in people:
            self.store.add_person(person)
        for dog in dogs:
            self.store.add_dog(dog)
        self.store.seal()

        logger.info("seeded %d people and %d dogs", len(people), len(dogs))

    def _build_people(self, count: int) -> List[Person]:
        people: List[Person] = []
        for i in range(count):
            first_name, last_name = self.provider.person_name(i)
            people.append(Person.create(first_name, last_name))
        return people

    def _build_dogs(self, count: int, people: List[Person]) -> List[Dog]:
        dogs: List[Dog] = []
        for i in range(count):
            owner = self.provider.choose_owner(i, people)
            dogs.append(
                Dog.create(
                    name=self.provider.dog_name(i),
                    breed=self.provider.dog_breed(i),
                    photo=self.provider.dog_photo(i),
                    owner_id=owner.id,
                )
            )
        return dogs
