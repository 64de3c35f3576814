from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from faker import Faker

from pawgraph.config.settings import SeedConfig
from pawgraph.seed.photos import DogPhotoSource
from pawgraph.seed.provider import SeedProvider
from pawgraph.store.entity_schema import Breed, Person


class RandomSeedProvider(SeedProvider):
    """
    Production provider: fake names, coin-flip breeds, uniformly
    random owners and real photos from the remote photo API.
    """

    def __init__(
        self,
        *,
        photos: DogPhotoSource,
        faker: Optional[Faker] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.photos = photos
        self.faker = faker if faker is not None else Faker()
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_config(cls, config: SeedConfig) -> "RandomSeedProvider":
        faker = Faker()
        if config.random_seed is not None:
            faker.seed_instance(config.random_seed)
        return cls(
            photos=DogPhotoSource(
                api_url=config.photo_api_url,
                timeout_s=config.photo_timeout_s,
                fallback_photo=config.fallback_photo,
            ),
            faker=faker,
            rng=np.random.default_rng(config.random_seed),
        )

    def person_name(self, index: int) -> Tuple[str, str]:
        return self.faker.first_name(), self.faker.last_name()

    def dog_name(self, index: int) -> str:
        return f"{self.faker.prefix()} {self.faker.first_name()}"

    def dog_breed(self, index: int) -> Breed:
        return Breed.LABRADOR if self.rng.random() > 0.5 else Breed.POODLE

    def dog_photo(self, index: int) -> str:
        return self.photos.fetch()

    def choose_owner(self, index: int, people: Sequence[Person]) -> Person:
        return people[int(self.rng.integers(len(people)))]
