from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from uuid import uuid4


class Breed(Enum):
    LABRADOR = "LABRADOR"
    POODLE = "POODLE"


@dataclass(frozen=True)
class Person:
    """
    Dog owner.

    Owned dogs are not held here; the store resolves them
    from its ownership index.
    """

    id: str
    first_name: str
    last_name: str

    @staticmethod
    def create(first_name: str, last_name: str) -> "Person":
        return Person(
            id=str(uuid4()),
            first_name=first_name,
            last_name=last_name,
        )

    def renamed(
        self,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> "Person":
        return replace(
            self,
            first_name=first_name or self.first_name,
            last_name=last_name or self.last_name,
        )


@dataclass(frozen=True)
class Dog:
    """
    Dog owned by exactly one Person.

    `breed`, `photo` and `owner_id` are fixed at creation.
    `likes` only ever grows.
    """

    id: str
    name: str
    breed: Breed
    photo: str
    owner_id: str
    likes: int = 0

    @staticmethod
    def create(
        name: str,
        breed: Breed,
        photo: str,
        owner_id: str,
    ) -> "Dog":
        return Dog(
            id=str(uuid4()),
            name=name,
            breed=breed,
            photo=photo,
            owner_id=owner_id,
            likes=0,
        )

    def renamed(self, name: str) -> "Dog":
        return replace(self, name=name)

    def liked(self) -> "Dog":
        return replace(self, likes=self.likes + 1)
