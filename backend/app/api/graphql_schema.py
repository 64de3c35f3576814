"""
GraphQL schema for pawgraph.

Usage:
    query {
        people { id firstName lastName dogs { name likes } }
        dog(id: "...") { name breed photo owner { firstName } }
    }

    mutation {
        likeDog(dogId: "...") { likes }
        renameOwner(personId: "...", newFirstName: "Ada") { firstName lastName }
    }

Single-entity queries answer null for unknown ids. Mutations on unknown
ids answer null data plus a NOT_FOUND error.
"""

from typing import Any, Dict, List, Optional
import logging

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from pawgraph.store import entity_schema
from pawgraph.store.entity_store import EntityStore
from pawgraph.store.results import MutationResult

from backend.app.dependencies import get_store

logger = logging.getLogger("pawgraph.api")

Breed = strawberry.enum(entity_schema.Breed, name="Breed")


def _store(info: Info) -> EntityStore:
    return info.context["store"]


def _unwrap(result: MutationResult) -> Any:
    if not result.ok:
        logger.info(
            "mutation target missing: %s %s",
            result.error.entity,
            result.error.entity_id,
        )
        raise GraphQLError(result.error.message, extensions={"code": "NOT_FOUND"})
    return result.value


# =============================================================================
# ENTITY TYPES
# =============================================================================

@strawberry.type
class Person:
    id: strawberry.ID
    first_name: str
    last_name: str

    @strawberry.field
    def dogs(self, info: Info) -> List["Dog"]:
        return [Dog.from_entity(d) for d in _store(info).dogs_of(self.id)]

    @staticmethod
    def from_entity(person: entity_schema.Person) -> "Person":
        return Person(
            id=strawberry.ID(person.id),
            first_name=person.first_name,
            last_name=person.last_name,
        )


@strawberry.type
class Dog:
    id: strawberry.ID
    name: str
    breed: Breed
    photo: str
    likes: int
    owner_id: strawberry.Private[str]

    @strawberry.field
    def owner(self, info: Info) -> Person:
        return Person.from_entity(_store(info).find_person(self.owner_id))

    @staticmethod
    def from_entity(dog: entity_schema.Dog) -> "Dog":
        return Dog(
            id=strawberry.ID(dog.id),
            name=dog.name,
            breed=dog.breed,
            photo=dog.photo,
            likes=dog.likes,
            owner_id=dog.owner_id,
        )


# =============================================================================
# OPERATIONS
# =============================================================================

@strawberry.type
class Query:
    @strawberry.field
    def people(self, info: Info) -> List[Person]:
        return [Person.from_entity(p) for p in _store(info).list_people()]

    @strawberry.field
    def person(self, info: Info, id: strawberry.ID) -> Optional[Person]:
        person = _store(info).find_person(id)
        return Person.from_entity(person) if person else None

    @strawberry.field
    def dogs(self, info: Info) -> List[Dog]:
        return [Dog.from_entity(d) for d in _store(info).list_dogs()]

    @strawberry.field
    def dog(self, info: Info, id: strawberry.ID) -> Optional[Dog]:
        dog = _store(info).find_dog(id)
        return Dog.from_entity(dog) if dog else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def rename_dog(
        self,
        info: Info,
        dog_id: strawberry.ID,
        new_name: str,
    ) -> Optional[Dog]:
        return Dog.from_entity(_unwrap(_store(info).rename_dog(dog_id, new_name)))

    @strawberry.mutation
    def like_dog(self, info: Info, dog_id: strawberry.ID) -> Optional[Dog]:
        return Dog.from_entity(_unwrap(_store(info).like_dog(dog_id)))

    @strawberry.mutation
    def rename_owner(
        self,
        info: Info,
        person_id: strawberry.ID,
        new_first_name: Optional[str] = None,
        new_last_name: Optional[str] = None,
    ) -> Optional[Person]:
        result = _store(info).rename_person(
            person_id,
            new_first_name=new_first_name,
            new_last_name=new_last_name,
        )
        return Person.from_entity(_unwrap(result))


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(store: EntityStore = Depends(get_store)) -> Dict[str, Any]:
    return {"store": store}


def create_graphql_router(*, graphiql_enabled: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql_enabled else None,
    )
