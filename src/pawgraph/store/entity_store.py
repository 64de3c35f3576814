from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

import networkx as nx

from pawgraph.store.entity_schema import Dog, Person
from pawgraph.store.errors import (
    DuplicateEntityError,
    StoreSealedError,
    UnknownOwnerError,
)
from pawgraph.store.results import MutationResult

PERSON = "person"
DOG = "dog"
OWNS = "owns"

logger = logging.getLogger("pawgraph.store")


class EntityStore:
    """
    Authoritative in-memory collection of People and Dogs.

    Entities live as nodes of a directed graph keyed by id; ownership is
    an `owns` edge from Person to Dog. Node and edge insertion order is
    creation order, so listings and `dogs_of` are stable.

    Creation is only possible until `seal()` is called. After that the
    store only accepts field-level mutations.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._lock = threading.RLock()
        self._sealed = False
        self.metadata: Dict[str, Any] = {}

    # -------------------- Creation --------------------

    def add_person(self, person: Person) -> None:
        with self._lock:
            self._ensure_open()
            if person.id in self._graph:
                raise DuplicateEntityError(person.id)
            self._graph.add_node(person.id, kind=PERSON, data=person)

    def add_dog(self, dog: Dog) -> None:
        with self._lock:
            self._ensure_open()
            if dog.id in self._graph:
                raise DuplicateEntityError(dog.id)
            if self._kind(dog.owner_id) != PERSON:
                raise UnknownOwnerError(dog.id, dog.owner_id)
            self._graph.add_node(dog.id, kind=DOG, data=dog)
            self._graph.add_edge(dog.owner_id, dog.id, relation=OWNS)

    def seal(self) -> None:
        with self._lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # -------------------- People --------------------

    def list_people(self) -> List[Person]:
        return self._list(PERSON)

    def find_person(self, person_id: str) -> Optional[Person]:
        return self._find(PERSON, person_id)

    def dogs_of(self, person_id: str) -> List[Dog]:
        if self._kind(person_id) != PERSON:
            return []
        return [
            self._graph.nodes[dog_id]["data"]
            for dog_id in self._graph.successors(person_id)
        ]

    def rename_person(
        self,
        person_id: str,
        new_first_name: Optional[str] = None,
        new_last_name: Optional[str] = None,
    ) -> MutationResult[Person]:
        with self._lock:
            person = self.find_person(person_id)
            if person is None:
                return MutationResult.missing("Person", person_id)
            updated = person.renamed(
                first_name=new_first_name,
                last_name=new_last_name,
            )
            self._put(updated)
        logger.debug("renamed person %s", person_id)
        return MutationResult.success(updated)

    # -------------------- Dogs --------------------

    def list_dogs(self) -> List[Dog]:
        return self._list(DOG)

    def find_dog(self, dog_id: str) -> Optional[Dog]:
        return self._find(DOG, dog_id)

    def owner_of(self, dog_id: str) -> Optional[Person]:
        dog = self.find_dog(dog_id)
        if dog is None:
            return None
        return self.find_person(dog.owner_id)

    def rename_dog(self, dog_id: str, new_name: str) -> MutationResult[Dog]:
        with self._lock:
            dog = self.find_dog(dog_id)
            if dog is None:
                return MutationResult.missing("Dog", dog_id)
            updated = dog.renamed(new_name)
            self._put(updated)
        logger.debug("renamed dog %s", dog_id)
        return MutationResult.success(updated)

    def like_dog(self, dog_id: str) -> MutationResult[Dog]:
        # read-modify-write must not interleave with another like
        with self._lock:
            dog = self.find_dog(dog_id)
            if dog is None:
                return MutationResult.missing("Dog", dog_id)
            updated = dog.liked()
            self._put(updated)
        return MutationResult.success(updated)

    # -------------------- Analytics --------------------

    def person_count(self) -> int:
        return len(self.list_people())

    def dog_count(self) -> int:
        return len(self.list_dogs())

    def total_likes(self) -> int:
        return sum(dog.likes for dog in self.list_dogs())

    def check_integrity(self) -> List[str]:
        """
        Report ownership inconsistencies.

        Every dog must have exactly one owning edge, from the person its
        `owner_id` names, and every `owns` edge must end at a dog.
        """
        problems: List[str] = []

        for dog in self.list_dogs():
            owners = list(self._graph.predecessors(dog.id))
            if owners != [dog.owner_id]:
                problems.append(
                    f"dog {dog.id} owner_id={dog.owner_id} but owned by {owners}"
                )

        for person in self.list_people():
            for dog_id in self._graph.successors(person.id):
                if self._kind(dog_id) != DOG:
                    problems.append(f"person {person.id} owns non-dog {dog_id}")
                elif self._graph.nodes[dog_id]["data"].owner_id != person.id:
                    problems.append(
                        f"person {person.id} lists dog {dog_id} owned by someone else"
                    )

        return problems

    # -------------------- Internals --------------------

    def _ensure_open(self) -> None:
        if self._sealed:
            raise StoreSealedError()

    def _kind(self, entity_id: str) -> Optional[str]:
        if entity_id not in self._graph:
            return None
        return self._graph.nodes[entity_id]["kind"]

    def _find(self, kind: str, entity_id: str) -> Any:
        if self._kind(entity_id) != kind:
            return None
        return self._graph.nodes[entity_id]["data"]

    def _list(self, kind: str) -> List[Any]:
        return [
            data["data"]
            for _, data in self._graph.nodes(data=True)
            if data["kind"] == kind
        ]

    def _put(self, entity: Any) -> None:
        self._graph.nodes[entity.id]["data"] = entity
