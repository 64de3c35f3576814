from __future__ import annotations


class EntityStoreError(Exception):
    """Base class for entity store failures."""


class DuplicateEntityError(EntityStoreError):
    def __init__(self, entity_id: str) -> None:
        super().__init__(f"entity id already in use: {entity_id}")
        self.entity_id = entity_id


class UnknownOwnerError(EntityStoreError):
    def __init__(self, dog_id: str, owner_id: str) -> None:
        super().__init__(f"dog {dog_id} references unknown owner {owner_id}")
        self.dog_id = dog_id
        self.owner_id = owner_id


class StoreSealedError(EntityStoreError):
    def __init__(self) -> None:
        super().__init__("store is sealed; entities can no longer be created")


class EntityNotFoundError(EntityStoreError):
    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} Not found")
        self.entity = entity
        self.entity_id = entity_id
