"""
pawgraph
========

In-memory dogs-and-owners store served through a GraphQL API.

Public API:
- EntityStore
- StoreSeeder
- RandomSeedProvider
- FixtureSeedProvider
"""

from pawgraph.store.entity_store import EntityStore
from pawgraph.seed.seeder import StoreSeeder
from pawgraph.seed.random_provider import RandomSeedProvider
from pawgraph.seed.fixture_provider import FixtureSeedProvider

__all__ = [
    "EntityStore",
    "StoreSeeder",
    "RandomSeedProvider",
    "FixtureSeedProvider",
]

__version__ = "0.1.0"
