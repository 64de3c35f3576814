"""
Startup data generation for pawgraph.
"""

from pawgraph.seed.provider import SeedProvider, SeedError
from pawgraph.seed.photos import DogPhotoSource
from pawgraph.seed.random_provider import RandomSeedProvider
from pawgraph.seed.fixture_provider import FixtureSeedProvider, FixtureDog
from pawgraph.seed.seeder import StoreSeeder

__all__ = [
    "SeedProvider",
    "SeedError",
    "DogPhotoSource",
    "RandomSeedProvider",
    "FixtureSeedProvider",
    "FixtureDog",
    "StoreSeeder",
]
