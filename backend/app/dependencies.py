from functools import lru_cache
import logging
import time

from pawgraph.seed.provider import SeedProvider
from pawgraph.seed.random_provider import RandomSeedProvider
from pawgraph.store.entity_store import EntityStore

from backend.app.config import AppConfig
from backend.app.loaders.seed_loader import load_store_from_seed


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_seed_provider() -> SeedProvider:
    return RandomSeedProvider.from_config(get_config().pawgraph.seed)


@lru_cache
def get_store() -> EntityStore:
    logger = logging.getLogger("pawgraph.startup")
    t0 = time.perf_counter()
    store = EntityStore()
    store.metadata["source"] = "backend"

    load_store_from_seed(
        store=store,
        provider=get_seed_provider(),
        config=get_config().pawgraph.seed,
    )
    logger.info("[startup] get_store total %.3fs", time.perf_counter() - t0)
    return store
