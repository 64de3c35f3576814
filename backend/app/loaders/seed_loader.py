from __future__ import annotations

import logging
import time

from pawgraph.config.settings import SeedConfig
from pawgraph.seed.provider import SeedError, SeedProvider
from pawgraph.seed.seeder import StoreSeeder
from pawgraph.store.entity_store import EntityStore


def load_store_from_seed(
    *,
    store: EntityStore,
    provider: SeedProvider,
    config: SeedConfig,
) -> None:
    """
    Seed the store at startup and record the outcome in its metadata.

    A failed seed is logged and the store is sealed empty, so the
    server still comes up.
    """
    logger = logging.getLogger("pawgraph.load_store")
    store.metadata["seed_provider"] = type(provider).__name__

    t0 = time.perf_counter()
    try:
        StoreSeeder(store, provider).seed(
            people_count=config.people_count,
            dog_count=config.dog_count,
        )
    except SeedError as exc:
        logger.error("seeding failed: %s", exc)
        store.metadata["seed_error"] = str(exc)
        store.seal()
        return

    logger.info(
        "seeded people=%s dogs=%s in %.3fs",
        store.person_count(),
        store.dog_count(),
        time.perf_counter() - t0,
    )
    store.metadata["seeded"] = True
