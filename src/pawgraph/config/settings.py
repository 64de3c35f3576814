from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# ---------------------------------------------------------------------
# Startup seeding
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SeedConfig:
    """
    Controls how many entities are generated at startup and
    where dog photos come from.
    """

    people_count: int = 2
    dog_count: int = 20
    photo_api_url: str = "https://dog.ceo/api/breeds/image/random"
    photo_timeout_s: float = 10.0
    fallback_photo: Optional[str] = None
    random_seed: Optional[int] = None


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PawgraphConfig:
    """
    Root configuration object for pawgraph.

    Constructed explicitly and passed to whatever needs it.
    """

    seed: SeedConfig = field(default_factory=SeedConfig)
