"""
Configuration layer for pawgraph.

Configuration is explicit (passed, not global) and immutable.
"""

from pawgraph.config.settings import SeedConfig, PawgraphConfig

__all__ = [
    "SeedConfig",
    "PawgraphConfig",
]
