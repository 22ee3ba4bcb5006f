"""Build a FixtureStore from configuration."""

from __future__ import annotations

import logging

from fixturestore.backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from fixturestore.config import BACKENDS, StoreConfig, load_config
from fixturestore.fixtures import load_fixtures
from fixturestore.store import FixtureStore

logger = logging.getLogger(__name__)


def build_backend(config: StoreConfig) -> KeyValueBackend:
    if config.backend == "memory":
        return MemoryBackend()
    if config.backend == "file":
        return JsonFileBackend(config.path)
    raise ValueError(f"Unknown backend '{config.backend}'. Available: {list(BACKENDS)}")


def open_store(config: StoreConfig | None = None) -> FixtureStore:
    """Create a store for ``config`` (loaded from env/toml when omitted) and seed it."""
    config = config or load_config()
    store = FixtureStore(build_backend(config))
    logger.info("Opened fixture store (backend=%s)", config.backend)

    if config.fixtures_dir and config.seed_on_open:
        seeded = load_fixtures(store, config.fixtures_dir)
        logger.info("Seeded %d collection(s) from %s", len(seeded), config.fixtures_dir)
    return store
