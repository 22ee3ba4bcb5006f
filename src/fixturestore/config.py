"""Configuration loading from environment variables and fixturestore.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_HOME = Path.home() / ".fixturestore"
_DEFAULT_PATH = _DEFAULT_HOME / "store.json"
_CONFIG_FILENAME = "fixturestore.toml"

BACKENDS = ("memory", "file")


@dataclass
class StoreConfig:
    """Top-level fixture store configuration."""

    backend: str = "memory"
    path: Path = _DEFAULT_PATH
    fixtures_dir: Path | None = None
    seed_on_open: bool = True


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path | None = None) -> StoreConfig:
    """Load configuration from environment variables and optional fixturestore.toml.

    Priority: environment variables > fixturestore.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.fixturestore/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _DEFAULT_HOME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    store_data = file_data.get("store", {})
    fixtures_dir = os.getenv("FIXTURESTORE_FIXTURES_DIR", store_data.get("fixtures_dir"))

    config = StoreConfig(
        backend=os.getenv("FIXTURESTORE_BACKEND", store_data.get("backend", "memory")),
        path=Path(os.getenv("FIXTURESTORE_PATH", store_data.get("path", str(_DEFAULT_PATH)))),
        fixtures_dir=Path(fixtures_dir) if fixtures_dir else None,
        seed_on_open=_as_bool(os.getenv("FIXTURESTORE_SEED", store_data.get("seed_on_open", True))),
    )
    return config
