"""Seed collections from a fixtures directory.

Layout::

    fixtures/
    ├── users.json            # JSON array, stored as-is under "users"
    └── posts/                # one record per markdown file
        ├── 01-hello.md       # YAML frontmatter = fields, body -> "body"
        └── 02-second.md

Markdown records without an ``id`` are numbered after the highest explicit id
in their collection, in file-name order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import frontmatter

from fixturestore.table import Record, generate_id

if TYPE_CHECKING:
    from fixturestore.store import FixtureStore

logger = logging.getLogger(__name__)


def _read_json_fixture(path: Path) -> list[Record] | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Skipping fixture %s: %s", path, e)
        return None
    if not isinstance(data, list):
        logger.warning("Skipping fixture %s: expected a JSON array", path)
        return None
    return data


def _read_markdown_record(path: Path) -> Record | None:
    try:
        post = frontmatter.load(str(path))
    except Exception as e:
        logger.warning("Skipping fixture %s: %s", path, e)
        return None
    # YAML dates and timestamps are not JSON values
    record = json.loads(json.dumps(dict(post.metadata), default=str))
    body = post.content.strip()
    if body:
        record["body"] = body
    return record


def _read_markdown_collection(directory: Path) -> list[Record]:
    records: list[Record] = []
    for md_file in sorted(directory.glob("*.md")):
        record = _read_markdown_record(md_file)
        if record is None:
            continue
        records.append(record)
    for record in records:
        if not record.get("id"):
            record["id"] = generate_id(records)
    return records


def load_fixtures(store: FixtureStore, directory: Path | str) -> dict[str, int]:
    """Replace collections in ``store`` with fixture data. Returns name -> count."""
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Fixtures directory not found: %s", directory)
        return {}

    seeded: dict[str, int] = {}
    for path in sorted(directory.iterdir()):
        if path.is_file() and path.suffix == ".json":
            name, records = path.stem, _read_json_fixture(path)
        elif path.is_dir() and not path.name.startswith("."):
            name, records = path.name, _read_markdown_collection(path)
        else:
            continue
        if records is None:
            continue
        if name in seeded:
            logger.warning("Collection %s seeded more than once, %s wins", name, path.name)
        store.set(name, records)
        seeded[name] = len(records)
        logger.debug("Loaded %d %s fixture(s)", len(records), name)
    return seeded
