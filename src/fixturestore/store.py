"""Fixture store: CRUD, exact-match lookup and belongsTo eager loading.

Each collection is a JSON array persisted under its name in a key-value
backend. Every operation is a plain load, compute, save sequence with no
locking; two writers touching the same collection will race.

Failure is never raised to the caller:

- ``update`` with no match returns False and writes nothing.
- ``remove`` always returns True, whether or not anything was removed.
- ``find_one`` with no match returns None.
- A missing collection reads as an empty list.
- An include with no registered relation fetches the whole child collection.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from fixturestore.associations import (
    Association,
    Declaration,
    IncludeSpec,
    RelationGraph,
    parse_associations,
)
from fixturestore.backends import KeyValueBackend, MemoryBackend
from fixturestore.collection import Collection
from fixturestore.table import Record, find_index, generate_id, matches

logger = logging.getLogger(__name__)


def _decode_record(data: Mapping[str, Any] | str) -> Record:
    """Accept a record mapping or JSON text encoding one."""
    if isinstance(data, str):
        data = json.loads(data)
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        return data
    return dict(data)


class FixtureStore:
    """Record repository over a flat key-value backend."""

    def __init__(
        self,
        backend: KeyValueBackend | None = None,
        relations: RelationGraph | None = None,
    ) -> None:
        self.backend = backend if backend is not None else MemoryBackend()
        self.relations = relations if relations is not None else RelationGraph()

    # ── Raw persistence ──────────────────────────────────────

    def get(self, name: str) -> list[Record]:
        """Load a collection. Missing or unreadable collections are empty."""
        text = self.backend.get(name)
        if not text:
            return []
        try:
            items = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Collection %s is not valid JSON, treating as empty", name)
            return []
        if not isinstance(items, list):
            logger.warning("Collection %s is not a JSON array, treating as empty", name)
            return []
        return items

    def set(self, name: str, items: Sequence[Mapping[str, Any]]) -> None:
        """Persist a collection, replacing whatever was stored."""
        self.backend.set(name, json.dumps(list(items)))

    def clear(self) -> None:
        """Wipe every persisted collection. Relations are left registered."""
        self.backend.clear()
        logger.info("Cleared all collections")

    # ── Writes ───────────────────────────────────────────────

    def create(self, name: str, data: Mapping[str, Any] | str) -> Record:
        """Append a record with a freshly generated id and return it."""
        items = self.get(name)
        record = _decode_record(data)
        record["id"] = generate_id(items)
        items.append(record)
        self.set(name, items)
        logger.debug("Created %s#%s", name, record["id"])
        return record

    def update(
        self, name: str, where: Mapping[str, Any] | None, record: Mapping[str, Any] | str
    ) -> bool:
        """Replace the first matching record wholesale. False when nothing matches."""
        items = self.get(name)
        index = find_index(where, items)
        if index is None:
            logger.debug("No %s record matches %s, update skipped", name, where)
            return False
        items[index] = _decode_record(record)
        self.set(name, items)
        logger.debug("Updated %s at position %d", name, index)
        return True

    def remove(self, name: str, where: Mapping[str, Any] | None) -> bool:
        """Remove the first matching record. Always reports success."""
        items = self.get(name)
        index = find_index(where, items)
        if index is not None:
            del items[index]
            self.set(name, items)
            logger.debug("Removed %s at position %d", name, index)
        return True

    # ── Reads ────────────────────────────────────────────────

    def find_all(
        self,
        name: str,
        where: Mapping[str, Any] | None = None,
        include: Iterable[IncludeSpec] | None = None,
    ) -> list[Record]:
        """Every matching record, with the requested associations attached."""
        associations = parse_associations(include)
        found = [item for item in self.get(name) if matches(item, where)]
        for item in found:
            self.load_associations(name, item, associations)
        return found

    def find_one(
        self,
        name: str,
        where: Mapping[str, Any] | None = None,
        include: Iterable[IncludeSpec] | None = None,
    ) -> Record | None:
        """The first matching record, or None."""
        items = self.get(name)
        index = find_index(where, items)
        if index is None:
            return None
        item = items[index]
        self.load_associations(name, item, parse_associations(include))
        return item

    # ── Associations ─────────────────────────────────────────

    def belongs_to(self, name: str, declarations: Sequence[Declaration]) -> None:
        """Register the parents that reference collection ``name``."""
        self.relations.belongs_to(name, declarations)

    def load_associations(
        self, name: str, record: Record, associations: Sequence[Association]
    ) -> None:
        """Attach each association's child records onto ``record`` in place.

        Children are filtered by the belongsTo declarations that name ``name``
        as their parent; without one, the full child collection is attached.
        Nested includes recurse through ``find_all``.
        """
        for assoc in associations:
            where = self.relations.where_for(assoc.name, name, record.get("id"))
            if not where:
                logger.debug("No %s relation for %s, attaching all records", assoc.name, name)
            record[assoc.name] = self.find_all(assoc.name, where, include=assoc.deps)

    # ── Facade ───────────────────────────────────────────────

    def collection(self, name: str) -> Collection:
        return Collection(self, name)
