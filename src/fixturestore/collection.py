"""Per-collection facade over a FixtureStore."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fixturestore.associations import Declaration, IncludeSpec
    from fixturestore.store import FixtureStore
    from fixturestore.table import Record


class Collection:
    """A FixtureStore bound to one collection name."""

    def __init__(self, store: FixtureStore, name: str) -> None:
        self.store = store
        self.name = name

    def __repr__(self) -> str:
        return f"Collection({self.name!r})"

    def create(self, data: Mapping[str, Any] | str) -> Record:
        return self.store.create(self.name, data)

    def update(self, where: Mapping[str, Any] | None, record: Mapping[str, Any] | str) -> bool:
        return self.store.update(self.name, where, record)

    def remove(self, where: Mapping[str, Any] | None) -> bool:
        return self.store.remove(self.name, where)

    def find_one(
        self,
        where: Mapping[str, Any] | None = None,
        include: Iterable[IncludeSpec] | None = None,
    ) -> Record | None:
        return self.store.find_one(self.name, where, include=include)

    def find_all(
        self,
        where: Mapping[str, Any] | None = None,
        include: Iterable[IncludeSpec] | None = None,
    ) -> list[Record]:
        return self.store.find_all(self.name, where, include=include)

    def belongs_to(self, declarations: Sequence[Declaration]) -> None:
        self.store.belongs_to(self.name, declarations)
