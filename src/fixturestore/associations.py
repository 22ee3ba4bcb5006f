"""belongsTo relations and include-spec parsing.

An include spec is a caller-authored tree naming which child collections to
attach to each result record::

    ["tags", {"comments": ["author", {"replies": ["author"]}]}]

A bare string is a leaf. A single-key mapping names a child collection and the
include specs to resolve for each of its records in turn. Each level is parsed
only when it is reached, so depth is bounded by the caller's tree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

logger = logging.getLogger(__name__)

IncludeSpec = Union[str, Mapping[str, Sequence["IncludeSpec"]], "Association"]

# {parent_collection: foreign_key_field}
Declaration = Mapping[str, str]


@dataclass
class Association:
    """A parsed include-spec node: child collection plus its own includes."""

    name: str
    deps: list[IncludeSpec] = field(default_factory=list)


def parse_associations(include: Iterable[IncludeSpec] | None) -> list[Association]:
    """Normalize include specs into Associations, one level deep."""
    associations: list[Association] = []
    for spec in include or []:
        if isinstance(spec, Association):
            associations.append(spec)
        elif isinstance(spec, str):
            associations.append(Association(spec))
        else:
            keys = list(spec)
            if not keys:
                logger.debug("Skipping empty include mapping")
                continue
            if len(keys) > 1:
                logger.warning("Include mapping has %d keys, using only %r", len(keys), keys[0])
            deps = spec[keys[0]] or []
            if isinstance(deps, str):
                deps = [deps]
            associations.append(Association(keys[0], list(deps)))
    return associations


class RelationGraph:
    """belongsTo declarations keyed by child collection name."""

    def __init__(self) -> None:
        self._belongs_to: dict[str, list[Declaration]] = {}

    def belongs_to(self, child: str, declarations: Sequence[Declaration]) -> None:
        """Declare which parent collections reference ``child``. Last write wins."""
        self._belongs_to[child] = list(declarations)
        logger.debug("Registered belongsTo for %s: %s", child, self._belongs_to[child])

    def declarations(self, child: str) -> list[Declaration]:
        return list(self._belongs_to.get(child, []))

    def where_for(self, child: str, parent: str, parent_id: Any) -> dict[str, Any]:
        """Filter selecting ``child`` records that belong to a ``parent`` record.

        Only declarations naming ``parent`` contribute. With none, the filter is
        empty and every child record matches.
        """
        where: dict[str, Any] = {}
        for declaration in self._belongs_to.get(child, []):
            keys = list(declaration)
            if keys and keys[0] == parent:
                where[declaration[keys[0]]] = parent_id
        return where

    def clear(self) -> None:
        self._belongs_to.clear()

    def __contains__(self, child: str) -> bool:
        return child in self._belongs_to
