"""Pure record-table helpers: id generation and exact-match lookup.

Matching is strict. Numbers compare by value whether stored as int or float,
so ``4`` matches ``4.0``, but ``1`` never matches ``True`` or ``"1"``. Other
scalars must share a type and compare equal. Lists and dicts match by identity
only, and a field missing from the record matches nothing.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

Record = dict[str, Any]

_MISSING = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equals(left: Any, right: Any) -> bool:
    if isinstance(left, (dict, list)) or isinstance(right, (dict, list)):
        return left is right
    if _is_number(left) and _is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def matches(record: Mapping[str, Any], where: Mapping[str, Any] | None) -> bool:
    """True if every key in ``where`` strictly equals the record's value."""
    if not where:
        return True
    return all(strict_equals(record.get(key, _MISSING), value) for key, value in where.items())


def generate_id(items: Sequence[Mapping[str, Any]]) -> int:
    """Next id for a collection: one past the highest numeric id.

    Non-numeric and non-finite ids count as 0.
    """
    ids = [item.get("id") for item in items]
    return int(max([i for i in ids if _is_number(i) and math.isfinite(i)] + [0])) + 1


def find_index(where: Mapping[str, Any] | None, items: Sequence[Mapping[str, Any]] | None) -> int | None:
    """Position of the first matching record, or None."""
    if items is None:
        return None
    for i, item in enumerate(items):
        if matches(item, where):
            return i
    return None
