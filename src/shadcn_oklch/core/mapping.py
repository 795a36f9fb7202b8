"""
Key/value mapping over flat dictionaries.

Transform callbacks receive ``(value, key, index, entries)`` and return
either a replacement or :data:`KEEP` to leave the original in place.
Falsy replacements such as ``""`` or ``0`` are stored as given.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from enum import Enum
from typing import Any


class _Keep(Enum):
    KEEP = "keep"

    def __repr__(self) -> str:
        return "KEEP"


KEEP = _Keep.KEEP
"""Returned by a transform to keep the original key or value."""

Entries = list[tuple[Hashable, Any]]
EntryFn = Callable[[Any, Hashable, int, Entries], Any]


def map_entries(
    obj: Mapping[Hashable, Any],
    *,
    key_fn: EntryFn | None = None,
    value_fn: EntryFn | None = None,
) -> dict[Hashable, Any]:
    """Build a new dict by transforming the keys and/or values of ``obj``.

    Iteration follows ``obj``'s insertion order. When two keys transform
    to the same new key the later entry wins.

    Args:
        obj: Source mapping. Never mutated.
        key_fn: Optional key transform.
        value_fn: Optional value transform.

    Returns:
        New dict with transformed entries.
    """
    entries: Entries = list(obj.items())
    result: dict[Hashable, Any] = {}
    for index, (key, value) in enumerate(entries):
        new_key = key if key_fn is None else key_fn(value, key, index, entries)
        if new_key is KEEP:
            new_key = key
        new_value = value if value_fn is None else value_fn(value, key, index, entries)
        if new_value is KEEP:
            new_value = value
        result[new_key] = new_value
    return result
