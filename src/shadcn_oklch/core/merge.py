"""
Structural deep merge of nested theme configuration.

Mappings are merged key by key; everything else (strings, numbers,
lists, None) is a leaf that a later source replaces outright.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_merge(target: Mapping[str, Any], *sources: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``sources`` onto a copy of ``target``, left to right.

    Args:
        target: Base mapping. Never mutated.
        *sources: Override mappings; later sources win on conflict.

    Returns:
        A new top-level dict. Nested mappings that were merged are new
        dicts; untouched leaves are shared with the inputs.
    """
    output: dict[str, Any] = dict(target)
    for source in sources:
        for key, value in source.items():
            existing = output.get(key)
            if isinstance(existing, Mapping) and isinstance(value, Mapping):
                output[key] = deep_merge(existing, value)
            else:
                output[key] = value
    return output
