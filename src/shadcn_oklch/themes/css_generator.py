"""
CSS generator for declaration trees.

Renders selector blocks in insertion order so the ``:root`` block comes
before the class-scoped theme blocks.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def generate_theme_css(tree: Mapping[str, Mapping[str, Any]], *, header: bool = True) -> str:
    """
    Generate a stylesheet from a declaration tree.

    Args:
        tree: Selector -> {custom property -> value}
        header: Prepend an auto-generated comment

    Returns:
        CSS string, one block per selector
    """
    lines: list[str] = []

    if header:
        lines.append("/* shadcn-oklch theme */")
        lines.append("/* Auto-generated - do not edit */")
        lines.append("")

    for selector, declarations in tree.items():
        lines.append(f"{selector} {{")
        lines.extend(_declaration_lines(declarations, indent=2))
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def _declaration_lines(declarations: Mapping[str, Any], indent: int = 0) -> list[str]:
    prefix = " " * indent
    return [f"{prefix}{name}: {value};" for name, value in declarations.items()]
