"""
shadcn-oklch - shadcn/ui colour themes as OKLCH CSS variables.

Merges user theme overrides onto the built-in light/dark palettes,
normalises every colour to OKLCH, and produces the base declarations and
colour palette a Tailwind-style styling framework consumes.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import (
    KEEP,
    PerceptualColor,
    ShadcnOklchError,
    ThemeConfigError,
    deep_merge,
    format_token,
    map_entries,
    parse_css_color,
)
from .core.ir import ColorScheme, PluginOptions, ShadcnToken
from .themes import (
    DEFAULT_THEMES,
    ShadcnPlugin,
    ThemeAssembler,
    build_color_palette,
    build_declaration_tree,
    generate_theme_css,
    shadcn_plugin,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("shadcn-oklch")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "DEFAULT_THEMES",
    "KEEP",
    "ColorScheme",
    "PerceptualColor",
    "PluginOptions",
    "ShadcnOklchError",
    "ShadcnPlugin",
    "ShadcnToken",
    "ThemeAssembler",
    "ThemeConfigError",
    "build_color_palette",
    "build_declaration_tree",
    "deep_merge",
    "format_token",
    "generate_theme_css",
    "map_entries",
    "parse_css_color",
    "shadcn_plugin",
]
