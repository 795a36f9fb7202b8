"""Intermediate representation for plugin options."""

from .themes import (
    DEFAULT_COLOR_PREFIX,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_RADIUS,
    ColorScheme,
    PluginOptions,
    ShadcnToken,
)

__all__ = [
    "DEFAULT_COLOR_PREFIX",
    "DEFAULT_COLOR_SCHEME",
    "DEFAULT_RADIUS",
    "ColorScheme",
    "PluginOptions",
    "ShadcnToken",
]
