"""
Plugin option IR types.

Defines the option record accepted by the plugin. Field names are
snake_case; the camelCase spellings used by JavaScript build configs are
accepted as aliases so the same options file works for both.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ColorScheme(StrEnum):
    """Built-in colour schemes."""

    LIGHT = "light"
    DARK = "dark"


class ShadcnToken(StrEnum):
    """Token names shipped in the built-in palettes."""

    BACKGROUND = "background"
    FOREGROUND = "foreground"
    CARD = "card"
    CARD_FOREGROUND = "card-foreground"
    POPOVER = "popover"
    POPOVER_FOREGROUND = "popover-foreground"
    PRIMARY = "primary"
    PRIMARY_FOREGROUND = "primary-foreground"
    SECONDARY = "secondary"
    SECONDARY_FOREGROUND = "secondary-foreground"
    MUTED = "muted"
    MUTED_FOREGROUND = "muted-foreground"
    ACCENT = "accent"
    ACCENT_FOREGROUND = "accent-foreground"
    DESTRUCTIVE = "destructive"
    DESTRUCTIVE_FOREGROUND = "destructive-foreground"
    BORDER = "border"
    INPUT = "input"
    RING = "ring"


DEFAULT_COLOR_PREFIX = "color"
DEFAULT_RADIUS = "0.5rem"
DEFAULT_COLOR_SCHEME = ColorScheme.LIGHT


# =============================================================================
# Options
# =============================================================================


class PluginOptions(BaseModel):
    """Options for one plugin configuration call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    themes: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Theme name -> token overrides, deep-merged onto the built-in palettes",
    )
    color_prefix: str | None = Field(
        default=None,
        alias="colorPrefix",
        description='CSS variable prefix; None means "color", "" disables prefixing',
    )
    radius: str | None = Field(
        default=None,
        description="Value of the --radius variable (default 0.5rem)",
    )
    default_color_scheme: str | None = Field(
        default=None,
        alias="defaultColorScheme",
        description="Theme emitted under :root (default light)",
    )

    @property
    def resolved_radius(self) -> str:
        return self.radius or DEFAULT_RADIUS

    @property
    def resolved_color_scheme(self) -> str:
        return self.default_color_scheme or DEFAULT_COLOR_SCHEME
