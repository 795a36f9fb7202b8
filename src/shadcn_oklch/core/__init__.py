"""
Core building blocks: deep merge, entry mapping, colour normalisation,
option models and option loading.
"""

from .errors import ShadcnOklchError, ThemeConfigError
from .mapping import KEEP, map_entries
from .merge import deep_merge
from .oklch import PerceptualColor, format_perceptual, format_token, parse_css_color
from .options_loader import dump_plugin_options, load_plugin_options

__all__ = [
    "KEEP",
    "PerceptualColor",
    "ShadcnOklchError",
    "ThemeConfigError",
    "deep_merge",
    "dump_plugin_options",
    "format_perceptual",
    "format_token",
    "load_plugin_options",
    "map_entries",
    "parse_css_color",
]
