"""
Plugin options persistence.

Reads plugin options from a YAML file or a TOML file (either a dedicated
file or ``pyproject.toml`` with a ``[tool.shadcn-oklch]`` table) and
writes them back as YAML.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ThemeConfigError
from .ir import PluginOptions

logger = logging.getLogger(__name__)

TOOL_TABLE = "shadcn-oklch"

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_TOML_SUFFIXES = frozenset({".toml"})


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {path}: {e}") from e


def _read_toml(path: Path) -> Any:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ThemeConfigError(f"Invalid TOML in {path}: {e}") from e
    tool_section = data.get("tool", {})
    if TOOL_TABLE in tool_section:
        return tool_section[TOOL_TABLE]
    return data


def load_plugin_options(path: Path, *, use_defaults: bool = True) -> PluginOptions:
    """Load plugin options from a YAML or TOML file.

    Args:
        path: Options file (``.yaml``, ``.yml`` or ``.toml``).
        use_defaults: If True, return default options when the file is
            missing or empty.

    Returns:
        PluginOptions instance.

    Raises:
        ThemeConfigError: If the file is missing (when use_defaults=False),
            unreadable, or fails validation.
    """
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES | _TOML_SUFFIXES:
        raise ThemeConfigError(f"Unsupported options file type: {path}")

    if not path.exists():
        if use_defaults:
            logger.debug(f"No options file at {path}, using defaults")
            return PluginOptions()
        raise ThemeConfigError(f"Options file not found: {path}")

    data = _read_yaml(path) if suffix in _YAML_SUFFIXES else _read_toml(path)

    if not data:
        if use_defaults:
            logger.warning(f"Empty options file at {path}, using defaults")
            return PluginOptions()
        raise ThemeConfigError(f"Empty options file: {path}")

    if not isinstance(data, dict):
        raise ThemeConfigError(f"Options in {path} must be a mapping, got {type(data).__name__}")

    try:
        return PluginOptions.model_validate(data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid plugin options in {path}: {e}") from e


def dump_plugin_options(options: PluginOptions, path: Path) -> Path:
    """Save plugin options as YAML using the camelCase option names.

    Returns:
        Path to the written file.
    """
    data = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info(f"Saved plugin options to {path}")
    return path
