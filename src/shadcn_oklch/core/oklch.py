"""
CSS colour normalisation to OKLCH.

Parses a CSS colour string (hex, named colour, or one of the functional
notations) and rewrites it as the interior of an ``oklch()`` function:
``"<L>% <C> <H>"``. Anything that is not a recognised colour is handed
back untouched, so a theme never loses a token.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import tinycss2
import webcolors

from .color_spaces import (
    Vector,
    display_p3_to_linear_srgb,
    hsl_to_srgb,
    hwb_to_srgb,
    lab_to_linear_srgb,
    linear_srgb_to_oklab,
    oklab_to_oklch,
    polar_to_rectangular,
    rec2020_to_linear_srgb,
    srgb_to_linear_srgb,
    xyz_d50_to_linear_srgb,
    xyz_d65_to_linear_srgb,
)

logger = logging.getLogger(__name__)

_PRECISION = Decimal("0.01")

# Reference ranges that 100% maps to, per CSS Color 4
_LAB_AB_RANGE = 125.0
_LCH_CHROMA_RANGE = 150.0
_OKLAB_AB_RANGE = 0.4
_OKLCH_CHROMA_RANGE = 0.4

_ANGLE_UNITS: dict[str, float] = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# CSS Color 4 keywords missing from the webcolors css3 table
_EXTRA_NAMED_COLORS: dict[str, str] = {
    "rebeccapurple": "663399",
}


@dataclass(frozen=True)
class PerceptualColor:
    """A colour in OKLCH, rounded to two decimals.

    Attributes:
        lightness: Perceived lightness as a percentage (0-100).
        chroma: Colourfulness, unitless and non-negative.
        hue: Hue angle in degrees (0-360).
    """

    lightness: float
    chroma: float
    hue: float

    def to_css(self) -> str:
        """Return a complete ``oklch(...)`` CSS value."""
        return f"oklch({format_perceptual(self)})"


class _Unparsable(ValueError):
    """Internal signal that a string is not a supported colour."""


# =============================================================================
# Public API
# =============================================================================


def parse_css_color(value: str) -> PerceptualColor | None:
    """Parse a CSS colour string into a rounded OKLCH colour.

    Args:
        value: Any CSS colour, e.g. ``"#fff"``, ``"hsl(0, 0%, 98%)"``,
            ``"rebeccapurple"`` or ``"oklch(70% 0.1 250)"``.

    Returns:
        PerceptualColor, or None if the string is not a supported colour.
        Components too large to round to two decimals (e.g. a chroma of
        1e30) also yield None, so the caller passes the text through.
    """
    try:
        lightness, chroma, hue = _parse_to_oklch(value)
        return _rounded(lightness, chroma, hue)
    except (_Unparsable, ArithmeticError) as e:
        logger.debug(f"Not a supported CSS colour {value!r}: {e}")
        return None


def format_perceptual(color: PerceptualColor) -> str:
    """Render a colour as ``"<L>% <C> <H>"`` without the ``oklch()`` wrapper."""
    lightness = _format_number(color.lightness)
    return f"{lightness}% {_format_number(color.chroma)} {_format_number(color.hue)}"


def format_token(value: Any) -> Any:
    """Normalise one theme token value.

    Returns the OKLCH component string when ``value`` parses as a colour,
    otherwise ``value`` itself. Never raises.
    """
    if not isinstance(value, str):
        logger.debug(f"Passing through non-string token value {value!r}")
        return value
    color = parse_css_color(value)
    if color is None:
        return value
    return format_perceptual(color)


# =============================================================================
# Rounding and formatting
# =============================================================================


def _round_half_up(value: float) -> float:
    rounded = float(Decimal(repr(value)).quantize(_PRECISION, rounding=ROUND_HALF_UP))
    # Adding zero folds -0.0 into 0.0
    return rounded + 0.0


def _rounded(lightness: float, chroma: float, hue: float) -> PerceptualColor:
    if not all(math.isfinite(component) for component in (lightness, chroma, hue)):
        raise _Unparsable("non-finite component")

    rounded_lightness = _round_half_up(min(max(lightness * 100, 0.0), 100.0))
    rounded_chroma = _round_half_up(max(chroma, 0.0))
    rounded_hue = _round_half_up(hue % 360)
    if rounded_hue >= 360 or rounded_chroma == 0:
        rounded_hue = 0.0

    return PerceptualColor(lightness=rounded_lightness, chroma=rounded_chroma, hue=rounded_hue)


def _format_number(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


# =============================================================================
# Parsing
# =============================================================================


def _parse_to_oklch(value: str) -> Vector:
    node = tinycss2.parse_one_component_value(value, skip_comments=True)

    if node.type == "hash":
        return _from_srgb(_hex_to_srgb(node.value))
    if node.type == "ident":
        return _from_srgb(_named_to_srgb(node.lower_value))
    if node.type == "function":
        handler = _FUNCTIONS.get(node.lower_name)
        if handler is None:
            raise _Unparsable(f"unsupported function {node.lower_name}()")
        channels, alpha = _split_arguments(node.arguments)
        if alpha is not None:
            _alpha(alpha)
        return handler(channels)

    raise _Unparsable(f"unexpected {node.type} token")


def _from_srgb(rgb: Vector) -> Vector:
    return oklab_to_oklch(linear_srgb_to_oklab(srgb_to_linear_srgb(rgb)))


def _from_linear_srgb(rgb: Vector) -> Vector:
    return oklab_to_oklch(linear_srgb_to_oklab(rgb))


def _hex_to_srgb(digits: str) -> Vector:
    if len(digits) not in (3, 4, 6, 8) or not set(digits) <= _HEX_DIGITS:
        raise _Unparsable(f"invalid hex colour #{digits}")
    if len(digits) in (3, 4):
        digits = "".join(digit * 2 for digit in digits)
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def _named_to_srgb(name: str) -> Vector:
    if name == "transparent":
        return (0.0, 0.0, 0.0)
    if name in _EXTRA_NAMED_COLORS:
        return _hex_to_srgb(_EXTRA_NAMED_COLORS[name])
    try:
        hex_value = webcolors.name_to_hex(name)
    except ValueError as e:
        raise _Unparsable(f"unknown colour name {name}") from e
    return _hex_to_srgb(hex_value.lstrip("#"))


def _split_arguments(arguments: list[Any]) -> tuple[list[Any], Any | None]:
    """Split function arguments into channel tokens and an optional alpha.

    Accepts both the legacy comma form ``rgb(1, 2, 3, 0.5)`` and the
    modern space form ``rgb(1 2 3 / 0.5)``.
    """
    tokens = [token for token in arguments if token.type not in ("whitespace", "comment")]

    if any(_is_literal(token, ",") for token in tokens):
        if len(tokens) % 2 == 0:
            raise _Unparsable("dangling comma")
        parts = tokens[0::2]
        if not all(_is_literal(separator, ",") for separator in tokens[1::2]):
            raise _Unparsable("mixed separators")
        if len(parts) == 3:
            return parts, None
        if len(parts) == 4:
            return parts[:3], parts[3]
        raise _Unparsable(f"expected 3 or 4 components, got {len(parts)}")

    alpha = None
    slashes = [index for index, token in enumerate(tokens) if _is_literal(token, "/")]
    if len(slashes) > 1:
        raise _Unparsable("more than one '/'")
    if slashes:
        rest = tokens[slashes[0] + 1 :]
        if len(rest) != 1:
            raise _Unparsable("expected a single alpha value")
        alpha = rest[0]
        tokens = tokens[: slashes[0]]
    if any(token.type == "literal" for token in tokens):
        raise _Unparsable("unexpected delimiter")
    return tokens, alpha


def _is_literal(token: Any, char: str) -> bool:
    return token.type == "literal" and token.value == char


# =============================================================================
# Channel values
# =============================================================================


def _is_none(token: Any) -> bool:
    return token.type == "ident" and token.lower_value == "none"


def _finite(token: Any) -> float:
    value = float(token.value)
    if not math.isfinite(value):
        raise _Unparsable(f"non-finite value {token.value}")
    return value


def _number(token: Any, percent_of: float) -> float:
    """Read a number or percentage; ``percent_of`` is what 100% equals."""
    if _is_none(token):
        return 0.0
    if token.type == "number":
        return _finite(token)
    if token.type == "percentage":
        return _finite(token) / 100 * percent_of
    raise _Unparsable(f"expected a number or percentage, got {token.type}")


def _angle(token: Any) -> float:
    if _is_none(token):
        return 0.0
    if token.type == "number":
        return _finite(token)
    if token.type == "dimension" and token.lower_unit in _ANGLE_UNITS:
        return _finite(token) * _ANGLE_UNITS[token.lower_unit]
    raise _Unparsable(f"expected an angle, got {token.type}")


def _alpha(token: Any) -> float:
    return _number(token, 1.0)


def _expect(channels: list[Any], count: int) -> None:
    if len(channels) != count:
        raise _Unparsable(f"expected {count} components, got {len(channels)}")


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


# =============================================================================
# Functional notations
# =============================================================================


def _rgb(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    r, g, b = (_clamp(_number(token, 255.0) / 255) for token in channels)
    return _from_srgb((r, g, b))


def _hsl(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    hue = _angle(channels[0])
    saturation = _clamp(_number(channels[1], 100.0) / 100)
    lightness = _clamp(_number(channels[2], 100.0) / 100)
    return _from_srgb(hsl_to_srgb(hue, saturation, lightness))


def _hwb(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    hue = _angle(channels[0])
    whiteness = _clamp(_number(channels[1], 100.0) / 100)
    blackness = _clamp(_number(channels[2], 100.0) / 100)
    return _from_srgb(hwb_to_srgb(hue, whiteness, blackness))


def _lab(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    lightness = _clamp(_number(channels[0], 100.0), 0.0, 100.0)
    a = _number(channels[1], _LAB_AB_RANGE)
    b = _number(channels[2], _LAB_AB_RANGE)
    return _from_linear_srgb(lab_to_linear_srgb(lightness, a, b))


def _lch(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    lightness = _clamp(_number(channels[0], 100.0), 0.0, 100.0)
    chroma = max(_number(channels[1], _LCH_CHROMA_RANGE), 0.0)
    a, b = polar_to_rectangular(chroma, _angle(channels[2]))
    return _from_linear_srgb(lab_to_linear_srgb(lightness, a, b))


def _oklab(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    lightness = _number(channels[0], 1.0)
    a = _number(channels[1], _OKLAB_AB_RANGE)
    b = _number(channels[2], _OKLAB_AB_RANGE)
    return oklab_to_oklch((lightness, a, b))


def _oklch(channels: list[Any]) -> Vector:
    _expect(channels, 3)
    lightness = _number(channels[0], 1.0)
    chroma = _number(channels[1], _OKLCH_CHROMA_RANGE)
    return (lightness, chroma, _angle(channels[2]))


_COLOR_SPACES: dict[str, Callable[[Vector], Vector]] = {
    "srgb": srgb_to_linear_srgb,
    "srgb-linear": lambda rgb: rgb,
    "display-p3": display_p3_to_linear_srgb,
    "rec2020": rec2020_to_linear_srgb,
    "xyz": xyz_d65_to_linear_srgb,
    "xyz-d65": xyz_d65_to_linear_srgb,
    "xyz-d50": xyz_d50_to_linear_srgb,
}


def _color(channels: list[Any]) -> Vector:
    if not channels or channels[0].type != "ident":
        raise _Unparsable("color() needs a colour space")
    to_linear_srgb = _COLOR_SPACES.get(channels[0].lower_value)
    if to_linear_srgb is None:
        raise _Unparsable(f"unsupported colour space {channels[0].lower_value}")
    components = channels[1:]
    _expect(components, 3)
    c1, c2, c3 = (_number(token, 1.0) for token in components)
    return _from_linear_srgb(to_linear_srgb((c1, c2, c3)))


_FUNCTIONS: dict[str, Callable[[list[Any]], Vector]] = {
    "rgb": _rgb,
    "rgba": _rgb,
    "hsl": _hsl,
    "hsla": _hsl,
    "hwb": _hwb,
    "lab": _lab,
    "lch": _lch,
    "oklab": _oklab,
    "oklch": _oklch,
    "color": _color,
}
