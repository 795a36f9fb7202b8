"""
Pure-Python colour space conversions.

Everything funnels into OKLab via linear sRGB (unclamped, so wide-gamut
inputs keep their extra chroma). Matrices follow CSS Color Module 4.
"""

from __future__ import annotations

import colorsys
import math

Vector = tuple[float, float, float]
Matrix = tuple[Vector, Vector, Vector]

# CIE XYZ (D65) -> linear sRGB
_XYZ_D65_TO_LINEAR_SRGB: Matrix = (
    (3.2409699419045226, -1.537383177570094, -0.4986107602930034),
    (-0.9692436362808796, 1.8759675015077202, 0.04155505740717559),
    (0.05563007969699366, -0.20397695888897652, 1.0569715142428786),
)

# Bradford chromatic adaptation D50 -> D65
_XYZ_D50_TO_D65: Matrix = (
    (0.955473421488075, -0.02309845494876471, 0.06325924320057072),
    (-0.0283697093338637, 1.0099953980813041, 0.021041441191917323),
    (0.012314014864481998, -0.020507649298898964, 1.330365926242124),
)

_LINEAR_P3_TO_XYZ_D65: Matrix = (
    (0.4865709486482162, 0.26566769316909306, 0.1982172852343625),
    (0.2289745640697488, 0.6917385218365064, 0.079286914093745),
    (0.0, 0.04511338185890264, 1.043944368900976),
)

_LINEAR_REC2020_TO_XYZ_D65: Matrix = (
    (0.6369580483012914, 0.14461690358620832, 0.1688809751641721),
    (0.2627002120112671, 0.6779980715188708, 0.05930171646986196),
    (0.0, 0.028072693049087428, 1.060985057710791),
)

# Linear sRGB -> LMS cone response (Ottosson)
_LINEAR_SRGB_TO_LMS: Matrix = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

_LMS_TO_OKLAB: Matrix = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# D50 reference white for CIE Lab
_D50_WHITE: Vector = (0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585)

_LAB_KAPPA = 24389 / 27
_LAB_EPSILON = 216 / 24389

_REC2020_ALPHA = 1.09929682680944
_REC2020_BETA = 0.018053968510807


def _multiply(matrix: Matrix, vector: Vector) -> Vector:
    return (
        matrix[0][0] * vector[0] + matrix[0][1] * vector[1] + matrix[0][2] * vector[2],
        matrix[1][0] * vector[0] + matrix[1][1] * vector[1] + matrix[1][2] * vector[2],
        matrix[2][0] * vector[0] + matrix[2][1] * vector[1] + matrix[2][2] * vector[2],
    )


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1 / 3), value)


# =============================================================================
# Transfer functions
# =============================================================================


def srgb_to_linear(channel: float) -> float:
    """Undo the sRGB gamma curve (also used by display-p3)."""
    magnitude = abs(channel)
    if magnitude <= 0.04045:
        return channel / 12.92
    return math.copysign(((magnitude + 0.055) / 1.055) ** 2.4, channel)


def rec2020_to_linear(channel: float) -> float:
    """Undo the Rec. 2020 transfer curve."""
    magnitude = abs(channel)
    if magnitude < _REC2020_BETA * 4.5:
        return channel / 4.5
    return math.copysign(((magnitude + _REC2020_ALPHA - 1) / _REC2020_ALPHA) ** (1 / 0.45), channel)


# =============================================================================
# Into linear sRGB
# =============================================================================


def srgb_to_linear_srgb(rgb: Vector) -> Vector:
    r, g, b = rgb
    return (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def xyz_d65_to_linear_srgb(xyz: Vector) -> Vector:
    return _multiply(_XYZ_D65_TO_LINEAR_SRGB, xyz)


def xyz_d50_to_linear_srgb(xyz: Vector) -> Vector:
    return xyz_d65_to_linear_srgb(_multiply(_XYZ_D50_TO_D65, xyz))


def display_p3_to_linear_srgb(rgb: Vector) -> Vector:
    linear = (srgb_to_linear(rgb[0]), srgb_to_linear(rgb[1]), srgb_to_linear(rgb[2]))
    return xyz_d65_to_linear_srgb(_multiply(_LINEAR_P3_TO_XYZ_D65, linear))


def rec2020_to_linear_srgb(rgb: Vector) -> Vector:
    linear = (rec2020_to_linear(rgb[0]), rec2020_to_linear(rgb[1]), rec2020_to_linear(rgb[2]))
    return xyz_d65_to_linear_srgb(_multiply(_LINEAR_REC2020_TO_XYZ_D65, linear))


def hsl_to_srgb(hue: float, saturation: float, lightness: float) -> Vector:
    """Convert HSL to gamma-encoded sRGB.

    Args:
        hue: Hue in degrees.
        saturation: Saturation (0-1).
        lightness: Lightness (0-1).

    Returns:
        (r, g, b) in 0-1.
    """
    return colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)


def hwb_to_srgb(hue: float, whiteness: float, blackness: float) -> Vector:
    """Convert HWB to gamma-encoded sRGB.

    Whiteness and blackness summing to 1 or more yield a grey.
    """
    if whiteness + blackness >= 1:
        grey = whiteness / (whiteness + blackness)
        return (grey, grey, grey)
    r, g, b = hsl_to_srgb(hue, 1.0, 0.5)
    scale = 1 - whiteness - blackness
    return (r * scale + whiteness, g * scale + whiteness, b * scale + whiteness)


def lab_to_xyz_d50(lightness: float, a: float, b: float) -> Vector:
    """Convert CIE Lab (D50) to CIE XYZ (D50)."""
    f1 = (lightness + 16) / 116
    f0 = a / 500 + f1
    f2 = f1 - b / 200

    x = f0**3 if f0**3 > _LAB_EPSILON else (116 * f0 - 16) / _LAB_KAPPA
    y = f1**3 if lightness > _LAB_KAPPA * _LAB_EPSILON else lightness / _LAB_KAPPA
    z = f2**3 if f2**3 > _LAB_EPSILON else (116 * f2 - 16) / _LAB_KAPPA

    return (x * _D50_WHITE[0], y * _D50_WHITE[1], z * _D50_WHITE[2])


def lab_to_linear_srgb(lightness: float, a: float, b: float) -> Vector:
    return xyz_d50_to_linear_srgb(lab_to_xyz_d50(lightness, a, b))


# =============================================================================
# OKLab / OKLCH
# =============================================================================


def linear_srgb_to_oklab(rgb: Vector) -> Vector:
    """Convert linear sRGB to OKLab (L in 0-1)."""
    lms = _multiply(_LINEAR_SRGB_TO_LMS, rgb)
    return _multiply(_LMS_TO_OKLAB, (_cbrt(lms[0]), _cbrt(lms[1]), _cbrt(lms[2])))


def polar_to_rectangular(chroma: float, hue: float) -> tuple[float, float]:
    """Convert (chroma, hue degrees) into (a, b) axes."""
    radians = math.radians(hue)
    return (chroma * math.cos(radians), chroma * math.sin(radians))


def oklab_to_oklch(lab: Vector) -> Vector:
    """Convert OKLab to OKLCH (hue in degrees, 0-360)."""
    lightness, a, b = lab
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % 360
    return (lightness, chroma, hue)
