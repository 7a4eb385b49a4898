"""Perceived brightness model.

Perceived brightness approximates how light a color looks to the human eye
by weighting the squared channels with the eye's sensitivity to each of them
(green highest, blue lowest) and taking the square root:

    level = floor(sqrt(0.241 * r^2 + 0.691 * g^2 + 0.068 * b^2))

The weights sum to exactly 1, so for 8-bit channels the level lies in
[0, 255], gray ``(v, v, v)`` has level ``v`` and every level is reached by
at least one color. Both functions evaluate the formula exactly in integer
arithmetic (weights in thousandths). Plain float evaluation rounds white down
to 254.99999999999997 and would leave level 255 without any color.
"""

import math

import numpy as np

__all__ = [
    "RED_WEIGHT",
    "GREEN_WEIGHT",
    "BLUE_WEIGHT",
    "WEIGHT_SCALE",
    "MAX_LEVEL",
    "LEVEL_COUNT",
    "brightness_of",
    "brightness_levels",
    "code_brightness",
]

# Channel weights in thousandths: 0.241, 0.691, 0.068
RED_WEIGHT = 241
GREEN_WEIGHT = 691
BLUE_WEIGHT = 68
WEIGHT_SCALE = 1000

MAX_LEVEL = 255
LEVEL_COUNT = MAX_LEVEL + 1


def brightness_of(r: int, g: int, b: int) -> int:
    """Return the perceived brightness level (0-255) of an 8-bit RGB triple.

    Args:
        r: Red channel in [0, 255].
        g: Green channel in [0, 255].
        b: Blue channel in [0, 255].

    Returns:
        int: Brightness level in [0, 255].

    Examples:
        >>> brightness_of(0, 0, 0)
        0
        >>> brightness_of(255, 255, 255)
        255
        >>> brightness_of(0, 255, 0)
        211
    """
    weighted = RED_WEIGHT * r * r + GREEN_WEIGHT * g * g + BLUE_WEIGHT * b * b
    return math.isqrt(weighted // WEIGHT_SCALE)


def brightness_levels(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorized ``brightness_of`` over broadcastable channel arrays.

    Returns:
        np.ndarray: ``uint8`` array of brightness levels.
    """
    r = np.asarray(r, dtype=np.int64)
    g = np.asarray(g, dtype=np.int64)
    b = np.asarray(b, dtype=np.int64)
    weighted = RED_WEIGHT * r * r + GREEN_WEIGHT * g * g + BLUE_WEIGHT * b * b
    # Integers up to 255^2 are exact in float64 and sqrt is correctly
    # rounded, so the float floor equals the integer square root here.
    squares = (weighted // WEIGHT_SCALE).astype(np.float64)
    return np.floor(np.sqrt(squares)).astype(np.uint8)


def code_brightness(code: int) -> int:
    """Brightness level of a packed ``0xRRGGBB`` color code."""
    return brightness_of((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)
