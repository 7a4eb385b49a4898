"""Color code conversion, parsing and formatting utilities for brightpal."""

import re
from typing import Optional

import colour
import numpy as np

__all__ = [
    "MAX_CODE",
    "code_to_rgb",
    "rgb_to_code",
    "rgb_to_hsl",
    "code_to_hsl",
    "code_to_hex",
    "hex_to_code",
    "parse_color",
    "to_rgb255",
    "format_color_output",
]

MAX_CODE = 0xFFFFFF

HSL = tuple[float, float, float]


def code_to_rgb(code: int) -> tuple[int, int, int]:
    """Unpack a ``0xRRGGBB`` color code into 8-bit channels."""
    b = code & 0xFF
    code >>= 8
    g = code & 0xFF
    code >>= 8
    return (code & 0xFF, g, b)


def rgb_to_code(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a ``0xRRGGBB`` color code."""
    return b + (g << 8) + (r << 16)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB to (hue, saturation, lightness), each in [0, 1].

    Gray colors (all channels equal) have hue and saturation 0.
    """
    r /= 255
    g /= 255
    b /= 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        return (0.0, 0.0, lightness)

    d = high - low
    saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)

    if high == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return (hue / 6, saturation, lightness)


def code_to_hsl(code: int) -> HSL:
    """HSL triple of a packed color code."""
    return rgb_to_hsl(*code_to_rgb(code))


def code_to_hex(code: int) -> str:
    """Format a color code as a lowercase ``#rrggbb`` string."""
    return f"#{int(code):06x}"


def hex_to_code(hex_str: str) -> int:
    """Parse ``#rrggbb`` (any case) into a color code.

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    value = hex_str.strip()
    if not re.fullmatch(r"#[0-9a-fA-F]{6}", value):
        raise ValueError(f"Invalid hex color: '{hex_str}'. Expected #RRGGBB")
    return int(value[1:], 16)


def parse_hex_color(color_str: str) -> Optional[tuple[float, float, float]]:
    """Parse hexadecimal color format #RRGGBB."""
    try:
        r, g, b = code_to_rgb(hex_to_code(color_str))
    except ValueError:
        return None
    return (r / 255.0, g / 255.0, b / 255.0)


def parse_rgb_color(color_str: str) -> Optional[tuple[float, float, float]]:
    """Parse RGB color format rgb(R, G, B)."""
    pattern = r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)"
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    if not all(0 <= val <= 255 for val in (r, g, b)):
        return None

    return (r / 255.0, g / 255.0, b / 255.0)


def parse_hsl_color(color_str: str) -> Optional[tuple[float, float, float]]:
    """Parse HSL color format hsl(H, S%, L%)."""
    pattern = (
        r"hsl\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    lightness = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= lightness <= 100):
        return None

    hsl = np.array([h / 360, s / 100, lightness / 100])
    rgb = colour.models.rgb.cylindrical.HSL_to_RGB(hsl)
    return tuple(float(c) for c in rgb)


def parse_hsv_color(color_str: str) -> Optional[tuple[float, float, float]]:
    """Parse HSV color format hsv(H, S%, V%)."""
    pattern = (
        r"hsv\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    v = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= v <= 100):
        return None

    hsv = np.array([h / 360, s / 100, v / 100])
    rgb = colour.models.rgb.cylindrical.HSV_to_RGB(hsv)
    return tuple(float(c) for c in rgb)


def parse_color(color_str: str) -> tuple[float, float, float]:
    """Parse color string in various formats into normalized RGB."""
    color_str = color_str.strip()

    parsers = [parse_hex_color, parse_rgb_color, parse_hsl_color, parse_hsv_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, rgb(R,G,B), hsl(H,S%,L%), hsv(H,S%,V%)"
    )


def to_rgb255(rgb: tuple[float, float, float]) -> tuple[int, int, int]:
    """Round normalized RGB to 8-bit channels."""
    r, g, b = (min(255, max(0, int(round(c * 255)))) for c in rgb)
    return (r, g, b)


def format_color_output(codes: list[int], format_type: str = "hex") -> list[str]:
    """Format color codes for output.

    Args:
        codes: Packed color codes.
        format_type: One of ``hex`` (``#rrggbb``), ``rgb`` (``rgb(r, g, b)``),
            ``hsl`` (``hsl(H, S%, L%)``) or ``int``.
    """
    formatted: list[str] = []

    for code in codes:
        code = int(code)
        if format_type == "hex":
            formatted.append(code_to_hex(code))
        elif format_type == "rgb":
            r, g, b = code_to_rgb(code)
            formatted.append(f"rgb({r}, {g}, {b})")
        elif format_type == "hsl":
            h, s, lightness = code_to_hsl(code)
            formatted.append(f"hsl({h * 360:.0f}, {s * 100:.0f}%, {lightness * 100:.0f}%)")
        elif format_type == "int":
            formatted.append(str(code))
        else:
            raise ValueError(f"Unknown color format: '{format_type}'")

    return formatted
