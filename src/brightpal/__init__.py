"""brightpal - color palettes at a chosen perceived brightness"""

__version__ = "0.1.0"

from .brightness import brightness_of
from .brightness_index import BrightnessIndex, build_default_index, get_default_index
from .color_utils import (
    code_to_hex,
    code_to_rgb,
    format_color_output,
    hex_to_code,
    parse_color,
)
from .errors import InvalidArgument, InvariantViolation
from .export import format_palette_js
from .hsl_cache import HslCache, hsl
from .palette import PaletteSelector, select_palette

__all__ = [
    "brightness_of",
    "BrightnessIndex",
    "build_default_index",
    "get_default_index",
    "code_to_rgb",
    "code_to_hex",
    "hex_to_code",
    "hsl",
    "HslCache",
    "PaletteSelector",
    "select_palette",
    "format_palette_js",
    "format_color_output",
    "parse_color",
    "InvalidArgument",
    "InvariantViolation",
]
