"""Palette selection for a target perceived brightness.

A palette request gathers every color whose brightness level lies within
``tolerance`` of the target, samples a bounded random subset, keeps the
vivid colors and orders them so neighbouring swatches look related.

Pipeline:
    1. Clamp the target to [0, 255] and truncate it to an integer.
    2. Gather the index band ``[target - tolerance, target + tolerance]``,
       clipped to [0, 255], in level order.
    3. Shuffle the band uniformly (Fisher-Yates) with the injected generator.
    4. Keep the first ``size`` codes.
    5. Drop codes whose HSL saturation is at most 0.5.
    6. Sort by hue, then lightness, then saturation.

The result holds at most ``size`` codes and may be empty; near black and near
white bands contain few saturated colors.

Example:
    >>> selector = PaletteSelector(rng=7)
    >>> palette = selector.select(128, tolerance=5, size=50)
    >>> len(palette) <= 50
    True
"""

import math
import numbers
from typing import Optional, Union

import numpy as np

from .brightness import MAX_LEVEL
from .brightness_index import BrightnessIndex, get_default_index
from .errors import InvalidArgument
from .hsl_cache import HslCache, default_cache

__all__ = [
    "DEFAULT_TOLERANCE",
    "DEFAULT_PALETTE_SIZE",
    "MAX_TOLERANCE",
    "SATURATION_THRESHOLD",
    "PaletteSelector",
    "select_palette",
]

DEFAULT_TOLERANCE = 0
DEFAULT_PALETTE_SIZE = 200
# Largest tolerance offered by the command line.
MAX_TOLERANCE = 20
SATURATION_THRESHOLD = 0.5

RandomSource = Union[np.random.Generator, int, None]


def _finite_number(name: str, value: object) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    # Integers stay exact; arbitrarily large ones are valid and clamp later.
    if isinstance(value, numbers.Integral):
        return int(value)
    try:
        number = float(value)
    except OverflowError:
        return math.trunc(value)
    if not math.isfinite(number):
        raise InvalidArgument(f"{name} must be finite, got {number}")
    return number


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class PaletteSelector:
    """Select palettes from a brightness index.

    Args:
        index: Brightness index to query. Defaults to the process-wide
            full-domain index, built on first use.
        cache: HSL cache used for filtering and sorting. Defaults to the
            process-wide cache.
        rng: ``numpy.random.Generator`` or integer seed driving the shuffle.
            ``None`` seeds from the operating system.
    """

    def __init__(
        self,
        index: Optional[BrightnessIndex] = None,
        cache: Optional[HslCache] = None,
        rng: RandomSource = None,
    ):
        self._index = index
        self.cache = cache if cache is not None else default_cache()
        self.rng = _as_generator(rng)

    @property
    def index(self) -> BrightnessIndex:
        """The brightness index; the first access may build the full index."""
        if self._index is None:
            self._index = get_default_index()
        return self._index

    def select(
        self,
        brightness: float,
        tolerance: float = DEFAULT_TOLERANCE,
        size: int = DEFAULT_PALETTE_SIZE,
    ) -> list[int]:
        """Return up to ``size`` saturated colors near ``brightness``.

        Args:
            brightness: Target perceived brightness; clamped to [0, 255] and
                truncated to an integer.
            tolerance: Accepted deviation in brightness levels, truncated to
                an integer. Must not be negative.
            size: Number of colors sampled before the saturation filter.
                Truncated to an integer; must be at least 1.

        Returns:
            list[int]: Color codes sorted by (hue, lightness, saturation).

        Raises:
            InvalidArgument: For non-numeric or non-finite arguments, a
                negative tolerance or a size below 1.
            InvariantViolation: If a level in the band has no colors.
        """
        brightness = _finite_number("brightness", brightness)
        tolerance = _finite_number("tolerance", tolerance)
        size = _finite_number("size", size)

        if tolerance < 0:
            raise InvalidArgument(f"tolerance must not be negative, got {tolerance}")
        size = int(size)
        if size < 1:
            raise InvalidArgument(f"size must be at least 1, got {size}")

        target = int(max(0, min(MAX_LEVEL, brightness)))
        spread = int(tolerance)
        low = max(0, target - spread)
        high = min(MAX_LEVEL, target + spread)

        candidates = self.index.band(low, high)
        self.rng.shuffle(candidates)

        hsl = self.cache.get
        sample = [int(code) for code in candidates[: min(size, len(candidates))]]
        vivid = [code for code in sample if hsl(code)[1] > SATURATION_THRESHOLD]
        vivid.sort(key=lambda code: self._sort_key(hsl(code)))
        return vivid

    @staticmethod
    def _sort_key(triple: tuple[float, float, float]) -> tuple[float, float, float]:
        h, s, lightness = triple
        return (h, lightness, s)


def select_palette(
    brightness: float,
    tolerance: float = DEFAULT_TOLERANCE,
    size: int = DEFAULT_PALETTE_SIZE,
    *,
    index: Optional[BrightnessIndex] = None,
    cache: Optional[HslCache] = None,
    rng: RandomSource = None,
) -> list[int]:
    """Functional form of ``PaletteSelector(index, cache, rng).select(...)``."""
    return PaletteSelector(index=index, cache=cache, rng=rng).select(
        brightness, tolerance, size
    )
