"""Precomputed partition of the RGB color space by perceived brightness.

The index classifies every 24-bit color once and groups the packed color
codes by brightness level. Lookups afterwards are slices of one sorted array,
so a palette request never touches the 16.7 million colors again.

Layout:
    - ``codes``: every classified color code, ordered by brightness level and,
      inside a level, by ascending code (red major, then green, then blue).
    - ``offsets``: 257 boundaries; the codes of level ``n`` are
      ``codes[offsets[n]:offsets[n + 1]]``.

Building the full index is the one expensive step (O(2^24)). It is an
explicit initialization: construct a ``BrightnessIndex`` yourself and pass it
around, or call ``build_default_index()`` at startup. ``get_default_index()``
builds lazily on first use otherwise, so the first palette request pays for
the build (a second or two with numpy).

Example:
    >>> index = BrightnessIndex.build(channel_values=range(0, 256, 51))
    >>> len(index)
    216
    >>> index.bucket_for(0).tolist()
    [0]
"""

import logging
import threading
import time
from collections.abc import Iterable
from typing import Optional

import numpy as np

from .brightness import LEVEL_COUNT, MAX_LEVEL, brightness_levels
from .errors import InvariantViolation

__all__ = [
    "BrightnessIndex",
    "build_default_index",
    "get_default_index",
    "reset_default_index",
]

logger = logging.getLogger(__name__)

_default_index: Optional["BrightnessIndex"] = None
_default_lock = threading.Lock()


class BrightnessIndex:
    """Immutable mapping from brightness level to the color codes at that level.

    Attributes:
        codes: Read-only ``uint32`` array of every indexed color code.
        offsets: Read-only ``int64`` array of 257 bucket boundaries.
    """

    def __init__(self, codes: np.ndarray, offsets: np.ndarray):
        codes = np.array(codes, dtype=np.uint32)
        offsets = np.array(offsets, dtype=np.int64)
        if offsets.shape != (LEVEL_COUNT + 1,):
            raise InvariantViolation(
                f"Expected {LEVEL_COUNT + 1} bucket offsets, got {offsets.shape[0]}"
            )
        if offsets[0] != 0 or offsets[-1] != codes.shape[0]:
            raise InvariantViolation("Bucket offsets do not cover the code array")
        if np.any(np.diff(offsets) < 0):
            raise InvariantViolation("Bucket offsets must be non-decreasing")

        codes.flags.writeable = False
        offsets.flags.writeable = False
        self.codes = codes
        self.offsets = offsets

    @classmethod
    def build(
        cls, channel_values: Optional[Iterable[int]] = None
    ) -> "BrightnessIndex":
        """Classify every RGB triple drawn from ``channel_values``.

        Args:
            channel_values: Channel values used for each of R, G and B.
                Defaults to ``range(256)``, i.e. the whole 24-bit color space.
                A smaller set gives a synthetic domain, which is convenient in
                tests; with it some levels may have no colors at all.

        Returns:
            BrightnessIndex: The finished, read-only index.
        """
        if channel_values is None:
            values = np.arange(256, dtype=np.uint32)
        else:
            values = np.unique(np.fromiter(channel_values, dtype=np.int64))
            if values.size == 0 or values[0] < 0 or values[-1] > 255:
                raise ValueError("Channel values must be a non-empty subset of 0..255")
            values = values.astype(np.uint32)

        n = values.size
        total = n ** 3
        logger.info("Building brightness index over %d colors", total)
        started = time.perf_counter()

        # One red slab at a time keeps the float temporaries at n^2 elements.
        g_grid, b_grid = np.meshgrid(values, values, indexing="ij")
        g_flat = g_grid.ravel()
        b_flat = b_grid.ravel()
        slab_codes = b_flat + (g_flat << 8)

        all_codes = np.empty(total, dtype=np.uint32)
        all_levels = np.empty(total, dtype=np.uint8)
        slab = n * n
        for i, r in enumerate(values):
            start = i * slab
            all_codes[start : start + slab] = slab_codes + (np.uint32(r) << 16)
            all_levels[start : start + slab] = brightness_levels(r, g_flat, b_flat)

        # A stable sort keeps codes in red/green/blue iteration order per level.
        order = np.argsort(all_levels, kind="stable")
        counts = np.bincount(all_levels, minlength=LEVEL_COUNT)
        offsets = np.zeros(LEVEL_COUNT + 1, dtype=np.int64)
        np.cumsum(counts, out=offsets[1:])

        index = cls(all_codes[order], offsets)
        logger.info(
            "Brightness index built: %d colors in %d levels (%.2fs)",
            total,
            int(np.count_nonzero(counts)),
            time.perf_counter() - started,
        )
        return index

    def __len__(self) -> int:
        return int(self.codes.shape[0])

    def __contains__(self, level: object) -> bool:
        if not isinstance(level, (int, np.integer)) or not 0 <= level <= MAX_LEVEL:
            return False
        return bool(self.offsets[level + 1] > self.offsets[level])

    def __repr__(self) -> str:
        return f"BrightnessIndex(colors={len(self)}, levels={len(self.levels())})"

    @property
    def counts(self) -> np.ndarray:
        """Number of codes in each of the 256 levels."""
        return np.diff(self.offsets)

    def levels(self) -> list[int]:
        """Levels that have at least one color, ascending."""
        return [int(level) for level in np.flatnonzero(self.counts)]

    def bucket_for(self, level: int) -> np.ndarray:
        """Return the codes at ``level`` as a read-only array.

        Raises:
            InvariantViolation: If ``level`` is outside [0, 255] or has no
                colors. With the full domain every level has colors, so this
                indicates a construction defect.
        """
        if not 0 <= level <= MAX_LEVEL:
            raise InvariantViolation(f"Brightness level {level} outside 0..{MAX_LEVEL}")
        start, stop = self.offsets[level], self.offsets[level + 1]
        if stop == start:
            raise InvariantViolation(f"No colors indexed for brightness level {level}")
        return self.codes[start:stop]

    def band(self, low: int, high: int) -> np.ndarray:
        """Concatenate the buckets for levels ``low`` through ``high`` inclusive.

        Levels appear in ascending order and every level must be populated.
        The result is a fresh, writable copy.
        """
        if low > high:
            raise InvariantViolation(f"Empty brightness band {low}..{high}")
        for level in range(low, high + 1):
            self.bucket_for(level)
        # Buckets are contiguous in ``codes``, so the band is one slice.
        return self.codes[self.offsets[low] : self.offsets[high + 1]].copy()


def build_default_index() -> BrightnessIndex:
    """Build (or return) the process-wide full-domain index.

    Call this during startup to pay the build cost eagerly.
    """
    global _default_index
    with _default_lock:
        if _default_index is None:
            _default_index = BrightnessIndex.build()
        return _default_index


def get_default_index() -> BrightnessIndex:
    """Return the process-wide index, building it on first use."""
    index = _default_index
    if index is None:
        index = build_default_index()
    return index


def reset_default_index() -> None:
    """Drop the process-wide index so the next use rebuilds it."""
    global _default_index
    with _default_lock:
        _default_index = None
