"""Memoized HSL lookup for color codes.

Color codes are immutable values, so their HSL triples never change. The
cache keeps every triple it has computed for as long as it lives; the key
domain is bounded by the 2^24 possible codes.

Two threads missing on the same code both compute it and store identical
values, which wastes work but never corrupts an entry, so lookups take no
lock. Only creating the process-wide cache is guarded.
"""

import logging
import threading
from collections.abc import Callable
from typing import Optional

from .color_utils import HSL, code_to_hsl

__all__ = ["HslCache", "default_cache", "hsl"]

logger = logging.getLogger(__name__)


class HslCache:
    """Get-or-compute cache from color code to HSL triple.

    Attributes:
        convert: Function computing the HSL triple of a code on a miss.
        hits: Lookups served from the cache.
        misses: Lookups that called ``convert``.
    """

    def __init__(self, convert: Callable[[int], HSL] = code_to_hsl):
        self.convert = convert
        self.hits = 0
        self.misses = 0
        self._entries: dict[int, HSL] = {}

    def get(self, code: int) -> HSL:
        """Return the HSL triple for ``code``, computing it on first request."""
        try:
            value = self._entries[code]
        except KeyError:
            self.misses += 1
            value = self.convert(code)
            self._entries[code] = value
            return value
        self.hits += 1
        return value

    __call__ = get

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Forget every entry and reset the counters."""
        logger.debug(
            "Clearing HSL cache: %d entries, %d hits, %d misses",
            len(self._entries),
            self.hits,
            self.misses,
        )
        self._entries.clear()
        self.hits = 0
        self.misses = 0


_global_cache: Optional[HslCache] = None
_global_lock = threading.Lock()


def default_cache() -> HslCache:
    """Get or create the process-wide cache."""
    global _global_cache
    cache = _global_cache
    if cache is None:
        with _global_lock:
            if _global_cache is None:
                _global_cache = HslCache()
            cache = _global_cache
    return cache


def hsl(code: int) -> HSL:
    """Memoized HSL triple of ``code`` using the process-wide cache."""
    return default_cache().get(int(code))
