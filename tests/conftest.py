"""Test configuration and fixtures for brightpal tests."""

import numpy as np
import pytest
from hypothesis import settings

from brightpal.brightness_index import BrightnessIndex, reset_default_index
from brightpal.hsl_cache import HslCache

# Configure hypothesis settings for faster tests
settings.register_profile("fast", max_examples=50, deadline=None)
settings.load_profile("fast")

# Channel values for a small synthetic domain: 6^3 = 216 colors
SYNTHETIC_CHANNELS = (0, 51, 102, 153, 204, 255)


@pytest.fixture(scope="session")
def full_index() -> BrightnessIndex:
    """The full 24-bit brightness index, built once per test session."""
    return BrightnessIndex.build()


@pytest.fixture
def small_index() -> BrightnessIndex:
    """Index over a 6-level-per-channel synthetic domain."""
    return BrightnessIndex.build(channel_values=SYNTHETIC_CHANNELS)


@pytest.fixture
def cache() -> HslCache:
    """A fresh, private HSL cache."""
    return HslCache()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible sampling."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_codes() -> list[tuple[int, tuple[int, int, int]]]:
    """Color codes with their expected 8-bit channels."""
    return [
        (0x000000, (0, 0, 0)),        # Black
        (0xFFFFFF, (255, 255, 255)),  # White
        (0xFF0000, (255, 0, 0)),      # Red
        (0x00FF00, (0, 255, 0)),      # Green
        (0x0000FF, (0, 0, 255)),      # Blue
        (0x808080, (128, 128, 128)),  # Gray
        (0x123456, (0x12, 0x34, 0x56)),
        (0xFEDCBA, (0xFE, 0xDC, 0xBA)),
    ]


@pytest.fixture(autouse=True)
def _isolate_default_index():
    """Never let a test leave a half-configured process-wide index behind."""
    yield
    reset_default_index()


class PaletteTestHelpers:
    """Helper methods for checking palette invariants."""

    @staticmethod
    def sort_key(hsl: tuple[float, float, float]) -> tuple[float, float, float]:
        h, s, lightness = hsl
        return (h, lightness, s)

    @classmethod
    def is_sorted(cls, palette: list[int], hsl) -> bool:
        keys = [cls.sort_key(hsl(code)) for code in palette]
        return all(a <= b for a, b in zip(keys, keys[1:]))


@pytest.fixture
def palette_helpers() -> PaletteTestHelpers:
    """Provide helper methods for palette testing."""
    return PaletteTestHelpers()
