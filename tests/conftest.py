"""Shared fixtures for SSTV encoder tests."""

import numpy as np
import pytest

from sstv_encoder.constants import BLACK_FREQ, PIXEL_BANDWIDTH
from sstv_encoder.writer import AudioFormat

# Tones written by every encoder before the first scan line:
# 3 header tones + start bit + 7 data bits + parity + stop bit
PREAMBLE_TONES = 13


def pixel_freqs(values_8bit, scale=256.0):
    """Tone frequencies for 8-bit channel values."""
    return BLACK_FREQ + np.asarray(values_8bit, dtype=np.float64) / scale * PIXEL_BANDWIDTH


@pytest.fixture
def low_rate():
    """8 kHz output keeps full-size encodes fast."""
    return AudioFormat(sample_rate=8000)


@pytest.fixture
def small_frame():
    """Small 4x2 RGB frame for structure tests."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, (2, 4, 3), dtype=np.uint8)


@pytest.fixture
def random_frame():
    """Random 32x16 RGB frame."""
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, (16, 32, 3), dtype=np.uint8)
