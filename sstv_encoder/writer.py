"""Tone sequencer: turns tone requests into one sample buffer."""

from dataclasses import dataclass

import numpy as np

from .constants import (
    SAMPLE_RATE, NUM_CHANNELS, BIT_DEPTH, peak_amplitude,
    HEADER_FREQ, HEADER_LENGTH, HEADER_BREAK_FREQ, HEADER_BREAK_LENGTH,
    VIS_START_FREQ, VIS_BIT_LENGTH, VIS_TRUE_FREQ, VIS_FALSE_FREQ,
    VIS_DATA_BITS, VIS_MAX,
    BLACK_FREQ, PIXEL_BANDWIDTH,
)
from .oscillator import Oscillator


@dataclass(frozen=True)
class AudioFormat:
    """Output format of an encoded signal.

    Attributes:
        sample_rate: Samples per second.
        num_channels: Channel count; SSTV is mono so only 1 is accepted.
        bit_depth: Signed PCM depth the amplitude is scaled to.
    """
    sample_rate: int = SAMPLE_RATE
    num_channels: int = NUM_CHANNELS
    bit_depth: int = BIT_DEPTH

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")
        if self.num_channels != 1:
            raise ValueError(f"SSTV audio is mono, got {self.num_channels} channels")
        if self.bit_depth not in (8, 16, 24, 32):
            raise ValueError(f"Unsupported bit depth: {self.bit_depth}")

    @property
    def peak_amplitude(self):
        return peak_amplitude(self.bit_depth)


@dataclass(frozen=True)
class SampleBuffer:
    """The finished output of one encode call.

    Attributes:
        data: Read-only 1D float64 samples in [-peak, +peak].
        format: AudioFormat the samples were rendered at.
        frequencies: Frequency of every emitted tone, in order.
        sample_counts: Samples contributed by each tone.
    """
    data: np.ndarray
    format: AudioFormat
    frequencies: np.ndarray
    sample_counts: np.ndarray

    @property
    def sample_rate(self):
        return self.format.sample_rate

    @property
    def duration(self):
        """Signal length in seconds."""
        return len(self.data) / self.format.sample_rate

    def __len__(self):
        return len(self.data)

    def as_int(self):
        """Samples as signed integer PCM at the format's bit depth."""
        peak = self.format.peak_amplitude
        dtype = np.int16 if self.format.bit_depth <= 16 else np.int32
        return np.clip(np.round(self.data), -peak - 1, peak).astype(dtype)


def vis_parity(code):
    """Even-parity bit for a 7-bit VIS code.

    True when the data bits hold an odd number of ones, so the eight bits
    sent together always carry an even count.
    """
    ones = 0
    for i in range(VIS_DATA_BITS):
        ones += (code >> i) & 1
    return ones % 2 == 1


class ToneWriter:
    """Accumulates tones into a single sample buffer.

    One writer owns one oscillator and is used for exactly one encode.

    Args:
        audio_format: Output format (defaults to 44.1 kHz, 16-bit mono).
    """

    def __init__(self, audio_format=None):
        self.format = audio_format or AudioFormat()
        self.oscillator = Oscillator(self.format.sample_rate,
                                     float(self.format.peak_amplitude))
        self._chunks = []
        self._freqs = []
        self._counts = []

    def _append(self, frequencies, durations_ms):
        freqs = np.atleast_1d(np.asarray(frequencies, dtype=np.float64))
        samples, counts = self.oscillator.tones(freqs, durations_ms)
        self._chunks.append(samples)
        self._freqs.append(freqs)
        self._counts.append(counts)

    def write(self, frequency, duration_ms):
        """Append one tone of `frequency` Hz lasting `duration_ms`."""
        self._append(frequency, duration_ms)

    def write_bit(self, value):
        """Append one VIS bit."""
        self.write(VIS_TRUE_FREQ if value else VIS_FALSE_FREQ, VIS_BIT_LENGTH)

    def write_header(self):
        """Append the calibration header: leader, break, leader."""
        self._append([HEADER_FREQ, HEADER_BREAK_FREQ, HEADER_FREQ],
                     [HEADER_LENGTH, HEADER_BREAK_LENGTH, HEADER_LENGTH])

    def write_vis(self, code):
        """Append the VIS code: start bit, 7 data bits LSB first, parity, stop bit."""
        if not 0 <= code <= VIS_MAX:
            raise ValueError(f"VIS code must be in 0-{VIS_MAX}, got {code}")
        self.write(VIS_START_FREQ, VIS_BIT_LENGTH)
        for i in range(VIS_DATA_BITS):
            self.write_bit((code >> i) & 1)
        self.write_bit(vis_parity(code))
        self.write(VIS_START_FREQ, VIS_BIT_LENGTH)

    def write_value(self, value, duration_ms):
        """Append a pixel tone for an intensity in [0, 1] (1500-2300 Hz)."""
        self.write(BLACK_FREQ + value * PIXEL_BANDWIDTH, duration_ms)

    def write_values(self, values, duration_ms):
        """Append one pixel tone per intensity, each `duration_ms` long."""
        freqs = BLACK_FREQ + np.asarray(values, dtype=np.float64) * PIXEL_BANDWIDTH
        self._append(freqs.ravel(), duration_ms)

    def finish(self):
        """Assemble everything written so far into a SampleBuffer."""
        def join(parts, dtype):
            if not parts:
                return np.zeros(0, dtype=dtype)
            out = np.concatenate(parts).astype(dtype, copy=False)
            out.flags.writeable = False
            return out

        return SampleBuffer(
            data=join(self._chunks, np.float64),
            format=self.format,
            frequencies=join(self._freqs, np.float64),
            sample_counts=join(self._counts, np.int64),
        )
