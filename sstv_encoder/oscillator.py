"""Phase-continuous sine oscillator."""

import math

import numpy as np

_TWO_PI = 2.0 * math.pi


def sample_count(duration_ms, sample_rate):
    """Number of samples in a tone of `duration_ms`, rounded half up.

    Zero or negative durations give zero samples.
    """
    return max(0, int(math.floor(duration_ms / 1000.0 * sample_rate + 0.5)))


class Oscillator:
    """Stateful sine generator whose phase carries across calls.

    Consecutive tones join without a discontinuity because the phase is
    never reset; it is only reduced modulo 2*pi between calls.

    Args:
        sample_rate: Samples per second.
        amplitude: Peak output value.
    """

    def __init__(self, sample_rate, amplitude):
        self.sample_rate = sample_rate
        self.amplitude = amplitude
        self.phase = 0.0

    def sample(self, frequency):
        """Advance by one sample of `frequency` and return its value."""
        self.phase = math.fmod(self.phase + frequency * _TWO_PI / self.sample_rate,
                               _TWO_PI)
        return math.sin(self.phase) * self.amplitude

    def signal(self, frequency, duration_ms):
        """Generate `duration_ms` of a constant tone.

        Returns:
            1D float64 array of round(duration_ms / 1000 * sample_rate)
            samples.
        """
        samples, _ = self.tones([frequency], [duration_ms])
        return samples

    def tones(self, frequencies, durations_ms):
        """Generate a run of tones back to back.

        Equivalent to calling signal() once per (frequency, duration) pair,
        but computed in one vectorized pass.

        Args:
            frequencies: Sequence of tone frequencies (Hz).
            durations_ms: Matching tone lengths (ms), or a single length
                shared by every tone.

        Returns:
            Tuple of (samples, counts): the 1D float64 sample array and the
            number of samples each tone contributed.
        """
        freqs = np.atleast_1d(np.asarray(frequencies, dtype=np.float64))
        lengths = np.broadcast_to(np.asarray(durations_ms, dtype=np.float64),
                                  freqs.shape)
        counts = np.floor(lengths / 1000.0 * self.sample_rate + 0.5)
        counts = np.maximum(counts, 0).astype(np.int64)

        total = int(counts.sum())
        if total == 0:
            return np.zeros(0, dtype=np.float64), counts

        step = np.repeat(freqs * (_TWO_PI / self.sample_rate), counts)
        phases = self.phase + np.cumsum(step)
        self.phase = math.fmod(float(phases[-1]), _TWO_PI)
        return np.sin(phases) * self.amplitude, counts
