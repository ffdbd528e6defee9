"""Tests for sstv_encoder.oscillator."""

import math

import numpy as np
import pytest

from sstv_encoder.oscillator import Oscillator, sample_count


class TestSampleCount:
    def test_exact(self):
        assert sample_count(10, 44100) == 441

    def test_rounds_half_up(self):
        assert sample_count(1.5, 1000) == 2
        assert sample_count(2.5, 1000) == 3

    def test_rounds_down(self):
        assert sample_count(0.4576, 44100) == 20

    def test_zero_and_negative(self):
        assert sample_count(0, 44100) == 0
        assert sample_count(-5, 44100) == 0


class TestSample:
    def test_first_sample(self):
        osc = Oscillator(8000, 100.0)
        assert osc.sample(1000) == pytest.approx(math.sin(2 * math.pi / 8) * 100.0)

    def test_advances_phase(self):
        osc = Oscillator(8000, 1.0)
        osc.sample(1000)
        osc.sample(1000)
        assert osc.phase == pytest.approx(2 * 2 * math.pi / 8)

    def test_matches_signal(self):
        a = Oscillator(1000, 1.0)
        b = Oscillator(1000, 1.0)
        values = [a.sample(123.0) for _ in range(3)]
        np.testing.assert_allclose(values, b.signal(123.0, 3), atol=1e-9)


class TestSignal:
    def test_length(self):
        osc = Oscillator(44100, 1.0)
        assert len(osc.signal(1000, 10)) == 441

    def test_empty_for_zero_duration(self):
        osc = Oscillator(44100, 1.0)
        assert len(osc.signal(1000, 0)) == 0
        assert len(osc.signal(1000, -1)) == 0
        assert osc.phase == 0.0

    def test_amplitude(self):
        osc = Oscillator(44100, 32767.0)
        sig = osc.signal(1000, 50)
        assert np.max(np.abs(sig)) <= 32767.0
        assert np.max(sig) > 32700

    def test_dtype(self):
        assert Oscillator(8000, 1.0).signal(1500, 5).dtype == np.float64

    def test_phase_continuity(self):
        sr, amp = 44100, 32767.0
        osc = Oscillator(sr, amp)
        first = osc.signal(1200, 7.3)
        end_phase = osc.phase
        second = osc.signal(2300, 5)

        expected = math.sin(end_phase + 2300 * 2 * math.pi / sr) * amp
        assert second[0] == pytest.approx(expected, abs=1e-6)
        # a phase reset would restart the second tone at sin(step)
        reset = math.sin(2300 * 2 * math.pi / sr) * amp
        assert abs(second[0] - reset) > 1.0
        assert len(first) == 322

    def test_phase_stays_wrapped(self):
        osc = Oscillator(44100, 1.0)
        osc.signal(2300, 2000)
        assert 0.0 <= osc.phase < 2 * math.pi


class TestTones:
    def test_counts(self):
        osc = Oscillator(1000, 1.0)
        samples, counts = osc.tones([1000, 1500, 2000], [3, 4.5, 0])
        np.testing.assert_array_equal(counts, [3, 5, 0])
        assert len(samples) == 8

    def test_shared_duration(self):
        osc = Oscillator(1000, 1.0)
        _, counts = osc.tones([1500, 1600, 1700, 1800], 2)
        np.testing.assert_array_equal(counts, [2, 2, 2, 2])

    def test_equals_sequential_signals(self):
        a = Oscillator(44100, 32767.0)
        b = Oscillator(44100, 32767.0)
        freqs = [1900, 1200, 1500, 2300, 1100]
        lengths = [3.0, 0.572, 0.4576, 9.0, 1.2]

        batched, _ = a.tones(freqs, lengths)
        sequential = np.concatenate([b.signal(f, d) for f, d in zip(freqs, lengths)])

        np.testing.assert_allclose(batched, sequential, atol=1e-6)
        assert a.phase == pytest.approx(b.phase)

    def test_all_empty(self):
        osc = Oscillator(1000, 1.0)
        samples, counts = osc.tones([1000, 2000], [0, 0])
        assert len(samples) == 0
        assert counts.sum() == 0
