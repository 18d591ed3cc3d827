"""
Tests for bandpass gain, stimulus generation and the receptor potential.
"""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tactile.base import (
    AdaptationParams,
    ReceptorClass,
    StimulusParams,
    make_time_axis,
)
from tactile.receptors import (
    ReceptorPotentialModel,
    adaptation_envelope,
    bandpass_gain,
    generate_stimulus,
    receptor_potential,
)


class TestBandpassGain:
    """Test suite for the static receptor frequency tuning."""

    @pytest.mark.parametrize("freq", [2.0, 2.5, 10.0, 39.9, 40.0])
    def test_full_pass_inside_band(self, freq):
        """Test that every frequency in [low, high] passes with gain 1."""
        assert bandpass_gain(freq, 2.0, 40.0) == 1.0

    @pytest.mark.parametrize("freq", [0.0, -1.0, -500.0])
    def test_non_positive_frequency_is_zero(self, freq):
        """Test that zero and negative frequencies give zero gain, not NaN."""
        gain = bandpass_gain(freq, 2.0, 40.0)
        assert gain == 0.0
        assert not np.isnan(gain)

    def test_ramp_below_band(self):
        """Test the linear ramp f/low below the passband."""
        assert bandpass_gain(1.0, 2.0, 40.0) == pytest.approx(0.5)
        assert bandpass_gain(10.0, 40.0, 500.0) == pytest.approx(0.25)

    def test_rolloff_above_band(self):
        """Test the reciprocal roll-off high/f above the passband."""
        assert bandpass_gain(80.0, 2.0, 40.0) == pytest.approx(0.5)
        assert bandpass_gain(1000.0, 40.0, 500.0) == pytest.approx(0.5)

    def test_continuous_at_band_edges(self):
        """Test that both formulas meet at 1 on the band edges."""
        eps = 1e-9
        assert bandpass_gain(2.0 - eps, 2.0, 40.0) == pytest.approx(1.0)
        assert bandpass_gain(40.0 + eps, 2.0, 40.0) == pytest.approx(1.0)

    def test_gain_within_unit_interval(self):
        """Test that gain stays in [0, 1] across the frequency range."""
        for freq in np.linspace(-10, 2000, 301):
            for receptor in ReceptorClass:
                gain = bandpass_gain(freq, receptor.low, receptor.high)
                assert 0.0 <= gain <= 1.0


class TestStimulus:
    """Test suite for the sinusoidal stimulus generator."""

    def test_disabled_stimulus_is_flat_zero(self):
        """Test that a disabled stimulus is all zeros whatever amplitude and frequency."""
        time = make_time_axis(500.0)
        stim = generate_stimulus(time, StimulusParams(frequency=37.0, amplitude=2.0, enabled=False))

        assert stim.shape == time.shape
        assert np.all(stim == 0.0), "Disabled stimulus should be a flat zero signal"

    def test_frequency_in_cycles_per_ms(self):
        """Test that 10 Hz completes one cycle every 100 ms."""
        time = make_time_axis(200.0)
        stim = generate_stimulus(time, StimulusParams(frequency=10.0, amplitude=1.0))

        assert stim[0] == 0.0
        assert stim[25] == pytest.approx(1.0)
        assert stim[75] == pytest.approx(-1.0)
        assert stim[100] == pytest.approx(0.0, abs=1e-12)
        assert stim[125] == pytest.approx(1.0)

    def test_amplitude_scales_stimulus(self):
        """Test that amplitude multiplies the waveform."""
        time = make_time_axis(100.0)
        unit = generate_stimulus(time, StimulusParams(frequency=10.0, amplitude=1.0))
        double = generate_stimulus(time, StimulusParams(frequency=10.0, amplitude=2.0))

        np.testing.assert_allclose(double, 2.0 * unit)
        assert np.max(np.abs(double)) <= 2.0 + 1e-12


class TestReceptorPotential:
    """Test suite for the rapidly adapting receptor potential."""

    def test_adaptation_starts_at_one_and_decays(self):
        """Test that exp(-t/tau) is 1 at t=0 and monotonically decreasing."""
        time = make_time_axis(1000.0)
        env = adaptation_envelope(time, 120.0)

        assert env[0] == 1.0
        assert np.all(np.diff(env) <= 0), "Adaptation must never increase"
        assert env[120] == pytest.approx(np.exp(-1.0))

    def test_meissner_in_band_potential(self):
        """Test vrec = sin(2*pi*0.01*t) * exp(-t/120) for 10 Hz on a Meissner corpuscle."""
        time = make_time_axis(500.0)
        stim = generate_stimulus(time, StimulusParams(frequency=10.0, amplitude=1.0))
        vrec = receptor_potential(time, stim, 10.0, ReceptorClass.MEISSNER,
                                  AdaptationParams(tau=120.0))

        expected = np.sin(2 * np.pi * 0.01 * time) * np.exp(-time / 120.0)
        np.testing.assert_allclose(vrec, expected, atol=1e-12)

    def test_pacinian_attenuates_low_frequency(self):
        """Test that a 10 Hz stimulus on a Pacinian corpuscle is scaled by 10/40."""
        model = ReceptorPotentialModel(ReceptorClass.PACINIAN, AdaptationParams(tau=120.0))
        time = make_time_axis(200.0)
        stim = generate_stimulus(time, StimulusParams(frequency=10.0))

        assert model.gain(10.0) == pytest.approx(0.25)
        meissner = ReceptorPotentialModel(ReceptorClass.MEISSNER, AdaptationParams(tau=120.0))
        np.testing.assert_allclose(model.respond(time, stim, 10.0),
                                   0.25 * meissner.respond(time, stim, 10.0))

    def test_envelope_never_exceeds_adaptation(self):
        """Test that |vrec| is bounded by amplitude * gain * exp(-t/tau)."""
        time = make_time_axis(800.0)
        stim = generate_stimulus(time, StimulusParams(frequency=250.0, amplitude=1.5))
        model = ReceptorPotentialModel('Pacinian', AdaptationParams(tau=80.0))
        vrec = model.respond(time, stim, 250.0)

        bound = 1.5 * model.gain(250.0) * adaptation_envelope(time, 80.0)
        assert np.all(np.abs(vrec) <= bound + 1e-12)

    def test_length_mismatch_rejected(self):
        """Test that time and stimulus must be parallel sequences."""
        model = ReceptorPotentialModel()
        with pytest.raises(ValueError):
            model.respond(np.arange(10.0), np.zeros(9), 10.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
