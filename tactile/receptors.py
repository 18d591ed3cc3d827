"""
Receptor models: mechanical stimulus, bandpass gain and the adapting receptor potential.

  - bandpass_gain: Static frequency tuning of a receptor class
  - generate_stimulus: Continuous sinusoidal indentation on the time axis
  - adaptation_envelope: Rapid adaptation exp(-t/tau)
  - ReceptorPotentialModel: stimulus x gain x adaptation

Both receptor classes are rapidly adapting (phasic): the potential envelope
decays towards zero even while the stimulus continues. Gain depends only on
frequency and adaptation only on time; the model is their product.
"""

import logging
from typing import Optional

import numpy as np

from .base import AdaptationParams, ReceptorClass, StimulusParams

logger = logging.getLogger(__name__)


# ============================================================================
# BANDPASS GAIN
# ============================================================================

def bandpass_gain(frequency: float, low: float, high: float) -> float:
    """
    Dimensionless gain in [0, 1] for a stimulus frequency and a passband (Hz).

    Linear ramp f/low below the band, reciprocal roll-off high/f above it, and
    full pass inside [low, high]. Both formulas give 1 at the band edges.
    """
    if frequency <= 0:
        return 0.0
    if frequency < low:
        return max(0.0, frequency / low)
    if frequency > high:
        return max(0.0, high / frequency)
    return 1.0


# ============================================================================
# STIMULUS
# ============================================================================

def generate_stimulus(time: np.ndarray, stimulus: StimulusParams) -> np.ndarray:
    """
    Sampled stimulus amplitude * sin(2*pi*f*t).

    Time is in ms, so the frequency is converted to cycles per ms. A disabled
    stimulus is a flat zero signal whatever the amplitude and frequency.
    """
    time = np.asarray(time, dtype=float)
    if not stimulus.enabled:
        return np.zeros_like(time)
    cycles_per_ms = stimulus.frequency / 1000.0
    return stimulus.amplitude * np.sin(2.0 * np.pi * cycles_per_ms * time)


# ============================================================================
# RECEPTOR POTENTIAL
# ============================================================================

def adaptation_envelope(time: np.ndarray, tau: float) -> np.ndarray:
    """Monotonic decay from 1 at t=0 towards 0."""
    return np.exp(-np.asarray(time, dtype=float) / tau)


class ReceptorPotentialModel:
    """
    Rapidly adapting mechanoreceptor.

    vrec(t) = stim(t) * gain(f) * exp(-t/tau), with the gain computed once per
    run from the receptor passband.
    """

    def __init__(self, receptor: ReceptorClass = ReceptorClass.MEISSNER,
                 adaptation: Optional[AdaptationParams] = None):
        self.receptor = ReceptorClass.coerce(receptor)
        self.adaptation = adaptation or AdaptationParams()

    def gain(self, frequency: float) -> float:
        return bandpass_gain(frequency, self.receptor.low, self.receptor.high)

    def respond(self, time: np.ndarray, stim: np.ndarray, frequency: float) -> np.ndarray:
        """Receptor potential for a sampled stimulus of the given frequency."""
        time = np.asarray(time, dtype=float)
        stim = np.asarray(stim, dtype=float)
        if time.shape != stim.shape:
            raise ValueError(
                f"time and stim must have equal length, got {time.shape} and {stim.shape}"
            )

        g = self.gain(frequency)
        logger.debug("%s gain at %.1f Hz: %.3f", self.receptor.label, frequency, g)
        return stim * g * adaptation_envelope(time, self.adaptation.tau)


def receptor_potential(time: np.ndarray, stim: np.ndarray, frequency: float,
                       receptor: ReceptorClass, adaptation: AdaptationParams) -> np.ndarray:
    """Function form of ReceptorPotentialModel.respond."""
    return ReceptorPotentialModel(receptor, adaptation).respond(time, stim, frequency)
