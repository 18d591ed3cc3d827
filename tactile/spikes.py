"""
Spike generation from the receptor potential.

Edge-triggered threshold detector with an absolute refractory period. There is
no membrane integration beyond the supplied receptor potential: a spike is the
sample at which the potential rises through theta.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .base import SpikeParams

logger = logging.getLogger(__name__)


def detect_spikes(time: Sequence[float], vrec: Sequence[float],
                  threshold: float, refractory_period: float) -> np.ndarray:
    """
    Spike times (ms) at rising-edge crossings vrec[i-1] < theta <= vrec[i].

    A crossing is kept only if at least refractory_period has passed since the
    last kept spike; suppressed crossings do not restart the refractory window.
    Index 0 never spikes. The result is strictly increasing.
    """
    time = np.asarray(time, dtype=float)
    vrec = np.asarray(vrec, dtype=float)
    if time.shape != vrec.shape:
        raise ValueError(
            f"time and vrec must have equal length, got {time.shape} and {vrec.shape}"
        )

    # Candidate samples i >= 1 where the potential rises through threshold
    rising = np.flatnonzero((vrec[:-1] < threshold) & (vrec[1:] >= threshold)) + 1

    spikes = []
    last_spike_time = -np.inf
    for i in rising:
        t = time[i]
        if t - last_spike_time >= refractory_period:
            spikes.append(t)
            last_spike_time = t

    if len(spikes) < len(rising):
        logger.debug("Refractory period masked %d of %d crossings",
                     len(rising) - len(spikes), len(rising))
    return np.array(spikes, dtype=float)


class SpikeDetector:
    """Threshold detector bound to one set of spike parameters."""

    def __init__(self, params: Optional[SpikeParams] = None):
        self.params = params or SpikeParams()

    def detect(self, time: Sequence[float], vrec: Sequence[float]) -> np.ndarray:
        return detect_spikes(time, vrec, self.params.threshold,
                             self.params.refractory_period)


# ============================================================================
# SPIKE TRAIN STATISTICS
# ============================================================================

def interspike_intervals(spikes: Sequence[float]) -> np.ndarray:
    """Differences between consecutive spike times (ms)."""
    return np.diff(np.asarray(spikes, dtype=float))


def firing_rate_hz(spikes: Sequence[float], duration: float) -> float:
    """Mean firing rate over a window of `duration` ms."""
    if duration <= 0:
        return 0.0
    return len(spikes) / (duration / 1000.0)
