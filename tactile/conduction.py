"""
Peripheral nerve conduction from the skin to the spinal cord.

The delay is distance / velocity for the selected fiber type; arriving spikes
are the local spike train translated by that delay (no jitter, no conduction
failure).

  Aβ  50 m/s   touch, vibration
  Aδ  15 m/s   fast pain, cold
  C   1.5 m/s  slow pain, warmth
"""

import logging
import math
from typing import Sequence

import numpy as np

from .base import ConductionParams, FiberType, require_finite, require_positive
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def conduction_delay_ms(fiber: FiberType, distance_cm: float) -> float:
    """
    Propagation delay (ms) over distance_cm of the given fiber.

    (distance_cm / 100) m / velocity m/s * 1000 ms/s, folded into a single
    division so that e.g. 60 cm of C fiber is exactly 400 ms.
    """
    fiber = FiberType.coerce(fiber)
    require_positive(distance_cm, 'distance_cm')
    delay = distance_cm * 10.0 / fiber.velocity
    if not math.isfinite(delay):
        raise ConfigurationError(f"distance_cm {distance_cm} gives a non-finite delay")
    return delay


def shift_spike_train(spikes: Sequence[float], delay_ms: float) -> np.ndarray:
    """Translate every spike by delay_ms, keeping order and spacing."""
    require_finite(delay_ms, 'delay_ms')
    return np.asarray(spikes, dtype=float) + delay_ms


class ConductionModel:
    """
    Fixed-delay axon for one fiber type and path length.

    Unknown fiber types and non-positive distances are rejected here, at
    construction, rather than when spikes are conducted.
    """

    def __init__(self, fiber: FiberType = FiberType.A_BETA, distance_cm: float = 60.0):
        self.fiber = FiberType.coerce(fiber)
        self.distance_cm = distance_cm
        self.delay_ms = conduction_delay_ms(self.fiber, distance_cm)

    @classmethod
    def from_params(cls, params: ConductionParams) -> 'ConductionModel':
        return cls(params.fiber, params.distance_cm)

    @property
    def velocity(self) -> float:
        return self.fiber.velocity

    def conduct(self, spikes: Sequence[float]) -> np.ndarray:
        """Arrival times (ms) of the local spikes at the far end of the path."""
        arrived = shift_spike_train(spikes, self.delay_ms)
        logger.debug("%s fiber, %.1f cm: %d spikes delayed by %.1f ms",
                     self.fiber.label, self.distance_cm, len(arrived), self.delay_ms)
        return arrived
