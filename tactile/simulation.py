"""
Simulation pipeline: one parameter snapshot in, one result snapshot out.

    time axis -> stimulus -> receptor potential -> local spikes
              -> conduction delay -> arrived spikes
    two-point decision (independent of the waveform pipeline)

simulate() validates the snapshot before computing anything and builds every
output array fresh, so the same parameters always give identical results and
an invalid snapshot never yields a partial result.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from .base import SimulationParams, make_time_axis
from .conduction import ConductionModel
from .perception import TwoPointDiscriminator, perception_label
from .receptors import ReceptorPotentialModel, generate_stimulus
from .spikes import SpikeDetector, firing_rate_hz

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outputs of one run, consumed by the presentation layer."""
    time: np.ndarray                # Sample times (ms)
    stim: np.ndarray                # Mechanical stimulus
    vrec: np.ndarray                # Receptor potential
    spikes_local: np.ndarray        # Spike times at the receptor ending (ms)
    spikes_arrived: np.ndarray      # Spike times at the spinal cord (ms)
    conduction_delay_ms: float
    two_point_perceived: bool
    gain: float                     # Bandpass gain used for vrec
    params: SimulationParams

    @property
    def time_axis(self) -> np.ndarray:
        return self.time

    def to_dict(self) -> Dict[str, Any]:
        """Plain lists and scalars for a renderer."""
        return {
            'time_axis': self.time.tolist(),
            'stim': self.stim.tolist(),
            'vrec': self.vrec.tolist(),
            'spikes_local': self.spikes_local.tolist(),
            'spikes_arrived': self.spikes_arrived.tolist(),
            'conduction_delay_ms': float(self.conduction_delay_ms),
            'two_point_perceived': bool(self.two_point_perceived),
        }

    def summary(self) -> str:
        p = self.params
        region = p.discrimination.region
        lines = [
            f"Receptor: {p.receptor.label} {p.receptor.low:g}-{p.receptor.high:g} Hz, "
            f"stimulus {p.stimulus.frequency:g} Hz, gain {self.gain:.3f}",
            f"Local spikes: {len(self.spikes_local)} "
            f"({firing_rate_hz(self.spikes_local, p.duration):.1f} Hz)",
            f"Conduction: {p.conduction.fiber.label} ({p.conduction.fiber.velocity:g} m/s), "
            f"{p.conduction.distance_cm:g} cm, delay ≈ {self.conduction_delay_ms:.1f} ms",
            f"Two-point ({region.label}, threshold {region.threshold_mm:g} mm, "
            f"separation {p.discrimination.separation_mm:g} mm): "
            f"{perception_label(self.two_point_perceived)}",
        ]
        return '\n'.join(lines)


def simulate(params: Optional[SimulationParams] = None) -> SimulationResult:
    """Run the full pipeline for one parameter snapshot."""
    params = params or SimulationParams()
    params.validate()

    time = make_time_axis(params.duration, params.dt)
    stim = generate_stimulus(time, params.stimulus)

    receptor = ReceptorPotentialModel(params.receptor, params.adaptation)
    gain = receptor.gain(params.stimulus.frequency)
    vrec = receptor.respond(time, stim, params.stimulus.frequency)

    spikes_local = SpikeDetector(params.spike).detect(time, vrec)

    axon = ConductionModel.from_params(params.conduction)
    spikes_arrived = axon.conduct(spikes_local)

    discriminator = TwoPointDiscriminator.from_params(params.discrimination)
    perceived = discriminator.perceives(params.discrimination.separation_mm)

    logger.info("Simulated %g ms: %d spikes, delay %.1f ms, %s",
                params.duration, len(spikes_local), axon.delay_ms,
                perception_label(perceived))

    return SimulationResult(
        time=time,
        stim=stim,
        vrec=vrec,
        spikes_local=spikes_local,
        spikes_arrived=spikes_arrived,
        conduction_delay_ms=axon.delay_ms,
        two_point_perceived=perceived,
        gain=gain,
        params=copy.deepcopy(params),
    )
