"""
Tactile Transduction Simulator

Educational model of the cutaneous touch pathway:
stimulus -> Meissner/Pacinian receptor -> receptor potential -> spikes
-> Aβ/Aδ/C conduction -> two-point discrimination.
Import individual stages or run the whole pipeline with simulate().
"""

# Base types and parameters
from .base import (
    DT_MS,
    PARAMETER_RANGES,
    ReceptorClass,
    FiberType,
    BodyRegion,
    StimulusParams,
    AdaptationParams,
    SpikeParams,
    ConductionParams,
    DiscriminationParams,
    SimulationParams,
    make_time_axis,
)
from .errors import TactileError, ConfigurationError

# Pipeline stages
from .receptors import (
    bandpass_gain,
    generate_stimulus,
    adaptation_envelope,
    ReceptorPotentialModel,
    receptor_potential,
)
from .spikes import (
    detect_spikes,
    SpikeDetector,
    interspike_intervals,
    firing_rate_hz,
)
from .conduction import (
    conduction_delay_ms,
    shift_spike_train,
    ConductionModel,
)
from .perception import (
    perceives_two_points,
    perception_label,
    TwoPointDiscriminator,
)

# Orchestration
from .simulation import SimulationResult, simulate
from .logging_config import setup_logging

# Visualization
from .visualization import plot_simulation_results, plot_region_thresholds

__version__ = "1.0.0"
__all__ = [
    # Base
    "DT_MS", "PARAMETER_RANGES", "ReceptorClass", "FiberType", "BodyRegion",
    "StimulusParams", "AdaptationParams", "SpikeParams", "ConductionParams",
    "DiscriminationParams", "SimulationParams", "make_time_axis",
    "TactileError", "ConfigurationError",
    # Stages
    "bandpass_gain", "generate_stimulus", "adaptation_envelope",
    "ReceptorPotentialModel", "receptor_potential",
    "detect_spikes", "SpikeDetector", "interspike_intervals", "firing_rate_hz",
    "conduction_delay_ms", "shift_spike_train", "ConductionModel",
    "perceives_two_points", "perception_label", "TwoPointDiscriminator",
    # Orchestration
    "SimulationResult", "simulate", "setup_logging",
    # Visualization
    "plot_simulation_results", "plot_region_thresholds",
]
