"""
Shared constants, closed variant tables, parameter dataclasses and the time axis.

All parameter dataclasses and lookup tables used across the package.

Table values are the simplified teaching values of the simulator, chosen from
textbook ranges:
  - Meissner corpuscles: 2-40 Hz passband (flutter / light touch)
  - Pacinian corpuscles: 40-500 Hz passband (vibration)
  - Conduction velocity: Aβ 33-75 m/s, Aδ 5-30 m/s, C 0.5-2 m/s (mid-range values)
  - Two-point thresholds: Weinstein (1968) style body map, finger 2-4 mm
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

import numpy as np

from .errors import ConfigurationError


# ============================================================================
# CONSTANTS
# ============================================================================

DT_MS = 1.0  # Sample interval of the time axis (ms)

# Interactive control ranges (min, max, step) for a presentation layer.
# Informational only; validate() enforces domains, not these ranges.
PARAMETER_RANGES: Dict[str, Tuple[float, float, float]] = {
    'frequency': (1.0, 500.0, 1.0),           # Hz
    'amplitude': (0.0, 2.0, 0.01),            # arbitrary units
    'duration': (200.0, 2000.0, 10.0),        # ms
    'tau': (40.0, 400.0, 5.0),                # ms
    'threshold': (0.1, 1.5, 0.01),            # receptor potential units
    'refractory_period': (2.0, 20.0, 1.0),    # ms
    'distance_cm': (10.0, 120.0, 1.0),        # cm
    'separation_mm': (1.0, 50.0, 1.0),        # mm
}


# ============================================================================
# CLOSED VARIANTS
# ============================================================================

def _coerce_member(enum_cls, value, kind: str):
    """Resolve a member, its name or one of its labels; reject anything else."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().casefold()
        for member in enum_cls:
            if key == member.name.casefold() or key in member.keys:
                return member
    valid = ', '.join(member.label for member in enum_cls)
    raise ConfigurationError(f"Unknown {kind} {value!r} (expected one of: {valid})")


class ReceptorClass(Enum):
    """Rapidly adapting cutaneous mechanoreceptors with a closed passband (Hz)."""
    MEISSNER = ('Meissner', 2.0, 40.0,
                'Low-frequency flutter and light touch, small receptive field')
    PACINIAN = ('Pacinian', 40.0, 500.0,
                'High-frequency vibration, large receptive field')

    def __init__(self, label: str, low: float, high: float, description: str):
        self.label = label
        self.low = low
        self.high = high
        self.description = description

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.label.casefold(),)

    @property
    def band(self) -> Tuple[float, float]:
        return (self.low, self.high)

    @classmethod
    def coerce(cls, value) -> 'ReceptorClass':
        return _coerce_member(cls, value, 'receptor class')


class FiberType(Enum):
    """Peripheral afferent fiber classes with a fixed conduction velocity (m/s)."""
    A_BETA = ('Aβ', 50.0, ('ab', 'abeta', 'a-beta'))     # touch
    A_DELTA = ('Aδ', 15.0, ('ad', 'adelta', 'a-delta'))  # fast pain / temperature
    C = ('C', 1.5, ())                                   # slow pain / temperature

    def __init__(self, label: str, velocity: float, aliases: Tuple[str, ...]):
        self.label = label
        self.velocity = velocity
        self.aliases = aliases

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.label.casefold(),) + self.aliases

    @classmethod
    def coerce(cls, value) -> 'FiberType':
        return _coerce_member(cls, value, 'fiber type')


class BodyRegion(Enum):
    """Skin regions with their two-point discrimination threshold (mm)."""
    FINGER = ('finger', 2.0)
    THUMB = ('thumb', 3.0)
    PALM = ('palm', 10.0)
    WRIST = ('wrist', 20.0)
    FOREARM = ('forearm', 35.0)
    UPPER_ARM = ('upperArm', 40.0)
    SHOULDER = ('shoulder', 45.0)

    def __init__(self, label: str, threshold_mm: float):
        self.label = label
        self.threshold_mm = threshold_mm

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.label.casefold(),)

    @classmethod
    def coerce(cls, value) -> 'BodyRegion':
        return _coerce_member(cls, value, 'body region')


# ============================================================================
# VALIDATION HELPERS
# ============================================================================

def require_finite(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ConfigurationError(f"{name} must be numeric, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")


def require_positive(value: float, name: str) -> None:
    require_finite(value, name)
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")


def require_non_negative(value: float, name: str) -> None:
    require_finite(value, name)
    if value < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {value}")


# ============================================================================
# PARAMETER DATACLASSES
# ============================================================================

@dataclass
class StimulusParams:
    """Sinusoidal mechanical stimulus (continuous wave, no onset ramp)."""
    frequency: float = 10.0   # Vibration frequency (Hz)
    amplitude: float = 1.0    # Indentation amplitude (arbitrary units)
    enabled: bool = True      # Stimulus on/off

    def validate(self):
        # 0 Hz is a flat stimulus with zero gain, not an error
        require_non_negative(self.frequency, 'frequency')
        require_non_negative(self.amplitude, 'amplitude')


@dataclass
class AdaptationParams:
    """Rapid adaptation envelope exp(-t/tau)."""
    tau: float = 120.0        # Adaptation time constant (ms)

    def validate(self):
        require_positive(self.tau, 'tau')


@dataclass
class SpikeParams:
    """Threshold crossing spike generation with an absolute refractory period."""
    threshold: float = 0.5          # theta, in receptor potential units
    refractory_period: float = 8.0  # ms

    def validate(self):
        require_finite(self.threshold, 'threshold')
        require_non_negative(self.refractory_period, 'refractory_period')


@dataclass
class ConductionParams:
    """Skin-to-spinal-cord path along one afferent fiber type."""
    distance_cm: float = 60.0
    fiber: FiberType = FiberType.A_BETA

    def __post_init__(self):
        self.fiber = FiberType.coerce(self.fiber)

    def validate(self):
        self.fiber = FiberType.coerce(self.fiber)
        require_positive(self.distance_cm, 'distance_cm')
        if not math.isfinite(self.distance_cm * 10.0 / self.fiber.velocity):
            raise ConfigurationError(f"distance_cm {self.distance_cm} gives a non-finite delay")


@dataclass
class DiscriminationParams:
    """Two-point probe applied to one body region."""
    region: BodyRegion = BodyRegion.FINGER
    separation_mm: float = 3.0

    def __post_init__(self):
        self.region = BodyRegion.coerce(self.region)

    def validate(self):
        self.region = BodyRegion.coerce(self.region)
        require_non_negative(self.separation_mm, 'separation_mm')


# Flat snapshot key -> (group attribute, field name); None for top-level fields
_FLAT_FIELDS: Dict[str, Tuple[Any, str]] = {
    'receptor': (None, 'receptor'),
    'duration': (None, 'duration'),
    'dt': (None, 'dt'),
    'frequency': ('stimulus', 'frequency'),
    'amplitude': ('stimulus', 'amplitude'),
    'stimulus_enabled': ('stimulus', 'enabled'),
    'tau': ('adaptation', 'tau'),
    'threshold': ('spike', 'threshold'),
    'refractory_period': ('spike', 'refractory_period'),
    'distance_cm': ('conduction', 'distance_cm'),
    'fiber': ('conduction', 'fiber'),
    'region': ('discrimination', 'region'),
    'separation_mm': ('discrimination', 'separation_mm'),
}

_GROUP_TYPES = {
    'stimulus': StimulusParams,
    'adaptation': AdaptationParams,
    'spike': SpikeParams,
    'conduction': ConductionParams,
    'discrimination': DiscriminationParams,
}


@dataclass
class SimulationParams:
    """
    Complete parameter snapshot for one simulation run.

    Defaults are the simulator's initial control values: a 10 Hz, unit
    amplitude stimulus on a Meissner corpuscle for 500 ms, tau = 120 ms,
    theta = 0.5, 8 ms refractory period, 60 cm of Aβ fiber and a 3 mm probe
    on the finger.
    """
    receptor: ReceptorClass = ReceptorClass.MEISSNER
    duration: float = 500.0   # Simulated time (ms)
    dt: float = DT_MS         # Sample interval (ms)
    stimulus: StimulusParams = field(default_factory=StimulusParams)
    adaptation: AdaptationParams = field(default_factory=AdaptationParams)
    spike: SpikeParams = field(default_factory=SpikeParams)
    conduction: ConductionParams = field(default_factory=ConductionParams)
    discrimination: DiscriminationParams = field(default_factory=DiscriminationParams)

    def __post_init__(self):
        self.receptor = ReceptorClass.coerce(self.receptor)

    def validate(self):
        """
        Raise ConfigurationError if any value is outside its domain.

        Variant fields changed after construction are coerced again here.
        """
        self.receptor = ReceptorClass.coerce(self.receptor)
        require_positive(self.duration, 'duration')
        require_positive(self.dt, 'dt')
        for name, group_type in _GROUP_TYPES.items():
            group = getattr(self, name)
            if not isinstance(group, group_type):
                raise ConfigurationError(
                    f"{name} must be {group_type.__name__}, got {type(group).__name__}"
                )
            group.validate()

    @classmethod
    def from_flat(cls, values: Mapping[str, Any]) -> 'SimulationParams':
        """
        Build a snapshot from flat control values, e.g.
        {'receptor': 'Pacinian', 'frequency': 250, 'fiber': 'C', ...}.

        Missing keys keep their defaults.
        """
        unknown = sorted(set(values) - set(_FLAT_FIELDS))
        if unknown:
            raise ConfigurationError(f"Unknown parameter(s): {', '.join(unknown)}")

        top: Dict[str, Any] = {}
        grouped: Dict[str, Dict[str, Any]] = {name: {} for name in _GROUP_TYPES}
        for key, value in values.items():
            group, name = _FLAT_FIELDS[key]
            if group is None:
                top[name] = value
            else:
                grouped[group][name] = value

        for group, kwargs in grouped.items():
            top[group] = _GROUP_TYPES[group](**kwargs)
        return cls(**top)


# ============================================================================
# TIME AXIS
# ============================================================================

def make_time_axis(duration: float, dt: float = DT_MS) -> np.ndarray:
    """
    Evenly spaced sample times 0, dt, 2*dt, ... (ms).

    Length is floor(duration / dt) + 1, so duration itself is included when it
    is a whole number of steps.
    """
    require_positive(duration, 'duration')
    require_positive(dt, 'dt')
    # Tolerance keeps e.g. 0.3 / 0.1 = 2.9999999999999996 from losing a sample
    n_samples = int(math.floor(duration / dt + 1e-9)) + 1
    return np.arange(n_samples, dtype=float) * dt
