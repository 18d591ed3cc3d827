"""
Exception classes for the tactile transduction simulator.

Exception Hierarchy:
    TactileError (base)
    └── ConfigurationError - Invalid parameter snapshot, rejected before any
        computation starts
"""


class TactileError(Exception):
    """Base exception for all simulator errors."""


class ConfigurationError(TactileError, ValueError):
    """
    Invalid simulation parameters.

    Raised for unknown receptor classes, fiber types or body regions and for
    numeric values outside their domain (non-positive duration, time step,
    adaptation time constant or path distance; negative amplitude, refractory
    period or probe separation; NaN or infinity).
    """
