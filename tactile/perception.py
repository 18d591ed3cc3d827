"""
Two-point discrimination.

Two probes are perceived as separate points when their separation reaches the
region's threshold. Thresholds track receptive field size and receptor
density: finger < palm < forearm < shoulder.
"""

from .base import BodyRegion, DiscriminationParams


def perceives_two_points(region: BodyRegion, separation_mm: float) -> bool:
    """True if separation_mm >= the region threshold (equality resolves)."""
    return separation_mm >= BodyRegion.coerce(region).threshold_mm


def perception_label(perceived: bool) -> str:
    return 'two points' if perceived else 'one point'


class TwoPointDiscriminator:
    """Stateless threshold comparison for one body region."""

    def __init__(self, region: BodyRegion = BodyRegion.FINGER):
        self.region = BodyRegion.coerce(region)

    @classmethod
    def from_params(cls, params: DiscriminationParams) -> 'TwoPointDiscriminator':
        return cls(params.region)

    @property
    def threshold_mm(self) -> float:
        return self.region.threshold_mm

    def perceives(self, separation_mm: float) -> bool:
        return perceives_two_points(self.region, separation_mm)
