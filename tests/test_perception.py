"""
Tests for two-point discrimination.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tactile.base import BodyRegion, DiscriminationParams
from tactile.errors import ConfigurationError
from tactile.perception import (
    TwoPointDiscriminator,
    perceives_two_points,
    perception_label,
)


class TestTwoPointDiscrimination:
    """Test suite for region threshold comparison."""

    def test_threshold_table(self):
        """Test the per-region thresholds in mm."""
        expected = {
            'finger': 2.0, 'thumb': 3.0, 'palm': 10.0, 'wrist': 20.0,
            'forearm': 35.0, 'upperArm': 40.0, 'shoulder': 45.0,
        }
        assert {r.label: r.threshold_mm for r in BodyRegion} == expected

    def test_finger_example(self):
        """Test 1 mm on the finger is one point and 2 mm is two points."""
        assert perceives_two_points(BodyRegion.FINGER, 1.0) is False
        assert perceives_two_points(BodyRegion.FINGER, 2.0) is True

    @pytest.mark.parametrize("region", list(BodyRegion))
    def test_boundary_resolves(self, region):
        """Test that separation equal to the threshold counts as two points."""
        th = region.threshold_mm
        assert perceives_two_points(region, th)
        assert perceives_two_points(region, th + 0.5)
        assert not perceives_two_points(region, th - 0.5)

    def test_region_names_accepted(self):
        """Test lookup by label or member name."""
        assert TwoPointDiscriminator('upperArm').region is BodyRegion.UPPER_ARM
        assert TwoPointDiscriminator('upper_arm').region is BodyRegion.UPPER_ARM
        assert TwoPointDiscriminator('Palm').threshold_mm == 10.0

    def test_unknown_region_rejected(self):
        """Test that a region outside the table is a configuration error."""
        with pytest.raises(ConfigurationError):
            TwoPointDiscriminator('knee')

    def test_from_params(self):
        """Test construction from a DiscriminationParams snapshot."""
        params = DiscriminationParams(region='forearm', separation_mm=30.0)
        discriminator = TwoPointDiscriminator.from_params(params)
        assert not discriminator.perceives(params.separation_mm)
        assert discriminator.perceives(35.0)

    def test_labels(self):
        """Test the indicator text."""
        assert perception_label(True) == 'two points'
        assert perception_label(False) == 'one point'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
