"""
Example 03: Two-Point Discrimination Map

Tests a range of probe separations on every body region and prints which
ones are perceived as two points.

Level: Beginner
Runtime: ~1 second
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tactile.base import BodyRegion
from tactile.perception import TwoPointDiscriminator, perception_label
from tactile.visualization import plot_region_thresholds


def main():
    print("=== Example 03: Two-Point Discrimination Map ===\n")

    separations = [1, 2, 3, 10, 20, 35, 40, 45, 50]
    print("region     threshold  " + "  ".join(f"{s:>3d}" for s in separations))
    for region in BodyRegion:
        discriminator = TwoPointDiscriminator(region)
        marks = ["  2" if discriminator.perceives(s) else "  1" for s in separations]
        print(f"{region.label:10s} {discriminator.threshold_mm:6.0f} mm  " + "  ".join(marks))

    probe = 10.0
    print(f"\nProbe at {probe:g} mm on the palm: "
          f"{perception_label(TwoPointDiscriminator('palm').perceives(probe))}")

    plot_region_thresholds(probe, save_path='03_two_point_thresholds.png')


if __name__ == "__main__":
    main()
