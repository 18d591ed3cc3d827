"""
Example 02: Conduction Delay by Fiber Type

Computes the skin-to-spinal-cord delay for Aβ, Aδ and C fibers over the
range of path lengths, and shows one spike train arriving through each.

Level: Beginner
Runtime: ~2 seconds
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import matplotlib.pyplot as plt
from tactile.base import FiberType, SimulationParams, SpikeParams, PARAMETER_RANGES
from tactile.conduction import ConductionModel, conduction_delay_ms
from tactile.simulation import simulate


def main():
    print("=== Example 02: Conduction Delay by Fiber Type ===\n")

    d_min, d_max, d_step = PARAMETER_RANGES['distance_cm']
    distances = np.arange(d_min, d_max + d_step, d_step)

    # Low threshold so the local train has several spikes to conduct
    result = simulate(SimulationParams(spike=SpikeParams(threshold=0.2, refractory_period=8.0)))
    print(f"Local spikes: {result.spikes_local.tolist()} ms\n")

    fig, axes = plt.subplots(2, 1, figsize=(12, 8))

    ax = axes[0]
    for fiber in FiberType:
        delays = [conduction_delay_ms(fiber, d) for d in distances]
        ax.plot(distances, delays, linewidth=2,
                label=f'{fiber.label} ({fiber.velocity:g} m/s)')
        print(f"  {fiber.label:2s}: 60 cm -> {conduction_delay_ms(fiber, 60.0):7.1f} ms")
    ax.set_xlabel('Path Length (cm)')
    ax.set_ylabel('Delay (ms)')
    ax.set_yscale('log')
    ax.set_title('Conduction Delay vs Path Length')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.vlines(result.spikes_local, -0.4, 0.4, colors='black', linewidth=1.2)
    labels = ['Skin']
    for row, fiber in enumerate(FiberType, start=1):
        arrived = ConductionModel(fiber, 60.0).conduct(result.spikes_local)
        ax.vlines(arrived, row - 0.4, row + 0.4, linewidth=1.2)
        labels.append(f'{fiber.label} arrival')
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels)
    ax.set_xlabel('Time (ms)')
    ax.set_title('Spike Arrival at the Spinal Cord (60 cm)')
    ax.grid(True, alpha=0.3, axis='x')

    plt.tight_layout()
    plt.savefig('02_fiber_conduction.png', dpi=150)
    print("\nResults saved to: 02_fiber_conduction.png")
    plt.show()


if __name__ == "__main__":
    main()
