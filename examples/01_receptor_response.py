"""
Example 01: Receptor Response to Vibration

Runs the full touch pathway with the default parameters (10 Hz stimulus on a
Meissner corpuscle), then repeats the stimulus on a Pacinian corpuscle and
at 250 Hz to show how each receptor class filters frequency.

Level: Beginner
Runtime: ~2 seconds
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import matplotlib.pyplot as plt
from tactile.base import SimulationParams, StimulusParams, ReceptorClass
from tactile.simulation import simulate
from tactile.visualization import plot_simulation_results


def main():
    print("=== Example 01: Receptor Response to Vibration ===\n")

    result = simulate(SimulationParams())
    print(result.summary())
    print(f"\nSpike times: {result.spikes_local.tolist()} ms")
    plot_simulation_results(result, save_path='01_receptor_response.png', show=False)

    # Same stimulus frequencies through both receptor classes
    frequencies = [10.0, 250.0]
    fig, axes = plt.subplots(2, 2, figsize=(14, 8), sharex=True, sharey=True)
    for col, receptor in enumerate(ReceptorClass):
        for row, freq in enumerate(frequencies):
            params = SimulationParams(receptor=receptor,
                                      stimulus=StimulusParams(frequency=freq))
            res = simulate(params)
            ax = axes[row, col]
            ax.plot(res.time, res.vrec, 'b-', linewidth=0.8)
            ax.axhline(y=params.spike.threshold, color='r', linestyle='--', alpha=0.5)
            ax.set_title(f'{receptor.label} @ {freq:g} Hz: gain {res.gain:.2f}, '
                         f'{len(res.spikes_local)} spikes')
            ax.grid(True, alpha=0.3)
            print(f"  {receptor.label:9s} {freq:6.1f} Hz -> gain {res.gain:.3f}, "
                  f"peak |vrec| {np.max(np.abs(res.vrec)):.3f}, "
                  f"{len(res.spikes_local)} spikes")

    for ax in axes[1]:
        ax.set_xlabel('Time (ms)')
    for ax in axes[:, 0]:
        ax.set_ylabel('Receptor Potential')

    plt.tight_layout()
    plt.savefig('01_receptor_tuning.png', dpi=150)
    print("\nResults saved to: 01_receptor_response.png, 01_receptor_tuning.png")
    plt.show()


if __name__ == "__main__":
    main()
