"""
Visualization of simulation results.

  - plot_simulation_results: Stimulus and receptor potential traces, spike
    rasters at the skin and at the spinal cord, conduction/perception summary
  - plot_region_thresholds: Two-point thresholds per body region against the
    current probe separation
"""

import logging

import matplotlib.pyplot as plt

from .base import BodyRegion
from .perception import perception_label

logger = logging.getLogger(__name__)


def _finish(fig, save_path, show):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150)
        logger.info("Results saved to: %s", save_path)
    if show:
        plt.show()
    return fig


def _raster(ax, spikes, t_max, color, title):
    if len(spikes):
        ax.vlines(spikes, 0.1, 0.9, colors=color, linewidth=1.2)
    ax.set_xlim(0, t_max)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.set_title(title)
    ax.grid(True, alpha=0.3, axis='x')


def plot_simulation_results(result, save_path: str = 'tactile_results.png',
                            show: bool = True):
    """Four stacked panels sharing the time axis, plus a summary box."""
    p = result.params
    t_max = float(result.time[-1])
    # Traces are drawn on +/- amplitude; a zero amplitude still gets a usable axis
    y_lim = p.stimulus.amplitude if p.stimulus.amplitude > 0 else 1.0

    fig, axes = plt.subplots(4, 1, figsize=(12, 10), sharex=True,
                             gridspec_kw={'height_ratios': [3, 3, 1, 1]})

    # Mechanical stimulus
    ax = axes[0]
    ax.plot(result.time, result.stim, 'k-', linewidth=1)
    ax.axhline(y=0, color='gray', alpha=0.3)
    ax.set_ylim(-y_lim * 1.05, y_lim * 1.05)
    ax.set_ylabel('Indentation (a.u.)')
    state = 'on' if p.stimulus.enabled else 'off'
    ax.set_title(f'Mechanical Stimulus ({p.stimulus.frequency:g} Hz, {state})')
    ax.grid(True, alpha=0.3)

    # Receptor potential
    ax = axes[1]
    ax.plot(result.time, result.vrec, 'b-', linewidth=1,
            label=f'{p.receptor.label} (gain {result.gain:.2f})')
    ax.axhline(y=p.spike.threshold, color='r', linestyle='--', alpha=0.5,
               label=f'Threshold θ = {p.spike.threshold:g}')
    ax.set_ylim(-y_lim * 1.05, y_lim * 1.05)
    ax.set_ylabel('Receptor Potential')
    ax.set_title(f'Receptor Potential (rapid adaptation, τ = {p.adaptation.tau:g} ms)')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)

    _raster(axes[2], result.spikes_local, t_max, 'black',
            f'Spikes at Receptor Ending ({len(result.spikes_local)})')
    _raster(axes[3], result.spikes_arrived, t_max, 'darkred',
            f'Spikes Arriving at Spinal Cord '
            f'({p.conduction.fiber.label}, +{result.conduction_delay_ms:.1f} ms)')
    axes[3].set_xlabel('Time (ms)')

    region = p.discrimination.region
    verdict = perception_label(result.two_point_perceived)
    fig.text(0.99, 0.005,
             f"Conduction delay ≈ {result.conduction_delay_ms:.1f} ms   |   "
             f"{region.label}: {p.discrimination.separation_mm:g} mm vs "
             f"{region.threshold_mm:g} mm → {verdict}",
             ha='right', va='bottom', fontsize=9)

    return _finish(fig, save_path, show)


def plot_region_thresholds(separation_mm: float, save_path: str = 'two_point_thresholds.png',
                           show: bool = True):
    """Bar chart of region thresholds; regions that resolve two points are green."""
    regions = list(BodyRegion)
    thresholds = [r.threshold_mm for r in regions]
    colors = ['#4CAF50' if separation_mm >= th else '#FF9800' for th in thresholds]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar([r.label for r in regions], thresholds, color=colors, edgecolor='white')
    ax.axhline(y=separation_mm, color='k', linestyle='--', alpha=0.7,
               label=f'Probe separation ({separation_mm:g} mm)')
    ax.set_ylabel('Two-Point Threshold (mm)')
    ax.set_title('Two-Point Discrimination by Body Region')
    ax.legend()
    ax.grid(True, alpha=0.3, axis='y')

    return _finish(fig, save_path, show)
