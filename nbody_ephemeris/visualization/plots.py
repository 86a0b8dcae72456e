# nbody_ephemeris/visualization/plots.py
import logging
import os

import numpy as np
import astropy.units as u
import matplotlib.pyplot as plt

from nbody_ephemeris.config.settings import OUTPUT_DIR
from nbody_ephemeris.physics.utils import energy_history

log = logging.getLogger(__name__)


def _magnitude(value) -> float:
    if isinstance(value, u.Quantity):
        return float(value.value)
    return float(value)


def plot_energy_drift(trajectories, output_dir=None, filename="energy_drift.png"):
    """
    Plot the relative drift of the scaled total energy over time.
    """
    output_dir = output_dir or OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    times, drift = energy_history(trajectories)

    plt.figure(figsize=(10, 6))
    plt.plot(times, drift)
    plt.xlabel("Time since first sample (s)")
    plt.ylabel("(E - E0) / |E0|")
    plt.title("Energy Drift")
    plt.grid(True)

    save_path = os.path.join(output_dir, filename)
    plt.tight_layout()
    plt.savefig(save_path)
    plt.close()

    log.info("Saved: %s", save_path)
    return save_path


def plot_chebyshev_fit(series, samples=None, output_dir=None, filename="chebyshev_fit.png", points=200):
    """
    Plot a Chebyshev series over its interval, with optional (Instant, value)
    samples it was fitted to.
    """
    output_dir = output_dir or OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    duration = (series.t_max - series.t_min).to_value(u.s)
    offsets = np.linspace(0.0, duration, points)
    values = [_magnitude(series.evaluate(series.t_min + offset * u.s)) for offset in offsets]

    plt.figure(figsize=(10, 6))
    plt.plot(offsets, values, label="degree %d series" % series.degree)
    if samples:
        sample_offsets = [(t - series.t_min).to_value(u.s) for t, _ in samples]
        sample_values = [_magnitude(value) for _, value in samples]
        plt.scatter(sample_offsets, sample_values, color="red", zorder=3, label="samples")
    plt.xlabel("Time since t_min (s)")
    plt.ylabel("Value")
    plt.title("Chebyshev Fit")
    plt.legend()

    save_path = os.path.join(output_dir, filename)
    plt.tight_layout()
    plt.savefig(save_path)
    plt.close()

    log.info("Saved: %s", save_path)
    return save_path
