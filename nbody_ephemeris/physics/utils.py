# nbody_ephemeris/physics/utils.py
"""
Conservation diagnostics for N-body runs.

Energies and angular momenta are "scaled": the gravitational parameters
stand in for the masses, so the totals are the physical ones times G.
They are used as numerical stability diagnostics of the integrator.
"""
from typing import List, Sequence, Tuple

import numpy as np
import astropy.units as u

from nbody_ephemeris.contracts import check, check_eq
from nbody_ephemeris.geometry.grassmann import Bivector, wedge
from nbody_ephemeris.geometry.point import Point, barycenter
from nbody_ephemeris.physics.body import Body
from nbody_ephemeris.physics.degrees_of_freedom import DegreesOfFreedom
from nbody_ephemeris.physics.trajectory import Trajectory

SPECIFIC_ENERGY_UNIT = u.m ** 2 / u.s ** 2
SCALED_ENERGY_UNIT = u.m ** 5 / u.s ** 4


def _mu(body: Body) -> float:
    if body.is_massless:
        return 0.0
    return body.gravitational_parameter.to_value(u.m ** 3 / u.s ** 2)


def specific_energy(relative: DegreesOfFreedom, gravitational_parameter) -> u.Quantity:
    """
    Two-body specific orbital energy v^2/2 - mu/r of a relative state.
    """
    mu = u.Quantity(gravitational_parameter, u.m ** 3 / u.s ** 2).value
    r = np.linalg.norm(relative.position_si())
    v = relative.velocity_si()
    return (0.5 * np.dot(v, v) - mu / r) * SPECIFIC_ENERGY_UNIT


def scaled_total_energy(bodies: Sequence[Body], states: Sequence[DegreesOfFreedom]) -> u.Quantity:
    check_eq(len(bodies), len(states), "Number of states")
    mu = np.array([_mu(body) for body in bodies], dtype=float)
    q = np.array([state.position_si() for state in states], dtype=float)
    v = np.array([state.velocity_si() for state in states], dtype=float)

    kinetic = 0.5 * np.sum(mu * np.einsum("ij,ij->i", v, v))
    potential = 0.0
    for i in range(len(bodies)):
        for j in range(i + 1, len(bodies)):
            if mu[i] == 0.0 or mu[j] == 0.0:
                continue
            potential -= mu[i] * mu[j] / np.linalg.norm(q[j] - q[i])
    return (kinetic + potential) * SCALED_ENERGY_UNIT


def scaled_angular_momentum(bodies: Sequence[Body], states: Sequence[DegreesOfFreedom]) -> Bivector:
    """Sum of mu_i q_i ^ v_i, a pseudo-vector."""
    check_eq(len(bodies), len(states), "Number of states")
    check(len(states) > 0, "No states")
    total = None
    for body, state in zip(bodies, states):
        term = (_mu(body) * u.m ** 3 / u.s ** 2) * wedge(state.position, state.velocity)
        total = term if total is None else total + term
    return total


def system_barycenter(bodies: Sequence[Body], states: Sequence[DegreesOfFreedom]) -> Point:
    """Barycentre of the massive bodies, weighted by gravitational parameter."""
    check_eq(len(bodies), len(states), "Number of states")
    massive = [(body, state) for body, state in zip(bodies, states) if not body.is_massless]
    check(len(massive) > 0, "No massive bodies")
    points = [Point[state.frame()](state.position.coordinates) for _, state in massive]
    return barycenter(points, [body.gravitational_parameter for body, _ in massive])


def energy_history(trajectories: Sequence[Trajectory]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Seconds from the first sample and relative drift (E - E0) / |E0| of the
    scaled total energy, for trajectories sampled at the same instants.
    """
    check(len(trajectories) > 0, "No trajectories")
    length = len(trajectories[0])
    check(length > 0, "Empty trajectory for %r", trajectories[0].body)
    for trajectory in trajectories:
        check_eq(length, len(trajectory), "Trajectory length")
    bodies = [trajectory.body for trajectory in trajectories]

    times: List[float] = []
    energies: List[float] = []
    for samples in zip(*trajectories):
        time = samples[0][0]
        states = [dof for _, dof in samples]
        times.append(time.seconds_from_j2000)
        energies.append(scaled_total_energy(bodies, states).value)

    times = np.array(times) - times[0]
    energies = np.array(energies)
    return times, (energies - energies[0]) / abs(energies[0])
