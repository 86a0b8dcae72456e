# nbody_ephemeris/physics/n_body_system.py
import logging
from typing import Sequence

import numpy as np
import astropy.units as u

from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.instant import Instant
from nbody_ephemeris.integrators.symplectic_integrator import (
    Parameters,
    SymplecticIntegrator,
    SystemState,
)
from nbody_ephemeris.physics.degrees_of_freedom import DegreesOfFreedom
from nbody_ephemeris.physics.gravity import NBodyGravity
from nbody_ephemeris.physics.trajectory import Trajectory

log = logging.getLogger(__name__)


class NBodySystem:
    """
    Newtonian N-body propagation of trajectories sharing one frame.
    """

    def integrate(self,
                  integrator: SymplecticIntegrator,
                  tmax: Instant,
                  dt,
                  sampling_period: int,
                  trajectories: Sequence[Trajectory]) -> None:
        """
        Extend every trajectory up to the last t0 + k dt not after tmax.

        All trajectories must be non-empty, share the same frame and last
        time, and belong to distinct bodies. Every sampling_period-th step is
        appended (and always the last one; 0 appends only the last one).
        Massless bodies feel the massive ones but do not attract anything.
        """
        check(len(trajectories) > 0, "Nothing to integrate")
        check(integrator.initialized, "The integrator has not been initialized")
        dt_seconds = float(u.Quantity(dt, u.s).value)
        check(dt_seconds > 0, "Step must be positive, got %r", dt)
        check(sampling_period >= 0, "Sampling period must be >= 0, got %r", sampling_period)

        frame = trajectories[0].frame()
        for trajectory in trajectories:
            check_same_frame(frame, trajectory.frame())
            check(len(trajectory) > 0, "Empty trajectory for %r", trajectory.body)
        t0 = trajectories[0].last_time()
        for trajectory in trajectories:
            check(trajectory.last_time() == t0,
                  "Trajectory of %r ends at %r, expected %r", trajectory.body, trajectory.last_time(), t0)
        check(len({id(trajectory.body) for trajectory in trajectories}) == len(trajectories),
              "Each body must have exactly one trajectory")

        # massive bodies first: the gravity model relies on this ordering
        massive = [t for t in trajectories if not t.body.is_massless]
        massless = [t for t in trajectories if t.body.is_massless]
        ordered = massive + massless

        gravity = NBodyGravity(
            [t.body.gravitational_parameter.to_value(u.m ** 3 / u.s ** 2) for t in massive],
            massless_count=len(massless),
        )
        initial = SystemState(
            positions=np.array([t.last().position_si() for t in ordered], dtype=float),
            velocities=np.array([t.last().velocity_si() for t in ordered], dtype=float),
            time=t0.seconds_from_j2000,
        )
        parameters = Parameters(initial=initial,
                                tmax=tmax.seconds_from_j2000,
                                dt=dt_seconds,
                                sampling_period=sampling_period)

        log.info("Integrating %d massive + %d massless bodies from %r to %r, dt=%s s, scheme=%s",
                 len(massive), len(massless), t0, tmax, dt_seconds, integrator.scheme.name)
        solution = integrator.solve(gravity.acceleration, parameters)

        for state in solution:
            time = Instant(state.time)
            for i, trajectory in enumerate(ordered):
                trajectory.append(time, DegreesOfFreedom.from_si(frame,
                                                                 state.positions[i],
                                                                 state.velocities[i]))
        if solution:
            log.info("Integration done: %d samples appended, last time %r",
                     len(solution), ordered[0].last_time())
        else:
            log.info("Integration done: tmax %r is less than one step after %r", tmax, t0)
