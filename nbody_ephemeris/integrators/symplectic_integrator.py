# nbody_ephemeris/integrators/symplectic_integrator.py
"""
Fixed-step symplectic partitioned integrator for q'' = a(q).

A scheme is a sequence of drift coefficients a_i and kick coefficients b_i;
one step of length h is

    for i in stages:
        q += a_i h v        (drift: kinematic half-step)
        v += b_i h a(q)     (kick: force half-step, skipped when b_i == 0)

Compositions of this form preserve a shadow Hamiltonian, so energy errors stay
bounded by C h^order instead of growing with the number of steps.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from nbody_ephemeris.config.settings import (
    DEFAULT_SAMPLING_PERIOD,
    DEFAULT_SYMPLECTIC_SCHEME,
    SCHEME_COEFFICIENT_TOLERANCE,
)
from nbody_ephemeris.contracts import check

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymplecticScheme:
    name: str
    order: int
    a: Tuple[float, ...]  # drift
    b: Tuple[float, ...]  # kick

    @property
    def stages(self) -> int:
        return len(self.a)


def leapfrog_composition(name: str, order: int, weights) -> SymplecticScheme:
    """
    Compose leapfrog (drift h/2, kick h, drift h/2) sub-steps of lengths
    w_1 h, ..., w_n h, merging consecutive drifts.
    """
    weights = [float(w) for w in weights]
    a = [weights[0] / 2.0]
    for left, right in zip(weights, weights[1:]):
        a.append((left + right) / 2.0)
    a.append(weights[-1] / 2.0)
    b = weights + [0.0]
    return SymplecticScheme(name=name, order=order, a=tuple(a), b=tuple(b))


_CBRT2 = 2.0 ** (1.0 / 3.0)

# Yoshida (1990), solution A
_YOSHIDA6_W1 = -1.17767998417887
_YOSHIDA6_W2 = 0.235573213359357
_YOSHIDA6_W3 = 0.784513610477560
_YOSHIDA6_W0 = 1.0 - 2.0 * (_YOSHIDA6_W1 + _YOSHIDA6_W2 + _YOSHIDA6_W3)

SCHEMES: Dict[str, SymplecticScheme] = {
    scheme.name: scheme for scheme in (
        leapfrog_composition("leapfrog", 2, [1.0]),
        leapfrog_composition("yoshida4", 4, [
            1.0 / (2.0 - _CBRT2),
            -_CBRT2 / (2.0 - _CBRT2),
            1.0 / (2.0 - _CBRT2),
        ]),
        leapfrog_composition("yoshida6", 6, [
            _YOSHIDA6_W3, _YOSHIDA6_W2, _YOSHIDA6_W1,
            _YOSHIDA6_W0,
            _YOSHIDA6_W1, _YOSHIDA6_W2, _YOSHIDA6_W3,
        ]),
    )
}


@dataclass
class SystemState:
    positions: np.ndarray   # (n, 3)
    velocities: np.ndarray  # (n, 3)
    time: float             # seconds


@dataclass
class Parameters:
    initial: SystemState
    tmax: float
    dt: float
    sampling_period: int = DEFAULT_SAMPLING_PERIOD


def step_count(t0: float, tmax: float, dt: float) -> int:
    """Largest k with t0 + k dt <= tmax (0 when tmax < t0 + dt)."""
    if tmax < t0:
        return 0
    k = int(math.floor((tmax - t0) / dt))
    while t0 + (k + 1) * dt <= tmax:
        k += 1
    while k > 0 and t0 + k * dt > tmax:
        k -= 1
    return k


class SymplecticIntegrator:
    """
    Must be initialize()d with a scheme (or scheme name, DEFAULT_SYMPLECTIC_SCHEME
    when omitted) before solve().
    """
    def __init__(self):
        self._scheme: Optional[SymplecticScheme] = None

    def initialize(self, scheme=DEFAULT_SYMPLECTIC_SCHEME) -> "SymplecticIntegrator":
        if isinstance(scheme, str):
            check(scheme in SCHEMES, "Unknown symplectic scheme %r, known: %s", scheme, sorted(SCHEMES))
            scheme = SCHEMES[scheme]
        check(len(scheme.a) == len(scheme.b) and len(scheme.a) > 0,
              "Scheme %s: drift and kick coefficients must have the same nonzero length", scheme.name)
        check(abs(sum(scheme.a) - 1.0) <= SCHEME_COEFFICIENT_TOLERANCE,
              "Scheme %s: drift coefficients sum to %r", scheme.name, sum(scheme.a))
        check(abs(sum(scheme.b) - 1.0) <= SCHEME_COEFFICIENT_TOLERANCE,
              "Scheme %s: kick coefficients sum to %r", scheme.name, sum(scheme.b))
        self._scheme = scheme
        log.debug("Initialized %s (order %d, %d stages)", scheme.name, scheme.order, scheme.stages)
        return self

    @property
    def initialized(self) -> bool:
        return self._scheme is not None

    @property
    def scheme(self) -> SymplecticScheme:
        check(self.initialized, "The integrator has not been initialized")
        return self._scheme

    @property
    def order(self) -> int:
        return self.scheme.order

    def step(self, q: np.ndarray, v: np.ndarray, h: float,
             compute_acceleration: Callable[[np.ndarray], np.ndarray]) -> None:
        """Advance q and v in place by one step of length h."""
        scheme = self.scheme
        for a_i, b_i in zip(scheme.a, scheme.b):
            if a_i != 0.0:
                q += (a_i * h) * v
            if b_i != 0.0:
                v += (b_i * h) * compute_acceleration(q)

    def solve(self,
              compute_acceleration: Callable[[np.ndarray], np.ndarray],
              parameters: Parameters) -> List[SystemState]:
        """
        Integrate from parameters.initial with fixed step dt up to the last
        step not after tmax. Every sampling_period-th state is returned, and
        the final one always is; sampling_period == 0 returns only the final
        state. The initial state is not included.
        """
        check(self.initialized, "The integrator has not been initialized")
        check(parameters.dt > 0, "Step must be positive, got %r", parameters.dt)
        check(parameters.sampling_period >= 0,
              "Sampling period must be >= 0, got %r", parameters.sampling_period)

        initial = parameters.initial
        t0 = initial.time
        h = parameters.dt
        steps = step_count(t0, parameters.tmax, h)

        q = np.array(initial.positions, dtype=float)
        v = np.array(initial.velocities, dtype=float)
        solution: List[SystemState] = []
        for k in range(1, steps + 1):
            self.step(q, v, h, compute_acceleration)
            retain = k == steps or (parameters.sampling_period > 0 and
                                    k % parameters.sampling_period == 0)
            if retain:
                # time from t0 and k rather than accumulated to avoid drift
                solution.append(SystemState(q.copy(), v.copy(), t0 + k * h))
        log.debug("%s: %d steps of %r s, %d states retained",
                  self._scheme.name, steps, h, len(solution))
        return solution
