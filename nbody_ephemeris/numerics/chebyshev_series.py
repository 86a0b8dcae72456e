# nbody_ephemeris/numerics/chebyshev_series.py
"""
Chebyshev series representing one scalar function of time on [t_min, t_max].

Coefficients may be floats or astropy Quantities (all with the same dimension).
Evaluation normalises t to s in [-1, 1] and runs Clenshaw's backward
recurrence, which is O(degree) and avoids forming the polynomials explicitly.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import astropy.units as u

from nbody_ephemeris.config.settings import (
    CHEBYSHEV_EVALUATION_SLACK,
    NEWHALL_DIVISIONS,
    NEWHALL_MAX_DEGREE,
    NEWHALL_MIN_DEGREE,
)
from nbody_ephemeris.contracts import check
from nbody_ephemeris.geometry.instant import Instant
from nbody_ephemeris.numerics.newhall import NEWHALL_C_MATRICES
from nbody_ephemeris.serialization.messages import ChebyshevSeriesMessage
from nbody_ephemeris.serialization.quantities import (
    read_quantity_or_double,
    write_quantity_or_double,
)

log = logging.getLogger(__name__)


def _clenshaw(coefficients: Sequence, scaled_t: float):
    two_scaled_t = scaled_t + scaled_t
    b_kplus2 = coefficients[0] * 0
    b_kplus1 = coefficients[0] * 0
    for k in range(len(coefficients) - 1, 0, -1):
        b_k = coefficients[k] + two_scaled_t * b_kplus1 - b_kplus2
        b_kplus2 = b_kplus1
        b_kplus1 = b_k
    return coefficients[0] + scaled_t * b_kplus1 - b_kplus2


def _derivative_coefficients(coefficients: Sequence) -> list:
    """Chebyshev coefficients of d/ds of the series (same degree, last one zero)."""
    degree = len(coefficients) - 1
    zero = coefficients[0] * 0
    derivative = [zero] * (degree + 2)
    for k in range(degree, 0, -1):
        derivative[k - 1] = derivative[k + 1] + 2 * k * coefficients[k]
    derivative[0] = derivative[0] / 2
    return derivative[:degree + 1]


def _scaled_velocity(velocity, duration_over_two: u.Quantity):
    if isinstance(velocity, u.Quantity):
        return velocity * duration_over_two
    # plain numbers are per second
    return velocity * duration_over_two.to_value(u.s)


def _as_scalars(values) -> list:
    if isinstance(values, u.Quantity):
        return list(values)
    return [float(value) for value in values]


class ChebyshevSeries:
    def __init__(self, coefficients: Sequence, t_min: Instant, t_max: Instant):
        check(len(coefficients) >= 1, "Degree must be at least 0")
        check(t_min < t_max, "Time interval must not be empty: [%r, %r]", t_min, t_max)
        self._coefficients = tuple(coefficients)
        self._degree = len(self._coefficients) - 1
        self._t_min = t_min
        self._t_max = t_max
        # precomputed to save operations at the expense of some accuracy
        duration = t_max - t_min
        self._t_mean = t_min + 0.5 * duration
        self._two_over_duration = 2 / duration

    @property
    def coefficients(self) -> tuple:
        return self._coefficients

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def t_min(self) -> Instant:
        return self._t_min

    @property
    def t_max(self) -> Instant:
        return self._t_max

    def _scaled_time(self, t: Instant) -> float:
        scaled_t = ((t - self._t_mean) * self._two_over_duration).to_value(u.dimensionless_unscaled)
        # |scaled_t| may leave [-1, 1] slightly through roundoff, but not further
        check(-CHEBYSHEV_EVALUATION_SLACK <= scaled_t <= CHEBYSHEV_EVALUATION_SLACK,
              "%r is outside [%r, %r] (scaled time %r)", t, self._t_min, self._t_max, scaled_t)
        return scaled_t

    def evaluate(self, t: Instant):
        return _clenshaw(self._coefficients, self._scaled_time(t))

    def evaluate_derivative(self, t: Instant):
        """Time derivative at t; carries the coefficients' unit per second."""
        scaled_t = self._scaled_time(t)
        derivative = _derivative_coefficients(self._coefficients)
        return _clenshaw(derivative, scaled_t) * self._two_over_duration

    def __eq__(self, other):
        if not isinstance(other, ChebyshevSeries):
            return NotImplemented
        return (len(self._coefficients) == len(other._coefficients) and
                all(bool(np.all(a == b)) for a, b in zip(self._coefficients, other._coefficients)) and
                self._t_min == other._t_min and
                self._t_max == other._t_max)

    __hash__ = None

    def __repr__(self):
        return "ChebyshevSeries(degree=%d, t_min=%r, t_max=%r)" % (self._degree, self._t_min, self._t_max)

    def write_to_message(self) -> ChebyshevSeriesMessage:
        return ChebyshevSeriesMessage(
            coefficient=[write_quantity_or_double(c) for c in self._coefficients],
            t_min=self._t_min.write_to_message(),
            t_max=self._t_max.write_to_message(),
        )

    @classmethod
    def read_from_message(cls, message: ChebyshevSeriesMessage) -> "ChebyshevSeries":
        return cls([read_quantity_or_double(c) for c in message.coefficient],
                   Instant.read_from_message(message.t_min),
                   Instant.read_from_message(message.t_max))

    @classmethod
    def newhall_approximation(cls,
                              degree: int,
                              p: Sequence,
                              v: Sequence,
                              t_min: Instant,
                              t_max: Instant) -> "ChebyshevSeries":
        """
        Fit a series of the given degree to positions `p` and velocities `v`
        sampled at NEWHALL_DIVISIONS + 1 equally spaced instants from t_min to
        t_max. Ends are matched exactly; interior samples in the least-squares
        sense. Costs one matrix-vector product.
        """
        check(NEWHALL_MIN_DEGREE <= degree <= NEWHALL_MAX_DEGREE,
              "Unsupported Newhall degree %r, must be in [%d, %d]",
              degree, NEWHALL_MIN_DEGREE, NEWHALL_MAX_DEGREE)
        check(len(p) == NEWHALL_DIVISIONS + 1,
              "Expected %d positions, got %d", NEWHALL_DIVISIONS + 1, len(p))
        check(len(v) == NEWHALL_DIVISIONS + 1,
              "Expected %d velocities, got %d", NEWHALL_DIVISIONS + 1, len(v))
        check(t_min < t_max, "Time interval must not be empty: [%r, %r]", t_min, t_max)

        duration_over_two = 0.5 * (t_max - t_min)
        pv = []
        for p_i, v_i in zip(p, v):
            pv.append(p_i)
            pv.append(_scaled_velocity(v_i, duration_over_two))
        if any(isinstance(x, u.Quantity) for x in pv):
            pv = u.Quantity(pv)
        else:
            pv = np.array(pv, dtype=float)

        coefficients = _as_scalars(NEWHALL_C_MATRICES[degree] @ pv)
        check(len(coefficients) == degree + 1,
              "Newhall matrix produced %d coefficients for degree %d", len(coefficients), degree)
        log.debug("Newhall approximation of degree %d on [%r, %r]", degree, t_min, t_max)
        return cls(coefficients, t_min, t_max)
