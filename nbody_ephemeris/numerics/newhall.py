# nbody_ephemeris/numerics/newhall.py
"""
Newhall's C matrices.

For a given degree d the matrix maps the 2 * (divisions + 1) vector

    (p_0, v_0 h, p_1, v_1 h, ..., p_N, v_N h),    h = duration / 2,

of positions and scaled velocities sampled at equally spaced instants, from
t_min to t_max, to the d + 1 Chebyshev coefficients of the fit.

The fit (X. X. Newhall, "Numerical representation of planetary ephemerides",
Celestial Mechanics 45, 1989) is a weighted least-squares fit constrained to
reproduce position and velocity exactly at both ends of the interval. Interior
velocity residuals are weighted by w relative to position residuals. With
T the matrix of Chebyshev polynomials and their derivatives at the nodes,
W = diag(1, w^2, 1, w^2, ...) and C2 the four end-point rows of T, the
coefficients solve

    | T' W T   C2' | | c      |   | T' W |
    |            | |        | = |      | f
    | C2       0   | | lambda |   | S    |

where S selects the end-point entries of f. The first d + 1 rows of the
solution operator are the C matrix.

The matrices depend only on (degree, divisions, w); they are built once, when
this module is imported, and are read-only afterwards.
"""
import logging
from typing import Dict

import numpy as np
from numpy.polynomial import chebyshev

from nbody_ephemeris.config.settings import (
    NEWHALL_DIVISIONS,
    NEWHALL_MAX_DEGREE,
    NEWHALL_MIN_DEGREE,
    NEWHALL_VELOCITY_WEIGHT,
)

log = logging.getLogger(__name__)


def newhall_c_matrix(degree: int, divisions: int, velocity_weight: float) -> np.ndarray:
    nodes = np.linspace(-1.0, 1.0, divisions + 1)
    samples = 2 * (divisions + 1)

    t = np.empty((samples, degree + 1), dtype=float)
    for k in range(degree + 1):
        basis = chebyshev.Chebyshev.basis(k)
        t[0::2, k] = basis(nodes)
        t[1::2, k] = basis.deriv()(nodes)

    weights = np.tile([1.0, velocity_weight ** 2], divisions + 1)
    tw = t.T * weights

    constrained = [0, 1, samples - 2, samples - 1]
    c2 = t[constrained]
    selection = np.zeros((len(constrained), samples), dtype=float)
    selection[np.arange(len(constrained)), constrained] = 1.0

    kkt = np.block([
        [tw @ t, c2.T],
        [c2, np.zeros((len(constrained), len(constrained)))],
    ])
    rhs = np.vstack([tw, selection])
    solution = np.linalg.solve(kkt, rhs)
    return solution[:degree + 1]


def _build_matrices() -> Dict[int, np.ndarray]:
    matrices = {}
    for degree in range(NEWHALL_MIN_DEGREE, NEWHALL_MAX_DEGREE + 1):
        matrix = newhall_c_matrix(degree, NEWHALL_DIVISIONS, NEWHALL_VELOCITY_WEIGHT)
        matrix.flags.writeable = False
        matrices[degree] = matrix
    log.debug("Built Newhall matrices for degrees %d..%d (%d divisions, w=%s)",
              NEWHALL_MIN_DEGREE, NEWHALL_MAX_DEGREE, NEWHALL_DIVISIONS, NEWHALL_VELOCITY_WEIGHT)
    return matrices


NEWHALL_C_MATRICES = _build_matrices()
