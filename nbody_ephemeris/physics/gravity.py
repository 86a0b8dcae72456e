# nbody_ephemeris/physics/gravity.py
import numpy as np


def massive_accelerations(q_massive: np.ndarray, mu: np.ndarray) -> np.ndarray:
    """
    Mutual Newtonian accelerations of the massive bodies, shape (n, 3):
    a_i = sum_{j != i} mu_j (q_j - q_i) / |q_j - q_i|^3
    """
    q_massive = np.asarray(q_massive, dtype=float)
    diff = q_massive[np.newaxis, :, :] - q_massive[:, np.newaxis, :]  # q_j - q_i
    r2 = np.einsum("ijk,ijk->ij", diff, diff)
    np.fill_diagonal(r2, np.inf)
    inv_r3 = r2 ** -1.5
    return np.einsum("ij,ijk->ik", inv_r3 * mu[np.newaxis, :], diff)


def massless_accelerations(q_massless: np.ndarray, q_massive: np.ndarray, mu: np.ndarray) -> np.ndarray:
    """
    Accelerations of the massless bodies due to the massive ones, shape (m, 3).
    Massless bodies do not attract each other.
    """
    q_massless = np.asarray(q_massless, dtype=float)
    q_massive = np.asarray(q_massive, dtype=float)
    diff = q_massive[np.newaxis, :, :] - q_massless[:, np.newaxis, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff)
    inv_r3 = r2 ** -1.5
    return np.einsum("ij,ijk->ik", inv_r3 * mu[np.newaxis, :], diff)


class NBodyGravity:
    """
    Force half-step for a state array whose first `massive_count` rows are the
    massive bodies and whose remaining rows are massless.
    Massive rows are computed from massive rows alone, so adding massless
    bodies never changes them.
    """
    def __init__(self, gravitational_parameters, massless_count: int = 0):
        self.mu = np.asarray(gravitational_parameters, dtype=float)
        self.massive_count = len(self.mu)
        self.massless_count = int(massless_count)

    def acceleration(self, q: np.ndarray) -> np.ndarray:
        n = self.massive_count
        a = np.zeros_like(q, dtype=float)
        if n:
            a[:n] = massive_accelerations(q[:n], self.mu)
        if self.massless_count and n:
            a[n:] = massless_accelerations(q[n:], q[:n], self.mu)
        return a

    __call__ = acceleration
