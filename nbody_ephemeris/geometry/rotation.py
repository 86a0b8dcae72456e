# nbody_ephemeris/geometry/rotation.py
import numpy as np
import astropy.units as u

from nbody_ephemeris.contracts import check
from nbody_ephemeris.geometry.grassmann import Bivector
from nbody_ephemeris.geometry.linear_map import LinearMap
from nbody_ephemeris.geometry.quaternion import Quaternion
from nbody_ephemeris.geometry.sign import Sign

_UNIT_NORM_TOLERANCE = 1e-12


class Rotation(LinearMap):
    """
    Proper rotation modelled by a unit quaternion q, acting as v -> q v q*.
    """
    __slots__ = ("_quaternion",)

    def __init__(self, quaternion: Quaternion):
        self._check_specialised()
        check(abs(quaternion.norm() - 1.0) <= _UNIT_NORM_TOLERANCE,
              "Rotation needs a unit quaternion, norm is %r", quaternion.norm())
        self._quaternion = quaternion

    @classmethod
    def identity(cls) -> "Rotation":
        return cls(Quaternion(1.0))

    @property
    def quaternion(self) -> Quaternion:
        return self._quaternion

    def determinant(self) -> Sign:
        return Sign(1)

    def inverse(self) -> "Rotation":
        return Rotation[self.to_frame(), self.from_frame()](self._quaternion.conjugate())

    def forget(self):
        from nbody_ephemeris.geometry.orthogonal_map import OrthogonalMap
        return OrthogonalMap[self.from_frame(), self.to_frame()](Sign(1), self)

    def apply_to_coordinates(self, r3_element):
        w = self._quaternion.real_part
        v = self._quaternion.imaginary_part
        t = 2.0 * v.cross(r3_element)
        return r3_element + w * t + v.cross(t)

    def _compose(self, right: "Rotation") -> "Rotation":
        # unit norm drifts under roundoff
        product = self._quaternion * right._quaternion
        return Rotation[right.from_frame(), self.to_frame()](product.normalized())

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        # q and -q are the same rotation
        return self._quaternion == other._quaternion or self._quaternion == -other._quaternion

    __hash__ = None

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._quaternion)


def exp(infinitesimal_rotation: Bivector) -> Rotation:
    """
    The rotation of angle |b| (radians) about the axis of the bivector b.
    """
    frame = infinitesimal_rotation.frame()
    coordinates = infinitesimal_rotation.coordinates.coordinates
    if isinstance(coordinates, u.Quantity):
        coordinates = coordinates.to_value(u.rad, equivalencies=u.dimensionless_angles())
    angle = float(np.sqrt(np.dot(coordinates, coordinates)))
    if angle == 0.0:
        return Rotation[frame, frame].identity()
    axis = coordinates / angle
    return Rotation[frame, frame](
        Quaternion(np.cos(angle / 2.0), tuple(axis * np.sin(angle / 2.0))))
