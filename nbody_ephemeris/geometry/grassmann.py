# nbody_ephemeris/geometry/grassmann.py
"""
Frame-tagged Grassmann algebra of a 3-dimensional inner product space.

Vectors, bivectors and trivectors are kept apart so that pseudo-vectors
(e.g. angular momentum r ^ p) and pseudo-scalars never get mixed with true
vectors and scalars; improper changes of coordinates then act correctly on
each of them. The equivalents of the usual cross-product formulas are:

    bivector  = vector ^ vector          L = r ^ p            (wedge)
    vector    = bivector * vector        a = 2 Omega * v      (left action)
    vector    = vector * bivector        F = q v * B          (right action)
    bivector  = [bivector, bivector]                          (commutator)
    trivector = bivector ^ vector        Phi = B ^ S          (wedge)

Classes must be specialised with a frame, Vector[World](R3Element(...)).
Scalars may be floats or astropy Quantities; products carry the product unit
and sums of incompatible dimensions raise astropy's UnitConversionError.
"""
import numpy as np

from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.frames import FrameTagged
from nbody_ephemeris.geometry.r3_element import R3Element


class Multivector(FrameTagged):
    __slots__ = ("_coordinates",)
    __array_ufunc__ = None

    grade = None

    def __init__(self, coordinates):
        self._check_specialised()
        self._coordinates = self._coerce(coordinates)

    @staticmethod
    def _coerce(coordinates):
        if isinstance(coordinates, R3Element):
            return coordinates
        return R3Element.from_array(coordinates)

    @classmethod
    def frame(cls):
        check(bool(cls._frames), "%s has no frame", cls.__name__)
        return cls._frames[0]

    @property
    def coordinates(self):
        return self._coordinates

    def _check_compatible(self, other):
        check_same_frame(self.frame(), other.frame())
        check(self.grade == other.grade,
              "Cannot combine grades %d and %d", self.grade, other.grade)

    def __add__(self, other):
        if not isinstance(other, Multivector):
            return NotImplemented
        self._check_compatible(other)
        return type(self)(self._coordinates + other._coordinates)

    def __sub__(self, other):
        if not isinstance(other, Multivector):
            return NotImplemented
        self._check_compatible(other)
        return type(self)(self._coordinates - other._coordinates)

    def __neg__(self):
        return type(self)(-self._coordinates)

    def __mul__(self, other):
        if isinstance(other, Multivector):
            return _act(self, other)
        return type(self)(self._coordinates * other)

    def __rmul__(self, scalar):
        return type(self)(scalar * self._coordinates)

    def __truediv__(self, scalar):
        if isinstance(scalar, Multivector):
            return NotImplemented
        return type(self)(self._coordinates / scalar)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coordinates == other._coordinates

    __hash__ = None

    def norm(self):
        return self._coordinates.norm()

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._coordinates)


class Vector(Multivector):
    __slots__ = ()
    grade = 1


class Bivector(Multivector):
    __slots__ = ()
    grade = 2


class Trivector(Multivector):
    __slots__ = ()
    grade = 3

    @staticmethod
    def _coerce(coordinates):
        check(not isinstance(coordinates, R3Element), "A trivector has a single coordinate")
        check(np.ndim(coordinates) == 0, "A trivector has a single coordinate")
        return coordinates

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._coordinates == other._coordinates)

    __hash__ = None

    def norm(self):
        return abs(self._coordinates)


def inner_product(left: Multivector, right: Multivector):
    left._check_compatible(right)
    if left.grade == 3:
        return left.coordinates * right.coordinates
    return left.coordinates.dot(right.coordinates)


def wedge(left: Multivector, right: Multivector) -> Multivector:
    check_same_frame(left.frame(), right.frame())
    frame = left.frame()
    grades = (left.grade, right.grade)
    if grades == (1, 1):
        return Bivector[frame](left.coordinates.cross(right.coordinates))
    if grades in ((1, 2), (2, 1)):
        return Trivector[frame](left.coordinates.dot(right.coordinates))
    check(False, "Wedge of grades %d and %d exceeds grade 3", *grades)


def commutator(left: Bivector, right: Bivector) -> Bivector:
    """Lie bracket of so(3), with bivectors as infinitesimal rotations."""
    check(left.grade == 2 and right.grade == 2, "The commutator is defined on bivectors")
    check_same_frame(left.frame(), right.frame())
    return Bivector[left.frame()](left.coordinates.cross(right.coordinates))


def _act(left: Multivector, right: Multivector) -> Multivector:
    check_same_frame(left.frame(), right.frame())
    frame = left.frame()
    grades = (left.grade, right.grade)
    if grades == (2, 1):
        return Vector[frame](left.coordinates.cross(right.coordinates))
    if grades == (1, 2):
        return Vector[frame](left.coordinates.cross(right.coordinates))
    if grades == (2, 3):
        return Vector[frame](left.coordinates * right.coordinates)
    if grades == (3, 2):
        return Vector[frame](left.coordinates * right.coordinates)
    if grades == (1, 3):
        return Bivector[frame](left.coordinates * right.coordinates)
    if grades == (3, 1):
        return Bivector[frame](left.coordinates * right.coordinates)
    check(False, "No product of grades %d and %d; use inner_product or wedge", *grades)
