# nbody_ephemeris/geometry/point.py
"""
Frame-tagged points of the affine space over the vectors of a frame.

Point[World] - Point[World] is a Vector[World]; a point moved by a vector is a
point. Points do not add to each other, but weighted averages of points are
points (see barycenter).
"""
from typing import Sequence

import astropy.units as u

from nbody_ephemeris.contracts import check, check_eq, check_same_frame
from nbody_ephemeris.geometry.frames import FrameTagged
from nbody_ephemeris.geometry.grassmann import Multivector, Vector
from nbody_ephemeris.geometry.r3_element import R3Element


class Point(FrameTagged):
    """
    Coordinates are taken from the origin of the frame.
    """
    __slots__ = ("_coordinates",)
    __array_ufunc__ = None

    def __init__(self, coordinates):
        self._check_specialised()
        if not isinstance(coordinates, R3Element):
            coordinates = R3Element.from_array(coordinates)
        self._coordinates = coordinates

    @classmethod
    def origin(cls) -> "Point":
        return cls(R3Element(0.0, 0.0, 0.0))

    @classmethod
    def frame(cls):
        check(bool(cls._frames), "%s has no frame", cls.__name__)
        return cls._frames[0]

    @property
    def coordinates(self) -> R3Element:
        return self._coordinates

    def _check_displacement(self, vector):
        check(vector.grade == 1, "Points are displaced by vectors, got grade %d", vector.grade)
        check_same_frame(self.frame(), vector.frame())

    def __add__(self, vector):
        if not isinstance(vector, Multivector):
            return NotImplemented
        self._check_displacement(vector)
        return type(self)(self._coordinates + vector.coordinates)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Point):
            check_same_frame(self.frame(), other.frame())
            return Vector[self.frame()](self._coordinates - other._coordinates)
        if isinstance(other, Multivector):
            self._check_displacement(other)
            return type(self)(self._coordinates - other.coordinates)
        return NotImplemented

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coordinates == other._coordinates

    __hash__ = None

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._coordinates)


def barycenter(points: Sequence[Point], weights: Sequence) -> Point:
    """
    The weighted average sum(w_i q_i) / sum(w_i).

    Weights may be floats or Quantities of one common dimension (masses,
    gravitational parameters); only their ratios matter.
    """
    check(len(points) > 0, "Barycenter of no points")
    check_eq(len(points), len(weights), "Number of weights")
    for point in points:
        check(isinstance(point, Point), "Not a point: %r", point)
    frame = points[0].frame()
    for point in points[1:]:
        check_same_frame(frame, point.frame())

    total = weights[0]
    for weight in weights[1:]:
        total = total + weight
    check(u.Quantity(total).value != 0, "Weights sum to zero")

    coordinates = None
    for point, weight in zip(points, weights):
        ratio = u.Quantity(weight / total).to_value(u.dimensionless_unscaled)
        term = point.coordinates * ratio
        coordinates = term if coordinates is None else coordinates + term
    return Point[frame](coordinates)
