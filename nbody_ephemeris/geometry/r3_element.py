# nbody_ephemeris/geometry/r3_element.py
import numpy as np
import astropy.units as u

from nbody_ephemeris.contracts import check


def _freeze(array):
    array.flags.writeable = False
    return array


def _stack(x, y, z):
    if any(isinstance(c, u.Quantity) for c in (x, y, z)):
        # converts to the unit of the first component, raises on incompatible dimensions
        return u.Quantity([x, y, z])
    return np.array([x, y, z], dtype=float)


class R3Element:
    """
    Frame-agnostic triple of scalars (floats or astropy Quantities).
    Vector space operations plus dot and cross products.
    """
    __slots__ = ("_coordinates",)

    # numpy scalars and Quantities must defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, x, y, z):
        self._coordinates = _freeze(_stack(x, y, z))

    @classmethod
    def from_array(cls, array) -> "R3Element":
        if isinstance(array, u.Quantity):
            coordinates = u.Quantity(array, copy=True)
        else:
            coordinates = np.array(array, dtype=float)
        check(coordinates.shape == (3,), "R3Element needs 3 coordinates, got shape %s", coordinates.shape)
        element = cls.__new__(cls)
        element._coordinates = _freeze(coordinates)
        return element

    @property
    def coordinates(self):
        return self._coordinates

    @property
    def x(self):
        return self._coordinates[0]

    @property
    def y(self):
        return self._coordinates[1]

    @property
    def z(self):
        return self._coordinates[2]

    def __getitem__(self, axis):
        check(axis in (0, 1, 2), "axis must be 0, 1 or 2, got %r", axis)
        return self._coordinates[axis]

    def __iter__(self):
        return iter(self._coordinates)

    def __add__(self, other):
        if not isinstance(other, R3Element):
            return NotImplemented
        return R3Element.from_array(self._coordinates + other._coordinates)

    def __sub__(self, other):
        if not isinstance(other, R3Element):
            return NotImplemented
        return R3Element.from_array(self._coordinates - other._coordinates)

    def __neg__(self):
        return R3Element.from_array(-self._coordinates)

    def __mul__(self, scalar):
        if isinstance(scalar, R3Element):
            return NotImplemented
        return R3Element.from_array(self._coordinates * scalar)

    def __rmul__(self, scalar):
        return R3Element.from_array(scalar * self._coordinates)

    def __truediv__(self, scalar):
        if isinstance(scalar, R3Element):
            return NotImplemented
        return R3Element.from_array(self._coordinates / scalar)

    def dot(self, other: "R3Element"):
        a, b = self._coordinates, other._coordinates
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

    def cross(self, other: "R3Element") -> "R3Element":
        a, b = self._coordinates, other._coordinates
        return R3Element(a[1] * b[2] - a[2] * b[1],
                         a[2] * b[0] - a[0] * b[2],
                         a[0] * b[1] - a[1] * b[0])

    def norm(self):
        return np.sqrt(self.dot(self))

    def __eq__(self, other):
        if not isinstance(other, R3Element):
            return NotImplemented
        a, b = self._coordinates, other._coordinates
        if isinstance(a, u.Quantity) != isinstance(b, u.Quantity):
            return False
        if isinstance(a, u.Quantity) and not a.unit.is_equivalent(b.unit):
            return False
        return bool(np.all(a == b))

    __hash__ = None

    def __repr__(self):
        return "R3Element(%s, %s, %s)" % (self.x, self.y, self.z)
