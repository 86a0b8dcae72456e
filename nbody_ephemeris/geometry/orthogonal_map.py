# nbody_ephemeris/geometry/orthogonal_map.py
from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.linear_map import LinearMap
from nbody_ephemeris.geometry.rotation import Rotation
from nbody_ephemeris.geometry.sign import Sign


class OrthogonalMap(LinearMap):
    """
    A rotoinversion: v -> R(det * v) with det = +/-1 and R a rotation.
    """
    __slots__ = ("_determinant", "_rotation")

    def __init__(self, determinant: Sign, rotation: Rotation):
        self._check_specialised()
        check(isinstance(determinant, Sign), "determinant must be a Sign, got %r", determinant)
        check(isinstance(rotation, Rotation), "rotation must be a Rotation, got %r", rotation)
        check_same_frame(self.from_frame(), rotation.from_frame())
        check_same_frame(self.to_frame(), rotation.to_frame())
        self._determinant = determinant
        self._rotation = rotation

    @classmethod
    def identity(cls) -> "OrthogonalMap":
        return cls(Sign(1), Rotation[cls.from_frame(), cls.to_frame()].identity())

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    def determinant(self) -> Sign:
        return self._determinant

    def inverse(self) -> "OrthogonalMap":
        return OrthogonalMap[self.to_frame(), self.from_frame()](
            self._determinant, self._rotation.inverse())

    def forget(self) -> "OrthogonalMap":
        return self

    def apply_to_coordinates(self, r3_element):
        return self._rotation.apply_to_coordinates(self._determinant * r3_element)

    def _compose(self, right: "OrthogonalMap") -> "OrthogonalMap":
        return OrthogonalMap[right.from_frame(), self.to_frame()](
            self._determinant * right._determinant,
            self._rotation * right._rotation)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._determinant == other._determinant and self._rotation == other._rotation

    __hash__ = None

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self._determinant, self._rotation)
