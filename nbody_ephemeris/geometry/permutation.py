# nbody_ephemeris/geometry/permutation.py
"""
Permutations of the coordinate axes.

The six elements form the symmetric group on three axes. Composition, inverse,
determinant and the equivalent rotation are looked up in constant tables.
"""
from enum import Enum

import numpy as np

from nbody_ephemeris.contracts import check
from nbody_ephemeris.geometry.linear_map import LinearMap
from nbody_ephemeris.geometry.orthogonal_map import OrthogonalMap
from nbody_ephemeris.geometry.quaternion import Quaternion
from nbody_ephemeris.geometry.r3_element import R3Element
from nbody_ephemeris.geometry.rotation import Rotation
from nbody_ephemeris.geometry.sign import Sign


class CoordinatePermutation(Enum):
    """
    Named by the source axis of each output coordinate:
    YZX maps (x, y, z) to (y, z, x).
    """
    XYZ = (0, 1, 2)
    YZX = (1, 2, 0)
    ZXY = (2, 0, 1)
    XZY = (0, 2, 1)
    ZYX = (2, 1, 0)
    YXZ = (1, 0, 2)


XYZ = CoordinatePermutation.XYZ
YZX = CoordinatePermutation.YZX
ZXY = CoordinatePermutation.ZXY
XZY = CoordinatePermutation.XZY
ZYX = CoordinatePermutation.ZYX
YXZ = CoordinatePermutation.YXZ

_DETERMINANT = {
    XYZ: Sign(1),
    YZX: Sign(1),
    ZXY: Sign(1),
    XZY: Sign(-1),
    ZYX: Sign(-1),
    YXZ: Sign(-1),
}

_INVERSE = {
    XYZ: XYZ,
    YZX: ZXY,
    ZXY: YZX,
    XZY: XZY,
    ZYX: ZYX,
    YXZ: YXZ,
}

# Keys are in diagrammatic order: (right, left), right is applied first.
_MULTIPLICATION = {
    (XYZ, XYZ): XYZ,
    (XYZ, YZX): YZX,
    (XYZ, ZXY): ZXY,
    (XYZ, XZY): XZY,
    (XYZ, ZYX): ZYX,
    (XYZ, YXZ): YXZ,

    (YZX, XYZ): YZX,
    (YZX, YZX): ZXY,
    (YZX, ZXY): XYZ,
    (YZX, XZY): YXZ,
    (YZX, ZYX): XZY,
    (YZX, YXZ): ZYX,

    (ZXY, XYZ): ZXY,
    (ZXY, YZX): XYZ,
    (ZXY, ZXY): YZX,
    (ZXY, XZY): ZYX,
    (ZXY, ZYX): YXZ,
    (ZXY, YXZ): XZY,

    (XZY, XYZ): XZY,
    (XZY, YZX): ZYX,
    (XZY, ZXY): YXZ,
    (XZY, XZY): XYZ,
    (XZY, ZYX): YZX,
    (XZY, YXZ): ZXY,

    (ZYX, XYZ): ZYX,
    (ZYX, YZX): YXZ,
    (ZYX, ZXY): XZY,
    (ZYX, XZY): ZXY,
    (ZYX, ZYX): XYZ,
    (ZYX, YXZ): YZX,

    (YXZ, XYZ): YXZ,
    (YXZ, YZX): XZY,
    (YXZ, ZXY): ZYX,
    (YXZ, XZY): YZX,
    (YXZ, ZYX): ZXY,
    (YXZ, YXZ): XYZ,
}

_SQRT_HALF = float(np.sqrt(0.5))

# The rotation R such that the permutation is v -> R(det * v).
_QUATERNION = {
    XYZ: Quaternion(1.0, (0.0, 0.0, 0.0)),
    YZX: Quaternion(0.5, (-0.5, -0.5, -0.5)),
    ZXY: Quaternion(0.5, (0.5, 0.5, 0.5)),
    XZY: Quaternion(0.0, (0.0, -_SQRT_HALF, _SQRT_HALF)),
    ZYX: Quaternion(0.0, (-_SQRT_HALF, 0.0, _SQRT_HALF)),
    YXZ: Quaternion(0.0, (-_SQRT_HALF, _SQRT_HALF, 0.0)),
}


class Permutation(LinearMap):
    __slots__ = ("_coordinate_permutation",)

    def __init__(self, coordinate_permutation: CoordinatePermutation):
        self._check_specialised()
        check(isinstance(coordinate_permutation, CoordinatePermutation),
              "Not a coordinate permutation: %r", coordinate_permutation)
        self._coordinate_permutation = coordinate_permutation

    @classmethod
    def identity(cls) -> "Permutation":
        return cls(XYZ)

    @property
    def coordinate_permutation(self) -> CoordinatePermutation:
        return self._coordinate_permutation

    def determinant(self) -> Sign:
        return _DETERMINANT[self._coordinate_permutation]

    def inverse(self) -> "Permutation":
        return Permutation[self.to_frame(), self.from_frame()](
            _INVERSE[self._coordinate_permutation])

    def forget(self) -> OrthogonalMap:
        return OrthogonalMap[self.from_frame(), self.to_frame()](
            self.determinant(),
            Rotation[self.from_frame(), self.to_frame()](_QUATERNION[self._coordinate_permutation]))

    def apply_to_coordinates(self, r3_element: R3Element) -> R3Element:
        return R3Element.from_array(r3_element.coordinates[list(self._coordinate_permutation.value)])

    def _compose(self, right: "Permutation") -> "Permutation":
        return Permutation[right.from_frame(), self.to_frame()](
            _MULTIPLICATION[(right._coordinate_permutation, self._coordinate_permutation)])

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coordinate_permutation is other._coordinate_permutation

    def __hash__(self):
        return hash((type(self), self._coordinate_permutation))

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self._coordinate_permutation.name)
