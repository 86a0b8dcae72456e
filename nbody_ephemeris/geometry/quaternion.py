# nbody_ephemeris/geometry/quaternion.py
import numpy as np

from nbody_ephemeris.geometry.r3_element import R3Element


class Quaternion:
    """
    Real part + imaginary R3Element (dimensionless).
    """
    __slots__ = ("real_part", "imaginary_part")

    def __init__(self, real_part, imaginary_part=(0.0, 0.0, 0.0)):
        self.real_part = float(real_part)
        if not isinstance(imaginary_part, R3Element):
            imaginary_part = R3Element(*imaginary_part)
        self.imaginary_part = imaginary_part

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        a, u = self.real_part, self.imaginary_part
        b, v = other.real_part, other.imaginary_part
        return Quaternion(a * b - u.dot(v), a * v + b * u + u.cross(v))

    def __neg__(self):
        return Quaternion(-self.real_part, -self.imaginary_part)

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.real_part, -self.imaginary_part)

    def norm(self) -> float:
        return float(np.sqrt(self.real_part ** 2 + self.imaginary_part.dot(self.imaginary_part)))

    def normalized(self) -> "Quaternion":
        n = self.norm()
        return Quaternion(self.real_part / n, self.imaginary_part / n)

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.real_part == other.real_part and self.imaginary_part == other.imaginary_part

    __hash__ = None

    def __repr__(self):
        return "Quaternion(%r, %r)" % (self.real_part, self.imaginary_part)
