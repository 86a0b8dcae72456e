# nbody_ephemeris/geometry/linear_map.py
from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.frames import FrameTagged
from nbody_ephemeris.geometry.grassmann import Bivector, Multivector, Trivector, Vector


class LinearMap(FrameTagged):
    """
    Base linear map FromFrame -> ToFrame, specialised as Map[FromFrame, ToFrame].

    Subclasses provide determinant(), inverse(), forget(),
    apply_to_coordinates() and _compose() (composition within the family).
    Vectors transform through the coordinate action; bivectors and trivectors
    are pseudo-vectors and additionally pick up the determinant.
    """
    __slots__ = ()
    _frame_arity = 2

    @classmethod
    def from_frame(cls):
        check(bool(cls._frames), "%s has no frames", cls.__name__)
        return cls._frames[0]

    @classmethod
    def to_frame(cls):
        check(bool(cls._frames), "%s has no frames", cls.__name__)
        return cls._frames[1]

    def determinant(self):
        raise NotImplementedError

    def inverse(self) -> "LinearMap":
        raise NotImplementedError

    def forget(self):
        """The equivalent OrthogonalMap."""
        raise NotImplementedError

    def apply_to_coordinates(self, r3_element):
        raise NotImplementedError

    def _compose(self, right: "LinearMap") -> "LinearMap":
        raise NotImplementedError

    def __call__(self, multivector: Multivector) -> Multivector:
        check(isinstance(multivector, Multivector), "Cannot apply a linear map to %r", multivector)
        check_same_frame(self.from_frame(), multivector.frame())
        to_frame = self.to_frame()
        if multivector.grade == 1:
            return Vector[to_frame](self.apply_to_coordinates(multivector.coordinates))
        if multivector.grade == 2:
            return Bivector[to_frame](
                self.determinant() * self.apply_to_coordinates(multivector.coordinates))
        return Trivector[to_frame](self.determinant() * multivector.coordinates)

    def __mul__(self, right):
        """`self` applied after `right`: (Through -> To) * (From -> Through)."""
        if not isinstance(right, LinearMap):
            return NotImplemented
        check_same_frame(self.from_frame(), right.to_frame())
        if self._generic is right._generic:
            return self._compose(right)
        return self.forget()._compose(right.forget())
