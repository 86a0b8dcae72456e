# nbody_ephemeris/geometry/euclidean_transformation.py
from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.frames import FrameTagged
from nbody_ephemeris.geometry.grassmann import Multivector, Vector
from nbody_ephemeris.geometry.orthogonal_map import OrthogonalMap
from nbody_ephemeris.geometry.point import Point


class EuclideanTransformation(FrameTagged):
    """
    Rigid change of frame FromFrame -> ToFrame: q -> O(q) + t, with O an
    OrthogonalMap[FromFrame, ToFrame] and t a Vector[ToFrame] (the image of the
    origin of FromFrame).

    Points transform through the full affine map; multivectors are
    displacements and only see the linear part O.
    """
    __slots__ = ("_orthogonal_map", "_translation")
    _frame_arity = 2

    def __init__(self, orthogonal_map: OrthogonalMap, translation: Vector):
        self._check_specialised()
        check(isinstance(orthogonal_map, OrthogonalMap),
              "orthogonal_map must be an OrthogonalMap, got %r", orthogonal_map)
        check(isinstance(translation, Multivector) and translation.grade == 1,
              "translation must be a Vector, got %r", translation)
        check_same_frame(self.from_frame(), orthogonal_map.from_frame())
        check_same_frame(self.to_frame(), orthogonal_map.to_frame())
        check_same_frame(self.to_frame(), translation.frame())
        self._orthogonal_map = orthogonal_map
        self._translation = translation

    @classmethod
    def from_frame(cls):
        check(bool(cls._frames), "%s has no frames", cls.__name__)
        return cls._frames[0]

    @classmethod
    def to_frame(cls):
        check(bool(cls._frames), "%s has no frames", cls.__name__)
        return cls._frames[1]

    @classmethod
    def identity(cls) -> "EuclideanTransformation":
        to_frame = cls.to_frame()
        return cls(OrthogonalMap[cls.from_frame(), to_frame].identity(),
                   Vector[to_frame]([0.0, 0.0, 0.0]))

    @property
    def orthogonal_map(self) -> OrthogonalMap:
        return self._orthogonal_map

    @property
    def translation(self) -> Vector:
        return self._translation

    def __call__(self, argument):
        if isinstance(argument, Multivector):
            return self._orthogonal_map(argument)
        check(isinstance(argument, Point), "Cannot apply a Euclidean transformation to %r", argument)
        check_same_frame(self.from_frame(), argument.frame())
        return Point[self.to_frame()](
            self._orthogonal_map.apply_to_coordinates(argument.coordinates)
            + self._translation.coordinates)

    def inverse(self) -> "EuclideanTransformation":
        inverse_map = self._orthogonal_map.inverse()
        return EuclideanTransformation[self.to_frame(), self.from_frame()](
            inverse_map, -inverse_map(self._translation))

    def __mul__(self, right):
        """`self` applied after `right`."""
        if not isinstance(right, EuclideanTransformation):
            return NotImplemented
        check_same_frame(self.from_frame(), right.to_frame())
        return EuclideanTransformation[right.from_frame(), self.to_frame()](
            self._orthogonal_map * right._orthogonal_map,
            self._orthogonal_map(right._translation) + self._translation)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._orthogonal_map == other._orthogonal_map
                and self._translation == other._translation)

    __hash__ = None

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self._orthogonal_map, self._translation)
