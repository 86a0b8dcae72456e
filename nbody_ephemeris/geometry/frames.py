# nbody_ephemeris/geometry/frames.py
"""
Reference frames as type-level tags.

A frame is a marker class deriving from Frame, e.g.

    class World(Frame):
        pass

Frame-tagged classes (multivectors, linear maps, trajectories) are specialised
by subscription: Vector[World], Rotation[World, Body]. Each subscription
returns one cached subclass, so the frame belongs to the type of an object and
is never carried by the instance itself. Operations compare the classes of
their operands and raise FrameMismatch when the frames differ.
"""
from typing import Dict, Tuple

from nbody_ephemeris.contracts import check


class Frame:
    """Base class of all reference-frame tags. Never instantiated."""

    def __new__(cls, *args, **kwargs):
        check(False, "Frame %s is a type-level tag and cannot be instantiated", cls.__name__)


class FrameTagged:
    """
    Mixin for classes parameterised by `_frame_arity` frames.
    Unspecialised classes cannot be instantiated.
    """
    __slots__ = ()

    _frame_arity = 1
    _frames: Tuple[type, ...] = ()
    _generic = None

    _specialisations: Dict[tuple, type] = {}

    def __class_getitem__(cls, frames):
        if not isinstance(frames, tuple):
            frames = (frames,)
        check(not cls._frames, "%s is already specialised", cls.__name__)
        check(len(frames) == cls._frame_arity,
              "%s takes %d frame(s), got %d", cls.__name__, cls._frame_arity, len(frames))
        for frame in frames:
            check(isinstance(frame, type) and issubclass(frame, Frame),
                  "%r is not a Frame", frame)
        key = (cls, frames)
        specialised = FrameTagged._specialisations.get(key)
        if specialised is None:
            name = "%s[%s]" % (cls.__name__, ", ".join(f.__name__ for f in frames))
            specialised = type(name, (cls,), {
                "__module__": cls.__module__,
                "__qualname__": name,
                "__slots__": (),
                "_frames": frames,
                "_generic": cls,
            })
            FrameTagged._specialisations[key] = specialised
        return specialised

    def _check_specialised(self):
        check(bool(self._frames),
              "%s must be specialised with a frame before use, e.g. %s[World]",
              type(self).__name__, type(self).__name__)
