# nbody_ephemeris/physics/trajectory.py
from typing import Iterator, List, Tuple

from nbody_ephemeris.contracts import check, check_same_frame
from nbody_ephemeris.geometry.frames import FrameTagged
from nbody_ephemeris.geometry.instant import Instant
from nbody_ephemeris.physics.body import Body
from nbody_ephemeris.physics.degrees_of_freedom import DegreesOfFreedom


class Trajectory(FrameTagged):
    """
    Append-only, time-ordered degrees of freedom of one body, Trajectory[Frame](body).
    Not synchronised: one writer at a time, no reads while it is being extended.
    """
    def __init__(self, body: Body):
        self._check_specialised()
        self.body = body
        self._times: List[Instant] = []
        self._states: List[DegreesOfFreedom] = []

    @classmethod
    def frame(cls):
        check(bool(cls._frames), "%s has no frame", cls.__name__)
        return cls._frames[0]

    def append(self, time: Instant, degrees_of_freedom: DegreesOfFreedom) -> None:
        check_same_frame(self.frame(), degrees_of_freedom.frame())
        check(not self._times or time > self._times[-1],
              "Appending %r to a trajectory ending at %r", time, self.last_time() if self._times else None)
        self._times.append(time)
        self._states.append(degrees_of_freedom)

    def last_time(self) -> Instant:
        check(bool(self._times), "Empty trajectory for %r", self.body)
        return self._times[-1]

    def last(self) -> DegreesOfFreedom:
        check(bool(self._states), "Empty trajectory for %r", self.body)
        return self._states[-1]

    def times(self) -> List[Instant]:
        return list(self._times)

    def __len__(self):
        return len(self._times)

    def __iter__(self) -> Iterator[Tuple[Instant, DegreesOfFreedom]]:
        return iter(zip(self._times, self._states))

    def __getitem__(self, index) -> Tuple[Instant, DegreesOfFreedom]:
        return self._times[index], self._states[index]

    def __repr__(self):
        return "%s(%r, %d points)" % (type(self).__name__, self.body, len(self))
