# nbody_ephemeris/physics/degrees_of_freedom.py
import astropy.units as u

from nbody_ephemeris.contracts import check_same_frame
from nbody_ephemeris.geometry.grassmann import Vector


class DegreesOfFreedom:
    """
    Position and velocity of a body, both Vectors of the same frame.
    """
    __slots__ = ("position", "velocity")

    def __init__(self, position: Vector, velocity: Vector):
        check_same_frame(position.frame(), velocity.frame())
        self.position = position
        self.velocity = velocity

    @classmethod
    def from_si(cls, frame, position_m, velocity_m_per_s) -> "DegreesOfFreedom":
        return cls(Vector[frame](u.Quantity(position_m, u.m)),
                   Vector[frame](u.Quantity(velocity_m_per_s, u.m / u.s)))

    def frame(self):
        return self.position.frame()

    def position_si(self):
        """Position coordinates as a float array in metres."""
        return u.Quantity(self.position.coordinates.coordinates, u.m).value

    def velocity_si(self):
        """Velocity coordinates as a float array in m/s."""
        return u.Quantity(self.velocity.coordinates.coordinates, u.m / u.s).value

    def __eq__(self, other):
        if not isinstance(other, DegreesOfFreedom):
            return NotImplemented
        return self.position == other.position and self.velocity == other.velocity

    __hash__ = None

    def __repr__(self):
        return "DegreesOfFreedom(%r, %r)" % (self.position, self.velocity)
