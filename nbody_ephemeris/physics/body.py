# nbody_ephemeris/physics/body.py
import astropy.units as u
from astropy.constants import G

from nbody_ephemeris.contracts import check

GRAVITATIONAL_PARAMETER_UNIT = u.m ** 3 / u.s ** 2


class Body:
    """
    Base body. Only what gravity needs is modelled here.
    """
    def __init__(self, name: str = "body"):
        self.name = name

    @property
    def is_massless(self) -> bool:
        raise NotImplementedError

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.name)


class MasslessBody(Body):
    """Feels gravity, sources none (vessels, test particles)."""

    @property
    def is_massless(self) -> bool:
        return True


class MassiveBody(Body):
    """
    gravitational_parameter: GM, a Quantity in m^3/s^2 (plain numbers are read as SI).
    """
    def __init__(self, gravitational_parameter, name: str = "body"):
        super().__init__(name)
        mu = u.Quantity(gravitational_parameter, GRAVITATIONAL_PARAMETER_UNIT)
        check(mu.value > 0, "Gravitational parameter must be positive, got %s", mu)
        self.gravitational_parameter = mu

    @classmethod
    def from_mass(cls, mass, name: str = "body") -> "MassiveBody":
        return cls((G * u.Quantity(mass, u.kg)).to(GRAVITATIONAL_PARAMETER_UNIT), name=name)

    @property
    def is_massless(self) -> bool:
        return False

    def __repr__(self):
        return "MassiveBody(%r, mu=%s)" % (self.name, self.gravitational_parameter)
