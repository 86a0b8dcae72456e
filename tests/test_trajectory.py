import astropy.units as u
import numpy as np
import pytest

from nbody_ephemeris.contracts import ContractViolation, FrameMismatch
from nbody_ephemeris.geometry.frames import Frame
from nbody_ephemeris.geometry.grassmann import Vector
from nbody_ephemeris.geometry.instant import Instant
from nbody_ephemeris.geometry.r3_element import R3Element
from nbody_ephemeris.physics.body import MassiveBody, MasslessBody
from nbody_ephemeris.physics.degrees_of_freedom import DegreesOfFreedom
from nbody_ephemeris.physics.trajectory import Trajectory


class World(Frame):
    pass


class Other(Frame):
    pass


def at_rest(frame=World):
    return DegreesOfFreedom.from_si(frame, [1.0, 2.0, 3.0], [0.0, 0.0, 0.0])


class TestBodies:

    def test_plain_numbers_are_si(self):
        body = MassiveBody(3.986004418e14)
        assert body.gravitational_parameter.unit == u.m ** 3 / u.s ** 2
        assert not body.is_massless

    def test_converts_units(self):
        body = MassiveBody(398600.4418 * u.km ** 3 / u.s ** 2)
        assert body.gravitational_parameter.value == pytest.approx(3.986004418e14)

    def test_from_mass(self):
        earth = MassiveBody.from_mass(5.9722e24 * u.kg, name="Earth")
        assert earth.gravitational_parameter.value == pytest.approx(3.986e14, rel=1e-3)
        assert earth.name == "Earth"

    def test_gravitational_parameter_must_be_positive(self):
        with pytest.raises(ContractViolation):
            MassiveBody(-1.0)
        with pytest.raises(u.UnitConversionError):
            MassiveBody(1.0 * u.kg)

    def test_massless(self):
        assert MasslessBody("test particle").is_massless


class TestDegreesOfFreedom:

    def test_from_si(self):
        dof = DegreesOfFreedom.from_si(World, [1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        assert dof.frame() is World
        assert dof.position.coordinates.x.unit == u.m
        assert dof.velocity.coordinates.z.unit == u.m / u.s
        np.testing.assert_array_equal(dof.velocity_si(), [4.0, 5.0, 6.0])

    def test_si_conversion(self):
        dof = DegreesOfFreedom(Vector[World](R3Element(1 * u.km, 0 * u.km, 0 * u.km)),
                               Vector[World](R3Element(1 * u.km / u.s, 0 * u.km / u.s, 0 * u.km / u.s)))
        np.testing.assert_allclose(dof.position_si(), [1000.0, 0.0, 0.0])
        np.testing.assert_allclose(dof.velocity_si(), [1000.0, 0.0, 0.0])

    def test_frames_must_match(self):
        with pytest.raises(FrameMismatch):
            DegreesOfFreedom(Vector[World](R3Element(1.0, 2.0, 3.0)), Vector[Other](R3Element(1.0, 2.0, 3.0)))


class TestTrajectory:

    def test_must_be_specialised(self):
        with pytest.raises(ContractViolation):
            Trajectory(MasslessBody())

    def test_append_in_order(self):
        trajectory = Trajectory[World](MasslessBody())
        assert len(trajectory) == 0
        trajectory.append(Instant(0.0), at_rest())
        trajectory.append(Instant(1.0), at_rest())
        assert len(trajectory) == 2
        assert trajectory.last_time() == Instant(1.0)
        assert trajectory.times() == [Instant(0.0), Instant(1.0)]
        assert [t for t, _ in trajectory] == [Instant(0.0), Instant(1.0)]

    def test_time_must_increase(self):
        trajectory = Trajectory[World](MasslessBody())
        trajectory.append(Instant(1.0), at_rest())
        with pytest.raises(ContractViolation):
            trajectory.append(Instant(1.0), at_rest())
        with pytest.raises(ContractViolation):
            trajectory.append(Instant(0.5), at_rest())

    def test_frame_must_match(self):
        trajectory = Trajectory[World](MasslessBody())
        with pytest.raises(FrameMismatch):
            trajectory.append(Instant(0.0), at_rest(Other))

    def test_empty(self):
        trajectory = Trajectory[World](MasslessBody())
        with pytest.raises(ContractViolation):
            trajectory.last()
        with pytest.raises(ContractViolation):
            trajectory.last_time()
