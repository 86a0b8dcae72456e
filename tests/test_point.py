import astropy.units as u
import numpy as np
import pytest

from nbody_ephemeris.contracts import ContractViolation, FrameMismatch
from nbody_ephemeris.geometry.frames import Frame
from nbody_ephemeris.geometry.grassmann import Bivector, Vector
from nbody_ephemeris.geometry.point import Point, barycenter
from nbody_ephemeris.geometry.r3_element import R3Element


class World(Frame):
    pass


class Ship(Frame):
    pass


P = Point[World](R3Element(1.0, 2.0, 3.0))
Q = Point[World](R3Element(-4.0, 0.5, 1.0))


class TestPoint:

    def test_must_be_specialised(self):
        with pytest.raises(ContractViolation):
            Point(R3Element(0.0, 0.0, 0.0))

    def test_difference_is_a_vector(self):
        difference = P - Q
        assert type(difference) is Vector[World]
        assert difference == Vector[World](R3Element(5.0, 1.5, 2.0))

    def test_displacement_by_a_vector(self):
        displacement = Vector[World](R3Element(0.5, -1.0, 2.0))
        assert P + displacement == Point[World](R3Element(1.5, 1.0, 5.0))
        assert displacement + P == P + displacement
        assert P - displacement == Point[World](R3Element(0.5, 3.0, 1.0))
        assert Q + (P - Q) == P

    def test_points_do_not_add(self):
        with pytest.raises(TypeError):
            P + Q

    def test_only_vectors_displace(self):
        with pytest.raises(ContractViolation):
            P + Bivector[World](R3Element(1.0, 0.0, 0.0))

    def test_frames_must_match(self):
        with pytest.raises(FrameMismatch):
            P - Point[Ship](R3Element(0.0, 0.0, 0.0))
        with pytest.raises(FrameMismatch):
            P + Vector[Ship](R3Element(0.0, 0.0, 0.0))

    def test_origin(self):
        assert P - Point[World].origin() == Vector[World](R3Element(1.0, 2.0, 3.0))

    def test_equality_depends_on_frame(self):
        assert P == Point[World](R3Element(1.0, 2.0, 3.0))
        assert P != Point[Ship](R3Element(1.0, 2.0, 3.0))

    def test_quantities(self):
        p = Point[World](R3Element(1 * u.km, 0 * u.km, 0 * u.km))
        q = Point[World](R3Element(0 * u.km, 500 * u.m, 0 * u.km))
        difference = p - q
        np.testing.assert_allclose(difference.coordinates.coordinates.to_value(u.m),
                                   [1000.0, -500.0, 0.0])


class TestBarycenter:

    def test_two_points(self):
        center = barycenter([P, Q], [1.0, 3.0])
        np.testing.assert_allclose(center.coordinates.coordinates, [-2.75, 0.875, 1.5])

    def test_lies_on_the_segment(self):
        center = barycenter([P, Q], [2.0, 2.0])
        np.testing.assert_allclose((center - Q).coordinates.coordinates,
                                   0.5 * (P - Q).coordinates.coordinates)

    def test_single_point(self):
        assert barycenter([P], [7.0]) == P

    def test_quantity_weights(self):
        sun = Point[World](R3Element(0.0 * u.m, 0.0 * u.m, 0.0 * u.m))
        earth = Point[World](R3Element(1.5e11 * u.m, 0.0 * u.m, 0.0 * u.m))
        center = barycenter([sun, earth], [1.0 * u.M_sun, 1.0 * u.M_earth])
        ratio = (1.0 * u.M_earth / (1.0 * u.M_sun + 1.0 * u.M_earth)).decompose().value
        assert center.coordinates.x.to_value(u.m) == pytest.approx(1.5e11 * ratio, rel=1e-12)
        assert center.coordinates.x.unit == u.m

    def test_frames_must_match(self):
        with pytest.raises(FrameMismatch):
            barycenter([P, Point[Ship](R3Element(0.0, 0.0, 0.0))], [1.0, 1.0])

    def test_guards(self):
        with pytest.raises(ContractViolation):
            barycenter([], [])
        with pytest.raises(ContractViolation):
            barycenter([P, Q], [1.0])
        with pytest.raises(ContractViolation):
            barycenter([P, Q], [1.0, -1.0])
        with pytest.raises(ContractViolation):
            barycenter([P, Vector[World](R3Element(0.0, 0.0, 0.0))], [1.0, 1.0])
