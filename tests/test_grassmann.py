import astropy.units as u
import numpy as np
import pytest

from nbody_ephemeris.contracts import ContractViolation, FrameMismatch
from nbody_ephemeris.geometry.frames import Frame
from nbody_ephemeris.geometry.grassmann import (
    Bivector,
    Trivector,
    Vector,
    commutator,
    inner_product,
    wedge,
)
from nbody_ephemeris.geometry.r3_element import R3Element


class World(Frame):
    pass


class Ship(Frame):
    pass


U = R3Element(3.0, -42.0, 0.0)
V = R3Element(-np.pi, -np.e, -1.0)
W = R3Element(2.0, 2.0, -np.sqrt(2.0))
A = R3Element(1.1, 0.25, -3.5)


def assert_close(left, right, rtol=1e-12):
    np.testing.assert_allclose(left.coordinates.coordinates, right.coordinates.coordinates,
                               rtol=rtol, atol=1e-10)


class TestR3Element:

    def test_accessors(self):
        assert (U.x, U.y, U.z) == (3.0, -42.0, 0.0)
        assert U[1] == -42.0
        with pytest.raises(ContractViolation):
            U[3]

    def test_immutable(self):
        with pytest.raises(ValueError):
            U.coordinates[0] = 1.0

    def test_cross_and_dot(self):
        assert R3Element(1, 0, 0).cross(R3Element(0, 1, 0)) == R3Element(0, 0, 1)
        assert U.dot(V) == pytest.approx(3.0 * -np.pi + 42.0 * np.e)
        assert U.cross(V).dot(U) == pytest.approx(0.0, abs=1e-12)

    def test_quantities_carry_dimension(self):
        position = R3Element(1 * u.m, 2 * u.m, 3 * u.m)
        velocity = R3Element(1 * u.m / u.s, 0 * u.m / u.s, 0 * u.m / u.s)
        assert position.cross(velocity).x.unit.is_equivalent(u.m ** 2 / u.s)
        assert position.dot(position) == 14 * u.m ** 2

    def test_sum_of_incompatible_dimensions_fails(self):
        position = R3Element(1 * u.m, 2 * u.m, 3 * u.m)
        duration = R3Element(1 * u.s, 2 * u.s, 3 * u.s)
        with pytest.raises(u.UnitConversionError):
            position + duration

    def test_wrong_shape(self):
        with pytest.raises(ContractViolation):
            R3Element.from_array([1.0, 2.0])


class TestMultivectors:

    def test_unspecialised_class_cannot_be_instantiated(self):
        with pytest.raises(ContractViolation):
            Vector(U)

    def test_specialisation_is_cached(self):
        assert Vector[World] is Vector[World]
        assert Vector[World] is not Vector[Ship]
        assert Vector[World].frame() is World

    def test_frames_cannot_be_instantiated(self):
        with pytest.raises(ContractViolation):
            World()

    def test_only_frames_specialise(self):
        with pytest.raises(ContractViolation):
            Vector[int]
        with pytest.raises(ContractViolation):
            Vector[World, Ship]

    def test_vector_space(self):
        a = Vector[World](U)
        b = Vector[World](V)
        assert a + b == Vector[World](U + V)
        assert a - b == Vector[World](U - V)
        assert -a == Vector[World](-U)
        assert 2.0 * a == a + a
        assert a * 2.0 == a + a
        assert (a + a) / 2.0 == a

    def test_mixing_frames_fails(self):
        with pytest.raises(FrameMismatch):
            Vector[World](U) + Vector[Ship](V)
        with pytest.raises(FrameMismatch):
            wedge(Vector[World](U), Vector[Ship](V))
        with pytest.raises(FrameMismatch):
            Bivector[World](U) * Vector[Ship](V)

    def test_mixing_grades_fails(self):
        with pytest.raises(ContractViolation):
            Vector[World](U) + Bivector[World](U)

    def test_frame_mismatch_is_an_assertion(self):
        assert issubclass(FrameMismatch, ContractViolation)
        assert issubclass(ContractViolation, AssertionError)

    def test_wedge_is_antisymmetric(self):
        a = Vector[World](U)
        b = Vector[World](V)
        assert wedge(a, b) == -wedge(b, a)
        assert isinstance(wedge(a, b), Bivector[World])

    def test_wedge_of_vector_and_bivector_commutes(self):
        a = Vector[World](U)
        beta = Bivector[World](V)
        assert wedge(a, beta) == wedge(beta, a)
        assert isinstance(wedge(a, beta), Trivector[World])

    def test_wedge_beyond_grade_three_fails(self):
        with pytest.raises(ContractViolation):
            wedge(Bivector[World](U), Bivector[World](V))
        with pytest.raises(ContractViolation):
            wedge(Trivector[World](1.0), Vector[World](V))

    def test_lagrange_identity(self):
        # a x (b x c) = b (a . c) - c (a . b)
        a = Vector[World](U)
        beta = Bivector[World](V)
        gamma = Bivector[World](W)
        assert_close(a * commutator(beta, gamma),
                     beta * wedge(a, gamma) - gamma * wedge(a, beta))
        assert_close(commutator(beta, gamma) * a,
                     wedge(a, beta) * gamma - beta * wedge(a, gamma))

    def test_vector_times_trivector(self):
        a = Vector[World](U)
        b = Vector[World](V)
        gamma = Bivector[World](W)
        product = a * wedge(b, gamma)
        assert isinstance(product, Bivector[World])
        assert_close(product, wedge(gamma, b) * a)

    def test_jacobi_identity(self):
        alpha = Bivector[World](U)
        beta = Bivector[World](V)
        gamma = Bivector[World](W)
        total = (commutator(alpha, commutator(beta, gamma)) +
                 commutator(beta, commutator(gamma, alpha)) +
                 commutator(gamma, commutator(alpha, beta)))
        np.testing.assert_allclose(total.coordinates.coordinates, 0.0, atol=1e-9)

    def test_inner_product(self):
        assert inner_product(Vector[World](U), Vector[World](V)) == pytest.approx(U.dot(V))
        assert inner_product(Trivector[World](2.0), Trivector[World](3.0)) == 6.0
        with pytest.raises(ContractViolation):
            inner_product(Vector[World](U), Bivector[World](V))

    def test_angular_momentum_dimension(self):
        r = Vector[World](R3Element(1 * u.m, 0 * u.m, 0 * u.m))
        v = Vector[World](R3Element(0 * u.m / u.s, 2 * u.m / u.s, 0 * u.m / u.s))
        h = wedge(r, v)
        assert isinstance(h, Bivector[World])
        assert h.coordinates.z == 2 * u.m ** 2 / u.s
        assert h.norm().unit.is_equivalent(u.m ** 2 / u.s)

    def test_trivector_has_one_coordinate(self):
        with pytest.raises(ContractViolation):
            Trivector[World](U)
        assert Trivector[World](-3.0).norm() == 3.0
