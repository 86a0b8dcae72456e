import astropy.units as u
import pytest
from astropy.time import Time

from nbody_ephemeris.contracts import ContractViolation
from nbody_ephemeris.geometry.instant import Instant
from nbody_ephemeris.serialization.messages import InstantMessage


class TestInstant:

    def test_default_is_j2000(self):
        assert Instant().seconds_from_j2000 == 0.0
        assert Instant().to_time().isot.startswith("2000-01-01T12:00:00")

    def test_difference_is_a_duration(self):
        difference = Instant(10.0) - Instant(4.0)
        assert difference.unit == u.s
        assert difference.value == 6.0

    def test_add_duration(self):
        assert Instant(1.0) + 2 * u.min == Instant(121.0)
        assert 3 * u.s + Instant(1.0) == Instant(4.0)
        assert Instant(5.0) - 1 * u.s == Instant(4.0)

    def test_plain_numbers_are_seconds(self):
        assert Instant(1.0) + 2.0 == Instant(3.0)

    def test_cannot_add_instants(self):
        with pytest.raises(ContractViolation):
            Instant(1.0) + Instant(2.0)

    def test_non_time_duration_fails(self):
        with pytest.raises(u.UnitConversionError):
            Instant(1.0) + 1 * u.m

    def test_ordering_and_hashing(self):
        assert Instant(1.0) < Instant(2.0) <= Instant(2.0)
        assert Instant(3.0) > Instant(2.0)
        assert len({Instant(1.0), Instant(1.0), Instant(2.0)}) == 2

    def test_astropy_time_round_trip(self):
        time = Time("2024-03-01T00:00:00", scale="tt")
        instant = Instant.from_time(time)
        assert instant.seconds_from_j2000 > 0
        assert abs((instant.to_time() - time).to_value(u.s)) < 1e-6

    def test_message_round_trip(self):
        instant = Instant(123456.789)
        wire = instant.write_to_message().model_dump_json()
        assert Instant.read_from_message(InstantMessage.model_validate_json(wire)) == instant
