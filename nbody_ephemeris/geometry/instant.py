# nbody_ephemeris/geometry/instant.py
from __future__ import annotations

import functools

import astropy.units as u
from astropy.time import Time

from nbody_ephemeris.config.settings import J2000_EPOCH, TIME_SCALE
from nbody_ephemeris.contracts import check
from nbody_ephemeris.serialization.messages import InstantMessage
from nbody_ephemeris.serialization.quantities import read_quantity, write_quantity


def _seconds(duration) -> float:
    # plain numbers are read as seconds; Quantities must have a time dimension
    return float(u.Quantity(duration, u.s).value)


@functools.total_ordering
class Instant:
    """
    A point on the time line, stored as seconds from J2000 (TT).
    Instant - Instant is a duration (astropy Quantity in s), Instant + duration
    is an Instant.
    """
    __slots__ = ("_seconds_from_j2000",)

    # Quantity + Instant must reach __radd__
    __array_ufunc__ = None

    def __init__(self, seconds_from_j2000=0.0):
        self._seconds_from_j2000 = _seconds(seconds_from_j2000)

    @classmethod
    def from_time(cls, time: Time) -> "Instant":
        epoch = Time(J2000_EPOCH, scale=TIME_SCALE)
        return cls((getattr(time, TIME_SCALE) - epoch).to(u.s))

    def to_time(self) -> Time:
        return Time(J2000_EPOCH, scale=TIME_SCALE) + self._seconds_from_j2000 * u.s

    @property
    def seconds_from_j2000(self) -> float:
        return self._seconds_from_j2000

    def __sub__(self, other):
        if isinstance(other, Instant):
            return (self._seconds_from_j2000 - other._seconds_from_j2000) * u.s
        return Instant(self._seconds_from_j2000 - _seconds(other))

    def __add__(self, duration):
        check(not isinstance(duration, Instant), "Cannot add two instants")
        return Instant(self._seconds_from_j2000 + _seconds(duration))

    __radd__ = __add__

    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds_from_j2000 == other._seconds_from_j2000

    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds_from_j2000 < other._seconds_from_j2000

    def __hash__(self):
        return hash(self._seconds_from_j2000)

    def __repr__(self):
        return "Instant(J2000 + %r s)" % self._seconds_from_j2000

    def write_to_message(self) -> InstantMessage:
        return InstantMessage(scalar=write_quantity(self._seconds_from_j2000 * u.s))

    @classmethod
    def read_from_message(cls, message: InstantMessage) -> "Instant":
        return cls(read_quantity(message.scalar))
