# nbody_ephemeris/serialization/quantities.py
"""
The single quantity-or-double serializer used for every numeric value the core
persists. Plain numbers round-trip as floats, astropy Quantities keep their unit.
"""
import astropy.units as u

from nbody_ephemeris.serialization.messages import CoefficientMessage, QuantityMessage


def write_quantity(value: u.Quantity) -> QuantityMessage:
    return QuantityMessage(unit=value.unit.to_string(), magnitude=float(value.value))


def read_quantity(message: QuantityMessage) -> u.Quantity:
    return message.magnitude * u.Unit(message.unit)


def write_quantity_or_double(value) -> CoefficientMessage:
    if isinstance(value, u.Quantity):
        return CoefficientMessage(quantity=write_quantity(value))
    return CoefficientMessage(double=float(value))


def read_quantity_or_double(message: CoefficientMessage):
    if message.quantity is not None:
        return read_quantity(message.quantity)
    return message.double
