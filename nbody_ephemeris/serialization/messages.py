# nbody_ephemeris/serialization/messages.py
"""
Persisted-state messages owned by the core.

Messages are frozen pydantic models; the wire form is the JSON produced by
`model_dump_json()` and read back with `model_validate_json()`.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class QuantityMessage(BaseModel):
    """A dimensioned scalar: magnitude expressed in `unit` (astropy unit string)."""

    unit: str = Field(..., description="astropy unit string, '' for dimensionless")
    magnitude: float

    model_config = {"frozen": True}


class SignMessage(BaseModel):
    negative: bool

    model_config = {"frozen": True}


class InstantMessage(BaseModel):
    """Time elapsed since J2000 (TT)."""

    scalar: QuantityMessage

    model_config = {"frozen": True}


class CoefficientMessage(BaseModel):
    """
    One Chebyshev coefficient, either a plain number or a dimensioned quantity.
    Exactly one of `double` and `quantity` is set.
    """

    double: Optional[float] = None
    quantity: Optional[QuantityMessage] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def exactly_one_encoding(self) -> "CoefficientMessage":
        if (self.double is None) == (self.quantity is None):
            raise ValueError("exactly one of 'double' and 'quantity' must be set")
        return self


class ChebyshevSeriesMessage(BaseModel):
    coefficient: List[CoefficientMessage] = Field(..., min_length=1)
    t_min: InstantMessage
    t_max: InstantMessage

    model_config = {"frozen": True}
