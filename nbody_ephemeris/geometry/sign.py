# nbody_ephemeris/geometry/sign.py
from nbody_ephemeris.serialization.messages import SignMessage


class Sign:
    """
    Something that can take the values -1 and +1, e.g. the determinant of an
    orthogonal map. Built from any scalar comparable to its own zero.
    """
    __slots__ = ("_negative",)

    # let Sign * ndarray / Quantity reach our reflected operators
    __array_ufunc__ = None

    def __init__(self, scalar):
        self._negative = bool(scalar < scalar * 0)

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def positive(self) -> bool:
        return not self._negative

    def __mul__(self, other):
        if isinstance(other, Sign):
            return Sign(-1 if self._negative != other._negative else 1)
        return -other if self._negative else other

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Sign):
            return NotImplemented
        return self._negative == other._negative

    def __hash__(self):
        return hash(self._negative)

    def __int__(self):
        return -1 if self._negative else 1

    def __repr__(self):
        return "-" if self._negative else "+"

    def write_to_message(self) -> SignMessage:
        return SignMessage(negative=self._negative)

    @classmethod
    def read_from_message(cls, message: SignMessage) -> "Sign":
        return cls(-1 if message.negative else 1)
