from enum import Enum

from .errors import InvalidCoefficientError

_UNITS = (complex(1, 0), complex(0, 1), complex(-1, 0), complex(0, -1))
_SYMBOLS = ("+1", "+i", "-1", "-i")


class Coefficient(Enum):
    """Phase of a quantum operator, one of {+1, -1, +i, -i}.

    The four phases form the cyclic group Z4 under multiplication. Each member
    is stored as the exponent ``k`` in ``i**k``, so products and powers are
    exact integer arithmetic modulo 4.

    Examples:
        >>> Coefficient.PlusI * Coefficient.PlusI
        <Coefficient.MinusOne: 2>
        >>> Coefficient.PlusI ** 3
        <Coefficient.MinusI: 3>
        >>> Coefficient.from_complex(-1j)
        <Coefficient.MinusI: 3>
    """

    PlusOne = 0
    PlusI = 1
    MinusOne = 2
    MinusI = 3

    @staticmethod
    def from_exponent(exponent: int) -> "Coefficient":
        """The coefficient ``i**exponent``."""
        return Coefficient(exponent % 4)

    @staticmethod
    def from_complex(value: complex) -> "Coefficient":
        """Return the coefficient equal to ``value``.

        Args:
            value: Any number ``complex()`` accepts.

        Raises:
            InvalidCoefficientError: If ``value`` is not exactly 1, -1, 1j or -1j.
        """
        try:
            number = complex(value)
        except (TypeError, ValueError) as error:
            raise InvalidCoefficientError(value) from error
        for exponent, unit in enumerate(_UNITS):
            if number == unit:
                return Coefficient(exponent)
        raise InvalidCoefficientError(number)

    @property
    def exponent(self) -> int:
        """The value of ``k`` when ``self`` is written as ``i**k``."""
        return self.value

    @property
    def is_real(self) -> bool:
        return self.value % 2 == 0

    @property
    def is_imaginary(self) -> bool:
        return self.value % 2 == 1

    def to_complex(self) -> complex:
        return _UNITS[self.value]

    def power(self, exponent: int) -> "Coefficient":
        """Raise to an integer power; the exponent is reduced modulo 4 first."""
        return Coefficient((self.value * (exponent % 4)) % 4)

    def __mul__(self, other):
        if isinstance(other, Coefficient):
            return Coefficient((self.value + other.value) % 4)
        return NotImplemented

    def __pow__(self, exponent: int) -> "Coefficient":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> "Coefficient":
        return self * Coefficient.MinusOne

    def __complex__(self) -> complex:
        return self.to_complex()

    def __str__(self) -> str:
        return _SYMBOLS[self.value]


def to_complex(coefficient: Coefficient) -> complex:
    return coefficient.to_complex()


def from_complex(value: complex) -> Coefficient:
    return Coefficient.from_complex(value)


__all__ = ["Coefficient", "from_complex", "to_complex"]
