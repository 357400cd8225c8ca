"""Shared representation of symplectic quantum operators.

An operator on ``N`` qubits or fermionic modes is a pair of length-``N`` bit
vectors, the X and Z occupations, together with a :class:`Coefficient`.
Operators are values: every transformation returns a new instance and the
stored occupations are private copies that are never written after
construction.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar

import binvec
from binvec import BitVector, Bits, LengthMismatchError, MissingVectorError

from .coefficient import Coefficient
from .errors import OperatorTypeMismatchError

logger = logging.getLogger(__name__)

DEFAULT_COEFFICIENT = Coefficient.PlusI

OperatorT = TypeVar("OperatorT", bound="QuantumOperator")


def _owned_vector(bits: Optional[Bits], name: str) -> BitVector:
    if bits is None:
        logger.debug("rejected operator construction: %s is None", name)
        raise MissingVectorError(f"{name} must not be None")
    if isinstance(bits, BitVector):
        return bits.copy()
    return BitVector(bits)


class QuantumOperator(ABC):
    """Coefficient times a product of X-type and Z-type factors.

    Subclasses fix the algebra: :class:`~majorimer.PauliOperator` for qubits
    and :class:`~majorimer.MajoranaOperator` for fermionic modes. The two
    never interoperate; pairwise operations raise
    :class:`OperatorTypeMismatchError` on mixed operands.
    """

    __slots__ = ("_occupied_x", "_occupied_z", "_coefficient")

    def __init__(
        self,
        occupied_x: BitVector | Bits,
        occupied_z: BitVector | Bits,
        coefficient: Coefficient = DEFAULT_COEFFICIENT,
    ) -> None:
        """Create an operator from its occupations.

        Args:
            occupied_x: Positions carrying an X-type factor.
            occupied_z: Positions carrying a Z-type factor.
            coefficient: Overall phase, ``Coefficient.PlusI`` by default.

        Raises:
            MissingVectorError: If an occupation is None.
            LengthMismatchError: If the occupations differ in length.
            TypeError: If ``coefficient`` is not a Coefficient.
        """
        x = _owned_vector(occupied_x, "occupied_x")
        z = _owned_vector(occupied_z, "occupied_z")
        if len(x) != len(z):
            logger.debug("rejected operator construction: occupation lengths %d and %d", len(x), len(z))
            raise LengthMismatchError(len(x), len(z))
        if not isinstance(coefficient, Coefficient):
            raise TypeError(f"coefficient must be a Coefficient, got {type(coefficient).__name__}")
        self._occupied_x = x
        self._occupied_z = z
        self._coefficient = coefficient

    @classmethod
    def _adopt(cls: type[OperatorT], occupied_x: BitVector, occupied_z: BitVector, coefficient: Coefficient) -> OperatorT:
        # Takes ownership of freshly built vectors without copying them again.
        operator = cls.__new__(cls)
        operator._occupied_x = occupied_x
        operator._occupied_z = occupied_z
        operator._coefficient = coefficient
        return operator

    @property
    def occupied_x(self) -> BitVector:
        """Copy of the X occupation."""
        return self._occupied_x.copy()

    @property
    def occupied_z(self) -> BitVector:
        """Copy of the Z occupation."""
        return self._occupied_z.copy()

    @property
    def coefficient(self) -> Coefficient:
        return self._coefficient

    @property
    def size(self) -> int:
        """Number of qubits or modes."""
        return len(self._occupied_x)

    @property
    def weight(self) -> int:
        """Number of X and Z factors, counting both on one position separately."""
        return binvec.weight(self._occupied_x) + binvec.weight(self._occupied_z)

    @property
    def reduced_weight(self) -> int:
        """Number of positions acted on non-trivially."""
        return binvec.or_weight(self._occupied_x, self._occupied_z)

    def zipped_occupations(self) -> BitVector:
        """X and Z occupations interleaved as X0, Z0, X1, Z1, ...

        For example X = 101 and Z = 010 zip to 100110.
        """
        return binvec.interleave(self._occupied_x, self._occupied_z)

    def _require_same_kind(self, other: object) -> None:
        if type(other) is not type(self):
            logger.debug("rejected %s operand for %s", type(other).__name__, type(self).__name__)
            raise OperatorTypeMismatchError(type(self), other)

    def _symplectic_product(self: OperatorT, other: OperatorT, coefficient: Coefficient) -> OperatorT:
        return self._adopt(
            self._occupied_x ^ other._occupied_x,
            self._occupied_z ^ other._occupied_z,
            coefficient,
        )

    def multiply(self: OperatorT, other: "OperatorT | Coefficient") -> OperatorT:
        """Multiply by another operator of the same kind at its right, or by a coefficient.

        ``a.multiply(b)`` is ``a @ b`` in mathematical notation.

        Raises:
            OperatorTypeMismatchError: If ``other`` is an operator of another kind.
            LengthMismatchError: If the operators act on different sizes.
        """
        if isinstance(other, Coefficient):
            return self._adopt(self._occupied_x.copy(), self._occupied_z.copy(), self._coefficient * other)
        self._require_same_kind(other)
        return self._multiply_operator(other)

    @abstractmethod
    def _multiply_operator(self: OperatorT, other: OperatorT) -> OperatorT: ...

    @abstractmethod
    def is_hermitian(self) -> bool:
        """True if the operator equals its own conjugate transpose."""

    def negate(self: OperatorT) -> OperatorT:
        """The same as multiplying by ``Coefficient.MinusOne``."""
        return self.multiply(Coefficient.MinusOne)

    def dual(self: OperatorT) -> OperatorT:
        """Swap the roles of the X and Z occupations."""
        return self._adopt(self._occupied_z.copy(), self._occupied_x.copy(), self._coefficient)

    def clone(self: OperatorT) -> OperatorT:
        return self._adopt(self._occupied_x.copy(), self._occupied_z.copy(), self._coefficient)

    copy = clone

    def __mul__(self, other):
        if isinstance(other, (QuantumOperator, Coefficient)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Coefficient):
            return self.multiply(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, QuantumOperator):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self: OperatorT) -> OperatorT:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantumOperator):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return (
            binvec.value_equals(self._occupied_x, other._occupied_x)
            and binvec.value_equals(self._occupied_z, other._occupied_z)
            and self._coefficient is other._coefficient
        )

    def __hash__(self) -> int:
        return hash(
            (
                type(self).__name__,
                self.size,
                self._occupied_x._to_bytes(),
                self._occupied_z._to_bytes(),
                self._coefficient,
            )
        )

    def __str__(self) -> str:
        return f"{self._coefficient}{self._occupied_x}{self._occupied_z}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._occupied_x!r}, {self._occupied_z!r}, "
            f"Coefficient.{self._coefficient.name})"
        )
