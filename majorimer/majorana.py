from typing import final

import binvec
from binvec import BitVector, Bits

from .coefficient import Coefficient
from .operators import QuantumOperator


def _transposition_parity(weight: int) -> int:
    # Reversing a product of ``weight`` anticommuting factors takes weight * (weight - 1) / 2 swaps.
    return (weight * (weight - 1) // 2) % 2


@final
class MajoranaOperator(QuantumOperator):
    """Product of Majorana operators on fermionic modes.

    Mode ``j`` contributes the γ operator when ``occupied_x[j]`` is set and the
    γ' operator when ``occupied_z[j]`` is set. Factors are normal ordered as
    γ0, γ'0, γ1, γ'1, ... so products pick up the sign of reordering.

    Examples:
        >>> left = MajoranaOperator("0", "1", Coefficient.PlusI)
        >>> right = MajoranaOperator("1", "0", Coefficient.PlusOne)
        >>> (left * right).coefficient
        <Coefficient.MinusI: 3>
    """

    __slots__ = ()

    def _multiply_operator(self, other: "MajoranaOperator") -> "MajoranaOperator":
        coefficient = self._coefficient * other._coefficient
        if binvec.exchange_parity(self.zipped_occupations(), other.zipped_occupations()):
            coefficient = coefficient * Coefficient.MinusOne
        return self._symplectic_product(other, coefficient)

    def is_hermitian(self) -> bool:
        if _transposition_parity(self.weight) == 0:
            return self._coefficient.is_real
        return self._coefficient.is_imaginary

    def commutes_with(self, other: "MajoranaOperator") -> bool:
        """Check whether this operator commutes with another Majorana operator.

        Raises:
            OperatorTypeMismatchError: If ``other`` is not a MajoranaOperator.
            LengthMismatchError: If the operators act on different numbers of modes.
        """
        self._require_same_kind(other)
        overlap_x = binvec.and_weight(self._occupied_x, other._occupied_x)
        overlap_z = binvec.and_weight(self._occupied_z, other._occupied_z)
        return (overlap_x + overlap_z + self.weight * other.weight) % 2 == 0

    @classmethod
    def create_hermitian(cls, occupied_x: BitVector | Bits, occupied_z: BitVector | Bits) -> "MajoranaOperator":
        """Hermitian Majorana operator with the given occupations.

        The coefficient is ``PlusOne`` when ``w(w-1)/2`` is even for the total
        weight ``w`` and ``PlusI`` otherwise.
        """
        operator = cls(occupied_x, occupied_z, Coefficient.PlusOne)
        if _transposition_parity(operator.weight) == 0:
            return operator
        return operator._adopt(operator._occupied_x, operator._occupied_z, Coefficient.PlusI)
