from typing import final

import binvec
from binvec import BitVector, Bits

from .coefficient import Coefficient
from .operators import QuantumOperator


@final
class PauliOperator(QuantumOperator):
    """Pauli operator on qubits in symplectic form.

    Position ``j`` carries X when only ``occupied_x[j]`` is set, Z when only
    ``occupied_z[j]`` is set and the product XZ when both are set.

    Examples:
        >>> left = PauliOperator("1010", "0100", Coefficient.PlusOne)
        >>> right = PauliOperator("0011", "0110", Coefficient.MinusI)
        >>> left * right
        PauliOperator(BitVector("1001"), BitVector("0010"), Coefficient.MinusI)
    """

    __slots__ = ()

    def _multiply_operator(self, other: "PauliOperator") -> "PauliOperator":
        return self._symplectic_product(other, self._coefficient * other._coefficient)

    def is_hermitian(self) -> bool:
        overlap = binvec.and_weight(self._occupied_x, self._occupied_z)
        # X and Z on one qubit multiply to iY (up to sign), so every overlapping position contributes a factor of i.
        return self._coefficient.is_real if overlap % 2 == 0 else self._coefficient.is_imaginary

    @classmethod
    def create_hermitian(cls, occupied_x: BitVector | Bits, occupied_z: BitVector | Bits) -> "PauliOperator":
        """Hermitian Pauli operator with the given occupations.

        The coefficient is ``PlusOne`` when X and Z overlap on an even number
        of qubits and ``PlusI`` otherwise.
        """
        operator = cls(occupied_x, occupied_z, Coefficient.PlusOne)
        if binvec.and_weight(operator._occupied_x, operator._occupied_z) % 2 == 0:
            return operator
        return operator._adopt(operator._occupied_x, operator._occupied_z, Coefficient.PlusI)
