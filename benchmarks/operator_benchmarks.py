"""
Benchmarks for PauliOperator and MajoranaOperator, comparing Pauli products against Stim's PauliString.
"""

try:
    import stim
    HAS_STIM = True
except ImportError:
    HAS_STIM = False

from binvec import BitVector
from majorimer import Coefficient, MajoranaOperator, PauliOperator


def occupation_pattern(size, stride, offset=0):
    """Deterministic occupation with every ``stride``-th position set."""
    return BitVector.from_support(range(offset, size, stride), size)


def pauli_pattern(size, offset=0):
    """Generate a deterministic Pauli pattern string like 'IXYZIXYZ...'."""
    return "".join(["IXYZ"[(offset + j) % 4] for j in range(size)])


class OperatorInitialization:
    params = [[10, 1000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.occupied_x = occupation_pattern(size, 2)
        self.occupied_z = occupation_pattern(size, 3)

    def time_pauli_init(self, size):
        PauliOperator(self.occupied_x, self.occupied_z, Coefficient.PlusOne)

    def time_pauli_create_hermitian(self, size):
        PauliOperator.create_hermitian(self.occupied_x, self.occupied_z)

    def time_majorana_create_hermitian(self, size):
        MajoranaOperator.create_hermitian(self.occupied_x, self.occupied_z)


class OperatorMultiplication:
    params = [[10, 1000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.pauli_left = PauliOperator(occupation_pattern(size, 2), occupation_pattern(size, 3))
        self.pauli_right = PauliOperator(occupation_pattern(size, 5, 1), occupation_pattern(size, 7, 2))
        self.majorana_left = MajoranaOperator(occupation_pattern(size, 2), occupation_pattern(size, 3))
        self.majorana_right = MajoranaOperator(occupation_pattern(size, 5, 1), occupation_pattern(size, 7, 2))
        if HAS_STIM:
            self.stim_left = stim.PauliString(pauli_pattern(size))
            self.stim_right = stim.PauliString(pauli_pattern(size, 1))

    def time_pauli_multiply(self, size):
        _ = self.pauli_left * self.pauli_right

    def time_pauli_multiply_coefficient(self, size):
        _ = self.pauli_left * Coefficient.MinusI

    def time_majorana_multiply(self, size):
        _ = self.majorana_left * self.majorana_right

    def time_majorana_commutes_with(self, size):
        _ = self.majorana_left.commutes_with(self.majorana_right)

    if HAS_STIM:
        def time_pauli_multiply_stim(self, size):
            _ = self.stim_left * self.stim_right


class OperatorQueries:
    params = [[10, 1000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.pauli = PauliOperator(occupation_pattern(size, 2), occupation_pattern(size, 3))
        self.majorana = MajoranaOperator(occupation_pattern(size, 2), occupation_pattern(size, 3))

    def time_pauli_is_hermitian(self, size):
        self.pauli.is_hermitian()

    def time_majorana_is_hermitian(self, size):
        self.majorana.is_hermitian()

    def time_reduced_weight(self, size):
        _ = self.pauli.reduced_weight

    def time_dual(self, size):
        self.pauli.dual()

    def time_hash(self, size):
        hash(self.majorana)
