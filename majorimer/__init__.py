"""Pauli and Majorana operator algebra in symplectic form."""

from .coefficient import Coefficient, from_complex, to_complex
from .errors import (
    InvalidCoefficientError,
    LengthMismatchError,
    MissingVectorError,
    OperatorTypeMismatchError,
)
from .majorana import MajoranaOperator
from .operators import DEFAULT_COEFFICIENT, QuantumOperator
from .pauli import PauliOperator

__all__ = [
    "Coefficient",
    "DEFAULT_COEFFICIENT",
    "InvalidCoefficientError",
    "LengthMismatchError",
    "MajoranaOperator",
    "MissingVectorError",
    "OperatorTypeMismatchError",
    "PauliOperator",
    "QuantumOperator",
    "from_complex",
    "to_complex",
]
