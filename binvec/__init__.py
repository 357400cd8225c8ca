"""Packed bit vectors with non-mutating popcount primitives."""

from ._words import WORD_BITS
from .bitvector import (
    Bits,
    BitVector,
    LengthMismatchError,
    MissingVectorError,
    and_weight,
    dot,
    exchange_parity,
    interleave,
    or_weight,
    value_equals,
    weight,
)

__all__ = [
    "WORD_BITS",
    "Bits",
    "BitVector",
    "LengthMismatchError",
    "MissingVectorError",
    "and_weight",
    "dot",
    "exchange_parity",
    "interleave",
    "or_weight",
    "value_equals",
    "weight",
]
