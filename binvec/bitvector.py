from typing import Iterable, Iterator, Literal, Optional, overload

import numpy as np

from . import _words
from ._words import WORD_BITS

Bits = str | Iterable[bool | Literal[0, 1]]


class MissingVectorError(TypeError):
    """Raised when a bit vector argument is ``None``."""


class LengthMismatchError(ValueError):
    """Raised when two bit vectors in one operation differ in length."""

    def __init__(self, left_length: int, right_length: int) -> None:
        super().__init__(
            f"bit vectors must have the same length, got {left_length} and {right_length}"
        )
        self.left_length = left_length
        self.right_length = right_length


def _bools_from(bits: Bits) -> np.ndarray:
    if isinstance(bits, BitVector):
        return bits.to_numpy()
    if isinstance(bits, np.ndarray) and bits.dtype == np.bool_:
        return np.ascontiguousarray(bits.ravel())
    if isinstance(bits, str):
        if any(character not in "01" for character in bits):
            raise ValueError(f"bit strings may only contain '0' and '1', got {bits!r}")
        return np.fromiter((character == "1" for character in bits), dtype=bool, count=len(bits))
    values = []
    for value in bits:
        if value is True or value is False or isinstance(value, np.bool_):
            values.append(bool(value))
        elif isinstance(value, (int, np.integer)) and value in (0, 1):
            values.append(value == 1)
        else:
            raise ValueError(f"bits must be booleans or 0/1, got {value!r}")
    return np.array(values, dtype=bool)


class BitVector:
    """Compact bit vector packed into 64-bit words.

    BitVector stores a fixed-length sequence of bits and provides popcount
    based primitives (weight, AND/OR weight, GF(2) dot product, exchange
    parity) that never modify their operands. It is the occupation storage
    of every operator in ``majorimer``.

    Examples:
        >>> v = BitVector("1010")
        >>> v.weight
        2
        >>> v ^ BitVector("1100")
        BitVector("0110")
    """

    __slots__ = ("_words", "_length")

    def __init__(self, bits: Bits) -> None:
        """Create a BitVector from a bit sequence.

        Args:
            bits: String like "1010", or iterable of bools/0/1.

        Raises:
            MissingVectorError: If ``bits`` is None.
            ValueError: If a character or element is not a bit.

        Examples:
            >>> BitVector("101")
            >>> BitVector([True, False, True])
            >>> BitVector([1, 0, 1])
        """
        if bits is None:
            raise MissingVectorError("bit vector must not be None")
        values = _bools_from(bits)
        self._length = int(values.shape[0])
        self._words = _words.pack(values)

    @classmethod
    def _from_words(cls, words: np.ndarray, length: int) -> "BitVector":
        vector = cls.__new__(cls)
        vector._words = _words.masked(words, length)
        vector._length = length
        return vector

    @staticmethod
    def zeros(length: int) -> "BitVector":
        """Create a zero vector of given length."""
        return BitVector._from_words(_words.empty_words(length), length)

    @staticmethod
    def ones(length: int) -> "BitVector":
        """Create a vector of all ones."""
        words = np.full(_words.word_count(length), np.uint64(0xFFFF_FFFF_FFFF_FFFF), dtype=_words.WORD_DTYPE)
        return BitVector._from_words(words, length)

    @staticmethod
    def from_support(support: Iterable[int], length: int) -> "BitVector":
        """Create a vector of given length with ones exactly at ``support``.

        Raises:
            IndexError: If an index falls outside ``[0, length)``.
        """
        values = np.zeros(length, dtype=bool)
        for index in support:
            if not 0 <= index < length:
                raise IndexError(f"index {index} is out of range for length {length}")
            values[index] = True
        return BitVector._from_words(_words.pack(values), length)

    @property
    def weight(self) -> int:
        """Hamming weight (number of 1 bits)."""
        return _words.popcount(self._words, self._length)

    @property
    def parity(self) -> bool:
        """Parity of the bit vector (True if odd weight)."""
        return bool(self.weight & 1)

    @property
    def is_zero(self) -> bool:
        """True if all bits are zero."""
        return self.weight == 0

    @property
    def support(self) -> list[int]:
        """Indices where bits are set to 1."""
        return [int(index) for index in np.flatnonzero(self.to_numpy())]

    def to_numpy(self) -> np.ndarray:
        """Unpacked copy of the bits as a ``bool`` array."""
        return _words.unpack(self._words, self._length)

    def copy(self) -> "BitVector":
        """Create a copy of this bit vector."""
        return BitVector._from_words(self._words, self._length)

    def resize(self, new_length: int) -> None:
        """Resize the vector in-place, truncating or zero-padding."""
        values = np.zeros(new_length, dtype=bool)
        kept = min(new_length, self._length)
        values[:kept] = self.to_numpy()[:kept]
        self._words = _words.pack(values)
        self._length = new_length

    def clear(self) -> None:
        """Set all bits to zero."""
        self._words[:] = 0

    def negate_index(self, index: int) -> None:
        """Flip the bit at the given index."""
        word, offset = self._locate(index)
        self._words[word] ^= np.uint64(1 << offset)

    def dot(self, other: "BitVector") -> bool:
        """Inner product over GF(2).

        Returns:
            True if the dot product is 1 (odd), False if 0 (even).
        """
        return dot(self, other)

    def and_weight(self, other: "BitVector") -> int:
        """Hamming weight of the bitwise AND."""
        return and_weight(self, other)

    def or_weight(self, other: "BitVector") -> int:
        """Hamming weight of the bitwise OR."""
        return or_weight(self, other)

    def exchange_parity_with(self, other: "BitVector") -> bool:
        """Parity of reordering ``other``'s set positions past ``self``'s; see :func:`exchange_parity`."""
        return exchange_parity(self, other)

    def _locate(self, index: int) -> tuple[int, int]:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError(f"index out of range for BitVector of length {self._length}")
        return index // WORD_BITS, index % WORD_BITS

    def _binary(self, other: object, operation) -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        _require_same_length(self, other)
        return BitVector._from_words(operation(self._words, other._words), self._length)

    def _inplace(self, other: object, operation) -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        _require_same_length(self, other)
        operation(self._words, other._words, out=self._words)
        return self

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self.to_numpy())

    @overload
    def __getitem__(self, index: int) -> bool: ...
    @overload
    def __getitem__(self, index: slice) -> "BitVector": ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return BitVector(self.to_numpy()[index])
        word, offset = self._locate(index)
        return bool((int(self._words[word]) >> offset) & 1)

    def __setitem__(self, index: int, to: bool) -> None:
        word, offset = self._locate(index)
        bit = np.uint64(1 << offset)
        if to:
            self._words[word] |= bit
        else:
            self._words[word] &= ~bit

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return value_equals(self, other)

    __hash__ = None  # mutable

    def __xor__(self, other: "BitVector") -> "BitVector":
        return self._binary(other, np.bitwise_xor)

    def __ixor__(self, other: "BitVector") -> "BitVector":
        return self._inplace(other, np.bitwise_xor)

    def __and__(self, other: "BitVector") -> "BitVector":
        return self._binary(other, np.bitwise_and)

    def __iand__(self, other: "BitVector") -> "BitVector":
        return self._inplace(other, np.bitwise_and)

    def __or__(self, other: "BitVector") -> "BitVector":
        return self._binary(other, np.bitwise_or)

    def __ior__(self, other: "BitVector") -> "BitVector":
        return self._inplace(other, np.bitwise_or)

    def __str__(self) -> str:
        return "[" + self._characters() + "]"

    def __repr__(self) -> str:
        return f'BitVector("{self._characters()}")'

    def _characters(self) -> str:
        return "".join("1" if bit else "0" for bit in self.to_numpy())

    def _to_bytes(self) -> bytes:
        return _words.masked(self._words, self._length).astype("<u8").tobytes()


def _require_vector(vector: Optional[BitVector]) -> BitVector:
    if vector is None:
        raise MissingVectorError("bit vector must not be None")
    if not isinstance(vector, BitVector):
        raise TypeError(f"expected a BitVector, got {type(vector).__name__}")
    return vector


def _require_same_length(left: Optional[BitVector], right: Optional[BitVector]) -> int:
    left = _require_vector(left)
    right = _require_vector(right)
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right))
    return len(left)


def weight(vector: BitVector) -> int:
    """Number of set bits of ``vector``.

    Raises:
        MissingVectorError: If ``vector`` is None.
    """
    vector = _require_vector(vector)
    return _words.popcount(vector._words, len(vector))


def and_weight(left: BitVector, right: BitVector) -> int:
    """Weight of ``left & right`` without building the intersection.

    Raises:
        LengthMismatchError: If the lengths differ.
    """
    length = _require_same_length(left, right)
    return _words.and_popcount(left._words, right._words, length)


def or_weight(left: BitVector, right: BitVector) -> int:
    """Weight of ``left | right`` without building the union.

    Raises:
        LengthMismatchError: If the lengths differ.
    """
    length = _require_same_length(left, right)
    return _words.or_popcount(left._words, right._words, length)


def dot(left: BitVector, right: BitVector) -> bool:
    """Inner product over GF(2), True when odd."""
    return bool(and_weight(left, right) & 1)


def value_equals(left: Optional[BitVector], right: Optional[BitVector]) -> bool:
    """Compare two bit vectors by value.

    Two ``None`` values are equal; ``None`` never equals a vector. Vectors of
    different length are never equal.
    """
    if left is right:
        return True
    if left is None or right is None:
        return False
    left = _require_vector(left)
    right = _require_vector(right)
    if len(left) != len(right):
        return False
    return _words.words_equal(left._words, right._words, len(left))


def exchange_parity(vector: BitVector, other: BitVector) -> bool:
    """Sign picked up when moving ``other``'s factors past ``vector``'s.

    Counts the pairs ``(a, b)`` with ``other[b]`` and ``vector[a]`` set and
    ``a > b``, and returns True when the count is odd. Evaluated a word at a
    time, so the cost is linear in the number of words.

    Raises:
        LengthMismatchError: If the lengths differ.

    Examples:
        >>> exchange_parity(BitVector("001"), BitVector("100"))
        True
        >>> exchange_parity(BitVector("100"), BitVector("001"))
        False
    """
    length = _require_same_length(vector, other)
    return _words.exchange_parity(vector._words, other._words, length)


def interleave(left: BitVector, right: BitVector) -> BitVector:
    """The vector ``left[0], right[0], left[1], right[1], ...``.

    Raises:
        LengthMismatchError: If the lengths differ.
    """
    length = _require_same_length(left, right)
    return BitVector._from_words(_words.interleave(left._words, right._words, length), 2 * length)
