"""Word-level kernels over little-endian packed ``uint64`` arrays.

Bit ``i`` of a vector lives in word ``i // WORD_BITS`` at bit ``i % WORD_BITS``.
Every kernel takes the logical bit length explicitly and masks the padding
bits of the final word before counting or comparing, so callers never depend
on what sits above ``length``.
"""

import numpy as np

WORD_BITS = 64
WORD_DTYPE = np.uint64

_ALL_ONES = np.uint64(0xFFFF_FFFF_FFFF_FFFF)
_ONE = np.uint64(1)
_SUFFIX_SHIFTS = tuple(np.uint64(shift) for shift in (1, 2, 4, 8, 16, 32))


def word_count(length: int) -> int:
    return (length + WORD_BITS - 1) // WORD_BITS


def tail_mask(length: int) -> np.uint64:
    """Mask selecting the valid bits of the final word of a ``length``-bit vector."""
    tail_bits = length % WORD_BITS
    if tail_bits == 0:
        return _ALL_ONES
    return np.uint64((1 << tail_bits) - 1)


def empty_words(length: int) -> np.ndarray:
    return np.zeros(word_count(length), dtype=WORD_DTYPE)


def pack(bits: np.ndarray) -> np.ndarray:
    """Pack a one-dimensional ``bool`` array into zero-padded words."""
    length = bits.shape[0]
    packed = np.packbits(bits, bitorder="little")
    padded = np.zeros(word_count(length) * (WORD_BITS // 8), dtype=np.uint8)
    padded[: packed.shape[0]] = packed
    return padded.view("<u8").astype(WORD_DTYPE)


def unpack(words: np.ndarray, length: int) -> np.ndarray:
    as_bytes = words.astype("<u8").view(np.uint8)
    return np.unpackbits(as_bytes, count=length, bitorder="little").astype(bool)


def masked(words: np.ndarray, length: int) -> np.ndarray:
    """Copy of ``words`` with the padding bits cleared."""
    result = words.copy()
    if result.shape[0]:
        result[-1] &= tail_mask(length)
    return result


def popcount(words: np.ndarray, length: int) -> int:
    if length == 0:
        return 0
    body = int(np.bitwise_count(words[:-1]).sum(dtype=np.int64))
    tail = int(np.bitwise_count(words[-1] & tail_mask(length)))
    return body + tail


def and_popcount(left: np.ndarray, right: np.ndarray, length: int) -> int:
    if length == 0:
        return 0
    body = int(np.bitwise_count(left[:-1] & right[:-1]).sum(dtype=np.int64))
    tail = int(np.bitwise_count(left[-1] & right[-1] & tail_mask(length)))
    return body + tail


def or_popcount(left: np.ndarray, right: np.ndarray, length: int) -> int:
    if length == 0:
        return 0
    body = int(np.bitwise_count(left[:-1] | right[:-1]).sum(dtype=np.int64))
    tail = int(np.bitwise_count((left[-1] | right[-1]) & tail_mask(length)))
    return body + tail


def words_equal(left: np.ndarray, right: np.ndarray, length: int) -> bool:
    if length == 0:
        return True
    if not np.array_equal(left[:-1], right[:-1]):
        return False
    mask = tail_mask(length)
    return bool((left[-1] & mask) == (right[-1] & mask))


def strict_suffix_parity(words: np.ndarray, length: int) -> np.ndarray:
    """Words whose bit ``b`` is the parity of the set bits at positions ``> b``.

    Within a word a log-step shift-XOR produces the inclusive suffix parity,
    and a right shift by one makes it strict. Higher words contribute through
    a reverse cumulative word parity: when the bits above the current word
    are odd, every position of the word is flipped.
    """
    suffix = masked(words, length)
    word_parity = (np.bitwise_count(suffix) & 1).astype(np.int64)
    for shift in _SUFFIX_SHIFTS:
        suffix ^= suffix >> shift
    suffix >>= _ONE
    higher_parity = (np.cumsum(word_parity[::-1])[::-1] - word_parity) & 1
    suffix[higher_parity == 1] ^= _ALL_ONES
    return suffix


def exchange_parity(left: np.ndarray, right: np.ndarray, length: int) -> bool:
    """Parity of pairs ``(a, b)`` with ``right[b]``, ``left[a]`` and ``a > b``."""
    if length == 0:
        return False
    above = strict_suffix_parity(left, length)
    return bool(and_popcount(above, right, length) & 1)


def interleave(left: np.ndarray, right: np.ndarray, length: int) -> np.ndarray:
    """Words of the ``2 * length`` vector ``l0, r0, l1, r1, ...``."""
    zipped = np.empty(2 * length, dtype=bool)
    zipped[0::2] = unpack(left, length)
    zipped[1::2] = unpack(right, length)
    return pack(zipped)
