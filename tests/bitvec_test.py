import numpy as np
import pytest
from hypothesis import given, strategies

import binvec
from binvec import BitVector, LengthMismatchError, MissingVectorError
from tests.strategies import bit_lists, bit_vectors, equal_size_bit_lists

WORD_BOUNDARY_SIZES = [0, 1, 31, 32, 33, 63, 64, 65, 127, 128, 129, 200]
PADDED_SIZES = [1, 31, 33, 63, 65, 70, 127, 129, 200]


def exchange_parity_reference(vector: list[bool], other: list[bool]) -> bool:
    count = 0
    for b in range(len(vector)):
        if not other[b]:
            continue
        for a in range(b + 1, len(vector)):
            if vector[a]:
                count += 1
    return count % 2 == 1


def test_initializers():
    for initializer in [
        "101",
        [True, False, True],
        [1, 0, 1],
        [1, 0, True],
    ]:
        bitvec = BitVector(initializer)
        for index, value in enumerate(initializer):
            assert bitvec[index] is bool(int(value)), (index, initializer)


def test_init_from_string_invalid():
    with pytest.raises(ValueError):
        BitVector("102")


def test_init_from_invalid_iterable():
    with pytest.raises(ValueError):
        BitVector([1, 0, 2])


def test_init_from_none():
    with pytest.raises(MissingVectorError):
        BitVector(None)


def test_zeros():
    bitvec = BitVector.zeros(5)
    assert len(bitvec) == 5
    assert bitvec.is_zero is True


def test_ones():
    bitvec = BitVector.ones(3)
    assert len(bitvec) == 3
    assert bitvec.weight == 3


@pytest.mark.parametrize("size", WORD_BOUNDARY_SIZES)
def test_ones_weight_ignores_padding(size: int):
    assert BitVector.ones(size).weight == size
    assert binvec.weight(BitVector.ones(size)) == size


def test_from_support():
    bitvec = BitVector.from_support([0, 2], 4)
    assert bitvec == BitVector("1010")
    with pytest.raises(IndexError):
        BitVector.from_support([4], 4)


def test_weight():
    bitvec = BitVector([True, True, False, True])
    assert isinstance(bitvec.weight, int)
    assert bitvec.weight == 3


def test_weight_of_ten_bits():
    bits = BitVector([True, False, False, True, False, False, True, False, False, True])
    assert binvec.weight(bits) == 4


def test_weight_of_empty_vector():
    assert binvec.weight(BitVector([])) == 0


def test_weight_of_none_raises():
    with pytest.raises(MissingVectorError):
        binvec.weight(None)


@given(bit_lists())
def test_weight_counts_set_bits(bits: list[bool]):
    assert binvec.weight(BitVector(bits)) == sum(bits)


def test_parity():
    assert BitVector([True, True, False]).parity is False
    assert BitVector([True, True, True]).parity is True


def test_is_zero():
    zero_vec = BitVector.zeros(5)
    non_zero_vec = BitVector([True, False])
    assert zero_vec.is_zero is True
    assert non_zero_vec.is_zero is False


def test_support():
    bitvec = BitVector([True, False, True, False, True])
    assert bitvec.support == [0, 2, 4]


def test_resize():
    bitvec = BitVector("101")
    bitvec.resize(10)
    assert len(bitvec) == 10
    assert bitvec == BitVector("1010000000")
    bitvec.resize(2)
    assert bitvec == BitVector("10")


def test_clear():
    bitvec = BitVector([True, True, True])
    bitvec.clear()
    assert bitvec.is_zero is True


def test_negate_index():
    bitvec = BitVector.zeros(3)
    bitvec.negate_index(1)
    assert bitvec[1] is True


def test_dot():
    vec1 = BitVector([True, False, True])
    vec2 = BitVector([True, True, False])
    assert vec1.dot(vec2) is True
    assert vec1.dot(vec1) is False


def test_and_weight_does_not_mutate_inputs():
    left = BitVector.from_support([0, 1, 9], 10)
    right = BitVector.from_support([1, 2, 9], 10)
    left_copy, right_copy = left.copy(), right.copy()
    assert binvec.and_weight(left, right) == 2
    assert left.and_weight(right) == 2
    assert left == left_copy
    assert right == right_copy


def test_or_weight_does_not_mutate_inputs():
    left = BitVector.from_support([0, 1, 9], 10)
    right = BitVector.from_support([1, 2, 9], 10)
    left_copy, right_copy = left.copy(), right.copy()
    assert binvec.or_weight(left, right) == 4
    assert left.or_weight(right) == 4
    assert left == left_copy
    assert right == right_copy


@pytest.mark.parametrize("function", [binvec.and_weight, binvec.or_weight, binvec.exchange_parity, binvec.dot])
def test_pairwise_length_mismatch_raises(function):
    with pytest.raises(LengthMismatchError):
        function(BitVector.zeros(5), BitVector.zeros(6))


@pytest.mark.parametrize("function", [binvec.and_weight, binvec.or_weight])
def test_pairwise_weight_of_empty_vectors(function):
    assert function(BitVector([]), BitVector([])) == 0


@given(equal_size_bit_lists())
def test_and_weight_plus_or_weight_is_total_weight(pair: tuple[list[bool], list[bool]]):
    left, right = (BitVector(bits) for bits in pair)
    assert binvec.and_weight(left, right) == sum(a and b for a, b in zip(*pair))
    assert binvec.or_weight(left, right) == sum(a or b for a, b in zip(*pair))
    assert binvec.and_weight(left, right) + binvec.or_weight(left, right) == left.weight + right.weight
    assert list(left) == pair[0]
    assert list(right) == pair[1]


def test_value_equals_none():
    bits = BitVector("1")
    assert binvec.value_equals(None, None) is True
    assert binvec.value_equals(bits, None) is False
    assert binvec.value_equals(None, bits) is False


def test_value_equals_same_reference():
    bits = BitVector.ones(3)
    assert binvec.value_equals(bits, bits) is True


def test_value_equals_different_lengths():
    assert binvec.value_equals(BitVector.zeros(2), BitVector.zeros(3)) is False


def test_value_equals_values():
    assert binvec.value_equals(BitVector("1010"), BitVector("1010")) is True
    assert binvec.value_equals(BitVector("1010"), BitVector("1110")) is False


def with_dirty_padding(vector: BitVector) -> BitVector:
    """Copy of ``vector`` with the top bit of its final word set above ``len(vector)``."""
    dirty = vector.copy()
    dirty._words[-1] |= np.uint64(1) << np.uint64(63)
    return dirty


@pytest.mark.parametrize("size", PADDED_SIZES)
def test_primitives_ignore_padding_bits(size: int):
    clean = BitVector.ones(size)
    dirty = with_dirty_padding(clean)
    assert dirty._words[-1] != clean._words[-1]
    assert binvec.weight(dirty) == size
    assert binvec.and_weight(dirty, clean) == size
    assert binvec.and_weight(dirty, dirty) == size
    assert binvec.or_weight(dirty, clean) == size
    assert binvec.value_equals(dirty, clean)
    assert dirty == clean
    expected = exchange_parity_reference([True] * size, [True] * size)
    assert binvec.exchange_parity(dirty, dirty) is expected
    assert binvec.exchange_parity(clean, dirty) is expected


@pytest.mark.parametrize("size", PADDED_SIZES)
def test_padding_bits_do_not_make_zero_vector_nonzero(size: int):
    dirty = with_dirty_padding(BitVector.zeros(size))
    assert binvec.weight(dirty) == 0
    assert dirty.is_zero
    assert binvec.or_weight(dirty, BitVector.zeros(size)) == 0
    assert binvec.value_equals(dirty, BitVector.zeros(size))
    assert binvec.exchange_parity(dirty, BitVector.ones(size)) is False
    assert binvec.exchange_parity(BitVector.ones(size), dirty) is False


def test_value_equals_rejects_non_vectors():
    with pytest.raises(TypeError):
        binvec.value_equals([True, False, True], [True, False, True])
    with pytest.raises(TypeError):
        binvec.value_equals(BitVector("101"), [True, False, True])


@given(bit_vectors(), bit_vectors())
def test_value_equals_is_symmetric(left: BitVector, right: BitVector):
    assert binvec.value_equals(left, right) == binvec.value_equals(right, left)
    assert binvec.value_equals(left, right) == (list(left) == list(right))


@given(bit_vectors(), strategies.data())
def test_value_equals_distinguishes_any_flipped_bit(vector: BitVector, data):
    if len(vector) == 0:
        return
    index = data.draw(strategies.integers(min_value=0, max_value=len(vector) - 1))
    flipped = vector.copy()
    flipped.negate_index(index)
    assert binvec.value_equals(vector, vector.copy())
    assert not binvec.value_equals(vector, flipped)


@pytest.mark.parametrize(
    "vector, other",
    [
        ([], []),
        ([False, False, False], [False, False, False]),
        ([True], [True]),
        ([True, False, False], [False, True, False]),
        ([False, False, True], [True, False, False]),
        ([True, False, True, False], [True, True, False, False]),
        ([False, True, False, False, True], [True, False, False, True, False]),
        ([True, True, True], [True, True, True]),
    ],
)
def test_exchange_parity_matches_reference(vector: list[bool], other: list[bool]):
    expected = exchange_parity_reference(vector, other)
    assert BitVector(vector).exchange_parity_with(BitVector(other)) is expected


def test_exchange_parity_known_values():
    assert binvec.exchange_parity(BitVector([]), BitVector([])) is False
    assert binvec.exchange_parity(BitVector("1"), BitVector("1")) is False
    assert binvec.exchange_parity(BitVector("001"), BitVector("100")) is True
    assert binvec.exchange_parity(BitVector("100"), BitVector("001")) is False


@given(equal_size_bit_lists())
def test_exchange_parity_matches_reference_on_random_vectors(pair: tuple[list[bool], list[bool]]):
    vector, other = pair
    left, right = BitVector(vector), BitVector(other)
    assert binvec.exchange_parity(left, right) is exchange_parity_reference(vector, other)
    assert list(left) == vector
    assert list(right) == other


@pytest.mark.parametrize("size", WORD_BOUNDARY_SIZES)
def test_exchange_parity_of_dense_vectors(size: int):
    ones = [True] * size
    # Every pair a > b is counted once: size * (size - 1) / 2.
    assert binvec.exchange_parity(BitVector(ones), BitVector(ones)) is exchange_parity_reference(ones, ones)
    assert binvec.exchange_parity(BitVector(ones), BitVector(ones)) is ((size * (size - 1) // 2) % 2 == 1)


def test_interleave():
    zipped = binvec.interleave(BitVector("101"), BitVector("010"))
    assert zipped == BitVector("100110")


@given(equal_size_bit_lists())
def test_interleave_alternates_inputs(pair: tuple[list[bool], list[bool]]):
    zipped = binvec.interleave(BitVector(pair[0]), BitVector(pair[1]))
    assert len(zipped) == 2 * len(pair[0])
    assert list(zipped)[0::2] == pair[0]
    assert list(zipped)[1::2] == pair[1]


def test_getitem():
    bitvec = BitVector([True, False, True])
    assert bitvec[0] is True
    assert bitvec[-1] is True
    with pytest.raises(IndexError):
        bitvec[3]


def test_setitem():
    bitvec = BitVector.zeros(3)
    bitvec[1] = True
    assert bitvec[1] is True
    bitvec[1] = False
    assert bitvec[1] is False


@pytest.mark.parametrize("index", [0, 63, 64, 99])
def test_setitem_across_words(index: int):
    bitvec = BitVector.zeros(100)
    bitvec[index] = True
    assert bitvec.support == [index]
    assert bitvec.weight == 1


def test_len():
    assert len(BitVector("1010101")) == 7


def test_eq():
    assert BitVector.zeros(3) == BitVector.zeros(3)
    assert BitVector.zeros(3) != BitVector([True, False, False])


def test_eq_with_non_bitvec():
    bitvec = BitVector.zeros(3)
    result = bitvec == "not a bitvec"
    assert isinstance(result, bool)
    assert result is False


def test_is_unhashable():
    with pytest.raises(TypeError):
        hash(BitVector("1"))


def test_xor():
    result = BitVector([True, False, True]) ^ BitVector([False, True, True])
    assert result == BitVector("110")


def test_ixor():
    vec1 = BitVector([True, False, True])
    vec1 ^= BitVector([False, True, False])
    assert vec1 == BitVector("111")


def test_and():
    result = BitVector([True, True, False]) & BitVector([True, False, True])
    assert result == BitVector("100")


def test_or():
    result = BitVector([True, False, False]) | BitVector([False, True, False])
    assert result == BitVector("110")


def test_binary_operator_length_mismatch():
    with pytest.raises(LengthMismatchError):
        BitVector("10") ^ BitVector("101")


def test_iter():
    bits = list(BitVector([True, False, True]))
    assert bits == [True, False, True]
    assert all(isinstance(bit, bool) for bit in bits)


def test_str():
    assert str(BitVector([True, False])) == "[10]"


def test_repr():
    assert repr(BitVector([True, False])) == 'BitVector("10")'


def test_slice_basic():
    sliced = BitVector([True, False, True, True, False])[1:4]
    assert isinstance(sliced, BitVector)
    assert sliced == BitVector("011")


def test_slice_negative_step():
    sliced = BitVector([True, False, False])[::-1]
    assert sliced == BitVector("001")


def test_copy_is_independent():
    bitvec = BitVector("101")
    copied = bitvec.copy()
    copied[1] = True
    assert bitvec == BitVector("101")
