try:
    from bitarray import bitarray
    HAS_BITARRAY = True
except ImportError:
    HAS_BITARRAY = False

import binvec
from binvec import BitVector


class BitVectorInitialization:
    params = [[100, 1000, 10000]]
    param_names = ['size']

    def setup(self, size):
        self.bool_list = [i % 2 == 0 for i in range(size)]
        self.string = "".join(str(int(value)) for value in self.bool_list)
        self.support = [i for i in range(size) if i % 3 == 0]

    def time_bitvector_list_bool(self, size):
        BitVector(self.bool_list)

    def time_bitarray_list_bool(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        bitarray(self.bool_list)

    def time_bitvector_string(self, size):
        BitVector(self.string)

    def time_bitarray_string(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        bitarray(self.string)

    def time_bitvector_from_support(self, size):
        BitVector.from_support(self.support, size)


class BitVectorWeights:
    params = [[100, 1000, 10000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.v1 = BitVector([i % 2 == 0 for i in range(size)])
        self.v2 = BitVector([i % 3 == 0 for i in range(size)])
        if HAS_BITARRAY:
            self.ba1 = bitarray([i % 2 == 0 for i in range(size)])
            self.ba2 = bitarray([i % 3 == 0 for i in range(size)])

    def time_bitvector_weight(self, size):
        _ = binvec.weight(self.v1)

    def time_bitvector_and_weight(self, size):
        _ = binvec.and_weight(self.v1, self.v2)

    def time_bitvector_or_weight(self, size):
        _ = binvec.or_weight(self.v1, self.v2)

    def time_bitvector_value_equals(self, size):
        _ = binvec.value_equals(self.v1, self.v2)

    def time_bitarray_count(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        _ = self.ba1.count()

    def time_bitarray_and_count(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        _ = (self.ba1 & self.ba2).count()


class BitVectorExchangeParity:
    params = [[100, 1000, 10000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.v1 = BitVector([i % 2 == 0 for i in range(size)])
        self.v2 = BitVector([i % 5 == 0 for i in range(size)])

    def time_exchange_parity(self, size):
        _ = binvec.exchange_parity(self.v1, self.v2)

    def time_interleave(self, size):
        _ = binvec.interleave(self.v1, self.v2)


class BitVectorBinaryOperations:
    params = [[100, 1000, 10000, 100000]]
    param_names = ['size']

    def setup(self, size):
        self.v1 = BitVector([i % 2 == 0 for i in range(size)])
        self.v2 = BitVector([(i + 1) % 2 == 0 for i in range(size)])
        if HAS_BITARRAY:
            self.ba1 = bitarray([i % 2 == 0 for i in range(size)])
            self.ba2 = bitarray([(i + 1) % 2 == 0 for i in range(size)])

    def time_bitvector_xor(self, size):
        _ = self.v1 ^ self.v2

    def time_bitvector_xor_inplace(self, size):
        self.v1 ^= self.v2

    def time_bitarray_xor(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        _ = self.ba1 ^ self.ba2

    def time_bitarray_xor_inplace(self, size):
        if not HAS_BITARRAY:
            raise NotImplementedError("bitarray not installed")
        self.ba1 ^= self.ba2
