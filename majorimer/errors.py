from binvec import LengthMismatchError, MissingVectorError


class OperatorTypeMismatchError(TypeError):
    """Raised when Pauli and Majorana operators are combined."""

    def __init__(self, expected: type, received: object) -> None:
        super().__init__(
            f"type mismatch: expected {expected.__name__} operand, got {type(received).__name__}"
        )
        self.expected = expected
        self.received_type = type(received)


class InvalidCoefficientError(ValueError):
    """Raised when a complex number is not one of 1, -1, 1j, -1j."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid coefficient value {value!r}: must be one of 1, -1, 1j, -1j")
        self.value = value


__all__ = [
    "InvalidCoefficientError",
    "LengthMismatchError",
    "MissingVectorError",
    "OperatorTypeMismatchError",
]
