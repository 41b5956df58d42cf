"""Exceptions raised while encoding or decoding SSZ data."""

from __future__ import annotations

BYTES_PER_OFFSET = 4


class SszError(ValueError):
    """Base class for every SSZ encoding or decoding failure."""

    default_message = "invalid SSZ input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InputTooShortError(SszError):
    """The input has fewer bytes than the value requires."""

    default_message = "input too short"


class InvalidBooleanError(SszError):
    """A boolean byte is neither 0x00 nor 0x01."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"invalid boolean byte: 0x{value:02x} (must be 0x00 or 0x01)"
        )


class OffsetOutOfBoundsError(SszError):
    """An offset points past the end of the input."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length
        super().__init__(
            f"offset {offset} is out of bounds for input of length {length}"
        )


class OffsetsNotAscendingError(SszError):
    """The offsets of variable-size elements do not increase."""

    default_message = "offsets are not in ascending order"


class InvalidLengthError(SszError):
    """A byte length does not fit the element size."""

    def __init__(self, got: int, element_size: int) -> None:
        self.got = got
        self.element_size = element_size
        super().__init__(
            f"byte length {got} is not a multiple of element size {element_size}"
        )


class ListTooLongError(SszError):
    """A list holds more elements than its maximum."""

    def __init__(self, length: int, max_len: int) -> None:
        self.length = length
        self.max_len = max_len
        super().__init__(f"list length {length} exceeds maximum {max_len}")


class InvalidFirstOffsetError(SszError):
    """The first offset does not equal the size of the fixed part."""

    def __init__(self, got: int, expected: int) -> None:
        self.got = got
        self.expected = expected
        super().__init__(
            f"first offset {got} does not equal fixed-part size {expected}"
        )


class MissingSentinelBitError(SszError):
    """A bitlist has no sentinel bit."""

    default_message = "bitlist is missing its sentinel bit"


class ExtraBitsSetError(SszError):
    """A bitvector has bits set beyond its declared length."""

    default_message = "bitvector has extra bits set beyond declared length"