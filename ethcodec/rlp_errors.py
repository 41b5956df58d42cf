"""Exceptions raised while decoding RLP data."""


class RlpError(ValueError):
    """Base class for every RLP decoding failure."""

    default_message = "invalid RLP input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InputTooShortError(RlpError):
    """The input ended before a complete item could be read."""

    default_message = "input too short"


class LengthOutOfBoundsError(RlpError):
    """A declared length points past the end of the input."""

    default_message = "length out of bounds"


class NonCanonicalLengthError(RlpError):
    """A long-form length has a leading zero or fits in the short form."""

    default_message = "non-canonical length encoding (leading zero)"


class NonCanonicalSingleByteError(RlpError):
    """A single byte below 0x80 was wrapped in a string prefix."""

    default_message = "non-canonical single byte encoding"


class TrailingBytesError(RlpError):
    """Bytes remain after the top-level item."""

    default_message = "trailing bytes after top-level item"


class ZeroLenLenError(RlpError):
    """The length-of-length field of a long item is zero."""

    default_message = "length-of-length field is zero"