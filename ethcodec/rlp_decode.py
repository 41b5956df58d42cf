"""RLP decoding into bytes and nested lists."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Union

from ethcodec.rlp_errors import (
    InputTooShortError,
    LengthOutOfBoundsError,
    NonCanonicalLengthError,
    NonCanonicalSingleByteError,
    TrailingBytesError,
    ZeroLenLenError,
)

RlpItem = Union[bytes, list]


class ByteRange(Enum):
    """Kind of item announced by a prefix byte."""

    DIRECT_BYTE = auto()
    EMPTY_BYTES = auto()
    SHORT_STRING = auto()
    LONG_STRING = auto()
    SHORT_LIST = auto()
    LONG_LIST = auto()


def classify(first_byte: int) -> ByteRange:
    """Classify a prefix byte."""
    if not 0 <= first_byte <= 0xFF:
        raise ValueError(f"not a byte value: {first_byte}")
    if first_byte <= 0x7F:
        return ByteRange.DIRECT_BYTE
    if first_byte == 0x80:
        return ByteRange.EMPTY_BYTES
    if first_byte <= 0xB7:
        return ByteRange.SHORT_STRING
    if first_byte <= 0xBF:
        return ByteRange.LONG_STRING
    if first_byte <= 0xF7:
        return ByteRange.SHORT_LIST
    return ByteRange.LONG_LIST


def _first_byte(data: bytes) -> int:
    if not data:
        raise InputTooShortError()
    return data[0]


def _read_long_length(data: bytes, offset: int, lenlen: int) -> tuple[int, int]:
    if lenlen == 0:
        raise ZeroLenLenError()
    len_end = offset + lenlen
    if len_end > len(data):
        raise InputTooShortError()
    len_bytes = data[offset:len_end]
    if len_bytes[0] == 0x00:
        raise NonCanonicalLengthError()
    length = int.from_bytes(len_bytes, "big")
    if length <= 55:
        raise NonCanonicalLengthError()
    return length, len_end


def decode_short_string(data: bytes) -> tuple[bytes, bytes]:
    """Decode a string with a 0x81..0xb7 prefix; return the item and the rest."""
    data = bytes(data)
    length = _first_byte(data) - 0x80
    if length == 1:
        if len(data) < 2:
            raise InputTooShortError()
        if data[1] < 0x80:
            raise NonCanonicalSingleByteError()
    end = 1 + length
    if end > len(data):
        raise LengthOutOfBoundsError()
    return data[1:end], data[end:]


def decode_long_string(data: bytes) -> tuple[bytes, bytes]:
    """Decode a string with a 0xb8..0xbf prefix; return the item and the rest."""
    data = bytes(data)
    lenlen = _first_byte(data) - 0xB7
    length, start = _read_long_length(data, 1, lenlen)
    end = start + length
    if end > len(data):
        raise LengthOutOfBoundsError()
    return data[start:end], data[end:]


def decode_list_payload(payload: bytes) -> list:
    """Decode every item packed back to back in a list payload."""
    items = []
    rest = bytes(payload)
    while rest:
        item, rest = decode_one(rest)
        items.append(item)
    return items


def decode_short_list(data: bytes) -> tuple[list, bytes]:
    """Decode a list with a 0xc0..0xf7 prefix; return the item and the rest."""
    data = bytes(data)
    end = 1 + _first_byte(data) - 0xC0
    if end > len(data):
        raise LengthOutOfBoundsError()
    return decode_list_payload(data[1:end]), data[end:]


def decode_long_list(data: bytes) -> tuple[list, bytes]:
    """Decode a list with a 0xf8..0xff prefix; return the item and the rest."""
    data = bytes(data)
    lenlen = _first_byte(data) - 0xF7
    length, start = _read_long_length(data, 1, lenlen)
    end = start + length
    if end > len(data):
        raise LengthOutOfBoundsError()
    return decode_list_payload(data[start:end]), data[end:]


_DECODERS: dict[ByteRange, Callable[[bytes], tuple[RlpItem, bytes]]] = {
    ByteRange.SHORT_STRING: decode_short_string,
    ByteRange.LONG_STRING: decode_long_string,
    ByteRange.SHORT_LIST: decode_short_list,
    ByteRange.LONG_LIST: decode_long_list,
}


def decode_one(data: bytes) -> tuple[RlpItem, bytes]:
    """Decode the first item of ``data``; return it with the unread remainder."""
    data = bytes(data)
    kind = classify(_first_byte(data))
    if kind is ByteRange.DIRECT_BYTE:
        return data[:1], data[1:]
    if kind is ByteRange.EMPTY_BYTES:
        return b"", data[1:]
    return _DECODERS[kind](data)


def decode(data: bytes) -> RlpItem:
    """Decode exactly one item; trailing bytes are an error."""
    item, rest = decode_one(data)
    if rest:
        raise TrailingBytesError()
    return item