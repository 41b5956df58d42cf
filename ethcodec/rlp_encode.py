"""RLP encoding of byte strings and nested lists."""

from __future__ import annotations

from typing import Sequence, Union

RlpItem = Union[bytes, list]

_SHORT_LIMIT = 55
_STRING_OFFSET = 0x80
_LONG_STRING_OFFSET = 0xB7
_LIST_OFFSET = 0xC0
_LONG_LIST_OFFSET = 0xF7


def encode_length_be(n: int) -> bytes:
    """Return ``n`` as big-endian bytes with no leading zeros (empty for 0)."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def _with_prefix(payload: bytes, short_offset: int, long_offset: int) -> bytes:
    if len(payload) <= _SHORT_LIMIT:
        return bytes([short_offset + len(payload)]) + payload
    len_bytes = encode_length_be(len(payload))
    return bytes([long_offset + len(len_bytes)]) + len_bytes + payload


def encode_bytes(data: bytes) -> bytes:
    """Encode a byte string."""
    data = bytes(data)
    if len(data) == 1 and data[0] < _STRING_OFFSET:
        return data
    return _with_prefix(data, _STRING_OFFSET, _LONG_STRING_OFFSET)


def encode_list(items: Sequence[RlpItem]) -> bytes:
    """Encode a list of items."""
    payload = b"".join(encode(item) for item in items)
    return _with_prefix(payload, _LIST_OFFSET, _LONG_LIST_OFFSET)


def encode(item: RlpItem) -> bytes:
    """Encode an item: bytes-like values are strings, lists and tuples are lists."""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return encode_bytes(item)
    if isinstance(item, (list, tuple)):
        return encode_list(item)
    raise TypeError(f"cannot RLP-encode value of type {type(item).__name__}")