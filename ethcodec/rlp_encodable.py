"""Conversion of Python values into RLP items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Union

from ethcodec.rlp_encode import encode

RlpItem = Union[bytes, list]

_MAX_UINT = (1 << 128) - 1


class Encodable(ABC):
    """A value that knows how to express itself as an RLP item."""

    @abstractmethod
    def to_rlp_item(self) -> RlpItem:
        """Return this value as bytes or a list of items."""


def _uint_item(value: int) -> bytes:
    if value < 0:
        raise ValueError("RLP integers must be non-negative")
    if value > _MAX_UINT:
        raise OverflowError("integer exceeds 128 bits")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def to_rlp_item(value: Any) -> RlpItem:
    """Convert a value to an RLP item.

    Booleans and non-negative integers become minimal big-endian bytes,
    strings their UTF-8 bytes, and lists or tuples a list of converted items.
    """
    if isinstance(value, Encodable):
        return value.to_rlp_item()
    if isinstance(value, bool):
        return b"\x01" if value else b""
    if isinstance(value, int):
        return _uint_item(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return [to_rlp_item(element) for element in value]
    raise TypeError(f"cannot convert {type(value).__name__} to an RLP item")


def rlp_encode(value: Any) -> bytes:
    """Convert ``value`` to an RLP item and encode it."""
    return encode(to_rlp_item(value))