"""SSZ encoding of basic and composite values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from ethcodec.ssz_errors import BYTES_PER_OFFSET, ListTooLongError


def _uint(value: int, size: int) -> bytes:
    return int(value).to_bytes(size, "little")


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as one byte."""
    return b"\x01" if value else b"\x00"


def encode_u8(value: int) -> bytes:
    """Encode an unsigned 8-bit integer."""
    return _uint(value, 1)


def encode_u16(value: int) -> bytes:
    """Encode an unsigned 16-bit integer, little-endian."""
    return _uint(value, 2)


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer, little-endian."""
    return _uint(value, 4)


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer, little-endian."""
    return _uint(value, 8)


def encode_u128(value: int) -> bytes:
    """Encode an unsigned 128-bit integer, little-endian."""
    return _uint(value, 16)


def encode_u256(lo: int, hi: int) -> bytes:
    """Encode a 256-bit integer given as its low and high 128-bit halves."""
    return encode_u128(lo) + encode_u128(hi)


def encode_vector(elements: Iterable[bytes]) -> bytes:
    """Concatenate already encoded fixed-size elements."""
    return b"".join(bytes(element) for element in elements)


def encode_vector_raw(encoded_elements: Sequence[bytes]) -> bytes:
    """Concatenate a sequence of encoded elements."""
    return b"".join(encoded_elements)


def encode_list(encoded_elements: Sequence[bytes], max_len: int) -> bytes:
    """Concatenate encoded fixed-size elements, enforcing the list maximum."""
    if len(encoded_elements) > max_len:
        raise ListTooLongError(len(encoded_elements), max_len)
    return b"".join(encoded_elements)


def _pack_bits(bits: Sequence[bool], extra_bit: int | None, num_bytes: int) -> bytes:
    value = sum(1 << i for i, bit in enumerate(bits) if bit)
    if extra_bit is not None:
        value |= 1 << extra_bit
    return value.to_bytes(num_bytes, "little")


def encode_bitvector(bits: Sequence[bool]) -> bytes:
    """Pack bits, least significant bit first, into the fewest bytes."""
    return _pack_bits(bits, None, (len(bits) + 7) // 8)


def encode_bitlist(bits: Sequence[bool], max_len: int) -> bytes:
    """Pack bits followed by a sentinel bit marking the length."""
    if len(bits) > max_len:
        raise ListTooLongError(len(bits), max_len)
    return _pack_bits(bits, len(bits), len(bits) // 8 + 1)


@dataclass(frozen=True)
class FixedField:
    """A container field stored inline."""

    data: bytes


@dataclass(frozen=True)
class VariableField:
    """A container field stored after the fixed part, referenced by offset."""

    data: bytes


ContainerField = Union[FixedField, VariableField]


def encode_container(fields: Sequence[ContainerField]) -> bytes:
    """Encode a container from its already encoded fields."""
    fixed_part_size = sum(
        len(field.data) if isinstance(field, FixedField) else BYTES_PER_OFFSET
        for field in fields
    )
    fixed_part = bytearray()
    heap = bytearray()
    for field in fields:
        if isinstance(field, FixedField):
            fixed_part += field.data
        elif isinstance(field, VariableField):
            fixed_part += encode_u32(fixed_part_size + len(heap))
            heap += field.data
        else:
            raise TypeError(f"not a container field: {type(field).__name__}")
    return bytes(fixed_part + heap)