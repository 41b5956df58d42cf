"""SSZ decoding of basic and composite values."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from ethcodec.ssz_errors import (
    BYTES_PER_OFFSET,
    ExtraBitsSetError,
    InputTooShortError,
    InvalidBooleanError,
    InvalidFirstOffsetError,
    InvalidLengthError,
    ListTooLongError,
    MissingSentinelBitError,
    OffsetOutOfBoundsError,
    OffsetsNotAscendingError,
)

T = TypeVar("T")


def _uint(data: bytes, size: int) -> int:
    if len(data) < size:
        raise InputTooShortError()
    return int.from_bytes(bytes(data[:size]), "little")


def decode_bool(data: bytes) -> bool:
    """Decode a boolean from its first byte, which must be 0x00 or 0x01."""
    if len(data) < 1:
        raise InputTooShortError()
    value = data[0]
    if value == 0x00:
        return False
    if value == 0x01:
        return True
    raise InvalidBooleanError(value)


def decode_u8(data: bytes) -> int:
    """Decode an unsigned 8-bit integer."""
    return _uint(data, 1)


def decode_u16(data: bytes) -> int:
    """Decode an unsigned little-endian 16-bit integer."""
    return _uint(data, 2)


def decode_u32(data: bytes) -> int:
    """Decode an unsigned little-endian 32-bit integer."""
    return _uint(data, 4)


def decode_u64(data: bytes) -> int:
    """Decode an unsigned little-endian 64-bit integer."""
    return _uint(data, 8)


def decode_u128(data: bytes) -> int:
    """Decode an unsigned little-endian 128-bit integer."""
    return _uint(data, 16)


def _chunks(data: bytes, size: int) -> List[bytes]:
    return [data[start:start + size] for start in range(0, len(data), size)]


def _check_element_size(element_size: int) -> None:
    if element_size <= 0:
        raise ValueError("element size must be positive")


def decode_vector_fixed(
    data: bytes,
    element_size: int,
    expected_count: int,
    decode_element: Callable[[bytes], T],
) -> List[T]:
    """Decode exactly ``expected_count`` fixed-size elements."""
    _check_element_size(element_size)
    data = bytes(data)
    if len(data) != element_size * expected_count:
        raise InvalidLengthError(len(data), element_size)
    return [decode_element(chunk) for chunk in _chunks(data, element_size)]


def decode_list_fixed(
    data: bytes,
    element_size: int,
    max_len: int,
    decode_element: Callable[[bytes], T],
) -> List[T]:
    """Decode up to ``max_len`` fixed-size elements."""
    _check_element_size(element_size)
    data = bytes(data)
    if len(data) % element_size != 0:
        raise InvalidLengthError(len(data), element_size)
    count = len(data) // element_size
    if count > max_len:
        raise ListTooLongError(count, max_len)
    return [decode_element(chunk) for chunk in _chunks(data, element_size)]


def decode_list_variable(
    data: bytes,
    max_len: int,
    decode_element: Callable[[bytes], T],
) -> List[T]:
    """Decode a list of variable-size elements preceded by an offset table."""
    data = bytes(data)
    if not data:
        return []
    if len(data) < BYTES_PER_OFFSET:
        raise InputTooShortError()

    first_offset = decode_u32(data[:BYTES_PER_OFFSET])
    if first_offset % BYTES_PER_OFFSET != 0:
        raise InvalidFirstOffsetError(first_offset, first_offset)

    num_elements = first_offset // BYTES_PER_OFFSET
    if num_elements > max_len:
        raise ListTooLongError(num_elements, max_len)

    offsets = [
        decode_u32(data[start:start + BYTES_PER_OFFSET])
        for start in range(0, num_elements * BYTES_PER_OFFSET, BYTES_PER_OFFSET)
    ]
    if any(a >= b for a, b in zip(offsets, offsets[1:])):
        raise OffsetsNotAscendingError()

    ends = offsets[1:] + [len(data)]
    result = []
    for offset, end in zip(offsets, ends):
        if offset > len(data) or end > len(data):
            raise OffsetOutOfBoundsError(offset, len(data))
        result.append(decode_element(data[offset:end]))
    return result


def _unpack_bits(data: bytes, count: int) -> List[bool]:
    value = int.from_bytes(data, "little")
    return [bool((value >> i) & 1) for i in range(count)]


def decode_bitvector(data: bytes, n: int) -> List[bool]:
    """Decode a bitvector of exactly ``n`` bits."""
    data = bytes(data)
    if len(data) != (n + 7) // 8:
        raise InvalidLengthError(len(data), 1)
    valid_bits = n % 8
    if valid_bits and data[-1] >> valid_bits:
        raise ExtraBitsSetError()
    return _unpack_bits(data, n)


def decode_bitlist(data: bytes, max_len: int) -> List[bool]:
    """Decode a bitlist whose length is marked by its highest set bit."""
    data = bytes(data)
    if not data or data[-1] == 0:
        raise MissingSentinelBitError()
    sentinel_pos = (len(data) - 1) * 8 + data[-1].bit_length() - 1
    if sentinel_pos > max_len:
        raise ListTooLongError(sentinel_pos, max_len)
    return _unpack_bits(data, sentinel_pos)


def decode_container(
    data: bytes, field_sizes: Sequence[Optional[int]]
) -> List[bytes]:
    """Split a container into the raw bytes of its fields.

    Each entry of ``field_sizes`` is the size of a fixed field, or None for a
    variable-size field stored behind an offset.
    """
    data = bytes(data)
    fixed_part_size = sum(
        BYTES_PER_OFFSET if size is None else size for size in field_sizes
    )
    if len(data) < fixed_part_size:
        raise InputTooShortError()

    variable_offsets = []
    cursor = 0
    for size in field_sizes:
        if size is None:
            variable_offsets.append(decode_u32(data[cursor:cursor + BYTES_PER_OFFSET]))
            cursor += BYTES_PER_OFFSET
        else:
            cursor += size

    if variable_offsets and variable_offsets[0] != fixed_part_size:
        raise InvalidFirstOffsetError(variable_offsets[0], fixed_part_size)

    bounds = iter(zip(variable_offsets, variable_offsets[1:] + [len(data)]))
    result = []
    cursor = 0
    for size in field_sizes:
        if size is None:
            start, end = next(bounds)
            if start > len(data) or end > len(data):
                raise OffsetOutOfBoundsError(start, len(data))
            if start > end:
                raise OffsetsNotAscendingError()
            result.append(data[start:end])
            cursor += BYTES_PER_OFFSET
        else:
            result.append(data[cursor:cursor + size])
            cursor += size
    return result