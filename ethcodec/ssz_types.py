"""SSZ type descriptors that know their size and how to encode values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from ethcodec.ssz_decode import (
    decode_bool,
    decode_u8,
    decode_u16,
    decode_u32,
    decode_u64,
    decode_u128,
)
from ethcodec.ssz_encode import (
    encode_bool,
    encode_u8,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_u128,
)
from ethcodec.ssz_errors import BYTES_PER_OFFSET


class SszType(ABC):
    """Description of an SSZ type."""

    @abstractmethod
    def is_fixed_size(self) -> bool:
        """Whether every value of this type encodes to the same length."""

    def fixed_size(self) -> Optional[int]:
        """The encoded length of a fixed-size type, or None."""
        return None

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Serialize ``value`` as this type."""


@dataclass(frozen=True)
class Boolean(SszType):
    """A boolean stored in one byte."""

    def is_fixed_size(self) -> bool:
        return True

    def fixed_size(self) -> Optional[int]:
        return 1

    def encode(self, value: bool) -> bytes:
        return encode_bool(value)

    def decode(self, data: bytes) -> bool:
        """Deserialize a boolean."""
        return decode_bool(data)


_UINT_CODECS: Dict[int, tuple[Callable[[int], bytes], Callable[[bytes], int]]] = {
    8: (encode_u8, decode_u8),
    16: (encode_u16, decode_u16),
    32: (encode_u32, decode_u32),
    64: (encode_u64, decode_u64),
    128: (encode_u128, decode_u128),
}


@dataclass(frozen=True)
class Uint(SszType):
    """An unsigned little-endian integer of 8, 16, 32, 64 or 128 bits."""

    bits: int

    def __post_init__(self) -> None:
        if self.bits not in _UINT_CODECS:
            raise ValueError(f"unsupported integer width: {self.bits}")

    def is_fixed_size(self) -> bool:
        return True

    def fixed_size(self) -> Optional[int]:
        return self.bits // 8

    def encode(self, value: int) -> bytes:
        return _UINT_CODECS[self.bits][0](value)

    def decode(self, data: bytes) -> int:
        """Deserialize an integer of this width."""
        return _UINT_CODECS[self.bits][1](data)


@dataclass(frozen=True)
class SszVector(SszType):
    """A sequence of exactly ``length`` elements."""

    element_type: SszType
    length: int

    def is_fixed_size(self) -> bool:
        return self.element_type.is_fixed_size()

    def fixed_size(self) -> Optional[int]:
        size = self.element_type.fixed_size()
        return None if size is None else size * self.length

    def encode(self, value: Sequence[Any]) -> bytes:
        if len(value) != self.length:
            raise ValueError(
                f"vector needs {self.length} elements, got {len(value)}"
            )
        return b"".join(self.element_type.encode(element) for element in value)


@dataclass(frozen=True)
class SszList(SszType):
    """A variable-length sequence of elements."""

    element_type: SszType

    def is_fixed_size(self) -> bool:
        return False

    def fixed_size(self) -> Optional[int]:
        return None

    def encode(self, value: Sequence[Any]) -> bytes:
        encoded = [self.element_type.encode(element) for element in value]
        if self.element_type.is_fixed_size():
            return b"".join(encoded)
        table_size = len(encoded) * BYTES_PER_OFFSET
        offsets = bytearray()
        heap = bytearray()
        for item in encoded:
            offsets += encode_u32(table_size + len(heap))
            heap += item
        return bytes(offsets + heap)