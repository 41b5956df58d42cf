# ethcodec

Small, dependency-free encoders and decoders for the two serialization
formats used by Ethereum:

- **RLP** (Recursive Length Prefix), used by the execution layer.
- **SSZ** (Simple Serialize), used by the consensus layer.

## Installation

```
pip install ethcodec
```

## RLP

An RLP item is either a byte string (`bytes`) or a list of items. Encode
with `ethcodec.rlp_encode.encode` and decode with
`ethcodec.rlp_decode.decode`:

```python
from ethcodec.rlp_encode import encode
from ethcodec.rlp_decode import decode

encoded = encode([b"cat", b"dog"])
assert encoded.hex() == "c88363617483646f67"
assert decode(encoded) == [b"cat", b"dog"]
```

`encode` accepts bytes-like values as strings and lists or tuples as lists.
`decode` reads exactly one item; `decode_one` returns the first item
together with the unread remainder. `classify` tells which kind of item
(`ByteRange`) a prefix byte announces.

Plain Python values can be turned into RLP with `ethcodec.rlp_encodable`.
Booleans and non-negative integers up to 128 bits become minimal big-endian
bytes, strings their UTF-8 bytes, and lists or tuples a list of converted
items. Classes deriving from `Encodable` supply their own `to_rlp_item`.

```python
from ethcodec.rlp_encodable import rlp_encode, to_rlp_item

assert rlp_encode("dog").hex() == "83646f67"
assert rlp_encode(1024).hex() == "820400"
assert rlp_encode(False).hex() == "80"
assert to_rlp_item(["cat", 0]) == [b"cat", b""]
```

Malformed input raises a subclass of `ethcodec.rlp_errors.RlpError` (itself
a `ValueError`): `InputTooShortError`, `LengthOutOfBoundsError`,
`NonCanonicalLengthError`, `NonCanonicalSingleByteError`,
`TrailingBytesError` or `ZeroLenLenError`.

## SSZ

Basic values are encoded little-endian at fixed width:

```python
from ethcodec.ssz_encode import (
    encode_u64, encode_bitlist, encode_container, FixedField, VariableField,
)
from ethcodec.ssz_decode import decode_u64, decode_bitlist, decode_container

assert encode_u64(1025).hex() == "0104000000000000"
assert decode_u64(bytes.fromhex("0104000000000000")) == 1025

assert encode_bitlist([False, False, False], 100).hex() == "08"
assert decode_bitlist(bytes.fromhex("08"), 100) == [False, False, False]

data = encode_container([VariableField(b"\x01\x02\x03"), VariableField(b"\x04\x05")])
assert decode_container(data, [None, None]) == [b"\x01\x02\x03", b"\x04\x05"]
```

`ethcodec.ssz_encode` also offers `encode_bool`, `encode_u8` to
`encode_u128`, `encode_u256`, `encode_vector`, `encode_vector_raw`,
`encode_list` and `encode_bitvector`. `ethcodec.ssz_decode` has the
matching `decode_*` functions plus `decode_vector_fixed`,
`decode_list_fixed` and `decode_list_variable`, which take a function to
decode each element. `decode_container` takes one entry per field: the size
of a fixed field, or `None` for a variable field behind an offset, and
returns the raw bytes of each field.

Type descriptors in `ethcodec.ssz_types` (`Boolean`, `Uint`, `SszVector`,
`SszList`) report whether they are fixed-size and their fixed size, and
encode values of their type. `Boolean` and `Uint` can also decode.

```python
from ethcodec.ssz_types import SszList, Uint

assert SszList(Uint(16)).encode([1, 2]).hex() == "01000200"
```

Invalid input raises a subclass of `ethcodec.ssz_errors.SszError` (itself a
`ValueError`).

## Command line

The `ethcodec` command encodes and decodes RLP values from the shell. Each
subcommand takes one optional value and falls back to a sample when it is
left out:

```
ethcodec decode-bytes 8180
ethcodec decode-list c88363617483646f67
ethcodec decode-str 83646f67
ethcodec decode-u8 7f
ethcodec encode-bool true
ethcodec encode-bytes 80
ethcodec encode-list
ethcodec encode-str dog
ethcodec encode-u64 1024
ethcodec encode-u8 0
```

`encode-list` always encodes the list `[b"cat", b"dog"]`. `trace-length`
prints, step by step, how lengths are written as big-endian bytes, either
for the numbers given or for a built-in set of cases:

```
ethcodec trace-length 56 1024
```

Bad hex or malformed RLP input prints an error and exits with status 1.

## Limits

The package serializes and deserializes only. It does not compute SSZ hash
tree roots, and the command line covers RLP alone.

## Running the tests

```
pip install -e ".[test]"
pytest
```