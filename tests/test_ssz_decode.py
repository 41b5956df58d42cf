import pytest

from ethcodec.ssz_decode import (
    decode_bitlist,
    decode_bitvector,
    decode_bool,
    decode_container,
    decode_list_fixed,
    decode_list_variable,
    decode_u8,
    decode_u16,
    decode_u32,
    decode_u64,
    decode_u128,
    decode_vector_fixed,
)
from ethcodec.ssz_encode import (
    VariableField,
    encode_bitlist,
    encode_container,
    encode_u32,
    encode_u64,
    encode_u128,
)
from ethcodec.ssz_errors import (
    ExtraBitsSetError,
    InputTooShortError,
    InvalidBooleanError,
    InvalidFirstOffsetError,
    InvalidLengthError,
    ListTooLongError,
    MissingSentinelBitError,
    OffsetsNotAscendingError,
)


def test_decode_bool_true():
    assert decode_bool(b"\x01") is True


def test_decode_bool_false():
    assert decode_bool(b"\x00") is False


def test_decode_bool_invalid():
    with pytest.raises(InvalidBooleanError) as info:
        decode_bool(b"\x02")
    assert info.value.value == 0x02


def test_decode_bool_empty():
    with pytest.raises(InputTooShortError):
        decode_bool(b"")


def test_decode_u8():
    assert decode_u8(b"\x7f") == 0x7F


def test_decode_u16_1025():
    assert decode_u16(bytes([0x01, 0x04])) == 1025


def test_decode_u64_37():
    assert decode_u64(bytes([37, 0, 0, 0, 0, 0, 0, 0])) == 37


def test_decode_u64_spec_example():
    assert decode_u64(bytes.fromhex("0104000000000000")) == 1025


def test_decode_u64_too_short():
    with pytest.raises(InputTooShortError):
        decode_u64(bytes([1, 2, 3]))


def test_decode_u32_too_short():
    with pytest.raises(InputTooShortError):
        decode_u32(b"\x01\x02")


@pytest.mark.parametrize("value", [0, 1, 37, 255, 1024, 2**64 - 1])
def test_roundtrip_u64(value):
    assert decode_u64(encode_u64(value)) == value


def test_roundtrip_u128():
    value = 2**128 - 1
    assert decode_u128(encode_u128(value)) == value


def test_decode_vector_u64():
    data = bytes.fromhex("000100000000000000020000000000000003000000000000")
    assert decode_vector_fixed(data, 8, 3, decode_u64) == [256, 512, 768]


def test_decode_vector_wrong_length():
    data = bytes.fromhex("000100000000000000020000000000000003000000000000")
    with pytest.raises(InvalidLengthError):
        decode_vector_fixed(data, 8, 2, decode_u64)


def test_decode_list_u64():
    data = bytes.fromhex("00040000000000000008000000000000000c000000000000")
    assert decode_list_fixed(data, 8, 5, decode_u64) == [1024, 2048, 3072]


def test_decode_list_too_long():
    data = bytes.fromhex("00040000000000000008000000000000000c000000000000")
    with pytest.raises(ListTooLongError):
        decode_list_fixed(data, 8, 2, decode_u64)


def test_decode_list_not_multiple():
    with pytest.raises(InvalidLengthError):
        decode_list_fixed(b"\x00" * 9, 8, 5, decode_u64)


def test_decode_list_variable_roundtrip():
    data = encode_container([VariableField(b"\x01\x02"), VariableField(b"\x03")])
    assert decode_list_variable(data, 10, bytes) == [b"\x01\x02", b"\x03"]


def test_decode_list_variable_empty():
    assert decode_list_variable(b"", 10, bytes) == []


def test_decode_list_variable_too_long():
    data = encode_container([VariableField(b"\x01"), VariableField(b"\x02")])
    with pytest.raises(ListTooLongError):
        decode_list_variable(data, 1, bytes)


def test_decode_list_variable_misaligned_first_offset():
    with pytest.raises(InvalidFirstOffsetError):
        decode_list_variable(encode_u32(5) + b"\x00", 10, bytes)


def test_decode_list_variable_not_ascending():
    data = encode_u32(8) + encode_u32(8) + b"\x01"
    with pytest.raises(OffsetsNotAscendingError):
        decode_list_variable(data, 10, bytes)


def test_decode_bitvector_b4():
    bits = decode_bitvector(bytes.fromhex("b4"), 8)
    assert bits == [False, False, True, False, True, True, False, True]


def test_decode_bitvector_extra_bits():
    with pytest.raises(ExtraBitsSetError):
        decode_bitvector(bytes.fromhex("ff"), 5)


def test_decode_bitvector_wrong_length():
    with pytest.raises(InvalidLengthError):
        decode_bitvector(b"\x00\x00", 8)


def test_decode_bitlist_three_zeros():
    assert decode_bitlist(bytes.fromhex("08"), 100) == [False, False, False]


def test_decode_bitlist_roundtrip():
    original = [True, False, True, True, False]
    assert decode_bitlist(encode_bitlist(original, 100), 100) == original


def test_decode_bitlist_missing_sentinel():
    with pytest.raises(MissingSentinelBitError):
        decode_bitlist(b"\x01\x00", 100)


def test_decode_bitlist_empty():
    with pytest.raises(MissingSentinelBitError):
        decode_bitlist(b"", 100)


def test_decode_bitlist_too_long():
    with pytest.raises(ListTooLongError):
        decode_bitlist(bytes.fromhex("08"), 2)


def test_decode_container_dummy_example():
    data = bytes([37, 0, 0, 0, 55, 0, 0, 0, 16, 0, 0, 0, 22, 0, 0, 0, 1, 2, 3, 4])
    fields = decode_container(data, [4, 4, None, 4])
    assert decode_u32(fields[0]) == 37
    assert decode_u32(fields[1]) == 55
    assert fields[2] == bytes([1, 2, 3, 4])
    assert decode_u32(fields[3]) == 22


def test_roundtrip_container_with_two_variable_fields():
    data = encode_container(
        [VariableField(bytes([1, 2, 3])), VariableField(bytes([4, 5, 6, 7, 8]))]
    )
    fields = decode_container(data, [None, None])
    assert fields == [bytes([1, 2, 3]), bytes([4, 5, 6, 7, 8])]


def test_decode_container_too_short():
    with pytest.raises(InputTooShortError):
        decode_container(b"\x00\x00", [4])


def test_decode_container_bad_first_offset():
    data = bytes([37, 0, 0, 0, 20, 0, 0, 0, 1, 2])
    with pytest.raises(InvalidFirstOffsetError) as info:
        decode_container(data, [4, None])
    assert info.value.expected == 8