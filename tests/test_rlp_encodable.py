import pytest

from ethcodec.rlp_encodable import Encodable, rlp_encode, to_rlp_item

LOREM = "Lorem ipsum dolor sit amet, consectetur adipisicing elit"


class _Pair(Encodable):
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def to_rlp_item(self):
        return [to_rlp_item(self.left), to_rlp_item(self.right)]


def test_u8_zero_is_empty():
    assert rlp_encode(0) == bytes([0x80])


def test_u8_self_describing():
    assert rlp_encode(1) == bytes([0x01])
    assert rlp_encode(0x7F) == bytes([0x7F])


def test_u64_1024():
    assert rlp_encode(1024) == bytes([0x82, 0x04, 0x00])


def test_bool_false():
    assert rlp_encode(False) == bytes([0x80])


def test_bool_true():
    assert rlp_encode(True) == bytes([0x01])


def test_string_dog():
    assert rlp_encode("dog") == bytes([0x83, 0x64, 0x6F, 0x67])


def test_string_cat():
    assert rlp_encode("cat") == bytes([0x83, 0x63, 0x61, 0x74])


def test_vec_of_strings():
    assert rlp_encode(["cat", "dog"])[0] == 0xC8


def test_list_of_strings_full_encoding():
    assert rlp_encode(["cat", "dog"]) == bytes(
        [0xC8, 0x83, 0x63, 0x61, 0x74, 0x83, 0x64, 0x6F, 0x67]
    )


def test_lorem_ipsum():
    encoded = rlp_encode(LOREM)
    assert encoded[0] == 0xB8
    assert encoded[1] == 56
    assert encoded[2:] == LOREM.encode()


def test_bytes_pass_through():
    assert to_rlp_item(bytearray(b"dog")) == b"dog"
    assert rlp_encode(bytes([0x80])) == bytes([0x81, 0x80])


def test_integer_item_has_no_leading_zeros():
    assert to_rlp_item(0x0100) == bytes([0x01, 0x00])
    assert to_rlp_item(0) == b""


def test_custom_encodable():
    assert rlp_encode(_Pair("cat", "dog")) == rlp_encode(["cat", "dog"])


def test_negative_integer_rejected():
    with pytest.raises(ValueError):
        to_rlp_item(-1)


def test_integer_beyond_128_bits_rejected():
    with pytest.raises(OverflowError):
        to_rlp_item(1 << 128)


def test_unsupported_type_rejected():
    with pytest.raises(TypeError):
        to_rlp_item(1.5)


def test_abstract_encodable_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Encodable()