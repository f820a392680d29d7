import pytest
from hypothesis import given
from hypothesis import strategies as st

from ctbigint.encoding import EncodedUint

U128 = EncodedUint.sized(2)
U256 = EncodedUint.sized(4)

LIMBS_EXPECTED = (0x8899AABBCCDDEEFF, 0x0011223344556677)


def test_from_be_slice():
    n = U128.from_be_slice(bytes.fromhex("00112233445566778899aabbccddeeff"))
    assert n.as_words() == LIMBS_EXPECTED


def test_from_le_slice():
    n = U128.from_le_slice(bytes.fromhex("ffeeddccbbaa99887766554433221100"))
    assert n.as_words() == LIMBS_EXPECTED


def test_from_be_hex():
    n = U128.from_be_hex("00112233445566778899aabbccddeeff")
    assert n.as_words() == LIMBS_EXPECTED


def test_from_le_hex():
    n = U128.from_le_hex("ffeeddccbbaa99887766554433221100")
    assert n.as_words() == LIMBS_EXPECTED


def test_hex_upper():
    hex_str = "AAAAAAAABBBBBBBBCCCCCCCCDDDDDDDD"
    n = U128.from_be_hex(hex_str)
    assert f"{n:X}" == hex_str


def test_hex_lower():
    hex_str = "aaaaaaaabbbbbbbbccccccccdddddddd"
    n = U128.from_be_hex(hex_str)
    assert f"{n:x}" == hex_str


def test_hex_format_is_zero_padded():
    assert f"{U128.ONE:x}" == "0" * 31 + "1"


def test_to_bytes():
    n = U128.from_be_hex("00112233445566778899aabbccddeeff")
    assert n.to_be_bytes() == bytes.fromhex("00112233445566778899aabbccddeeff")
    assert n.to_le_bytes() == bytes.fromhex("ffeeddccbbaa99887766554433221100")


def test_wrong_slice_size():
    with pytest.raises(ValueError):
        U128.from_be_slice(b"\x00" * 15)
    with pytest.raises(ValueError):
        U128.from_le_slice(b"\x00" * 17)


def test_wrong_hex_size():
    with pytest.raises(ValueError):
        U128.from_be_hex("0011")
    with pytest.raises(ValueError):
        U128.from_le_hex("00" * 17)


def test_invalid_hex_digit():
    with pytest.raises(ValueError):
        U128.from_be_hex("g" + "0" * 31)
    with pytest.raises(ValueError):
        U128.from_le_hex(" " * 32)


@given(st.binary(min_size=32, max_size=32))
def test_encoding_round_trip(data):
    a = U256.from_le_slice(data)
    assert U256.from_be_slice(a.to_be_bytes()) == a
    assert U256.from_le_slice(a.to_le_bytes()) == a
    assert a.to_le_bytes() == data


@given(st.binary(min_size=32, max_size=32))
def test_encoding_reverse(data):
    a = U256.from_le_slice(data)
    assert U256.from_le_slice(a.to_be_bytes()[::-1]) == a
    assert U256.from_be_slice(a.to_le_bytes()[::-1]) == a


@given(st.binary(min_size=32, max_size=32))
def test_hex_round_trip(data):
    a = U256.from_be_slice(data)
    assert U256.from_be_hex(f"{a:x}") == a
    assert U256.from_be_hex(f"{a:X}") == a
    assert U256.from_le_hex(a.to_le_bytes().hex()) == a