import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ctbigint.modarith import ModularUint

U64 = ModularUint.sized(1)
U128 = ModularUint.sized(2)
U256 = ModularUint.sized(4)
U1024 = ModularUint.sized(16)

P256 = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551


def _hex(*parts):
    return int("".join(parts), 16)


def test_neg_mod_random():
    x = U256(0x8D16E171674B4E6D8529EDBA4593802BF30B8CB161DD30AA8E550D41380007C2)
    p = U256(0x928334A4E4BE0843EC225A4C9C61DF34BDC7A81513E4B6F76F2BFA3148E2E1B5)
    expected = U256(0x056C53337D72B9D666F86C9256CE5F08CABC1B63B207864CE0D6ECF010E2D9F3)
    assert x.neg_mod(p) == expected


def test_neg_mod_zero():
    p = U256(0x928334A4E4BE0843EC225A4C9C61DF34BDC7A81513E4B6F76F2BFA3148E2E1B5)
    assert U256.ZERO.neg_mod(p) == U256.ZERO


def test_neg_mod_special_base_cases():
    c = 0x1234567
    p = (1 << 128) - c
    assert U128.ZERO.neg_mod_special(c) == U128.ZERO
    assert U128.ONE.neg_mod_special(c) == U128(p - 1)


def test_inv_mod2k():
    v = U256(0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F)
    e = U256(0x3642E6FAEAAC7C6663B93D3D6A0D489E434DDC0123DB5FA627C7F6E22DDACACF)
    assert v.inv_mod2k(256) == e

    v = U256(0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141)
    e = U256(0x261776F29B6B106C7680CF3ED83054A1AF5AE537CB4613DBB4F20099AA774EC1)
    assert v.inv_mod2k(256) == e


def test_inv_mod2k_is_inverse():
    v = U256(0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141)
    a = v.inv_mod2k(256)
    assert v.wrapping_mul(a) == U256.ONE


def test_invert():
    a = U1024(
        _hex(
            "000225E99153B467A5B451979A3F451DAEF3BF8D6C6521D2FA24BBB17F29544E",
            "347A412B065B75A351EA9719E2430D2477B11CC9CF9C1AD6EDEE26CB15F463F8",
            "BCC72EF87EA30288E95A48AA792226CEC959DCB0672D8F9D80A54CBBEA85CAD8",
            "382EC224DEB2F5784E62D0CC2F81C2E6AD14EBABE646D6764B30C32B87688985",
        )
    )
    m = U1024(
        _hex(
            "D509E7854ABDC81921F669F1DC6F61359523F3949803E58ED4EA8BC16483DC6F",
            "37BFE27A9AC9EEA2969B357ABC5C0EE214BE16A7D4C58FC620D5B5A20AFF001A",
            "D198D3155E5799DC4EA76652D64983A7E130B5EACEBAC768D28D589C36EC749C",
            "558D0B64E37CD0775C0D0104AE7D98BA23C815185DD43CD8B16292FD94156767",
        )
    )
    expected = U1024(
        _hex(
            "B03623284B0EBABCABD5C5881893320281460C0A8E7BF4BFDCFFCBCCBF436A55",
            "D364235C8171E46C7D21AAD0680676E57274A8FDA6D12768EF961CACDD2DAE57",
            "88D93DA5EB8EDC391EE3726CDCF4613C539F7D23E8702200CB31B5ED5B06E5CA",
            "3E520968399B4017BF98A864FABA2B647EFC4998B56774D4F2CB026BC024A336",
        )
    )
    res, is_some = a.inv_odd_mod(m)
    assert is_some is True
    assert res == expected


def test_invert_bounded():
    zeros = "0" * 64
    a = U1024(
        _hex(
            zeros,
            "347A412B065B75A351EA9719E2430D2477B11CC9CF9C1AD6EDEE26CB15F463F8",
            "BCC72EF87EA30288E95A48AA792226CEC959DCB0672D8F9D80A54CBBEA85CAD8",
            "382EC224DEB2F5784E62D0CC2F81C2E6AD14EBABE646D6764B30C32B87688985",
        )
    )
    m = U1024(
        _hex(
            zeros,
            zeros,
            "D198D3155E5799DC4EA76652D64983A7E130B5EACEBAC768D28D589C36EC749C",
            "558D0B64E37CD0775C0D0104AE7D98BA23C815185DD43CD8B16292FD94156767",
        )
    )
    expected = U1024(
        _hex(
            zeros,
            zeros,
            "0DCC94E2FE509E6EBBA0825645A38E73EF85D5927C79C1AD8FFE7C8DF9A822FA",
            "09EB396A21B1EF05CBE51E1A8EF284EF01EBDD36A9A4EA17039D8EEFDD934768",
        )
    )
    res, is_some = a.inv_odd_mod_bounded(m, 768, 512)
    assert is_some is True
    assert res == expected


def test_invert_small():
    res, is_some = U64(3).inv_odd_mod(U64(13))
    assert is_some is True
    assert res == U64(9)


def test_no_inverse_small():
    _res, is_some = U64(14).inv_odd_mod(U64(49))
    assert is_some is False


def test_inv_odd_mod_rejects_even_modulus():
    with pytest.raises(ValueError):
        U64(3).inv_odd_mod(U64(10))


@settings(max_examples=50, deadline=None)
@given(st.integers(1, P256 - 1))
def test_inv_odd_mod_is_inverse(a):
    inverse, is_some = U256(a).inv_odd_mod(U256(P256))
    assert is_some is True
    assert (int(inverse) * a) % P256 == 1


@pytest.mark.parametrize("cls", [U64, U128, U256])
def test_sub_mod_base_cases(cls):
    p = cls(int(cls.MAX) - 1234)
    assert cls(1).sub_mod(cls(0), p) == cls(1)
    assert cls(0).sub_mod(cls(1), p) == cls(int(p) - 1)
    assert cls(0).sub_mod(cls(0), p) == cls(0)


@settings(max_examples=100, deadline=None)
@given(st.integers(0, P256 - 1), st.integers(0, P256 - 1))
def test_sub_mod_nist_p256(a, b):
    if b > a:
        a, b = b, a
    actual = U256(a).sub_mod(U256(b), U256(P256))
    assert int(actual) < P256
    assert int(actual) == (a - b) % P256


@settings(max_examples=100, deadline=None)
@given(st.integers(0, P256 - 1), st.integers(0, P256 - 1))
def test_sub_mod_any_order_is_reduced(a, b):
    actual = U256(a).sub_mod(U256(b), U256(P256))
    assert int(actual) == (a - b) % P256


def test_sub_mod_width_mismatch():
    with pytest.raises(TypeError):
        U128(5).sub_mod(U64(1), U128(7))


@pytest.mark.parametrize("cls", [U64, U128, U256])
@pytest.mark.parametrize("c", [3, 0x1234567, 0xFFFFFFF123456789])
def test_sub_mod_special_base_cases(cls, c):
    p = (1 << cls.BITS) - c
    minus_one = cls(p - 1)
    assert cls.ZERO.sub_mod_special(cls.ZERO, c) == cls.ZERO
    assert cls.ONE.sub_mod_special(cls.ZERO, c) == cls.ONE
    assert cls.ZERO.sub_mod_special(cls.ONE, c) == minus_one
    assert minus_one.sub_mod_special(minus_one, c) == cls.ZERO
    assert cls.ZERO.sub_mod_special(minus_one, c) == cls.ONE


@settings(max_examples=100, deadline=None)
@given(st.data())
def test_sub_mod_special_matches_sub_mod(data):
    c = 0xFFFFFFF123456789
    p = (1 << 256) - c
    a = data.draw(st.integers(0, p - 1))
    b = data.draw(st.integers(0, p - 1))
    special = U256(a).sub_mod_special(U256(b), c)
    assert int(special) < p
    assert special == U256(a).sub_mod(U256(b), U256(p))


@pytest.mark.parametrize("cls", [U64, U128, U256])
@pytest.mark.parametrize("c", [3, 0x1234567, 0xFFFFFFF123456789])
def test_mul_mod_special_base_cases(cls, c):
    p = (1 << cls.BITS) - c
    minus_one = cls(p - 1)
    assert cls.ZERO.mul_mod_special(cls.ZERO, c) == cls.ZERO
    assert cls.ONE.mul_mod_special(cls.ZERO, c) == cls.ZERO
    assert cls.ZERO.mul_mod_special(cls.ONE, c) == cls.ZERO
    assert cls.ONE.mul_mod_special(cls.ONE, c) == cls.ONE
    assert minus_one.mul_mod_special(minus_one, c) == cls.ONE
    assert minus_one.mul_mod_special(cls.ONE, c) == minus_one
    assert cls.ONE.mul_mod_special(minus_one, c) == minus_one


@pytest.mark.parametrize("cls", [U64, U128, U256])
@pytest.mark.parametrize("c", [3, 0x1234567, 0xFFFFFFF123456789])
@settings(max_examples=50, deadline=None)
@given(data=st.data())
def test_mul_mod_special_is_reduced_product(cls, c, data):
    p = (1 << cls.BITS) - c
    a = data.draw(st.integers(0, p - 1))
    b = data.draw(st.integers(0, p - 1))
    result = cls(a).mul_mod_special(cls(b), c)
    assert int(result) < p
    assert int(result) == (a * b) % p


def test_mul_mod_special_zero_modulus_single_limb():
    with pytest.raises(ZeroDivisionError):
        U64(2).mul_mod_special(U64(3), 0)


def test_mul_mod_special_rejects_wide_c():
    with pytest.raises(ValueError):
        U128(2).mul_mod_special(U128(3), 1 << 64)