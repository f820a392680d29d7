"""Arithmetic on integers kept in Montgomery form."""

from __future__ import annotations

from ctbigint.core import LIMB_BITS, WORD_MAX, UintCore, _check_range
from ctbigint.modarith import ModularUint

_WINDOW = 4
_WINDOW_MASK = (1 << _WINDOW) - 1


def _same_width(*values: UintCore) -> None:
    widths = {value.LIMBS for value in values}
    if len(widths) != 1:
        raise ValueError("all operands must have the same width")


def montgomery_reduction(
    lower_upper: tuple[ModularUint, ModularUint],
    modulus: ModularUint,
    mod_neg_inv: int,
) -> ModularUint:
    """Return ``x / R mod modulus`` for the double-width ``x`` given as ``(lo, hi)``.

    ``mod_neg_inv`` is the lowest word of ``-modulus**-1 mod R``.
    """
    lower, upper = lower_upper
    _same_width(lower, upper, modulus)
    mni = _check_range(mod_neg_inv, LIMB_BITS)
    m = int(modulus)

    value = int(lower) | (int(upper) << modulus.BITS)
    for index in range(modulus.LIMBS):
        shift = index * LIMB_BITS
        u = (((value >> shift) & WORD_MAX) * mni) & WORD_MAX
        value += (u * m) << shift

    # The low half is now zero; the high half is below 2 * modulus.
    value >>= modulus.BITS
    if value >= m:
        value -= m
    return type(modulus)(value & modulus._MASK)


def add_montgomery_form(
    a: ModularUint, b: ModularUint, modulus: ModularUint
) -> ModularUint:
    """Return ``a + b mod modulus`` for reduced operands."""
    _same_width(a, b, modulus)
    total = int(a) + int(b)
    low = type(a)(total & a._MASK)
    return low._sub_mod_with_carry(total >> a.BITS, modulus, modulus)


def sub_montgomery_form(
    a: ModularUint, b: ModularUint, modulus: ModularUint
) -> ModularUint:
    """Return ``a - b mod modulus`` for reduced operands."""
    return a.sub_mod(b, modulus)


def mul_montgomery_form(
    a: ModularUint, b: ModularUint, modulus: ModularUint, mod_neg_inv: int
) -> ModularUint:
    """Multiply two values in Montgomery form."""
    return montgomery_reduction(a.mul_wide(b), modulus, mod_neg_inv)


def square_montgomery_form(
    a: ModularUint, modulus: ModularUint, mod_neg_inv: int
) -> ModularUint:
    """Square a value in Montgomery form."""
    return montgomery_reduction(a.square_wide(), modulus, mod_neg_inv)


def div_by_2(a: ModularUint, modulus: ModularUint) -> ModularUint:
    """Return ``y`` with ``2 * y == a mod modulus`` for an odd ``modulus``.

    Works the same whether or not ``a`` is in Montgomery form.
    """
    _same_width(a, modulus)
    half, is_odd = a._shr_1()
    if not is_odd:
        return half
    return type(a)((int(half) + (int(modulus) >> 1) + 1) & a._MASK)


def inv_montgomery_form(
    x: ModularUint, modulus: ModularUint, r3: ModularUint, mod_neg_inv: int
) -> tuple[ModularUint, bool]:
    """Invert a value in Montgomery form.

    Returns ``(inverse, exists)``; the inverse is unspecified when it does not exist.
    """
    inverse, is_some = x.inv_odd_mod(modulus)
    return montgomery_reduction(inverse.mul_wide(r3), modulus, mod_neg_inv), is_some


def pow_montgomery_form(
    x: ModularUint,
    exponent: UintCore,
    exponent_bits: int,
    modulus: ModularUint,
    r: ModularUint,
    mod_neg_inv: int,
) -> ModularUint:
    """Raise ``x`` (in Montgomery form) to ``exponent`` using a fixed 4-bit window.

    Only the lowest ``exponent_bits`` bits of ``exponent`` are used.
    """
    _same_width(x, exponent, modulus, r)
    if not 0 <= exponent_bits <= exponent.BITS:
        raise ValueError(f"exponent_bits must lie in [0, {exponent.BITS}]")
    if exponent_bits == 0:
        return r

    powers = [r, x]
    while len(powers) < 1 << _WINDOW:
        powers.append(mul_montgomery_form(powers[-1], x, modulus, mod_neg_inv))

    e = int(exponent) & ((1 << exponent_bits) - 1)
    top = _WINDOW * ((exponent_bits - 1) // _WINDOW)

    z = r
    for position in range(top, -1, -_WINDOW):
        if position != top:
            for _ in range(_WINDOW):
                z = square_montgomery_form(z, modulus, mod_neg_inv)
        z = mul_montgomery_form(
            z, powers[(e >> position) & _WINDOW_MASK], modulus, mod_neg_inv
        )
    return z