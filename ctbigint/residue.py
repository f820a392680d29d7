"""Residues modulo a fixed odd modulus declared once, kept in Montgomery form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ctbigint.core import LIMB_BITS, WORD_MAX, UintCore
from ctbigint.modarith import ModularUint
from ctbigint.montgomery import (
    add_montgomery_form,
    div_by_2,
    inv_montgomery_form,
    montgomery_reduction,
    mul_montgomery_form,
    pow_montgomery_form,
    square_montgomery_form,
    sub_montgomery_form,
)
from ctbigint.uint import Uint


@dataclass(frozen=True)
class ResidueParams:
    """Named Montgomery parameters for a constant odd modulus.

    ``r`` is ``2**BITS mod modulus``; ``r2`` and ``r3`` are its square and cube
    modulo ``modulus``, and ``mod_neg_inv`` is the lowest word of
    ``-modulus**-1 mod 2**BITS``. Build these with :func:`impl_modulus`.
    """

    name: str
    modulus: ModularUint
    r: ModularUint
    r2: ModularUint
    r3: ModularUint
    mod_neg_inv: int

    @property
    def limbs(self) -> int:
        """Number of limbs needed to hold a residue."""
        return self.modulus.LIMBS


def impl_modulus(name: str, uint_type: type, value: str) -> ResidueParams:
    """Declare a modulus called ``name`` of width ``uint_type`` from big-endian hex."""
    if not (isinstance(uint_type, type) and issubclass(uint_type, Uint) and uint_type.LIMBS):
        raise TypeError("uint_type must be a sized Uint class")
    modulus = uint_type.from_be_hex(value)
    m = int(modulus)
    if not m & 1:
        raise ValueError("modulus must be odd")

    r = uint_type._wrap(uint_type._MASK % m + 1)
    r2 = uint_type((int(r) * int(r)) % m)
    mod_neg_inv = -(int(modulus.inv_mod2k(LIMB_BITS)) & WORD_MAX) & WORD_MAX
    r3 = montgomery_reduction(r2.square_wide(), modulus, mod_neg_inv)

    return ResidueParams(
        name=name, modulus=modulus, r=r, r2=r2, r3=r3, mod_neg_inv=mod_neg_inv
    )


@dataclass(frozen=True, init=False)
class Residue:
    """An integer modulo the constant modulus described by its :class:`ResidueParams`."""

    montgomery_form: ModularUint
    params: ResidueParams

    def __init__(self, integer: ModularUint, modulus: ResidueParams) -> None:
        if not isinstance(modulus, ResidueParams):
            raise TypeError("modulus must be ResidueParams")
        if not isinstance(integer, ModularUint):
            raise TypeError("integer must be a fixed-width unsigned integer")
        form = montgomery_reduction(
            integer.mul_wide(modulus.r2), modulus.modulus, modulus.mod_neg_inv
        )
        object.__setattr__(self, "montgomery_form", form)
        object.__setattr__(self, "params", modulus)

    @classmethod
    def _from_form(cls, montgomery_form: ModularUint, params: ResidueParams) -> Residue:
        residue = object.__new__(cls)
        object.__setattr__(residue, "montgomery_form", montgomery_form)
        object.__setattr__(residue, "params", params)
        return residue

    @classmethod
    def zero(cls, modulus: ResidueParams) -> Residue:
        """Return the residue representing 0."""
        return cls._from_form(type(modulus.modulus).ZERO, modulus)

    @classmethod
    def one(cls, modulus: ResidueParams) -> Residue:
        """Return the residue representing 1."""
        return cls._from_form(modulus.r, modulus)

    def retrieve(self) -> ModularUint:
        """Return the reduced integer this residue represents."""
        form = self.montgomery_form
        return montgomery_reduction(
            (form, type(form).ZERO), self.params.modulus, self.params.mod_neg_inv
        )

    def _check_same(self, rhs: Residue) -> None:
        if not isinstance(rhs, Residue):
            raise TypeError("operand must be a Residue")
        if rhs.params != self.params:
            raise ValueError("residues have different moduli")

    def div_by_2(self) -> Residue:
        """Return ``y`` such that ``2 * y == self``."""
        return self._from_form(
            div_by_2(self.montgomery_form, self.params.modulus), self.params
        )

    def add(self, rhs: Residue) -> Residue:
        """Return ``self + rhs``."""
        self._check_same(rhs)
        return self._from_form(
            add_montgomery_form(
                self.montgomery_form, rhs.montgomery_form, self.params.modulus
            ),
            self.params,
        )

    def sub(self, rhs: Residue) -> Residue:
        """Return ``self - rhs``."""
        self._check_same(rhs)
        return self._from_form(
            sub_montgomery_form(
                self.montgomery_form, rhs.montgomery_form, self.params.modulus
            ),
            self.params,
        )

    def mul(self, rhs: Residue) -> Residue:
        """Return ``self * rhs``."""
        self._check_same(rhs)
        return self._from_form(
            mul_montgomery_form(
                self.montgomery_form,
                rhs.montgomery_form,
                self.params.modulus,
                self.params.mod_neg_inv,
            ),
            self.params,
        )

    def square(self) -> Residue:
        """Return ``self * self``."""
        return self._from_form(
            square_montgomery_form(
                self.montgomery_form, self.params.modulus, self.params.mod_neg_inv
            ),
            self.params,
        )

    def neg(self) -> Residue:
        """Return ``-self``."""
        return Residue.zero(self.params).sub(self)

    def invert(self) -> Optional[Residue]:
        """Return the multiplicative inverse, or ``None`` if there is none."""
        params = self.params
        form, is_some = inv_montgomery_form(
            self.montgomery_form, params.modulus, params.r3, params.mod_neg_inv
        )
        return self._from_form(form, params) if is_some else None

    def pow(self, exponent: UintCore) -> Residue:
        """Raise to the power ``exponent``."""
        return self.pow_bounded_exp(exponent, exponent.BITS)

    def pow_bounded_exp(self, exponent: UintCore, exponent_bits: int) -> Residue:
        """Raise to the power given by the lowest ``exponent_bits`` bits of ``exponent``.

        ``exponent_bits`` may be leaked in the time pattern.
        """
        params = self.params
        return self._from_form(
            pow_montgomery_form(
                self.montgomery_form,
                exponent,
                exponent_bits,
                params.modulus,
                params.r,
                params.mod_neg_inv,
            ),
            params,
        )

    def __add__(self, rhs: object) -> Residue:
        if not isinstance(rhs, Residue):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs: object) -> Residue:
        if not isinstance(rhs, Residue):
            return NotImplemented
        return self.sub(rhs)

    def __mul__(self, rhs: object) -> Residue:
        if not isinstance(rhs, Residue):
            return NotImplemented
        return self.mul(rhs)

    def __neg__(self) -> Residue:
        return self.neg()


def const_residue(variable: ModularUint, modulus: ResidueParams) -> Residue:
    """Return the residue of ``variable`` modulo ``modulus``."""
    return Residue(variable, modulus)