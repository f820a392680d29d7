"""Residues modulo an odd modulus chosen at runtime, kept in Montgomery form."""

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


@dataclass(frozen=True, init=False)
class DynResidueParams:
    """Precomputed Montgomery parameters for an odd modulus.

    ``r`` is ``2**BITS mod modulus``; ``r2`` and ``r3`` are its square and cube,
    and ``mod_neg_inv`` is the lowest word of ``-modulus**-1 mod 2**BITS``.
    """

    modulus: ModularUint
    r: ModularUint
    r2: ModularUint
    r3: ModularUint
    mod_neg_inv: int

    def __init__(self, modulus: ModularUint) -> None:
        if not isinstance(modulus, ModularUint):
            raise TypeError("modulus must be a fixed-width unsigned integer")
        m = int(modulus)
        if not m & 1:
            raise ValueError("modulus must be odd")
        cls = type(modulus)

        r = cls._wrap(cls._MASK % m + 1)
        r2 = cls((int(r) * int(r)) % m)

        low_word = cls.sized(1)(m & WORD_MAX)
        mod_neg_inv = -int(low_word.inv_mod2k(LIMB_BITS)) & WORD_MAX

        r3 = montgomery_reduction(r2.square_wide(), modulus, mod_neg_inv)

        object.__setattr__(self, "modulus", modulus)
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "r2", r2)
        object.__setattr__(self, "r3", r3)
        object.__setattr__(self, "mod_neg_inv", mod_neg_inv)


@dataclass(frozen=True, init=False)
class DynResidue:
    """An integer modulo the odd modulus held by its :class:`DynResidueParams`."""

    montgomery_form: ModularUint
    residue_params: DynResidueParams

    def __init__(self, integer: ModularUint, residue_params: DynResidueParams) -> None:
        if not isinstance(residue_params, DynResidueParams):
            raise TypeError("residue_params must be DynResidueParams")
        if not isinstance(integer, ModularUint):
            raise TypeError("integer must be a fixed-width unsigned integer")
        product = integer.mul_wide(residue_params.r2)
        form = montgomery_reduction(
            product, residue_params.modulus, residue_params.mod_neg_inv
        )
        object.__setattr__(self, "montgomery_form", form)
        object.__setattr__(self, "residue_params", residue_params)

    @classmethod
    def _from_form(
        cls, montgomery_form: ModularUint, residue_params: DynResidueParams
    ) -> DynResidue:
        residue = object.__new__(cls)
        object.__setattr__(residue, "montgomery_form", montgomery_form)
        object.__setattr__(residue, "residue_params", residue_params)
        return residue

    def retrieve(self) -> ModularUint:
        """Return the reduced integer this residue represents."""
        params = self.residue_params
        form = self.montgomery_form
        return montgomery_reduction(
            (form, type(form).ZERO), params.modulus, params.mod_neg_inv
        )

    @classmethod
    def zero(cls, residue_params: DynResidueParams) -> DynResidue:
        """Return the residue representing 0."""
        return cls._from_form(type(residue_params.modulus).ZERO, residue_params)

    @classmethod
    def one(cls, residue_params: DynResidueParams) -> DynResidue:
        """Return the residue representing 1."""
        return cls._from_form(residue_params.r, residue_params)

    def params(self) -> DynResidueParams:
        """Return the parameters this residue was created with."""
        return self.residue_params

    def _check_same(self, rhs: DynResidue) -> None:
        if not isinstance(rhs, DynResidue):
            raise TypeError("operand must be a DynResidue")
        if rhs.residue_params != self.residue_params:
            raise ValueError("residues have different moduli")

    def div_by_2(self) -> DynResidue:
        """Return ``y`` such that ``2 * y == self``."""
        return self._from_form(
            div_by_2(self.montgomery_form, self.residue_params.modulus),
            self.residue_params,
        )

    def add(self, rhs: DynResidue) -> DynResidue:
        """Return ``self + rhs``."""
        self._check_same(rhs)
        return self._from_form(
            add_montgomery_form(
                self.montgomery_form, rhs.montgomery_form, self.residue_params.modulus
            ),
            self.residue_params,
        )

    def sub(self, rhs: DynResidue) -> DynResidue:
        """Return ``self - rhs``."""
        self._check_same(rhs)
        return self._from_form(
            sub_montgomery_form(
                self.montgomery_form, rhs.montgomery_form, self.residue_params.modulus
            ),
            self.residue_params,
        )

    def mul(self, rhs: DynResidue) -> DynResidue:
        """Return ``self * rhs``."""
        self._check_same(rhs)
        params = self.residue_params
        return self._from_form(
            mul_montgomery_form(
                self.montgomery_form,
                rhs.montgomery_form,
                params.modulus,
                params.mod_neg_inv,
            ),
            params,
        )

    def square(self) -> DynResidue:
        """Return ``self * self``."""
        params = self.residue_params
        return self._from_form(
            square_montgomery_form(
                self.montgomery_form, params.modulus, params.mod_neg_inv
            ),
            params,
        )

    def neg(self) -> DynResidue:
        """Return ``-self``."""
        return DynResidue.zero(self.residue_params).sub(self)

    def invert(self) -> Optional[DynResidue]:
        """Return the multiplicative inverse, or ``None`` if there is none."""
        params = self.residue_params
        form, is_some = inv_montgomery_form(
            self.montgomery_form, params.modulus, params.r3, params.mod_neg_inv
        )
        return self._from_form(form, params) if is_some else None

    def pow(self, exponent: UintCore) -> DynResidue:
        """Raise to the power ``exponent``."""
        return self.pow_bounded_exp(exponent, exponent.BITS)

    def pow_bounded_exp(self, exponent: UintCore, exponent_bits: int) -> DynResidue:
        """Raise to the power given by the lowest ``exponent_bits`` bits of ``exponent``.

        ``exponent_bits`` may be leaked in the time pattern.
        """
        params = self.residue_params
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

    def __add__(self, rhs: object) -> DynResidue:
        if not isinstance(rhs, DynResidue):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs: object) -> DynResidue:
        if not isinstance(rhs, DynResidue):
            return NotImplemented
        return self.sub(rhs)

    def __mul__(self, rhs: object) -> DynResidue:
        if not isinstance(rhs, DynResidue):
            return NotImplemented
        return self.mul(rhs)

    def __neg__(self) -> DynResidue:
        return self.neg()