"""Bitwise shifts for fixed-width unsigned integers."""

from __future__ import annotations

import operator

from ctbigint.core import UintCore


def _shift_amount(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError("shift amount must not be negative")
    return n


def _check_pair(lower: UintCore, upper: UintCore) -> None:
    if lower.LIMBS != upper.LIMBS:
        raise ValueError("both halves of a wide value must have the same width")


class ShiftingUint(UintCore):
    """Fixed-width integer with left and right shifts."""

    __slots__ = ()

    def shl_vartime(self, n: int) -> ShiftingUint:
        """Return ``self << n``, dropping bits shifted past the width."""
        n = _shift_amount(n)
        cls = type(self)
        if n >= self.BITS:
            return cls.ZERO
        return cls((self._value << n) & self._MASK)

    def shr_vartime(self, shift: int) -> ShiftingUint:
        """Return ``self >> shift``."""
        shift = _shift_amount(shift)
        cls = type(self)
        if shift >= self.BITS:
            return cls.ZERO
        return cls(self._value >> shift)

    def _shl_1(self) -> tuple[ShiftingUint, bool]:
        """Shift left by one, returning the result and the bit shifted out."""
        carry = bool(self._value >> (self.BITS - 1))
        return type(self)((self._value << 1) & self._MASK), carry

    def _shr_1(self) -> tuple[ShiftingUint, bool]:
        """Shift right by one, returning the result and the bit shifted out."""
        return type(self)(self._value >> 1), bool(self._value & 1)

    @classmethod
    def shl_vartime_wide(
        cls, lower_upper: tuple[ShiftingUint, ShiftingUint], n: int
    ) -> tuple[ShiftingUint, ShiftingUint]:
        """Shift a double-width value given as ``(lo, hi)`` left by ``n``."""
        lower, upper = lower_upper
        _check_pair(lower, upper)
        n = _shift_amount(n)
        bits = lower.BITS
        new_lower = lower.shl_vartime(n)
        if n >= bits:
            carried = lower.shl_vartime(n - bits)
        else:
            carried = lower.shr_vartime(bits - n)
        new_upper = type(upper)(int(upper.shl_vartime(n)) | int(carried))
        return new_lower, new_upper

    @classmethod
    def shr_vartime_wide(
        cls, lower_upper: tuple[ShiftingUint, ShiftingUint], n: int
    ) -> tuple[ShiftingUint, ShiftingUint]:
        """Shift a double-width value given as ``(lo, hi)`` right by ``n``."""
        lower, upper = lower_upper
        _check_pair(lower, upper)
        n = _shift_amount(n)
        bits = upper.BITS
        new_upper = upper.shr_vartime(n)
        if n >= bits:
            carried = upper.shr_vartime(n - bits)
        else:
            carried = upper.shl_vartime(bits - n)
        new_lower = type(lower)(int(lower.shr_vartime(n)) | int(carried))
        return new_lower, new_upper

    def __lshift__(self, n: int) -> ShiftingUint:
        return self.shl_vartime(n)

    def __rshift__(self, n: int) -> ShiftingUint:
        return self.shr_vartime(n)