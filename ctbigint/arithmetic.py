"""Multiplication and subtraction for fixed-width unsigned integers."""

from __future__ import annotations

from typing import Optional

from ctbigint.core import LIMB_BITS, WORD_MAX, UintCore, _check_range
from ctbigint.shifts import ShiftingUint


class ArithmeticUint(ShiftingUint):
    """Fixed-width integer with wide, wrapping, saturating and checked arithmetic."""

    __slots__ = ()

    def _operand(self, rhs: UintCore) -> int:
        if not isinstance(rhs, UintCore):
            raise TypeError(f"expected an unsigned integer, got {type(rhs).__name__}")
        if rhs.LIMBS != self.LIMBS:
            raise TypeError("operands must have the same width")
        return int(rhs)

    def mul_wide(self, rhs: UintCore) -> tuple[ArithmeticUint, ArithmeticUint]:
        """Return the double-width product as ``(lo, hi)``."""
        product = self._value * self._operand(rhs)
        cls = type(self)
        return cls(product & self._MASK), cls(product >> self.BITS)

    def saturating_mul(self, rhs: UintCore) -> ArithmeticUint:
        """Multiply, returning ``MAX`` on overflow."""
        lo, hi = self.mul_wide(rhs)
        return type(self).MAX if int(hi) else lo

    def wrapping_mul(self, rhs: UintCore) -> ArithmeticUint:
        """Multiply, discarding overflow."""
        return self.mul_wide(rhs)[0]

    def checked_mul(self, rhs: UintCore) -> Optional[ArithmeticUint]:
        """Multiply, returning ``None`` on overflow."""
        lo, hi = self.mul_wide(rhs)
        return None if int(hi) else lo

    def square_wide(self) -> tuple[ArithmeticUint, ArithmeticUint]:
        """Return the double-width square as ``(lo, hi)``."""
        squared = self._value * self._value
        cls = type(self)
        return cls(squared & self._MASK), cls(squared >> self.BITS)

    def square(self) -> ArithmeticUint:
        """Return the square as a single value of twice this width."""
        lo, hi = self.square_wide()
        wide = type(self).sized(2 * self.LIMBS)
        return wide((int(hi) << self.BITS) | int(lo))

    def sbb(self, rhs: UintCore, borrow: int = 0) -> tuple[ArithmeticUint, int]:
        """Compute ``self - (rhs + borrow)``.

        ``borrow`` is a word whose top bit is the incoming borrow. The returned
        borrow is ``WORD_MAX`` on underflow and ``0`` otherwise.
        """
        borrow_bit = _check_range(borrow, LIMB_BITS) >> (LIMB_BITS - 1)
        diff = self._value - self._operand(rhs) - borrow_bit
        return type(self)(diff & self._MASK), (WORD_MAX if diff < 0 else 0)

    def saturating_sub(self, rhs: UintCore) -> ArithmeticUint:
        """Subtract, returning ``ZERO`` on underflow."""
        result, borrow = self.sbb(rhs)
        return type(self).ZERO if borrow else result

    def wrapping_sub(self, rhs: UintCore) -> ArithmeticUint:
        """Subtract, wrapping around the width on underflow."""
        return self.sbb(rhs)[0]

    def checked_sub(self, rhs: UintCore) -> Optional[ArithmeticUint]:
        """Subtract, returning ``None`` on underflow."""
        result, borrow = self.sbb(rhs)
        return None if borrow else result

    def _conditional_wrapping_sub(
        self, rhs: UintCore, choice: bool
    ) -> tuple[ArithmeticUint, bool]:
        """Subtract ``rhs`` only if ``choice``; return the result and whether it underflowed."""
        subtrahend = rhs if choice else type(self).ZERO
        result, borrow = self.sbb(subtrahend)
        return result, bool(borrow)