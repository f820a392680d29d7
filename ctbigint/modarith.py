"""Modular subtraction, negation, multiplication and inversion."""

from __future__ import annotations

from ctbigint.arithmetic import ArithmeticUint
from ctbigint.core import LIMB_BITS, WORD_MAX, _check_range


class ModularUint(ArithmeticUint):
    """Fixed-width integer with arithmetic modulo a given modulus."""

    __slots__ = ()

    def neg_mod(self, p: ArithmeticUint) -> ModularUint:
        """Return ``-self mod p``; ``self`` is assumed to lie in ``[0, p)``."""
        modulus = self._operand(p)
        if not self._value:
            return type(self).ZERO
        return type(self)((modulus - self._value) & self._MASK)

    def neg_mod_special(self, c: int) -> ModularUint:
        """Return ``-self mod p`` for the special modulus ``p = 2**BITS - c``."""
        return type(self).ZERO.sub_mod_special(self, c)

    def sub_mod(self, rhs: ArithmeticUint, p: ArithmeticUint) -> ModularUint:
        """Return ``self - rhs mod p``.

        The unbounded difference ``self - rhs`` is assumed to lie in ``[-p, p)``.
        """
        modulus = self._operand(p)
        out, borrow = self.sbb(rhs)
        if borrow:
            return type(self)((int(out) + modulus) & self._MASK)
        return out

    def _sub_mod_with_carry(
        self, carry: int, rhs: ArithmeticUint, p: ArithmeticUint
    ) -> ModularUint:
        """Return ``(self + carry * 2**BITS) - rhs mod p`` where ``carry`` is 0 or 1."""
        if carry not in (0, 1):
            raise ValueError("carry must be 0 or 1")
        modulus = self._operand(p)
        out, borrow = self.sbb(rhs)
        if borrow and not carry:
            return type(self)((int(out) + modulus) & self._MASK)
        return out

    def sub_mod_special(self, rhs: ArithmeticUint, c: int) -> ModularUint:
        """Return ``self - rhs mod p`` for the special modulus ``p = 2**BITS - c``.

        The unbounded difference ``self - rhs`` is assumed to lie in ``[-p, p)``.
        """
        c = _check_range(c, LIMB_BITS)
        out, borrow = self.sbb(rhs)
        correction = borrow & c
        return type(self)((int(out) - correction) & self._MASK)

    def mul_mod_special(self, rhs: ArithmeticUint, c: int) -> ModularUint:
        """Return ``self * rhs mod p`` for the special modulus ``p = 2**BITS - c``."""
        c = _check_range(c, LIMB_BITS)
        cls = type(self)
        if self.LIMBS == 1:
            modulus = (-c) & WORD_MAX
            if not modulus:
                raise ZeroDivisionError("modulus is zero")
            return cls((self._value * self._operand(rhs)) % modulus)

        lo, hi = self.mul_wide(rhs)

        folded = int(lo) + int(hi) * c
        low = folded & self._MASK
        carry = folded >> self.BITS

        total = low + (carry + 1) * c
        low = total & self._MASK
        carry = total >> self.BITS

        correction = ((carry - 1) & WORD_MAX) & c
        return cls((low - correction) & self._MASK)

    def inv_mod2k(self, k: int) -> ModularUint:
        """Return ``1 / self mod 2**k`` for odd ``self`` below ``2**k``."""
        if k < 0:
            raise ValueError("k must not be negative")
        mask = self._MASK
        x = 0
        b = 1
        for i in range(k):
            bit = b & 1
            if i < self.BITS:
                x |= bit << i
            if bit:
                b = (b - self._value) & mask
            b >>= 1
        return type(self)(x)

    def inv_odd_mod_bounded(
        self, modulus: ArithmeticUint, bits: int, modulus_bits: int
    ) -> tuple[ModularUint, bool]:
        """Return ``(self**-1 mod modulus, exists)`` for an odd ``modulus``.

        ``bits`` and ``modulus_bits`` bound the bit sizes of ``self`` and
        ``modulus``. When no inverse exists the first element is unspecified.
        """
        m = self._operand(modulus)
        if not m & 1:
            raise ValueError("modulus must be odd")
        if bits < 0 or modulus_bits < 0:
            raise ValueError("bit bounds must not be negative")
        mask = self._MASK

        a = self._value
        u = 1
        v = 0
        b = m
        m1hp = ((m >> 1) + 1) & mask

        for _ in range(bits + modulus_bits):
            a_odd = bool(a & 1)

            swap = False
            if a_odd:
                swap = a < b
                a = (a - b) & mask
            if swap:
                b = (b + a) & mask
                a = (-a) & mask
                u, v = v, u

            if a_odd:
                underflow = u < v
                u = (u - v) & mask
                if underflow:
                    u = (u + m) & mask

            a >>= 1
            odd_u = u & 1
            u >>= 1
            if odd_u:
                u = (u + m1hp) & mask

        return type(self)(v), b == 1

    def inv_odd_mod(self, modulus: ArithmeticUint) -> tuple[ModularUint, bool]:
        """Return ``(self**-1 mod modulus, exists)`` for an odd ``modulus``."""
        return self.inv_odd_mod_bounded(modulus, self.BITS, self.BITS)