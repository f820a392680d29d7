"""The complete fixed-width unsigned integer type."""

from __future__ import annotations

import math
import secrets
from typing import Optional, Protocol

from ctbigint.core import LIMB_BITS, WORD_MAX, UintCore
from ctbigint.encoding import EncodedUint
from ctbigint.modarith import ModularUint


class _RandomSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


class Uint(ModularUint, EncodedUint):
    """Fixed-width unsigned integer with the full set of operations.

    Use :func:`uint_type` (or :meth:`Uint.sized`) to obtain a concrete width.
    """

    __slots__ = ()

    def sqrt(self) -> Uint:
        """Return the integer square root, rounded down."""
        return type(self)(math.isqrt(self._value))

    def wrapping_sqrt(self) -> Uint:
        """Return the integer square root; a square root can never wrap."""
        return self.sqrt()

    def checked_sqrt(self) -> Optional[Uint]:
        """Return the square root only if ``self`` is a perfect square, else ``None``."""
        root = self.sqrt()
        return root if root.wrapping_mul(root) == self else None

    def split(self) -> tuple[Uint, Uint]:
        """Split into ``(hi, lo)`` halves of half the width."""
        if self.LIMBS % 2:
            raise ValueError("cannot split a value with an odd number of limbs")
        half = type(self).sized(self.LIMBS // 2)
        return half(self._value >> half.BITS), half(self._value & half._MASK)

    @classmethod
    def random(cls, rng: Optional[_RandomSource] = None) -> Uint:
        """Draw a uniformly random value of this width."""
        cls._require_limbs(1)
        source = secrets.SystemRandom() if rng is None else rng
        return cls.from_words(source.getrandbits(LIMB_BITS) for _ in range(cls.LIMBS))

    @classmethod
    def random_mod(cls, rng: Optional[_RandomSource], modulus: UintCore) -> Uint:
        """Draw a uniformly random value below a non-zero ``modulus``.

        Uses rejection sampling, so it runs in variable time.
        """
        cls._require_limbs(1)
        if not isinstance(modulus, UintCore) or modulus.LIMBS != cls.LIMBS:
            raise TypeError("modulus must be an unsigned integer of the same width")
        bound = int(modulus)
        if not bound:
            raise ValueError("modulus must be non-zero")
        source = secrets.SystemRandom() if rng is None else rng

        n_bits = bound.bit_length()
        n_limbs = (n_bits + LIMB_BITS - 1) // LIMB_BITS
        top_mask = WORD_MAX >> (LIMB_BITS * n_limbs - n_bits)

        while True:
            words = [source.getrandbits(LIMB_BITS) for _ in range(n_limbs)]
            words[-1] &= top_mask
            value = sum(word << (index * LIMB_BITS) for index, word in enumerate(words))
            if value < bound:
                return cls(value)


def uint_type(limbs: int) -> type:
    """Return the :class:`Uint` class holding ``limbs`` 64-bit limbs."""
    return Uint.sized(limbs)