"""Fixed-width unsigned integers built from 64-bit limbs."""

from __future__ import annotations

import functools
import operator
from typing import ClassVar, Iterable

LIMB_BITS = 64
LIMB_BYTES = LIMB_BITS // 8
WORD_MAX = (1 << LIMB_BITS) - 1
WIDE_WORD_MAX = (1 << (2 * LIMB_BITS)) - 1


@functools.lru_cache(maxsize=None)
def _make_sized(family: type, limbs: int) -> type:
    bits = limbs * LIMB_BITS
    name = f"{family.__name__}{bits}"
    namespace = {
        "__slots__": (),
        "__module__": family.__module__,
        "__qualname__": name,
        "LIMBS": limbs,
        "BITS": bits,
        "BYTES": limbs * LIMB_BYTES,
        "_MASK": (1 << bits) - 1,
        "_FAMILY": family,
    }
    sized_cls = type(name, (family,), namespace)
    sized_cls.ZERO = sized_cls(0)
    sized_cls.ONE = sized_cls(1)
    sized_cls.MAX = sized_cls(sized_cls._MASK)
    return sized_cls


def _check_range(n: int, bits: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not 0 <= n < (1 << bits):
        raise ValueError(f"{n} does not fit in {bits} unsigned bits")
    return n


@functools.total_ordering
class UintCore:
    """An immutable unsigned integer of a fixed number of 64-bit limbs.

    Concrete widths are obtained with :meth:`sized`; the unsized class itself
    cannot be instantiated.
    """

    __slots__ = ("_value",)

    LIMBS: ClassVar[int] = 0
    BITS: ClassVar[int] = 0
    BYTES: ClassVar[int] = 0
    _MASK: ClassVar[int] = 0
    _FAMILY: ClassVar[type | None] = None
    ZERO: ClassVar[UintCore]
    ONE: ClassVar[UintCore]
    MAX: ClassVar[UintCore]

    def __init__(self, value: int) -> None:
        if not self.LIMBS:
            raise TypeError(
                f"{type(self).__name__} has no width; use {type(self).__name__}.sized()"
            )
        self._value = _check_range(value, self.BITS)

    @classmethod
    def sized(cls, limbs: int) -> type:
        """Return the subclass of this family holding ``limbs`` limbs."""
        limbs = operator.index(limbs)
        if limbs < 1:
            raise ValueError("number of limbs must be greater than zero")
        family = cls._FAMILY if cls.LIMBS else cls
        return _make_sized(family, limbs)

    @classmethod
    def _wrap(cls, value: int) -> UintCore:
        """Build a value of this width, discarding bits above it."""
        return cls(value & cls._MASK)

    @classmethod
    def _require_limbs(cls, needed: int) -> None:
        if not cls.LIMBS:
            raise TypeError(f"{cls.__name__} has no width; use {cls.__name__}.sized()")
        if cls.LIMBS < needed:
            raise ValueError(f"{cls.__name__} has too few limbs; {needed} required")

    @classmethod
    def from_u8(cls, n: int) -> UintCore:
        cls._require_limbs(1)
        return cls(_check_range(n, 8))

    @classmethod
    def from_u16(cls, n: int) -> UintCore:
        cls._require_limbs(1)
        return cls(_check_range(n, 16))

    @classmethod
    def from_u32(cls, n: int) -> UintCore:
        cls._require_limbs(1)
        return cls(_check_range(n, 32))

    @classmethod
    def from_u64(cls, n: int) -> UintCore:
        cls._require_limbs(64 // LIMB_BITS)
        return cls(_check_range(n, 64))

    @classmethod
    def from_u128(cls, n: int) -> UintCore:
        cls._require_limbs(128 // LIMB_BITS)
        return cls(_check_range(n, 128))

    @classmethod
    def from_word(cls, n: int) -> UintCore:
        cls._require_limbs(1)
        return cls(_check_range(n, LIMB_BITS))

    @classmethod
    def from_wide_word(cls, n: int) -> UintCore:
        cls._require_limbs(2)
        return cls(_check_range(n, 2 * LIMB_BITS))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> UintCore:
        """Build a value from little-endian 64-bit words."""
        cls._require_limbs(1)
        words = tuple(words)
        if len(words) != cls.LIMBS:
            raise ValueError(f"expected {cls.LIMBS} words, got {len(words)}")
        value = 0
        for shift, word in enumerate(words):
            value |= _check_range(word, LIMB_BITS) << (shift * LIMB_BITS)
        return cls(value)

    def as_words(self) -> tuple[int, ...]:
        """Return the little-endian 64-bit words of this value."""
        return tuple(
            (self._value >> (index * LIMB_BITS)) & WORD_MAX for index in range(self.LIMBS)
        )

    def resize(self, target: type) -> UintCore:
        """Convert to the sized class ``target``, truncating high limbs if needed."""
        if not (isinstance(target, type) and issubclass(target, UintCore) and target.LIMBS):
            raise TypeError("target must be a sized integer class")
        return target(self._value & target._MASK)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UintCore):
            return NotImplemented
        return self.LIMBS == other.LIMBS and self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UintCore):
            return NotImplemented
        if self.LIMBS != other.LIMBS:
            raise TypeError("cannot order integers of different widths")
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((self.LIMBS, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self._value:0{2 * self.BYTES}x})"