"""Intentionally wrapping arithmetic on fixed-width unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ctbigint.arithmetic import ArithmeticUint

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Wrapping(Generic[T]):
    """A value whose ``+``, ``-``, ``*`` and unary ``-`` wrap around its width.

    Formatting and ``str`` are delegated to the wrapped value.
    """

    value: T

    def _operands(self, other: object) -> tuple[ArithmeticUint, ArithmeticUint] | None:
        if not isinstance(other, Wrapping):
            return None
        lhs, rhs = self.value, other.value
        if not isinstance(lhs, ArithmeticUint) or not isinstance(rhs, ArithmeticUint):
            raise TypeError("wrapping arithmetic needs fixed-width unsigned integers")
        if lhs.LIMBS != rhs.LIMBS:
            raise TypeError("operands must have the same width")
        return lhs, rhs

    def __add__(self, other: object) -> Wrapping:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        return Wrapping(type(lhs)._wrap(int(lhs) + int(rhs)))

    def __sub__(self, other: object) -> Wrapping:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        return Wrapping(lhs.wrapping_sub(rhs))

    def __mul__(self, other: object) -> Wrapping:
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        lhs, rhs = operands
        return Wrapping(lhs.wrapping_mul(rhs))

    def __neg__(self) -> Wrapping:
        if not isinstance(self.value, ArithmeticUint):
            raise TypeError("wrapping negation needs a fixed-width unsigned integer")
        return self - Wrapping(self.value.shl_vartime(1))

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def __str__(self) -> str:
        return str(self.value)