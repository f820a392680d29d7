"""Byte and hexadecimal encodings for fixed-width unsigned integers."""

from __future__ import annotations

import string

from ctbigint.core import UintCore

_HEX_DIGITS = frozenset(string.hexdigits)


def _decode_hex(hex_str: str, expected_len: int) -> bytes:
    if not isinstance(hex_str, str):
        raise TypeError(f"expected a str, got {type(hex_str).__name__}")
    if len(hex_str) != expected_len:
        raise ValueError("hex string is not the expected size")
    if not _HEX_DIGITS.issuperset(hex_str):
        raise ValueError("invalid hex byte")
    return bytes.fromhex(hex_str)


class EncodedUint(UintCore):
    """Fixed-width integer that converts to and from bytes and hex strings."""

    __slots__ = ()

    @classmethod
    def _check_bytes(cls, data: bytes) -> bytes:
        cls._require_limbs(1)
        data = bytes(data)
        if len(data) != cls.BYTES:
            raise ValueError("bytes are not the expected size")
        return data

    @classmethod
    def from_be_slice(cls, data: bytes) -> EncodedUint:
        """Decode exactly ``BYTES`` big-endian bytes."""
        return cls(int.from_bytes(cls._check_bytes(data), "big"))

    @classmethod
    def from_le_slice(cls, data: bytes) -> EncodedUint:
        """Decode exactly ``BYTES`` little-endian bytes."""
        return cls(int.from_bytes(cls._check_bytes(data), "little"))

    @classmethod
    def from_be_hex(cls, hex_str: str) -> EncodedUint:
        """Decode a big-endian hex string of exactly ``2 * BYTES`` digits."""
        cls._require_limbs(1)
        return cls(int.from_bytes(_decode_hex(hex_str, 2 * cls.BYTES), "big"))

    @classmethod
    def from_le_hex(cls, hex_str: str) -> EncodedUint:
        """Decode a little-endian hex string of exactly ``2 * BYTES`` digits."""
        cls._require_limbs(1)
        return cls(int.from_bytes(_decode_hex(hex_str, 2 * cls.BYTES), "little"))

    def to_be_bytes(self) -> bytes:
        """Encode as ``BYTES`` big-endian bytes."""
        return self._value.to_bytes(self.BYTES, "big")

    def to_le_bytes(self) -> bytes:
        """Encode as ``BYTES`` little-endian bytes."""
        return self._value.to_bytes(self.BYTES, "little")

    def __format__(self, spec: str) -> str:
        if spec in ("x", "X"):
            return format(self._value, f"0{2 * self.BYTES}{spec}")
        return format(self._value, spec)