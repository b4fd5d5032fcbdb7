"""Unsigned 64-digit hexadecimal integers with wrap-around multiplication."""

from __future__ import annotations

DIGITS = 64
_MODULUS = 16 ** DIGITS
_HEX = "0123456789ABCDEF"


class HexNumber:
    """Unsigned integer of at most 64 hexadecimal digits."""

    __slots__ = ("_value",)

    def __init__(self, value: int | HexNumber = 0) -> None:
        if isinstance(value, HexNumber):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("value must be an int or a HexNumber")
        if not 0 <= value < _MODULUS:
            raise ValueError("value does not fit in 64 hexadecimal digits")
        self._value = value

    @classmethod
    def parse(cls, text: str) -> HexNumber:
        """Read digits 0-9 and A-F up to the first newline, most significant first.

        Other characters are skipped; digits after the 64th are ignored.
        """
        line = text.split("\n", 1)[0]
        digits = [c for c in line if c in _HEX][:DIGITS]
        return cls(int("".join(digits), 16) if digits else 0)

    def __str__(self) -> str:
        return format(self._value, "X")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self})"

    def __int__(self) -> int:
        return self._value

    def __getitem__(self, index: int) -> str:
        """Hex digit at ``index`` (0 is least significant); the index is clamped to 0..63."""
        index = min(max(index, 0), DIGITS - 1)
        return _HEX[(self._value >> (4 * index)) & 0xF]

    def __mul__(self, other: object) -> HexNumber:
        if not isinstance(other, HexNumber):
            return NotImplemented
        return HexNumber(self._value * other._value % _MODULUS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexNumber):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def decimal(self) -> str:
        """The value written in decimal."""
        return str(self._value)