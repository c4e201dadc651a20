"""Field element primitive for aztec-abi library."""

import re
from typing import Any

from .constants import FIELD_HEX_WIDTH

_DECIMAL_RE = re.compile(r"[0-9]+")


class Fr:
    """
    A field element: an arbitrary-precision non-negative integer.

    No modular reduction is performed; interpreting the value within the
    field is left to the execution backend.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        # bool is an int subclass but never a meaningful field value here
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Fr value must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"Fr value must be non-negative, got {value}")
        self._value = value

    @classmethod
    def from_byte(cls, value: int) -> "Fr":
        """
        Build a field element from a single byte.

        Args:
            value: Integer in range 0..255

        Returns:
            Fr holding the byte value

        Raises:
            ValueError: If value is outside the byte range
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range: {value}")
        return cls(value)

    @classmethod
    def from_str(cls, text: str) -> "Fr":
        """
        Parse a field element from a decimal string.

        Args:
            text: Decimal digits, no sign, no prefix

        Returns:
            Fr holding the parsed value

        Raises:
            ValueError: If text is not a plain decimal number
        """
        if not _DECIMAL_RE.fullmatch(text):
            raise ValueError(f"Invalid decimal string: {text!r}")
        return cls(int(text))

    @classmethod
    def from_int(cls, value: int) -> "Fr":
        """Build a field element from an arbitrary-precision integer."""
        return cls(value)

    @property
    def value(self) -> int:
        return self._value

    def to_hex(self) -> str:
        """Render as 0x-prefixed hex, zero-padded to 32 bytes."""
        return "0x" + format(self._value, "x").zfill(FIELD_HEX_WIDTH)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fr):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Fr", self._value))

    def __repr__(self) -> str:
        return f"Fr({self._value})"

    def __str__(self) -> str:
        return self.to_hex()


ZERO = Fr(0)
