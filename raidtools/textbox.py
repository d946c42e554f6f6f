"""Numeric input fields with per-type limits, base and length."""

from __future__ import annotations

import re
from enum import IntEnum

__all__ = ["InputType", "NumberField"]

_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_U32_MAX = 0xFFFF_FFFF
_U16_MAX = 0xFFFF

_DECIMAL = re.compile(r"[0-9]+")
_HEXADECIMAL = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")


class InputType(IntEnum):
    """Preset kinds of numeric input."""

    SEED_64BIT = 1 << 0
    ADVANCE_64BIT = 1 << 1
    SEED_32BIT = 1 << 2
    ADVANCES_32BIT = 1 << 3
    SEED_16BIT = 1 << 4
    DELAY = 1 << 5
    ID = 1 << 6


# (minimum, maximum, length, base) for each preset.
_PRESETS: dict[InputType, tuple[int, int, int, int]] = {
    InputType.SEED_64BIT: (0, _U64_MAX, 16, 16),
    InputType.ADVANCE_64BIT: (0, _U64_MAX, 20, 10),
    InputType.SEED_32BIT: (0, _U32_MAX, 8, 16),
    InputType.ADVANCES_32BIT: (0, _U32_MAX, 10, 10),
    InputType.SEED_16BIT: (0, _U16_MAX, 4, 16),
    InputType.DELAY: (0, _U32_MAX, 10, 10),
    InputType.ID: (0, _U16_MAX, 5, 10),
}


class NumberField:
    """Text holding an unsigned number, filtered while typed and clamped when done."""

    def __init__(self, minimum: int, maximum: int, length: int, base: int = 10) -> None:
        if base not in (10, 16):
            raise ValueError(f"base must be 10 or 16, got {base}")
        if minimum < 0 or maximum > _U64_MAX:
            raise ValueError("limits must fit in an unsigned 64-bit value")
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum")
        if length < 0:
            raise ValueError("length must not be negative")
        self.minimum = minimum
        self.maximum = maximum
        self.length = length
        self.base = base
        self.text = ""
        self._reject = re.compile("[^0-9]" if base == 10 else "[^0-9A-F]")

    @classmethod
    def for_type(cls, input_type: InputType) -> NumberField:
        """Build a field with the limits of a preset input type."""
        minimum, maximum, length, base = _PRESETS[InputType(input_type)]
        return cls(minimum, maximum, length, base)

    def edit(self, text: str) -> str:
        """Take newly typed text, filter it and store the result."""
        if self.base == 16 and text.startswith("0x"):
            text = text[2:]
        text = text[: self.length].upper()
        self.text = self._reject.sub("", text)
        return self.text

    def finish(self) -> str:
        """Clamp the current value to the limits and rewrite the text."""
        value = min(max(self.value(), self.minimum), self.maximum)
        self.text = format(value, "x" if self.base == 16 else "d")
        return self.text

    def value(self) -> int:
        """Return the number in the text, or 0 if it is not a valid one."""
        stripped = self.text.strip()
        pattern = _DECIMAL if self.base == 10 else _HEXADECIMAL
        if not pattern.fullmatch(stripped):
            return 0
        number = int(stripped, self.base)
        return number if number <= _U64_MAX else 0