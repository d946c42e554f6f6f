"""Search filters: IV ranges and a checkable list of choices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum, IntFlag

__all__ = ["Modifier", "IVFilter", "CheckState", "CheckList", "STAT_NAMES"]

STAT_NAMES: tuple[str, ...] = ("HP", "Atk", "Def", "SpA", "SpD", "Spe")
_MIN_IV = 0
_MAX_IV = 31


class Modifier(IntFlag):
    """Keyboard modifiers held while clicking a stat label."""

    NONE = 0
    SHIFT = 0x02000000
    CONTROL = 0x04000000
    ALT = 0x08000000
    META = 0x10000000


class IVFilter:
    """Lower and upper IV bounds for each of the six stats."""

    def __init__(self) -> None:
        self._ranges: list[tuple[int, int]] = [(_MIN_IV, _MAX_IV)] * len(STAT_NAMES)

    @staticmethod
    def _index(stat: int | str) -> int:
        if isinstance(stat, str):
            try:
                return STAT_NAMES.index(stat)
            except ValueError:
                raise ValueError(f"unknown stat {stat!r}") from None
        if not 0 <= stat < len(STAT_NAMES):
            raise ValueError(f"stat index must be in 0..{len(STAT_NAMES) - 1}, got {stat}")
        return stat

    def lower(self) -> tuple[int, ...]:
        """Return the six minimum IVs."""
        return tuple(low for low, _ in self._ranges)

    def upper(self) -> tuple[int, ...]:
        """Return the six maximum IVs."""
        return tuple(high for _, high in self._ranges)

    def clear(self) -> None:
        """Reset every stat to the full range."""
        self._ranges = [(_MIN_IV, _MAX_IV)] * len(STAT_NAMES)

    def set_range(self, stat: int | str, minimum: int, maximum: int) -> None:
        """Set the bounds of one stat, given by index or name."""
        index = self._index(stat)
        for bound in (minimum, maximum):
            if not _MIN_IV <= bound <= _MAX_IV:
                raise ValueError(f"IV bounds must be in {_MIN_IV}..{_MAX_IV}, got {bound}")
        self._ranges[index] = (minimum, maximum)

    def apply_modifier(self, stat: int | str, modifiers: Modifier | int) -> None:
        """Apply the quick preset chosen by the modifiers held on a label click."""
        modifiers = Modifier(modifiers)
        if modifiers == Modifier.NONE:
            self.set_range(stat, _MIN_IV, _MAX_IV)
        elif modifiers == Modifier.CONTROL:
            self.set_range(stat, _MAX_IV, _MAX_IV)
        elif modifiers == Modifier.ALT:
            self.set_range(stat, _MAX_IV - 1, _MAX_IV)
        elif Modifier.CONTROL in modifiers and Modifier.ALT in modifiers:
            self.set_range(stat, _MIN_IV, _MIN_IV)
        else:
            self._index(stat)


class CheckState(IntEnum):
    """Overall state of a check list."""

    UNCHECKED = 0
    PARTIALLY_CHECKED = 1
    CHECKED = 2


class CheckList:
    """Named items that can each be checked; none or all checked means any."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._states: list[bool] = []
        self.setup(items)

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def setup(self, items: Iterable[str] = ()) -> None:
        """Replace the items if any are given, then uncheck everything."""
        new_items = list(items)
        if new_items:
            self._items = new_items
        self._states = [False] * len(self._items)

    def toggle(self, index: int) -> None:
        """Flip the check of one item."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        self._states[index] = not self._states[index]

    def reset(self) -> None:
        """Uncheck every item."""
        self._states = [False] * len(self._items)

    def check_state(self) -> CheckState:
        """Return whether all, none or some items are checked."""
        total = len(self._states)
        checked = sum(self._states)
        if checked == total:
            return CheckState.CHECKED
        if checked == 0:
            return CheckState.UNCHECKED
        return CheckState.PARTIALLY_CHECKED

    def checked(self) -> list[bool]:
        """Return per-item acceptance; with none or all checked, every item is accepted."""
        if self.check_state() == CheckState.PARTIALLY_CHECKED:
            return list(self._states)
        return [True] * len(self._items)

    def text(self) -> str:
        """Return the summary shown for the list."""
        if self.check_state() != CheckState.PARTIALLY_CHECKED:
            return "Any"
        return ", ".join(item for item, state in zip(self._items, self._states) if state)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> tuple[str, bool]:
        return self._items[index], self._states[index]

    def _states_view(self) -> Sequence[bool]:
        return tuple(self._states)