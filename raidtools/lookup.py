"""Display labels for raid results and helpers for reading dens from a console."""

from __future__ import annotations

from raidtools.raids import EVENT_DEN_ID

__all__ = [
    "bot_den_index",
    "den_seed",
    "ability_label",
    "shiny_label",
    "gender_symbol",
]

_SEED_OFFSET = 0x8
_SEED_SIZE = 8

_ISLE_OF_ARMOR_START = 100
_CROWN_TUNDRA_START = 190
_ISLE_OF_ARMOR_SHIFT = 11
_CROWN_TUNDRA_SHIFT = 32


def bot_den_index(den_id: int) -> int:
    """Map a den id to the index of its slot in the console's den save block.

    The event den reads the first slot; dens of the later map areas are
    stored after gaps in the block.
    """
    if den_id < 0:
        raise ValueError(f"den id must not be negative, got {den_id}")
    if den_id == EVENT_DEN_ID:
        return 0
    if den_id >= _CROWN_TUNDRA_START:
        return den_id + _CROWN_TUNDRA_SHIFT
    if den_id >= _ISLE_OF_ARMOR_START:
        return den_id + _ISLE_OF_ARMOR_SHIFT
    return den_id


def den_seed(data: bytes | bytearray | memoryview) -> str:
    """Return the raid seed stored in raw den data, as lower-case hexadecimal.

    The seed is the little-endian 64-bit value at offset 8.
    """
    raw = bytes(data)
    end = _SEED_OFFSET + _SEED_SIZE
    if len(raw) < end:
        raise ValueError(f"den data must hold at least {end} bytes, got {len(raw)}")
    return raw[_SEED_OFFSET:end][::-1].hex()


def ability_label(ability: int) -> str:
    """Return the short label of a raid's ability setting."""
    if ability in (0, 1):
        return str(ability + 1)
    if ability == 2:
        return "H"
    if ability == 3:
        return "1/2"
    return "1/2/H"


def shiny_label(shiny: int) -> str:
    """Return how a result's shininess is shown."""
    if shiny == 2:
        return "Square"
    if shiny == 1:
        return "Star"
    return "No"


def gender_symbol(gender: int) -> str:
    """Return the symbol shown for a result's gender."""
    if gender == 0:
        return "♂"
    if gender == 1:
        return "♀"
    return "-"