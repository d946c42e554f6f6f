"""Den numbering for each map area and the event data index."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "EVENT_DEN_ID",
    "EventFile",
    "den_range",
    "den_numbers",
    "parse_event_index",
]

EVENT_DEN_ID = 65535
_SKIPPED_DEN = 16
_U16_MAX = 0xFFFF

# (start, end, offset) of the den ids for each map area.
_AREAS: tuple[tuple[int, int, int], ...] = (
    (0, 100, 0),  # Wild Area
    (100, 190, 100),  # Isle of Armor
    (190, 276, 190),  # Crown Tundra
)


@dataclass(frozen=True)
class EventFile:
    """One downloadable event: its file name, release date and species."""

    file: str
    date: str
    species: int


def den_range(location: int) -> tuple[int, int, int]:
    """Return ``(start, end, offset)`` of the den ids in a map area.

    Any index past the second area selects the last one.
    """
    if location < 0:
        raise ValueError(f"location must not be negative, got {location}")
    return _AREAS[min(location, len(_AREAS) - 1)]


def den_numbers(location: int, event_available: bool = False) -> list[tuple[str, int]]:
    """Return ``(label, den_id)`` for every selectable den of a map area.

    The label is the den's number within its area, or ``Event`` for the
    event den, which comes first when event data is available.
    """
    start, end, offset = den_range(location)
    dens: list[tuple[str, int]] = []
    if event_available:
        dens.append(("Event", EVENT_DEN_ID))
    dens.extend(
        (str(den_id + 1 - offset), den_id)
        for den_id in range(start, end)
        if den_id != _SKIPPED_DEN
    )
    return dens


def _event_date(file: str) -> str:
    underscore = file.find("_")
    stem = file if underscore < 0 else file[:underscore]
    stem = stem[:2] + "-" + stem[2:]
    return stem[:5] + "-" + stem[5:]


def parse_event_index(text: str) -> list[EventFile]:
    """Parse an event index of ``file,species`` lines, newest (last) first."""
    events: list[EventFile] = []
    for number, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 2:
            raise ValueError(f"line {number}: expected 'file,species', got {line!r}")
        file, species_text = fields[0], fields[1].strip()
        if not species_text.isdigit() or int(species_text) > _U16_MAX:
            raise ValueError(f"line {number}: invalid species {species_text!r}")
        events.append(EventFile(file, _event_date(file), int(species_text)))
    events.reverse()
    return events