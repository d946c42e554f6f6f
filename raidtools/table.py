"""Row-based tables of results and their export as text or CSV."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

__all__ = ["TableModel", "format_table", "write_table", "selection_text"]

T = TypeVar("T")


class TableModel(Generic[T]):
    """An ordered list of items shown as rows, one column per header entry."""

    def __init__(self, header: Sequence[str], render: Callable[[T, int], Any]) -> None:
        self._header: tuple[str, ...] = tuple(header)
        self._render = render
        self._rows: list[T] = []

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"no row at index {row}")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < len(self._header):
            raise IndexError(f"no column at index {column}")

    def add_items(self, items: Iterable[T]) -> None:
        """Append several items at the end."""
        self._rows.extend(items)

    def add_item(self, item: T) -> None:
        """Append one item at the end."""
        self._rows.append(item)

    def update_item(self, item: T, row: int) -> None:
        """Replace the item in ``row``."""
        self._check_row(row)
        self._rows[row] = item

    def remove_item(self, row: int) -> None:
        """Remove the item in ``row``."""
        self._check_row(row)
        del self._rows[row]

    def item(self, row: int) -> T:
        """Return the item in ``row``."""
        self._check_row(row)
        return self._rows[row]

    def items(self) -> list[T]:
        """Return a copy of all items in order."""
        return list(self._rows)

    def clear(self) -> None:
        """Remove every item."""
        self._rows.clear()

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(self._header)

    def cell(self, row: int, column: int) -> Any:
        """Return the displayed value of one cell."""
        self._check_row(row)
        self._check_column(column)
        return self._render(self._rows[row], column)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._rows))


def _cell_text(value: Any) -> str:
    text = "" if value is None else str(value)
    return text if text else "-"


def format_table(model: TableModel[Any], csv: bool) -> str:
    """Render the header and every row, separated by commas or tabs."""
    separator = "," if csv else "\t"
    lines = [separator.join(model.header)]
    body = [
        separator.join(_cell_text(model.cell(row, column)) for column in range(model.column_count()))
        for row in range(model.row_count())
    ]
    return lines[0] + "\n" + "\n".join(body)


def write_table(model: TableModel[Any], path: str | os.PathLike[str], csv: bool) -> None:
    """Write the rendered table to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_table(model, csv))


def selection_text(cells: Sequence[tuple[int, Any]]) -> str:
    """Join selected ``(row, value)`` cells: tabs within a row, newlines between rows."""
    parts: list[str] = []
    for position, (row, value) in enumerate(cells):
        text = "" if value is None else str(value)
        if position + 1 < len(cells):
            text += "\n" if cells[position + 1][0] != row else "\t"
        parts.append(text)
    return "".join(parts)