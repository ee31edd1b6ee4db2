"""Simple item containers: a checkable tree, a selectable grid and a browser list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TREE_HEADERS = ("Name", "Number")


class CheckState(Enum):
    UNCHECKED = 0
    PARTIALLY_CHECKED = 1
    CHECKED = 2


@dataclass
class TreeItem:
    """A row of texts with child rows and an optional check mark."""

    texts: list[str] = field(default_factory=list)
    children: list["TreeItem"] = field(default_factory=list)
    check_state: CheckState | None = None

    def add_child(self, texts: list[str]) -> "TreeItem":
        child = TreeItem(list(texts))
        self.children.append(child)
        return child


class Grid:
    """A table of text cells with header labels and a cell selection."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("row and column counts cannot be negative")
        self.rows = rows
        self.columns = columns
        self._headers: dict[int, str] = {}
        self._cells: dict[tuple[int, int], str] = {}
        self._selected: set[tuple[int, int]] = set()

    @property
    def headers(self) -> list[str]:
        """Header of every column; unlabelled columns show their 1-based number."""
        return [self._headers.get(column, str(column + 1)) for column in range(self.columns)]

    def set_header_labels(self, labels: list[str]) -> None:
        """Label columns from the left, adding columns if there are more labels."""
        self.columns = max(self.columns, len(labels))
        self._headers.update(enumerate(labels))

    def _in_range(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def set_item(self, row: int, column: int, text: str) -> None:
        """Set a cell's text; cells outside the grid are ignored."""
        if self._in_range(row, column):
            self._cells[(row, column)] = text

    def item(self, row: int, column: int) -> str | None:
        return self._cells.get((row, column))

    def select(self, top: int, left: int, bottom: int, right: int) -> None:
        """Add every cell of the rectangle to the selection."""
        if not (self._in_range(top, left) and self._in_range(bottom, right)):
            raise IndexError("selection lies outside the grid")
        if top > bottom or left > right:
            raise ValueError("selection corners are reversed")
        self._selected.update(
            (row, column) for row in range(top, bottom + 1) for column in range(left, right + 1)
        )

    def is_selected(self, row: int, column: int) -> bool:
        return (row, column) in self._selected


def sample_tree() -> TreeItem:
    """A root with two leaves, the second one checked."""
    root = TreeItem(["Root", "0"])
    root.add_child(["Leaf 1", "1"])
    root.add_child(["Leaf 2", "2"]).check_state = CheckState.CHECKED
    return root


def sample_table() -> Grid:
    """Five rows of IDs under four headers, with one extra value in the second column."""
    grid = Grid(5, 3)
    grid.set_header_labels(["ID", "Name", "Age", "Sex"])
    for row, ident in enumerate(["0001", "0002", "0003", "0004", "0005"]):
        grid.set_item(row, 0, ident)
    grid.set_item(0, 1, "20100112")
    return grid


def browser_names() -> list[str]:
    """Browser list in display order: eight appended, then one inserted at position 3."""
    names = ["Chrome", "Firefox", "IE", "Netscape", "Opera", "Safari", "TheWorld", "Traveler"]
    names.insert(3, "Maxthon")
    return names