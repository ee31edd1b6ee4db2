"""An editable list of strings whose cells are edited as bounded integers."""

from __future__ import annotations

from typing import Iterable

SPIN_MINIMUM = 0
SPIN_MAXIMUM = 100
DEFAULT_INSERT_TEXT = "You are inserting new data."
INITIAL_STRINGS = ("0", "1", "2")


def _to_int(value: object) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _clamp(value: int) -> int:
    return max(SPIN_MINIMUM, min(SPIN_MAXIMUM, value))


class StringListModel:
    """Ordered list of strings addressed by row."""

    def __init__(self, strings: Iterable[str] | None = None) -> None:
        self._strings: list[str] = [str(text) for text in strings or ()]

    def row_count(self) -> int:
        return len(self._strings)

    def insert_rows(self, row: int, count: int = 1) -> bool:
        """Insert count empty strings before row; False if row or count is out of range."""
        if count < 1 or not 0 <= row <= len(self._strings):
            return False
        self._strings[row:row] = [""] * count
        return True

    def remove_rows(self, row: int, count: int = 1) -> bool:
        """Remove count strings starting at row; False if they are not all present."""
        if count < 1 or row < 0 or row + count > len(self._strings):
            return False
        del self._strings[row:row + count]
        return True

    def data(self, row: int) -> str | None:
        if 0 <= row < len(self._strings):
            return self._strings[row]
        return None

    def set_data(self, row: int, value: object) -> bool:
        """Store value as text at row; False if the row does not exist."""
        if not 0 <= row < len(self._strings):
            return False
        self._strings[row] = str(value)
        return True

    def string_list(self) -> list[str]:
        return list(self._strings)


class SpinBoxDelegate:
    """Edits cells as whole numbers between SPIN_MINIMUM and SPIN_MAXIMUM."""

    minimum = SPIN_MINIMUM
    maximum = SPIN_MAXIMUM

    def editor_value(self, model: StringListModel, row: int) -> int:
        """The number an editor opened on row starts with."""
        return _clamp(_to_int(model.data(row)))

    def commit(self, model: StringListModel, row: int, value: object) -> bool:
        """Write the editor's value, clamped to the allowed range, back to the model."""
        return model.set_data(row, _clamp(_to_int(value)))


class StringListEditor:
    """A string list with a current row and insert, delete and show actions."""

    def __init__(self, strings: Iterable[str] = INITIAL_STRINGS) -> None:
        self.model = StringListModel(strings)
        self.delegate = SpinBoxDelegate()
        self.current_row = -1

    def insert_data(self, text: str | None = DEFAULT_INSERT_TEXT) -> int | None:
        """Insert text before the current row (or at the top) and make it current.

        None stands for a cancelled input and changes nothing.
        """
        if text is None:
            return None
        row = 0 if self.current_row == -1 else self.current_row
        self.model.insert_rows(row, 1)
        self.model.set_data(row, text)
        self.current_row = row
        return row

    def delete_data(self) -> bool:
        """Remove the current row; False if there is nothing to remove."""
        if self.model.row_count() < 1:
            return False
        removed = self.model.remove_rows(self.current_row, 1)
        if removed and self.current_row >= self.model.row_count():
            self.current_row = self.model.row_count() - 1
        return removed

    def show_data(self) -> str:
        """All strings, each followed by a newline."""
        return "".join(f"{text}\n" for text in self.model.string_list())