"""Exchange-rate table: each cell converts the row currency into the column currency."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

ALIGN_RIGHT_VCENTER = 0x0002 | 0x0080
"""Alignment flags (right, vertically centred) reported for every cell."""

UNDEFINED_RATE = "####"


class Role(Enum):
    """What a caller asks a cell or header for."""

    DISPLAY = "display"
    EDIT = "edit"
    TEXT_ALIGNMENT = "text_alignment"


class CurrencyModel:
    """Square table of cross rates built from a currency-to-rate mapping.

    Currencies are ordered by code, as both rows and columns.
    """

    def __init__(self, mapping: Mapping[str, float] | None = None) -> None:
        self._rates: dict[str, float] = {}
        if mapping is not None:
            self.set_currency_map(mapping)

    def set_currency_map(self, mapping: Mapping[str, float]) -> None:
        """Replace all rates; the model keeps its own sorted copy."""
        self._rates = {code: float(mapping[code]) for code in sorted(mapping)}

    @property
    def rates(self) -> dict[str, float]:
        """A copy of the current rates, ordered by currency code."""
        return dict(self._rates)

    def row_count(self) -> int:
        return len(self._rates)

    def column_count(self) -> int:
        return len(self._rates)

    def _currency_at(self, offset: int) -> str:
        if not 0 <= offset < len(self._rates):
            raise IndexError(f"no currency at position {offset}")
        return list(self._rates)[offset]

    def _is_valid(self, row: int, column: int) -> bool:
        size = len(self._rates)
        return 0 <= row < size and 0 <= column < size

    def header_data(self, section: int, role: Role = Role.DISPLAY) -> str | None:
        """Currency code for a row or column; None for roles other than display."""
        if role is not Role.DISPLAY:
            return None
        return self._currency_at(section)

    def data(self, row: int, column: int, role: Role = Role.DISPLAY) -> str | int | None:
        """Cell content: how much of the column currency one unit of the row currency buys."""
        if not self._is_valid(row, column):
            return None
        if role is Role.TEXT_ALIGNMENT:
            return ALIGN_RIGHT_VCENTER
        if role in (Role.DISPLAY, Role.EDIT):
            row_rate = self._rates[self._currency_at(row)]
            if row_rate == 0.0:
                return UNDEFINED_RATE
            amount = self._rates[self._currency_at(column)] / row_rate
            return f"{amount:.4f}"
        return None

    def is_editable(self, row: int, column: int) -> bool:
        """Every cell off the diagonal can be edited."""
        return row != column

    def set_data(self, row: int, column: int, value: float | str, role: Role = Role.EDIT) -> bool:
        """Set a cross rate by rescaling the column currency; False when the edit is refused."""
        if not self._is_valid(row, column) or row == column or role is not Role.EDIT:
            return False
        column_currency = self.header_data(column, Role.DISPLAY)
        row_currency = self.header_data(row, Role.DISPLAY)
        self._rates[column_currency] = float(value) * self._rates[row_currency]
        return True


def sample_rates() -> dict[str, float]:
    """The rates the demo table starts with, relative to the US dollar."""
    return {
        "USD": 1.0000,
        "CNY": 0.1628,
        "GBP": 1.5361,
        "EUR": 1.2992,
        "HKD": 0.1289,
    }