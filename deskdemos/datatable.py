"""A table whose rectangular selections are exported as text, HTML and CSV."""

from __future__ import annotations


def to_html(plain_text: str) -> str:
    """Render tab-separated lines as a simple HTML table."""
    result = (
        plain_text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
    result = result.replace("\t", "<td>").replace("\n", "\n<tr><td>")
    return "<table>\n<tr><td>" + result + "\n</table>"


def to_csv(plain_text: str) -> str:
    """Quote every tab-separated field, escaping backslashes and quotes."""
    result = plain_text.replace("\\", "\\\\").replace('"', '\\"')
    result = result.replace("\t", '", "').replace("\n", '"\n"')
    return f'"{result}"'


class DataTable:
    """Fixed-size grid of text cells with horizontal header labels."""

    def __init__(self, rows: int = 5, columns: int = 3) -> None:
        self.rows = rows
        self.columns = columns
        self._headers: dict[int, str] = {}
        self._cells: dict[tuple[int, int], str] = {}

    @property
    def headers(self) -> list[str]:
        """Header label of every column; unlabelled columns show their 1-based number."""
        return [self._headers.get(column, str(column + 1)) for column in range(self.columns)]

    def set_header_labels(self, labels: list[str]) -> None:
        """Label columns from the left; labels beyond the column count are dropped."""
        for column, label in zip(range(self.columns), labels):
            self._headers[column] = label

    def _in_range(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def set_item(self, row: int, column: int, text: str) -> None:
        """Set a cell's text; cells outside the table are ignored."""
        if self._in_range(row, column):
            self._cells[(row, column)] = text

    def item(self, row: int, column: int) -> str | None:
        return self._cells.get((row, column))

    def selection_text(self, top: int, left: int, bottom: int, right: int) -> str:
        """Headers and cells of a rectangle, tab-separated, one line per row."""
        if not (self._in_range(top, left) and self._in_range(bottom, right)):
            raise IndexError("selection lies outside the table")
        if top > bottom or left > right:
            raise ValueError("selection is empty")
        headers = self.headers
        header_text = "".join(f"{headers[column]}\t" for column in range(left, right + 1))
        selection = ""
        for row in range(top, bottom + 1):
            for column in range(left, right + 1):
                selection += (self.item(row, column) or "") + "\t"
            selection = selection.strip() + "\n"
        return header_text.strip() + "\n" + selection.strip()

    def from_csv(self, csv_text: str) -> None:
        """Load headers and the first two fields of each line from CSV text.

        Every column header takes the first header's text; data lines fill
        the first two columns of consecutive rows.
        """
        lines = csv_text.split("\n")
        headers = lines[0].split(", ")
        first = headers[0].replace('"', "")
        self.set_header_labels([first] * len(headers))
        for row, line in enumerate(lines[1:]):
            fields = line.split(", ")
            if len(fields) < 2:
                raise ValueError(f"line {row + 2} has fewer than two fields: {line!r}")
            self.set_item(row, 0, fields[0].strip().replace('"', ""))
            self.set_item(row, 1, fields[1].strip().replace('"', ""))


def sample_table() -> DataTable:
    """The five-person table the demo starts with."""
    table = DataTable()
    table.set_header_labels(["ID", "Name", "Age"])
    people = [
        ("0001", "Anna", "20"),
        ("0002", "Tommy", "21"),
        ("0003", "Jim", "21"),
        ("0004", "Dick", "24"),
        ("0005", "Tim", "22"),
    ]
    for row, values in enumerate(people):
        for column, text in enumerate(values):
            table.set_item(row, column, text)
    return table