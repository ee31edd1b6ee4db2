"""Book index documents: reading them into entry trees and writing the sample index."""

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator
from xml.sax.saxutils import escape, quoteattr

_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_INDENT = "    "


class BookIndexError(Exception):
    """Raised when a book index cannot be read, parsed or written."""


@dataclass
class Entry:
    """An index term with its pages and sub-entries."""

    term: str = ""
    pages: list[str] = field(default_factory=list)
    children: list["Entry"] = field(default_factory=list)

    @property
    def pages_text(self) -> str:
        """Pages joined with ", ", as shown next to the term."""
        text = ""
        for page in self.pages:
            if text:
                text += ", "
            text += page
        return text


def _dom_entry(element: ET.Element) -> Entry:
    entry = Entry(term=element.get("term", ""))
    for child in element:
        if child.tag == "entry":
            entry.children.append(_dom_entry(child))
        elif child.tag == "page":
            entry.pages.append("".join(child.itertext()))
    return entry


def parse_dom(text: str | bytes) -> list[Entry]:
    """Parse a whole document at once; page text includes text of nested elements."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        line, column = exc.position
        raise BookIndexError(f"Parse error at line {line}, column {column}: {exc.msg}") from exc
    if root.tag != "bookindex":
        raise BookIndexError("Not a bookindex file")
    return [_dom_entry(child) for child in root if child.tag == "entry"]


_Events = Iterator[tuple[str, ET.Element]]


def _skip_element(events: _Events) -> None:
    depth = 1
    for event, _ in events:
        depth += 1 if event == "start" else -1
        if depth == 0:
            return


def _read_page(events: _Events, element: ET.Element) -> str:
    event, _ = next(events)
    if event != "end":
        raise BookIndexError("Expected character data.")
    return element.text or ""


def _read_entry(events: _Events, element: ET.Element) -> Entry:
    entry = Entry(term=element.get("term", ""))
    for event, child in events:
        if event == "end":
            break
        if child.tag == "entry":
            entry.children.append(_read_entry(events, child))
        elif child.tag == "page":
            entry.pages.append(_read_page(events, child))
        else:
            _skip_element(events)
    return entry


def parse_stream(text: str | bytes) -> list[Entry]:
    """Parse element by element; a page holding nested elements is an error."""
    parser = ET.XMLPullParser(events=("start", "end"))
    try:
        parser.feed(text)
        parser.close()
        collected = list(parser.read_events())
    except ET.ParseError as exc:
        raise BookIndexError(f"Failed to parse: {exc}") from exc

    events: _Events = iter(collected)
    _, root = next(events)
    if root.tag != "bookindex":
        raise BookIndexError("Not a valid book file")
    entries = []
    for event, element in events:
        if event == "end":
            break
        if element.tag == "entry":
            entries.append(_read_entry(events, element))
        else:
            _skip_element(events)
    return entries


def read_file(path) -> list[Entry]:
    """Read and parse a book index file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise BookIndexError(f"Cannot read file {path}") from exc
    return parse_dom(data)


def _sample_entries() -> list[Entry]:
    return [
        Entry("sidebearings", ["10", "34-35", "307-308"]),
        Entry(
            "subtraction",
            children=[
                Entry("of pictures", ["115", "224"]),
                Entry("of vectors", ["9"]),
            ],
        ),
    ]


def _entry_lines(entry: Entry, depth: int) -> Iterator[str]:
    pad = _INDENT * depth
    opening = f"{pad}<entry term={quoteattr(entry.term)}"
    if not entry.pages and not entry.children:
        yield opening + "/>"
        return
    yield opening + ">"
    for page in entry.pages:
        yield f"{pad}{_INDENT}<page>{escape(page)}</page>"
    for child in entry.children:
        yield from _entry_lines(child, depth + 1)
    yield f"{pad}</entry>"


def sample_index_xml() -> str:
    """The indented sample book index document."""
    lines = [_DECLARATION, "<bookindex>"]
    for entry in _sample_entries():
        lines.extend(_entry_lines(entry, 1))
    lines.append("</bookindex>")
    return "\n".join(lines) + "\n"


def write_sample(path) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(sample_index_xml())
    except OSError as exc:
        raise BookIndexError(f"Cannot write file: {exc}") from exc


def _tree_lines(entries: list[Entry], depth: int = 0) -> Iterator[str]:
    for entry in entries:
        yield f"{'  ' * depth}{entry.term}\t{entry.pages_text}"
        yield from _tree_lines(entry.children, depth + 1)


def main(argv: list[str] | None = None) -> int:
    """`write [PATH]` writes the sample index; otherwise read PATH (books.xml) and print it."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if args and args[0] == "write":
            write_sample(args[1] if len(args) > 1 else "bookindex.xml")
            return 0
        entries = read_file(args[0] if args else "books.xml")
    except BookIndexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for line in _tree_lines(entries):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())