"""A newspaper that announces each issue to the readers connected to it."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO


class Signal:
    """A list of callables invoked, in connection order, on every emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> bool:
        """Remove one connection of slot; False if it was not connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            return False
        return True

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class Newspaper:
    """Publishes its own name through the new_paper signal."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.new_paper = Signal()

    def send(self) -> None:
        self.new_paper.emit(self.name)


class Reader:
    """Reports every newspaper it receives."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.received: list[str] = []

    def receive_newspaper(self, name: str) -> None:
        self.received.append(name)
        print(f"Receives Newspaper: {name}", file=self._out or sys.stdout)


def main(argv: list[str] | None = None) -> int:
    newspaper = Newspaper("Newspaper A")
    reader = Reader()
    newspaper.new_paper.connect(reader.receive_newspaper)
    newspaper.send()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())