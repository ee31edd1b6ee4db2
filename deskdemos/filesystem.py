"""Listing, creating, removing and reading files and directories."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Names of the visible entries of a directory, sorted by name."""
    with os.scandir(path) as entries:
        return sorted(entry.name for entry in entries if not entry.name.startswith("."))


def make_directory(parent: str | os.PathLike[str], name: str) -> Path:
    """Create directory name inside parent and return its path; OSError on failure."""
    if not name:
        raise ValueError("directory name is empty")
    parent_path = Path(parent)
    if not parent_path.is_dir():
        raise NotADirectoryError(f"not a directory: {parent_path}")
    target = parent_path / name
    target.mkdir()
    return target


def remove_path(path: str | os.PathLike[str]) -> None:
    """Remove a file, or a directory if it is empty; OSError on failure."""
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        target.rmdir()
    else:
        target.unlink()


def read_text_file(path: str | os.PathLike[str]) -> str:
    """The whole content of a file as text; OSError if it cannot be read."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Print the entries of a directory (the current one by default)."""
    args = sys.argv[1:] if argv is None else argv
    directory = args[0] if args else os.getcwd()
    try:
        names = list_directory(directory)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    for name in names:
        print(f'"{name}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())