"""Big-endian binary stream of length-prefixed UTF-16 strings and 32-bit integers."""

from __future__ import annotations

import struct
import sys
from typing import BinaryIO

_NULL_STRING = 0xFFFFFFFF
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def write_string(stream: BinaryIO, text: str | None) -> None:
    """Write a byte-length prefix and the UTF-16BE text; None is written as a null string."""
    if text is None:
        stream.write(struct.pack(">I", _NULL_STRING))
        return
    data = text.encode("utf-16-be")
    stream.write(struct.pack(">I", len(data)))
    stream.write(data)


def read_string(stream: BinaryIO) -> str | None:
    """Read a string written by write_string; a null string comes back as None."""
    (length,) = struct.unpack(">I", _read_exact(stream, 4))
    if length == _NULL_STRING:
        return None
    if length % 2:
        raise ValueError(f"odd byte length {length} for a UTF-16 string")
    return _read_exact(stream, length).decode("utf-16-be")


def write_int32(stream: BinaryIO, value: int) -> None:
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"{value} does not fit in 32 bits")
    stream.write(struct.pack(">i", value))


def read_int32(stream: BinaryIO) -> int:
    (value,) = struct.unpack(">i", _read_exact(stream, 4))
    return value


def save_answer(path, text: str = "the answer is", value: int = 42) -> None:
    """Write one string followed by one integer to a new file."""
    with open(path, "wb") as stream:
        write_string(stream, text)
        write_int32(stream, value)


def load_answer(path) -> tuple[str | None, int]:
    """Read back the string and integer written by save_answer."""
    with open(path, "rb") as stream:
        text = read_string(stream)
        value = read_int32(stream)
    return text, value


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "file.dat"
    save_answer(path)
    text, value = load_answer(path)
    print(f'"{text}" {value}')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())