"""Passing a block of bytes between processes through named shared memory."""

from __future__ import annotations

import struct
from multiprocessing import shared_memory

DEFAULT_KEY = "Shared"
_HEADER = struct.Struct(">I")


class SharedBlob:
    """One side of a named shared-memory segment.

    The side that saves stays attached, keeping the segment alive until
    close(); a loading side attaches, copies the data out and detaches.
    """

    def __init__(self, key: str = DEFAULT_KEY) -> None:
        self.key = key
        self._segment: shared_memory.SharedMemory | None = None

    @property
    def is_attached(self) -> bool:
        return self._segment is not None

    def save(self, data: bytes) -> None:
        """Publish data under the key, replacing what this side published before.

        FileExistsError if another side already holds a segment with this key.
        """
        self.close()
        payload = _HEADER.pack(len(data)) + bytes(data)
        segment = shared_memory.SharedMemory(name=self.key, create=True, size=len(payload))
        segment.buf[: len(payload)] = payload
        self._segment = segment

    def load(self) -> bytes:
        """Copy out the data published under the key.

        FileNotFoundError if nothing is published; RuntimeError if this side is
        itself attached.
        """
        if self._segment is not None:
            raise RuntimeError(f"already attached to shared memory {self.key!r}")
        segment = shared_memory.SharedMemory(name=self.key)
        try:
            (length,) = _HEADER.unpack_from(segment.buf, 0)
            if length > segment.size - _HEADER.size:
                raise ValueError(f"shared memory {self.key!r} holds a corrupt length")
            with segment.buf[_HEADER.size:_HEADER.size + length] as view:
                return bytes(view)
        finally:
            segment.close()

    def close(self) -> None:
        """Detach and release the segment this side published, if any."""
        if self._segment is None:
            return
        segment, self._segment = self._segment, None
        segment.close()
        segment.unlink()

    def __enter__(self) -> "SharedBlob":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()