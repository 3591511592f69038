"""Read-only memory-mapped view of a file."""

from __future__ import annotations

import mmap
import os

__all__ = ["FileView"]


class FileView:
    """Maps a whole file read-only; an empty file yields empty contents."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._map: mmap.mmap | None = None
        self._closed = False
        fd = os.open(path, os.O_RDONLY)
        try:
            size = os.fstat(fd).st_size
            if size:
                self._map = mmap.mmap(fd, size, access=mmap.ACCESS_READ)
        finally:
            os.close(fd)

    def contents(self) -> mmap.mmap | bytes:
        """Return the mapped bytes (a bytes-like, sliceable object)."""
        if self._closed:
            raise ValueError("file view is closed")
        return self._map if self._map is not None else b""

    def close(self) -> None:
        """Unmap the file. Calling it again has no effect."""
        if self._map is not None:
            self._map.close()
            self._map = None
        self._closed = True

    def __enter__(self) -> FileView:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self.contents())

    def __bytes__(self) -> bytes:
        return bytes(self.contents())