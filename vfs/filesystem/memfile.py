"""
MemFile - file handle over in-memory content
"""

import os

from .base import File
from .buffer import Buffer, Content


class MemFile(File):
    """Handle on a RamFS file

    The content and its lock are shared with every other handle on the same
    node, so concurrent handles are safe with respect to each other. A single
    handle is not meant to be shared between threads: its cursor is private
    and unguarded.
    """

    def __init__(self, name: str, content: Content):
        self._name = name
        self._lock = content.lock
        self._buffer = Buffer(content, name)

    @property
    def name(self) -> str:
        return self._name

    def read(self, size: int = -1) -> bytes:
        with self._lock.read_lock():
            return self._buffer.read(size)

    def readinto(self, buffer) -> int:
        with self._lock.read_lock():
            return self._buffer.readinto(buffer)

    def write(self, data) -> int:
        with self._lock.write_lock():
            return self._buffer.write(data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        with self._lock.read_lock():
            return self._buffer.seek(offset, whence)

    def tell(self) -> int:
        return self._buffer.tell()

    def close(self) -> None:
        self._buffer.close()

    def __repr__(self):
        return f"MemFile({self._name!r})"
