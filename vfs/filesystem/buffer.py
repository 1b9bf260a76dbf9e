"""
In-memory file content

Content is the byte storage of one file node. It is shared by reference
between every handle opened on that node, together with its lock. Buffer is
an unlocked cursor over a Content; MemFile adds the locking.
"""

import os

from ..exceptions import InvalidArgument, ResourceExhausted
from .locks import ReadWriteLock

# Minimal initial allocation and growth step of a Content
MIN_BUFFER_SIZE = 512


class Content:
    """Growable byte storage with an explicit capacity"""

    def __init__(self, min_buffer_size: int = MIN_BUFFER_SIZE):
        self.min_buffer_size = min_buffer_size
        self.lock = ReadWriteLock()
        self._data = bytearray(min_buffer_size)
        self.size = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def reserve(self, required: int) -> None:
        """Make room for ``required`` bytes.

        Raises MemoryError without modifying anything if the allocation fails.
        """
        if required <= self.capacity:
            return
        new_capacity = max(2 * self.capacity + self.min_buffer_size, required)
        data = bytearray(new_capacity)
        data[:self.size] = self._data[:self.size]
        self._data = data

    def truncate(self) -> None:
        self._data = bytearray(self.min_buffer_size)
        self.size = 0

    def getvalue(self) -> bytes:
        return bytes(self._data[:self.size])

    def __len__(self):
        return self.size


class Buffer:
    """A read/write/seek cursor over a Content. Not thread-safe."""

    def __init__(self, content: Content, name: str = ''):
        self._content = content
        self._name = name
        self._pos = 0

    def read(self, size: int = -1) -> bytes:
        content = self._content
        if self._pos >= content.size:
            return b''
        end = content.size if size is None or size < 0 else min(content.size, self._pos + size)
        data = bytes(content._data[self._pos:end])
        self._pos = end
        return data

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast('B')
        content = self._content
        if len(view) == 0 or self._pos >= content.size:
            return 0
        n = min(len(view), content.size - self._pos)
        view[:n] = content._data[self._pos:self._pos + n]
        self._pos += n
        return n

    def write(self, data) -> int:
        view = memoryview(data).cast('B')
        n = len(view)
        end = self._pos + n
        content = self._content
        try:
            content.reserve(end)
        except MemoryError:
            raise ResourceExhausted('write', self._name, f"cannot grow buffer to {end} bytes")
        content._data[self._pos:end] = view
        if end > content.size:
            content.size = end
        self._pos = end
        return n

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        if whence == os.SEEK_SET:
            pos = offset
        elif whence == os.SEEK_CUR:
            pos = self._pos + offset
        elif whence == os.SEEK_END:
            pos = self._content.size + offset
        else:
            raise InvalidArgument('seek', self._name, f"invalid whence: {whence}")
        if pos < 0:
            raise InvalidArgument('seek', self._name, "negative position")
        if pos > self._content.size:
            raise InvalidArgument('seek', self._name, "position past end of file")
        self._pos = pos
        return pos

    def tell(self) -> int:
        return self._pos

    def close(self) -> None:
        pass
