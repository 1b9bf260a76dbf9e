"""
Delegating wrappers

FileWrapper and FilesystemWrapper forward every operation to an explicit
``delegate``. Decorators subclass them and override only what they change.
"""

import os
from typing import List, Optional

from ..exceptions import ReadOnlyError, WriteOnlyError
from .base import File, FileInfo, Filesystem


class FileWrapper(File):
    """File forwarding every operation to ``delegate``"""

    def __init__(self, delegate: File):
        self.delegate = delegate

    @property
    def name(self) -> str:
        return self.delegate.name

    def read(self, size: int = -1) -> bytes:
        return self.delegate.read(size)

    def readinto(self, buffer) -> int:
        return self.delegate.readinto(buffer)

    def write(self, data) -> int:
        return self.delegate.write(data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        return self.delegate.seek(offset, whence)

    def tell(self) -> int:
        return self.delegate.tell()

    def close(self) -> None:
        self.delegate.close()


class ReadOnlyFile(FileWrapper):
    """Wraps a file and disables write()"""

    def write(self, data) -> int:
        raise ReadOnlyError('write', self.name, "file is read-only")


class WriteOnlyFile(FileWrapper):
    """Wraps a file and disables read() and readinto()"""

    def read(self, size: int = -1) -> bytes:
        raise WriteOnlyError('read', self.name, "file is write-only")

    def readinto(self, buffer) -> int:
        raise WriteOnlyError('read', self.name, "file is write-only")


class FilesystemWrapper(Filesystem):
    """Filesystem forwarding every operation to ``delegate``"""

    def __init__(self, delegate: Filesystem):
        self.delegate = delegate

    @property
    def path_separator(self) -> str:
        return self.delegate.path_separator

    def create(self, name: str) -> File:
        return self.delegate.create(name)

    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        return self.delegate.open_file(name, flags, mode)

    def remove(self, name: str) -> None:
        self.delegate.remove(name)

    def rename(self, old_path: str, new_path: str) -> None:
        self.delegate.rename(old_path, new_path)

    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        self.delegate.mkdir(name, mode)

    def stat(self, name: str) -> FileInfo:
        return self.delegate.stat(name)

    def lstat(self, name: str) -> FileInfo:
        return self.delegate.lstat(name)

    def read_dir(self, path: str) -> List[FileInfo]:
        return self.delegate.read_dir(path)
