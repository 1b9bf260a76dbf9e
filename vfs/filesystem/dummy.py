"""
Dummy filesystem and file, failing every operation with a fixed error.
Useful to mock a filesystem in tests.
"""

import os
from typing import List, Optional

from .base import File, FileInfo, Filesystem


class DummyFS(Filesystem):
    """Filesystem raising ``error`` on every operation

    To get a DummyFile out of open_file instead, subclass and override
    open_file to ``return DummyFile(error)``.
    """

    def __init__(self, error: Exception):
        self.error = error

    def create(self, name: str) -> File:
        raise self.error

    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        raise self.error

    def remove(self, name: str) -> None:
        raise self.error

    def rename(self, old_path: str, new_path: str) -> None:
        raise self.error

    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        raise self.error

    def stat(self, name: str) -> FileInfo:
        raise self.error

    def lstat(self, name: str) -> FileInfo:
        raise self.error

    def read_dir(self, path: str) -> List[FileInfo]:
        raise self.error


class DummyFile(File):
    """File raising ``error`` on every operation"""

    def __init__(self, error: Exception):
        self.error = error

    @property
    def name(self) -> str:
        return "dummy"

    def read(self, size: int = -1) -> bytes:
        raise self.error

    def readinto(self, buffer) -> int:
        raise self.error

    def write(self, data) -> int:
        raise self.error

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        raise self.error

    def tell(self) -> int:
        raise self.error

    def close(self) -> None:
        raise self.error
