"""
Prefix filesystem wrapper
"""

import os
from typing import List, Optional

from .base import File, FileInfo, Filesystem
from .wrappers import FilesystemWrapper


class PrefixFS(FilesystemWrapper):
    """Forwards every operation to ``delegate`` with ``prefix`` prepended to
    each path"""

    def __init__(self, delegate: Filesystem, prefix: str):
        super().__init__(delegate)
        self.prefix = prefix

    def _prefixed(self, path: str) -> str:
        return self.prefix + self.path_separator + path

    def create(self, name: str) -> File:
        return self.delegate.create(self._prefixed(name))

    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        return self.delegate.open_file(self._prefixed(name), flags, mode)

    def remove(self, name: str) -> None:
        self.delegate.remove(self._prefixed(name))

    def rename(self, old_path: str, new_path: str) -> None:
        self.delegate.rename(self._prefixed(old_path), self._prefixed(new_path))

    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        self.delegate.mkdir(self._prefixed(name), mode)

    def stat(self, name: str) -> FileInfo:
        return self.delegate.stat(self._prefixed(name))

    def lstat(self, name: str) -> FileInfo:
        return self.delegate.lstat(self._prefixed(name))

    def read_dir(self, path: str) -> List[FileInfo]:
        return self.delegate.read_dir(self._prefixed(path))
