"""
Read-only filesystem wrapper
"""

import os
import logging
from typing import Optional

from ..exceptions import ReadOnlyError
from .base import File, Filesystem, access_mode, check_flag
from .wrappers import FilesystemWrapper, ReadOnlyFile

logger = logging.getLogger(__name__)

# open_file flags that would modify the delegate
_WRITE_FLAGS = (os.O_CREAT, os.O_APPEND, os.O_TRUNC)


class ReadOnlyFS(FilesystemWrapper):
    """Read-only view of another filesystem

    create, remove, rename and mkdir raise ReadOnlyError. open_file raises
    ReadOnlyError for O_CREAT, O_APPEND, O_TRUNC and O_WRONLY; any other
    open returns a file whose write() is disabled, even for O_RDWR.
    """

    def _reject(self, op: str, name: str):
        logger.warning(f"Rejected {op} on read-only filesystem: {name}")
        return ReadOnlyError(op, name, "filesystem is read-only")

    def create(self, name: str) -> File:
        raise self._reject('create', name)

    def remove(self, name: str) -> None:
        raise self._reject('remove', name)

    def rename(self, old_path: str, new_path: str) -> None:
        raise self._reject('rename', old_path)

    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        raise self._reject('mkdir', name)

    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        if access_mode(flags) == os.O_WRONLY or any(check_flag(f, flags) for f in _WRITE_FLAGS):
            raise self._reject('open', name)
        return ReadOnlyFile(self.delegate.open_file(name, flags, mode))


def read_only(fs: Filesystem) -> ReadOnlyFS:
    return ReadOnlyFS(fs)
