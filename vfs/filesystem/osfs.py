"""
OS filesystem - forwards every operation to the host's os module
"""

import io
import os
import errno
import logging
from functools import wraps
from typing import List, Optional

from ..exceptions import ErrorKind, make_error
from .base import File, FileInfo, Filesystem, access_mode

logger = logging.getLogger(__name__)

_ERRNO_KINDS = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno.EISDIR: ErrorKind.IS_DIRECTORY,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.ENOTEMPTY: ErrorKind.NOT_EMPTY,
    errno.EROFS: ErrorKind.READ_ONLY,
    errno.EINVAL: ErrorKind.INVALID_ARGUMENT,
    errno.ENOSPC: ErrorKind.RESOURCE_EXHAUSTED,
    errno.ENOMEM: ErrorKind.RESOURCE_EXHAUSTED,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
}


def translate_os_error(op: str, path: str, err: OSError):
    """Convert a native OSError into the matching FileSystemError"""
    kind = _ERRNO_KINDS.get(err.errno, ErrorKind.IO)
    logger.debug(f"{op} {path}: {err} -> {kind.name}")
    return make_error(kind, op, path, err.strerror or str(err))


def _os_call(op: str):
    """Translate OSErrors raised by the wrapped method; the first argument
    names the path"""
    def decorator(func):
        @wraps(func)
        def wrapper(self, name, *args, **kwargs):
            try:
                return func(self, name, *args, **kwargs)
            except OSError as e:
                raise translate_os_error(op, name, e) from e
        return wrapper
    return decorator


def _base_name(path: str) -> str:
    return os.path.basename(os.path.normpath(path)) or path


class OSFile(File):
    """File backed by a raw (unbuffered) OS file"""

    def __init__(self, raw: io.FileIO, name: str):
        self._raw = raw
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def _call(self, op: str, func, *args):
        try:
            return func(*args)
        except io.UnsupportedOperation as e:
            raise make_error(
                ErrorKind.WRITE_ONLY if op == 'read' else ErrorKind.READ_ONLY,
                op, self._name, str(e)) from e
        except OSError as e:
            raise translate_os_error(op, self._name, e) from e

    def _check_readable(self) -> None:
        if not self._raw.readable():
            raise make_error(ErrorKind.WRITE_ONLY, 'read', self._name, "file is write-only")

    def read(self, size: int = -1) -> bytes:
        self._check_readable()
        if size is None or size < 0:
            return self._call('read', self._raw.readall)
        return self._call('read', self._raw.read, size)

    def readinto(self, buffer) -> int:
        self._check_readable()
        return self._call('read', self._raw.readinto, buffer)

    def write(self, data) -> int:
        if not self._raw.writable():
            raise make_error(ErrorKind.READ_ONLY, 'write', self._name, "file is read-only")
        return self._call('write', self._raw.write, data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        return self._call('seek', self._raw.seek, offset, whence)

    def tell(self) -> int:
        return self._call('seek', self._raw.tell)

    def close(self) -> None:
        self._call('close', self._raw.close)


class OSFS(Filesystem):
    """Filesystem backed by the host operating system"""
    path_separator = os.sep

    def create(self, name: str) -> File:
        return self.open_file(name, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o666)

    @_os_call('open')
    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        fd = os.open(name, flags, 0o666 if mode is None else mode)
        acc = access_mode(flags)
        if acc == os.O_RDWR:
            file_mode = 'r+b'
        elif acc == os.O_WRONLY:
            file_mode = 'ab' if flags & os.O_APPEND else 'wb'
        else:
            file_mode = 'rb'
        try:
            raw = io.FileIO(fd, file_mode, closefd=True)
        except Exception:
            os.close(fd)
            raise
        return OSFile(raw, name)

    @_os_call('remove')
    def remove(self, name: str) -> None:
        if os.path.isdir(name) and not os.path.islink(name):
            os.rmdir(name)
        else:
            os.remove(name)

    def rename(self, old_path: str, new_path: str) -> None:
        try:
            os.rename(old_path, new_path)
        except OSError as e:
            raise translate_os_error('rename', old_path, e) from e

    @_os_call('mkdir')
    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        os.mkdir(name, 0o777 if mode is None else mode)

    @_os_call('stat')
    def stat(self, name: str) -> FileInfo:
        return FileInfo.from_os_stat(os.stat(name), _base_name(name))

    @_os_call('lstat')
    def lstat(self, name: str) -> FileInfo:
        return FileInfo.from_os_stat(os.lstat(name), _base_name(name))

    @_os_call('readdir')
    def read_dir(self, path: str) -> List[FileInfo]:
        infos = []
        with os.scandir(path) as it:
            for entry in it:
                infos.append(FileInfo.from_os_stat(entry.stat(follow_symlinks=False), entry.name))
        return sorted(infos, key=lambda info: info.name)
