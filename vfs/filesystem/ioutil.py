"""
Convenience helpers working on any Filesystem
"""

import os
import logging
from typing import Mapping, Union

from ..exceptions import FileExists, FileIOError, InvalidArgument, NotADirectory
from .base import Filesystem

logger = logging.getLogger(__name__)

# Chunk size used by read_file
_READ_CHUNK = 64 * 1024


def write_file(fs: Filesystem, filename: str, data: bytes, perm: int = 0o666) -> None:
    """Write ``data`` to ``filename``, creating it with ``perm`` if needed and
    truncating it otherwise"""
    with fs.open_file(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perm) as f:
        n = f.write(data)
        if n < len(data):
            raise FileIOError('write', filename, f"short write: {n} of {len(data)} bytes")


def read_file(fs: Filesystem, filename: str) -> bytes:
    """Read ``filename`` until end of stream"""
    chunks = []
    with fs.open_file(filename, os.O_RDONLY) as f:
        while True:
            chunk = f.read(_READ_CHUNK)
            if not chunk:
                break
            chunks.append(chunk)
    return b''.join(chunks)


def mkdir_all(fs: Filesystem, path: str, perm: int = 0o777) -> None:
    """Create ``path`` and any missing parents; existing directories are fine"""
    sep = fs.path_separator
    current = sep if path.startswith(sep) else ''
    for part in path.split(sep):
        if not part or part == '.':
            continue
        current = current + part if not current or current.endswith(sep) else current + sep + part
        try:
            fs.mkdir(current, perm)
        except FileExists:
            if not fs.stat(current).is_dir:
                raise NotADirectory('mkdir', current)


def populate(fs: Filesystem, tree: Mapping[str, Union[Mapping, str, bytes]],
             root: str = '/') -> int:
    """Build a directory tree from a nested mapping

    Mappings become directories, str/bytes values become file contents:

        populate(fs, {
            "readme.txt": "Hello, world!",
            "docs": {"guide.txt": "A guide"},
        })

    Returns the number of entries created.
    """
    sep = fs.path_separator
    count = 0
    for name, value in tree.items():
        path = root + name if root.endswith(sep) else root + sep + name
        if isinstance(value, Mapping):
            fs.mkdir(path)
            count += 1 + populate(fs, value, path)
        elif isinstance(value, (str, bytes)):
            write_file(fs, path, value.encode('utf-8') if isinstance(value, str) else value)
            count += 1
        elif value is None:
            write_file(fs, path, b'')
            count += 1
        else:
            raise InvalidArgument('populate', path, f"unsupported entry type {type(value).__name__}")
    logger.debug(f"Populated {count} entries under {root}")
    return count
