"""
VFS - Virtual filesystem abstraction

A common Filesystem interface with an in-memory implementation (RamFS), an
OS-backed one (OSFS), wrapping filesystems (read-only, path prefix, dummy)
and a tree walker working on any of them.

Example Usage:

    import os
    import vfs

    fs = vfs.RamFS()
    fs.mkdir("/tmp")
    with fs.open_file("/tmp/hello.txt", os.O_CREAT | os.O_RDWR) as f:
        f.write(b"Hello, VFS!")

    def visit(path, info, error):
        if error is not None:
            raise error
        print(path)

    vfs.walk(fs, "/", visit)
"""

__version__ = "1.0.0"

from .config import FilesystemConfig, load_config
from .exceptions import (
    ErrorKind,
    FileSystemError,
    FileNotFound,
    FileExists,
    IsADirectory,
    NotADirectory,
    DirectoryNotEmpty,
    ReadOnlyError,
    WriteOnlyError,
    InvalidArgument,
    ResourceExhausted,
    PermissionDenied,
    FileIOError,
)
from .filesystem import (
    File,
    FileInfo,
    Filesystem,
    DummyFile,
    DummyFS,
    MemFile,
    OSFS,
    PrefixFS,
    RamFS,
    ReadOnlyFS,
    ReadOnlyFile,
    WriteOnlyFile,
    SkipDir,
    walk,
    mkdir_all,
    populate,
    read_file,
    write_file,
    read_only,
)

__all__ = [
    '__version__',
    'FilesystemConfig',
    'load_config',
    'ErrorKind',
    'FileSystemError',
    'FileNotFound',
    'FileExists',
    'IsADirectory',
    'NotADirectory',
    'DirectoryNotEmpty',
    'ReadOnlyError',
    'WriteOnlyError',
    'InvalidArgument',
    'ResourceExhausted',
    'PermissionDenied',
    'FileIOError',
    'File',
    'FileInfo',
    'Filesystem',
    'DummyFile',
    'DummyFS',
    'MemFile',
    'OSFS',
    'PrefixFS',
    'RamFS',
    'ReadOnlyFS',
    'ReadOnlyFile',
    'WriteOnlyFile',
    'SkipDir',
    'walk',
    'mkdir_all',
    'populate',
    'read_file',
    'write_file',
    'read_only',
]
