"""
Filesystem module initialization
"""
from .base import File, FileInfo, Filesystem, PATH_SEPARATOR, check_flag
from .dummy import DummyFile, DummyFS
from .ioutil import mkdir_all, populate, read_file, write_file
from .memfile import MemFile
from .osfs import OSFS, OSFile
from .prefixfs import PrefixFS
from .ramfs import RamFS, RamNode
from .readonly import ReadOnlyFS, read_only
from .walk import SkipDir, walk
from .wrappers import FilesystemWrapper, FileWrapper, ReadOnlyFile, WriteOnlyFile

__all__ = [
    'File',
    'FileInfo',
    'Filesystem',
    'PATH_SEPARATOR',
    'check_flag',
    'DummyFile',
    'DummyFS',
    'mkdir_all',
    'populate',
    'read_file',
    'write_file',
    'MemFile',
    'OSFS',
    'OSFile',
    'PrefixFS',
    'RamFS',
    'RamNode',
    'ReadOnlyFS',
    'read_only',
    'SkipDir',
    'walk',
    'FilesystemWrapper',
    'FileWrapper',
    'ReadOnlyFile',
    'WriteOnlyFile',
]
