"""
RamFS - RAM Filesystem Implementation
In-memory filesystem holding a tree of directory and file nodes
"""

import os
import stat
import time
import logging
from typing import Dict, List, Optional, Tuple

from ..config import FilesystemConfig
from ..exceptions import (
    FileNotFound, FileExists, IsADirectory, NotADirectory,
    DirectoryNotEmpty, InvalidArgument,
)
from . import path as vpath
from .base import FileInfo, File, Filesystem, access_mode, check_flag
from .buffer import Content
from .locks import ReadWriteLock
from .memfile import MemFile
from .wrappers import ReadOnlyFile, WriteOnlyFile

logger = logging.getLogger(__name__)


class RamNode:
    """A directory or regular file in a RamFS tree

    Directories own their children through ``children``; files own their
    bytes through ``content``. ``parent`` is a back reference used to
    rebuild absolute paths, never to own anything.
    """

    def __init__(self, name: str, is_dir: bool, mode: int,
                 parent: Optional['RamNode'] = None,
                 content: Optional[Content] = None):
        self.name = name
        self.is_dir = is_dir
        self.mode = mode
        self.parent = parent
        self.mod_time = time.time()
        self.children: Optional[Dict[str, 'RamNode']] = {} if is_dir else None
        self.content = content

    def touch(self) -> None:
        self.mod_time = time.time()

    def abs_path(self) -> str:
        if self.parent is None:
            return vpath.PATH_SEPARATOR
        return vpath.join(self.parent.abs_path(), self.name)

    def is_ancestor_of(self, node: Optional['RamNode']) -> bool:
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def info(self) -> FileInfo:
        if self.is_dir:
            return FileInfo(
                name=self.name,
                size=0,
                mode=stat.S_IFDIR | self.mode,
                is_dir=True,
                mod_time=self.mod_time,
            )
        with self.content.lock.read_lock():
            size = self.content.size
        return FileInfo(
            name=self.name,
            size=size,
            mode=stat.S_IFREG | self.mode,
            is_dir=False,
            mod_time=self.mod_time,
        )

    def __repr__(self):
        kind = 'dir' if self.is_dir else 'file'
        return f"RamNode({self.abs_path()!r}, {kind})"


class RamFS(Filesystem):
    """RAM-based filesystem implementation

    A single structural lock serializes every operation on the tree: write
    mode for mutations and opens, read mode for lookups. File contents have
    their own locks, so reading and writing open files never waits for
    directory operations.
    """

    def __init__(self, config: Optional[FilesystemConfig] = None,
                 strict_remove: Optional[bool] = None):
        self.config = config or FilesystemConfig()
        self.strict_remove = self.config.strict_remove if strict_remove is None else strict_remove
        self.root = RamNode(vpath.PATH_SEPARATOR, True, self.config.default_dir_mode)
        self._wd = self.root
        self._lock = ReadWriteLock()

    # Path resolution

    def _find_dir(self, op: str, name: str, dir_path: str) -> RamNode:
        """Resolve ``dir_path`` to a directory node.

        A missing or non-directory segment means the parent of ``name`` does
        not exist.
        """
        segments = vpath.split_path(dir_path)
        if segments == [vpath.ROOT]:
            return self.root
        if segments == [vpath.CURRENT_DIR]:
            return self._wd

        node = self.root
        if segments[0] == vpath.CURRENT_DIR:
            node = self._wd
        segments = segments[1:]

        for i, seg in enumerate(segments):
            child = node.children.get(seg)
            if child is None or not child.is_dir:
                missing = vpath.PATH_SEPARATOR.join(segments[:i + 1])
                raise FileNotFound(op, name, f"parent directory {missing!r} does not exist")
            node = child
        return node

    def _resolve(self, op: str, name: str) -> Tuple[Optional[RamNode], str, Optional[RamNode]]:
        """Resolve ``name`` to (parent, base name, target).

        The target is None if it does not exist; a missing parent raises
        FileNotFound. Root resolves to (None, '/', root).
        """
        cleaned = vpath.clean(name)
        if cleaned == vpath.PATH_SEPARATOR:
            return None, self.root.name, self.root
        if cleaned == vpath.CURRENT_DIR:
            return self._wd.parent, self._wd.name, self._wd

        dir_path, base = vpath.split(cleaned)
        parent = self._find_dir(op, name, dir_path)
        return parent, base, parent.children.get(base)

    # Directory operations

    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        """Create a directory"""
        if mode is None:
            mode = self.config.default_dir_mode
        with self._lock.write_lock():
            parent, base, node = self._resolve('mkdir', name)
            if node is not None:
                raise FileExists('mkdir', name, "directory already exists"
                                 if node.is_dir else "file already exists")
            parent.children[base] = RamNode(base, True, mode, parent)
            parent.touch()
        logger.debug(f"Created directory: {name}")

    def read_dir(self, path: str) -> List[FileInfo]:
        """List contents of a directory"""
        with self._lock.read_lock():
            _, _, node = self._resolve('readdir', path)
            if node is None:
                raise FileNotFound('readdir', path)
            if not node.is_dir:
                raise NotADirectory('readdir', path)
            return [child.info() for _, child in sorted(node.children.items())]

    def chdir(self, path: str) -> None:
        """Change the working directory used for relative paths"""
        with self._lock.write_lock():
            _, _, node = self._resolve('chdir', path)
            if node is None:
                raise FileNotFound('chdir', path)
            if not node.is_dir:
                raise NotADirectory('chdir', path)
            self._wd = node
        logger.debug(f"Changed directory to: {path}")

    def getcwd(self) -> str:
        with self._lock.read_lock():
            return self._wd.abs_path()

    # File operations

    def create(self, name: str) -> File:
        """Create or truncate a file and open it read-write"""
        return self.open_file(name, os.O_RDWR | os.O_CREAT | os.O_TRUNC,
                              self.config.default_file_mode)

    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        """Open a file, creating it if O_CREAT is set

        Opening for writing (O_WRONLY, O_RDWR) or with O_TRUNC refreshes the
        modification time; a read-only open leaves it unchanged.
        """
        acc = access_mode(flags)
        if acc not in (os.O_RDONLY, os.O_WRONLY, os.O_RDWR):
            raise InvalidArgument('open', name, f"invalid access mode: {acc:#o}")
        if mode is None:
            mode = self.config.default_file_mode
        with self._lock.write_lock():
            parent, base, node = self._resolve('open', name)
            if node is not None and node.is_dir:
                raise IsADirectory('open', name)

            if node is None:
                if not check_flag(os.O_CREAT, flags):
                    raise FileNotFound('open', name)
                node = RamNode(base, False, mode, parent,
                               Content(self.config.min_buffer_size))
                parent.children[base] = node
                parent.touch()
                logger.debug(f"Created file: {name}")
            elif check_flag(os.O_TRUNC, flags):
                with node.content.lock.write_lock():
                    node.content.truncate()
            elif check_flag(os.O_CREAT, flags):
                raise FileExists('open', name)

            if acc != os.O_RDONLY or check_flag(os.O_TRUNC, flags):
                node.touch()
            handle = MemFile(node.abs_path(), node.content)

        if check_flag(os.O_APPEND, flags):
            handle.seek(0, os.SEEK_END)

        if acc == os.O_RDWR:
            return handle
        if acc == os.O_WRONLY:
            return WriteOnlyFile(handle)
        return ReadOnlyFile(handle)

    def remove(self, name: str) -> None:
        """Remove a file or directory; directories go with their subtree
        unless strict_remove is set"""
        with self._lock.write_lock():
            parent, base, node = self._resolve('remove', name)
            if node is None:
                raise FileNotFound('remove', name)
            if parent is None:
                raise InvalidArgument('remove', name, "cannot remove root directory")
            if node.is_ancestor_of(self._wd):
                raise InvalidArgument('remove', name,
                                      "cannot remove the working directory or its ancestors")
            if node.is_dir and node.children and self.strict_remove:
                raise DirectoryNotEmpty('remove', name)
            del parent.children[base]
            parent.touch()
        logger.debug(f"Removed: {name}")

    def rename(self, old_path: str, new_path: str) -> None:
        """Rename/move a file or directory"""
        with self._lock.write_lock():
            old_parent, old_base, node = self._resolve('rename', old_path)
            if node is None:
                raise FileNotFound('rename', old_path)
            if old_parent is None:
                raise InvalidArgument('rename', old_path, "cannot rename root directory")

            new_parent, new_base, existing = self._resolve('rename', new_path)
            if existing is not None:
                raise FileExists('rename', new_path)
            if node.is_ancestor_of(new_parent):
                raise InvalidArgument('rename', new_path,
                                      f"cannot move {old_path!r} into itself")

            del old_parent.children[old_base]
            node.name = new_base
            node.parent = new_parent
            new_parent.children[new_base] = node
            node.touch()
            old_parent.touch()
            new_parent.touch()
        logger.debug(f"Renamed {old_path} to {new_path}")

    def stat(self, name: str) -> FileInfo:
        with self._lock.read_lock():
            _, _, node = self._resolve('stat', name)
            if node is None:
                raise FileNotFound('stat', name)
            return node.info()

    def lstat(self, name: str) -> FileInfo:
        # No symbolic links in RamFS
        return self.stat(name)

    def __repr__(self):
        return f"RamFS(cwd={self._wd.abs_path()!r})"
