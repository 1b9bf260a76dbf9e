"""
Backend-independent tree walk
"""

from typing import Callable, List, Optional

from ..exceptions import FileSystemError
from .base import FileInfo, Filesystem

WalkFunc = Callable[[str, Optional[FileInfo], Optional[FileSystemError]], None]


class SkipDir(Exception):
    """Raised by a walk function to prune the walk.

    Raised while visiting a directory, the directory's contents are skipped.
    Raised while visiting a file, the remaining entries of the file's
    directory are skipped.
    """


def walk(fs: Filesystem, root: str, walk_fn: WalkFunc) -> None:
    """Walk the file tree rooted at ``root``, calling ``walk_fn`` for each
    file or directory in the tree, including ``root``.

    ``walk_fn(path, info, error)`` receives the lookup or listing error of
    an entry in ``error`` (``info`` is None when the lookup itself failed).
    Returning normally continues the walk, raising SkipDir prunes it, and
    any other exception aborts the walk and propagates to the caller.

    Entries are visited in lexical order, so the output is deterministic,
    but very large directories are read completely before descending.
    """
    try:
        try:
            info = fs.lstat(root)
        except FileSystemError as err:
            walk_fn(root, None, err)
        else:
            _walk(fs, root, info, walk_fn)
    except SkipDir:
        pass


def _read_dir_names(fs: Filesystem, dirname: str) -> List[str]:
    """Read the directory named by ``dirname`` and return its sorted entry names"""
    return sorted(info.name for info in fs.read_dir(dirname))


def _walk(fs: Filesystem, path: str, info: FileInfo, walk_fn: WalkFunc) -> None:
    if not info.is_dir:
        walk_fn(path, info, None)
        return

    try:
        names = _read_dir_names(fs, path)
    except FileSystemError as err:
        # The directory can't be entered; walk_fn decides whether that aborts.
        walk_fn(path, info, err)
        return
    walk_fn(path, info, None)

    sep = fs.path_separator
    for name in names:
        filename = path + name if path.endswith(sep) else path + sep + name
        try:
            file_info = fs.lstat(filename)
        except FileSystemError as err:
            try:
                walk_fn(filename, None, err)
            except SkipDir:
                pass
            continue
        try:
            _walk(fs, filename, file_info, walk_fn)
        except SkipDir:
            if not file_info.is_dir:
                raise
