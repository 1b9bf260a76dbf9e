"""
VFS path utilities

Lexical path handling for the in-memory filesystem. Nothing here touches a
node tree; resolution against the tree lives in RamFS.
"""

import posixpath
from typing import List, Tuple

from .base import PATH_SEPARATOR

ROOT = ''
CURRENT_DIR = '.'


def clean(path: str) -> str:
    """Normalize ``path`` lexically; the empty path cleans to '.'"""
    if not path:
        return CURRENT_DIR
    cleaned = posixpath.normpath(path)
    if cleaned.startswith(PATH_SEPARATOR * 2):
        # normpath keeps a leading double slash
        cleaned = PATH_SEPARATOR + cleaned.lstrip(PATH_SEPARATOR)
    return cleaned


def split(path: str) -> Tuple[str, str]:
    """Split a cleaned path into (directory, base name)

    A bare name lives in the working directory:
        'file'     -> ('.', 'file')
        '/file'    -> ('/', 'file')
        '/usr/src' -> ('/usr', 'src')
    """
    dir_path, base = posixpath.split(path)
    return dir_path or CURRENT_DIR, base


def split_path(path: str, sep: str = PATH_SEPARATOR) -> List[str]:
    """Split ``path`` into segments

        '/'               -> ['']
        '.'               -> ['.']
        './file'          -> ['.', 'file']
        'file'            -> ['.', 'file']
        '/usr/src/linux/' -> ['', 'usr', 'src', 'linux']
    """
    if path.endswith(sep):
        path = path[:-len(sep)]
    if not path:
        return [ROOT]
    if path == CURRENT_DIR:
        return [CURRENT_DIR]

    if not path.startswith(sep) and not path.startswith(CURRENT_DIR + sep):
        path = CURRENT_DIR + sep + path
    return path.split(sep)


def join(*parts: str) -> str:
    return posixpath.join(*parts)
