"""
Filesystem and file interfaces shared by every backend

Open flags use the os.O_* vocabulary so the same values work for the
in-memory filesystem and the OS-backed one.
"""

import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

PATH_SEPARATOR = '/'


def check_flag(flag: int, flags: int) -> bool:
    """Return True if every bit of ``flag`` is set in ``flags``"""
    return flags & flag == flag


def access_mode(flags: int) -> int:
    """Return the O_RDONLY / O_WRONLY / O_RDWR part of ``flags``"""
    return flags & (os.O_RDONLY | os.O_WRONLY | os.O_RDWR)


@dataclass(frozen=True)
class FileInfo:
    """Snapshot of a file's metadata, as returned by stat and read_dir"""
    name: str           # Final path segment
    size: int           # Content length in bytes, 0 for directories
    mode: int           # Type bits | permission bits
    is_dir: bool
    mod_time: float     # Last modification time (epoch seconds)

    @property
    def permissions(self) -> int:
        return stat.S_IMODE(self.mode)

    @staticmethod
    def from_os_stat(st: os.stat_result, name: str) -> 'FileInfo':
        """Create from an os.stat() result"""
        is_dir = stat.S_ISDIR(st.st_mode)
        return FileInfo(
            name=name,
            size=0 if is_dir else st.st_size,
            mode=st.st_mode,
            is_dir=is_dir,
            mod_time=st.st_mtime,
        )


class File(ABC):
    """An open file: a cursor over some byte content"""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining if negative).

        Returns b'' at end of stream.
        """
        raise NotImplementedError

    @abstractmethod
    def readinto(self, buffer) -> int:
        """Read into a writable buffer, returning the number of bytes copied"""
        raise NotImplementedError

    @abstractmethod
    def write(self, data) -> int:
        raise NotImplementedError

    @abstractmethod
    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        raise NotImplementedError

    @abstractmethod
    def tell(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class Filesystem(ABC):
    """Abstract filesystem

    Files returned by open_file do not expose stat; call
    ``fs.stat(file.name)`` instead.
    """
    path_separator = PATH_SEPARATOR

    @abstractmethod
    def create(self, name: str) -> File:
        """Create or truncate ``name`` and open it read-write"""
        raise NotImplementedError

    @abstractmethod
    def open_file(self, name: str, flags: int = os.O_RDONLY,
                  mode: Optional[int] = None) -> File:
        raise NotImplementedError

    @abstractmethod
    def remove(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def mkdir(self, name: str, mode: Optional[int] = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def stat(self, name: str) -> FileInfo:
        raise NotImplementedError

    @abstractmethod
    def lstat(self, name: str) -> FileInfo:
        raise NotImplementedError

    @abstractmethod
    def read_dir(self, path: str) -> List[FileInfo]:
        """List the entries of a directory, sorted by name"""
        raise NotImplementedError
