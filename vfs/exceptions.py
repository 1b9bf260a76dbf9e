"""
VFS exceptions

Every filesystem failure is a FileSystemError carrying the failing operation,
the path involved and an ErrorKind. Callers match on ``err.kind`` (or on the
subclass) rather than on message text.
"""
from enum import Enum
from types import MappingProxyType
from typing import Optional


class ErrorKind(Enum):
    """Kinds of filesystem failures"""
    NOT_FOUND = "not found"
    ALREADY_EXISTS = "already exists"
    IS_DIRECTORY = "is a directory"
    NOT_A_DIRECTORY = "not a directory"
    NOT_EMPTY = "directory not empty"
    READ_ONLY = "read-only"
    WRITE_ONLY = "write-only"
    INVALID_ARGUMENT = "invalid argument"
    RESOURCE_EXHAUSTED = "resource exhausted"
    PERMISSION_DENIED = "permission denied"
    IO = "i/o error"


class FileSystemError(Exception):
    """Base exception for filesystem operations"""
    kind = ErrorKind.IO

    def __init__(self, op: str, path: str, message: Optional[str] = None):
        self.op = op
        self.path = path
        self.message = message or self.kind.value
        super().__init__(f"{op} {path}: {self.message}")


class FileNotFound(FileSystemError):
    """Raised when a file or one of its parent directories does not exist"""
    kind = ErrorKind.NOT_FOUND


class FileExists(FileSystemError):
    """Raised when the target of a create operation already exists"""
    kind = ErrorKind.ALREADY_EXISTS


class IsADirectory(FileSystemError):
    """Raised when path is a directory but file operation is attempted"""
    kind = ErrorKind.IS_DIRECTORY


class NotADirectory(FileSystemError):
    """Raised when path is not a directory"""
    kind = ErrorKind.NOT_A_DIRECTORY


class DirectoryNotEmpty(FileSystemError):
    """Raised by strict removal of a directory that still has entries"""
    kind = ErrorKind.NOT_EMPTY


class ReadOnlyError(FileSystemError):
    """Raised when writing through a read-only file or filesystem"""
    kind = ErrorKind.READ_ONLY


class WriteOnlyError(FileSystemError):
    """Raised when reading through a write-only file"""
    kind = ErrorKind.WRITE_ONLY


class InvalidArgument(FileSystemError):
    """Raised on bad seeks and other malformed requests"""
    kind = ErrorKind.INVALID_ARGUMENT


class ResourceExhausted(FileSystemError):
    """Raised when a file buffer cannot be grown"""
    kind = ErrorKind.RESOURCE_EXHAUSTED


class PermissionDenied(FileSystemError):
    """Raised when permission is denied"""
    kind = ErrorKind.PERMISSION_DENIED


class FileIOError(FileSystemError):
    """Raised when I/O operation fails"""
    kind = ErrorKind.IO


ERROR_TYPES = MappingProxyType({
    cls.kind: cls
    for cls in (
        FileNotFound, FileExists, IsADirectory, NotADirectory,
        DirectoryNotEmpty, ReadOnlyError, WriteOnlyError, InvalidArgument,
        ResourceExhausted, PermissionDenied, FileIOError,
    )
})


def make_error(kind: ErrorKind, op: str, path: str,
               message: Optional[str] = None) -> FileSystemError:
    """Build the exception registered for ``kind``"""
    return ERROR_TYPES[kind](op, path, message)


__all__ = [
    'ErrorKind',
    'ERROR_TYPES',
    'make_error',
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
]
