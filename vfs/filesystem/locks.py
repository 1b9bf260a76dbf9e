"""
Reader/writer lock

Readers share the lock, writers hold it exclusively. Waiting writers block
new readers so a steady stream of reads cannot starve a write.
"""

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """Write-preferring reader/writer lock (not reentrant)"""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._reader_count = 0
        self._writing = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writing or self._writers_waiting > 0:
                self._cond.wait()
            self._reader_count += 1

    def release_read(self) -> None:
        with self._cond:
            self._reader_count -= 1
            if self._reader_count == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._reader_count > 0:
                    self._cond.wait()
                self._writing = True
            finally:
                self._writers_waiting -= 1

    def release_write(self) -> None:
        with self._cond:
            self._writing = False
            self._cond.notify_all()

    @contextmanager
    def read_lock(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
