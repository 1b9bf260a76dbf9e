"""
Unit tests for the reader/writer lock
"""

import unittest
import os
import sys
import threading
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from vfs.filesystem.locks import ReadWriteLock


class TestReadWriteLock(unittest.TestCase):

    def test_readers_share(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=5)

        def reader():
            with lock.read_lock():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)
        self.assertFalse(any(t.is_alive() for t in threads))

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []
        lock.acquire_write()

        def reader():
            with lock.read_lock():
                events.append('read')

        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.05)
        events.append('write done')
        lock.release_write()
        t.join(5)
        self.assertEqual(events, ['write done', 'read'])

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        events = []
        lock.acquire_read()

        def writer():
            with lock.write_lock():
                events.append('write')

        def reader():
            with lock.read_lock():
                events.append('read')

        w = threading.Thread(target=writer)
        w.start()
        time.sleep(0.05)
        r = threading.Thread(target=reader)
        r.start()
        time.sleep(0.05)
        self.assertEqual(events, [])
        lock.release_read()
        w.join(5)
        r.join(5)
        self.assertEqual(events, ['write', 'read'])

    def test_release_on_exception(self):
        lock = ReadWriteLock()
        with self.assertRaises(ValueError):
            with lock.write_lock():
                raise ValueError()
        with lock.read_lock():
            pass


if __name__ == '__main__':
    unittest.main()
