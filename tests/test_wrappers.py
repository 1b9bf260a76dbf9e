"""
Unit tests for filesystem decorators and the dummy filesystem
"""

import unittest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from vfs.exceptions import ErrorKind, FileIOError, FileNotFound, ReadOnlyError
from vfs.filesystem.dummy import DummyFile, DummyFS
from vfs.filesystem.ioutil import read_file, write_file
from vfs.filesystem.prefixfs import PrefixFS
from vfs.filesystem.ramfs import RamFS
from vfs.filesystem.readonly import ReadOnlyFS, read_only
from vfs.filesystem.wrappers import FilesystemWrapper, ReadOnlyFile


class TestReadOnlyFS(unittest.TestCase):
    """Test the read-only view"""

    def setUp(self):
        self.base = RamFS()
        self.base.mkdir('/dir')
        write_file(self.base, '/dir/file', b'content')
        self.fs = read_only(self.base)

    def test_helper_returns_wrapper(self):
        self.assertIsInstance(self.fs, ReadOnlyFS)
        self.assertIs(self.fs.delegate, self.base)

    def test_reads_pass_through(self):
        self.assertEqual(read_file(self.fs, '/dir/file'), b'content')
        self.assertEqual([i.name for i in self.fs.read_dir('/dir')], ['file'])
        self.assertEqual(self.fs.stat('/dir/file').size, 7)
        self.assertTrue(self.fs.lstat('/dir').is_dir)

    def test_mutations_rejected(self):
        calls = [
            lambda: self.fs.create('/new'),
            lambda: self.fs.remove('/dir/file'),
            lambda: self.fs.rename('/dir/file', '/moved'),
            lambda: self.fs.mkdir('/newdir'),
        ]
        for call in calls:
            with self.assertLogs('vfs.filesystem.readonly', level='WARNING'):
                with self.assertRaises(ReadOnlyError) as ctx:
                    call()
            self.assertIs(ctx.exception.kind, ErrorKind.READ_ONLY)
        self.assertEqual([i.name for i in self.base.read_dir('/')], ['dir'])
        self.assertEqual(read_file(self.base, '/dir/file'), b'content')

    def test_write_flags_rejected(self):
        for flags in (os.O_WRONLY, os.O_RDWR | os.O_CREAT, os.O_RDWR | os.O_APPEND,
                      os.O_RDWR | os.O_TRUNC):
            with self.assertLogs('vfs.filesystem.readonly', level='WARNING'):
                with self.assertRaises(ReadOnlyError):
                    self.fs.open_file('/dir/file', flags)
        self.assertEqual(self.base.stat('/dir/file').size, 7)

    def test_read_write_open_returns_read_only_file(self):
        with self.fs.open_file('/dir/file', os.O_RDWR) as f:
            self.assertIsInstance(f, ReadOnlyFile)
            with self.assertRaises(ReadOnlyError):
                f.write(b'x')
            self.assertEqual(f.read(), b'content')

    def test_delegate_errors_propagate(self):
        with self.assertRaises(FileNotFound):
            self.fs.open_file('/missing', os.O_RDONLY)


class TestPrefixFS(unittest.TestCase):
    """Test the prefixing wrapper"""

    def setUp(self):
        self.base = RamFS()
        self.base.mkdir('/jail')
        self.fs = PrefixFS(self.base, '/jail')

    def test_operations_land_under_prefix(self):
        self.fs.mkdir('/docs')
        write_file(self.fs, '/docs/readme', b'hello')
        self.assertTrue(self.base.stat('/jail/docs').is_dir)
        self.assertEqual(read_file(self.base, '/jail/docs/readme'), b'hello')
        self.assertEqual(read_file(self.fs, '/docs/readme'), b'hello')
        self.assertEqual([i.name for i in self.fs.read_dir('/')], ['docs'])

    def test_create_rename_remove(self):
        self.fs.create('/a').close()
        self.fs.rename('/a', '/b')
        self.assertEqual([i.name for i in self.base.read_dir('/jail')], ['b'])
        self.assertEqual(self.fs.lstat('/b').name, 'b')
        self.fs.remove('/b')
        self.assertEqual(self.base.read_dir('/jail'), [])

    def test_handle_name_includes_prefix(self):
        with self.fs.create('/f') as f:
            self.assertEqual(f.name, '/jail/f')

    def test_missing_entry(self):
        with self.assertRaises(FileNotFound):
            self.fs.stat('/missing')

    def test_path_separator_from_delegate(self):
        self.assertEqual(self.fs.path_separator, self.base.path_separator)


class TestFilesystemWrapper(unittest.TestCase):
    """Test that overriding one operation leaves the rest forwarded"""

    def test_override_single_operation(self):
        class CountingFS(FilesystemWrapper):
            def __init__(self, delegate):
                super().__init__(delegate)
                self.mkdirs = 0

            def mkdir(self, name, mode=None):
                self.mkdirs += 1
                super().mkdir(name, mode)

        fs = CountingFS(RamFS())
        fs.mkdir('/a')
        fs.create('/a/f').close()
        self.assertEqual(fs.mkdirs, 1)
        self.assertEqual([i.name for i in fs.read_dir('/a')], ['f'])


class TestDummy(unittest.TestCase):
    """Test the always-failing filesystem and file"""

    def setUp(self):
        self.error = FileIOError('dummy', '', "not implemented")

    def test_dummy_fs_raises_configured_error(self):
        fs = DummyFS(self.error)
        calls = [
            lambda: fs.create('/f'),
            lambda: fs.open_file('/f', os.O_RDONLY),
            lambda: fs.remove('/f'),
            lambda: fs.rename('/f', '/g'),
            lambda: fs.mkdir('/d'),
            lambda: fs.stat('/f'),
            lambda: fs.lstat('/f'),
            lambda: fs.read_dir('/'),
        ]
        for call in calls:
            with self.assertRaises(FileIOError) as ctx:
                call()
            self.assertIs(ctx.exception, self.error)

    def test_dummy_file_raises_configured_error(self):
        f = DummyFile(self.error)
        self.assertEqual(f.name, 'dummy')
        calls = [
            lambda: f.read(1),
            lambda: f.readinto(bytearray(1)),
            lambda: f.write(b'x'),
            lambda: f.seek(0),
            lambda: f.tell(),
            f.close,
        ]
        for call in calls:
            with self.assertRaises(FileIOError):
                call()

    def test_dummy_fs_open_can_return_dummy_file(self):
        error = self.error

        class FileDummyFS(DummyFS):
            def open_file(self, name, flags=os.O_RDONLY, mode=None):
                return DummyFile(error)

        f = FileDummyFS(error).open_file('/f')
        with self.assertRaises(FileIOError):
            f.read()


if __name__ == '__main__':
    unittest.main()
