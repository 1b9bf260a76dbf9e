"""
Unit tests for filesystem helpers
"""

import unittest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from vfs.exceptions import FileNotFound, InvalidArgument, NotADirectory
from vfs.filesystem.ioutil import mkdir_all, populate, read_file, write_file
from vfs.filesystem.ramfs import RamFS


class TestReadWriteFile(unittest.TestCase):

    def setUp(self):
        self.fs = RamFS()

    def test_round_trip(self):
        write_file(self.fs, '/f', b'hello')
        self.assertEqual(read_file(self.fs, '/f'), b'hello')

    def test_write_truncates(self):
        write_file(self.fs, '/f', b'a much longer first version')
        write_file(self.fs, '/f', b'short')
        self.assertEqual(read_file(self.fs, '/f'), b'short')

    def test_write_uses_perm(self):
        write_file(self.fs, '/f', b'', perm=0o600)
        self.assertEqual(self.fs.stat('/f').permissions, 0o600)

    def test_read_large_file(self):
        data = os.urandom(200 * 1024)
        write_file(self.fs, '/big', data)
        self.assertEqual(read_file(self.fs, '/big'), data)

    def test_read_missing(self):
        with self.assertRaises(FileNotFound):
            read_file(self.fs, '/missing')


class TestMkdirAll(unittest.TestCase):

    def setUp(self):
        self.fs = RamFS()

    def test_creates_parents(self):
        mkdir_all(self.fs, '/usr/local/lib')
        self.assertTrue(self.fs.stat('/usr/local/lib').is_dir)

    def test_existing_directories_are_fine(self):
        self.fs.mkdir('/usr')
        mkdir_all(self.fs, '/usr/local/')
        mkdir_all(self.fs, '/usr/local')
        self.assertEqual([i.name for i in self.fs.read_dir('/usr')], ['local'])

    def test_relative_path(self):
        self.fs.mkdir('/home')
        self.fs.chdir('/home')
        mkdir_all(self.fs, 'user/docs')
        self.assertTrue(self.fs.stat('/home/user/docs').is_dir)

    def test_file_in_the_way(self):
        write_file(self.fs, '/usr', b'')
        with self.assertRaises(NotADirectory):
            mkdir_all(self.fs, '/usr/local')


class TestPopulate(unittest.TestCase):

    def test_builds_tree(self):
        fs = RamFS()
        count = populate(fs, {
            'readme.txt': 'Hello, world!',
            'docs': {
                'guide.txt': b'A guide',
                'empty': None,
                'api': {},
            },
        })
        self.assertEqual(count, 5)
        self.assertEqual(read_file(fs, '/readme.txt'), b'Hello, world!')
        self.assertEqual(read_file(fs, '/docs/guide.txt'), b'A guide')
        self.assertEqual(fs.stat('/docs/empty').size, 0)
        self.assertEqual([i.name for i in fs.read_dir('/docs')], ['api', 'empty', 'guide.txt'])

    def test_under_subdirectory(self):
        fs = RamFS()
        fs.mkdir('/srv')
        populate(fs, {'index.html': '<html/>'}, root='/srv')
        self.assertEqual(read_file(fs, '/srv/index.html'), b'<html/>')

    def test_unsupported_value(self):
        with self.assertRaises(InvalidArgument):
            populate(RamFS(), {'number': 42})


if __name__ == '__main__':
    unittest.main()
