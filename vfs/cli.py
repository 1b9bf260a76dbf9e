#!/usr/bin/env python
"""
VFS Command Line Interface

Explore a filesystem through the VFS interface: the host filesystem by
default, or an in-memory tree described by a YAML layout file.
"""

import sys
import stat
import argparse
import logging
from datetime import datetime
from typing import List, Optional

import yaml
import tabulate
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .config import FilesystemConfig, load_config
from .exceptions import FileSystemError
from .filesystem import OSFS, PrefixFS, RamFS, SkipDir, populate, read_only, walk
from .filesystem.base import FileInfo, Filesystem

logger = logging.getLogger('vfs.cli')


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='vfs',
        description='VFS - explore a filesystem through the virtual filesystem interface',
    )

    parser.add_argument(
        '--layout',
        help='Load an in-memory filesystem from a YAML layout instead of using the host filesystem',
        type=str
    )

    parser.add_argument(
        '--prefix',
        help='Prefix every path with this directory',
        type=str
    )

    parser.add_argument(
        '--read-only',
        help='Wrap the filesystem in a read-only view',
        action='store_true'
    )

    parser.add_argument(
        '--config',
        help='Path to a YAML configuration file',
        type=str
    )

    parser.add_argument(
        '-d', '--debug',
        help='Enable debug logging',
        action='store_true'
    )

    parser.add_argument(
        '-v', '--version',
        help='Show version and exit',
        action='store_true'
    )

    commands = parser.add_subparsers(dest='command')

    ls_parser = commands.add_parser('ls', help='List a directory')
    ls_parser.add_argument('path', nargs='?', default='.')

    tree_parser = commands.add_parser('tree', help='Show a directory tree')
    tree_parser.add_argument('path', nargs='?', default='.')
    tree_parser.add_argument('--max-depth', type=int, default=None,
                             help='Do not descend below this depth')

    stat_parser = commands.add_parser('stat', help='Show file metadata')
    stat_parser.add_argument('path')

    cat_parser = commands.add_parser('cat', help='Print file contents')
    cat_parser.add_argument('path')

    return parser.parse_args(args)


def build_filesystem(parsed_args: argparse.Namespace, config: FilesystemConfig) -> Filesystem:
    """Create the filesystem selected by the command line"""
    if parsed_args.layout:
        with open(parsed_args.layout) as f:
            layout = yaml.safe_load(f) or {}
        if not isinstance(layout, dict):
            raise ValueError(f"Layout file {parsed_args.layout} must contain a mapping")
        fs: Filesystem = RamFS(config)
        count = populate(fs, layout)
        logger.debug(f"Loaded {count} entries from {parsed_args.layout}")
    else:
        fs = OSFS()

    if parsed_args.prefix:
        fs = PrefixFS(fs, parsed_args.prefix)
    if parsed_args.read_only:
        fs = read_only(fs)
    return fs


def format_mode(info: FileInfo) -> str:
    return stat.filemode(info.mode)


def format_time(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime('%Y-%m-%d %H:%M')


def list_directory(fs: Filesystem, path: str, console: Console) -> None:
    rows = [
        [format_mode(info), info.size, format_time(info.mod_time),
         info.name + ('/' if info.is_dir else '')]
        for info in fs.read_dir(path)
    ]
    console.print(tabulate.tabulate(rows, headers=['Mode', 'Size', 'Modified', 'Name'],
                                    tablefmt='plain'), markup=False, highlight=False)


def show_tree(fs: Filesystem, root: str, console: Console,
              max_depth: Optional[int] = None) -> None:
    sep = fs.path_separator
    root = root.rstrip(sep) or sep
    base_depth = root.rstrip(sep).count(sep)
    branches = {}

    def visit(path: str, info: Optional[FileInfo], error: Optional[FileSystemError]) -> None:
        if error is not None and info is None:
            raise error

        parent_path = path.rstrip(sep).rsplit(sep, 1)[0] or sep
        label = escape(path if not branches else path.rstrip(sep).rsplit(sep, 1)[-1])
        if info.is_dir:
            label = f"[bold blue]{label}[/bold blue]"
        if error is not None:
            label += f" [red]({escape(error.message)})[/red]"

        parent = branches.get(parent_path)
        node = Tree(label) if parent is None else parent.add(label)
        branches[path] = node

        depth = path.rstrip(sep).count(sep) - base_depth
        if info.is_dir and max_depth is not None and depth >= max_depth:
            raise SkipDir()

    walk(fs, root, visit)
    console.print(branches[root])


def stat_file(fs: Filesystem, path: str, console: Console) -> None:
    info = fs.stat(path)
    rows = [
        ['Name', info.name],
        ['Type', 'directory' if info.is_dir else 'file'],
        ['Size', info.size],
        ['Mode', f"{format_mode(info)} ({oct(info.permissions)})"],
        ['Modified', format_time(info.mod_time)],
    ]
    console.print(tabulate.tabulate(rows, tablefmt='plain'), markup=False, highlight=False)


def cat_file(fs: Filesystem, path: str) -> None:
    with fs.open_file(path) as f:
        while True:
            chunk = f.read(64 * 1024)
            if not chunk:
                break
            sys.stdout.buffer.write(chunk)
    sys.stdout.flush()


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the VFS CLI"""
    parsed_args = parse_args(args)

    if parsed_args.version:
        from vfs import __version__
        print(f"VFS version {__version__}")
        return 0

    config = load_config(parsed_args.config)
    logging.basicConfig(
        level=logging.DEBUG if parsed_args.debug else config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not parsed_args.command:
        print("No command given, see 'vfs --help'", file=sys.stderr)
        return 2

    console = Console()
    try:
        fs = build_filesystem(parsed_args, config)
        if parsed_args.command == 'ls':
            list_directory(fs, parsed_args.path, console)
        elif parsed_args.command == 'tree':
            show_tree(fs, parsed_args.path, console, parsed_args.max_depth)
        elif parsed_args.command == 'stat':
            stat_file(fs, parsed_args.path, console)
        elif parsed_args.command == 'cat':
            cat_file(fs, parsed_args.path)
    except FileSystemError as e:
        logger.debug(f"{parsed_args.command} failed: {e!r}")
        print(f"vfs: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
