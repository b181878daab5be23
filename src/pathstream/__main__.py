"""Command-line entry point for pathstream.

Usage:
    python -m pathstream normalize PATH [PATH ...]
    python -m pathstream join A B
    python -m pathstream split PATH
    python -m pathstream ls-files DIR
    python -m pathstream cat FILE [--max-size N]
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pathstream.config import settings
from pathstream.infrastructure.storage import (
    basename,
    dirname,
    get_all_files_under,
    is_directory,
    join_path,
    normalize_path,
    read_file,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathstream",
        description="Path normalization, joining, file listing and bounded reads",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    normalize = sub.add_parser("normalize", help="Normalize one or more paths")
    normalize.add_argument("paths", nargs="+")

    join = sub.add_parser("join", help="Join two paths")
    join.add_argument("path1")
    join.add_argument("path2")

    split = sub.add_parser("split", help="Print the directory and final element of a path")
    split.add_argument("path")

    ls_files = sub.add_parser("ls-files", help="List every file under a directory")
    ls_files.add_argument("directory")

    cat = sub.add_parser("cat", help="Write a file's bytes to stdout")
    cat.add_argument("file")
    cat.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="Read at most this many bytes (default: PATHSTREAM_MAX_READ_SIZE, 0 = all)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings.setup_logging()

    if args.command == "normalize":
        for path in args.paths:
            print(normalize_path(path))
        return 0

    if args.command == "join":
        print(join_path(args.path1, args.path2))
        return 0

    if args.command == "split":
        print(dirname(args.path))
        print(basename(args.path))
        return 0

    if args.command == "ls-files":
        if not is_directory(args.directory):
            print(f"not a directory: {args.directory}", file=sys.stderr)
            return 1
        files: List[str] = []
        get_all_files_under(args.directory, files)
        for path in files:
            print(path)
        return 0

    if args.command == "cat":
        max_size = settings.max_read_size if args.max_size is None else args.max_size
        content = bytearray()
        if not read_file(args.file, content, max_size):
            print(f"cannot read: {args.file}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(bytes(content))
        sys.stdout.flush()
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
