#!/usr/bin/env python3
"""
find_duplicates.py

Walks the given files and directories, hashes every file's contents and
reports files whose contents were already seen earlier in the scan.
"""
import argparse
import logging
import os
import sys

from duplicates import DuplicateScanner, HashTable, Options

# ---------------------- Constants ----------------------
TABLE_CAPACITY = int(os.environ.get("DUPLICATES_TABLE_CAPACITY", "0"))


# ---------------------- CLI & Main ----------------------
def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Find files with identical contents"
    )
    parser.add_argument('paths', nargs='*', help='Files or directories to scan')
    parser.add_argument('-c', '--count', action='store_true',
                        help='Only display total number of duplicates')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not write anything (exit with 0 if duplicate found)')
    parser.add_argument('--capacity', type=int, default=TABLE_CAPACITY,
                        help='Number of checksum table buckets (0 uses the default)')
    parser.add_argument('--dump_table', help="Write the checksum table to this file ('-' for stdout)")
    parser.add_argument('--enable_debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    if args.capacity < 0:
        parser.error(f"--capacity must not be negative: {args.capacity}")
    return args


def configure_logging(enable_debug=False):
    level = logging.DEBUG if enable_debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def dump_table(table, target):
    if target == '-':
        table.format(sys.stdout)
        return
    with open(target, 'w', encoding='utf-8', errors='surrogateescape') as f:
        table.format(f)
    logging.info(f"[i] Wrote {table.size} checksum(s) to {target}")


def main(argv=None):
    args = parse_arguments(argv)
    configure_logging(args.enable_debug)

    if not args.paths:
        return 0

    options = Options(count_only=args.count, quiet=args.quiet)
    with HashTable(args.capacity) as table:
        scanner = DuplicateScanner(table, options)
        count = scanner.scan(args.paths)
        if args.dump_table:
            dump_table(table, args.dump_table)

    if args.count:
        print(count)
    if args.quiet and count == 0:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
