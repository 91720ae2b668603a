"""Content-addressed duplicate file detection."""

from .entry import Entry, Number, Text, Value, format_value
from .hashing import bucket_hash, digest_file
from .scanner import (
    Classification,
    DuplicateScanner,
    FileStatus,
    Options,
    is_directory,
)
from .table import DEFAULT_CAPACITY, HashTable

__all__ = [
    "DEFAULT_CAPACITY",
    "Classification",
    "DuplicateScanner",
    "Entry",
    "FileStatus",
    "HashTable",
    "Number",
    "Options",
    "Text",
    "Value",
    "bucket_hash",
    "digest_file",
    "format_value",
    "is_directory",
]
