"""Fixed-capacity hash table with separate chaining.

Each bucket is a list of ``Entry`` objects, newest first. The table never
resizes: a key's bucket is ``bucket_hash(key) % capacity`` for as long as
the key is stored, so a small capacity only makes chains longer.
"""

import logging

from .entry import Entry, Value
from .hashing import bucket_hash
from .output import write_text

DEFAULT_CAPACITY = 1 << 10


class HashTable:
    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity or DEFAULT_CAPACITY
        self._buckets: list[list[Entry]] | None = [[] for _ in range(self._capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.search(key) is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._buckets is not None:
            self.destroy()

    def _chain(self, key: str) -> list[Entry]:
        if self._buckets is None:
            raise RuntimeError("HashTable used after destroy()")
        return self._buckets[bucket_hash(key) % self._capacity]

    def insert(self, key: str, value: Value) -> None:
        """Insert ``key`` or replace its value if already present."""
        chain = self._chain(key)
        for entry in chain:
            if entry.key == key:
                entry.update(value)
                return
        chain.insert(0, Entry(key, value))
        self._size += 1

    def search(self, key: str) -> Value | None:
        """Return the value stored under ``key``, or None."""
        for entry in self._chain(key):
            if entry.key == key:
                return entry.value
        return None

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        chain = self._chain(key)
        for index, entry in enumerate(chain):
            if entry.key == key:
                del chain[index]
                self._size -= 1
                return True
        return False

    def format(self, stream) -> None:
        """Write one ``key<TAB>value`` line per entry to ``stream``."""
        if self._buckets is None:
            raise RuntimeError("HashTable used after destroy()")
        for chain in self._buckets:
            for entry in chain:
                write_text(stream, entry.format())

    def destroy(self) -> None:
        if self._buckets is None:
            raise RuntimeError("HashTable already destroyed")
        logging.debug(f"[DEBUG] Releasing table: {self._size} entries in {self._capacity} buckets")
        for chain in self._buckets:
            chain.clear()
        self._buckets = None
        self._size = 0
