"""A fixed-size string hash table with sorted chained buckets."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter

_ULONG_MAX = 2**64 - 1
_HASH_SEED = 5381
_key_of = itemgetter(0)


class HashTable:
    """Maps string keys to string values using a fixed number of buckets.

    Each bucket keeps its entries sorted by key.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be at least 1")
        self.size = size
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(size)]

    def bucket_of(self, key: str) -> int:
        """Return the index of the bucket that holds ``key``."""
        hashval = _HASH_SEED
        for byte in key.encode("utf-8", "surrogateescape"):
            if hashval >= _ULONG_MAX:
                break
            signed = byte - 256 if byte > 127 else byte
            hashval = ((hashval << 8) + signed) & _ULONG_MAX
        return hashval % self.size

    def _locate(self, key: str) -> tuple[list[tuple[str, str]], int]:
        bucket = self._buckets[self.bucket_of(key)]
        return bucket, bisect_left(bucket, key, key=_key_of)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket, index = self._locate(key)
        if index < len(bucket) and bucket[index][0] == key:
            bucket[index] = (key, value)
        else:
            bucket.insert(index, (key, value))

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        bucket, index = self._locate(key)
        if index < len(bucket) and bucket[index][0] == key:
            return bucket[index][1]
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None