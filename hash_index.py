"""
hash_index.py
=============
Clue → suspect lookup table.

A fixed number of buckets, each holding a singly linked chain of entries.
The bucket for a clue is the sum of its character ordinals modulo the
bucket count. The table is filled once at startup and only read afterwards:
there is no removal and no resizing.

Time complexity:
    insert: O(1), the new entry becomes the head of its chain
    lookup: O(chain length)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from config import INDEX_CONFIG

logger = logging.getLogger("detective_quest.hash_index")


def hash_clue(clue: str, bucket_count: int) -> int:
    """
    Map a clue to its bucket.

    Args:
        clue:         The key string.
        bucket_count: Number of buckets in the table.

    Returns:
        sum(ord(ch) for ch in clue) % bucket_count

    Example:
        >>> hash_clue("Rope", 10)
        6
    """
    return sum(ord(ch) for ch in clue) % bucket_count


@dataclass(frozen=True)
class HashEntry:
    """Chain link associating one clue with one suspect."""
    clue:    str
    suspect: str
    next:    Optional[HashEntry] = None


class HashIndex:
    """
    Hash table with separate chaining, keyed by clue.

    Inserting a clue that is already present does not replace the old entry:
    the new one is prepended and shadows it, because lookups return the first
    match in the chain.
    """

    def __init__(self, bucket_count: int = INDEX_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[HashEntry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
        bucket_count: int = INDEX_CONFIG.bucket_count,
    ) -> HashIndex:
        """Build an index from a {clue: suspect} mapping or (clue, suspect) pairs."""
        index = cls(bucket_count)
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for clue, suspect in items:
            index.insert(clue, suspect)
        logger.debug(
            "HashIndex built - entries=%d, bucket_sizes=%s",
            len(index),
            index.bucket_sizes(),
        )
        return index

    def insert(self, clue: str, suspect: str) -> None:
        """Prepend a clue → suspect entry to its bucket chain."""
        bucket = hash_clue(clue, self.bucket_count)
        self._buckets[bucket] = HashEntry(clue, suspect, self._buckets[bucket])
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect for `clue`, or None if it was never inserted."""
        node = self._buckets[hash_clue(clue, self.bucket_count)]
        while node is not None:
            if node.clue == clue:
                return node.suspect
            node = node.next
        return None

    def bucket_sizes(self) -> List[int]:
        """Chain length of every bucket, in bucket order."""
        sizes = []
        for head in self._buckets:
            length = 0
            node = head
            while node is not None:
                length += 1
                node = node.next
            sizes.append(length)
        return sizes

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HashIndex(buckets={self.bucket_count}, entries={self._size})"
