"""
Module: counter.cache

Purpose:
    Explicit memoization cache for the arrangement counter. Maps a
    (record content, runs) sub-problem to its arrangement count so that
    overlapping sub-problems are only counted once.

Key Classes:
    - MemoKey: Structural (content-compared) key for one sub-problem
    - ArrangementCache: Optionally bounded, optionally locked count cache

Dependencies:
    - threading (std): Lock for shared caches
    - collections.OrderedDict (std): LRU ordering

Used By:
    - counter.engine: ArrangementCounter
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)


CellBytes = Union[bytes, memoryview]


@dataclass(frozen=True, eq=False)
class MemoKey:
    """
    Cache key for one counting sub-problem.

    ``cells`` may be a memoryview into the counter's backing buffer; two
    keys are equal when their cell *content* and runs are equal, whatever
    buffer they point into. ``hash(memoryview)`` equals the hash of its
    bytes, so bytes and memoryview keys are interchangeable.

    Attributes:
        cells: Encoded cells of the sub-record (one ASCII byte per cell)
        runs: Run lengths still to be placed

    Example:
        >>> MemoKey(b"??", (1,)) == MemoKey(memoryview(b".??.")[1:3], (1,))
        True
    """

    cells: CellBytes
    runs: Tuple[int, ...]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoKey):
            return NotImplemented
        return self.runs == other.runs and self.cells == other.cells

    def __hash__(self) -> int:
        return hash((self.cells, self.runs))

    def __repr__(self) -> str:
        return f"MemoKey({bytes(self.cells).decode('ascii')!r}, {self.runs})"


class ArrangementCache:
    """
    Cache of arrangement counts keyed by MemoKey.

    Entries never go stale: counting is pure, so clearing the cache only
    costs time. With ``thread_safe=True`` every access holds a lock and
    ``put`` is insert-if-absent, so one cache can back several counters.

    Attributes:
        max_entries: LRU bound (None = unbounded)

    Example:
        >>> cache = ArrangementCache()
        >>> cache.put(MemoKey(b"?", (1,)), 1)
        1
        >>> cache.get(MemoKey(b"?", (1,)))
        1
    """

    def __init__(self, max_entries: Optional[int] = None, thread_safe: bool = False):
        """
        Initialize an empty cache.

        Args:
            max_entries: Maximum entries kept; least recently used entries
                are evicted past this. None keeps everything.
            thread_safe: Guard all access with a lock.
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive or None: {max_entries}")
        self._cache: OrderedDict[MemoKey, int] = OrderedDict()
        self._max_entries = max_entries
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self._hits = 0
        self._misses = 0

    def get(self, key: MemoKey) -> Optional[int]:
        """
        Look up a cached count.

        Args:
            key: Sub-problem key.

        Returns:
            The cached count, or None on a miss.
        """
        with self._lock:
            count = self._cache.get(key)
            if count is None:
                self._misses += 1
                return None
            self._hits += 1
            if self._max_entries is not None:
                self._cache.move_to_end(key)
            return count

    def put(self, key: MemoKey, count: int) -> int:
        """
        Store a count unless the key is already present.

        Args:
            key: Sub-problem key.
            count: Non-negative arrangement count.

        Returns:
            The count now stored for ``key`` (the existing one if another
            caller got there first).
        """
        if count < 0:
            raise ValueError(f"Arrangement counts cannot be negative: {count}")
        with self._lock:
            existing = self._cache.get(key)
            if existing is not None:
                return existing
            if self._max_entries is not None and len(self._cache) >= self._max_entries:
                oldest, _ = self._cache.popitem(last=False)
                logger.debug(f"Cache EVICT: {oldest!r}")
            self._cache[key] = count
            return count

    def clear(self) -> None:
        """Clear the cache and its statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Cache cleared")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def size(self) -> int:
        """Number of sub-problems currently cached."""
        return len(self._cache)

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    @property
    def stats(self) -> str:
        """Return cache statistics as string."""
        bound = "unbounded" if self._max_entries is None else str(self._max_entries)
        return f"Cache: {self.size} entries ({bound}), {self._hits} hits, {self._misses} misses"
