"""
Module: counter.engine

Purpose:
    Arrangement counter: the number of ways the UNKNOWN cells of a record
    can be resolved so that its damaged runs equal a run sequence.

    The count is a memoized divide-and-conquer over the *middle* run:

    1. If the runs need more cells than the record has, the count is 0.
    2. With no runs left, the count is 1 iff no cell is DAMAGED.
    3. Otherwise place the middle run at every span the span finder
       reports. The cells before the span (ending in the span's left
       boundary) must hold the head runs, the cells after it (starting
       at its right boundary) the tail runs. Sum head * tail over spans.

    Sub-records are index ranges into one CellBuffer per top-level call.
    Their first and last cells are always boundaries (the record's padding,
    or the boundary cell of a placed run), which are never DAMAGED and
    never covered by a run. Memo keys therefore use the cells strictly
    between the two ends.

Key Classes:
    - ArrangementCounter: Counter owning its config and cache

Key Functions:
    - count_arrangements(): One-call convenience wrapper

Dependencies:
    - counter.spans: CellBuffer
    - counter.cache: ArrangementCache, MemoKey
    - counter.expander: expand

Used By:
    - cli: spring-arrangements
    - scripts/benchmark_counter.py
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

from spring_arrangements.core.models import Cell, Record, RunSequence
from spring_arrangements.core.models.runs import split_middle

from .cache import ArrangementCache, MemoKey
from .config import CounterConfig
from .expander import expand
from .spans import CellBuffer

logger = logging.getLogger(__name__)


RecordLike = Union[Record, str]
RunsLike = Union[RunSequence, str, Sequence[int]]


def _as_record(record: RecordLike) -> Record:
    if isinstance(record, Record):
        return record
    return Record.parse(record)


def _as_runs(runs: RunsLike) -> RunSequence:
    if isinstance(runs, RunSequence):
        return runs
    if isinstance(runs, str):
        return RunSequence.parse(runs)
    return RunSequence(tuple(runs))


class ArrangementCounter:
    """
    Memoized arrangement counter.

    The cache lives as long as the counter (or longer, if the caller
    passes one in). Clearing it never changes results. Counters on
    different threads may share a cache built with ``thread_safe=True``.

    Attributes:
        config: Counter configuration
        cache: Memo cache of sub-problem counts

    Example:
        >>> counter = ArrangementCounter()
        >>> counter.count_record(Record.parse("?###????????"), RunSequence((3, 2, 1)))
        10
        >>> counter.count_record(Record.parse("?###????????"), RunSequence((3, 2, 1)), unfold=True)
        506250
    """

    def __init__(
        self,
        config: Optional[CounterConfig] = None,
        cache: Optional[ArrangementCache] = None,
    ):
        self.config = config or CounterConfig()
        if cache is None:
            cache = ArrangementCache(
                max_entries=self.config.max_cache_entries,
                thread_safe=self.config.thread_safe_cache,
            )
        self.cache = cache

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    def count(self, record: Record, runs: RunSequence) -> int:
        """
        Count arrangements of an already padded record.

        The first and last cells only ever act as boundaries, so they
        must not be DAMAGED; use ``Record.padded()`` (or ``count_record``).

        Args:
            record: Padded record
            runs: Required run lengths, in order

        Returns:
            Number of valid resolutions (>= 0)

        Raises:
            ValueError: If the record starts or ends with a DAMAGED cell
        """
        cells = record.cells
        if cells and (cells[0] is Cell.DAMAGED or cells[-1] is Cell.DAMAGED):
            raise ValueError(
                f"Record must start and end with a non-damaged cell (pad it first): {record}"
            )
        buffer = CellBuffer(record)
        total = self._count(buffer, 0, len(buffer), runs.lengths)
        logger.debug(
            f"Counted {total} arrangements for {len(record)} cells, "
            f"{len(runs)} runs ({self.cache.stats})"
        )
        return total

    def count_record(
        self,
        record: Record,
        runs: RunSequence,
        *,
        unfold: bool = False,
    ) -> int:
        """
        Count arrangements of a raw (unpadded) record.

        Args:
            record: Record as parsed from input
            runs: Required run lengths
            unfold: Expand by ``config.unfold_factor`` before counting

        Returns:
            Number of valid resolutions (>= 0)
        """
        if unfold:
            record, runs = expand(record, runs, self.config.unfold_factor)
        return self.count(record.padded(), runs)

    # ─────────────────────────────────────────────────────────────────────────
    # Recursion
    # ─────────────────────────────────────────────────────────────────────────

    def _count(self, buffer: CellBuffer, lo: int, hi: int, runs: Tuple[int, ...]) -> int:
        """Count arrangements of cells [lo, hi) of ``buffer``."""
        assert 0 <= lo <= hi <= len(buffer), f"bad sub-record [{lo}, {hi})"

        if sum(runs) > hi - lo:
            return 0
        if not runs:
            return 1 if buffer.damaged_between(lo, hi) == 0 else 0

        key = MemoKey(buffer.view(lo + 1, hi - 1), runs)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        head_runs, run_length, tail_runs = split_middle(runs)
        total = 0
        for start in buffer.span_starts(lo, hi, run_length).tolist():
            # Head ends at the left boundary (start - 1), tail begins at the
            # right boundary (start + run_length).
            head = self._count(buffer, lo, start, head_runs)
            if head == 0 and self.config.short_circuit:
                continue
            total += head * self._count(buffer, start + run_length, hi, tail_runs)

        return self.cache.put(key, total)


def count_arrangements(
    record: RecordLike,
    runs: RunsLike,
    *,
    unfold: bool = False,
    counter: Optional[ArrangementCounter] = None,
) -> int:
    """
    Count arrangements of one raw record.

    Args:
        record: Record or its text (e.g. "???.###")
        runs: RunSequence, "1,1,3" or a sequence of ints
        unfold: Expand five-fold (or the counter's factor) first
        counter: Counter to use; a fresh one (with its own cache) if None

    Returns:
        Number of valid resolutions (>= 0)

    Raises:
        InvalidRecordCharacter: If record text has a non-cell character
        InvalidRunLength: If a run length is not a positive integer

    Example:
        >>> count_arrangements(".??..??...?##.", "1,1,3")
        4
        >>> count_arrangements(".??..??...?##.", [1, 1, 3], unfold=True)
        16384
    """
    counter = counter or ArrangementCounter()
    return counter.count_record(_as_record(record), _as_runs(runs), unfold=unfold)
