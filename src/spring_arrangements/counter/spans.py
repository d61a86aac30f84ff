"""
Module: counter.spans

Purpose:
    Span finder: locate every legal placement of a single damaged run
    inside a record.

    A record is encoded once into a CellBuffer. Sub-records are addressed
    as (lo, hi) index ranges into that buffer instead of being copied, and
    two prefix sums make every window check O(1):

    - ``fits``: count of non-operational cells (a run may cover them)
    - ``damaged``: count of damaged cells (they must all be covered)

Key Classes:
    - CellBuffer: Immutable encoded record plus prefix sums

Key Functions:
    - find_spans(): All spans of one run length, by increasing start

Dependencies:
    - numpy: Vectorized window checks over the encoded record

Used By:
    - counter.engine: ArrangementCounter (via CellBuffer.span_starts)
"""

from __future__ import annotations

from typing import List

import numpy as np

from spring_arrangements.core.models import Cell, Record, Span

_OPERATIONAL = Cell.OPERATIONAL.code
_DAMAGED = Cell.DAMAGED.code


def _prefix_sum(mask: np.ndarray) -> np.ndarray:
    """Prefix sum with a leading zero: out[i] = mask[:i].sum()."""
    out = np.zeros(len(mask) + 1, dtype=np.int64)
    np.cumsum(mask, out=out[1:])
    return out


class CellBuffer:
    """
    Encoded record shared by every sub-record of one top-level count.

    Attributes:
        data: ASCII bytes of the record (one byte per cell)
        codes: uint8 numpy view over ``data``

    Example:
        >>> buffer = CellBuffer(Record.parse(".???.###."))
        >>> buffer.span_starts(0, len(buffer), 3).tolist()
        [1, 5]
    """

    __slots__ = ("data", "codes", "_fits", "_damaged")

    def __init__(self, record: Record):
        self.data = record.encode()
        self.codes = np.frombuffer(self.data, dtype=np.uint8)
        self._fits = _prefix_sum(self.codes != _OPERATIONAL)
        self._damaged = _prefix_sum(self.codes == _DAMAGED)

    def __len__(self) -> int:
        return len(self.data)

    def view(self, lo: int, hi: int) -> memoryview:
        """Zero-copy view of cells [lo, hi)."""
        return memoryview(self.data)[lo:hi]

    def damaged_between(self, lo: int, hi: int) -> int:
        """Number of DAMAGED cells in [lo, hi)."""
        return int(self._damaged[hi] - self._damaged[lo])

    def span_starts(self, lo: int, hi: int, run_length: int) -> np.ndarray:
        """
        Start positions of every legal placement of a run inside [lo, hi).

        Each candidate window is ``run_length + 2`` cells: a boundary cell,
        the run, and another boundary cell. Boundaries must not be DAMAGED
        and the run cells must all be DAMAGED or UNKNOWN.

        Args:
            lo: First cell of the sub-record (inclusive)
            hi: End of the sub-record (exclusive)
            run_length: Length of the run to place (>= 1)

        Returns:
            Absolute start positions in increasing order.
        """
        if run_length + 2 > hi - lo:
            return np.empty(0, dtype=np.int64)
        starts = np.arange(lo + 1, hi - run_length, dtype=np.int64)
        ends = starts + run_length
        fits = (self._fits[ends] - self._fits[starts]) == run_length
        clear_before = self.codes[starts - 1] != _DAMAGED
        clear_after = self.codes[ends] != _DAMAGED
        return starts[fits & clear_before & clear_after]


def find_spans(record: Record, run_length: int) -> List[Span]:
    """
    Find every span where a run of ``run_length`` could be placed.

    Args:
        record: Record to search. The first and last cells can only ever be
            boundaries, so callers normally pass a padded record.
        run_length: Length of the run (>= 1)

    Returns:
        Spans ordered by increasing start; empty if
        ``run_length + 2 > len(record)``.

    Raises:
        ValueError: If run_length < 1

    Example:
        >>> find_spans(Record.parse(".?#?."), 2)
        [Span(start=1, end=3), Span(start=2, end=4)]
    """
    if run_length < 1:
        raise ValueError(f"run_length must be positive: {run_length}")
    buffer = CellBuffer(record)
    return [
        Span(start, start + run_length)
        for start in buffer.span_starts(0, len(buffer), run_length).tolist()
    ]
