"""
Module: spans

Purpose:
    Provides the Span dataclass - one legal placement of a single damaged
    run inside a record.

    The span covers the run's own cells as a half-open interval
    [start, end). The cells at ``start - 1`` and ``end`` are its boundary
    cells; for a span returned by the span finder neither is DAMAGED.

Dependencies:
    - dataclasses (std)

Used By:
    - counter.spans: find_spans
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """
    Half-open interval of cell positions [start, end).

    Attributes:
        start: Index of the first damaged cell of the run (inclusive)
        end: Index one past the last damaged cell (exclusive)

    Invariants:
        - 0 <= start <= end

    Example:
        >>> span = Span(1, 4)
        >>> span.length
        3
        >>> span.boundaries
        (0, 4)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span on construction."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0: {self.start}")
        if self.end < self.start:
            raise ValueError(f"end must be >= start: {self.end} < {self.start}")

    @property
    def length(self) -> int:
        """Number of cells covered by the run."""
        return self.end - self.start

    @property
    def boundaries(self) -> tuple[int, int]:
        """Positions of the two cells that must stay non-damaged."""
        return (self.start - 1, self.end)
