"""
Module: counter.expander

Purpose:
    Record expander ("unfold"): build the harder variant of a record by
    repeating it with an UNKNOWN separator between copies, and repeating
    its runs the same number of times. Performs no counting.

Key Functions:
    - expand(): (record, runs, factor) -> (expanded record, expanded runs)

Used By:
    - counter.engine: ArrangementCounter.count_record(unfold=True)
"""

from __future__ import annotations

import logging
from typing import Tuple

from spring_arrangements.core.models import Cell, Record, RunSequence

from .config import DEFAULT_UNFOLD_FACTOR

logger = logging.getLogger(__name__)


def expand(
    record: Record,
    runs: RunSequence,
    factor: int = DEFAULT_UNFOLD_FACTOR,
) -> Tuple[Record, RunSequence]:
    """
    Unfold a record and its runs ``factor`` times.

    Args:
        record: Unpadded record to repeat
        runs: Run lengths to repeat
        factor: Number of copies (>= 1); 1 returns equal values

    Returns:
        Tuple of (expanded record, expanded runs)

    Raises:
        ValueError: If factor < 1

    Example:
        >>> record, runs = expand(Record.parse(".#"), RunSequence((1,)), 3)
        >>> record.to_text(), runs.to_text()
        ('.#?.#?.#', '1,1,1')
    """
    if factor < 1:
        raise ValueError(f"factor must be positive: {factor}")
    expanded = Record.join([record] * factor, separator=Cell.UNKNOWN)
    logger.debug(f"Expanded record of {len(record)} cells x{factor} -> {len(expanded)} cells")
    return expanded, runs.repeated(factor)
