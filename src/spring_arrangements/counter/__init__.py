"""
Module: counter

Purpose:
    Counting engine for spring records. Counts every resolution of a
    record's UNKNOWN cells whose damaged runs match a run sequence.

Key Functions:
    - count_arrangements(): Main entry point for one record
    - find_spans(): Legal placements of a single run
    - expand(): Five-fold unfold of a record and its runs

Key Classes:
    - ArrangementCounter: Memoized counter
    - ArrangementCache: Explicit memo cache
    - CounterConfig: Counter configuration

Dependencies:
    - spring_arrangements.core.models: Record, RunSequence, Span
    - numpy: Span finder window checks

Used By:
    - spring_arrangements.cli
"""

from .cache import ArrangementCache, MemoKey
from .config import CounterConfig, DEFAULT_UNFOLD_FACTOR
from .engine import ArrangementCounter, count_arrangements
from .expander import expand
from .spans import CellBuffer, find_spans

__all__ = [
    "ArrangementCache",
    "MemoKey",
    "CounterConfig",
    "DEFAULT_UNFOLD_FACTOR",
    "ArrangementCounter",
    "count_arrangements",
    "expand",
    "CellBuffer",
    "find_spans",
]
