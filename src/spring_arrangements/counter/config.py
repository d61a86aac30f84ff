"""
Module: counter.config

Purpose:
    Configuration dataclass for the arrangement counter.
    Immutable configuration with validation on construction.

Key Classes:
    - CounterConfig: Unfold factor, cache policy, short-circuiting

Dependencies:
    - dataclasses (std)

Used By:
    - counter.engine: ArrangementCounter
    - cli: --factor
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_UNFOLD_FACTOR = 5


@dataclass(frozen=True)
class CounterConfig:
    """
    Configuration for the arrangement counter (immutable).

    Attributes:
        unfold_factor: Copies made by the record expander in unfold mode
        short_circuit: Skip tail counting when the head count is zero
        thread_safe_cache: Guard the memo cache with a lock so one cache can
            be shared by counters on several threads
        max_cache_entries: LRU bound on memoized sub-problems (None = unbounded)

    Invariants:
        - unfold_factor >= 1
        - max_cache_entries is None or max_cache_entries >= 1

    Example:
        >>> config = CounterConfig(unfold_factor=3)
        >>> config.unfold_factor
        3
    """

    unfold_factor: int = DEFAULT_UNFOLD_FACTOR
    short_circuit: bool = True
    thread_safe_cache: bool = False
    max_cache_entries: Optional[int] = None  # None = never evict

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.unfold_factor < 1:
            raise ValueError(f"unfold_factor must be positive: {self.unfold_factor}")
        if self.max_cache_entries is not None and self.max_cache_entries < 1:
            raise ValueError(
                f"max_cache_entries must be positive or None: {self.max_cache_entries}"
            )
