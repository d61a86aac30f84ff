"""
Core Models Package

Immutable, validated data models for spring records.

All models in this package are frozen dataclasses, so they:
1. Are never mutated while a record is being counted
2. Are safe to share between threads
3. Compare and hash by content
"""

from .cells import Cell, Record
from .runs import RunSequence
from .spans import Span

__all__ = [
    "Cell",
    "Record",
    "RunSequence",
    "Span",
]
