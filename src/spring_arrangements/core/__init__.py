"""
Spring Arrangements Core Package

Shared data models, input errors and line parsing. The counter package
depends on this one, never the other way round.

Record text uses one character per cell:

| Char | Cell |
|------|------|
| `.`  | `Cell.OPERATIONAL` |
| `#`  | `Cell.DAMAGED` |
| `?`  | `Cell.UNKNOWN` |
"""

from .errors import InvalidRecordCharacter, InvalidRunLength, ParseError
from .models import Cell, Record, RunSequence, Span
from .utils import parse_line

__all__ = [
    "Cell",
    "Record",
    "RunSequence",
    "Span",
    "ParseError",
    "InvalidRecordCharacter",
    "InvalidRunLength",
    "parse_line",
]
