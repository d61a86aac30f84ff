"""
Module: core.utils.parsing

Purpose:
    Split one condition-record line ("???.### 1,1,3") into its record and
    run sequence. Reading files and summing per-line results is left to the
    caller.

Key Functions:
    - parse_line(): Parse "<cells> <runs>" into (Record, RunSequence)

Dependencies:
    - core.models: Record, RunSequence
    - core.errors: ParseError

Used By:
    - cli: one count per command line argument
"""

from __future__ import annotations

from typing import Tuple

from ..errors import ParseError
from ..models import Record, RunSequence


def parse_line(line: str) -> Tuple[Record, RunSequence]:
    """
    Parse a whitespace-separated condition record line.

    Args:
        line: Cells, whitespace, then comma-separated run lengths

    Returns:
        Tuple of (record, runs)

    Raises:
        ParseError: If the line does not have exactly two fields
        InvalidRecordCharacter: If the cells field contains a non-cell char
        InvalidRunLength: If a run token is not a positive integer

    Example:
        >>> record, runs = parse_line("???.### 1,1,3")
        >>> runs.lengths
        (1, 1, 3)
    """
    fields = line.split()
    if len(fields) != 2:
        raise ParseError(
            f"Expected '<cells> <run lengths>', got {len(fields)} field(s): {line!r}"
        )
    cells, runs = fields
    return Record.parse(cells), RunSequence.parse(runs)
