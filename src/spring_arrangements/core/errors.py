"""
Module: core.errors

Purpose:
    Input validation errors raised at the parse boundary. Everything the
    counter rejects from user input is a ParseError; callers that only care
    about "bad input" can catch that (or ValueError).

Key Classes:
    - ParseError: Base class for malformed record lines
    - InvalidRecordCharacter: Cell text outside {'.', '#', '?'}
    - InvalidRunLength: Run token that is not a positive integer

Used By:
    - core.models.cells: Record.parse
    - core.models.runs: RunSequence.parse / validation
    - core.utils.parsing: parse_line
    - cli: exit status 2 on bad input
"""

from __future__ import annotations


class ParseError(ValueError):
    """Error parsing a spring record or its run list."""
    pass


class InvalidRecordCharacter(ParseError):
    """Raised when record text contains a character that is not a cell."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Invalid record character {character!r} at position {position}"
        )
        self.character = character
        self.position = position


class InvalidRunLength(ParseError):
    """Raised when a run length token is non-numeric or not positive."""

    def __init__(self, token: str):
        super().__init__(f"Invalid run length: {token!r}")
        self.token = token
