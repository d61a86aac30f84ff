"""
Module: runs

Purpose:
    Provides the RunSequence dataclass - the ordered list of damaged run
    lengths a record must contain.

Key Functions:
    - RunSequence.parse(text): Build from "1,1,3"
    - RunSequence.repeated(factor): Repeat the whole sequence
    - split_middle(): (head, middle, tail) around index len // 2

Dependencies:
    - dataclasses (std)
    - core.errors: InvalidRunLength

Used By:
    - counter.engine: ArrangementCounter
    - counter.expander: expand
    - core.utils.parsing: parse_line
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..errors import InvalidRunLength


@dataclass(frozen=True, slots=True)
class RunSequence:
    """
    Ordered run lengths of contiguous damaged springs.

    Attributes:
        lengths: Run lengths in row order

    Invariants:
        - every length is an int >= 1
        - may be empty, meaning no damaged cell is allowed

    Example:
        >>> runs = RunSequence.parse("1,1,3")
        >>> runs.total
        5
    """

    lengths: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate run lengths on construction."""
        for length in self.lengths:
            if isinstance(length, bool) or not isinstance(length, int) or length < 1:
                raise InvalidRunLength(str(length))

    @classmethod
    def parse(cls, text: str) -> RunSequence:
        """
        Parse a comma-separated list of positive integers.

        Args:
            text: e.g. "1,1,3"; empty or blank text gives an empty sequence

        Returns:
            Parsed RunSequence

        Raises:
            InvalidRunLength: If any token is empty, non-numeric or < 1
        """
        if not text.strip():
            return cls()
        lengths = []
        for token in text.split(","):
            token = token.strip()
            if not (token.isascii() and token.isdigit()):
                raise InvalidRunLength(token)
            lengths.append(int(token))
        return cls(tuple(lengths))

    @property
    def total(self) -> int:
        """Sum of all run lengths (minimum damaged cells required)."""
        return sum(self.lengths)

    def repeated(self, factor: int) -> RunSequence:
        """Return the sequence repeated ``factor`` times."""
        return RunSequence(self.lengths * factor)

    def to_text(self) -> str:
        """Comma-separated encoding."""
        return ",".join(str(length) for length in self.lengths)

    def __len__(self) -> int:
        return len(self.lengths)

    def __iter__(self) -> Iterator[int]:
        return iter(self.lengths)

    def __repr__(self) -> str:
        return f"RunSequence({self.to_text()!r})"


def split_middle(lengths: Tuple[int, ...]) -> Tuple[Tuple[int, ...], int, Tuple[int, ...]]:
    """
    Split run lengths around the middle run (index ``len // 2``).

    Recursion depth of the counter is at most log2(len(lengths)) + 1.

    Args:
        lengths: Non-empty run lengths

    Returns:
        (head_runs, middle_length, tail_runs)

    Example:
        >>> split_middle((1, 3, 1, 6))
        ((1, 3), 1, (6,))
    """
    assert lengths, "cannot split an empty run sequence"
    middle = len(lengths) // 2
    return lengths[:middle], lengths[middle], lengths[middle + 1:]
