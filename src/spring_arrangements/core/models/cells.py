"""
Module: cells

Purpose:
    Provides the Cell enum and the Record dataclass - an immutable row of
    spring-condition cells. Records are value types: padding, joining and
    expansion always return new Records.

Key Functions:
    - Record.parse(text): Build a record from '.', '#', '?' text
    - Record.padded(): Add one operational sentinel at each end
    - Record.join(records, separator): Concatenate with a separator cell
    - Record.damaged_runs(): Lengths of the damaged runs actually present
    - Record.encode(): ASCII bytes used as the counter's backing buffer

Dependencies:
    - dataclasses (std)
    - enum (std)
    - core.errors: InvalidRecordCharacter

Used By:
    - counter.spans: find_spans
    - counter.engine: ArrangementCounter
    - counter.expander: expand
    - core.utils.parsing: parse_line
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from ..errors import InvalidRecordCharacter


class Cell(Enum):
    """
    State of a single spring.

    The value is the character used in the textual encoding.

    Attributes:
        OPERATIONAL: Spring known to work ('.')
        DAMAGED: Spring known to be broken ('#')
        UNKNOWN: Condition not recorded ('?')
    """

    OPERATIONAL = "."
    DAMAGED = "#"
    UNKNOWN = "?"

    @property
    def code(self) -> int:
        """Byte value of this cell in an encoded record."""
        return ord(self.value)


_CELLS_BY_CHAR = {cell.value: cell for cell in Cell}


@dataclass(frozen=True, slots=True)
class Record:
    """
    Immutable row of spring cells.

    Attributes:
        cells: Cells in row order

    Invariants:
        - every element is a Cell

    Example:
        >>> record = Record.parse("???.###")
        >>> len(record)
        7
        >>> record.padded().to_text()
        '.???.###.'
    """

    cells: Tuple[Cell, ...] = ()

    def __post_init__(self) -> None:
        """Validate cells on construction."""
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Record cells must be Cell members: {cell!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Record:
        """
        Parse a record from its textual encoding.

        Args:
            text: Characters from '.', '#' and '?'

        Returns:
            Record with one cell per character

        Raises:
            InvalidRecordCharacter: On the first character that is not a cell
        """
        cells = []
        for position, char in enumerate(text):
            cell = _CELLS_BY_CHAR.get(char)
            if cell is None:
                raise InvalidRecordCharacter(char, position)
            cells.append(cell)
        return cls(tuple(cells))

    @classmethod
    def join(cls, records: Iterable[Record], separator: Cell) -> Record:
        """
        Concatenate records with a single separator cell between each pair.

        Args:
            records: Records to concatenate, in order
            separator: Cell inserted between consecutive records

        Returns:
            New Record (empty if no records were given)
        """
        cells: list[Cell] = []
        for index, record in enumerate(records):
            if index:
                cells.append(separator)
            cells.extend(record.cells)
        return cls(tuple(cells))

    # ─────────────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────────────

    def padded(self) -> Record:
        """Return a copy with one operational sentinel cell on each side."""
        return Record((Cell.OPERATIONAL, *self.cells, Cell.OPERATIONAL))

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_resolved(self) -> bool:
        """True if no cell is UNKNOWN."""
        return Cell.UNKNOWN not in self.cells

    def damaged_runs(self) -> Tuple[int, ...]:
        """
        Lengths of the maximal runs of DAMAGED cells, in order.

        UNKNOWN cells end a run just like OPERATIONAL ones, so this is only
        meaningful as "the runs" of a resolved record.
        """
        runs = []
        current = 0
        for cell in self.cells:
            if cell is Cell.DAMAGED:
                current += 1
            elif current:
                runs.append(current)
                current = 0
        if current:
            runs.append(current)
        return tuple(runs)

    def to_text(self) -> str:
        """Textual encoding of this record."""
        return "".join(cell.value for cell in self.cells)

    def encode(self) -> bytes:
        """ASCII encoding of this record, one byte per cell."""
        return self.to_text().encode("ascii")

    def __len__(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Record({self.to_text()!r})"
