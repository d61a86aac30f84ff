"""
Unit Tests for Cell and Record Models

Tests for parsing, padding, joining and run extraction of records.
"""

import pytest

from spring_arrangements.core import InvalidRecordCharacter, ParseError
from spring_arrangements.core.models import Cell, Record


class TestCell:
    """Tests for Cell enum."""

    def test_value_when_accessed_then_matches_text_encoding(self):
        """Each cell's value is its character."""
        assert Cell.OPERATIONAL.value == "."
        assert Cell.DAMAGED.value == "#"
        assert Cell.UNKNOWN.value == "?"

    def test_code_when_accessed_then_is_ascii_byte(self):
        """code should be the byte value used in encoded records."""
        assert Cell.DAMAGED.code == ord("#")


class TestRecord:
    """Tests for Record dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Parsing Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_parse_when_valid_text_then_creates_cells(self):
        """Valid text should map one character to one cell."""
        record = Record.parse("?#.")
        assert record.cells == (Cell.UNKNOWN, Cell.DAMAGED, Cell.OPERATIONAL)

    def test_parse_when_empty_text_then_empty_record(self):
        """Empty text is a valid, empty record."""
        assert len(Record.parse("")) == 0

    def test_parse_when_invalid_character_then_raises_with_position(self):
        """Unknown characters should be reported, not coerced."""
        with pytest.raises(InvalidRecordCharacter) as excinfo:
            Record.parse("??x#")
        assert excinfo.value.character == "x"
        assert excinfo.value.position == 2

    def test_parse_when_invalid_character_then_error_is_parse_error(self):
        """InvalidRecordCharacter should be catchable as ParseError/ValueError."""
        with pytest.raises(ParseError):
            Record.parse("1")
        with pytest.raises(ValueError):
            Record.parse(" ")

    def test_init_when_not_cells_then_raises_error(self):
        """Raw strings are not cells."""
        with pytest.raises(ValueError, match="Cell members"):
            Record(("#",))  # type: ignore[arg-type]

    def test_init_when_frozen_then_immutable(self):
        """Record should be immutable (frozen)."""
        record = Record.parse("#")
        with pytest.raises(AttributeError):
            record.cells = ()  # type: ignore

    # ─────────────────────────────────────────────────────────────────────────
    # Transformation Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_padded_when_called_then_adds_operational_ends(self):
        """padded() should add one operational cell on each side."""
        record = Record.parse("?#")
        padded = record.padded()
        assert padded.to_text() == ".?#."
        assert record.to_text() == "?#"

    def test_join_when_three_records_then_two_separators(self):
        """join() inserts exactly one separator between neighbours."""
        joined = Record.join([Record.parse("#"), Record.parse(".."), Record.parse("#")], Cell.UNKNOWN)
        assert joined.to_text() == "#?..?#"

    def test_join_when_no_records_then_empty(self):
        assert Record.join([], Cell.UNKNOWN) == Record()

    # ─────────────────────────────────────────────────────────────────────────
    # Query Tests
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("text,expected", [
        ("#.#.###", (1, 1, 3)),
        (".#...#....###.", (1, 1, 3)),
        ("......", ()),
        ("###", (3,)),
        ("", ()),
    ])
    def test_damaged_runs_when_resolved_then_lists_runs(self, text, expected):
        """damaged_runs() should list the lengths of maximal damaged groups."""
        assert Record.parse(text).damaged_runs() == expected

    def test_is_resolved_when_unknown_present_then_false(self):
        assert Record.parse("#?.").is_resolved is False
        assert Record.parse("#..").is_resolved is True

    def test_encode_when_called_then_ascii_bytes(self):
        assert Record.parse(".#?").encode() == b".#?"

    def test_eq_when_same_text_then_equal_and_same_hash(self):
        """Records compare and hash by content."""
        a = Record.parse("?#?")
        b = Record.parse("?#?")
        assert a == b
        assert hash(a) == hash(b)

    def test_repr_when_called_then_shows_text(self):
        assert repr(Record.parse("?#")) == "Record('?#')"
