import itertools
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import spring_arrangements
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from spring_arrangements.counter import ArrangementCounter  # noqa: E402


# Common test fixtures
@pytest.fixture
def counter():
    """Return a counter with its own fresh cache."""
    return ArrangementCounter()


@pytest.fixture
def brute_force_count():
    """Return an enumerating oracle: try every resolution of the '?' cells."""

    def _count(text: str, runs) -> int:
        unknowns = [i for i, char in enumerate(text) if char == "?"]
        expected = tuple(runs)
        total = 0
        for choice in itertools.product(".#", repeat=len(unknowns)):
            cells = list(text)
            for index, char in zip(unknowns, choice):
                cells[index] = char
            actual = tuple(len(group) for group in "".join(cells).split(".") if group)
            if actual == expected:
                total += 1
        return total

    return _count
