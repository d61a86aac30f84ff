"""
Benchmark script for the arrangement counter.
Measures cold-cache and warm-cache counting time for sample records.
"""

import time
import statistics
from typing import List, Tuple
import logging

import sys
from pathlib import Path

# Add src to path so we can import spring_arrangements
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

try:
    from spring_arrangements.core import parse_line
    from spring_arrangements.counter import ArrangementCounter, CounterConfig
except ImportError as e:
    print(f"Error: Could not import spring_arrangements: {e}")
    exit(1)

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("benchmark")

SAMPLE_LINES = [
    "???.### 1,1,3",
    ".??..??...?##. 1,1,3",
    "?#?#?#?#?#?#?#? 1,3,1,6",
    "????.#...#... 4,1,1",
    "????.######..#####. 1,6,5",
    "?###???????? 3,2,1",
]


def benchmark_counting(
    lines: List[str],
    unfold: bool,
    factor: int = 5,
    iterations: int = 5,
) -> Tuple[float, float]:
    """Benchmark cold-cache and warm-cache counting of all lines."""
    print(f"\n--- Benchmarking Counting (x{iterations}, unfold={unfold}, factor={factor}) ---")

    parsed = [parse_line(line) for line in lines]
    config = CounterConfig(unfold_factor=factor)

    cold_times = []
    warm_times = []
    total = 0

    for i in range(iterations):
        counter = ArrangementCounter(config)

        start = time.perf_counter()
        total = sum(counter.count_record(r, runs, unfold=unfold) for r, runs in parsed)
        cold_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        sum(counter.count_record(r, runs, unfold=unfold) for r, runs in parsed)
        warm_times.append(time.perf_counter() - start)

        print(f"Run {i+1}: cold {cold_times[-1]:.4f}s, warm {warm_times[-1]:.4f}s ({counter.cache.stats})")

    print(f"Total arrangements: {total}")
    print(f"Cold average: {statistics.mean(cold_times):.4f}s")
    print(f"Warm average: {statistics.mean(warm_times):.4f}s")

    return statistics.mean(cold_times), statistics.mean(warm_times)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark arrangement counter")
    parser.add_argument("--input", type=Path, help="File with one record line per line")
    parser.add_argument("--factor", type=int, default=5, help="Unfold factor")
    parser.add_argument("--iterations", type=int, default=5, help="Runs per benchmark")

    args = parser.parse_args()

    if args.input and args.input.exists():
        lines = [line for line in args.input.read_text().splitlines() if line.strip()]
    else:
        print("Using built-in sample records (provide --input for your own)")
        lines = SAMPLE_LINES

    benchmark_counting(lines, unfold=False, iterations=args.iterations)
    benchmark_counting(lines, unfold=True, factor=args.factor, iterations=args.iterations)
