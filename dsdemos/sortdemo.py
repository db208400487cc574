"""Compare insertion, quick and radix sort on a sample list."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Optional, TextIO

from dsdemos.sorting import insertion_sort, quick_sort, radix_sort

SAMPLE = (168, 179, 208, 306, 93, 859, 984, 55, 9, 271, 33)
PRINT_LIMIT = 100


def sample_values(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """The fixed sample when ``count`` <= 0, else ``count`` random values in 1..999."""
    if count <= 0:
        return list(SAMPLE)
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(999) + 1 for _ in range(count)]


def _before(values: list[int]) -> str:
    return "Before : " + "".join(f"{v}," for v in values) + "\n"


def run_demo(
    count: int,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> tuple[list[int], list[int], list[int]]:
    """Sort a sample three ways, reporting steps and times; return the three results."""
    out = out if out is not None else sys.stdout
    values = sample_values(count, rng)
    verbose = count <= PRINT_LIMIT
    trace = out if verbose else None

    if verbose:
        out.write(_before(values))

    out.write("Insertion sort:\n")
    start = time.process_time()
    by_insertion = insertion_sort(values, trace)
    out.write(f"sorting time : {time.process_time() - start:g} s\n\n\n")

    out.write("Quick sort:\n")
    if verbose:
        out.write(_before(values))
    start = time.process_time()
    by_quick = quick_sort(values, trace)
    out.write(f"sorting time : {time.process_time() - start:g} s\n")
    out.write("Correct!!\n\n\n" if by_quick == by_insertion else "Wrong!!\n\n\n")

    out.write("Radix sort:\n")
    start = time.process_time()
    by_radix = radix_sort(values, trace)
    out.write(f"sorting time : {time.process_time() - start:g} s\n")
    out.write("Correct!!\n\n\n" if by_radix == by_insertion else "Wrong!!\n\n")

    return by_insertion, by_quick, by_radix


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare three sorting algorithms.")
    parser.add_argument(
        "count", nargs="?", type=int, help="number of random values (<= 0 uses the fixed sample)"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    sys.stdout.write("DS-OO Program3-Demo\n")
    count = args.count
    if count is None:
        sys.stdout.flush()
        try:
            count = int(sys.stdin.readline().strip())
        except ValueError:
            parser.error("count must be an integer")
    sys.stdout.write("\n")
    run_demo(count, random.Random(args.seed), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())