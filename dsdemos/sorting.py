"""Insertion, quick and radix sort, optionally reporting each step."""

from __future__ import annotations

from typing import Iterable, Optional, TextIO

RADIX_PASSES = 3


def _chain(values: Iterable[int]) -> str:
    return "".join(f"{value}," for value in values) + "\n"


def insertion_sort(values: Iterable[int], out: Optional[TextIO] = None) -> list[int]:
    """Return a sorted copy; with ``out``, write the list after each insertion."""
    items = list(values)
    for index in range(1, len(items)):
        current = items[index]
        position = index
        while position > 0 and current < items[position - 1]:
            items[position] = items[position - 1]
            position -= 1
        items[position] = current
        if out is not None:
            out.write(f"{index:>2} : {_chain(items)}")
    return items


def _partition(items: list[int], front: int, rear: int) -> int:
    pivot = items[front]
    f, r = front, rear + 1
    while True:
        while f < rear:
            f += 1
            if items[f] >= pivot:
                break
        while r > 0:
            r -= 1
            if items[r] <= pivot:
                break
        if f >= r:
            break
        items[f], items[r] = items[r], items[f]
    items[front], items[r] = items[r], items[front]
    return r


def quick_sort(values: Iterable[int], out: Optional[TextIO] = None) -> list[int]:
    """Return a sorted copy using first-element pivots; with ``out``, write each partition."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        front, rear = pending.pop()
        if front >= rear:
            continue
        split = _partition(items, front, rear)
        if out is not None:
            out.write(f"{front}-{rear} : \n")
            out.write(_chain(items))
        pending.append((split + 1, rear))
        pending.append((front, split - 1))
    return items


def radix_sort(values: Iterable[int], out: Optional[TextIO] = None) -> list[int]:
    """Least-significant-digit sort over the lowest three decimal digits.

    With ``out``, write the buckets and resulting chain of each pass. Raises
    ValueError for negative values.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative values")
    for digit in range(RADIX_PASSES):
        place = 10**digit
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[value % (place * 10) // place].append(value)
        items = [value for bucket in buckets for value in bucket]
        if out is not None:
            out.write(f"\nThe {digit + 1} pass : \n")
            for number, bucket in enumerate(buckets):
                entries = "".join(f"--> {value} " for value in bucket)
                out.write(f"{number} | {entries}\n")
            out.write(f"resulting chain : {_chain(items)}")
    return items