"""Huffman code construction, weighted path length and decoding."""

from __future__ import annotations

import heapq
import itertools
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

DEFAULT_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_FREQUENCIES = (
    11, 5, 2, 3, 12, 3, 5, 6, 8, 1, 2, 4, 8, 7, 2, 2, 1, 9, 6, 2, 4, 1, 10, 10, 1, 1,
)


@dataclass
class HuffmanNode:
    """A tree node; internal nodes carry no symbol."""

    symbol: Optional[str]
    freq: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None


class HuffmanTree:
    """A built Huffman tree: left edges are ``0``, right edges are ``1``."""

    def __init__(self, root: HuffmanNode) -> None:
        self.root = root

    def _leaves(self) -> Iterator[tuple[HuffmanNode, str]]:
        stack: list[tuple[HuffmanNode, str]] = [(self.root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                yield node, code
            if node.right is not None:
                stack.append((node.right, code + "1"))
            if node.left is not None:
                stack.append((node.left, code + "0"))

    def codes(self) -> dict[str, str]:
        """Map each symbol to its code, in preorder of the tree."""
        return {node.symbol: code for node, code in self._leaves()}

    def sorted_codes(self) -> list[str]:
        """Lines of the form ``symbol : code``, sorted."""
        return sorted(f"{node.symbol} : {code}" for node, code in self._leaves())

    def weighted_path_length(self) -> int:
        """Sum over leaves of code length times frequency."""
        return sum(len(code) * node.freq for node, code in self._leaves())

    def decode(self, bits: str) -> str:
        """Decode a bit string; stops at the first character that is not a bit.

        A trailing incomplete code is dropped. Raises ValueError if a bit leads
        off the tree.
        """
        decoded: list[str] = []
        node = self.root
        for bit in bits:
            if node.is_leaf:
                decoded.append(node.symbol)
                node = self.root
            if bit == "0":
                child = node.left
            elif bit == "1":
                child = node.right
            else:
                return "".join(decoded)
            if child is None:
                raise ValueError("bit string does not follow the code tree")
            node = child
        if node.is_leaf:
            decoded.append(node.symbol)
        return "".join(decoded)


def build_tree(symbols: Iterable[str], frequencies: Iterable[int]) -> HuffmanTree:
    """Build a Huffman tree by repeatedly merging the two lightest nodes."""
    symbols = list(symbols)
    frequencies = list(frequencies)
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies differ in length")
    if not symbols:
        raise ValueError("cannot build a Huffman tree from no symbols")

    order = itertools.count()
    heap = [
        (freq, next(order), HuffmanNode(symbol, freq))
        for symbol, freq in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(None, left.freq + right.freq, left, right)
        heapq.heappush(heap, (merged.freq, next(order), merged))
    return HuffmanTree(heap[0][2])


def _is_letter(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def _letters(text: str) -> str:
    return "".join(char for char in text if _is_letter(char))


def count_letters(text: str) -> list[tuple[str, int]]:
    """Count ASCII letters in ``text``, sorted by letter."""
    letters = _letters(text)
    return [(letter, letters.count(letter)) for letter in sorted(set(letters))]


def extract_bits(text: str) -> str:
    """Return the ``0`` and ``1`` characters of ``text`` in order."""
    return "".join(char for char in text if char in "01")


def _write_frequencies(pairs: Iterable[tuple[str, int]], out: TextIO) -> None:
    for count, (symbol, freq) in enumerate(pairs, 1):
        out.write(f"{symbol} = {freq}")
        out.write("\n" if count % 10 == 0 else " | ")


def _write_codes(tree: HuffmanTree, out: TextIO) -> None:
    for line in tree.sorted_codes():
        out.write(f"{line}\n")


def _run_builtin(out: TextIO) -> None:
    out.write("part1 : \n")
    _write_frequencies(zip(DEFAULT_SYMBOLS, DEFAULT_FREQUENCIES), out)
    out.write("\n\n")
    tree = build_tree(DEFAULT_SYMBOLS, DEFAULT_FREQUENCIES)
    _write_codes(tree, out)
    out.write(f"\nWELP : {tree.weighted_path_length()}\n")


def _run_file(path: str, out: TextIO) -> None:
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    pairs = count_letters(text)
    code = extract_bits(text)

    out.write(f"character : {_letters(text)}\n\n")
    _write_frequencies(pairs, out)
    out.write("\n\n")

    tree = build_tree([s for s, _ in pairs], [f for _, f in pairs])
    _write_codes(tree, out)
    out.write("\n")
    out.write(f"Huffman code : {code}\n")
    out.write(f"decode : {tree.decode(code)}\n")
    out.write(f"WELP : {tree.weighted_path_length()}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Without arguments show the built-in table; with a file, code and decode it."""
    if argv is None:
        argv = sys.argv[1:]
    out = sys.stdout
    shown = "".join(f"{arg} " for arg in ["huffman", *argv])
    out.write(f"\nDSOO-Program2-Demo: {shown}\n")
    if len(argv) != 1:
        _run_builtin(out)
        return 0
    try:
        _run_file(argv[0], out)
    except (OSError, ValueError) as error:
        sys.stderr.write(f"huffman: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())