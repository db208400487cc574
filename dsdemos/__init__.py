"""Data structure demonstrations: runway queue simulation, Huffman coding and sorting."""

__version__ = "0.1.0"
__all__ = ["airport", "huffman", "sorting", "sortdemo"]