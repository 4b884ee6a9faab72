"""Data-structure and algorithm exercises: list vs. tree search counts, SAT solving, a state stack and Huffman compression."""

__version__ = "0.1.0"