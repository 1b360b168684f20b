"""Graph algorithms, disjoint sets, flood fill, binary search and word ordering."""

__version__ = "0.1.0"