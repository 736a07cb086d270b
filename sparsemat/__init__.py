"""Triplet and compressed sparse matrices, pattern rendering, sparse merging iterators and double stacks."""

__version__ = "0.1.0"

__all__ = ["stack", "triplet_iter", "visu", "triplet", "sparse_iter"]