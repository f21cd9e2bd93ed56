"""Heap-based iterator helpers: k-way merge, k smallest elements and a lazy buffer."""

__version__ = "0.1.0"
__all__ = ["k_smallest", "kmerge", "lazy_buffer"]