"""Selection of the n smallest or largest items from iterables (iter) and mutable sequences (slice), built on min-heap helpers (heap)."""

__version__ = "8.0.1"
__all__ = ["heap", "iter", "slice"]