"""allocator — Allocator public API."""

from troopsplit.allocator.allocator import allocate

__all__ = ["allocate"]
