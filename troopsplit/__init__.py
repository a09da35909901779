"""
Troopsplit — troop-allocation breakdowns for a strategy-game planning tool.

Parses free-form composition lines ("7 11 2", "208") into normalized
infantry / ranged / cavalry ratios and splits a fill total across two
troop tiers according to a fixed tier-split preset.
"""

from troopsplit.allocator.allocator import allocate
from troopsplit.parser.parser import parse

__all__ = ["allocate", "parse"]
