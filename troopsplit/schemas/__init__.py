"""schemas — frozen value types shared by the parser, allocator, and writer."""

from troopsplit.schemas.allocation import AllocationResult, TierCounts
from troopsplit.schemas.composition import RATIO_TOLERANCE, ClassRatios, CompositionRatio
from troopsplit.schemas.tier import TierSplitConfig

__all__ = [
    "RATIO_TOLERANCE",
    "AllocationResult",
    "ClassRatios",
    "CompositionRatio",
    "TierCounts",
    "TierSplitConfig",
]
