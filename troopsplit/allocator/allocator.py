"""
Allocator — splits a fill total across two tiers and three unit classes.

Pure arithmetic, no rounding, no state:

    high_budget = fill_total × high_tier_percent
    low_budget  = fill_total × low_tier_percent
    tier.<class> = budget × ratios.<class>
"""

from __future__ import annotations

from troopsplit.schemas.allocation import AllocationResult, TierCounts
from troopsplit.schemas.composition import ClassRatios, CompositionRatio
from troopsplit.schemas.tier import TierSplitConfig


def _split_budget(budget: float, ratios: ClassRatios) -> TierCounts:
    return TierCounts(
        inf=budget * ratios.inf,
        rng=budget * ratios.rng,
        cav=budget * ratios.cav,
    )


def allocate(
    composition: CompositionRatio | ClassRatios,
    fill_total: float,
    config: TierSplitConfig,
) -> AllocationResult:
    """
    Compute per-tier, per-class troop counts for one composition.

    Accepts either a parsed CompositionRatio or bare ClassRatios. Given
    inputs that satisfy their own invariants this always succeeds, and
    the six resulting counts sum to *fill_total* up to float error.
    """
    ratios = composition.ratios if isinstance(composition, CompositionRatio) else composition
    return AllocationResult(
        high_tier=_split_budget(fill_total * config.high_tier_percent, ratios),
        low_tier=_split_budget(fill_total * config.low_tier_percent, ratios),
    )
