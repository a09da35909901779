"""
Allocation result schema: per-tier, per-class troop counts.

Counts are real numbers; rounding is a display concern (see
troopsplit.writer.formatting).
"""

from __future__ import annotations

from dataclasses import dataclass

HIGH_TIER_NAME = "T5"
LOW_TIER_NAME = "T4"


@dataclass(frozen=True)
class TierCounts:
    """Troop counts for one tier, one value per unit class."""

    inf: float
    rng: float
    cav: float

    def __post_init__(self) -> None:
        for name in ("inf", "rng", "cav"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} count must be non-negative, got {value}")

    @property
    def total(self) -> float:
        return self.inf + self.rng + self.cav


@dataclass(frozen=True)
class AllocationResult:
    """
    Counts for both tiers of one composition.

    Attributes:
        high_tier: Counts for the high tier (displayed as T5).
        low_tier: Counts for the low tier (displayed as T4).
    """

    high_tier: TierCounts
    low_tier: TierCounts

    @property
    def total(self) -> float:
        """Sum of all six counts; equals the fill total up to float error."""
        return self.high_tier.total + self.low_tier.total

    def tiers(self) -> tuple[tuple[str, TierCounts], ...]:
        """Return ``(tier_name, counts)`` pairs, high tier first."""
        return ((HIGH_TIER_NAME, self.high_tier), (LOW_TIER_NAME, self.low_tier))
