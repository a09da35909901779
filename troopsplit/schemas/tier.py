"""
Tier-split schema: how a fill total divides between the high and low tier.
"""

from __future__ import annotations

from dataclasses import dataclass

from troopsplit.schemas.composition import RATIO_TOLERANCE


@dataclass(frozen=True)
class TierSplitConfig:
    """
    Named high/low tier percentage pair.

    Both fractions are non-negative and sum to 1.0. Instances are immutable
    and come from the fixed preset table; see troopsplit.presets.

    Attributes:
        id: Preset key (e.g. ``"90/10"``).
        label: Display label.
        high_tier_percent: Fraction of the fill total trained at the high tier.
        low_tier_percent: Fraction of the fill total trained at the low tier.
    """

    id: str
    label: str
    high_tier_percent: float
    low_tier_percent: float

    def __post_init__(self) -> None:
        if self.high_tier_percent < 0:
            raise ValueError(
                f"high_tier_percent must be non-negative, got {self.high_tier_percent}"
            )
        if self.low_tier_percent < 0:
            raise ValueError(f"low_tier_percent must be non-negative, got {self.low_tier_percent}")
        total = self.high_tier_percent + self.low_tier_percent
        if abs(total - 1.0) > RATIO_TOLERANCE:
            raise ValueError(f"tier split {self.id!r} must sum to 1.0, got {total}")
