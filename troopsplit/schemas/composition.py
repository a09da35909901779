"""
Composition schema: a named, normalized infantry / ranged / cavalry ratio.

All types are frozen dataclasses with fail-fast validation in __post_init__.
A CompositionRatio is rebuilt from scratch on every parse; nothing carries
identity across parses except the position-derived id.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

RATIO_TOLERANCE: float = 1e-9


@dataclass(frozen=True)
class ClassRatios:
    """
    Dimensionless share of each unit class in a composition.

    All three values are non-negative and sum to 1.0 (within RATIO_TOLERANCE).

    Attributes:
        inf: Infantry share.
        rng: Ranged share.
        cav: Cavalry share.
    """

    inf: float
    rng: float
    cav: float

    def __post_init__(self) -> None:
        for name in ("inf", "rng", "cav"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative finite ratio, got {value}")
        total = self.inf + self.rng + self.cav
        if abs(total - 1.0) > RATIO_TOLERANCE:
            raise ValueError(f"ratios must sum to 1.0, got {total}")

    @classmethod
    def from_parts(cls, inf: float, rng: float, cav: float) -> ClassRatios:
        """Normalize three raw parts into ratios.

        Raises ValueError if the parts sum to zero.
        """
        total = inf + rng + cav
        if total == 0:
            raise ValueError("cannot normalize parts that sum to zero")
        return cls(inf=inf / total, rng=rng / total, cav=cav / total)


@dataclass(frozen=True)
class CompositionRatio:
    """
    One parsed composition line.

    Attributes:
        id: Identifier unique within a parse pass, derived from the line index.
        label: Trimmed, upper-cased source line.
        ratios: Normalized class shares.
    """

    id: str
    label: str
    ratios: ClassRatios
