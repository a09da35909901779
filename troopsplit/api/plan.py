"""
Public troop-planning API.

plan_troops() is the single entry point that takes composition text, a fill
total, and a tier-split preset id and returns every parsed composition with
its allocation. It wires: preset registry → parser → allocator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from troopsplit.allocator.allocator import allocate
from troopsplit.parser.parser import parse
from troopsplit.presets.registry import get_registry
from troopsplit.schemas.allocation import AllocationResult
from troopsplit.schemas.composition import CompositionRatio
from troopsplit.schemas.tier import TierSplitConfig

logger = logging.getLogger(__name__)


class PlanError(Exception):
    """Raised when a planning argument is outside its fixed option table.

    Attributes:
        field: Name of the offending argument (e.g. ``"fill_total"``).
        detail: Human-readable description of the failure.
    """

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"[{field}] {detail}")
        self.field = field
        self.detail = detail


@dataclass(frozen=True)
class PlannedComposition:
    """One composition and its per-tier allocation."""

    composition: CompositionRatio
    allocation: AllocationResult


@dataclass(frozen=True)
class TroopPlan:
    """
    Complete planning result.

    Attributes:
        fill_total: Troops distributed per composition.
        config: Tier split applied to every composition.
        entries: Planned compositions in input order.
    """

    fill_total: int
    config: TierSplitConfig
    entries: tuple[PlannedComposition, ...]

    @property
    def is_empty(self) -> bool:
        """True when no input line produced a composition."""
        return not self.entries


def plan_troops(
    text: str | None = None,
    fill_total: int | None = None,
    preset_id: str | None = None,
) -> TroopPlan:
    """
    Parse *text* and allocate *fill_total* troops to each composition.

    Parameters
    ----------
    text:
        Composition lines. ``None`` uses the registry seed input.
    fill_total:
        One of the registry fill options. ``None`` uses the default.
    preset_id:
        Tier-split preset key (e.g. ``"90/10"``). ``None`` uses the default.

    Returns
    -------
    TroopPlan
        Possibly empty; an empty plan is a normal outcome.

    Raises
    ------
    KeyError
        If *preset_id* is not a known preset.
    PlanError
        If *fill_total* is not one of the registry fill options.
    """
    registry = get_registry()

    if text is None:
        text = registry.seed_input
    if fill_total is None:
        fill_total = registry.default_fill_total
    elif fill_total not in registry.fill_options:
        raise PlanError(
            "fill_total",
            f"{fill_total!r} is not one of {list(registry.fill_options)}",
        )
    config = (
        registry.default_tier_split if preset_id is None else registry.get_tier_split(preset_id)
    )

    entries = tuple(
        PlannedComposition(composition=comp, allocation=allocate(comp, fill_total, config))
        for comp in parse(text)
    )
    logger.debug(
        "planned %d compositions at fill %d with preset %s",
        len(entries),
        fill_total,
        config.id,
    )
    return TroopPlan(fill_total=fill_total, config=config, entries=entries)
