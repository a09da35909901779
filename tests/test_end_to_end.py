"""
End-to-end integration tests for the full troopsplit pipeline.

Exercises: preset registry → parser → allocator → TextWriter on the seed
compositions, verifying the rendered breakdown for every preset.
"""

from __future__ import annotations

import pytest

from troopsplit import allocate, parse
from troopsplit.api import plan_troops
from troopsplit.presets import get_registry
from troopsplit.writer import TextWriter, WriterInput


def _render(plan) -> str:
    entries = tuple((e.composition, e.allocation) for e in plan.entries)
    return TextWriter().write(WriterInput(entries=entries)).full_text


# ── Seed compositions ──────────────────────────────────────────────────────────


class TestSeedPipeline:
    def test_three_cards(self):
        text = _render(plan_troops())
        assert text.count("T5") == 3
        assert text.count("T4") == 3

    def test_compact_line_breakdown(self):
        """208 at 200k / 90-10: T5 = 36k / 0 / 144k, T4 = 4k / 0 / 16k."""
        plan = plan_troops(fill_total=200000, preset_id="90/10")
        entry = next(e for e in plan.entries if e.composition.label == "208")
        hi, lo = entry.allocation.high_tier, entry.allocation.low_tier
        assert (hi.inf, hi.rng, hi.cav) == pytest.approx((36000, 0, 144000))
        assert (lo.inf, lo.rng, lo.cav) == pytest.approx((4000, 0, 16000))
        assert "T5  36.00k   0        144.00k" in _render(plan)

    @pytest.mark.parametrize("preset", ["80/20", "90/10", "100/0"])
    def test_api_matches_core_functions(self, preset):
        registry = get_registry()
        config = registry.get_tier_split(preset)
        plan = plan_troops(registry.seed_input, fill_total=300000, preset_id=preset)
        expected = [allocate(c, 300000, config) for c in parse(registry.seed_input)]
        assert [e.allocation for e in plan.entries] == expected
