"""Tests for the Allocator."""

from __future__ import annotations

import pytest

from troopsplit.allocator import allocate
from troopsplit.parser import parse
from troopsplit.presets import get_registry
from troopsplit.schemas import AllocationResult, ClassRatios, TierSplitConfig

_NINETY_TEN = TierSplitConfig(id="90/10", label="90/10", high_tier_percent=0.9, low_tier_percent=0.1)
_ALL_HIGH = TierSplitConfig(id="100/0", label="100/0", high_tier_percent=1.0, low_tier_percent=0.0)


@pytest.fixture(scope="module")
def mixed_ratios():
    """7 : 11 : 2 composition."""
    return ClassRatios(inf=0.35, rng=0.55, cav=0.10)


class TestAllocate:
    def test_known_breakdown(self, mixed_ratios):
        result = allocate(mixed_ratios, 200000, _NINETY_TEN)
        assert isinstance(result, AllocationResult)
        hi, lo = result.high_tier, result.low_tier
        assert (hi.inf, hi.rng, hi.cav) == pytest.approx((63000, 99000, 18000))
        assert (lo.inf, lo.rng, lo.cav) == pytest.approx((7000, 11000, 2000))

    def test_accepts_composition_record(self):
        (comp,) = parse("7 11 2")
        from_record = allocate(comp, 200000, _NINETY_TEN)
        from_ratios = allocate(comp.ratios, 200000, _NINETY_TEN)
        assert from_record == from_ratios

    def test_no_rounding(self):
        ratios = ClassRatios.from_parts(1, 1, 1)
        result = allocate(ratios, 150000, _NINETY_TEN)
        assert result.high_tier.inf == pytest.approx(45000.0)
        assert result.low_tier.cav == pytest.approx(5000.0)
        odd = allocate(ClassRatios.from_parts(1, 2, 4), 150000, _NINETY_TEN)
        assert odd.high_tier.inf != round(odd.high_tier.inf)

    def test_empty_low_tier(self, mixed_ratios):
        result = allocate(mixed_ratios, 300000, _ALL_HIGH)
        assert result.low_tier.total == 0
        assert result.high_tier.total == pytest.approx(300000)

    def test_zero_class_stays_zero(self):
        (comp,) = parse("208")
        result = allocate(comp, 200000, _NINETY_TEN)
        assert result.high_tier.rng == 0
        assert result.low_tier.rng == 0

    def test_deterministic(self, mixed_ratios):
        assert allocate(mixed_ratios, 200000, _NINETY_TEN) == allocate(
            mixed_ratios, 200000, _NINETY_TEN
        )


class TestSumInvariant:
    @pytest.mark.parametrize("line", ["569", "7 11 2", "208", "1 2 4", "3/3/3"])
    def test_counts_sum_to_fill_total(self, line):
        registry = get_registry()
        (comp,) = parse(line)
        for config in registry.tier_splits:
            for fill in registry.fill_options:
                result = allocate(comp, fill, config)
                assert result.total == pytest.approx(fill, abs=1e-6)

    def test_tier_totals_follow_split(self, mixed_ratios):
        result = allocate(mixed_ratios, 200000, _NINETY_TEN)
        assert result.high_tier.total == pytest.approx(180000)
        assert result.low_tier.total == pytest.approx(20000)
