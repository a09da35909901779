"""presets — fixed tier-split, fill-total, and seed-input lookup tables."""

from troopsplit.presets.registry import PresetRegistry, get_registry

__all__ = ["PresetRegistry", "get_registry"]
