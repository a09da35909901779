"""
Preset registry: loads the fixed option tables from YAML at startup,
validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
Tables are loaded and validated once at import time. Nothing writes to the
registry after startup, and callers only ever choose from these tables.

Tables:
  tier_splits.yaml   ordered TierSplitConfig presets + default preset id
  fill_options.yaml  ordered fill totals + default fill total
  seed_input.yaml    composition text used on first load and on reset
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from troopsplit.schemas.tier import TierSplitConfig

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class PresetRegistry:
    """
    Immutable registry of the fixed option tables.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self._tier_splits: dict[str, TierSplitConfig] = {}
        self._default_tier_split_id: str = ""
        self._fill_options: tuple[int, ...] = ()
        self._default_fill_total: int = 0
        self._seed_input: str = ""
        self._errors: list[str] = []

        self._load_all()
        self._validate()
        logger.debug(
            "preset registry loaded from %s: %d tier splits, %d fill options",
            data_dir,
            len(self._tier_splits),
            len(self._fill_options),
        )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"{filename} is not valid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"{filename} must contain a mapping at the top level")
        return data

    def _load_all(self) -> None:
        self._load_tier_splits()
        self._load_fill_options()
        self._load_seed_input()

    def _require(self, data: dict, key: str, where: str) -> Any:
        """Return ``data[key]``, recording an error (and returning None) if absent."""
        if key not in data:
            self._errors.append(f"{where} is missing required key {key!r}")
            return None
        return data[key]

    def _load_tier_splits(self) -> None:
        data = self._load_yaml("tier_splits.yaml")
        for index, entry in enumerate(self._require(data, "tier_splits", "tier_splits.yaml") or []):
            where = f"tier_splits.yaml entry {index}"
            if not isinstance(entry, dict):
                self._errors.append(f"{where} must be a mapping, got {entry!r}")
                continue
            fields = [
                self._require(entry, key, where)
                for key in ("id", "high_tier_percent", "low_tier_percent")
            ]
            if any(value is None for value in fields):
                continue
            preset_id, high, low = fields
            config = TierSplitConfig(
                id=str(preset_id),
                label=str(entry.get("label", preset_id)),
                high_tier_percent=float(high),
                low_tier_percent=float(low),
            )
            if config.id in self._tier_splits:
                self._errors.append(f"duplicate tier split id: {config.id!r}")
            self._tier_splits[config.id] = config
        default = self._require(data, "default", "tier_splits.yaml")
        self._default_tier_split_id = "" if default is None else str(default)

    def _load_fill_options(self) -> None:
        data = self._load_yaml("fill_options.yaml")
        options = self._require(data, "fill_options", "fill_options.yaml") or []
        for value in options:
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                self._errors.append(f"fill option must be a positive integer, got {value!r}")
        if len(set(options)) != len(options):
            self._errors.append(f"fill options contain duplicates: {options!r}")
        self._fill_options = tuple(options)
        self._default_fill_total = self._require(data, "default", "fill_options.yaml") or 0

    def _load_seed_input(self) -> None:
        data = self._load_yaml("seed_input.yaml")
        seed = self._require(data, "seed_input", "seed_input.yaml")
        self._seed_input = "" if seed is None else str(seed)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Raise ValueError listing every problem found while loading, plus any
        default that does not reference an entry in its own table.
        """
        errors = self._errors

        if not self._tier_splits:
            errors.append("tier_splits table is empty")
        if self._default_tier_split_id not in self._tier_splits:
            errors.append(f"default tier split {self._default_tier_split_id!r} is not defined")

        if not self._fill_options:
            errors.append("fill_options table is empty")
        if self._default_fill_total not in self._fill_options:
            errors.append(f"default fill total {self._default_fill_total!r} is not an option")

        if errors:
            raise ValueError(
                "Preset registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    @property
    def tier_splits(self) -> tuple[TierSplitConfig, ...]:
        """All presets in display order."""
        return tuple(self._tier_splits.values())

    def get_tier_split(self, preset_id: str) -> TierSplitConfig:
        """Return the preset named *preset_id*.

        Raises
        ------
        KeyError
            If *preset_id* is not in the table.
        """
        if preset_id not in self._tier_splits:
            raise KeyError(f"Unknown tier split preset: {preset_id!r}")
        return self._tier_splits[preset_id]

    @property
    def default_tier_split(self) -> TierSplitConfig:
        return self._tier_splits[self._default_tier_split_id]

    @property
    def fill_options(self) -> tuple[int, ...]:
        return self._fill_options

    @property
    def default_fill_total(self) -> int:
        return self._default_fill_total

    @property
    def seed_input(self) -> str:
        return self._seed_input


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time; read-only after construction.

_registry: PresetRegistry = PresetRegistry()


def get_registry() -> PresetRegistry:
    """Return the module-level registry singleton."""
    return _registry
