"""
TextWriter — renders parsed compositions and their allocations as text cards.

One card per composition, in parse order:

    7 11 2
        Inf      Rng      Cav
    T5  63.00k   99.00k   18.00k
    T4  7.00k    11.00k   2.00k

Cards are separated by a blank line. An empty plan renders EMPTY_MESSAGE.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from troopsplit.schemas.allocation import AllocationResult
from troopsplit.schemas.composition import CompositionRatio
from troopsplit.writer.formatting import format_count

EMPTY_MESSAGE = "No valid compositions found. Check your input format."

_ROW_LABEL_WIDTH = 4
_COLUMN_WIDTH = 9
_CLASS_HEADERS = ("Inf", "Rng", "Cav")


@dataclass(frozen=True)
class WriterInput:
    """Compositions paired with their allocations, in display order."""

    entries: tuple[tuple[CompositionRatio, AllocationResult], ...]


@dataclass(frozen=True)
class WriterOutput:
    """Output of a render."""

    sections: dict[str, str]  # composition id → card text
    full_text: str  # all cards joined, or EMPTY_MESSAGE


@runtime_checkable
class PlanWriter(Protocol):
    """Protocol for plan writers."""

    def write(self, writer_input: WriterInput) -> WriterOutput: ...


def _row(label: str, cells: tuple[str, ...]) -> str:
    return (label.ljust(_ROW_LABEL_WIDTH) + "".join(c.ljust(_COLUMN_WIDTH) for c in cells)).rstrip()


def _render_card(composition: CompositionRatio, allocation: AllocationResult) -> str:
    lines = [composition.label, _row("", _CLASS_HEADERS)]
    for tier_name, counts in allocation.tiers():
        cells = (format_count(counts.inf), format_count(counts.rng), format_count(counts.cav))
        lines.append(_row(tier_name, cells))
    return "\n".join(lines)


class TextWriter:
    """Deterministic plain-text writer."""

    def write(self, wi: WriterInput) -> WriterOutput:
        if not wi.entries:
            return WriterOutput(sections={}, full_text=EMPTY_MESSAGE)

        sections: dict[str, str] = {}
        for composition, allocation in wi.entries:
            sections[composition.id] = _render_card(composition, allocation)

        return WriterOutput(sections=sections, full_text="\n\n".join(sections.values()))
