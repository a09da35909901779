"""
Display formatting for troop counts.

Formatting is lossy for display only; callers keep the unrounded value.
"""

from __future__ import annotations


def format_count(value: float) -> str:
    """Render a count in thousands with two decimals, e.g. 63000 → ``"63.00k"``.

    Exactly zero renders as ``"0"``.
    """
    if value == 0:
        return "0"
    return f"{value / 1000:.2f}k"
