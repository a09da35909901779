"""
Composition Parser — turns free-form multi-line text into CompositionRatios.

Each non-blank line is trimmed and offered to an ordered list of shape
matchers. The first matcher that yields exactly three parts wins:

  1. Delimited form — "7 11 2", "9/6/5", "4-4-2", "4.4.2"
  2. Compact form   — "208" (three digits, one part per digit)

Lines that match no shape, or whose parts sum to zero or overflow, are dropped. A bad
line never aborts the batch; an all-invalid input yields an empty tuple.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable

from troopsplit.schemas.composition import ClassRatios, CompositionRatio

logger = logging.getLogger(__name__)

_DELIMITERS = re.compile(r"[/\s.-]+")
_NUMBER = re.compile(r"\+?[0-9]+(?:[eE]\+?[0-9]+)?", re.ASCII)
_COMPACT_LENGTH = 3

Parts = tuple[float, float, float]
ShapeMatcher = Callable[[str], Parts | None]


# ── Shape matchers ─────────────────────────────────────────────────────────────


def _to_number(token: str) -> float | None:
    """Return *token* as a finite float, or None if it is not a plain ASCII number."""
    if not _NUMBER.fullmatch(token):
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def _match_delimited(line: str) -> Parts | None:
    """Split on runs of whitespace, '/', '.', or '-' and keep numeric tokens."""
    numbers = [n for n in (_to_number(t) for t in _DELIMITERS.split(line)) if n is not None]
    if len(numbers) != 3:
        return None
    inf, rng, cav = numbers
    return inf, rng, cav


def _match_compact(line: str) -> Parts | None:
    """Treat a bare three-digit line as one digit per unit class."""
    if len(line) != _COMPACT_LENGTH or not all(c in "0123456789" for c in line):
        return None
    inf, rng, cav = (float(c) for c in line)
    return inf, rng, cav


_SHAPES: tuple[ShapeMatcher, ...] = (_match_delimited, _match_compact)


def _extract_parts(line: str) -> Parts | None:
    for shape in _SHAPES:
        parts = shape(line)
        if parts is not None:
            return parts
    return None


# ── Public API ─────────────────────────────────────────────────────────────────


def parse(text: str) -> tuple[CompositionRatio, ...]:
    """
    Parse composition text into normalized ratio records.

    Parameters
    ----------
    text:
        Raw input, one composition per line.

    Returns
    -------
    tuple[CompositionRatio, ...]
        Records for surviving lines in input order. Ids are ``custom-<n>``
        where ``n`` is the line's index among all input lines, blank ones
        included.
    """
    compositions: list[CompositionRatio] = []

    for index, raw_line in enumerate(text.split("\n")):
        line = raw_line.strip()
        if not line:
            continue

        parts = _extract_parts(line)
        if parts is None:
            logger.debug("discarding line %d %r: no-shape", index, line)
            continue
        total = sum(parts)
        if total == 0:
            logger.debug("discarding line %d %r: zero-total", index, line)
            continue
        if not math.isfinite(total):
            logger.debug("discarding line %d %r: non-finite-total", index, line)
            continue

        compositions.append(
            CompositionRatio(
                id=f"custom-{index}",
                label=line.upper(),
                ratios=ClassRatios.from_parts(*parts),
            )
        )

    return tuple(compositions)
