"""parser — Composition Parser public API."""

from troopsplit.parser.parser import parse

__all__ = ["parse"]
