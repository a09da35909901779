"""
Command-line front end: print troop breakdowns for a set of compositions.

    troopsplit --fill 200000 --preset 90/10 --file comps.txt
    echo "7 11 2" | troopsplit --file -

Without --file the seed compositions are used.
"""

from __future__ import annotations

import argparse
import logging
import sys

from troopsplit.api.plan import plan_troops
from troopsplit.presets.registry import get_registry
from troopsplit.writer.formatting import format_count
from troopsplit.writer.writer import TextWriter, WriterInput


def _build_parser() -> argparse.ArgumentParser:
    registry = get_registry()

    parser = argparse.ArgumentParser(
        prog="troopsplit",
        description="Split a troop fill total across tiers and unit classes",
    )
    parser.add_argument(
        "--fill",
        type=int,
        choices=registry.fill_options,
        default=registry.default_fill_total,
        help=f"Troops per composition (default: {registry.default_fill_total})",
    )
    parser.add_argument(
        "--preset",
        choices=[c.id for c in registry.tier_splits],
        default=registry.default_tier_split.id,
        help=f"High/low tier split (default: {registry.default_tier_split.id})",
    )
    parser.add_argument(
        "--file",
        default=None,
        help='Read compositions from a file, or "-" for stdin (default: seed compositions)',
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="Print the available presets and fill totals, then exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_text(path: str | None) -> str | None:
    if path is None:
        return None
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _print_presets() -> None:
    registry = get_registry()
    print("Tier splits:")
    for config in registry.tier_splits:
        marker = "*" if config.id == registry.default_tier_split.id else " "
        print(f" {marker} {config.label}")
    print("Fill totals:")
    for value in registry.fill_options:
        marker = "*" if value == registry.default_fill_total else " "
        print(f" {marker} {format_count(value)}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        _print_presets()
        return 0

    try:
        text = _read_text(args.file)
    except OSError as exc:
        print(f"troopsplit: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    plan = plan_troops(text, fill_total=args.fill, preset_id=args.preset)
    output = TextWriter().write(
        WriterInput(entries=tuple((e.composition, e.allocation) for e in plan.entries))
    )
    print(f"Troops: {format_count(plan.fill_total)} @ {plan.config.label}")
    print()
    print(output.full_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
