"""CLI for evaluating surface modulations."""

from __future__ import annotations

import argparse
from typing import List, Optional

from .registry import available_modulations, format_modulation, parse_modulation
from .sampling import SamplingConfig, describe


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="surfmod", description="Surfmod CLI")
    parser.add_argument(
        "expression",
        nargs="?",
        help="Modulation expression, e.g. 'sine:2,1+cosine'",
    )
    parser.add_argument("--list", action="store_true", help="List available modulations")
    parser.add_argument(
        "--at",
        nargs=2,
        type=float,
        metavar=("U", "V"),
        default=None,
        help="Evaluate at a single surface coordinate",
    )
    parser.add_argument("--width", type=int, default=64, help="Grid width in samples")
    parser.add_argument("--height", type=int, default=64, help="Grid height in samples")
    args = parser.parse_args(argv)

    if args.list or not args.expression:
        print("Available modulations:")
        for name in available_modulations():
            print(f"  - {name}")
        return

    try:
        modulation = parse_modulation(args.expression)
    except ValueError as exc:
        parser.error(str(exc))

    label = format_modulation(modulation)
    if args.at is not None:
        u, v = args.at
        print(f"{label} @ ({u}, {v}) = {modulation.offset(u, v):.6f}")
        return

    config = SamplingConfig.from_args(args)
    try:
        stats = describe(modulation, config.width, config.height)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"{label} on {stats.width}x{stats.height} grid:")
    print(f"  min:  {stats.minimum:.6f}")
    print(f"  max:  {stats.maximum:.6f}")
    print(f"  mean: {stats.mean:.6f}")
    if not stats.normalized:
        print("  warning: offsets leave the normalized range [0, 1]")


if __name__ == "__main__":
    main()
