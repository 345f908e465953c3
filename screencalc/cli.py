"""
Command-line front end.

    screencalc --pixel-width 1920 --pixel-height 1080 --diagonal-size 24

prints every quantity that can be resolved from the options given, followed
by the simplified ratio string and the resolution label.
"""

from __future__ import annotations

import argparse
import logging
import sys

from screencalc.engine.screen import ScreenCalc
from screencalc.errors import ScreenCalcError
from screencalc.geometry.conversion import LengthUnit
from screencalc.schemas.measurements import PIXEL_QUANTITIES, Quantity

_UNITS: dict[str, LengthUnit] = {
    "in": LengthUnit.INCH,
    "cm": LengthUnit.CENTIMETER,
    "mm": LengthUnit.MILLIMETER,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screencalc",
        description="Calculate unknown display properties from the known ones.",
    )
    for quantity in Quantity:
        parser.add_argument(
            "--" + quantity.value.replace("_", "-"),
            dest=quantity.value,
            type=int if quantity in PIXEL_QUANTITIES else float,
            default=None,
            metavar="N" if quantity in PIXEL_QUANTITIES else "X",
        )
    parser.add_argument(
        "--precision", type=float, default=None, help="Ratio simplification tolerance in (0, 1)"
    )
    parser.add_argument(
        "--unit", choices=sorted(_UNITS), default="in", help="Unit of the physical inputs"
    )
    parser.add_argument(
        "--to-unit", choices=sorted(_UNITS), default=None, help="Unit to report physical values in"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each derivation")
    return parser


def _format(value: float | None) -> str:
    if value is None:
        return "unknown"
    return f"{value:.6g}"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    properties = {q.value: getattr(args, q.value) for q in Quantity}
    try:
        screen = ScreenCalc(properties)
        if args.to_unit is not None:
            screen = screen.convert(_UNITS[args.unit], _UNITS[args.to_unit])
        values = screen.to_dict()
        ratio_string = screen.get_string_ratio(args.precision)
        label = screen.get_pixel_ratio_label()
    except (ScreenCalcError, ValueError) as exc:
        print(f"screencalc: error: {exc}", file=sys.stderr)
        return 2

    for name, value in values.items():
        print(f"{name}: {_format(value)}")
    print(f"ratio_string: {ratio_string or 'unknown'}")
    print(f"pixel_ratio_label: {label or 'unknown'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
