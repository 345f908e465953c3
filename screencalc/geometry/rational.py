"""
Rational approximation of display ratios.

simplest_fraction walks the continued-fraction convergents of a real ratio
and stops at the first one within the requested precision. The precision is
scaled by the square of the convergent's denominator, so coarse precisions
collapse near-miss resolutions (1366×768) onto their marketing ratio (16:9)
while fine precisions recover the exact fraction (683:384).

Iterations grow as O(log(1/precision)) for irrational-like input.
"""

from __future__ import annotations

import math

# Yields the "expected" label for common screen resolutions.
DEFAULT_PRECISION: float = 5.0e-3


def check_precision(precision: float) -> None:
    """Raise ValueError unless *precision* lies in the open interval (0, 1)."""
    if not (0 < precision < 1):
        raise ValueError(f"precision must be in (0, 1), got {precision}")


def simplest_fraction(value: float, precision: float = DEFAULT_PRECISION) -> tuple[int, int]:
    """
    Approximate *value* by a continued-fraction convergent.

    Args:
        value: Positive real to approximate.
        precision: Tolerance in (0, 1); smaller values give larger, more exact fractions.

    Returns:
        (numerator, denominator) of the first convergent h/k whose remaining
        fractional term is at most precision × k².

    Raises:
        ValueError: If precision is outside the open interval (0, 1).
    """
    check_precision(precision)

    h_prev, h = 0, 1
    k_prev, k = 1, 0
    remaining = value
    while True:
        a = math.floor(remaining)
        h_prev, h = h, a * h + h_prev
        k_prev, k = k, a * k + k_prev
        fractional = remaining - a
        if fractional <= precision * k * k:
            return h, k
        remaining = 1 / fractional


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def ratio_to_string(
    width: int,
    height: int,
    label_width: int = 16,
    excluded_heights: tuple[int, ...] = (3,),
) -> str:
    """
    Render width:height as a reduced "W:H" label.

    After reduction, a width that divides *label_width* is scaled up to it
    (8:5 → 16:10) unless the reduced height is in *excluded_heights*, which
    keeps 4:3 and 5:3 as they are.

    Raises:
        ValueError: If either side is not a positive integer.
    """
    for name, side in (("width", width), ("height", height)):
        if isinstance(side, bool) or not isinstance(side, int) or side <= 0:
            raise ValueError(f"{name} must be a positive integer, got {side!r}")

    divisor = gcd(width, height)
    simple_width = width // divisor
    simple_height = height // divisor

    if simple_height not in excluded_heights and label_width % simple_width == 0:
        quotient = label_width // simple_width
        simple_width = label_width
        simple_height *= quotient

    return f"{simple_width}:{simple_height}"
