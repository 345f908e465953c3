"""
Input predicates for measurement values.

Pixel fields must be positive integers; every other field must be a positive
finite number. Booleans and strings are never numbers here, even though bool
is an int subclass in Python.
"""

from __future__ import annotations

import math


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_positive_number(value: object) -> bool:
    """True for a finite number strictly greater than zero that fits in a float."""
    if not _is_real(value):
        return False
    try:
        finite = math.isfinite(value)  # type: ignore[arg-type]
    except OverflowError:
        return False
    return finite and value > 0  # type: ignore[operator]


def is_positive_int(value: object) -> bool:
    """True for a positive integer, including integral floats such as 2.0."""
    if not is_positive_number(value):
        return False
    if isinstance(value, int):
        return True
    return float(value).is_integer()  # type: ignore[arg-type]
