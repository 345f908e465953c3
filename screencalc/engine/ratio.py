"""
Simplified and labelled forms of a display's ratio.

simple_ratio() turns a real width/height ratio into the nearest simple
integer fraction, applies the configured label aliases (8:5 is reported as
16:10), and records how far the fraction is from the true ratio.
"""

from __future__ import annotations

from dataclasses import dataclass

from screencalc.engine.resolver import resolve
from screencalc.geometry.rational import simplest_fraction
from screencalc.schemas.measurements import MeasurementSet, Quantity
from screencalc.settings.registry import RatioSettings, get_settings

# Derived pixel sides within this distance of an integer are labelled.
_INTEGRAL_TOLERANCE: float = 1e-9


@dataclass(frozen=True)
class SimpleRatio:
    """
    A ratio expressed as width:height integers.

    Attributes:
        width: Simplified width term.
        height: Simplified height term.
        difference: width/height minus the true ratio; 0 when exact.
    """

    width: int
    height: int
    difference: float

    @property
    def is_exact(self) -> bool:
        return self.difference == 0


def simple_ratio(
    ratio: float,
    precision: float | None = None,
    settings: RatioSettings | None = None,
) -> SimpleRatio:
    """
    Simplify *ratio* to an integer fraction.

    Args:
        ratio: Positive width/height ratio.
        precision: Tolerance in (0, 1); defaults to settings.default_precision.
        settings: Ratio settings; defaults to the module singleton.

    Raises:
        ValueError: If precision is outside (0, 1).
    """
    settings = settings or get_settings()
    if precision is None:
        precision = settings.default_precision

    numerator, denominator = simplest_fraction(ratio, precision)
    width, height = settings.normalize(numerator, denominator)
    return SimpleRatio(width=width, height=height, difference=(width / height) - ratio)


def format_ratio(simple: SimpleRatio) -> str:
    """Render as "W:H", with a leading "~" when the simplification is inexact."""
    text = f"{simple.width}:{simple.height}"
    return text if simple.is_exact else "~" + text


def pixel_ratio_label(
    measurements: MeasurementSet,
    settings: RatioSettings | None = None,
) -> str | None:
    """
    Label of the pixel resolution, e.g. "16:10" for 1920×1200.

    Returns None unless both pixel sides resolve to positive whole numbers.
    """
    settings = settings or get_settings()
    sides = []
    for quantity in (Quantity.PIXEL_WIDTH, Quantity.PIXEL_HEIGHT):
        value = resolve(measurements, quantity)
        if value is None or abs(value - round(value)) > _INTEGRAL_TOLERANCE:
            return None
        side = int(round(value))
        if side < 1:
            return None
        sides.append(side)
    return settings.label(sides[0], sides[1])
