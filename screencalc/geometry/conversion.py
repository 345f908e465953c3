"""
Length-unit conversion for physical display measurements.

Pixel density is pixels per chosen unit (ppi for inches, ppcm for
centimetres), so changing the unit scales lengths by a factor, areas by its
square and densities by its inverse.
"""

from __future__ import annotations

from enum import Enum

MM_PER_INCH: float = 25.4
CM_PER_INCH: float = 2.54


class LengthUnit(float, Enum):
    """Physical length unit; the value is millimetres per unit."""

    INCH = MM_PER_INCH
    CENTIMETER = 10.0
    MILLIMETER = 1.0


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimetres."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimetres to inches."""
    return cm / CM_PER_INCH


def ppi_to_ppcm(ppi: float) -> float:
    """Convert pixels per inch to pixels per centimetre."""
    return ppi / CM_PER_INCH


def ppcm_to_ppi(ppcm: float) -> float:
    """Convert pixels per centimetre to pixels per inch."""
    return ppcm * CM_PER_INCH


def length_factor(from_unit: LengthUnit, to_unit: LengthUnit) -> float:
    """Multiplier taking a length in *from_unit* to *to_unit*."""
    return from_unit.value / to_unit.value
