"""
Geometry kernel for screen calculations.

Pure functions used by the inference engine: rectangle identities, rational
ratio approximation and labelling, input predicates, and unit conversion.
"""

from .conversion import (
    CM_PER_INCH,
    MM_PER_INCH,
    LengthUnit,
    cm_to_inches,
    inches_to_cm,
    length_factor,
    ppcm_to_ppi,
    ppi_to_ppcm,
)
from .identities import (
    diagonal_from_width_and_height,
    height_from_ratio_and_area,
    height_from_ratio_and_diagonal,
    height_from_ratio_and_pixel_count,
    ratio_from_height_and_pixel_count,
    side_from_diagonal,
)
from .rational import DEFAULT_PRECISION, check_precision, gcd, ratio_to_string, simplest_fraction
from .validation import is_positive_int, is_positive_number

__all__ = [
    # types
    "LengthUnit",
    # identities
    "height_from_ratio_and_diagonal",
    "height_from_ratio_and_area",
    "height_from_ratio_and_pixel_count",
    "ratio_from_height_and_pixel_count",
    "diagonal_from_width_and_height",
    "side_from_diagonal",
    # rational
    "DEFAULT_PRECISION",
    "check_precision",
    "simplest_fraction",
    "gcd",
    "ratio_to_string",
    # validation
    "is_positive_int",
    "is_positive_number",
    # conversion
    "MM_PER_INCH",
    "CM_PER_INCH",
    "inches_to_cm",
    "cm_to_inches",
    "ppi_to_ppcm",
    "ppcm_to_ppi",
    "length_factor",
]
