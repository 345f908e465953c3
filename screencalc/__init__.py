"""
screencalc: infer unknown display attributes from the ones you know.

Give ScreenCalc any subset of pixel width/height/count, pixel density,
ratio, physical width/height, area and diagonal size, and ask for the rest.
"""

from .engine import ScreenCalc, SimpleRatio, resolve, resolve_all
from .errors import ScreenCalcError, ValidationError
from .geometry import DEFAULT_PRECISION, LengthUnit, ratio_to_string, simplest_fraction
from .schemas import MeasurementSet, Quantity
from .settings import RatioSettings, get_settings

__all__ = [
    # engine
    "ScreenCalc",
    "SimpleRatio",
    "resolve",
    "resolve_all",
    # schemas
    "MeasurementSet",
    "Quantity",
    # errors
    "ScreenCalcError",
    "ValidationError",
    # geometry
    "DEFAULT_PRECISION",
    "LengthUnit",
    "simplest_fraction",
    "ratio_to_string",
    # settings
    "RatioSettings",
    "get_settings",
]
