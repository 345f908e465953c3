from .ratio import SimpleRatio, format_ratio, pixel_ratio_label, simple_ratio
from .resolver import resolve, resolve_all, width_and_height
from .screen import ScreenCalc

__all__ = [
    "ScreenCalc",
    "SimpleRatio",
    "simple_ratio",
    "format_ratio",
    "pixel_ratio_label",
    "resolve",
    "resolve_all",
    "width_and_height",
]
