"""
Geometric identities relating a rectangle's ratio, height, diagonal and area.

All functions are pure. Callers guarantee the
preconditions (ratio > 0, non-negative lengths); nothing here raises.
"""

from __future__ import annotations

import math


def height_from_ratio_and_diagonal(ratio: float, diagonal: float) -> float:
    """
    Height of a rectangle from its width/height ratio and diagonal.

    With width = ratio × height, Pythagoras gives
    height² × (ratio² + 1) = diagonal².
    """
    return math.sqrt(diagonal**2 / (ratio**2 + 1))


def height_from_ratio_and_area(ratio: float, area: float) -> float:
    """Height from ratio and area: height × (ratio × height) = area."""
    return math.sqrt(area / ratio)


def height_from_ratio_and_pixel_count(ratio: float, pixel_count: float) -> float:
    """Pixel height from ratio and total pixel count (same form as the area case)."""
    return math.sqrt(pixel_count / ratio)


def ratio_from_height_and_pixel_count(height: float, pixel_count: float) -> float:
    """Width/height ratio from a height and the total pixel count."""
    return pixel_count / height**2


def diagonal_from_width_and_height(width: float, height: float) -> float:
    """Diagonal of a width × height rectangle."""
    return math.hypot(width, height)


def side_from_diagonal(diagonal: float, side: float) -> float | None:
    """
    The remaining side of a rectangle given its diagonal and one side.

    Returns None when side >= diagonal, since no rectangle with a positive
    remaining side exists.
    """
    remaining_sq = diagonal**2 - side**2
    if remaining_sq <= 0:
        return None
    return math.sqrt(remaining_sq)
