"""
Property resolver for the inference engine.

resolve() derives one quantity from an immutable MeasurementSet. Each
quantity has a fixed priority chain of operand combinations; the first
combination whose operands are all available (stored or derived) wins, and
if none does the stored value is returned, which may itself be None.

Operand lookups recurse into the other quantities' chains. Every lookup
carries the set of quantities already being derived further up the call
stack, and a quantity on that stack counts as unavailable for the nested
combination. Each nested lookup therefore adds one quantity to the stack,
so no chain can revisit itself and every path ends on stored data.

Priority chains:

  pixel_height     (physical_height, density) ▸ (pixel_width, ratio)
                   ▸ (ratio, pixel_count) ▸ (ratio, diagonal, density)
                   ▸ (ratio, area, density) ▸ stored
  pixel_width      (physical_width, density) ▸ (pixel_height, ratio) ▸ stored
  physical_height  (pixel_height, density) ▸ (ratio, physical_width)
                   ▸ (ratio, diagonal) ▸ (ratio, area) ▸ stored
  physical_width   (pixel_width, density) ▸ (physical_height, ratio) ▸ stored
  diagonal_size    (physical_width, physical_height) ▸ stored
  pixel_density    (pixel_height, physical_height)
                   ▸ (pixel_width, physical_width) ▸ stored
  area             (physical_width, physical_height) ▸ stored
  pixel_count      (pixel_width, pixel_height) ▸ stored
  ratio            common-unit width and height ▸ stored

Missing data is a routine outcome, so every function here returns None for
it instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from screencalc.geometry.identities import (
    diagonal_from_width_and_height,
    height_from_ratio_and_area,
    height_from_ratio_and_diagonal,
    height_from_ratio_and_pixel_count,
    ratio_from_height_and_pixel_count,
    side_from_diagonal,
)
from screencalc.schemas.measurements import MeasurementSet, Quantity

log = logging.getLogger(__name__)

Q = Quantity


class _Resolution:
    """One resolve() call: the snapshot plus a memo keyed by (quantity, stack)."""

    def __init__(self, measurements: MeasurementSet) -> None:
        self.ms = measurements
        self._memo: dict[tuple[Quantity, frozenset], float | None] = {}
        self._chains: dict[Quantity, Callable[[frozenset], float | None]] = {
            Q.PIXEL_HEIGHT: self._pixel_height,
            Q.PIXEL_WIDTH: self._pixel_width,
            Q.PHYSICAL_HEIGHT: self._physical_height,
            Q.PHYSICAL_WIDTH: self._physical_width,
            Q.DIAGONAL_SIZE: self._diagonal_size,
            Q.PIXEL_DENSITY: self._pixel_density,
            Q.AREA: self._area,
            Q.PIXEL_COUNT: self._pixel_count,
            Q.RATIO: self._ratio,
        }

    def get(self, quantity: Quantity, stack: frozenset = frozenset()) -> float | None:
        """Value of *quantity*, treating anything already on *stack* as unavailable."""
        if quantity in stack:
            return None
        key = (quantity, stack)
        if key not in self._memo:
            self._memo[key] = self._chains[quantity](stack | {quantity})
        return self._memo[key]

    def _stored(self, quantity: Quantity) -> float | None:
        return self.ms.get(quantity)

    # ── Pixel dimensions ──────────────────────────────────────────────────────

    def _pixel_height(self, stack: frozenset) -> float | None:
        physical_height = self.get(Q.PHYSICAL_HEIGHT, stack)
        if physical_height is not None:
            density = self.get(Q.PIXEL_DENSITY, stack)
            if density is not None:
                return _derived(Q.PIXEL_HEIGHT, "physical_height × density", physical_height * density)

        ratio = self.get(Q.RATIO, stack)
        if ratio is None:
            return self._stored(Q.PIXEL_HEIGHT)

        pixel_width = self.get(Q.PIXEL_WIDTH, stack)
        if pixel_width is not None:
            return _derived(Q.PIXEL_HEIGHT, "pixel_width / ratio", pixel_width / ratio)

        pixel_count = self.get(Q.PIXEL_COUNT, stack)
        if pixel_count is not None:
            return _derived(
                Q.PIXEL_HEIGHT,
                "ratio, pixel_count",
                height_from_ratio_and_pixel_count(ratio, pixel_count),
            )

        density = self.get(Q.PIXEL_DENSITY, stack)
        if density is not None:
            diagonal = self.get(Q.DIAGONAL_SIZE, stack)
            if diagonal:  # a coerced zero diagonal describes no rectangle
                return _derived(
                    Q.PIXEL_HEIGHT,
                    "ratio, diagonal_size, density",
                    height_from_ratio_and_diagonal(ratio, diagonal) * density,
                )
            area = self.get(Q.AREA, stack)
            if area is not None:
                return _derived(
                    Q.PIXEL_HEIGHT,
                    "ratio, area, density",
                    height_from_ratio_and_area(ratio, area) * density,
                )

        return self._stored(Q.PIXEL_HEIGHT)

    def _pixel_width(self, stack: frozenset) -> float | None:
        physical_width = self.get(Q.PHYSICAL_WIDTH, stack)
        if physical_width is not None:
            density = self.get(Q.PIXEL_DENSITY, stack)
            if density is not None:
                return _derived(Q.PIXEL_WIDTH, "physical_width × density", physical_width * density)

        pixel_height = self.get(Q.PIXEL_HEIGHT, stack)
        if pixel_height is not None:
            ratio = self.get(Q.RATIO, stack)
            if ratio is not None:
                return _derived(Q.PIXEL_WIDTH, "pixel_height × ratio", pixel_height * ratio)

        return self._stored(Q.PIXEL_WIDTH)

    # ── Physical dimensions ───────────────────────────────────────────────────

    def _physical_height(self, stack: frozenset) -> float | None:
        pixel_height = self.get(Q.PIXEL_HEIGHT, stack)
        if pixel_height is not None:
            density = self.get(Q.PIXEL_DENSITY, stack)
            if density is not None:
                return _derived(Q.PHYSICAL_HEIGHT, "pixel_height / density", pixel_height / density)

        ratio = self.get(Q.RATIO, stack)
        if ratio is None:
            return self._stored(Q.PHYSICAL_HEIGHT)

        physical_width = self.get(Q.PHYSICAL_WIDTH, stack)
        if physical_width is not None:
            return _derived(Q.PHYSICAL_HEIGHT, "physical_width / ratio", physical_width / ratio)

        diagonal = self.get(Q.DIAGONAL_SIZE, stack)
        if diagonal:  # a coerced zero diagonal describes no rectangle
            return _derived(
                Q.PHYSICAL_HEIGHT,
                "ratio, diagonal_size",
                height_from_ratio_and_diagonal(ratio, diagonal),
            )

        area = self.get(Q.AREA, stack)
        if area is not None:
            return _derived(Q.PHYSICAL_HEIGHT, "ratio, area", height_from_ratio_and_area(ratio, area))

        return self._stored(Q.PHYSICAL_HEIGHT)

    def _physical_width(self, stack: frozenset) -> float | None:
        pixel_width = self.get(Q.PIXEL_WIDTH, stack)
        if pixel_width is not None:
            density = self.get(Q.PIXEL_DENSITY, stack)
            if density is not None:
                return _derived(Q.PHYSICAL_WIDTH, "pixel_width / density", pixel_width / density)

        physical_height = self.get(Q.PHYSICAL_HEIGHT, stack)
        if physical_height is not None:
            ratio = self.get(Q.RATIO, stack)
            if ratio is not None:
                return _derived(Q.PHYSICAL_WIDTH, "physical_height × ratio", physical_height * ratio)

        return self._stored(Q.PHYSICAL_WIDTH)

    # ── Products and combinations ─────────────────────────────────────────────

    def _diagonal_size(self, stack: frozenset) -> float | None:
        width, height = self._physical_pair(stack)
        if width is not None and height is not None:
            return _derived(
                Q.DIAGONAL_SIZE,
                "physical_width, physical_height",
                diagonal_from_width_and_height(width, height),
            )
        return self._stored(Q.DIAGONAL_SIZE)

    def _area(self, stack: frozenset) -> float | None:
        width, height = self._physical_pair(stack)
        if width is not None and height is not None:
            return _derived(Q.AREA, "physical_width × physical_height", width * height)
        return self._stored(Q.AREA)

    def _physical_pair(self, stack: frozenset) -> tuple[float | None, float | None]:
        width = self.get(Q.PHYSICAL_WIDTH, stack)
        if width is None:
            return None, None
        return width, self.get(Q.PHYSICAL_HEIGHT, stack)

    def _pixel_density(self, stack: frozenset) -> float | None:
        pixel_height = self.get(Q.PIXEL_HEIGHT, stack)
        if pixel_height is not None:
            physical_height = self.get(Q.PHYSICAL_HEIGHT, stack)
            if physical_height is not None:
                return _derived(
                    Q.PIXEL_DENSITY, "pixel_height / physical_height", pixel_height / physical_height
                )

        pixel_width = self.get(Q.PIXEL_WIDTH, stack)
        if pixel_width is not None:
            physical_width = self.get(Q.PHYSICAL_WIDTH, stack)
            if physical_width is not None:
                return _derived(
                    Q.PIXEL_DENSITY, "pixel_width / physical_width", pixel_width / physical_width
                )

        return self._stored(Q.PIXEL_DENSITY)

    def _pixel_count(self, stack: frozenset) -> float | None:
        pixel_width = self.get(Q.PIXEL_WIDTH, stack)
        if pixel_width is not None:
            pixel_height = self.get(Q.PIXEL_HEIGHT, stack)
            if pixel_height is not None:
                return _derived(Q.PIXEL_COUNT, "pixel_width × pixel_height", pixel_width * pixel_height)
        return self._stored(Q.PIXEL_COUNT)

    def _ratio(self, stack: frozenset) -> float | None:
        pair = width_and_height(self.ms)
        if pair is not None:
            width, height = pair
            return _derived(Q.RATIO, "common-unit width / height", width / height)
        return self._stored(Q.RATIO)


def _derived(quantity: Quantity, via: str, value: float) -> float:
    log.debug("%s = %r from %s", quantity.value, value, via)
    return value


# ── Common-unit width and height ──────────────────────────────────────────────


def width_and_height(ms: MeasurementSet) -> tuple[float, float] | None:
    """
    Width and height in matching units, from stored values only.

    Tried in order: pixel pair, physical pair, density-mediated mixes of one
    pixel and one physical side, pixel-count mediated, diagonal split, area
    split. Returns None if no combination is fully known.
    """
    if ms.pixel_width is not None and ms.pixel_height is not None:
        return ms.pixel_width, ms.pixel_height
    if ms.physical_width is not None and ms.physical_height is not None:
        return ms.physical_width, ms.physical_height

    if ms.pixel_density is not None:
        if ms.pixel_width is not None and ms.physical_height is not None:
            return ms.pixel_width / ms.pixel_density, ms.physical_height
        if ms.pixel_height is not None and ms.physical_width is not None:
            return ms.physical_width, ms.pixel_height / ms.pixel_density

    if ms.pixel_count is not None:
        if ms.pixel_height is not None:
            ratio = ratio_from_height_and_pixel_count(ms.pixel_height, ms.pixel_count)
            return ms.pixel_height * ratio, ms.pixel_height
        if ms.pixel_width is not None:
            return ms.pixel_width, ms.pixel_count / ms.pixel_width

    if ms.diagonal_size is not None:
        if ms.physical_width is not None:
            height = side_from_diagonal(ms.diagonal_size, ms.physical_width)
            if height is not None:
                return ms.physical_width, height
        elif ms.physical_height is not None:
            width = side_from_diagonal(ms.diagonal_size, ms.physical_height)
            if width is not None:
                return width, ms.physical_height

    if ms.area is not None:
        if ms.physical_width is not None:
            return ms.physical_width, ms.area / ms.physical_width
        if ms.physical_height is not None:
            return ms.area / ms.physical_height, ms.physical_height

    return None


# ── Public API ────────────────────────────────────────────────────────────────


def resolve(measurements: MeasurementSet, quantity: Quantity) -> float | None:
    """Derive *quantity* from *measurements*, or return None if it cannot be known."""
    return _Resolution(measurements).get(Quantity(quantity))


def resolve_all(measurements: MeasurementSet) -> dict[Quantity, float | None]:
    """Every quantity resolved over the same snapshot."""
    return {quantity: resolve(measurements, quantity) for quantity in Quantity}


def pixel_width(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PIXEL_WIDTH)


def pixel_height(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PIXEL_HEIGHT)


def pixel_count(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PIXEL_COUNT)


def pixel_density(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PIXEL_DENSITY)


def ratio(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.RATIO)


def physical_width(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PHYSICAL_WIDTH)


def physical_height(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.PHYSICAL_HEIGHT)


def area(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.AREA)


def diagonal_size(ms: MeasurementSet) -> float | None:
    return resolve(ms, Q.DIAGONAL_SIZE)
