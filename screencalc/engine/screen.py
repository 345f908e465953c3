"""
ScreenCalc: stateful front end to the inference engine.

A ScreenCalc owns one MeasurementSet. set_data() is its only mutator; every
getter resolves against the current immutable snapshot and never changes
state, so repeated calls without an update return identical values.

Getters return None when the quantity can be neither derived nor found
stored. An instance is meant for a single owner; callers sharing one across
threads must serialize access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from screencalc.engine import resolver
from screencalc.engine.ratio import SimpleRatio, format_ratio, pixel_ratio_label, simple_ratio
from screencalc.geometry.conversion import LengthUnit
from screencalc.geometry.rational import check_precision
from screencalc.schemas.measurements import MeasurementSet, Quantity
from screencalc.settings.registry import RatioSettings, get_settings

log = logging.getLogger(__name__)


class ScreenCalc:
    """
    Stores what is known about a display and calculates the rest on demand.

    Example:
        >>> ScreenCalc({"pixel_width": 1920, "pixel_height": 1080}).get_string_ratio()
        '16:9'
    """

    def __init__(
        self,
        properties: Mapping[str, object] | None = None,
        *,
        settings: RatioSettings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._measurements = MeasurementSet()
        if properties is not None:
            self.set_data(properties)

    @classmethod
    def from_measurements(
        cls,
        measurements: MeasurementSet,
        *,
        settings: RatioSettings | None = None,
    ) -> ScreenCalc:
        screen = cls(settings=settings)
        screen._measurements = measurements
        return screen

    @property
    def measurements(self) -> MeasurementSet:
        """The current immutable snapshot."""
        return self._measurements

    @property
    def settings(self) -> RatioSettings:
        return self._settings

    def set_data(self, properties: Mapping[str, object], replace: bool = False) -> None:
        """
        Merge new known values into the measurement set.

        Args:
            properties: Field name → value for the quantities being set.
            replace: If True, quantities not passed become unknown.

        Raises:
            ValidationError: On an unrecognized field or invalid value. The
                previous state is kept.
        """
        self._measurements = self._measurements.merged(properties, replace=replace)
        log.debug("measurement set now %s", self._measurements.known())

    # ── Quantity getters ──────────────────────────────────────────────────────

    def get_pixel_width(self) -> float | None:
        return resolver.pixel_width(self._measurements)

    def get_pixel_height(self) -> float | None:
        return resolver.pixel_height(self._measurements)

    def get_pixel_count(self) -> float | None:
        """Total pixels (pixel width × pixel height)."""
        return resolver.pixel_count(self._measurements)

    def get_pixel_density(self) -> float | None:
        """Pixels per physical unit: ppi if lengths are inches, ppcm if centimetres."""
        return resolver.pixel_density(self._measurements)

    def get_ratio(self) -> float | None:
        """Width divided by height, e.g. ~1.78 for 1920×1080."""
        return resolver.ratio(self._measurements)

    def get_physical_width(self) -> float | None:
        return resolver.physical_width(self._measurements)

    def get_physical_height(self) -> float | None:
        return resolver.physical_height(self._measurements)

    def get_area(self) -> float | None:
        """Physical area in square units."""
        return resolver.area(self._measurements)

    def get_diagonal_size(self) -> float | None:
        return resolver.diagonal_size(self._measurements)

    # ── Ratio forms ───────────────────────────────────────────────────────────

    def get_simple_ratio(self, precision: float | None = None) -> SimpleRatio | None:
        """
        The ratio as a simple integer fraction.

        A 1366×768 display gives SimpleRatio(16, 9, difference≈-0.00087) at the
        default precision and SimpleRatio(683, 384, 0) at precision 1e-6.

        Args:
            precision: Tolerance in (0, 1); smaller is more exact. Defaults to
                the settings' default_precision (5.0e-3).

        Raises:
            ValueError: If precision is outside (0, 1), even when the ratio
                is unknown.
        """
        if precision is not None:
            check_precision(precision)
        ratio = self.get_ratio()
        if ratio is None:
            return None
        return simple_ratio(ratio, precision, self._settings)

    def get_string_ratio(self, precision: float | None = None) -> str | None:
        """The simple ratio as "W:H", prefixed with "~" when inexact."""
        simple = self.get_simple_ratio(precision)
        if simple is None:
            return None
        return format_ratio(simple)

    def get_pixel_ratio_label(self) -> str | None:
        """Resolution label such as "16:10" for 1920×1200, or None."""
        return pixel_ratio_label(self._measurements, self._settings)

    # ── Bulk and conversion ───────────────────────────────────────────────────

    def to_dict(self) -> dict[str, float | None]:
        """Every quantity, resolved, keyed by field name."""
        return {q.value: value for q, value in resolver.resolve_all(self._measurements).items()}

    def get(self, quantity: Quantity | str) -> float | None:
        """Resolve a quantity by name."""
        return resolver.resolve(self._measurements, Quantity(quantity))

    def convert(self, from_unit: LengthUnit, to_unit: LengthUnit) -> ScreenCalc:
        """A new ScreenCalc with the physical fields expressed in *to_unit*."""
        return ScreenCalc.from_measurements(
            self._measurements.converted(from_unit, to_unit), settings=self._settings
        )
