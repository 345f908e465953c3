"""
Measurement Set schema: the sparse record of known display attributes.

Nine optional fields, each either known (a value satisfying its domain
constraint) or unknown (None). Fields are validated independently; no
rule makes them agree with each other, e.g. a stored ratio need not
equal the stored pixel width over pixel height.

MeasurementSet is frozen. Updates go through merged(), which returns a new
set, so a resolver always works over an immutable snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import Enum

from screencalc.errors import ValidationError
from screencalc.geometry.conversion import LengthUnit, length_factor
from screencalc.geometry.validation import is_positive_int, is_positive_number


class Quantity(str, Enum):
    """The nine display quantities; values are the MeasurementSet field names."""

    PIXEL_WIDTH = "pixel_width"
    PIXEL_HEIGHT = "pixel_height"
    PIXEL_COUNT = "pixel_count"
    PIXEL_DENSITY = "pixel_density"
    RATIO = "ratio"
    PHYSICAL_WIDTH = "physical_width"
    PHYSICAL_HEIGHT = "physical_height"
    AREA = "area"
    DIAGONAL_SIZE = "diagonal_size"


PIXEL_QUANTITIES: frozenset[Quantity] = frozenset(
    {Quantity.PIXEL_WIDTH, Quantity.PIXEL_HEIGHT, Quantity.PIXEL_COUNT}
)
LENGTH_QUANTITIES: frozenset[Quantity] = frozenset(
    {Quantity.PHYSICAL_WIDTH, Quantity.PHYSICAL_HEIGHT, Quantity.DIAGONAL_SIZE}
)


@dataclass(frozen=True)
class MeasurementSet:
    """
    Known attributes of one rectangular display.

    Pixel fields must be positive integers (integral floats are accepted);
    diagonal_size must be a non-negative number; every other field must be
    a positive finite number. None means unknown.
    """

    pixel_width: float | None = None
    pixel_height: float | None = None
    pixel_count: float | None = None
    pixel_density: float | None = None
    ratio: float | None = None
    physical_width: float | None = None
    physical_height: float | None = None
    area: float | None = None
    diagonal_size: float | None = None

    def __post_init__(self) -> None:
        for quantity in Quantity:
            value = getattr(self, quantity.value)
            if value is None:
                continue
            if quantity in PIXEL_QUANTITIES:
                if not is_positive_int(value):
                    raise ValidationError(
                        f"{quantity.value} must be a positive integer, got {value!r}"
                    )
            elif quantity is Quantity.DIAGONAL_SIZE:
                if not (is_positive_number(value) or _is_zero(value)):
                    raise ValidationError(
                        f"diagonal_size must be a non-negative number, got {value!r}"
                    )
            elif not is_positive_number(value):
                raise ValidationError(f"{quantity.value} must be a positive number, got {value!r}")

    # ── Construction and update ───────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> MeasurementSet:
        """Build a set from a partial mapping of field name → value."""
        return cls().merged(values)

    def merged(self, values: Mapping[str, object], replace: bool = False) -> MeasurementSet:
        """
        Return a new set with *values* merged over this one.

        Args:
            values: Field name (or Quantity) → value. None values are skipped.
            replace: If True, every field not supplied becomes unknown.

        Raises:
            ValidationError: If a field name is unrecognized or a value fails
                its domain constraint. A diagonal_size that is not a positive
                number is stored as 0 instead of rejected.
        """
        unknown = [name for name in values if not _is_field_name(name)]
        if unknown:
            raise ValidationError(
                "unrecognized measurement field(s): " + ", ".join(sorted(map(str, unknown)))
            )

        fields: dict[str, object] = {} if replace else asdict(self)
        for name, value in values.items():
            if value is None:
                continue
            quantity = Quantity(name)
            if quantity is Quantity.DIAGONAL_SIZE and not is_positive_number(value):
                value = 0
            fields[quantity.value] = value
        return MeasurementSet(**fields)  # type: ignore[arg-type]

    def converted(self, from_unit: LengthUnit, to_unit: LengthUnit) -> MeasurementSet:
        """
        Express the physical fields in *to_unit* instead of *from_unit*.

        Lengths scale by the unit factor, area by its square and pixel
        density by its inverse. Pixel fields and ratio are unit-free.
        """
        factor = length_factor(from_unit, to_unit)
        fields = asdict(self)
        for quantity in LENGTH_QUANTITIES:
            if fields[quantity.value] is not None:
                fields[quantity.value] *= factor
        if self.area is not None:
            fields[Quantity.AREA.value] = self.area * factor**2
        if self.pixel_density is not None:
            fields[Quantity.PIXEL_DENSITY.value] = self.pixel_density / factor
        return MeasurementSet(**fields)

    # ── Query ─────────────────────────────────────────────────────────────────

    def get(self, quantity: Quantity) -> float | None:
        """Stored value of *quantity*, or None if unknown."""
        return getattr(self, Quantity(quantity).value)

    def known(self) -> dict[Quantity, float]:
        """Known fields only, keyed by Quantity."""
        return {q: getattr(self, q.value) for q in Quantity if getattr(self, q.value) is not None}


def _is_field_name(name: object) -> bool:
    try:
        Quantity(name)
    except ValueError:
        return False
    return True


def _is_zero(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0
