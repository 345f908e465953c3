from .measurements import LENGTH_QUANTITIES, PIXEL_QUANTITIES, MeasurementSet, Quantity

__all__ = [
    "Quantity",
    "MeasurementSet",
    "PIXEL_QUANTITIES",
    "LENGTH_QUANTITIES",
]
