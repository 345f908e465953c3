"""Exception types shared across the screencalc package."""

from __future__ import annotations


class ScreenCalcError(Exception):
    """Base class for errors raised by screencalc."""


class ValidationError(ScreenCalcError, ValueError):
    """Raised when a measurement value fails its domain constraint or a field name is unknown."""
