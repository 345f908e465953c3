"""
Ratio settings registry: loads the ratio simplification and labelling table
from YAML at startup, validates it, and exposes a read-only query API.

The registry is a module-level singleton; call get_settings() to obtain it.
Nothing writes to the settings after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from screencalc.geometry.rational import ratio_to_string

_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class RatioAlias:
    """Report a simplified fraction equal to *reduced* as *label* instead."""

    reduced: tuple[int, int]
    label: tuple[int, int]
    notes: str = ""

    def matches(self, numerator: int, denominator: int) -> bool:
        return numerator / denominator == self.reduced[0] / self.reduced[1]


class RatioSettings:
    """
    Immutable ratio settings.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_settings() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        data = self._load_yaml("ratios.yaml")
        self.default_precision: float = data["default_precision"]
        self.aliases: tuple[RatioAlias, ...] = tuple(
            RatioAlias(
                reduced=(entry["reduced"][0], entry["reduced"][1]),
                label=(entry["label"][0], entry["label"][1]),
                notes=entry.get("notes", "").strip(),
            )
            for entry in data.get("aliases", [])
        )
        self.label_width: int = data["label_width"]
        self.label_excluded_heights: tuple[int, ...] = tuple(data.get("label_excluded_heights", []))

        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            return yaml.safe_load(f)

    def _validate(self) -> None:
        """Raise ValueError listing every problem found in the loaded table."""
        errors: list[str] = []

        precision = self.default_precision
        if isinstance(precision, bool) or not isinstance(precision, (int, float)):
            errors.append(f"default_precision must be a number, got {precision!r}")
        elif not (0 < precision < 1):
            errors.append(f"default_precision must be in (0, 1), got {precision}")

        for alias in self.aliases:
            sides = alias.reduced + alias.label
            if not all(isinstance(s, int) and not isinstance(s, bool) and s > 0 for s in sides):
                errors.append(f"alias {alias.reduced} -> {alias.label} must use positive integers")
                continue
            if alias.reduced[0] * alias.label[1] != alias.reduced[1] * alias.label[0]:
                errors.append(f"alias {alias.reduced} -> {alias.label} changes the ratio")

        if (
            isinstance(self.label_width, bool)
            or not isinstance(self.label_width, int)
            or self.label_width <= 0
        ):
            errors.append(f"label_width must be a positive integer, got {self.label_width!r}")

        if errors:
            raise ValueError(
                "Ratio settings validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def normalize(self, numerator: int, denominator: int) -> tuple[int, int]:
        """Apply the first alias matching numerator/denominator, if any."""
        for alias in self.aliases:
            if alias.matches(numerator, denominator):
                return alias.label
        return numerator, denominator

    def label(self, width: int, height: int) -> str:
        """Render width:height with the configured ratio_to_string rule."""
        return ratio_to_string(
            width,
            height,
            label_width=self.label_width,
            excluded_heights=self.label_excluded_heights,
        )


# ── Module-level singleton ─────────────────────────────────────────────────────

_settings: RatioSettings = RatioSettings()


def get_settings() -> RatioSettings:
    """Return the module-level settings singleton."""
    return _settings
