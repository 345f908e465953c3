"""Tests for simplified ratio forms."""

import pytest

from screencalc.engine.ratio import SimpleRatio, format_ratio, pixel_ratio_label, simple_ratio
from screencalc.schemas.measurements import MeasurementSet


class TestSimpleRatio:
    def test_exact(self):
        assert simple_ratio(1920 / 1080) == SimpleRatio(width=16, height=9, difference=0)

    def test_eight_by_five_is_reported_as_sixteen_by_ten(self):
        assert simple_ratio(16 / 10) == SimpleRatio(width=16, height=10, difference=0)
        assert simple_ratio(10 / 16) == SimpleRatio(width=10, height=16, difference=0)

    def test_inexact_difference(self):
        result = simple_ratio(1136 / 640)
        assert (result.width, result.height) == (16, 9)
        assert result.difference == pytest.approx(0.002777777777777768)
        assert not result.is_exact

    def test_explicit_precision(self):
        assert simple_ratio(1366 / 768, 1.0e-5) == SimpleRatio(683, 384, 0)

    def test_invalid_precision(self):
        with pytest.raises(ValueError, match="precision must be in"):
            simple_ratio(16 / 9, 0)

    def test_is_frozen(self):
        result = simple_ratio(4 / 3)
        with pytest.raises(AttributeError):
            result.width = 5  # type: ignore[misc]


class TestFormatRatio:
    def test_exact(self):
        assert format_ratio(SimpleRatio(16, 9, 0)) == "16:9"

    def test_inexact_has_tilde(self):
        assert format_ratio(SimpleRatio(16, 9, -0.0008680555555555802)) == "~16:9"


class TestPixelRatioLabel:
    def test_stored_resolution(self):
        assert pixel_ratio_label(MeasurementSet(pixel_width=1920, pixel_height=1200)) == "16:10"

    def test_height_three_kept(self):
        assert pixel_ratio_label(MeasurementSet(pixel_width=1280, pixel_height=768)) == "5:3"

    def test_derived_integral_resolution(self):
        ms = MeasurementSet(pixel_width=1920, ratio=16 / 10)
        assert pixel_ratio_label(ms) == "16:10"

    def test_non_integral_side(self):
        assert pixel_ratio_label(MeasurementSet(pixel_width=1921, ratio=16 / 9)) is None

    def test_unknown_resolution(self):
        assert pixel_ratio_label(MeasurementSet(pixel_width=1920)) is None

    def test_side_rounding_to_zero(self):
        ms = MeasurementSet(physical_width=1e-12, physical_height=1e-12, pixel_density=1.0)
        assert pixel_ratio_label(ms) is None
