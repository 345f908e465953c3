"""
Tests for the ScreenCalc facade.

Device figures (iPad Air, Asus VivoTab, Lumia 920, Nexus 7, Surface Pro,
iPhone 5, iPad mini Retina) are published manufacturer figures; expected
values are rounded the way the manufacturers round them.
"""

import math

import pytest

from screencalc.engine.ratio import SimpleRatio
from screencalc.engine.screen import ScreenCalc
from screencalc.errors import ValidationError
from screencalc.geometry.conversion import LengthUnit
from screencalc.schemas.measurements import MeasurementSet, Quantity

_GETTERS = (
    "get_pixel_width",
    "get_pixel_height",
    "get_pixel_count",
    "get_pixel_density",
    "get_ratio",
    "get_physical_width",
    "get_physical_height",
    "get_area",
    "get_diagonal_size",
)


class TestConstruction:
    def test_without_properties(self):
        screen = ScreenCalc()
        assert screen.measurements == MeasurementSet()

    def test_with_multiple_properties(self):
        screen = ScreenCalc({"pixel_width": 1920, "pixel_height": 1080, "diagonal_size": 10.6})
        assert screen.measurements.diagonal_size == 10.6

    def test_rejects_unrecognized_property(self):
        with pytest.raises(ValidationError):
            ScreenCalc({"invalidProperty": 123})

    def test_from_measurements(self):
        ms = MeasurementSet(ratio=1.5)
        assert ScreenCalc.from_measurements(ms).measurements is ms


class TestSetData:
    def test_merge(self):
        screen = ScreenCalc({"pixel_width": 2048})
        screen.set_data({"pixel_height": 1536})
        assert screen.get_ratio() == pytest.approx(4 / 3)

    def test_replace_resets_unpassed_properties(self):
        screen = ScreenCalc({"pixel_count": 1000})
        screen.set_data({"pixel_width": 1024}, replace=True)
        assert screen.get_pixel_count() is None
        assert screen.get_pixel_width() == 1024

    def test_invalid_update_keeps_previous_state(self):
        screen = ScreenCalc({"pixel_width": 1024})
        with pytest.raises(ValidationError, match="pixel_height must be a positive integer"):
            screen.set_data({"pixel_height": -768})
        assert screen.measurements == MeasurementSet(pixel_width=1024)


class TestEmptyScreen:
    @pytest.mark.parametrize("getter", _GETTERS)
    def test_every_getter_is_unknown(self, getter):
        assert getattr(ScreenCalc(), getter)() is None

    def test_ratio_forms_are_unknown(self):
        screen = ScreenCalc()
        assert screen.get_simple_ratio() is None
        assert screen.get_string_ratio() is None
        assert screen.get_pixel_ratio_label() is None


class TestPixelWidth:
    def test_pixel_count_and_ratio(self):
        screen = ScreenCalc({"ratio": 1920 / 1080, "pixel_count": 1920 * 1080})
        assert screen.get_pixel_width() == pytest.approx(1920)

    def test_physical_width_and_density(self):
        ipad_air = ScreenCalc({"physical_width": 7.76, "pixel_density": 264})
        assert math.floor(ipad_air.get_pixel_width()) == 2048  # 2048.64


class TestPixelHeight:
    def test_pixel_count_and_ratio(self):
        screen = ScreenCalc({"ratio": 1920 / 1080, "pixel_count": 1920 * 1080})
        assert screen.get_pixel_height() == pytest.approx(1080)

    def test_physical_height_and_density(self):
        ipad_air = ScreenCalc({"physical_height": 5.82, "pixel_density": 264})
        assert round(ipad_air.get_pixel_height()) == 1536

    def test_ratio_diagonal_and_density(self):
        ipad_air = ScreenCalc({"pixel_density": 264, "ratio": 4 / 3, "diagonal_size": 9.7})
        assert round(ipad_air.get_pixel_height()) == 1536

    def test_physical_width_density_and_diagonal(self):
        netbook = ScreenCalc(
            {  # 1024x600
                "physical_width": 7.678914306769556,
                "pixel_density": 133.3521848391074,
                "diagonal_size": 8.9,
            }
        )
        assert netbook.get_pixel_height() == pytest.approx(600)


class TestPhysicalWidth:
    def test_resolution_and_diagonal(self):
        ipad_air = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536, "diagonal_size": 9.7})
        assert ipad_air.get_physical_width() == pytest.approx(7.76)

    def test_diagonal_and_ratio(self):
        asus_vivotab = ScreenCalc({"ratio": 16 / 9, "diagonal_size": 10.1})
        assert round(asus_vivotab.get_physical_width(), 2) == 8.8

    def test_area_and_ratio(self):
        screen = ScreenCalc({"area": 40 * 30, "ratio": 4 / 3})
        assert screen.get_physical_width() == pytest.approx(40)


class TestPhysicalHeight:
    def test_resolution_and_diagonal(self):
        ipad_air = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536, "diagonal_size": 9.7})
        assert ipad_air.get_physical_height() == pytest.approx(5.82)

    def test_ratio_and_physical_width(self):
        asus_vivotab = ScreenCalc({"ratio": 16 / 9, "physical_width": 8.8})
        assert round(asus_vivotab.get_physical_height(), 2) == 4.95

    def test_area_and_resolution(self):
        screen = ScreenCalc({"area": 40 * 30, "pixel_width": 1024, "pixel_height": 768})
        assert screen.get_physical_height() == pytest.approx(30)


class TestRatio:
    def test_stored_ratio(self):
        assert ScreenCalc({"ratio": 16 / 10}).get_ratio() == 16 / 10

    def test_physical_dimensions(self):
        screen = ScreenCalc({"physical_width": 16, "physical_height": 10})
        assert screen.get_ratio() == 16 / 10

    def test_pixel_dimensions(self):
        assert ScreenCalc({"pixel_width": 1600, "pixel_height": 1200}).get_ratio() == 4 / 3

    def test_full_hd(self):
        assert ScreenCalc({"pixel_width": 1920, "pixel_height": 1080}).get_ratio() == 1920 / 1080

    def test_pixel_width_physical_height_and_density(self):
        ipad_air = ScreenCalc(
            {"pixel_width": 2048, "physical_height": 5.82, "pixel_density": 1536 / 5.82}
        )
        assert round(ipad_air.get_ratio(), 2) == round(4 / 3, 2)

    def test_pixel_height_and_pixel_count(self):
        screen = ScreenCalc({"pixel_height": 1200, "pixel_count": 1600 * 1200})
        assert screen.get_ratio() == pytest.approx(4 / 3)

    def test_diagonal_and_one_physical_side(self):
        screen = ScreenCalc({"diagonal_size": 20, "physical_width": 16})  # height 12
        portrait = ScreenCalc({"diagonal_size": 30, "physical_height": 24})  # width 18
        assert screen.get_ratio() == pytest.approx(4 / 3)
        assert portrait.get_ratio() == pytest.approx(3 / 4)

    def test_area_and_one_physical_side(self):
        screen = ScreenCalc({"area": 600, "physical_width": 30})  # height 20
        portrait = ScreenCalc({"area": 750, "physical_height": 30})  # width 25
        assert screen.get_ratio() == pytest.approx(1.5)
        assert portrait.get_ratio() == pytest.approx(25 / 30)


class TestSimpleRatio:
    def test_available_ratio(self):
        assert ScreenCalc({"ratio": 5 / 9}).get_simple_ratio() == SimpleRatio(5, 9, 0)
        monitor = ScreenCalc({"pixel_width": 1920, "pixel_height": 1080})
        assert monitor.get_simple_ratio() == SimpleRatio(16, 9, 0)

    def test_unavailable_ratio(self):
        screen = ScreenCalc({"pixel_width": 1024, "physical_height": 15})
        assert screen.get_simple_ratio() is None

    def test_sixteen_by_ten(self):
        assert ScreenCalc({"ratio": 16 / 10}).get_simple_ratio() == SimpleRatio(16, 10, 0)
        assert ScreenCalc({"ratio": 10 / 16}).get_simple_ratio() == SimpleRatio(10, 16, 0)

    def test_precision(self):
        screen = ScreenCalc({"pixel_width": 1136, "pixel_height": 640})
        assert screen.get_simple_ratio(1.0e-3) == SimpleRatio(71, 40, 0)

    def test_non_zero_difference(self):
        screen = ScreenCalc({"pixel_width": 1136, "pixel_height": 640})
        assert screen.get_simple_ratio().difference == pytest.approx(0.002777777777777768)

    def test_invalid_precision(self):
        screen = ScreenCalc({"ratio": 1.5})
        with pytest.raises(ValueError, match="precision must be in"):
            screen.get_simple_ratio(1.0)

    def test_invalid_precision_with_unknown_ratio(self):
        with pytest.raises(ValueError, match="precision must be in"):
            ScreenCalc({"pixel_width": 1024}).get_simple_ratio(2.0)
        with pytest.raises(ValueError, match="precision must be in"):
            ScreenCalc().get_string_ratio(0)


class TestStringRatio:
    def test_width_height_format(self):
        assert ScreenCalc({"physical_width": 20, "physical_height": 10}).get_string_ratio() == "2:1"

    def test_full_hd(self):
        assert ScreenCalc({"pixel_width": 1920, "pixel_height": 1080}).get_string_ratio() == "16:9"

    def test_tilde_when_inexact(self):
        screen = ScreenCalc({"pixel_width": 1366, "pixel_height": 768})
        assert screen.get_string_ratio() == "~16:9"

    def test_precision(self):
        assert ScreenCalc({"ratio": 1366 / 768}).get_string_ratio(1.0e-5) == "683:384"


class TestArea:
    def test_stored_area(self):
        assert ScreenCalc({"area": 12345}).get_area() == 12345

    def test_resolution_and_diagonal(self):
        ipad_air = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536, "diagonal_size": 9.7})
        assert round(ipad_air.get_area(), 2) == 45.16

    def test_ratio_pixel_width_and_diagonal(self):
        asus_vivotab = ScreenCalc({"pixel_width": 1366, "ratio": 16 / 9, "diagonal_size": 10.1})
        assert round(asus_vivotab.get_area(), 1) == 43.6

    def test_physical_width_pixel_height_and_density(self):
        surface_pro = ScreenCalc(
            {"pixel_height": 1080, "pixel_density": 208, "physical_width": 9.2387}
        )
        assert round(surface_pro.get_area()) == 48

    def test_pixel_width_density_and_ratio(self):
        ipad_air = ScreenCalc({"pixel_width": 2048, "pixel_density": 263.92, "ratio": 2048 / 1536})
        assert round(ipad_air.get_area(), 2) == 45.16

    def test_insufficient_data(self):
        assert ScreenCalc({"pixel_width": 1024, "pixel_height": 768}).get_area() is None


class TestPixelDensity:
    def test_pixel_width_and_physical_width(self):
        lumia_920 = ScreenCalc({"pixel_width": 1280, "physical_width": 3.8587})
        assert round(lumia_920.get_pixel_density(), 1) == 331.7

    def test_pixel_height_and_physical_height(self):
        lumia_920 = ScreenCalc({"pixel_height": 768, "physical_height": 2.3152})
        assert round(lumia_920.get_pixel_density(), 1) == 331.7

    def test_resolution_and_diagonal(self):
        iphone_5 = ScreenCalc({"pixel_width": 1136, "pixel_height": 640, "diagonal_size": 4.0})
        assert round(iphone_5.get_pixel_density()) == 326

    def test_pixel_width_physical_height_and_ratio(self):
        nexus_7 = ScreenCalc({"pixel_width": 1920, "physical_height": 3.71, "ratio": 1920 / 1200})
        assert round(nexus_7.get_pixel_density(), 2) == 323.45

    def test_area_ratio_and_pixel_width(self):
        lumia_920 = ScreenCalc(
            {"area": 3.8587 * 2.3152, "ratio": 1280 / 768, "pixel_width": 1280}
        )
        assert round(lumia_920.get_pixel_density(), 1) == 331.7


class TestPixelCount:
    def test_pixel_width_and_height(self):
        screen = ScreenCalc({"pixel_width": 640, "pixel_height": 480})
        assert screen.get_pixel_count() == pytest.approx(640 * 480)

    def test_pixel_width_and_ratio(self):
        screen = ScreenCalc({"pixel_width": 640, "ratio": 4 / 3})
        assert screen.get_pixel_count() == pytest.approx(640 * 480)

    def test_stored_pixel_count(self):
        assert ScreenCalc({"pixel_count": 1000000}).get_pixel_count() == 1000000

    def test_insufficient_data(self):
        assert ScreenCalc({"pixel_width": 1024}).get_pixel_count() is None


class TestDiagonalSize:
    def test_unknown_without_diagonal_or_density(self):
        ipad_mini_retina = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536})
        assert ipad_mini_retina.get_diagonal_size() is None

    def test_calculated_once_density_is_set(self):
        ipad_mini_retina = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536})
        ipad_mini_retina.set_data({"pixel_density": 326})
        assert round(ipad_mini_retina.get_diagonal_size(), 1) == 7.9

    def test_non_numeric_diagonal_is_zero(self):
        assert ScreenCalc({"diagonal_size": "big"}).get_diagonal_size() == 0


class TestProperties:
    @pytest.mark.parametrize(
        "pixel_width,pixel_height,diagonal",
        [(1920, 1080, 24.0), (2048, 1536, 9.7), (1366, 768, 10.1), (640, 1136, 4.0), (1, 1, 1.0)],
    )
    def test_physical_sides_satisfy_pythagoras(self, pixel_width, pixel_height, diagonal):
        screen = ScreenCalc(
            {"pixel_width": pixel_width, "pixel_height": pixel_height, "diagonal_size": diagonal}
        )
        width = screen.get_physical_width()
        height = screen.get_physical_height()
        assert width**2 + height**2 == pytest.approx(diagonal**2)

    @pytest.mark.parametrize("getter", _GETTERS)
    def test_getters_are_idempotent(self, getter):
        screen = ScreenCalc({"pixel_width": 1366, "ratio": 16 / 9, "diagonal_size": 10.1})
        assert getattr(screen, getter)() == getattr(screen, getter)()

    def test_getters_do_not_mutate(self):
        screen = ScreenCalc({"pixel_width": 1366, "ratio": 16 / 9, "diagonal_size": 10.1})
        before = screen.measurements
        screen.to_dict()
        screen.get_string_ratio()
        assert screen.measurements is before


class TestBulkAndConversion:
    def test_to_dict(self):
        values = ScreenCalc({"pixel_width": 1920, "pixel_height": 1080}).to_dict()
        assert set(values) == {q.value for q in Quantity}
        assert values["pixel_count"] == pytest.approx(1920 * 1080)
        assert values["area"] is None

    def test_get_by_name(self):
        screen = ScreenCalc({"area": 600, "physical_width": 30})
        assert screen.get("ratio") == pytest.approx(1.5)
        assert screen.get(Quantity.PHYSICAL_HEIGHT) == pytest.approx(20)

    def test_convert_keeps_pixels_and_ratio(self):
        inches = ScreenCalc({"pixel_width": 2048, "pixel_height": 1536, "diagonal_size": 9.7})
        cm = inches.convert(LengthUnit.INCH, LengthUnit.CENTIMETER)
        assert cm.get_physical_width() == pytest.approx(7.76 * 2.54)
        assert cm.get_pixel_density() == pytest.approx(inches.get_pixel_density() / 2.54)
        assert cm.get_string_ratio() == "4:3"

    def test_convert_returns_new_screen(self):
        inches = ScreenCalc({"diagonal_size": 9.7})
        cm = inches.convert(LengthUnit.INCH, LengthUnit.CENTIMETER)
        assert cm is not inches
        assert inches.get_diagonal_size() == 9.7

    def test_settings_carry_over(self):
        inches = ScreenCalc({"ratio": 1.5})
        assert inches.convert(LengthUnit.INCH, LengthUnit.MILLIMETER).settings is inches.settings
