"""
Unit tests for unit conversions (program_docx/units.py)
"""

import pytest

from program_docx.units import (
    cm_to_twips,
    column_width_pct,
    line_spacing_to_units,
    pt_to_half_points,
)


class TestCentimetersToTwips:

    @pytest.mark.parametrize("cm, twips", [
        (2, 1134),
        (3, 1701),
        (1.5, 851),   # 850.5 rounds half up
        (1, 567),
    ])
    def test_conversion(self, cm, twips):
        assert cm_to_twips(cm) == twips

    def test_returns_int(self):
        assert isinstance(cm_to_twips(2.0), int)


class TestFontSizes:

    def test_body_and_heading_sizes(self):
        assert pt_to_half_points(14) == 28
        assert pt_to_half_points(16) == 32

    def test_fractional_point_size(self):
        assert pt_to_half_points(10.5) == 21

    def test_page_number_size(self):
        assert pt_to_half_points(10) == 20


class TestLineSpacing:

    @pytest.mark.parametrize("multiplier, units", [
        (1, 240),
        (1.15, 276),
        (1.5, 360),
        (2, 480),
    ])
    def test_conversion(self, multiplier, units):
        assert line_spacing_to_units(multiplier) == units


class TestColumnWidth:

    def test_even_split(self):
        assert column_width_pct(2) == 2500
        assert column_width_pct(4) == 1250

    def test_integer_division(self):
        assert column_width_pct(3) == 1666
        assert column_width_pct(6) == 833

    def test_zero_columns_rejected(self):
        with pytest.raises(ValueError):
            column_width_pct(0)
