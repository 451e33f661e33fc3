# test_color.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from styledtext.style import Color, ColorParseError, BLACK


class TestColor:

    def test_css_opaque(self):
        assert Color(255, 0, 0).to_css() == "rgba(255, 0, 0, 1)"

    def test_css_fractional_alpha(self):
        assert Color(1, 2, 3, 0.25).to_css() == "rgba(1, 2, 3, 0.25)"

    def test_black_default(self):
        assert BLACK == Color(0, 0, 0, 1.0)

    @pytest.mark.parametrize("kwargs", [
        {"red": 256, "green": 0, "blue": 0},
        {"red": 0, "green": -1, "blue": 0},
        {"red": 0, "green": 0, "blue": 0, "alpha": 1.5},
        {"red": 12.5, "green": 0, "blue": 0},
        {"red": 0, "green": True, "blue": 0},
    ])
    def test_out_of_range(self, kwargs):
        with pytest.raises(ValueError):
            Color(**kwargs)

    def test_parse_hex(self):
        assert Color.parse("#00ff80") == Color(0, 255, 128)

    def test_parse_rgb_with_alpha(self):
        assert Color.parse("rgb(10,20,30)", alpha=0.5) == Color(10, 20, 30, 0.5)

    def test_parse_error(self):
        with pytest.raises(ColorParseError):
            Color.parse("not-a-color")

    def test_parse_error_is_value_error(self):
        assert issubclass(ColorParseError, ValueError)

    def test_to_rich(self):
        assert tuple(Color(10, 20, 30).to_rich().get_truecolor()) == (10, 20, 30)

    def test_css_small_alpha_is_plain_decimal(self):
        assert Color(10, 20, 30, 0.00001).to_css() == "rgba(10, 20, 30, 0.00001)"
