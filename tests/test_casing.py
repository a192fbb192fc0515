"""Tests for locale-aware upper-casing and code point formatting."""

import pytest

from upper_table.casing import hex_code_point, locale_upper


def test_hex_code_point_padding():
    assert hex_code_point("i") == "0069"
    assert hex_code_point("ß") == "00df"
    assert hex_code_point("Ά") == "0386"
    assert hex_code_point("\u0fff") == "0fff"


def test_hex_code_point_rejects_bad_input():
    with pytest.raises(ValueError, match="single character"):
        hex_code_point("ab")
    with pytest.raises(ValueError, match="Basic Multilingual Plane"):
        hex_code_point("\U0001f600")


def test_default_upper_expands_sharp_s():
    assert locale_upper("ß", "de") == "SS"
    assert locale_upper("ά", "el") == "Ά"


def test_turkic_dotted_i():
    assert locale_upper("i", "tr") == "İ"
    assert locale_upper("i", "AZ") == "İ"
    assert locale_upper("i", "en") == "I"
    assert locale_upper("ı", "tr") == "I"


def test_lithuanian_drops_dot_above():
    assert locale_upper("i\u0307", "lt") == "I"
    assert locale_upper("i\u0307", "en") == "I\u0307"
