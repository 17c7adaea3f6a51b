"""Tests for the unit conversion engine."""

import unittest

from measures_converter.config import (
    INVALID_NUMBER_MESSAGE,
    MEASUREMENT_UNITS,
    NOT_AVAILABLE_MESSAGE,
)
from measures_converter.converter import (
    all_units,
    category_of,
    convert,
    convert_text,
    get_factor,
    get_to_units,
    parse_value,
)
from measures_converter.models import format_number


class TestParseValue(unittest.TestCase):
    def test_plain_numbers(self):
        self.assertEqual(parse_value("12.5"), 12.5)
        self.assertEqual(parse_value("-4"), -4.0)
        self.assertEqual(parse_value("1e3"), 1000.0)

    def test_surrounding_whitespace_ignored(self):
        self.assertEqual(parse_value("  3 "), 3.0)

    def test_invalid_input(self):
        for text in ["", "   ", "abc", "12abc", "1,5", "1_000", None]:
            self.assertIsNone(parse_value(text), f"Parsed {text!r}")

    def test_non_finite_rejected(self):
        for text in ["nan", "NaN", "inf", "-inf", "Infinity", "-Infinity"]:
            self.assertIsNone(parse_value(text), f"Parsed {text!r}")

    def test_non_ascii_digits_rejected(self):
        for text in ["\u0661\u0662", "\uff11\uff12"]:
            self.assertIsNone(parse_value(text), f"Parsed {text!r}")

    def test_non_finite_conversion_reports_invalid_number(self):
        for text in ["nan", "inf", "-Infinity", "\u0661\u0662"]:
            result = convert_text(text, "Meter", "Foot")
            self.assertEqual(result.message(), INVALID_NUMBER_MESSAGE, f"Failed for {text!r}")


class TestCategories(unittest.TestCase):
    def test_category_of(self):
        self.assertEqual(category_of("Mile"), "Length")
        self.assertEqual(category_of("Ounce"), "Weight")
        self.assertIsNone(category_of("Parsec"))

    def test_all_units_in_display_order(self):
        units = all_units()
        self.assertEqual(len(units), 9)
        self.assertEqual(units[0], "Meter")
        self.assertEqual(units[-1], "Ounce")

    def test_to_units_same_category_without_source(self):
        self.assertEqual(get_to_units("Meter"), ["Centimeter", "Kilometer", "Mile", "Foot"])
        self.assertEqual(get_to_units("Pound"), ["Kilogram", "Gram", "Ounce"])

    def test_to_units_unknown_or_empty(self):
        self.assertEqual(get_to_units(""), [])
        self.assertEqual(get_to_units("Parsec"), [])


class TestConvert(unittest.TestCase):
    def test_known_pairs(self):
        self.assertAlmostEqual(convert(1, "Meter", "Centimeter"), 100)
        self.assertAlmostEqual(convert(1, "Mile", "Foot"), 5280)
        self.assertAlmostEqual(convert(2, "Pound", "Ounce"), 32)
        self.assertAlmostEqual(convert(500, "Gram", "Kilogram"), 0.5)

    def test_same_unit_returns_original_value(self):
        for unit in all_units():
            self.assertEqual(get_factor(unit, unit), 1.0)
            self.assertEqual(convert(42.5, unit, unit), 42.5, f"Failed for {unit}")

    def test_cross_category_not_available(self):
        self.assertIsNone(get_factor("Meter", "Pound"))
        self.assertIsNone(convert(1, "Meter", "Pound"))
        self.assertIsNone(convert(1, "Ounce", "Foot"))

    def test_unknown_unit_not_available(self):
        self.assertIsNone(convert(1, "Meter", "Parsec"))


class TestConvertText(unittest.TestCase):
    def test_success_message(self):
        result = convert_text("1", "Meter", "Centimeter")
        self.assertTrue(result.ok)
        self.assertEqual(result.result, 100)
        self.assertEqual(result.message(), "1.00 Meter is 100.00 Centimeter")

    def test_result_rounded_to_two_decimals(self):
        result = convert_text("16", "Pound", "Kilogram")
        self.assertEqual(result.message(), "16.00 Pound is 7.26 Kilogram")

    def test_same_unit(self):
        result = convert_text("3.456", "Foot", "Foot")
        self.assertEqual(result.message(), "3.46 Foot is 3.46 Foot")

    def test_invalid_number(self):
        result = convert_text("abc", "Meter", "Centimeter")
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertEqual(result.message(), INVALID_NUMBER_MESSAGE)

    def test_invalid_number_reported_before_missing_pair(self):
        result = convert_text("abc", "Meter", "Pound")
        self.assertEqual(result.error, INVALID_NUMBER_MESSAGE)

    def test_missing_pair(self):
        result = convert_text("5", "Meter", "Kilogram")
        self.assertFalse(result.ok)
        self.assertEqual(result.value, 5)
        self.assertEqual(result.message(), NOT_AVAILABLE_MESSAGE)

    def test_every_in_category_pair_converts(self):
        for category, units in MEASUREMENT_UNITS.items():
            for from_unit in units:
                for to_unit in units:
                    result = convert_text("1", from_unit, to_unit)
                    self.assertTrue(result.ok, f"{category}: {from_unit} -> {to_unit}")


class TestFormatNumber(unittest.TestCase):
    def test_two_decimals(self):
        self.assertEqual(format_number(2.5), "2.50")
        self.assertEqual(format_number(100), "100.00")
        self.assertEqual(format_number(0.004), "0.00")

    def test_message_uses_same_format(self):
        result = convert_text("0.125", "Kilogram", "Gram")
        self.assertEqual(
            result.message(),
            f"{format_number(0.125)} Kilogram is {format_number(125)} Gram",
        )


if __name__ == "__main__":
    unittest.main()
