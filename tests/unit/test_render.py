# PATH: tests/unit/test_render.py
"""
Unit tests for rendering values into grouped text.
"""

import unittest

from amount_input.models import FormatterConfig
from amount_input.number_formatter import (
    group_digits,
    render,
    render_fraction,
    split_value,
)


class TestGroupDigits(unittest.TestCase):
    """Tests for group_digits."""

    def test_groups_thousands(self):
        """Inserts separator every 3 digits from the right."""
        self.assertEqual(group_digits("12345", ",", 3), "12,345")
        self.assertEqual(group_digits("1234567", ",", 3), "1,234,567")
        self.assertEqual(group_digits("123456", ",", 3), "123,456")

    def test_short_run_unchanged(self):
        """No separator when the run fits in one group."""
        self.assertEqual(group_digits("100", ",", 3), "100")
        self.assertEqual(group_digits("7", ",", 3), "7")
        self.assertEqual(group_digits("", ",", 3), "")

    def test_zero_group_size_disables_grouping(self):
        """group_size=0 leaves the digits alone."""
        self.assertEqual(group_digits("1234567", ",", 0), "1234567")

    def test_custom_group_size(self):
        """Other group sizes work the same way."""
        self.assertEqual(group_digits("12345678", ",", 4), "1234,5678")
        self.assertEqual(group_digits("12345", " ", 2), "1 23 45")

    def test_multi_character_separator(self):
        """Multi-character separators are inserted verbatim."""
        self.assertEqual(group_digits("1234567", "<>", 3), "1<>234<>567")


class TestSplitValue(unittest.TestCase):
    """Tests for split_value."""

    def test_plain_values(self):
        self.assertEqual(split_value(1.5), (False, "1", "5"))
        self.assertEqual(split_value(-12.25), (True, "12", "25"))
        self.assertEqual(split_value(100.0), (False, "100", "0"))

    def test_no_scientific_notation(self):
        """Large and tiny floats come out in plain notation."""
        self.assertEqual(split_value(1e22), (False, "10000000000000000000000", ""))
        self.assertEqual(split_value(1e-07), (False, "0", "0000001"))


class TestRenderFraction(unittest.TestCase):
    """Tests for render_fraction."""

    def test_pads_and_truncates(self):
        config = FormatterConfig(fractional_digits=3)
        self.assertEqual(render_fraction("5", config), ".500")
        self.assertEqual(render_fraction("23456", config), ".234")
        self.assertEqual(render_fraction("", config), ".000")

    def test_disabled(self):
        """No separator at all when fractional digits are disabled."""
        config = FormatterConfig(fractional_digits=0)
        self.assertEqual(render_fraction("5", config), "")


class TestRender(unittest.TestCase):
    """Tests for render."""

    def setUp(self):
        self.integers = FormatterConfig(fractional_digits=0)
        self.default = FormatterConfig()

    def test_grouping(self):
        """Integral parts are grouped; the sign is never grouped."""
        self.assertEqual(render(12345, self.integers), ("12,345", 6))
        self.assertEqual(render(100, self.integers), ("100", 3))
        self.assertEqual(render(-1234567, self.integers), ("-1,234,567", 10))
        self.assertEqual(render(-123456, self.integers), ("-123,456", 8))

    def test_fractional_padding(self):
        """Fraction padded to fractional_digits."""
        self.assertEqual(render(1.5, self.default), ("1.500", 1))

    def test_fractional_truncation(self):
        """Fraction truncated, never rounded."""
        self.assertEqual(render(1.23456, self.default), ("1.234", 1))
        self.assertEqual(render(0.9999, self.default), ("0.999", 1))

    def test_decimal_index_counts_sign_and_separators(self):
        """decimal_index is a position in the rendered text."""
        text, index = render(-1234567.5, self.default)
        self.assertEqual(text, "-1,234,567.500")
        self.assertEqual(index, 10)
        self.assertEqual(text[index], ".")

    def test_zero(self):
        self.assertEqual(render(0.0, self.default), ("0.000", 1))
        self.assertEqual(render(-0.0, self.default), ("0.000", 1))

    def test_large_value(self):
        text, index = render(1e22, self.integers)
        self.assertEqual(text, "10,000,000,000,000,000,000,000")
        self.assertEqual(index, len(text))

    def test_tiny_value(self):
        config = FormatterConfig(fractional_digits=8)
        self.assertEqual(render(1e-07, config), ("0.00000010", 1))

    def test_parts_used_verbatim(self):
        """Typed digit runs bypass float conversion."""
        text, index = render(1234.5, self.default, parts=("1234", "5"))
        self.assertEqual((text, index), ("1,234.500", 5))

        text, _ = render(-7.0, self.default, parts=("7", "12"))
        self.assertEqual(text, "-7.120")

    def test_european_separators(self):
        config = FormatterConfig(group_separator=".", decimal_separator=",", fractional_digits=2)
        self.assertEqual(render(1234567.89, config), ("1.234.567,89", 9))

    def test_multi_character_decimal_separator(self):
        config = FormatterConfig(decimal_separator=" dot ", fractional_digits=2)
        self.assertEqual(render(1234.5, config), ("1,234 dot 50", 5))


if __name__ == "__main__":
    unittest.main()
