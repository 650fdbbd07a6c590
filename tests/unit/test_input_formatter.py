# PATH: tests/unit/test_input_formatter.py
"""
Unit tests for the AmountInputFormatter facade.
"""

import unittest

from amount_input.constants import LRE, PDF, ErrorCode
from amount_input.exceptions import ConfigurationError, ValidationError
from amount_input.input_formatter import AmountInputFormatter
from amount_input.models import EditResult, FormatterConfig


class TestConstruction(unittest.TestCase):

    def test_defaults(self):
        fmt = AmountInputFormatter()

        self.assertEqual(fmt.config, FormatterConfig())
        self.assertEqual(fmt.text, "0.000")
        self.assertEqual(fmt.value, 0.0)

    def test_keyword_settings(self):
        fmt = AmountInputFormatter(group_separator=" ", decimal_separator=",", initial_value=1234.5)
        self.assertEqual(fmt.text, "1 234,500")
        self.assertEqual(fmt.decimal_index, 5)

    def test_invalid_settings(self):
        with self.assertRaises(ConfigurationError) as ctx:
            AmountInputFormatter(group_separator=".")
        self.assertEqual(ctx.exception.code, ErrorCode.SEPARATOR_CONFLICT)

    def test_from_config(self):
        config = FormatterConfig(fractional_digits=2, allow_empty=True)
        fmt = AmountInputFormatter.from_config(config)

        self.assertEqual(fmt.config, config)
        self.assertEqual(fmt.text, "")

    def test_from_preset(self):
        fmt = AmountInputFormatter.from_preset("european", initial_value=1234.5)
        self.assertEqual(fmt.text, "1.234,500")

    def test_from_default_preset(self):
        fmt = AmountInputFormatter.from_preset()
        self.assertEqual(fmt.config, FormatterConfig())


class TestEdits(unittest.TestCase):

    def test_usage_example(self):
        fmt = AmountInputFormatter(fractional_digits=2, allow_empty=True)
        result = fmt.on_edit_proposed("", 0, "1234", 4)

        self.assertEqual(result, EditResult("1,234.00", 8))
        self.assertEqual(fmt.value, 1234.0)

    def test_rejected_edit_returns_none(self):
        fmt = AmountInputFormatter(integral_digit_limit=2, initial_value=12)

        self.assertIsNone(fmt.on_edit_proposed("12.000", 2, "123.000", 3))
        self.assertEqual(fmt.text, "12.000")

    def test_set_number(self):
        fmt = AmountInputFormatter()

        self.assertEqual(fmt.set_number(-1234567.5), "-1,234,567.500")
        self.assertEqual(fmt.value, -1234567.5)

    def test_set_number_non_finite(self):
        fmt = AmountInputFormatter()
        with self.assertRaises(ValidationError):
            fmt.set_number(float("nan"))

    def test_set_number_with_cursor(self):
        fmt = AmountInputFormatter()
        result = fmt.set_number_with_cursor(1234.5)

        self.assertEqual(result.text, "1,234.500")
        self.assertEqual(result.cursor, 5)
        self.assertIsNone(result.rule)

    def test_clear(self):
        fmt = AmountInputFormatter(initial_value=9)

        self.assertEqual(fmt.clear(), "")
        self.assertEqual(fmt.decimal_index, -1)
        self.assertEqual(fmt.value, 0.0)

    def test_ltr_enforced_text(self):
        fmt = AmountInputFormatter(initial_value=5)
        self.assertTrue(fmt.ltr_enforced_text.startswith(LRE))
        self.assertTrue(fmt.ltr_enforced_text.endswith(PDF))
        self.assertEqual(fmt.ltr_enforced_text[1:-1], "5.000")


class TestConfigSetters(unittest.TestCase):

    def setUp(self):
        self.fmt = AmountInputFormatter(initial_value=1234.5)

    def test_with_config(self):
        state = self.fmt.with_config(FormatterConfig(group_separator="'"))
        self.assertEqual(state.text, "1'234.500")

    def test_setters(self):
        self.assertEqual(self.fmt.set_group_size(2).text, "12,34.500")
        self.assertEqual(self.fmt.set_group_separator("_").text, "12_34.500")
        self.assertEqual(self.fmt.set_decimal_separator(",").text, "12_34,500")
        self.assertEqual(self.fmt.set_fractional_digits(1).text, "12_34,5")
        self.assertEqual(self.fmt.set_allow_empty(True).text, "12_34,5")
        self.assertTrue(self.fmt.config.allow_empty)

    def test_integral_limit(self):
        self.fmt.set_integral_digit_limit(5)
        self.assertEqual(self.fmt.config.integral_digit_limit, 5)

        result = self.fmt.on_edit_proposed("1,234.500", 5, "1,2345.500", 6)
        self.assertEqual(result.text, "12,345.500")

        self.assertIsNone(self.fmt.on_edit_proposed("12,345.500", 6, "12,3456.500", 7))
        self.assertEqual(self.fmt.text, "12,345.500")


if __name__ == "__main__":
    unittest.main()
