# PATH: tests/unit/test_error_codes.py
"""
Unit tests for ErrorCode contract.

Ensures all ErrorCode values used in the package actually exist in the enum.
Prevents runtime AttributeErrors from typos or missing codes.

Run: python -m pytest tests/unit/test_error_codes.py -v
"""

import re
import unittest
from pathlib import Path
from typing import Set

from amount_input.constants import ErrorCode
from amount_input.exceptions import ConfigurationError, FormatterError, ValidationError


class TestErrorCodeContract(unittest.TestCase):
    """Test that all ErrorCode usages in the package are valid."""

    SCAN_PATTERNS = [
        "amount_input/**/*.py",
    ]

    def find_errorcode_usages(self, filepath: Path) -> Set[str]:
        """
        Find all ErrorCode.XXXX usages in a file.

        Returns set of code names (e.g., "SEPARATOR_CONFLICT")
        """
        content = filepath.read_text(encoding="utf-8")
        return set(re.findall(r'ErrorCode\.([A-Z_]+)', content))

    def test_all_errorcode_enum_usages_exist(self):
        """Verify all ErrorCode.XXXX usages reference valid enum members."""
        project_root = Path(__file__).parent.parent.parent
        valid_names = {code.name for code in ErrorCode}

        all_usages = set()
        files_scanned = 0

        for pattern in self.SCAN_PATTERNS:
            for filepath in project_root.glob(pattern):
                if "__pycache__" in str(filepath):
                    continue
                all_usages.update(self.find_errorcode_usages(filepath))
                files_scanned += 1

        invalid_usages = all_usages - valid_names

        self.assertEqual(
            invalid_usages,
            set(),
            f"Invalid ErrorCode usages found: {invalid_usages}\n"
            f"Valid codes: {sorted(valid_names)}"
        )

        # Sanity check: we actually scanned some files
        self.assertGreater(files_scanned, 0, "No files scanned!")

    def test_no_duplicate_error_code_values(self):
        """Verify no duplicate values in ErrorCode enum."""
        values = [code.value for code in ErrorCode]
        duplicates = [v for v in values if values.count(v) > 1]

        self.assertEqual(duplicates, [], f"Duplicate ErrorCode values: {set(duplicates)}")

    def test_errorcode_values_are_uppercase(self):
        """Verify all ErrorCode values follow UPPER_SNAKE_CASE."""
        for code in ErrorCode:
            self.assertRegex(
                code.value,
                r'^[A-Z][A-Z0-9_]+$',
                f"ErrorCode.{code.name} value should be UPPER_SNAKE_CASE: {code.value}"
            )
            self.assertEqual(code.name, code.value)


class TestExceptionFormat(unittest.TestCase):
    """Exceptions carry a code and render it in str()."""

    def test_str_includes_code(self):
        error = ConfigurationError("bad separator", ErrorCode.EMPTY_SEPARATOR)
        self.assertEqual(str(error), "[EMPTY_SEPARATOR] bad separator")

    def test_default_code_and_details(self):
        error = FormatterError("something broke")

        self.assertEqual(error.code, ErrorCode.UNKNOWN)
        self.assertEqual(error.details, {})
        self.assertEqual(error.message, "something broke")

    def test_validation_error_code(self):
        error = ValidationError("nan", {"value": "nan"})

        self.assertEqual(error.code, ErrorCode.VALUE_NOT_FINITE)
        self.assertEqual(error.details["value"], "nan")

    def test_hierarchy(self):
        self.assertTrue(issubclass(ConfigurationError, FormatterError))
        self.assertTrue(issubclass(ValidationError, FormatterError))
        self.assertTrue(issubclass(FormatterError, Exception))


if __name__ == "__main__":
    unittest.main()
