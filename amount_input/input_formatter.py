# PATH: amount_input/input_formatter.py
"""
Binding facade for text-input layers.

A widget adapter forwards every proposed edit to on_edit_proposed() and
writes the returned EditResult back into its field. None means "reject":
the field keeps its old text and cursor.

USAGE:
    fmt = AmountInputFormatter(fractional_digits=2, allow_empty=True)
    result = fmt.on_edit_proposed("", 0, "1234", 4)
    # result.text == "1,234.00", result.cursor == 8
    fmt.value  # 1234.0
"""

from pathlib import Path
from typing import Optional

from amount_input.config import load_formatter_config
from amount_input.constants import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_FRACTIONAL_DIGITS,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_GROUP_SIZE,
    DEFAULT_INTEGRAL_DIGIT_LIMIT,
)
from amount_input.cursor import reconcile
from amount_input.models import EditResult, EditTransition, FormatterConfig, FormatterState
from amount_input.number_formatter import NumberFormatter


class AmountInputFormatter:
    """Text-field binding around one NumberFormatter."""

    def __init__(
        self,
        integral_digit_limit: int = DEFAULT_INTEGRAL_DIGIT_LIMIT,
        group_separator: str = DEFAULT_GROUP_SEPARATOR,
        decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR,
        group_size: int = DEFAULT_GROUP_SIZE,
        fractional_digits: int = DEFAULT_FRACTIONAL_DIGITS,
        allow_empty: bool = False,
        initial_value: Optional[float] = None,
    ):
        config = FormatterConfig(
            integral_digit_limit=integral_digit_limit,
            group_separator=group_separator,
            decimal_separator=decimal_separator,
            group_size=group_size,
            fractional_digits=fractional_digits,
            allow_empty=allow_empty,
        )
        self.formatter = NumberFormatter(config, initial_value=initial_value)

    @classmethod
    def from_config(
        cls,
        config: FormatterConfig,
        initial_value: Optional[float] = None,
    ) -> "AmountInputFormatter":
        return cls(initial_value=initial_value, **config.to_dict())

    @classmethod
    def from_preset(
        cls,
        name: str = "default",
        initial_value: Optional[float] = None,
        config_path: Optional[Path] = None,
    ) -> "AmountInputFormatter":
        """Build from a named preset in presets.yaml (see amount_input.config)."""
        return cls.from_config(load_formatter_config(name, config_path), initial_value)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    @property
    def config(self) -> FormatterConfig:
        return self.formatter.config

    @property
    def value(self) -> float:
        """Current numeric value; 0 when the field is empty."""
        return self.formatter.value

    @property
    def text(self) -> str:
        return self.formatter.text

    @property
    def ltr_enforced_text(self) -> str:
        return self.formatter.ltr_enforced_text

    @property
    def decimal_index(self) -> int:
        return self.formatter.decimal_index

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def on_edit_proposed(
        self,
        old_text: str,
        old_cursor: int,
        new_text: str,
        new_cursor: int,
    ) -> Optional[EditResult]:
        """Format a raw edit; None means keep the old text and cursor."""
        return reconcile(EditTransition(old_text, old_cursor, new_text, new_cursor), self.formatter)

    def set_number(self, number: float) -> str:
        """Render a value directly and return the new display text."""
        return self.formatter.set_value(number)

    def set_number_with_cursor(self, number: float) -> EditResult:
        """Like set_number(), with the cursor placed before the decimal separator."""
        text = self.formatter.set_value(number)
        return EditResult(text=text, cursor=self.formatter.decimal_index)

    def clear(self) -> str:
        return self.formatter.clear()

    # -------------------------------------------------------------------------
    # Config
    # -------------------------------------------------------------------------

    def with_config(self, config: FormatterConfig) -> FormatterState:
        return self.formatter.with_config(config)

    def set_integral_digit_limit(self, value: int) -> FormatterState:
        return self.formatter.set_integral_digit_limit(value)

    def set_group_separator(self, value: str) -> FormatterState:
        return self.formatter.set_group_separator(value)

    def set_decimal_separator(self, value: str) -> FormatterState:
        return self.formatter.set_decimal_separator(value)

    def set_group_size(self, value: int) -> FormatterState:
        return self.formatter.set_group_size(value)

    def set_fractional_digits(self, value: int) -> FormatterState:
        return self.formatter.set_fractional_digits(value)

    def set_allow_empty(self, value: bool) -> FormatterState:
        return self.formatter.set_allow_empty(value)
