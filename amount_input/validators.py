# PATH: amount_input/validators.py
"""
Configuration validators for amount_input.

CONTRACTS:
- Every validate_*() either returns None or raises ConfigurationError
- Checks run at construction/setter time, never while typing

USAGE:
    from amount_input.validators import validate_config_values

    validate_config_values(
        integral_digit_limit=24,
        group_separator=",",
        decimal_separator=".",
        group_size=3,
        fractional_digits=3,
    )
"""

from amount_input.constants import NEGATIVE_SIGN, ErrorCode
from amount_input.exceptions import ConfigurationError


# =============================================================================
# SEPARATORS
# =============================================================================

def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def validate_separator(name: str, separator: object) -> None:
    """
    Validate a single separator glyph.

    Separators may be multi-character, but must be non-empty strings
    and must not contain ASCII digits or the minus sign, otherwise
    they would be read back as part of the number.
    """
    if not isinstance(separator, str) or not separator:
        raise ConfigurationError(
            f"{name} must be a non-empty string",
            ErrorCode.EMPTY_SEPARATOR,
            {"field": name, "value": separator},
        )

    if any(_is_ascii_digit(ch) for ch in separator) or NEGATIVE_SIGN in separator:
        raise ConfigurationError(
            f"{name} must not contain digits or '{NEGATIVE_SIGN}'",
            ErrorCode.SEPARATOR_HAS_DIGIT,
            {"field": name, "value": separator},
        )


def validate_separator_pair(group_separator: str, decimal_separator: str) -> None:
    """
    Validate that group and decimal separators can be told apart.

    Equal separators, or one containing the other, make the decimal
    separator ambiguous when scanning typed text.
    """
    validate_separator("group_separator", group_separator)
    validate_separator("decimal_separator", decimal_separator)

    if (
        group_separator == decimal_separator
        or decimal_separator in group_separator
        or group_separator in decimal_separator
    ):
        raise ConfigurationError(
            "group_separator and decimal_separator must differ",
            ErrorCode.SEPARATOR_CONFLICT,
            {"group_separator": group_separator, "decimal_separator": decimal_separator},
        )


# =============================================================================
# DIGIT COUNTS
# =============================================================================

def _is_int(value: object) -> bool:
    # bool is a subclass of int, reject it explicitly
    return isinstance(value, int) and not isinstance(value, bool)


def validate_non_negative(name: str, value: object, code: ErrorCode) -> None:
    """Validate a non-negative integer setting."""
    if not _is_int(value) or value < 0:
        raise ConfigurationError(
            f"{name} must be a non-negative integer, got {value!r}",
            code,
            {"field": name, "value": value},
        )


def validate_integral_digit_limit(value: object) -> None:
    """The integral limit must allow at least one digit."""
    if not _is_int(value) or value < 1:
        raise ConfigurationError(
            f"integral_digit_limit must be a positive integer, got {value!r}",
            ErrorCode.INVALID_INTEGRAL_LIMIT,
            {"field": "integral_digit_limit", "value": value},
        )


def validate_config_values(
    integral_digit_limit: int,
    group_separator: str,
    decimal_separator: str,
    group_size: int,
    fractional_digits: int,
) -> None:
    """
    Validate a full set of formatter settings.

    Raises:
        ConfigurationError: on the first violated precondition
    """
    validate_integral_digit_limit(integral_digit_limit)
    validate_separator_pair(group_separator, decimal_separator)
    validate_non_negative("group_size", group_size, ErrorCode.INVALID_GROUP_SIZE)
    validate_non_negative(
        "fractional_digits", fractional_digits, ErrorCode.INVALID_FRACTIONAL_DIGITS
    )
