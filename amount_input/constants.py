# PATH: amount_input/constants.py
"""
Constants for amount_input.

Contains defaults, enums, and the Unicode marks used for LTR wrapping.
"""

from enum import Enum
from typing import Final

# =============================================================================
# FORMATTER DEFAULTS
# =============================================================================

# Max digits before the decimal separator
DEFAULT_INTEGRAL_DIGIT_LIMIT: Final[int] = 24

DEFAULT_GROUP_SEPARATOR: Final[str] = ","
DEFAULT_DECIMAL_SEPARATOR: Final[str] = "."
DEFAULT_GROUP_SIZE: Final[int] = 3
DEFAULT_FRACTIONAL_DIGITS: Final[int] = 3

EMPTY_VALUE: Final[str] = ""
ZERO_VALUE: Final[str] = "0"
NEGATIVE_SIGN: Final[str] = "-"

# Index of the decimal separator when there is no text at all
NO_DECIMAL_INDEX: Final[int] = -1

# Values in [-9, 9] are treated as "a single typed digit" by cursor rules
SINGLE_DIGIT_MAGNITUDE: Final[float] = 9

# =============================================================================
# DIRECTIONALITY
# =============================================================================

# Left-To-Right Embedding
LRE: Final[str] = "\u202a"

# Pop Directional Formatting
PDF: Final[str] = "\u202c"


# =============================================================================
# ENUMS
# =============================================================================

class ParseOutcome(str, Enum):
    """Outcome of parsing a raw text edit."""
    ACCEPTED = "ACCEPTED"
    NEGATIVE_ZERO = "NEGATIVE_ZERO"
    REJECTED = "REJECTED"


class RejectReason(str, Enum):
    """Why a raw text edit was rejected."""
    INTEGRAL_TOO_LONG = "INTEGRAL_TOO_LONG"
    UNPARSABLE = "UNPARSABLE"
    NON_FINITE = "NON_FINITE"


class ErrorCode(str, Enum):
    """
    Error codes carried by FormatterError subclasses.

    Only raised for caller-side contract violations (bad configuration,
    non-finite values). Edits never raise.
    """
    # Configuration
    EMPTY_SEPARATOR = "EMPTY_SEPARATOR"
    SEPARATOR_CONFLICT = "SEPARATOR_CONFLICT"
    SEPARATOR_HAS_DIGIT = "SEPARATOR_HAS_DIGIT"
    INVALID_GROUP_SIZE = "INVALID_GROUP_SIZE"
    INVALID_FRACTIONAL_DIGITS = "INVALID_FRACTIONAL_DIGITS"
    INVALID_INTEGRAL_LIMIT = "INVALID_INTEGRAL_LIMIT"
    UNKNOWN_CONFIG_FIELD = "UNKNOWN_CONFIG_FIELD"

    # Presets
    UNKNOWN_PRESET = "UNKNOWN_PRESET"
    PRESET_FILE_MISSING = "PRESET_FILE_MISSING"

    # Values
    VALUE_NOT_FINITE = "VALUE_NOT_FINITE"

    UNKNOWN = "UNKNOWN"


class CursorRuleName(str, Enum):
    """
    Cursor placement rules, in evaluation order.

    Earlier rules are more specific and win ties.
    """
    SIGN_ON_ZERO = "SIGN_ON_ZERO"
    DIGIT_AFTER_NEGATIVE_ZERO = "DIGIT_AFTER_NEGATIVE_ZERO"
    SEPARATOR_DELETION = "SEPARATOR_DELETION"
    START_OF_FIELD = "START_OF_FIELD"
    SAME_LENGTH = "SAME_LENGTH"
    LENGTH_DELTA = "LENGTH_DELTA"
