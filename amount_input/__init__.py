"""
amount_input - Incremental numeric-text formatter.

This package contains:
- number_formatter.py: Formatting engine (render, parse, NumberFormatter)
- cursor.py: Edit reconciler (cursor placement rule table)
- input_formatter.py: Binding facade for text-input layers
- models.py: Config, state and result models
- constants.py: Defaults and enums
- exceptions.py: Typed exceptions with error codes
- validators.py: Configuration precondition checks
- config/: YAML presets
- logging.py: Structured JSON logging
- cli.py: Keystroke replay command (click)
"""

from amount_input.constants import (
    LRE,
    PDF,
    CursorRuleName,
    ErrorCode,
    ParseOutcome,
    RejectReason,
)
from amount_input.cursor import reconcile
from amount_input.exceptions import (
    ConfigurationError,
    FormatterError,
    ValidationError,
)
from amount_input.input_formatter import AmountInputFormatter
from amount_input.logging import get_logger, reset_logging, setup_logging
from amount_input.models import (
    EditResult,
    EditTransition,
    FormatterConfig,
    FormatterState,
    ParseResult,
)
from amount_input.number_formatter import NumberFormatter, parse, render

__version__ = "1.0.0"

__all__ = [
    # Constants
    "LRE",
    "PDF",
    "CursorRuleName",
    "ErrorCode",
    "ParseOutcome",
    "RejectReason",
    # Exceptions
    "ConfigurationError",
    "FormatterError",
    "ValidationError",
    # Models
    "EditResult",
    "EditTransition",
    "FormatterConfig",
    "FormatterState",
    "ParseResult",
    # Engine
    "NumberFormatter",
    "parse",
    "render",
    "reconcile",
    "AmountInputFormatter",
    # Logging
    "get_logger",
    "reset_logging",
    "setup_logging",
]
