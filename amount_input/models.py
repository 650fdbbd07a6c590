# PATH: amount_input/models.py
"""
Core data models for amount_input.

CONFIG / STATE CONTRACT
=======================
- FormatterConfig is immutable; changes produce a new instance
  (with_changes) and are applied through NumberFormatter.with_config().
- FormatterState is mutable and owned by exactly one NumberFormatter.
- state.decimal_index == -1  <=>  state.text == ""
- state.current_value is always finite and never -0.0
=======================
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Optional

from amount_input.constants import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_FRACTIONAL_DIGITS,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_GROUP_SIZE,
    DEFAULT_INTEGRAL_DIGIT_LIMIT,
    EMPTY_VALUE,
    NO_DECIMAL_INDEX,
    CursorRuleName,
    ErrorCode,
    ParseOutcome,
    RejectReason,
)
from amount_input.exceptions import ConfigurationError
from amount_input.validators import validate_config_values


# ============================================================================
# CONFIG
# ============================================================================

@dataclass(frozen=True)
class FormatterConfig:
    """Formatter settings. Validated on construction."""
    integral_digit_limit: int = DEFAULT_INTEGRAL_DIGIT_LIMIT
    group_separator: str = DEFAULT_GROUP_SEPARATOR
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    group_size: int = DEFAULT_GROUP_SIZE
    fractional_digits: int = DEFAULT_FRACTIONAL_DIGITS
    allow_empty: bool = False

    def __post_init__(self):
        validate_config_values(
            integral_digit_limit=self.integral_digit_limit,
            group_separator=self.group_separator,
            decimal_separator=self.decimal_separator,
            group_size=self.group_size,
            fractional_digits=self.fractional_digits,
        )

    def with_changes(self, **changes: Any) -> "FormatterConfig":
        """Return a copy with the given fields replaced (re-validated)."""
        _check_field_names(changes)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormatterConfig":
        """
        Build a config from a mapping (e.g. a YAML preset).

        Missing keys fall back to defaults; unknown keys raise.
        """
        _check_field_names(data)
        return cls(**data)


def _check_field_names(data: Dict[str, Any]) -> None:
    known = {f.name for f in fields(FormatterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown formatter config fields: {', '.join(unknown)}",
            ErrorCode.UNKNOWN_CONFIG_FIELD,
            {"unknown": unknown, "known": sorted(known)},
        )


# ============================================================================
# STATE
# ============================================================================

@dataclass
class FormatterState:
    """Mutable per-field formatter state."""
    current_value: float = 0.0
    previous_value: float = 0.0
    text: str = EMPTY_VALUE
    decimal_index: int = NO_DECIMAL_INDEX

    @property
    def is_empty(self) -> bool:
        return not self.text

    def copy(self) -> "FormatterState":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============================================================================
# RESULTS
# ============================================================================

@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing raw text against a prior state.

    For REJECTED results only `reason` is meaningful.
    """
    outcome: ParseOutcome
    value: float = 0.0
    text: str = EMPTY_VALUE
    decimal_index: int = NO_DECIMAL_INDEX
    reason: Optional[RejectReason] = None

    @property
    def is_rejected(self) -> bool:
        return self.outcome == ParseOutcome.REJECTED

    @classmethod
    def rejected(cls, reason: RejectReason) -> "ParseResult":
        return cls(outcome=ParseOutcome.REJECTED, reason=reason)


@dataclass(frozen=True)
class EditTransition:
    """One keystroke or paste: (old text, old cursor) -> (raw new text, new cursor)."""
    old_text: str
    old_cursor: int
    new_text: str
    new_cursor: int

    def clamped(self) -> "EditTransition":
        """Return a copy with both cursors clamped into their texts."""
        return EditTransition(
            old_text=self.old_text,
            old_cursor=max(0, min(len(self.old_text), int(self.old_cursor))),
            new_text=self.new_text,
            new_cursor=max(0, min(len(self.new_text), int(self.new_cursor))),
        )


@dataclass(frozen=True)
class EditResult:
    """Text and collapsed cursor to write back into the field."""
    text: str
    cursor: int
    rule: Optional[CursorRuleName] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "cursor": self.cursor,
            "rule": self.rule.value if self.rule else None,
        }
