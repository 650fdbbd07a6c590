# PATH: amount_input/number_formatter.py
"""
Formatting engine for amount_input.

Converts a signed value into grouped, separator-delimited text and parses
raw keystroke text back into a canonical value.

CONTRACTS:
- render(): pure, returns (text, decimal_index)
- parse(): pure, never raises on malformed text; returns a ParseResult
- NumberFormatter: the only thing that mutates a FormatterState

PARSE PRIORITY (first match wins):
    1. empty text              -> empty state or formatted zero
    2. leading sign(s)         -> one logical sign
    3. sign only               -> "-0" (display-only negative zero)
    4. strip non-digits        -> integral / fractional runs
    5. separator missing       -> cut at the previous separator, zero fraction
    6. fraction too long       -> truncate (never round)
    7. integral too long       -> REJECTED
    8. leading zeros           -> canonical integral
    9. float parse             -> REJECTED on failure / non-finite
   10. signed zero             -> NEGATIVE_ZERO
   11. everything else         -> ACCEPTED
"""

import logging
import math
from decimal import Decimal
from typing import Optional, Tuple

from amount_input.constants import (
    EMPTY_VALUE,
    LRE,
    NEGATIVE_SIGN,
    NO_DECIMAL_INDEX,
    PDF,
    ZERO_VALUE,
    ParseOutcome,
    RejectReason,
)
from amount_input.exceptions import ValidationError
from amount_input.models import FormatterConfig, FormatterState, ParseResult

logger = logging.getLogger("amount_input.number_formatter")


# =============================================================================
# CHARACTER CLASSES
# =============================================================================

def is_ascii_digit(char: str) -> bool:
    """True for '0'..'9' only (str.isdigit() also accepts non-Latin digits)."""
    return "0" <= char <= "9"


def split_numeric_text(text: str, decimal_separator: str) -> Tuple[str, str, bool]:
    """
    Keep ASCII digits and split them at the first decimal separator.

    Every other character, including group separators, signs and later
    decimal separators, is dropped.

    Returns:
        Tuple of (integral_digits, fractional_digits, has_separator)
    """
    integral = []
    fraction = []
    target = integral
    has_separator = False

    i = 0
    while i < len(text):
        if text.startswith(decimal_separator, i):
            has_separator = True
            target = fraction
            i += len(decimal_separator)
            continue
        if is_ascii_digit(text[i]):
            target.append(text[i])
        i += 1

    return "".join(integral), "".join(fraction), has_separator


def digits_only(text: str) -> str:
    return "".join(ch for ch in text if is_ascii_digit(ch))


def digits_before_separator(state: FormatterState) -> int:
    """
    Number of integral digits in the previous text.

    decimal_index counts the sign and group separators; this counts digits
    only, so it can be compared with a digit run.

    Example: "-1,234.500" (decimal_index 6) -> 4
    """
    if state.decimal_index <= 0:
        return 0
    return len(digits_only(state.text[:state.decimal_index]))


def _has_numeric_content(text: str, decimal_separator: str) -> bool:
    return decimal_separator in text or any(is_ascii_digit(ch) for ch in text)


# =============================================================================
# RENDERING
# =============================================================================

def split_value(value: float) -> Tuple[bool, str, str]:
    """
    Split a value into (is_negative, integral_digits, fractional_digits).

    Uses the shortest repr of the float in plain notation, so 1e+22 and
    1e-07 never leak exponents into the digit runs.
    """
    plain = format(Decimal(repr(abs(value))), "f")
    integral, _, fraction = plain.partition(".")
    return value < 0, integral, fraction


def group_digits(digits: str, separator: str, group_size: int) -> str:
    """
    Insert separator between groups of group_size digits, right to left.

    Example: group_digits("1234567", ",", 3) -> "1,234,567"
    """
    if group_size <= 0 or len(digits) <= group_size:
        return digits

    groups = []
    end = len(digits)
    while end > 0:
        start = max(0, end - group_size)
        groups.append(digits[start:end])
        end = start

    return separator.join(reversed(groups))


def render_fraction(fraction: str, config: FormatterConfig) -> str:
    """Truncate or zero-pad to fractional_digits; empty when disabled."""
    width = config.fractional_digits
    if width <= 0:
        return EMPTY_VALUE
    return config.decimal_separator + fraction[:width].ljust(width, ZERO_VALUE)


def _render_parts(
    is_negative: bool,
    integral: str,
    fraction: str,
    config: FormatterConfig,
) -> Tuple[str, int]:
    head = group_digits(integral, config.group_separator, config.group_size)
    if is_negative:
        head = NEGATIVE_SIGN + head
    return head + render_fraction(fraction, config), len(head)


def render(
    value: float,
    config: FormatterConfig,
    parts: Optional[Tuple[str, str]] = None,
) -> Tuple[str, int]:
    """
    Render a value as grouped text.

    Args:
        value: Value to render (sign taken from here)
        config: Formatter settings
        parts: Optional (integral_digits, fractional_digits) already typed
            by the user; used verbatim instead of re-deriving from the float

    Returns:
        Tuple of (text, decimal_index). decimal_index is len(text) when
        fractional digits are disabled.

    Example:
        >>> render(-1234567.5, FormatterConfig())
        ('-1,234,567.500', 10)
    """
    if parts is None:
        is_negative, integral, fraction = split_value(value)
    else:
        integral, fraction = parts
        is_negative = value < 0
    return _render_parts(is_negative, integral, fraction, config)


def empty_result(config: FormatterConfig, allow_empty: bool) -> ParseResult:
    """Empty state when allowed, otherwise formatted zero ("0.000")."""
    if allow_empty:
        return ParseResult(
            outcome=ParseOutcome.ACCEPTED,
            value=0.0,
            text=EMPTY_VALUE,
            decimal_index=NO_DECIMAL_INDEX,
        )
    text, index = render(0.0, config)
    return ParseResult(outcome=ParseOutcome.ACCEPTED, value=0.0, text=text, decimal_index=index)


def negative_zero_result(fraction: str, config: FormatterConfig) -> ParseResult:
    """Display "-0" (padded) while the value stays 0."""
    text, index = _render_parts(True, ZERO_VALUE, fraction, config)
    return ParseResult(outcome=ParseOutcome.NEGATIVE_ZERO, value=0.0, text=text, decimal_index=index)


# =============================================================================
# PARSING
# =============================================================================

def parse(raw_text: str, state: FormatterState, config: FormatterConfig) -> ParseResult:
    """
    Parse raw field text into a canonical value and rendered text.

    Pure: the state is only read (for the previous decimal separator
    position). Commit the result with NumberFormatter.

    Args:
        raw_text: Text the field holds after the keystroke, before formatting
        state: State before the keystroke
        config: Formatter settings

    Returns:
        ParseResult (ACCEPTED, NEGATIVE_ZERO or REJECTED)
    """
    if not raw_text:
        return empty_result(config, config.allow_empty)

    is_negative = raw_text.startswith(NEGATIVE_SIGN)
    unsigned = raw_text.lstrip(NEGATIVE_SIGN) if is_negative else raw_text

    if is_negative and not _has_numeric_content(unsigned, config.decimal_separator):
        return negative_zero_result(EMPTY_VALUE, config)

    integral, fraction, has_separator = split_numeric_text(unsigned, config.decimal_separator)

    # Separator deleted (alone or inside a selection): cut the digits at the
    # old separator position and zero the fraction.
    if not has_separator and config.fractional_digits > 0:
        kept = digits_before_separator(state)
        if 0 < kept < len(integral):
            integral = integral[:kept]
            fraction = EMPTY_VALUE

    fraction = fraction[:config.fractional_digits]

    if len(integral) > config.integral_digit_limit:
        return ParseResult.rejected(RejectReason.INTEGRAL_TOO_LONG)

    integral = integral.lstrip(ZERO_VALUE) or ZERO_VALUE

    numeric = f"{NEGATIVE_SIGN if is_negative else EMPTY_VALUE}{integral}.{fraction}"
    try:
        value = float(numeric)
    except ValueError:
        return ParseResult.rejected(RejectReason.UNPARSABLE)

    if not math.isfinite(value):
        return ParseResult.rejected(RejectReason.NON_FINITE)

    if value == 0:
        if is_negative:
            return negative_zero_result(fraction, config)
        value = 0.0

    text, index = render(value, config, parts=(integral, fraction))
    return ParseResult(outcome=ParseOutcome.ACCEPTED, value=value, text=text, decimal_index=index)


def _rebuild_text(text: str, old_config: FormatterConfig, new_config: FormatterConfig) -> str:
    """Re-express rendered text under new separators, keeping sign and digits."""
    if not text:
        return EMPTY_VALUE
    sign = NEGATIVE_SIGN if text.startswith(NEGATIVE_SIGN) else EMPTY_VALUE
    integral, fraction, _ = split_numeric_text(text, old_config.decimal_separator)
    if fraction:
        return f"{sign}{integral}{new_config.decimal_separator}{fraction}"
    return f"{sign}{integral}"


# =============================================================================
# STATE OWNER
# =============================================================================

class NumberFormatter:
    """
    Owns one FormatterConfig and one FormatterState for a single field.

    Every mutation goes through _commit(), which keeps text, value and
    decimal_index consistent with each other.
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        initial_value: Optional[float] = None,
    ):
        self._config = config or FormatterConfig()
        self._state = FormatterState()

        if initial_value is not None:
            self.set_value(initial_value)
        elif not self._config.allow_empty:
            self._commit(empty_result(self._config, allow_empty=False))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def state(self) -> FormatterState:
        """Snapshot of the current state (mutating it has no effect)."""
        return self._state.copy()

    @property
    def value(self) -> float:
        return self._state.current_value

    @property
    def previous_value(self) -> float:
        return self._state.previous_value

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def decimal_index(self) -> int:
        return self._state.decimal_index

    @property
    def ltr_enforced_text(self) -> str:
        """Text wrapped in LRE ... PDF for display inside RTL layouts."""
        return f"{LRE}{self._state.text}{PDF}"

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _commit(self, result: ParseResult) -> str:
        if result.outcome == ParseOutcome.NEGATIVE_ZERO:
            self._state.previous_value = 0.0
            self._state.current_value = 0.0
        else:
            self._state.previous_value = self._state.current_value
            self._state.current_value = result.value
        self._state.text = result.text
        self._state.decimal_index = result.decimal_index
        return result.text

    def process_text(self, raw_text: str) -> Optional[str]:
        """
        Parse and commit raw field text.

        Returns:
            New rendered text, or None if the input was rejected
            (state is left untouched)
        """
        result = parse(raw_text, self._state, self._config)
        if result.is_rejected:
            logger.debug(
                "Text input rejected",
                extra={"context": {
                    "raw_text": raw_text,
                    "reason": result.reason.value,
                    "kept_text": self._state.text,
                }},
            )
            return None
        return self._commit(result)

    def set_value(self, number: float) -> str:
        """
        Render a value directly, bypassing text parsing.

        Raises:
            ValidationError: if the number is NaN or infinite
        """
        value = float(number)
        if not math.isfinite(value):
            raise ValidationError(
                f"Cannot format non-finite value: {number!r}",
                {"value": repr(number)},
            )
        if value == 0:
            value = 0.0

        text, index = render(value, self._config)
        return self._commit(ParseResult(
            outcome=ParseOutcome.ACCEPTED,
            value=value,
            text=text,
            decimal_index=index,
        ))

    def clear(self) -> str:
        """Reset to the empty state regardless of allow_empty."""
        return self._commit(empty_result(self._config, allow_empty=True))

    def with_config(self, config: FormatterConfig) -> FormatterState:
        """
        Switch to a new config and re-parse the current text under it.

        If the current digits no longer fit (integral_digit_limit shrank),
        the config is still switched but the state is kept as is.

        Returns:
            Snapshot of the resulting state
        """
        raw_text = _rebuild_text(self._state.text, self._config, config)
        self._config = config

        result = parse(raw_text, self._state, config)
        if result.is_rejected:
            logger.warning(
                "Current text does not fit the new config, keeping it",
                extra={"context": {
                    "text": self._state.text,
                    "reason": result.reason.value,
                    "integral_digit_limit": config.integral_digit_limit,
                }},
            )
        else:
            self._commit(result)
        return self.state

    def update_config(self, **changes) -> FormatterState:
        """with_config() for a partial change, e.g. update_config(group_size=4)."""
        return self.with_config(self._config.with_changes(**changes))

    def set_integral_digit_limit(self, value: int) -> FormatterState:
        return self.update_config(integral_digit_limit=value)

    def set_group_separator(self, value: str) -> FormatterState:
        return self.update_config(group_separator=value)

    def set_decimal_separator(self, value: str) -> FormatterState:
        return self.update_config(decimal_separator=value)

    def set_group_size(self, value: int) -> FormatterState:
        return self.update_config(group_size=value)

    def set_fractional_digits(self, value: int) -> FormatterState:
        return self.update_config(fractional_digits=value)

    def set_allow_empty(self, value: bool) -> FormatterState:
        return self.update_config(allow_empty=value)
