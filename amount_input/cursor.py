# PATH: amount_input/cursor.py
"""
Edit reconciler: formats a proposed edit and places the cursor.

RULE ORDER (first rule returning an offset wins):
    1. SIGN_ON_ZERO               "-" typed on a zero field   -> after "-0"
    2. DIGIT_AFTER_NEGATIVE_ZERO  digit typed after "-0"      -> before separator
    3. SEPARATOR_DELETION         backspace over the separator -> before separator
    4. START_OF_FIELD             single digit near the start -> before/after separator
    5. SAME_LENGTH                replacement                 -> forward only
    6. LENGTH_DELTA               everything else             -> shift by delta

Several conditions can hold at once (a zero value with the cursor at the
start, for instance); the more specific sign/boundary rules come first.

USAGE:
    from amount_input.cursor import reconcile
    from amount_input.models import EditTransition

    result = reconcile(EditTransition("12.500", 3, "12500", 2), formatter)
    # EditResult(text="1.500", cursor=1)
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from amount_input.constants import (
    NEGATIVE_SIGN,
    SINGLE_DIGIT_MAGNITUDE,
    CursorRuleName,
)
from amount_input.models import EditResult, EditTransition
from amount_input.number_formatter import NumberFormatter, is_ascii_digit

logger = logging.getLogger("amount_input.cursor")


@dataclass(frozen=True)
class EditContext:
    """Everything a cursor rule may look at, captured after the commit."""
    edit: EditTransition
    text: str
    value: float
    previous_value: float
    decimal_index: int
    fractional_digits: int
    separator_rewritten: bool = False


# =============================================================================
# PRE-PARSE REWRITE
# =============================================================================

def rewrite_separator_deletion(
    edit: EditTransition,
    decimal_separator: str,
    fractional_digits: int,
) -> Optional[str]:
    """
    Turn "backspace over the decimal separator" into "delete the last
    integral digit".

    "12.500" with the cursor after "." and a backspace yields the raw text
    "12500"; this returns "1.500" instead, keeping the fraction fixed.

    Returns:
        Rewritten raw text, or None if the edit is not a separator deletion
    """
    if fractional_digits <= 0:
        return None

    old_text = edit.old_text
    sep_index = old_text.find(decimal_separator)
    if sep_index <= 0:
        return None

    sep_end = sep_index + len(decimal_separator)
    if edit.old_cursor != sep_end:
        return None
    if edit.new_text != old_text[:sep_index] + old_text[sep_end:]:
        return None

    digit_index = next(
        (i for i in range(sep_index - 1, -1, -1) if is_ascii_digit(old_text[i])),
        None,
    )
    if digit_index is None:
        return None

    # An emptied integral part parses as "0"
    return old_text[:digit_index] + old_text[digit_index + 1:]


# =============================================================================
# CURSOR RULES
# =============================================================================

def _is_small(value: float) -> bool:
    return abs(value) <= SINGLE_DIGIT_MAGNITUDE


def _has_only_zero_digits(text: str) -> bool:
    return all(ch == "0" for ch in text if is_ascii_digit(ch))


def rule_sign_on_zero(ctx: EditContext) -> Optional[int]:
    """Minus typed on an empty or zero field: cursor goes right after "-0"."""
    old_text = ctx.edit.old_text
    if (
        ctx.value == 0
        and ctx.text.startswith(NEGATIVE_SIGN)
        and not old_text.startswith(NEGATIVE_SIGN)
        and _has_only_zero_digits(old_text)
    ):
        return ctx.decimal_index
    return None


def rule_digit_after_negative_zero(ctx: EditContext) -> Optional[int]:
    """First digit typed after "-0": keep the cursor in the integral part."""
    if (
        ctx.previous_value == 0
        and ctx.value < 0
        and _is_small(ctx.value)
        and ctx.edit.old_text.startswith(NEGATIVE_SIGN)
        and ctx.text.startswith(NEGATIVE_SIGN)
    ):
        return ctx.decimal_index
    return None


def rule_separator_deletion(ctx: EditContext) -> Optional[int]:
    if ctx.separator_rewritten:
        return ctx.decimal_index
    return None


def rule_start_of_field(ctx: EditContext) -> Optional[int]:
    """
    Editing near the start of a one-digit value.

    A zero typed into an empty field (or a separator typed at the start)
    moves the cursor into the fraction; otherwise it lands before the
    decimal separator.
    """
    if ctx.edit.old_cursor > 1 or not _is_small(ctx.value):
        return None

    if not ctx.text:
        return 0

    if ctx.value == 0:
        if (
            ctx.previous_value == 0
            and ctx.fractional_digits > 0
            and (ctx.edit.new_cursor > 1 or not ctx.edit.old_text)
        ):
            return ctx.decimal_index + 1
        return ctx.decimal_index

    if _is_small(ctx.previous_value):
        return ctx.decimal_index
    return None


def rule_same_length(ctx: EditContext) -> Optional[int]:
    """One character replaced: follow the field, but never move backwards."""
    if len(ctx.edit.old_text) != len(ctx.text):
        return None
    return min(max(ctx.edit.new_cursor, ctx.edit.old_cursor), len(ctx.text))


def rule_length_delta(ctx: EditContext) -> Optional[int]:
    """
    Shift the old cursor by the length change (by one for single keystrokes).

    When a deletion removed more from the field than the rendered text lost
    (padding or a zero put back by the formatter), the raw removal wins so
    the cursor stays next to the digits the user kept.
    """
    delta = len(ctx.text) - len(ctx.edit.old_text)

    if delta < 0:
        shift = delta if delta < -1 else -1
        shift = min(shift, len(ctx.edit.new_text) - len(ctx.edit.old_text))
        return max(ctx.edit.old_cursor + shift, 0)

    shift = delta if delta > 1 else 1
    return min(ctx.edit.old_cursor + shift, len(ctx.text))


CursorRule = Tuple[CursorRuleName, Callable[[EditContext], Optional[int]]]

CURSOR_RULES: List[CursorRule] = [
    (CursorRuleName.SIGN_ON_ZERO, rule_sign_on_zero),
    (CursorRuleName.DIGIT_AFTER_NEGATIVE_ZERO, rule_digit_after_negative_zero),
    (CursorRuleName.SEPARATOR_DELETION, rule_separator_deletion),
    (CursorRuleName.START_OF_FIELD, rule_start_of_field),
    (CursorRuleName.SAME_LENGTH, rule_same_length),
    (CursorRuleName.LENGTH_DELTA, rule_length_delta),
]


def place_cursor(ctx: EditContext) -> Tuple[int, CursorRuleName]:
    """
    Evaluate CURSOR_RULES top to bottom.

    Returns:
        Tuple of (cursor clamped to [0, len(text)], rule that fired)
    """
    for name, rule in CURSOR_RULES:
        offset = rule(ctx)
        if offset is not None:
            return max(0, min(offset, len(ctx.text))), name

    # LENGTH_DELTA always answers
    raise AssertionError("no cursor rule matched")


# =============================================================================
# RECONCILE
# =============================================================================

def reconcile(edit: EditTransition, formatter: NumberFormatter) -> Optional[EditResult]:
    """
    Format a proposed edit and compute the new cursor.

    Args:
        edit: Old text/cursor and the raw new text/cursor from the field
        formatter: Formatter owning the field state (mutated on success)

    Returns:
        EditResult to write back, or None if the edit is rejected and the
        field should keep its old text and cursor
    """
    edit = edit.clamped()
    config = formatter.config

    raw_text = edit.new_text
    rewritten = rewrite_separator_deletion(edit, config.decimal_separator, config.fractional_digits)
    if rewritten is not None:
        raw_text = rewritten

    text = formatter.process_text(raw_text)
    if text is None:
        logger.debug(
            "Edit rejected, keeping old text",
            extra={"context": {
                "old_text": edit.old_text,
                "new_text": edit.new_text,
                "old_cursor": edit.old_cursor,
            }},
        )
        return None

    ctx = EditContext(
        edit=edit,
        text=text,
        value=formatter.value,
        previous_value=formatter.previous_value,
        decimal_index=formatter.decimal_index,
        fractional_digits=config.fractional_digits,
        separator_rewritten=rewritten is not None,
    )
    cursor, rule = place_cursor(ctx)
    return EditResult(text=text, cursor=cursor, rule=rule)
