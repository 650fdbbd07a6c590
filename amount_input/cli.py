#!/usr/bin/env python3
# PATH: amount_input/cli.py
"""
amount_input/cli.py - replay keystrokes through a formatter.

Each character of KEYS is typed at the cursor; "<" is a backspace.
Prints the field after every keystroke, then a summary.

Usage:
    amount-input-replay "1234.5"
    amount-input-replay --preset european "1234,5"
    amount-input-replay --initial-value 12.5 --cursor 3 "<"
    amount-input-replay --log-level INFO --log-file replay.log "12"
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from amount_input.exceptions import FormatterError
from amount_input.input_formatter import AmountInputFormatter
from amount_input.logging import get_logger, setup_logging
from amount_input.models import EditResult

logger = get_logger("amount_input.cli")

BACKSPACE_KEY = "<"


class ReplaySession:
    """A single-line field driven one keystroke at a time."""

    def __init__(self, formatter: AmountInputFormatter, cursor: Optional[int] = None):
        self.formatter = formatter
        self.text = formatter.text
        if cursor is None:
            cursor = max(formatter.decimal_index, 0)
        self.cursor = max(0, min(cursor, len(self.text)))
        self.last_result: Optional[EditResult] = None
        self.steps: List[Dict[str, Any]] = []
        self.rejected = 0

    @property
    def field(self):
        return self.text, self.cursor

    def press(self, key: str) -> Optional[EditResult]:
        """Apply one keystroke; returns None when the edit is refused."""
        result = None
        if key != BACKSPACE_KEY:
            new_text = self.text[:self.cursor] + key + self.text[self.cursor:]
            result = self.formatter.on_edit_proposed(self.text, self.cursor, new_text, self.cursor + 1)
        elif self.cursor > 0:
            new_text = self.text[:self.cursor - 1] + self.text[self.cursor:]
            result = self.formatter.on_edit_proposed(self.text, self.cursor, new_text, self.cursor - 1)
        self.last_result = result

        if result is None:
            self.rejected += 1
        else:
            self.text, self.cursor = result.text, result.cursor

        self.steps.append({
            "key": key,
            "accepted": result is not None,
            "text": self.text,
            "cursor": self.cursor,
            "rule": result.rule.value if result is not None and result.rule else None,
        })
        return result

    def replay(self, keys: str) -> "ReplaySession":
        for key in keys:
            self.press(key)
        return self

    def get_summary(self) -> Dict[str, Any]:
        return {
            "keys": len(self.steps),
            "rejected": self.rejected,
            "text": self.text,
            "cursor": self.cursor,
            "value": self.formatter.value,
        }


def render_field(text: str, cursor: int) -> str:
    """Field text with the cursor drawn as '|'."""
    return f"{text[:cursor]}|{text[cursor:]}"


@click.command()
@click.argument("keys")
@click.option(
    "--preset",
    "-p",
    default="default",
    help="Formatter preset from presets.yaml",
)
@click.option(
    "--config-path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Alternative presets file",
)
@click.option(
    "--initial-value",
    "-v",
    default=None,
    type=float,
    help="Value shown before the first keystroke",
)
@click.option(
    "--cursor",
    "-c",
    default=None,
    type=int,
    help="Starting cursor (default: before the decimal separator)",
)
@click.option(
    "--log-level",
    "-l",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Use JSON log format",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write JSON log lines to this file",
)
def main(
    keys: str,
    preset: str,
    config_path: Optional[str],
    initial_value: Optional[float],
    cursor: Optional[int],
    log_level: str,
    json_logs: bool,
    log_file: Optional[str],
) -> None:
    """
    Replay KEYS through an amount field.

    Every character is typed at the cursor; '<' deletes backwards.
    """
    setup_logging(
        level=getattr(logging, log_level),
        log_file=log_file,
        json_format=json_logs,
    )

    try:
        formatter = AmountInputFormatter.from_preset(
            preset,
            initial_value=initial_value,
            config_path=Path(config_path) if config_path else None,
        )
    except FormatterError as e:
        logger.error(
            "Cannot build formatter",
            extra={"context": {"preset": preset, "code": e.code.value}},
        )
        raise click.ClickException(str(e))

    session = ReplaySession(formatter, cursor)
    click.echo(f"start  {render_field(session.text, session.cursor)}")

    for key in keys:
        result = session.press(key)
        label = "back" if key == BACKSPACE_KEY else repr(key)
        if result is None:
            click.echo(f"{label:<6} {render_field(session.text, session.cursor)}  (rejected)")
        else:
            click.echo(f"{label:<6} {render_field(session.text, session.cursor)}  {result.rule.value}")

    summary = session.get_summary()
    logger.info("Replay complete", extra={"context": summary})

    click.echo("=" * 40)
    click.echo(f"Text: {summary['text']}")
    click.echo(f"Value: {summary['value']!r}")
    click.echo(f"Keys: {summary['keys']} ({summary['rejected']} rejected)")


if __name__ == "__main__":
    main()
