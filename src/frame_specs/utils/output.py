"""Color-coded console output."""

from typing import Optional

import click

from frame_specs.constants import FAIL_COLOR, NO_COLOR, PASS_COLOR, TRACE_COLOR

_color: Optional[bool] = False if NO_COLOR else None


def set_color(enabled: Optional[bool]) -> None:
    """Force color on/off; None lets click decide from the stream."""
    global _color
    _color = enabled


def _echo(message: str, fg: str, nl: bool) -> None:
    # click.echo flushes, so pass markers appear without a newline
    click.secho(message, fg=fg, nl=nl, color=_color)


def print_red(message: str) -> None:
    _echo(message, FAIL_COLOR, nl=False)


def print_green(message: str) -> None:
    _echo(message, PASS_COLOR, nl=False)


def println_red(message: str) -> None:
    _echo(message, FAIL_COLOR, nl=True)


def println_green(message: str) -> None:
    _echo(message, PASS_COLOR, nl=True)


def println_blue(message: str) -> None:
    _echo(message, TRACE_COLOR, nl=True)
