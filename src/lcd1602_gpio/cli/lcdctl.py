"""
lcdctl - LCD Display Command-Line Interface
===========================================

This module implements the command-line interface for driving a 16x2
HD44780 display wired to the Raspberry Pi's GPIO header.

Usage Examples
--------------
Show the board, pin assignment and pin levels:
    $ lcdctl status

Write text to both rows and keep it for 10 seconds:
    $ lcdctl show "Hello World!" "Hello Pythonistas" --hold 10

Clear the display:
    $ lcdctl clear

Use non-default wiring:
    $ lcdctl --rs 26 --e 19 --d4 13 --d5 6 --d6 5 --d7 21 status

Pin Configuration
-----------------
Pins default to the LCD1602_PIN_RS, LCD1602_PIN_E, LCD1602_PIN_D4 ...
LCD1602_PIN_D7 environment variables, then to the documented default
wiring. Command-line options override both.

The driver clears the display and drives every line low when it releases
the pins, so text written by 'show' only stays up for --hold seconds.

Exit Codes
----------
0 - Success
1 - GPIO, configuration or controller error
2 - Invalid arguments (including text longer than a row)
3 - Internal error
"""

import dataclasses
import logging
import time
from typing import Optional

import click

from lcd1602_gpio import __version__
from lcd1602_gpio.cli.errors import handle_cli_exception
from lcd1602_gpio.config import PinConfig, TimingConfig
from lcd1602_gpio.controller import LCDController
from lcd1602_gpio.protocol import LcdLine

# Configure logging
logger = logging.getLogger(__name__)

PIN_NAMES = tuple(f.name for f in dataclasses.fields(PinConfig))


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores pin overrides and verbosity.
    """

    def __init__(self) -> None:
        self.pin_overrides: dict[str, int] = {}
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )

    def pin_config(self) -> PinConfig:
        """Environment/default wiring with command-line overrides applied."""
        return dataclasses.replace(PinConfig.from_env(), **self.pin_overrides)

    def open_controller(self) -> LCDController:
        """Claim the pins and initialize the display."""
        return LCDController(self.pin_config(), timing=TimingConfig.from_env())


pass_context = click.make_pass_decorator(Context, ensure=True)


def pin_options(func):
    """Add one option per PinConfig field, overriding that pin of the wiring."""
    for name in reversed(PIN_NAMES):
        func = click.option(
            f"--{name}",
            type=click.IntRange(min=0),
            default=None,
            help=f"BCM pin number for {name.upper()}",
        )(func)
    return func


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@pin_options
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output (logs every byte sent)",
)
@click.version_option(version=__version__, prog_name="lcdctl")
@pass_context
def main(ctx: Context, verbose: bool, **pins: Optional[int]) -> None:
    """
    Drive a 16x2 HD44780 character LCD over GPIO.

    The display must be wired in 4-bit mode with R/W tied to ground.
    """
    ctx.pin_overrides = {name: pins[name] for name in PIN_NAMES if pins[name] is not None}
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Commands
# =============================================================================

@main.command()
@pass_context
def status(ctx: Context) -> None:
    """
    Show the board, pin assignment and current pin levels.

    Example:
        lcdctl status
    """
    try:
        with ctx.open_controller() as lcd:
            click.echo(lcd.describe())
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@click.argument("line1")
@click.argument("line2", required=False)
@click.option(
    "--hold",
    type=click.FloatRange(min=0),
    default=5.0,
    show_default=True,
    help="Seconds to keep the text up before releasing the display",
)
@pass_context
def show(ctx: Context, line1: str, line2: Optional[str], hold: float) -> None:
    """
    Write LINE1 (and optionally LINE2) to the display.

    Each line may be at most 16 characters; shorter lines are padded
    with spaces.

    Example:
        lcdctl show "Hello World!" "Second row"
    """
    try:
        with ctx.open_controller() as lcd:
            lcd.display_text(line1, LcdLine.LINE_1)
            if line2 is not None:
                lcd.display_text(line2, LcdLine.LINE_2)
            click.echo("Text written to display")
            time.sleep(hold)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@pass_context
def clear(ctx: Context) -> None:
    """Clear the display."""
    try:
        with ctx.open_controller() as lcd:
            lcd.clear_screen()
            click.echo("Display cleared")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@pass_context
def reset(ctx: Context) -> None:
    """Clear the display and drive every line low."""
    try:
        with ctx.open_controller() as lcd:
            lcd.reset()
            click.echo("Display reset")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


if __name__ == "__main__":
    main()
