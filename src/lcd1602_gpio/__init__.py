"""
lcd1602_gpio - HD44780 16x2 Character LCD Driver over GPIO
==========================================================

This package drives a 16x2 HD44780-compatible character LCD connected to a
Raspberry Pi through six GPIO lines in 4-bit mode. GPIO access goes through
gpiozero, so any gpiozero pin factory (including MockFactory) can be used.

Main Components
---------------
- **controller**: LCDController, the display driver
- **protocol**: HD44780 command, line and mode constants, nibble helpers
- **config**: Pin wiring and bus timing configuration
- **errors**: Exception hierarchy
- **cli**: The lcdctl command-line tool

Quick Start
-----------
    >>> from lcd1602_gpio import LCDController, LcdLine
    >>> with LCDController.default() as lcd:
    ...     print(lcd)
    ...     lcd.display_text("Hello World!", LcdLine.LINE_1)

Or with explicit wiring:
    >>> lcd = LCDController.from_pins(rs=7, e=8, d4=25, d5=24, d6=23, d7=18)
    >>> lcd.clear_screen()
    >>> lcd.close()

Or from the command line:
    $ lcdctl show "Hello World!" "Second line"
    $ lcdctl status
"""

__version__ = "0.1.0"

from lcd1602_gpio.config import DEFAULT_PINS, PinConfig, TimingConfig
from lcd1602_gpio.controller import LCDController
from lcd1602_gpio.errors import (
    ConfigError,
    ControllerClosedError,
    GPIOError,
    LcdContractError,
    LcdError,
    TextTooLongError,
)
from lcd1602_gpio.protocol import (
    INIT_SEQUENCE,
    LCD_CHARS,
    LcdCommand,
    LcdLine,
    LcdMode,
)

__all__ = [
    "__version__",
    # Controller
    "LCDController",
    # Protocol
    "INIT_SEQUENCE",
    "LCD_CHARS",
    "LcdCommand",
    "LcdLine",
    "LcdMode",
    # Configuration
    "DEFAULT_PINS",
    "PinConfig",
    "TimingConfig",
    # Errors
    "LcdError",
    "ConfigError",
    "GPIOError",
    "ControllerClosedError",
    "LcdContractError",
    "TextTooLongError",
]
