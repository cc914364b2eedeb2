"""
LCD Driver Error Hierarchy
==========================

Exceptions raised by the lcd1602_gpio package fall into two separate
branches so callers can tell a recoverable platform failure apart from a
bug in their own code.

Exception Hierarchy
-------------------
LcdError (base, recoverable)
├── ConfigError - invalid pin or timing configuration
├── GPIOError - a pin could not be claimed or the GPIO subsystem is unusable
└── ControllerClosedError - operation attempted on a closed controller

LcdContractError (base, programmer-contract violations)
└── TextTooLongError - text wider than a display row

LcdContractError deliberately does not inherit from LcdError: a handler
written as ``except LcdError`` must not swallow a contract violation.
"""

from typing import Optional


# =============================================================================
# Recoverable Errors
# =============================================================================

class LcdError(Exception):
    """
    Base exception for all recoverable LCD driver errors.

        try:
            lcd = LCDController.default()
        except LcdError as e:
            print(f"Error: {e}")
    """
    pass


class ConfigError(LcdError, ValueError):
    """
    Invalid pin assignment or timing configuration.

    Also a ValueError, since it always stems from a bad value supplied
    by the caller or the environment.
    """
    pass


class GPIOError(LcdError):
    """
    Failure of the platform GPIO subsystem during construction.

    Raised when a pin is already claimed, a pin number is invalid, no
    pin factory can be loaded, or the board cannot be identified.

    Attributes:
        pin: BCM number of the pin being claimed (None if not pin-specific)
    """

    def __init__(self, message: str, pin: Optional[int] = None):
        self.pin = pin
        if pin is not None:
            message = f"GPIO {pin}: {message}"
        super().__init__(message)


class ControllerClosedError(LcdError):
    """Raised when an operation is attempted on a closed controller."""

    def __init__(self, message: str = "LCD controller is closed"):
        super().__init__(message)


# =============================================================================
# Contract Violations
# =============================================================================

class LcdContractError(Exception):
    """
    Base exception for programmer-contract violations.

    These are never retried or recovered from inside the driver. They
    indicate a logic error upstream that would otherwise show up as
    garbled or silently truncated output on the display.
    """
    pass


class TextTooLongError(LcdContractError):
    """
    Text is wider than a display row.

    The driver refuses to truncate. Check lengths before calling
    display_text().

    Attributes:
        text: The rejected text
        width: Number of characters per row
    """

    def __init__(self, text: str, width: int):
        self.text = text
        self.width = width
        super().__init__(
            f"Text can't be longer than {width} characters "
            f"(got {len(text)})"
        )
