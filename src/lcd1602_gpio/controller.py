"""
HD44780 LCD Controller over GPIO
================================

This module implements LCDController, the driver for a 16x2 HD44780
character display wired to six GPIO lines in 4-bit mode:

- RS: register select (low = command, high = character)
- E: enable strobe, latches the nibble on the data lines
- D4..D7: the four data lines (D0..D3 on the display are unused)

Every byte is sent as two nibbles, high half first. Each nibble is placed on
the data lines and latched by one enable pulse:

    settle -> E high -> hold -> E low -> settle

The data lines are zeroed before each nibble and after the second one, so no
bus state leaks from one transmission into the next.

Thread Safety
-------------
LCDController is not thread-safe. Every operation blocks on real sleeps and
interleaving two sends corrupts the nibble sequence. Callers that share a
controller must serialize access themselves, e.g. with a single worker
thread or a lock around the instance.

Example:
    >>> from lcd1602_gpio import LCDController, LcdLine
    >>> with LCDController.default() as lcd:
    ...     lcd.display_text("Hello World!", LcdLine.LINE_1)
    ...     lcd.display_text("Hello Python", LcdLine.LINE_2)
"""

import atexit
import functools
import logging
import time
import weakref
from typing import Callable, Optional

from gpiozero import DigitalOutputDevice

from lcd1602_gpio.config import DEFAULT_PINS, PinConfig, TimingConfig
from lcd1602_gpio.errors import ControllerClosedError, GPIOError, TextTooLongError
from lcd1602_gpio.protocol import (
    INIT_SEQUENCE,
    LCD_CHARS,
    LcdCommand,
    LcdLine,
    LcdMode,
    encode_text,
    nibble_bits,
    pad_text,
    split_nibbles,
)

# Configure module logger
logger = logging.getLogger(__name__)

SEPARATOR = "-" * 31


def _close_at_exit(ref: "weakref.ref[LCDController]") -> None:
    """
    Interpreter-exit hook for a controller that was never closed.

    Registered after gpiozero's own shutdown hook, so it runs first, while
    the pins can still be driven. Holds only a weak reference so that
    dropping the last reference still triggers __del__.
    """
    controller = ref()
    if controller is not None:
        controller.close()


class LCDController:
    """
    Driver for a 16x2 HD44780 display on six GPIO output lines.

    Construction claims all six pins, runs the 4-bit initialization sequence
    and zeroes the data lines. close() (or leaving a ``with`` block) clears
    the display, drives every line low and releases the pins.

    Attributes:
        pins: The pin assignment in use
        timing: Bus delays in use
        board_model: Model of the board reported by the pin factory
    """

    def __init__(
        self,
        pins: PinConfig = DEFAULT_PINS,
        timing: Optional[TimingConfig] = None,
        pin_factory=None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Claim the pins and bring up the display.

        Args:
            pins: BCM pin numbers of the wired lines
            timing: Bus delays (default: TimingConfig())
            pin_factory: gpiozero pin factory (default: Device.pin_factory)
            sleep: Blocking delay function, called with seconds

        Raises:
            GPIOError: If a pin cannot be claimed as output or the board
                cannot be identified. No pins stay claimed on failure.
        """
        self.pins = pins
        self.timing = timing or TimingConfig()
        self._sleep = sleep
        self._closed = True

        self._devices = self._claim_pins(pin_factory)
        self._rs, self._e, *self._data = self._devices
        try:
            self.board_model = self._identify_board()
        except GPIOError:
            self._release_pins()
            raise
        self._closed = False
        self._exit_hook = functools.partial(_close_at_exit, weakref.ref(self))
        atexit.register(self._exit_hook)

        logger.info(
            "LCD controller on %s: RS=%d E=%d D4-D7=%s",
            self.board_model, pins.rs, pins.e, list(pins.data),
        )
        self._init()
        self._reset_data_pins()

    @classmethod
    def from_pins(cls, rs: int, e: int, d4: int, d5: int, d6: int, d7: int, **kwargs) -> "LCDController":
        """Create a controller from explicit BCM pin numbers."""
        return cls(PinConfig(rs=rs, e=e, d4=d4, d5=d5, d6=d6, d7=d7), **kwargs)

    @classmethod
    def default(cls, **kwargs) -> "LCDController":
        """
        Create a controller using the documented default wiring.

        IMPORTANT: only use this if your display is wired exactly as
        DEFAULT_PINS describes. Other wiring may damage the device.
        """
        return cls(DEFAULT_PINS, **kwargs)

    # =========================================================================
    # Pin Ownership
    # =========================================================================

    def _claim_pins(self, pin_factory) -> list[DigitalOutputDevice]:
        devices = []
        for name, number in self.pins.items():
            try:
                device = DigitalOutputDevice(
                    number, initial_value=False, pin_factory=pin_factory
                )
            except Exception as e:
                # Backends such as lgpio raise their own exception types
                for claimed in devices:
                    claimed.close()
                raise GPIOError(f"cannot claim {name} as output: {e}", pin=number) from e
            devices.append(device)
            logger.debug("Claimed GPIO %d as %s", number, name)
        return devices

    def _release_pins(self) -> None:
        for device in self._devices:
            device.close()

    def _identify_board(self) -> str:
        try:
            return self._rs.pin_factory.board_info.model
        except Exception as e:
            raise GPIOError(f"cannot identify board: {e}") from e

    def _check_open(self) -> None:
        if self._closed:
            raise ControllerClosedError()

    @property
    def closed(self) -> bool:
        """True once close() has released the pins."""
        return self._closed

    # =========================================================================
    # Bus Protocol
    # =========================================================================

    def _init(self) -> None:
        """Run the 4-bit bring-up sequence."""
        for command in INIT_SEQUENCE:
            self.send(command, LcdMode.COMMAND)
        self._sleep(self.timing.init_delay)

    def _pulse_enable(self) -> None:
        """Strobe E so the display latches the nibble on the data lines."""
        delay = self.timing.pulse_delay
        self._sleep(delay)
        self._e.on()
        self._sleep(delay)
        self._e.off()
        self._sleep(delay)

    def _reset_data_pins(self) -> None:
        for device in self._data:
            device.off()

    def _write_nibble(self, nibble: int) -> None:
        self._reset_data_pins()
        for device, level in zip(self._data, nibble_bits(nibble)):
            if level:
                device.on()
        self._pulse_enable()

    def send(self, value: int, mode: LcdMode) -> None:
        """
        Send a command or character byte to the display.

        Args:
            value: Byte to send (0..255)
            mode: LcdMode.COMMAND or LcdMode.CHARACTER

        Raises:
            ValueError: If value is not a byte or mode is not an LcdMode
            ControllerClosedError: If the controller is closed
        """
        self._check_open()
        if not isinstance(mode, LcdMode):
            raise ValueError(f"mode must be an LcdMode, got {mode!r}")
        high, low = split_nibbles(value)

        logger.debug("send 0x%02X as %s", value, mode.value)
        self._rs.value = mode.rs_level
        self._write_nibble(high)
        self._write_nibble(low)
        self._reset_data_pins()

    # =========================================================================
    # Display Operations
    # =========================================================================

    def display_text(self, text: str, line: LcdLine) -> None:
        """
        Write text to a display row, overwriting the whole row.

        Text shorter than 16 characters is padded with spaces.

        Raises:
            TextTooLongError: If text is longer than 16 characters. Nothing
                is sent; the text is never truncated.
            ValueError: If text contains a character with no 8-bit code
        """
        self._check_open()
        if len(text) > LCD_CHARS:
            self._sleep(self.timing.pulse_delay)
            raise TextTooLongError(text, LCD_CHARS)

        codes = encode_text(pad_text(text))
        self.send(LcdLine(line).value, LcdMode.COMMAND)
        for code in codes:
            self.send(code, LcdMode.CHARACTER)

    def clear_screen(self) -> None:
        """Clear the display. Entry mode and line mode are kept."""
        self.send(LcdCommand.CLEAR_SCREEN, LcdMode.COMMAND)

    def reset(self) -> None:
        """Clear the display and drive every line low."""
        self.send(LcdCommand.CLEAR_SCREEN, LcdMode.COMMAND)
        for device in self._devices:
            device.off()
        self._sleep(self.timing.init_delay)

    def close(self) -> None:
        """
        Reset the display and release the pins.

        Safe to call more than once. The reset is best effort: failures
        during teardown are logged, never raised.
        """
        if self._closed:
            return
        atexit.unregister(self._exit_hook)
        try:
            self.reset()
        except Exception as e:
            logger.warning("Error resetting display during close: %s", e)
        finally:
            self._closed = True
            self._release_pins()
            logger.info("LCD controller closed")

    def __enter__(self) -> "LCDController":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __del__(self):
        if not getattr(self, "_closed", True):
            self.close()

    # =========================================================================
    # Status
    # =========================================================================

    def pin_states(self) -> dict[str, bool]:
        """Current logical level of each line, keyed by pin name."""
        self._check_open()
        return {
            name: bool(device.value)
            for (name, _), device in zip(self.pins.items(), self._devices)
        }

    def describe(self) -> str:
        """
        Human-readable dump of board, pin assignments and pin levels.

        After close() the pin levels are reported as released.
        """
        lines = [
            "LCD Controller",
            f"Device: {self.board_model}",
            SEPARATOR,
            "PIN CONFIGURATION:",
        ]
        for name, number in self.pins.items():
            lines.append(f"lcd_{name:<2}: GPIO {number}")
        lines.append(SEPARATOR)
        if self._closed:
            lines.append("PIN STATUS: released")
            return "\n".join(lines)
        lines.append("PIN STATUS:")
        for name, level in self.pin_states().items():
            lines.append(f"lcd_{name:<2}: {'high' if level else 'low'}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<LCDController {self.pins} {state}>"
