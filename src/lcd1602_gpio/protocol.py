"""
HD44780 4-bit Bus Protocol
==========================

Protocol constants and pure helpers for driving an HD44780 character LCD
over a 4-bit parallel bus.

Only data lines D4..D7 are wired, so every 8-bit value is sent as two
nibbles, high nibble first, each latched by its own pulse on the enable
line. The register-select (RS) line chooses between the instruction
register (commands) and the data register (characters).

Reference: HD44780 datasheet, "Interfacing to the MPU" (4-bit operation).
"""

from enum import Enum, IntEnum
from typing import Final

# Characters per display row
LCD_CHARS: Final[int] = 16

# Fill character used to overwrite the rest of a row
PAD_CHAR: Final[str] = " "


# =============================================================================
# Enum-Tagged Constants
# =============================================================================

class LcdLine(IntEnum):
    """Display row, valued by its DDRAM base address command byte."""
    LINE_1 = 0x80
    LINE_2 = 0xC0


class LcdMode(Enum):
    """Register selected for a transmission."""
    CHARACTER = "character"  # RS high: byte is stored in display memory
    COMMAND = "command"      # RS low: byte is an instruction

    @property
    def rs_level(self) -> bool:
        """Level to drive on the register-select line."""
        return self is LcdMode.CHARACTER


class LcdCommand(IntEnum):
    """Instruction bytes used by the driver."""
    INITIALIZE = 0x33                 # Two 0x3 nibbles: force 8-bit sync
    SET_4BIT_MODE = 0x32              # 0x3 then 0x2: switch to 4-bit bus
    SET_CURSOR_MOVE_DIRECTION = 0x06  # Entry mode: increment, no shift
    SET_CURSOR_OFF = 0x0C             # Display on, cursor off, blink off
    SET_2LINE_DISPLAY = 0x28          # Function set: 4-bit, 2 lines, 5x8
    CLEAR_SCREEN = 0x01


# Bring-up order required by the controller. Do not reorder.
INIT_SEQUENCE: Final[tuple[LcdCommand, ...]] = (
    LcdCommand.INITIALIZE,
    LcdCommand.SET_4BIT_MODE,
    LcdCommand.SET_CURSOR_MOVE_DIRECTION,
    LcdCommand.SET_CURSOR_OFF,
    LcdCommand.SET_2LINE_DISPLAY,
    LcdCommand.CLEAR_SCREEN,
)


# =============================================================================
# Nibble Helpers
# =============================================================================

def check_byte(value: int) -> int:
    """
    Validate that value fits in a single bus transfer.

    Raises:
        ValueError: If value is not an int in 0..255
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an int byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value out of range: {value}")
    return value


def split_nibbles(value: int) -> tuple[int, int]:
    """
    Split a byte into (high, low) nibbles in transmission order.

    Example:
        >>> split_nibbles(0xC0)
        (12, 0)
    """
    check_byte(value)
    return (value >> 4) & 0x0F, value & 0x0F


def nibble_bits(nibble: int) -> tuple[bool, bool, bool, bool]:
    """
    Levels for data lines 0..3 carrying a nibble.

    Bit 0 drives line 0 (D4) and bit 3 drives line 3 (D7). The mapping is
    the same for both halves of a byte.
    """
    return tuple(bool(nibble & (1 << bit)) for bit in range(4))


# =============================================================================
# Text Helpers
# =============================================================================

def pad_text(text: str, width: int = LCD_CHARS, pad_with: str = PAD_CHAR) -> str:
    """Right-pad text to width. Text already at or over width is returned as is."""
    return text + pad_with * max(0, width - len(text))


def encode_text(text: str) -> bytes:
    """
    Encode text to display character codes.

    The HD44780 character ROM is indexed by 8-bit codes, so each character
    must map to a single byte.

    Raises:
        ValueError: If a character has no 8-bit code
    """
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as e:
        bad = text[e.start]
        raise ValueError(
            f"Character {bad!r} at position {e.start} cannot be shown on the display"
        ) from None
