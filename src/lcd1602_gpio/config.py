"""
LCD Driver Configuration
========================

Pin assignments and bus timing for the controller. Configuration can come
from:
- Default values (defined here)
- Explicit constructor arguments
- Environment variables (see PinConfig.from_env / TimingConfig.from_env)

LCD Pinout
----------
 1: GND                    9: D2 (unused)
 2: +5V                   10: D3 (unused)
 3: Contrast (pot wiper)  11: D4
 4: RS (Register Select)  12: D5
 5: R/W - tie to GND      13: D6
 6: E (Enable/Strobe)     14: D7
 7: D0 (unused)           15: Backlight +5V
 8: D1 (unused)           16: Backlight GND

R/W must be grounded. The Pi's GPIO lines are 3.3V and must never be
driven by the display.
"""

import os
from dataclasses import dataclass, fields
from typing import Final, Iterator, Optional

from lcd1602_gpio.errors import ConfigError

# Environment variable prefixes
PIN_ENV_PREFIX: Final[str] = "LCD1602_PIN_"
TIMING_ENV_PREFIX: Final[str] = "LCD1602_"


@dataclass(frozen=True)
class PinConfig:
    """
    BCM pin numbers of the six lines wired to the display.

    Attributes:
        rs: Register select
        e: Enable strobe
        d4: Data line 0 (display pin D4)
        d5: Data line 1 (display pin D5)
        d6: Data line 2 (display pin D6)
        d7: Data line 3 (display pin D7)
    """

    rs: int
    e: int
    d4: int
    d5: int
    d6: int
    d7: int

    def __post_init__(self) -> None:
        numbers = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(
                    f"Pin {f.name} must be a non-negative BCM number, got {value!r}"
                )
            numbers.append(value)
        if len(set(numbers)) != len(numbers):
            raise ConfigError(f"Pin numbers must be distinct: {self}")

    @property
    def data(self) -> tuple[int, int, int, int]:
        """Data line pin numbers in bit order (line 0 first)."""
        return (self.d4, self.d5, self.d6, self.d7)

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (name, pin) pairs in wiring order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    @classmethod
    def from_env(cls, base: Optional["PinConfig"] = None) -> "PinConfig":
        """
        Create PinConfig from environment variables.

        Environment variables (all optional):
            LCD1602_PIN_RS, LCD1602_PIN_E, LCD1602_PIN_D4,
            LCD1602_PIN_D5, LCD1602_PIN_D6, LCD1602_PIN_D7

        Unset variables take their value from base (DEFAULT_PINS if omitted).

        Raises:
            ConfigError: If a variable is not an integer
        """
        base = base or DEFAULT_PINS
        values = {}
        for name, default in base.items():
            var = PIN_ENV_PREFIX + name.upper()
            raw = os.environ.get(var)
            if raw is None:
                values[name] = default
                continue
            try:
                values[name] = int(raw)
            except ValueError:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from None
        return cls(**values)


# IMPORTANT: only safe with the documented wiring. Check your wiring against
# this table before using the default configuration; a wrong assumption can
# short a line that the display is driving.
DEFAULT_PINS: Final[PinConfig] = PinConfig(rs=7, e=8, d4=25, d5=24, d6=23, d7=18)


@dataclass(frozen=True)
class TimingConfig:
    """
    Bus delays in seconds.

    These are conservative millisecond delays, far longer than the
    controller's nanosecond timing requirements. They may be tuned but
    never removed, or nibbles will be missed on real hardware.

    Attributes:
        pulse_delay: Settle/hold time around each enable edge (default: 1ms)
        init_delay: Settle time after initialization and reset (default: 1ms)
    """

    pulse_delay: float = 0.001
    init_delay: float = 0.001

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{f.name} must be a positive number of seconds, got {value!r}")

    @classmethod
    def from_env(cls) -> "TimingConfig":
        """
        Create TimingConfig from environment variables.

        Environment variables (all optional, in seconds):
            LCD1602_PULSE_DELAY, LCD1602_INIT_DELAY
        """
        values = {}
        for f in fields(cls):
            var = TIMING_ENV_PREFIX + f.name.upper()
            if raw := os.environ.get(var):
                try:
                    values[f.name] = float(raw)
                except ValueError:
                    raise ConfigError(f"{var} must be a number, got {raw!r}") from None
        return cls(**values)
