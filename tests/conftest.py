"""
LCD Driver Test Configuration
=============================

pytest fixtures shared by all tests.

It provides:
- mock_factory: a gpiozero MockFactory installed as the default pin factory
- recorder: a sleep replacement that snapshots the bus at every delay
- lcd: an initialized controller on the default wiring, closed on teardown

Bus reconstruction
------------------
The controller sleeps once before raising E, once while E is high and once
after dropping it. Every snapshot taken with E high is therefore exactly
one latched nibble, so pairing consecutive latches rebuilds the bytes the
display received.
"""

from dataclasses import dataclass

import pytest
from gpiozero import Device
from gpiozero.pins.mock import MockFactory

from lcd1602_gpio import DEFAULT_PINS, LCDController, LcdMode, PinConfig


@dataclass(frozen=True)
class BusState:
    """Levels of all six lines at one instant."""
    rs: bool
    e: bool
    data: tuple[bool, bool, bool, bool]

    @property
    def nibble(self) -> int:
        return sum(1 << bit for bit, level in enumerate(self.data) if level)

    @property
    def all_low(self) -> bool:
        return not (self.rs or self.e or any(self.data))


class BusRecorder:
    """Sleep replacement recording the bus state at every delay."""

    def __init__(self, factory: MockFactory, pins: PinConfig = DEFAULT_PINS):
        self.factory = factory
        self.pins = pins
        self.delays: list[float] = []
        self.snapshots: list[BusState] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        self.snapshots.append(self.state())

    def level(self, number: int) -> bool:
        return bool(self.factory.pin(number).state)

    def state(self) -> BusState:
        return BusState(
            rs=self.level(self.pins.rs),
            e=self.level(self.pins.e),
            data=tuple(self.level(n) for n in self.pins.data),
        )

    def latches(self) -> list[BusState]:
        """Snapshots taken while E was high, one per latched nibble."""
        return [s for s in self.snapshots if s.e]

    def transmissions(self) -> list[tuple[LcdMode, int]]:
        """Bytes received by the display, as (mode, value) pairs."""
        latches = self.latches()
        assert len(latches) % 2 == 0, "odd number of nibbles latched"
        sent = []
        for high, low in zip(latches[::2], latches[1::2]):
            assert high.rs == low.rs, "RS changed between nibbles"
            mode = LcdMode.CHARACTER if high.rs else LcdMode.COMMAND
            sent.append((mode, (high.nibble << 4) | low.nibble))
        return sent

    def clear(self) -> None:
        self.delays.clear()
        self.snapshots.clear()


@pytest.fixture
def mock_factory():
    """Install a fresh gpiozero MockFactory as the default pin factory."""
    previous = Device.pin_factory
    factory = MockFactory()
    Device.pin_factory = factory
    yield factory
    factory.reset()
    Device.pin_factory = previous


class BusyError(Exception):
    """Stand-in for a GPIO backend's own exception type (e.g. lgpio.error)."""


class BusyPinFactory(MockFactory):
    """MockFactory whose backend refuses one pin with a non-gpiozero error."""

    def __init__(self, busy_pin: int, **kwargs):
        super().__init__(**kwargs)
        self.busy_pin = busy_pin

    def pin(self, name):
        if name == self.busy_pin:
            raise BusyError(f"GPIO {name} busy")
        return super().pin(name)


class UnreadableBoard:
    """Board info whose model cannot be read; pin lookups still work."""

    def __init__(self, info):
        self._info = info

    def __getattr__(self, name):
        return getattr(self._info, name)

    @property
    def model(self):
        raise BusyError("cannot read board revision")


class UnknownBoardFactory(MockFactory):
    """MockFactory whose board identification fails."""

    @property
    def board_info(self):
        return UnreadableBoard(super().board_info)


@pytest.fixture
def busy_factory():
    """Pin factory that fails to set up D6 with a backend-specific error."""
    factory = BusyPinFactory(DEFAULT_PINS.d6)
    yield factory
    factory.reset()


@pytest.fixture
def unknown_board_factory():
    """Pin factory that cannot identify the board."""
    factory = UnknownBoardFactory()
    yield factory
    factory.reset()


@pytest.fixture
def make_recorder(mock_factory):
    """Factory fixture: bus recorder for a given wiring."""
    def _make(pins: PinConfig = DEFAULT_PINS) -> BusRecorder:
        return BusRecorder(mock_factory, pins)
    return _make


@pytest.fixture
def recorder(make_recorder):
    """Bus recorder for the default wiring."""
    return make_recorder()


@pytest.fixture
def lcd(recorder):
    """Initialized controller on the default wiring with a clean recording."""
    controller = LCDController(sleep=recorder)
    recorder.clear()
    yield controller
    controller.close()
