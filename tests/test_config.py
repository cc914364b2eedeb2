"""
Configuration Tests
===================

Tests for pin wiring and bus timing configuration, including
environment variable overrides.
"""

import pytest

from lcd1602_gpio.config import DEFAULT_PINS, PinConfig, TimingConfig
from lcd1602_gpio.errors import ConfigError, LcdError


class TestPinConfig:
    """Test pin assignment validation."""

    def test_default_wiring(self):
        assert DEFAULT_PINS == PinConfig(rs=7, e=8, d4=25, d5=24, d6=23, d7=18)

    def test_data_lines_in_bit_order(self):
        assert DEFAULT_PINS.data == (25, 24, 23, 18)

    def test_items_in_wiring_order(self):
        names = [name for name, _ in DEFAULT_PINS.items()]
        assert names == ["rs", "e", "d4", "d5", "d6", "d7"]

    def test_duplicate_pins_rejected(self):
        with pytest.raises(ConfigError, match="distinct"):
            PinConfig(rs=7, e=7, d4=25, d5=24, d6=23, d7=18)

    @pytest.mark.parametrize("bad", [-1, "7", 7.0, True])
    def test_invalid_pin_number(self, bad):
        with pytest.raises(ConfigError):
            PinConfig(rs=bad, e=8, d4=25, d5=24, d6=23, d7=18)

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as a ValueError or an LcdError."""
        with pytest.raises(ValueError):
            PinConfig(rs=1, e=1, d4=2, d5=3, d6=4, d7=5)
        assert issubclass(ConfigError, LcdError)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_PINS.rs = 3


class TestPinConfigFromEnv:
    """Test environment variable overrides."""

    def test_no_env_gives_defaults(self, monkeypatch):
        for name in ("RS", "E", "D4", "D5", "D6", "D7"):
            monkeypatch.delenv(f"LCD1602_PIN_{name}", raising=False)
        assert PinConfig.from_env() == DEFAULT_PINS

    def test_partial_override(self, monkeypatch):
        monkeypatch.setenv("LCD1602_PIN_RS", "26")
        monkeypatch.setenv("LCD1602_PIN_E", "19")
        config = PinConfig.from_env()
        assert config.rs == 26
        assert config.e == 19
        assert config.data == DEFAULT_PINS.data

    def test_custom_base(self, monkeypatch):
        monkeypatch.setenv("LCD1602_PIN_D7", "21")
        base = PinConfig(rs=26, e=19, d4=13, d5=6, d6=5, d7=12)
        assert PinConfig.from_env(base).d7 == 21

    def test_non_integer(self, monkeypatch):
        monkeypatch.setenv("LCD1602_PIN_D4", "twenty")
        with pytest.raises(ConfigError, match="LCD1602_PIN_D4"):
            PinConfig.from_env()


class TestTimingConfig:
    """Test bus delay configuration."""

    def test_defaults_are_one_millisecond(self):
        timing = TimingConfig()
        assert timing.pulse_delay == 0.001
        assert timing.init_delay == 0.001

    @pytest.mark.parametrize("bad", [0, -0.001])
    def test_delays_cannot_be_removed(self, bad):
        with pytest.raises(ConfigError):
            TimingConfig(pulse_delay=bad)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LCD1602_PULSE_DELAY", "0.0005")
        monkeypatch.delenv("LCD1602_INIT_DELAY", raising=False)
        timing = TimingConfig.from_env()
        assert timing.pulse_delay == 0.0005
        assert timing.init_delay == 0.001

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("LCD1602_INIT_DELAY", "soon")
        with pytest.raises(ConfigError):
            TimingConfig.from_env()
