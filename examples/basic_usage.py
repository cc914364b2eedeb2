#!/usr/bin/env python3
"""
Basic LCD Usage
===============

Writes two rows of text to a 16x2 display, clears it, and repeats.

The default wiring is used; see lcd1602_gpio.config for the pin table, or
construct the controller with LCDController.from_pins() for your own.

Usage:
    python examples/basic_usage.py
"""

import time

from lcd1602_gpio import LCDController, LcdLine


def main():
    with LCDController.default() as lcd:
        print(lcd)

        for _ in range(5):
            lcd.display_text("Hello World!", LcdLine.LINE_1)
            time.sleep(3)

            lcd.display_text("Hello Python", LcdLine.LINE_2)
            time.sleep(5)

            lcd.clear_screen()
            time.sleep(1)


if __name__ == "__main__":
    main()
