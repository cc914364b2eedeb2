#!/usr/bin/env python3
"""
Threaded LCD Usage
==================

LCDController is not thread-safe, so this example funnels every display
operation through a queue drained by one worker thread. Any number of
producer threads may put commands on the queue.

Usage:
    python examples/threaded_usage.py
"""

import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional

from lcd1602_gpio import LCDController, LcdLine


@dataclass(frozen=True)
class DisplayText:
    text: str
    line: LcdLine


class ClearScreen:
    pass


def lcd_worker(lcd: LCDController, commands: "queue.Queue[Optional[object]]") -> None:
    """Run commands until None is received."""
    while True:
        command = commands.get()
        if command is None:
            break
        if isinstance(command, DisplayText):
            lcd.display_text(command.text, command.line)
        elif isinstance(command, ClearScreen):
            lcd.clear_screen()


def main():
    commands: "queue.Queue[Optional[object]]" = queue.Queue()

    with LCDController.default() as lcd:
        worker = threading.Thread(target=lcd_worker, args=(lcd, commands))
        worker.start()

        commands.put(DisplayText("Hello World!", LcdLine.LINE_1))
        time.sleep(3)
        commands.put(DisplayText("Hello threads", LcdLine.LINE_2))
        time.sleep(5)
        commands.put(ClearScreen())

        # Stop the worker before the controller is closed
        commands.put(None)
        worker.join()


if __name__ == "__main__":
    main()
