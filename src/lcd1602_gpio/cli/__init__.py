"""
LCD Driver Command-Line Interface
=================================

This package provides the command-line tool for the LCD driver:

- **lcdctl**: show text, clear, reset and inspect the display

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["lcdctl"]
