"""
User Interface module.

This package contains UI implementations for displaying the course list.
Currently implements terminal/console output.

To add a new UI (e.g., web, GUI), create a new module in this package
with the same method signatures as TerminalDisplay.
"""

from .terminal import TerminalDisplay, format_number, format_plain

__all__ = ["TerminalDisplay", "format_number", "format_plain"]
