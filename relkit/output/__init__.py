"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .progress import ProgressReporter

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "ProgressReporter",
    "RichConsole",
    "Style",
]
