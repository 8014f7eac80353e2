"""Where relkit prints to.

Services only see ``ConsoleProtocol``. ``RichConsole`` renders to the terminal
(stdout, plus stderr for errors); ``MockConsole`` keeps every call as an
``OutputRecord`` so tests can assert on exact lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]

DEFAULT_WIDTH = 80


class Style(Enum):
    """Semantic styles; each console maps them to its own rendering."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()  # progress filler
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output.

    ``print`` and ``write`` go to standard output; ``exception`` goes to the
    error stream.
    """

    @property
    def width(self) -> int:
        """Terminal width in cells."""
        ...

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message followed by a newline."""
        ...

    def write(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Write a message without a line terminator."""
        ...

    def tag(self, label: str, style: Style) -> None:
        """Print an inverse status tag (e.g. `` DONE ``) and end the line."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...

    def newline(self) -> None: ...

    def exception(self, error: BaseException) -> None:
        """Print an error object to the error stream."""
        ...


class RichConsole:
    """Terminal console backed by two rich Consoles (stdout and stderr)."""

    def __init__(self) -> None:
        from rich.console import Console
        from rich.markup import escape

        self._escape = escape
        self._console = Console(highlight=False)
        self._err_console = Console(stderr=True, highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    @property
    def width(self) -> int:
        return self._console.width or DEFAULT_WIDTH

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def write(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style) or None
        self._console.print(message, style=rich_style, end="", markup=False, soft_wrap=True)

    def tag(self, label: str, style: Style) -> None:
        color = {Style.SUCCESS: "green", Style.ERROR: "red"}.get(style, "")
        self._console.print(label, style=f"reverse bold {color}".strip(), markup=False)

    def success(self, message: str) -> None:
        self._console.print(f"[green]OK[/green] {self._escape(message)}")

    def error(self, message: str) -> None:
        self._err_console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {self._escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {self._escape(message)}")

    def header(self, message: str) -> None:
        self._console.print(f" {message} ", style="reverse", markup=False)

    def newline(self) -> None:
        self._console.print()

    def exception(self, error: BaseException) -> None:
        self._err_console.print(f"{type(error).__name__}: {error}", style="red", markup=False)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    end: str = "\n"
    stderr: bool = False


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    columns: int = DEFAULT_WIDTH

    @property
    def width(self) -> int:
        return self.columns

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def write(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style, end=""))

    def tag(self, label: str, style: Style) -> None:
        self.outputs.append(OutputRecord(label, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, stderr=True))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def exception(self, error: BaseException) -> None:
        self.outputs.append(
            OutputRecord(f"{type(error).__name__}: {error}", Style.ERROR, stderr=True)
        )

    # Test helper methods

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def stdout(self) -> str:
        """Standard output as it would appear on screen."""
        return "".join(o.message + o.end for o in self.outputs if not o.stderr)

    @property
    def stderr(self) -> str:
        return "".join(o.message + o.end for o in self.outputs if o.stderr)

    @property
    def lines(self) -> list[str]:
        """Standard output split into lines."""
        return self.stdout.splitlines()

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
