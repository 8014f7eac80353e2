"""Fixed-width progress lines with a trailing status tag.

A progress line is a label, a run of dimmed filler dots and a status tag that
together fill the terminal exactly::

    index.js....................................................... DONE
"""

from __future__ import annotations

from rich.cells import cell_len

from .console import DEFAULT_WIDTH, ConsoleProtocol, Style

__all__ = [
    "DONE_TAG",
    "FAIL_TAG",
    "FILLER",
    "ProgressReporter",
    "fill_width",
    "fit_terminal",
]

DONE_TAG = " DONE "
FAIL_TAG = " FAIL "
FILLER = "."


def fill_width(label: str, columns: int | None, tag: str = DONE_TAG) -> int:
    """Number of filler cells so that label + filler + tag spans columns.

    Zero when the label is already too wide; widths are measured in terminal
    cells, so wide characters count double.
    """
    available = (columns or DEFAULT_WIDTH) - cell_len(tag)
    return max(0, available - cell_len(label))


def fit_terminal(label: str, columns: int | None, tag: str = DONE_TAG) -> str:
    """Return label padded with filler dots up to the tag column."""
    return label + FILLER * fill_width(label, columns, tag)


class ProgressReporter:
    """Writes one progress line per step to a console."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def start(self, label: str) -> None:
        """Write the padded label, leaving the line open for the tag."""
        self._console.write(label)
        filler = fill_width(label, self._console.width)
        if filler:
            self._console.write(FILLER * filler, Style.DIM)

    def done(self) -> None:
        self._console.tag(DONE_TAG, Style.SUCCESS)

    def fail(self, error: BaseException) -> None:
        """Close the line with a FAIL tag, then print the error to stderr."""
        self._console.tag(FAIL_TAG, Style.ERROR)
        self._console.newline()
        self._console.exception(error)
