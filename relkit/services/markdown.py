"""Markdown rendering for bug-report examples.

Produces the block embedded at the end of the issue template: version
heading, playground link, CLI options, input and output code blocks.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

__all__ = ["code_block", "format_cli_options", "format_markdown", "markdown_syntax"]

_SYNTAX_BY_PARSER = {
    "babylon": "jsx",
    "flow": "jsx",
    "typescript": "tsx",
    "json": "jsonc",
    "glimmer": "hbs",
}

_BACKTICK_RUN = re.compile(r"`+")


def markdown_syntax(options: Mapping[str, object]) -> str:
    """Fence language for the configured parser."""
    parser = options.get("parser")
    if not isinstance(parser, str):
        return ""
    return _SYNTAX_BY_PARSER.get(parser, parser)


def format_cli_options(cli_options: Iterable[tuple[str, object]]) -> str:
    """One option per line; a True value renders as the bare flag."""
    lines: list[str] = []
    for name, value in cli_options:
        lines.append(name if value is True else f"{name} {value}")
    return "\n".join(lines)


def code_block(content: str, syntax: str = "") -> str:
    """Fence content with enough backticks to survive backticks inside it."""
    longest = max((len(run) for run in _BACKTICK_RUN.findall(content)), default=0)
    fence = "`" * max(3, longest + 1)
    return "\n".join([fence + syntax, content, fence])


def format_markdown(
    input: str,
    output: str,
    output2: str,
    version: str,
    url: str,
    options: Mapping[str, object],
    cli_options: Iterable[tuple[str, object]],
    full: bool,
    *,
    product: str = "Prettier",
) -> str:
    """Render an example block for a bug report.

    ``output2`` is shown as a second output only when it is non-empty and
    differs from ``output``. ``full`` appends an empty "Expected behavior"
    section.
    """
    syntax = markdown_syntax(options)
    options_string = format_cli_options(cli_options)
    is_idempotent = output2 == "" or output == output2

    parts: list[str] = [f"**{product} {version}**", f"[Playground link]({url})"]
    if options_string:
        parts.append(code_block(options_string, "sh"))
    parts += ["", "**Input:**", code_block(input, syntax), "", "**Output:**", code_block(output, syntax)]
    if not is_idempotent:
        parts += ["", "**Second Output:**", code_block(output2, syntax)]
    if full:
        parts += ["", "**Expected behavior:**", ""]
    return "\n".join(parts)
