"""Bundler contract and the default command-line bundler.

A bundler is any awaitable callable ``(bundle, output) -> None`` that raises
on failure. ``CommandBundler`` runs an external command per target, with
``{placeholder}`` arguments filled from the bundle options.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from relkit.core.config import BundleConfig
from relkit.core.result import Err
from relkit.core.structured import as_obj_list, as_str_dict
from relkit.platform.process import run_async

__all__ = ["BundleError", "Bundler", "CommandBundler", "render_command"]


class BundleError(Exception):
    """A bundle could not be built.

    Attributes:
        output: The configured output of the failing bundle
        message: Short description
        details: Captured stderr of the bundler command, if any
    """

    def __init__(self, output: str, message: str, details: str = "") -> None:
        super().__init__(message)
        self.output = output
        self.message = message
        self.details = details

    def __str__(self) -> str:
        text = f"{self.output}: {self.message}"
        details = self.details.strip()
        if details:
            text += f"\n{details}"
        return text


class Bundler(Protocol):
    async def __call__(self, bundle: BundleConfig, output: str) -> None: ...


def render_command(
    template: tuple[str, ...],
    values: Mapping[str, object],
    *,
    output: str,
) -> list[str]:
    """Fill ``{name}`` placeholders in each command argument.

    Raises:
        BundleError: If an argument references an unknown placeholder.
    """
    argv: list[str] = []
    for arg in template:
        try:
            argv.append(arg.format_map(values))
        except KeyError as e:
            raise BundleError(output, f"unknown placeholder {{{e.args[0]}}} in bundler command") from e
        except (IndexError, ValueError) as e:
            raise BundleError(output, f"invalid bundler argument {arg!r}: {e}") from e
    return argv


class CommandBundler:
    """Build each target by running an external command.

    The command comes from the bundle's ``command`` option, or the default
    passed in. Placeholders available to the command: every bundle option,
    ``output`` (absolute artifact path), ``name`` (configured output) and
    ``dist`` (dist directory).
    """

    def __init__(
        self,
        *,
        root: Path,
        dist_dir: Path,
        command: tuple[str, ...] = (),
        timeout: float | None = None,
    ) -> None:
        self._root = root
        self._dist_dir = dist_dir
        self._command = command
        self._timeout = timeout

    def _command_for(self, bundle: BundleConfig) -> tuple[str, ...]:
        items = as_obj_list(bundle.options.get("command"))
        if items is not None:
            if not all(isinstance(item, str) for item in items):
                raise BundleError(bundle.output, "'command' must be a list of strings")
            return tuple(str(item) for item in items)
        if not self._command:
            raise BundleError(bundle.output, "no bundler command configured")
        return self._command

    def _env_for(self, bundle: BundleConfig) -> dict[str, str] | None:
        extra = as_str_dict(bundle.options.get("env"))
        if not extra:
            return None
        return {**os.environ, **{k: str(v) for k, v in extra.items()}}

    async def __call__(self, bundle: BundleConfig, output: str) -> None:
        target = self._dist_dir / output
        values: dict[str, object] = {
            **bundle.options,
            "output": str(target),
            "name": output,
            "dist": str(self._dist_dir),
        }
        argv = render_command(self._command_for(bundle), values, output=output)

        target.parent.mkdir(parents=True, exist_ok=True)
        result = await run_async(
            argv, cwd=self._root, env=self._env_for(bundle), timeout=self._timeout
        )
        if isinstance(result, Err):
            raise BundleError(output, str(result.error), result.error.stderr)
