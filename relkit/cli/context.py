from __future__ import annotations

from dataclasses import dataclass

import typer

from relkit.core.config import ReleaseConfig, load_config, load_config_or_default
from relkit.core.errors import ErrorCode
from relkit.core.project import Project, detect_project
from relkit.core.result import Err
from relkit.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context(*, require_config: bool = False) -> CLIContext:
    """Detect the project and load relkit.toml.

    Without require_config a missing relkit.toml means defaults; a malformed
    one always exits.
    """
    project_result = detect_project()
    if isinstance(project_result, Err):
        typer.echo(f"error: {project_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    root = project_result.value
    config_path = Project(root=root).config_path
    loader = load_config if require_config else load_config_or_default
    config_result = loader(config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    config = config_result.value
    return CLIContext(
        project=Project(root=root, paths=config.paths),
        config=config,
        console=RichConsole(),
    )
