"""Build command - clean, bundle and finalize a release."""

from __future__ import annotations

import asyncio

import typer

from relkit.cli.context import CLIContext, build_context
from relkit.core.errors import ErrorCode, LoggedErrors
from relkit.services.release import ReleaseService


def run_release(ctx: CLIContext, logged_errors: LoggedErrors) -> None:
    """Run the release build; exit quietly for errors already reported.

    Errors not in logged_errors propagate so they get a full traceback.
    """
    service = ReleaseService(
        project=ctx.project,
        config=ctx.config,
        console=ctx.console,
        logged_errors=logged_errors,
    )
    try:
        asyncio.run(service.run())
    except Exception as error:
        if error in logged_errors:
            raise typer.Exit(code=int(ErrorCode.BUILD_ERROR)) from None
        raise


def build() -> None:
    """Build all bundles and prepare the dist package."""
    ctx = build_context(require_config=True)
    run_release(ctx, LoggedErrors())
