from __future__ import annotations

from collections.abc import Iterable

from relkit.core.config import BundleConfig
from relkit.core.errors import LoggedErrors
from relkit.output.console import ConsoleProtocol
from relkit.output.progress import ProgressReporter
from relkit.services.bundler import Bundler

__all__ = ["build_bundles", "create_bundle"]


async def create_bundle(
    bundle: BundleConfig,
    *,
    bundler: Bundler,
    console: ConsoleProtocol,
    logged_errors: LoggedErrors,
) -> None:
    """Build one bundle and report it on a single progress line.

    A failure is recorded in logged_errors, reported, and re-raised as is.
    """
    reporter = ProgressReporter(console)
    reporter.start(bundle.output)

    try:
        await bundler(bundle, bundle.output)
    except Exception as error:
        logged_errors.add(error)
        reporter.fail(error)
        raise

    reporter.done()


async def build_bundles(
    bundles: Iterable[BundleConfig],
    *,
    bundler: Bundler,
    console: ConsoleProtocol,
    logged_errors: LoggedErrors,
) -> None:
    """Build bundles one after another, stopping at the first failure."""
    for bundle in bundles:
        await create_bundle(
            bundle, bundler=bundler, console=console, logged_errors=logged_errors
        )
