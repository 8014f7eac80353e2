from __future__ import annotations

from relkit.cli.context import build_context
from relkit.services.package import prepare_package


def package() -> None:
    """Write the trimmed package.json and README into dist."""
    ctx = build_context()
    prepared = prepare_package(ctx.project, ctx.config.package)
    ctx.console.success(str(prepared.manifest_path))
    ctx.console.success(str(prepared.readme_path))
