from __future__ import annotations

from relkit.cli.context import build_context
from relkit.output.console import Style


def list_bundles() -> None:
    """List configured bundles in build order."""
    ctx = build_context(require_config=True)
    if not ctx.config.bundles:
        ctx.console.print("No bundles configured", Style.DIM)
        return
    for bundle in ctx.config.bundles:
        ctx.console.print(bundle.output)
