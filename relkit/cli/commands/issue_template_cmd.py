from __future__ import annotations

from relkit.cli.context import build_context
from relkit.services.issue_template import update_issue_template


def issue_template() -> None:
    """Regenerate the example block in the issue template."""
    ctx = build_context()
    updated = update_issue_template(ctx.project, ctx.config.issue_template, ctx.console)
    if updated is not None:
        ctx.console.success(str(ctx.project.issue_template_path))
