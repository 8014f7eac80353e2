"""Regenerate the example block at the end of the issue template."""

from __future__ import annotations

from relkit.core.config import IssueTemplateConfig
from relkit.core.manifest import Manifest, load_manifest
from relkit.core.project import Project
from relkit.output.console import ConsoleProtocol
from relkit.platform.files import atomic_write_text
from relkit.services.markdown import format_markdown

__all__ = ["render_example", "replace_example", "update_issue_template"]


def render_example(manifest: Manifest, template: IssueTemplateConfig) -> str:
    """Example block for the current manifest version."""
    return format_markdown(
        template.snippet,
        template.snippet,
        "",
        manifest.version,
        template.playground_url,
        {"parser": template.parser},
        template.flags,
        template.full,
        product=template.product,
    )


def replace_example(text: str, marker: str, block: str) -> str | None:
    """Replace everything after the last marker with block.

    Returns None when the marker does not occur in text.

    Raises:
        ValueError: If block contains the marker, since the next run would
            then cut inside the generated block.
    """
    if marker in block:
        raise ValueError(f"generated example contains the marker {marker!r}")
    index = text.rfind(marker)
    if index < 0:
        return None
    return text[:index] + marker + "\n\n" + block


def update_issue_template(
    project: Project,
    template: IssueTemplateConfig,
    console: ConsoleProtocol,
) -> str | None:
    """Rewrite the issue template in place.

    Returns the new content, or None if the template has no marker and was
    left untouched.
    """
    path = project.issue_template_path
    # Decoded without newline translation so the prefix keeps its line endings.
    text = path.read_bytes().decode("utf-8")

    block = render_example(load_manifest(project.manifest_path), template)
    updated = replace_example(text, template.marker, block)
    if updated is None:
        console.warning(f"{path}: marker {template.marker!r} not found, left unchanged")
        return None

    atomic_write_text(path, updated)
    return updated
