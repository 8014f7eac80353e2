"""Release build services."""

from .bundler import BundleError, Bundler, CommandBundler
from .bundles import build_bundles, create_bundle
from .issue_template import update_issue_template
from .markdown import format_markdown
from .package import prepare_package
from .release import ReleaseService

__all__ = [
    "BundleError",
    "Bundler",
    "CommandBundler",
    "ReleaseService",
    "build_bundles",
    "create_bundle",
    "format_markdown",
    "prepare_package",
    "update_issue_template",
]
