"""Release build orchestration.

One run has three phases, executed in order and stopped by the first error:

1. Clean: remove the dist directory.
2. Bundle: build every configured bundle, strictly one after another.
3. Finalize: prepare the publishable package, then refresh the issue template.

Both finalize steps read package.json from disk by path; the package step must
run first.
"""

from __future__ import annotations

from relkit.core.config import ReleaseConfig
from relkit.core.errors import LoggedErrors
from relkit.core.project import Project
from relkit.output.console import ConsoleProtocol
from relkit.platform.files import remove_tree
from relkit.services.bundler import Bundler, CommandBundler
from relkit.services.bundles import build_bundles
from relkit.services.issue_template import update_issue_template
from relkit.services.package import prepare_package

__all__ = ["ReleaseService"]


class ReleaseService:
    def __init__(
        self,
        *,
        project: Project,
        config: ReleaseConfig,
        console: ConsoleProtocol,
        logged_errors: LoggedErrors,
        bundler: Bundler | None = None,
    ) -> None:
        self._project = project
        self._config = config
        self._console = console
        self._logged_errors = logged_errors
        self._bundler: Bundler = bundler or CommandBundler(
            root=project.root,
            dist_dir=project.dist_dir,
            command=config.bundler.command,
        )

    def clean(self) -> None:
        remove_tree(self._project.dist_dir)

    async def bundle(self) -> None:
        self._console.header("Building packages")
        await build_bundles(
            self._config.bundles,
            bundler=self._bundler,
            console=self._console,
            logged_errors=self._logged_errors,
        )

    def finalize(self) -> None:
        prepare_package(self._project, self._config.package)
        update_issue_template(self._project, self._config.issue_template, self._console)

    async def run(self) -> None:
        """Run clean, bundle and finalize; any exception aborts the run."""
        self.clean()
        await self.bundle()
        self.finalize()
