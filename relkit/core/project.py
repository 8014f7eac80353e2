"""Project detection and paths.

The project is the directory holding the package being released. It is
identified by a ``relkit.toml`` file, or failing that by ``package.json``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import CONFIG_FILENAME, PathsConfig
from .result import Err, Ok, Result

__all__ = [
    "ROOT_ENV_VAR",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
]

ROOT_ENV_VAR = "RELKIT_ROOT"


@dataclass(frozen=True, slots=True)
class ProjectError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected project root with its configured paths."""

    root: Path
    paths: PathsConfig = field(default_factory=PathsConfig)

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    @property
    def dist_dir(self) -> Path:
        """Distribution directory, wiped at the start of every build."""
        return self.root / self.paths.dist

    @property
    def manifest_path(self) -> Path:
        return self.root / self.paths.manifest

    @property
    def readme_path(self) -> Path:
        return self.root / self.paths.readme

    @property
    def issue_template_path(self) -> Path:
        return self.root / self.paths.issue_template

    def __str__(self) -> str:
        return str(self.root)


def find_project_upward(start: Path, marker: str) -> Path | None:
    """Return the nearest directory at or above start containing marker."""
    for parent in (start, *start.parents):
        if (parent / marker).is_file():
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = ROOT_ENV_VAR,
) -> Result[Path, ProjectError]:
    """Detect the project root directory.

    Detection order:
    1. RELKIT_ROOT environment variable (must be a directory)
    2. Nearest directory upward containing relkit.toml
    3. Nearest directory upward containing package.json
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(env_path)
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    for marker in (CONFIG_FILENAME, "package.json"):
        found = find_project_upward(search_start, marker)
        if found is not None:
            return Ok(found)

    return Err(
        ProjectError(
            message=f"Could not find project ({CONFIG_FILENAME} or package.json not found)",
            searched_from=search_start,
        )
    )
