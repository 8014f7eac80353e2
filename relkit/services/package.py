"""Publishable package preparation.

Writes the trimmed manifest and the readme into the dist directory. The root
manifest is read from disk, never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relkit.core.config import PackageConfig
from relkit.core.manifest import DistManifest, load_manifest, to_dist_manifest
from relkit.core.project import Project
from relkit.platform.files import copy_file, write_json

__all__ = ["PreparedPackage", "prepare_package"]


@dataclass(frozen=True, slots=True)
class PreparedPackage:
    manifest: DistManifest
    manifest_path: Path
    readme_path: Path


def prepare_package(project: Project, package: PackageConfig) -> PreparedPackage:
    """Write dist/package.json and dist/README.md.

    Raises:
        OSError: If a file cannot be read or written.
        ManifestError: If package.json is not a JSON object.
    """
    dist = to_dist_manifest(load_manifest(project.manifest_path), package)

    manifest_path = project.dist_dir / project.manifest_path.name
    write_json(manifest_path, dist.to_dict())

    readme_path = project.dist_dir / project.readme_path.name
    copy_file(project.readme_path, readme_path)

    return PreparedPackage(manifest=dist, manifest_path=manifest_path, readme_path=readme_path)
