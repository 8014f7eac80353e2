"""Tests for relkit.services.package module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from relkit.core.config import PackageConfig
from relkit.core.manifest import ManifestError
from relkit.core.project import Project
from relkit.services.package import prepare_package


def test_writes_trimmed_manifest(project_root: Path) -> None:
    project = Project(root=project_root)

    prepared = prepare_package(project, PackageConfig())

    assert prepared.manifest_path == project_root / "dist" / "package.json"
    data = json.loads(prepared.manifest_path.read_text(encoding="utf-8"))
    assert "dependencies" not in data
    assert "devDependencies" not in data
    assert data["bin"] == "./bin-prettier.js"
    assert data["engines"]["node"] == ">=4"
    assert data["files"] == ["*.js"]
    assert list(data["scripts"]) == ["prepublishOnly"]
    assert data["version"] == "1.2.3"
    assert data["main"] == "./index.js"


def test_manifest_is_pretty_printed(project_root: Path) -> None:
    prepared = prepare_package(Project(root=project_root), PackageConfig())

    text = prepared.manifest_path.read_text(encoding="utf-8")

    assert text.startswith('{\n  "name": "prettier",\n')
    assert text.endswith("}\n")


def test_root_manifest_is_untouched(project_root: Path) -> None:
    before = (project_root / "package.json").read_text(encoding="utf-8")

    prepare_package(Project(root=project_root), PackageConfig())

    assert (project_root / "package.json").read_text(encoding="utf-8") == before


def test_readme_is_copied_verbatim(project_root: Path) -> None:
    prepared = prepare_package(Project(root=project_root), PackageConfig())

    assert prepared.readme_path.read_bytes() == (project_root / "README.md").read_bytes()


def test_missing_readme_propagates(project_root: Path) -> None:
    (project_root / "README.md").unlink()

    with pytest.raises(FileNotFoundError):
        prepare_package(Project(root=project_root), PackageConfig())


def test_non_object_manifest_is_rejected(project_root: Path) -> None:
    (project_root / "package.json").write_text("[]", encoding="utf-8")

    with pytest.raises(ManifestError):
        prepare_package(Project(root=project_root), PackageConfig())
