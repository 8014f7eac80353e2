from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from relkit import __version__
from relkit.cli.app import app
from relkit.core.errors import ErrorCode
from relkit.core.project import ROOT_ENV_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env() -> Iterator[None]:
    with patch.dict(os.environ):
        os.environ.pop(ROOT_ENV_VAR, None)
        yield


def _make_project(root: Path, config: str | None = None) -> Path:
    (root / "package.json").write_text(
        json.dumps({"name": "demo", "version": "2.0.0", "dependencies": {"a": "1"}}),
        encoding="utf-8",
    )
    (root / "README.md").write_text("# demo\n", encoding="utf-8")
    template = root / ".github" / "ISSUE_TEMPLATE.md"
    template.parent.mkdir()
    template.write_text("<!-- describe the bug -->\nold\n", encoding="utf-8")
    if config is not None:
        (root / "relkit.toml").write_text(config, encoding="utf-8")
    return root


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_bundles_lists_outputs(tmp_path: Path) -> None:
    root = _make_project(
        tmp_path,
        '[[bundles]]\noutput = "index.js"\n\n[[bundles]]\noutput = "bin/prettier.js"\n',
    )

    result = runner.invoke(app, ["--root", str(root), "bundles"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["index.js", "bin/prettier.js"]


def test_bundles_without_config_fails(tmp_path: Path) -> None:
    root = _make_project(tmp_path)

    result = runner.invoke(app, ["--root", str(root), "bundles"])

    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
    assert "Config file not found" in result.output


def test_root_must_be_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--root", str(tmp_path / "nope"), "bundles"])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert "is not a directory" in result.output


def test_package_detects_project_from_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = _make_project(tmp_path)
    nested = root / "src" / "lib"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    result = runner.invoke(app, ["package"])

    assert result.exit_code == 0, result.output
    data = json.loads((root / "dist" / "package.json").read_text(encoding="utf-8"))
    assert "dependencies" not in data
    assert (root / "dist" / "README.md").read_text(encoding="utf-8") == "# demo\n"


def test_issue_template_updates_file(tmp_path: Path) -> None:
    root = _make_project(tmp_path)

    result = runner.invoke(app, ["--root", str(root), "issue-template"])

    assert result.exit_code == 0, result.output
    content = (root / ".github" / "ISSUE_TEMPLATE.md").read_text(encoding="utf-8")
    assert content.startswith("<!-- describe the bug -->\n\n**Prettier 2.0.0**")
    assert "old" not in content


def test_malformed_config_fails(tmp_path: Path) -> None:
    root = _make_project(tmp_path, "[paths\n")

    result = runner.invoke(app, ["--root", str(root), "package"])

    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
    assert "Invalid TOML syntax" in result.output
