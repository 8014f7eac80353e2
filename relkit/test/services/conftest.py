from __future__ import annotations

import json
from pathlib import Path

import pytest

TEMPLATE_PREFIX = """<!--
  BEFORE SUBMITTING AN ISSUE:

  1. Search for your issue on GitHub: https://github.com/prettier/prettier/issues
  2. We get a lot of requests for adding options, but Prettier is
     built on the principle of being opinionated about code formatting.
-->"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A minimal package: manifest, readme and issue template."""
    manifest = {
        "name": "prettier",
        "version": "1.2.3",
        "bin": {"prettier": "./bin/prettier.js"},
        "main": "./index.js",
        "engines": {"node": ">=4"},
        "dependencies": {"babylon": "7.0.0-beta.22"},
        "devDependencies": {"rollup": "0.47.6"},
        "scripts": {"build": "relkit build"},
        "files": ["bin", "src", "index.js"],
    }
    (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    (tmp_path / "README.md").write_text("# Prettier\n\nOpinionated formatter.\n", encoding="utf-8")
    template = tmp_path / ".github" / "ISSUE_TEMPLATE.md"
    template.parent.mkdir()
    template.write_text(TEMPLATE_PREFIX + "\n\nstale example for 1.0.0\n", encoding="utf-8")
    return tmp_path

