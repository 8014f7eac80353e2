"""Package manifest model and the dist transformation.

``Manifest`` wraps a parsed package.json and keeps every field in file
order. ``to_dist_manifest`` turns it into the ``DistManifest`` published from
the dist directory: developer-only fields dropped, entry point and engine
pinned, scripts and file list replaced.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import PackageConfig
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "DEV_ONLY_FIELDS",
    "DistManifest",
    "Manifest",
    "ManifestError",
    "load_manifest",
    "to_dist_manifest",
]

DEV_ONLY_FIELDS = ("dependencies", "devDependencies")

# Keys the transformation owns; appended in this order when the source lacks them.
_OVERRIDDEN_FIELDS = ("bin", "engines", "scripts", "files")


class ManifestError(ValueError):
    """Raised when package.json is not a JSON object or lacks a field."""


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed package.json."""

    fields: Mapping[str, object]
    path: Path | None = None

    @classmethod
    def from_dict(cls, data: object, *, path: Path | None = None) -> Manifest:
        table = as_str_dict(data)
        if table is None:
            raise ManifestError(f"Manifest root must be a JSON object: {path}")
        return cls(fields=dict(table), path=path)

    @property
    def name(self) -> str | None:
        return get_str(self.fields, "name")

    @property
    def version(self) -> str:
        """The package version.

        Raises:
            ManifestError: If the manifest has no version string.
        """
        version = get_str(self.fields, "version")
        if version is None:
            raise ManifestError(f"Manifest has no version: {self.path}")
        return version

    @property
    def engines(self) -> StrDict:
        return dict(get_table(self.fields, "engines") or {})


@dataclass(frozen=True, slots=True)
class DistManifest:
    """The manifest written to the dist directory.

    Attributes:
        bin: Executable entry point
        engines: Engine constraints, with ``node`` pinned
        scripts: Replacement scripts table
        files: Published file globs
        extra: Remaining source fields, unchanged
        order: Key order of the serialized object
    """

    bin: str
    engines: StrDict
    scripts: dict[str, str]
    files: tuple[str, ...]
    extra: StrDict
    order: tuple[str, ...]

    def to_dict(self) -> StrDict:
        owned: StrDict = {
            "bin": self.bin,
            "engines": dict(self.engines),
            "scripts": dict(self.scripts),
            "files": list(self.files),
        }
        return {key: owned[key] if key in owned else self.extra[key] for key in self.order}


def to_dist_manifest(manifest: Manifest, package: PackageConfig) -> DistManifest:
    """Build the publishable manifest from the root manifest."""
    kept = [key for key in manifest.fields if key not in DEV_ONLY_FIELDS]
    order = tuple(kept) + tuple(key for key in _OVERRIDDEN_FIELDS if key not in kept)
    extra = {key: manifest.fields[key] for key in kept if key not in _OVERRIDDEN_FIELDS}

    engines = manifest.engines
    engines["node"] = package.node_engine

    return DistManifest(
        bin=package.bin,
        engines=engines,
        scripts={"prepublishOnly": package.prepublish_check},
        files=package.files,
        extra=extra,
        order=order,
    )


def load_manifest(path: Path) -> Manifest:
    """Read and parse package.json.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
        ManifestError: If the root is not an object.
    """
    data: object = json.loads(path.read_text(encoding="utf-8"))
    return Manifest.from_dict(data, path=path)
