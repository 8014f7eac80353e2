"""Typed configuration loading and access.

This module provides frozen dataclasses for the relkit.toml structure. Every
key is optional except ``output`` on each ``[[bundles]]`` table; missing keys
fall back to the defaults below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .result import Err, Ok, Result
from .structured import (
    StrDict,
    as_obj_list,
    as_str_dict,
    get_bool,
    get_list,
    get_str,
    get_str_list,
    get_table,
)

__all__ = [
    "CONFIG_FILENAME",
    "BundleConfig",
    "BundlerConfig",
    "ConfigError",
    "IssueTemplateConfig",
    "PackageConfig",
    "PathsConfig",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relkit.toml"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_BIN = "./bin-prettier.js"
DEFAULT_NODE_ENGINE = ">=4"
DEFAULT_FILES = ("*.js",)
DEFAULT_PREPUBLISH_CHECK = (
    "node -e \"assert.equal(require('.').version, require('..').version)\""
)

DEFAULT_MARKER = "-->"
DEFAULT_SNIPPET = "// code snippet"
DEFAULT_PLAYGROUND_URL = "https://prettier.io/playground/#....."
DEFAULT_PARSER = "babylon"
DEFAULT_PRODUCT = "Prettier"
DEFAULT_FLAGS: tuple[tuple[str, object], ...] = (
    ("# Options (if any):", True),
    ("--single-quote", True),
)


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Paths relative to the project root."""

    dist: str = "dist"
    manifest: str = "package.json"
    readme: str = "README.md"
    issue_template: str = ".github/ISSUE_TEMPLATE.md"


@dataclass(frozen=True, slots=True)
class PackageConfig:
    """Overrides applied to the published package.json."""

    bin: str = DEFAULT_BIN
    node_engine: str = DEFAULT_NODE_ENGINE
    files: tuple[str, ...] = DEFAULT_FILES
    prepublish_check: str = DEFAULT_PREPUBLISH_CHECK


@dataclass(frozen=True, slots=True)
class IssueTemplateConfig:
    """Inputs for the example block regenerated in the issue template.

    ``product`` is the label in the example heading, next to the version.
    """

    marker: str = DEFAULT_MARKER
    snippet: str = DEFAULT_SNIPPET
    playground_url: str = DEFAULT_PLAYGROUND_URL
    parser: str = DEFAULT_PARSER
    flags: tuple[tuple[str, object], ...] = DEFAULT_FLAGS
    full: bool = True
    product: str = DEFAULT_PRODUCT


@dataclass(frozen=True, slots=True)
class BundlerConfig:
    """Default command for the command bundler (may be empty)."""

    command: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BundleConfig:
    """One build target.

    Attributes:
        output: Artifact path relative to the dist directory
        options: Bundler options; opaque to everything but the bundler
    """

    output: str
    options: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(cls, output: str, **options: object) -> BundleConfig:
        return cls(output=output, options=MappingProxyType(dict(options)))


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Main configuration container."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    package: PackageConfig = field(default_factory=PackageConfig)
    issue_template: IssueTemplateConfig = field(default_factory=IssueTemplateConfig)
    bundler: BundlerConfig = field(default_factory=BundlerConfig)
    bundles: tuple[BundleConfig, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create ReleaseConfig from a mapping (parsed TOML).

        Raises:
            ValueError: If a bundle or flag entry is malformed.
        """
        paths: StrDict = get_table(data, "paths") or {}
        package: StrDict = get_table(data, "package") or {}
        template: StrDict = get_table(data, "issue_template") or {}
        bundler: StrDict = get_table(data, "bundler") or {}

        return cls(
            paths=PathsConfig(
                dist=get_str(paths, "dist") or "dist",
                manifest=get_str(paths, "manifest") or "package.json",
                readme=get_str(paths, "readme") or "README.md",
                issue_template=get_str(paths, "issue_template") or ".github/ISSUE_TEMPLATE.md",
            ),
            package=PackageConfig(
                bin=get_str(package, "bin") or DEFAULT_BIN,
                node_engine=get_str(package, "node_engine") or DEFAULT_NODE_ENGINE,
                files=get_str_list(package, "files") or DEFAULT_FILES,
                prepublish_check=get_str(package, "prepublish_check") or DEFAULT_PREPUBLISH_CHECK,
            ),
            issue_template=IssueTemplateConfig(
                marker=get_str(template, "marker") or DEFAULT_MARKER,
                snippet=get_str(template, "snippet") or DEFAULT_SNIPPET,
                playground_url=get_str(template, "playground_url") or DEFAULT_PLAYGROUND_URL,
                parser=get_str(template, "parser") or DEFAULT_PARSER,
                flags=_parse_flags(template),
                full=_bool_or(get_bool(template, "full"), True),
                product=get_str(template, "product") or DEFAULT_PRODUCT,
            ),
            bundler=BundlerConfig(command=get_str_list(bundler, "command") or ()),
            bundles=_parse_bundles(data),
        )


def _bool_or(value: bool | None, default: bool) -> bool:
    return default if value is None else value


def _parse_flags(template: Mapping[str, object]) -> tuple[tuple[str, object], ...]:
    items = get_list(template, "flags")
    if items is None:
        return DEFAULT_FLAGS

    flags: list[tuple[str, object]] = []
    for item in items:
        pair = as_obj_list(item)
        if pair is None or len(pair) != 2 or not isinstance(pair[0], str):
            raise ValueError(f"issue_template.flags entries must be [label, value]: {item!r}")
        flags.append((pair[0], pair[1]))
    return tuple(flags)


def _parse_bundles(data: Mapping[str, object]) -> tuple[BundleConfig, ...]:
    items = get_list(data, "bundles")
    if items is None:
        return ()

    bundles: list[BundleConfig] = []
    for index, item in enumerate(items):
        table = as_str_dict(item)
        if table is None:
            raise ValueError(f"bundles[{index}] must be a table")
        output = get_str(table, "output")
        if output is None:
            raise ValueError(f"bundles[{index}] is missing 'output'")
        options = {k: v for k, v in table.items() if k != "output"}
        bundles.append(BundleConfig(output=output, options=MappingProxyType(options)))
    return tuple(bundles)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relkit.toml

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load config, falling back to defaults only when the file is absent.

    A file that exists but is malformed is still an error.
    """
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
