"""Core domain types and logic."""

from .config import BundleConfig, ConfigError, ReleaseConfig, load_config
from .errors import ErrorCode, LoggedErrors
from .manifest import DistManifest, Manifest, ManifestError, to_dist_manifest
from .project import Project, ProjectError, detect_project
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "BundleConfig",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    # errors
    "ErrorCode",
    "LoggedErrors",
    # manifest
    "DistManifest",
    "Manifest",
    "ManifestError",
    "to_dist_manifest",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
