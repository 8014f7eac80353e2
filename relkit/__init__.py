"""relkit: release-build orchestration for bundled packages."""

__version__ = "0.3.0"
