"""Filesystem and subprocess helpers."""

from .files import atomic_write_text, copy_file, remove_tree, write_json
from .process import ProcessError, run_async

__all__ = [
    "ProcessError",
    "atomic_write_text",
    "copy_file",
    "remove_tree",
    "run_async",
    "write_json",
]
