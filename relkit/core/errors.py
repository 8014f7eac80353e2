"""Exit codes and run-scoped error bookkeeping.

``ErrorCode`` maps failure kinds to process exit status. ``LoggedErrors``
remembers which exceptions were already shown to the user, so the top-level
handler can exit without printing them a second time.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

__all__ = ["ErrorCode", "LoggedErrors"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad input, project not found)
    - 2: Config error (relkit.toml missing or malformed)
    - 3: Build error (a bundle failed, already reported)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    BUILD_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK


class LoggedErrors:
    """Exceptions already reported during one run.

    Membership is by identity: two distinct exceptions with the same message
    are different entries. Each exception is stored at most once.
    """

    def __init__(self) -> None:
        self._errors: list[BaseException] = []

    def add(self, error: BaseException) -> None:
        if error not in self:
            self._errors.append(error)

    def __contains__(self, error: object) -> bool:
        return any(logged is error for logged in self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)
