"""Bundler exception hierarchy.

All bundler-specific exceptions inherit from BundlerError,
enabling structured error handling and cleaner catch clauses.
"""

from __future__ import annotations

import errno


class BundlerError(Exception):
    """Base exception for all bundler errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidConfigurationError(BundlerError):
    """Invalid or missing build configuration."""


class PatternSyntaxError(BundlerError):
    """Malformed glob pattern."""

    def __init__(self, message: str = "", *, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern


class StorageError(BundlerError):
    """Error reading or writing a file."""

    operation = "access"

    def __init__(self, path: str, *, code: str | None = None, detail: str = "") -> None:
        message = f'Unable to {self.operation} "{path}" file (Error code: {code}).'
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.path = path
        self.code = code

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> StorageError:
        code = errno.errorcode.get(exc.errno) if exc.errno is not None else None
        return cls(path, code=code, detail=exc.strerror or "")


class StorageReadError(StorageError):
    """A source file could not be read or decoded."""

    operation = "read"


class StorageWriteError(StorageError):
    """An artifact or directory could not be written."""

    operation = "write"


class TransformError(BundlerError):
    """A transform rule broke its contract."""
