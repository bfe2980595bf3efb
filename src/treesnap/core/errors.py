"""Errors that abort a snapshot pass.

A missing path is never an error; it resolves to "no instance" wherever it
is looked up.
"""

from __future__ import annotations

from pathlib import PurePath


class SnapshotError(Exception):
    """Base class for unrecoverable snapshot failures."""


class InvalidFileNameError(SnapshotError):
    """A path's final component is missing or is not valid text."""

    def __init__(self, path: PurePath) -> None:
        self.path = path
        super().__init__(f"Path had an invalid file name: {path}")


class UnknownTransformerError(SnapshotError):
    """An override or sync rule named a transformer that does not exist."""

    def __init__(self, identifier: str, path: PurePath | None = None) -> None:
        self.identifier = identifier
        self.path = path
        message = f"Unknown transformer: {identifier}"
        if path is not None:
            message += f" (for {path})"
        super().__init__(message)


class TransformerError(SnapshotError):
    """A content transformer failed while snapshotting a path."""

    def __init__(self, path: PurePath, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to snapshot {path}: {cause}")
