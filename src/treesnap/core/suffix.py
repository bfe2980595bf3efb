"""File name suffix helpers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath

from .errors import InvalidFileNameError


def file_name(path: PurePath) -> str:
    """Return the final component of a path as text.

    Raises InvalidFileNameError if there is no final component (e.g. '/')
    or it holds bytes that are not valid UTF-8.
    """
    name = path.name
    if not name:
        raise InvalidFileNameError(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        # os.fsdecode smuggles undecodable bytes in as lone surrogates
        raise InvalidFileNameError(path) from None
    return name


def file_name_ends_with(path: PurePath, suffix: str) -> bool:
    """Check if the path's file name ends with suffix (case-sensitive)."""
    try:
        return file_name(path).endswith(suffix)
    except InvalidFileNameError:
        return False


def file_name_trim_end(path: PurePath, suffix: str) -> str:
    """Strip suffix from the path's file name.

    e.g., ('foo.server.lua', '.lua') -> 'foo.server'
    """
    name = file_name(path)
    if not name.endswith(suffix):
        raise ValueError(f"Path did not end in {suffix}: {path}")
    return name[: -len(suffix)]


def trim_any(path: PurePath, suffixes: Iterable[str]) -> str | None:
    """Strip the first of suffixes the file name ends with, or return None."""
    for suffix in suffixes:
        try:
            return file_name_trim_end(path, suffix)
        except ValueError:
            continue
    return None
