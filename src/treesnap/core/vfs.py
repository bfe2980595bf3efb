"""Filesystem abstraction used for existence and metadata lookups."""

from __future__ import annotations

import errno
import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath


@dataclass(frozen=True)
class Metadata:
    """What the dispatcher needs to know about an existing path."""

    is_dir: bool


class Vfs(ABC):
    """Base filesystem interface.

    Subclasses implement metadata() and read_dir(). metadata() raises
    FileNotFoundError for absent paths; probe() folds only that case into None.
    """

    @abstractmethod
    def metadata(self, path: PurePath) -> Metadata:
        """Return metadata for path, raising FileNotFoundError if it is absent."""

    @abstractmethod
    def read_dir(self, path: PurePath) -> list[PurePath]:
        """List a directory's entries, sorted by name."""

    def probe(self, path: PurePath) -> Metadata | None:
        """Return metadata for path, or None if it does not exist.

        Any other OSError propagates.
        """
        try:
            return self.metadata(path)
        except FileNotFoundError:
            return None


class OsVfs(Vfs):
    """The real filesystem."""

    def metadata(self, path: PurePath) -> Metadata:
        return Metadata(is_dir=stat.S_ISDIR(os.stat(path).st_mode))

    def read_dir(self, path: PurePath) -> list[PurePath]:
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries)
        return [Path(path) / name for name in names]


class MemoryVfs(Vfs):
    """In-memory tree of files and directories.

    Paths are POSIX-style; parent directories are created implicitly.
    """

    def __init__(self) -> None:
        self._files: set[PurePosixPath] = set()
        self._dirs: set[PurePosixPath] = set()
        self._children: dict[PurePosixPath, set[PurePosixPath]] = {}

    def add_file(self, path: str | PurePath) -> MemoryVfs:
        """Add a file (and its parent directories). Returns self for chaining."""
        posix = PurePosixPath(path)
        if posix in self._dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
        self._add_parents(posix)
        self._files.add(posix)
        return self

    def add_dir(self, path: str | PurePath) -> MemoryVfs:
        """Add an empty directory (and its parents). Returns self for chaining."""
        posix = PurePosixPath(path)
        self._add_parents(posix)
        self._dirs.add(posix)
        return self

    def metadata(self, path: PurePath) -> Metadata:
        posix = PurePosixPath(path)
        if posix in self._dirs:
            return Metadata(is_dir=True)
        if posix in self._files:
            return Metadata(is_dir=False)
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))

    def read_dir(self, path: PurePath) -> list[PurePath]:
        posix = PurePosixPath(path)
        if posix not in self._dirs:
            if posix in self._files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
        return sorted(self._children.get(posix, ()), key=lambda p: p.name)

    def _add_parents(self, path: PurePosixPath) -> None:
        child = path
        for parent in path.parents:
            if parent in self._files:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(parent))
            self._dirs.add(parent)
            self._children.setdefault(parent, set()).add(child)
            child = parent
