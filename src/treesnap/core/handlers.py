"""Contract for the content transformers the dispatcher forwards to.

Every method returns a snapshot, or None when the path intentionally yields
no instance. Exceptions are fatal; the dispatcher wraps them with the path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath

from .context import InstanceContext
from .snapshot import InstanceSnapshot
from .transformer import ScriptRole
from .vfs import Vfs


class SnapshotHandlers(ABC):
    """One method per transformer variant, plus directory aggregation."""

    @abstractmethod
    def project(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        """Snapshot a project file (standalone or a directory's init)."""

    @abstractmethod
    def lua(
        self, context: InstanceContext, vfs: Vfs, path: PurePath, role: ScriptRole
    ) -> InstanceSnapshot | None:
        """Snapshot a standalone script file."""

    @abstractmethod
    def lua_init(
        self, context: InstanceContext, vfs: Vfs, path: PurePath, role: ScriptRole
    ) -> InstanceSnapshot | None:
        """Snapshot a directory whose init script is path."""

    @abstractmethod
    def csv(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def csv_init(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        """Snapshot a directory whose init.csv is path."""

    @abstractmethod
    def json(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def json_model(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def toml(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def txt(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def rbxmx(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def rbxm(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None: ...

    @abstractmethod
    def dir(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        """Snapshot a plain directory. Children are walked separately."""
