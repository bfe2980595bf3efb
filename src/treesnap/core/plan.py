"""Dry-run handlers: predict the instance tree without reading file contents."""

from __future__ import annotations

from pathlib import PurePath

from . import selection, suffix
from .context import InstanceContext
from .handlers import SnapshotHandlers
from .snapshot import InstanceSnapshot
from .transformer import ScriptRole, Transformer
from .vfs import Vfs

SCRIPT_ROLE_SUFFIXES: dict[ScriptRole, tuple[str, ...]] = {
    ScriptRole.SERVER: selection.SERVER_SCRIPT_SUFFIXES,
    ScriptRole.CLIENT: selection.CLIENT_SCRIPT_SUFFIXES,
    ScriptRole.MODULE: selection.SCRIPT_SUFFIXES,
}

SCRIPT_TRANSFORMERS: dict[ScriptRole, Transformer] = {
    ScriptRole.MODULE: Transformer.LUAU_MODULE,
    ScriptRole.SERVER: Transformer.LUAU_SERVER,
    ScriptRole.CLIENT: Transformer.LUAU_CLIENT,
}


def instance_name(path: PurePath, suffixes: tuple[str, ...]) -> str:
    """Derive an instance name by stripping the owning suffix.

    Falls back to dropping the last extension when an override assigned a
    transformer the name does not look like, e.g. 'story.txt' as a script.
    """
    name = suffix.trim_any(path, suffixes)
    if name:
        return name
    return path.stem or suffix.file_name(path)


def script_class(context: InstanceContext, role: ScriptRole) -> tuple[str, dict[str, str]]:
    """Return (class name, properties) for a script with the given role."""
    if role is ScriptRole.MODULE:
        return "ModuleScript", {}
    if context.emit_legacy_scripts:
        return ("Script" if role is ScriptRole.SERVER else "LocalScript"), {}
    return "Script", {"RunContext": "Server" if role is ScriptRole.SERVER else "Client"}


class PlanHandlers(SnapshotHandlers):
    """Snapshot every path from its name alone.

    Models and projects report class_name None since only parsing them
    would tell.
    """

    def project(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        if suffix.file_name(path) == "default.project.json":
            name = path.parent.name
        else:
            name = instance_name(path, (".project.json", ".json"))
        return InstanceSnapshot(name=name, class_name=None, path=path, transformer=Transformer.PROJECT)

    def lua(
        self, context: InstanceContext, vfs: Vfs, path: PurePath, role: ScriptRole
    ) -> InstanceSnapshot | None:
        class_name, properties = script_class(context, role)
        return InstanceSnapshot(
            name=instance_name(path, SCRIPT_ROLE_SUFFIXES[role]),
            class_name=class_name,
            path=path,
            transformer=SCRIPT_TRANSFORMERS[role],
            role=role,
            properties=properties,
        )

    def lua_init(
        self, context: InstanceContext, vfs: Vfs, path: PurePath, role: ScriptRole
    ) -> InstanceSnapshot | None:
        class_name, properties = script_class(context, role)
        return InstanceSnapshot(
            name=path.parent.name,
            class_name=class_name,
            path=path,
            transformer=SCRIPT_TRANSFORMERS[role],
            role=role,
            properties=properties,
            container=True,
        )

    def csv(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".csv",), "LocalizationTable", Transformer.CSV)

    def csv_init(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return InstanceSnapshot(
            name=path.parent.name,
            class_name="LocalizationTable",
            path=path,
            transformer=Transformer.CSV,
            container=True,
        )

    def json(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".json",), "ModuleScript", Transformer.JSON)

    def json_model(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".model.json",), None, Transformer.JSON_MODEL)

    def toml(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".toml",), "ModuleScript", Transformer.TOML)

    def txt(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".txt",), "StringValue", Transformer.PLAIN)

    def rbxmx(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".rbxmx",), None, Transformer.RBXMX)

    def rbxm(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return self._file(path, (".rbxm",), None, Transformer.RBXM)

    def dir(self, context: InstanceContext, vfs: Vfs, path: PurePath) -> InstanceSnapshot | None:
        return InstanceSnapshot(name=suffix.file_name(path), class_name="Folder", path=path, container=True)

    @staticmethod
    def _file(
        path: PurePath, suffixes: tuple[str, ...], class_name: str | None, transformer: Transformer
    ) -> InstanceSnapshot:
        return InstanceSnapshot(
            name=instance_name(path, suffixes),
            class_name=class_name,
            path=path,
            transformer=transformer,
        )
