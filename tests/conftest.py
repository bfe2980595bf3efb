"""Shared pytest fixtures for treesnap tests."""

from __future__ import annotations

from pathlib import Path, PurePath, PurePosixPath

import pytest

from treesnap.core.context import InstanceContext
from treesnap.core.handlers import SnapshotHandlers
from treesnap.core.plan import PlanHandlers
from treesnap.core.snapshot import InstanceSnapshot
from treesnap.core.transformer import ScriptRole
from treesnap.core.vfs import MemoryVfs, Vfs

# a small place with every kind of entry the dispatcher distinguishes
SAMPLE_TREE = (
    "src/main.server.lua",
    "src/settings.meta.json",
    "src/shared/init.lua",
    "src/shared/util.luau",
    "src/shared/init.meta.json",
    "src/client/init.client.luau",
    "src/client/camera.lua",
    "src/strings/init.csv",
    "src/strings/extra.csv",
    "src/nested/default.project.json",
    "src/nested/init.lua",
    "src/config.toml",
    "src/data.json",
    "src/part.model.json",
    "src/readme.txt",
    "src/mesh.rbxm",
    "src/mesh2.rbxmx",
    "src/notes.md",
)


class RecordingHandlers(SnapshotHandlers):
    """Handlers that record every call and return a marker snapshot."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, PurePath, ScriptRole | None]] = []

    def _record(self, kind: str, path: PurePath, role: ScriptRole | None = None) -> InstanceSnapshot:
        self.calls.append((kind, path, role))
        return InstanceSnapshot(name=kind, class_name=kind, path=path, role=role)

    def project(self, context, vfs, path):
        return self._record("project", path)

    def lua(self, context, vfs, path, role):
        return self._record("lua", path, role)

    def lua_init(self, context, vfs, path, role):
        return self._record("lua_init", path, role)

    def csv(self, context, vfs, path):
        return self._record("csv", path)

    def csv_init(self, context, vfs, path):
        return self._record("csv_init", path)

    def json(self, context, vfs, path):
        return self._record("json", path)

    def json_model(self, context, vfs, path):
        return self._record("json_model", path)

    def toml(self, context, vfs, path):
        return self._record("toml", path)

    def txt(self, context, vfs, path):
        return self._record("txt", path)

    def rbxmx(self, context, vfs, path):
        return self._record("rbxmx", path)

    def rbxm(self, context, vfs, path):
        return self._record("rbxm", path)

    def dir(self, context, vfs, path):
        return self._record("dir", path)


@pytest.fixture
def memory_vfs() -> MemoryVfs:
    """Return an in-memory copy of SAMPLE_TREE."""
    vfs = MemoryVfs()
    for path in SAMPLE_TREE:
        vfs.add_file(PurePosixPath("/place") / path)
    return vfs


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """Write SAMPLE_TREE to a temp directory and return its src directory."""
    for rel_path in SAMPLE_TREE:
        target = tmp_path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch()
    return tmp_path / "src"


@pytest.fixture
def context() -> InstanceContext:
    """Return a context with no overrides."""
    return InstanceContext()


@pytest.fixture
def recorder() -> RecordingHandlers:
    return RecordingHandlers()


@pytest.fixture
def plan_handlers() -> PlanHandlers:
    return PlanHandlers()


@pytest.fixture
def place() -> PurePosixPath:
    """Root of the in-memory sample tree."""
    return PurePosixPath("/place/src")


class FailingVfs(Vfs):
    """Wraps another Vfs, raising an error when one path is looked up."""

    def __init__(self, inner: Vfs, failing: PurePath, error: OSError) -> None:
        self.inner = inner
        self.failing = failing
        self.error = error

    def metadata(self, path):
        if path == self.failing:
            raise self.error
        return self.inner.metadata(path)

    def read_dir(self, path):
        return self.inner.read_dir(path)


@pytest.fixture
def failing_vfs() -> type[FailingVfs]:
    """Return the FailingVfs class for tests that inject lookup errors."""
    return FailingVfs
