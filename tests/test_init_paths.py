"""Tests for treesnap.core.init_paths module."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from treesnap.core.init_paths import INIT_CANDIDATES, resolve_init
from treesnap.core.vfs import MemoryVfs

DIR = PurePosixPath("/place/thing")


def vfs_with(*names: str) -> MemoryVfs:
    vfs = MemoryVfs().add_dir(DIR)
    for name in names:
        vfs.add_file(DIR / name)
    return vfs


class TestInitCandidates:
    """Tests for the fixed candidate order."""

    def test_exact_order(self):
        assert INIT_CANDIDATES == (
            "default.project.json",
            "init.luau",
            "init.lua",
            "init.server.luau",
            "init.server.lua",
            "init.client.luau",
            "init.client.lua",
            "init.csv",
        )


class TestResolveInit:
    """Tests for resolve_init function."""

    def test_no_candidates(self):
        assert resolve_init(vfs_with("other.lua"), DIR) is None

    def test_project_beats_scripts(self):
        vfs = vfs_with("init.lua", "init.server.lua", "default.project.json")
        assert resolve_init(vfs, DIR) == DIR / "default.project.json"

    def test_server_beats_client(self):
        vfs = vfs_with("init.client.lua", "init.server.lua")
        assert resolve_init(vfs, DIR) == DIR / "init.server.lua"

    def test_luau_beats_lua(self):
        vfs = vfs_with("init.lua", "init.luau")
        assert resolve_init(vfs, DIR) == DIR / "init.luau"

    @pytest.mark.parametrize("index", range(len(INIT_CANDIDATES)))
    def test_each_candidate_wins_over_later_ones(self, index: int):
        vfs = vfs_with(*INIT_CANDIDATES[index:])
        assert resolve_init(vfs, DIR) == DIR / INIT_CANDIDATES[index]

    def test_csv_is_last_resort(self):
        assert resolve_init(vfs_with("init.csv"), DIR) == DIR / "init.csv"

    def test_other_io_errors_propagate(self, failing_vfs):
        inner = vfs_with("init.lua")
        vfs = failing_vfs(inner, DIR / "init.luau", PermissionError(13, "Permission denied"))
        with pytest.raises(PermissionError):
            resolve_init(vfs, DIR)
