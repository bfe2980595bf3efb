"""Tests for treesnap.core.walk and treesnap.core.plan modules."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from treesnap.core.context import InstanceContext, SyncRule
from treesnap.core.errors import UnknownTransformerError
from treesnap.core.plan import instance_name, script_class
from treesnap.core.transformer import Other, ScriptRole, Transformer
from treesnap.core.vfs import MemoryVfs, OsVfs
from treesnap.core.walk import snapshot_tree


def names_by_depth(snapshot) -> list[tuple[int, str, str | None]]:
    return [(depth, node.name, node.class_name) for depth, node in snapshot.walk()]


class TestSnapshotTree:
    """Tests for snapshot_tree with PlanHandlers."""

    def test_sample_tree(self, memory_vfs, place, context, plan_handlers):
        snapshot = snapshot_tree(context, memory_vfs, place, plan_handlers)

        assert names_by_depth(snapshot) == [
            (0, "src", "Folder"),
            (1, "client", "LocalScript"),
            (2, "camera", "ModuleScript"),
            (1, "config", "ModuleScript"),
            (1, "data", "ModuleScript"),
            (1, "main", "Script"),
            (1, "mesh", None),
            (1, "mesh2", None),
            (1, "nested", None),
            (1, "part", None),
            (1, "readme", "StringValue"),
            (1, "shared", "ModuleScript"),
            (2, "util", "ModuleScript"),
            (1, "strings", "LocalizationTable"),
            (2, "extra", "LocalizationTable"),
        ]

    def test_init_files_are_not_snapshotted_twice(self, memory_vfs, place, context, plan_handlers):
        snapshot = snapshot_tree(context, memory_vfs, place, plan_handlers)

        paths = [node.path for _, node in snapshot.walk()]
        assert len(paths) == len(set(paths))
        assert place / "shared" / "init.lua" in paths
        # the project owns its directory; the init.lua beside it is never visited
        assert place / "nested" / "init.lua" not in paths

    def test_same_tree_on_disk(self, sample_root, context, plan_handlers, memory_vfs, place):
        on_disk = snapshot_tree(context, OsVfs(), sample_root, plan_handlers)
        in_memory = snapshot_tree(context, memory_vfs, place, plan_handlers)

        assert names_by_depth(on_disk) == names_by_depth(in_memory)

    def test_missing_root(self, context, plan_handlers):
        assert snapshot_tree(context, MemoryVfs(), PurePosixPath("/gone"), plan_handlers) is None

    def test_file_root(self, memory_vfs, place, context, plan_handlers):
        snapshot = snapshot_tree(context, memory_vfs, place / "main.server.lua", plan_handlers)
        assert snapshot.name == "main"
        assert snapshot.children == []

    def test_deep_tree_does_not_recurse(self, context, plan_handlers):
        directory = PurePosixPath("/deep")
        for i in range(1200):
            directory = directory / f"d{i}"
        vfs = MemoryVfs().add_file(directory / "leaf.txt")

        snapshot = snapshot_tree(context, vfs, PurePosixPath("/deep"), plan_handlers)

        depth, leaf = list(snapshot.walk())[-1]
        assert depth == 1201
        assert leaf.class_name == "StringValue"

    def test_sync_rules_apply_to_children(self, memory_vfs, place, plan_handlers):
        context = InstanceContext(
            sync_rules=(
                SyncRule(include="*.txt", use=Transformer.IGNORE, base_path=place),
                SyncRule(include="notes.md", use=Transformer.PLAIN, base_path=place),
            )
        )
        snapshot = snapshot_tree(context, memory_vfs, place, plan_handlers)

        names = [node.name for _, node in snapshot.walk()]
        assert "readme" not in names
        assert "notes" in names

    def test_unknown_rule_aborts_walk(self, memory_vfs, place, plan_handlers):
        context = InstanceContext(
            sync_rules=(SyncRule(include="*.toml", use=Other("yamlish"), base_path=place),),
        )
        with pytest.raises(UnknownTransformerError, match="yamlish"):
            snapshot_tree(context, memory_vfs, place, plan_handlers)


class TestPlanHandlers:
    """Tests for names and classes predicted by PlanHandlers."""

    @pytest.mark.parametrize(
        "name,suffixes,expected",
        [
            ("foo.server.lua", (".server.lua", ".lua"), "foo"),
            ("foo.model.json", (".model.json",), "foo"),
            # override pointed a script transformer at a .txt file
            ("story.txt", (".luau", ".lua"), "story"),
            ("Makefile", (".txt",), "Makefile"),
        ],
    )
    def test_instance_name(self, name: str, suffixes: tuple[str, ...], expected: str):
        assert instance_name(PurePosixPath("src") / name, suffixes) == expected

    @pytest.mark.parametrize(
        "legacy,role,expected",
        [
            (True, ScriptRole.MODULE, ("ModuleScript", {})),
            (True, ScriptRole.SERVER, ("Script", {})),
            (True, ScriptRole.CLIENT, ("LocalScript", {})),
            (False, ScriptRole.MODULE, ("ModuleScript", {})),
            (False, ScriptRole.SERVER, ("Script", {"RunContext": "Server"})),
            (False, ScriptRole.CLIENT, ("Script", {"RunContext": "Client"})),
        ],
    )
    def test_script_class(self, legacy: bool, role: ScriptRole, expected):
        assert script_class(InstanceContext(emit_legacy_scripts=legacy), role) == expected

    def test_project_names(self, memory_vfs, place, context, plan_handlers):
        init = plan_handlers.project(context, memory_vfs, place / "nested" / "default.project.json")
        standalone = plan_handlers.project(context, memory_vfs, place / "game.project.json")

        assert init.name == "nested"
        assert standalone.name == "game"

    def test_to_dict(self, memory_vfs, place, plan_handlers):
        context = InstanceContext(emit_legacy_scripts=False)
        snapshot = snapshot_tree(context, memory_vfs, place / "client", plan_handlers)

        assert snapshot.to_dict() == {
            "name": "client",
            "class": "Script",
            "path": str(place / "client" / "init.client.luau"),
            "transformer": "luauClient",
            "role": "client",
            "properties": {"RunContext": "Client"},
            "children": [
                {
                    "name": "camera",
                    "class": "ModuleScript",
                    "path": str(place / "client" / "camera.lua"),
                    "transformer": "luauModule",
                    "role": "module",
                }
            ],
        }
