"""Instance snapshots produced by transformers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import PurePath

from .transformer import ScriptRole, Transformer


@dataclass
class InstanceSnapshot:
    """A node of the synchronized instance tree.

    class_name is None when only the content parser could tell it (models,
    projects). container marks snapshots whose directory children still
    need to be walked.
    """

    name: str
    class_name: str | None
    path: PurePath
    transformer: Transformer | None = None
    role: ScriptRole | None = None
    properties: dict[str, str] = field(default_factory=dict)
    container: bool = False
    children: list[InstanceSnapshot] = field(default_factory=list)

    def walk(self) -> Iterator[tuple[int, InstanceSnapshot]]:
        """Yield (depth, snapshot) pairs depth-first, self first."""
        stack: list[tuple[int, InstanceSnapshot]] = [(0, self)]
        while stack:
            depth, snapshot = stack.pop()
            yield depth, snapshot
            stack.extend((depth + 1, child) for child in reversed(snapshot.children))

    def to_dict(self) -> dict:
        """Convert to plain nested dicts (e.g. for YAML output)."""
        result: dict = {
            "name": self.name,
            "class": self.class_name,
            "path": str(self.path),
            "transformer": self.transformer.value if self.transformer else None,
        }
        if self.role is not None:
            result["role"] = self.role.value
        if self.properties:
            result["properties"] = dict(self.properties)
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result
