"""Override context consulted before suffix-based transformer inference."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import PurePath
from types import MappingProxyType

from .transformer import AnyTransformer


@dataclass(frozen=True)
class SyncRule:
    """Glob rule forcing a transformer onto matching paths.

    Patterns are matched against the path relative to base_path, so a path
    outside base_path never matches. '*' also matches across '/'.
    """

    include: str
    use: AnyTransformer
    exclude: str | None = None
    base_path: PurePath = PurePath(".")

    def matches(self, path: PurePath) -> bool:
        """Check if this rule applies to path."""
        try:
            relative = path.relative_to(self.base_path).as_posix()
        except ValueError:
            return False

        if self.exclude is not None and fnmatchcase(relative, self.exclude):
            return False

        return fnmatchcase(relative, self.include)


@dataclass(frozen=True)
class InstanceContext:
    """Read-only settings shared by every dispatch in a snapshot pass.

    overrides maps exact paths to a forced transformer; sync_rules are tried
    in order after that, first match wins.
    """

    # mapping proxies are unhashable; hash on the rules and flags only
    overrides: Mapping[PurePath, AnyTransformer] = field(default_factory=dict, hash=False)
    sync_rules: tuple[SyncRule, ...] = ()
    emit_legacy_scripts: bool = True

    def __post_init__(self) -> None:
        # freeze the caller's mapping so the context stays immutable
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))
        object.__setattr__(self, "sync_rules", tuple(self.sync_rules))

    def get_transformer_override(self, path: PurePath) -> AnyTransformer | None:
        """Return the transformer forced onto path, if any."""
        forced = self.overrides.get(path)
        if forced is not None:
            return forced

        for rule in self.sync_rules:
            if rule.matches(path):
                return rule.use

        return None

    def with_sync_rules(self, rules: Iterable[SyncRule]) -> InstanceContext:
        """Return a new context where rules take precedence over existing ones.

        Embedding callers use this when they descend into a nested project
        that declares its own sync rules; the outer context is left unchanged.
        """
        return dataclasses.replace(self, sync_rules=(*rules, *self.sync_rules))
