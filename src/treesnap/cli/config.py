"""Configuration loading for treesnap CLI.

A treesnap.yml (or any JSON/YAML file with the same keys) looks like:

    emitLegacyScripts: true
    syncRules:
      - pattern: "*.story.luau"
        use: ignore
      - pattern: "data/*.txt"
        use: json
        exclude: "data/raw.txt"
    overrides:
      src/odd.dat: rbxm

Patterns and override paths are relative to the config file's directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from treesnap.core.context import InstanceContext, SyncRule
from treesnap.core.transformer import AnyTransformer, parse_transformer

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "treesnap.yml"


def find_config(start: Path) -> Path | None:
    """Find treesnap.yml in start or its closest ancestor."""
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def parse_sync_rule(raw: dict, base_path: Path) -> SyncRule:
    """Parse one syncRules entry."""
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid sync rule: {raw!r} (expected a mapping)")
    pattern = raw.get("pattern")
    use = raw.get("use")
    if not pattern or not use:
        raise ValueError(f"Invalid sync rule: {raw!r} (needs 'pattern' and 'use')")
    exclude = raw.get("exclude")
    return SyncRule(
        include=str(pattern),
        use=parse_transformer(str(use)),
        exclude=str(exclude) if exclude else None,
        base_path=base_path,
    )


def parse_context_from_data(data: dict | None, base_path: Path) -> InstanceContext:
    """Build an InstanceContext from loaded config data.

    Unknown 'use' identifiers are kept and only fail when a path matches them.
    """
    data = data or {}

    rules = tuple(parse_sync_rule(raw, base_path) for raw in data.get("syncRules") or [])

    overrides: dict[Path, AnyTransformer] = {}
    for rel_path, use in (data.get("overrides") or {}).items():
        overrides[base_path / str(rel_path)] = parse_transformer(str(use))

    emit_legacy = data.get("emitLegacyScripts", True)
    if not isinstance(emit_legacy, bool):
        raise ValueError(f"emitLegacyScripts must be true or false, got {emit_legacy!r}")

    return InstanceContext(overrides=overrides, sync_rules=rules, emit_legacy_scripts=emit_legacy)


def load_context(config_path: Path | None) -> InstanceContext:
    """Load an InstanceContext from a config file; None gives the defaults."""
    if config_path is None:
        return InstanceContext()

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Could not parse {config_path}: expected a mapping at the top level")

    context = parse_context_from_data(data, config_path.resolve().parent)
    logger.info(
        "loaded %d sync rules and %d overrides from %s",
        len(context.sync_rules),
        len(context.overrides),
        config_path,
    )
    return context
