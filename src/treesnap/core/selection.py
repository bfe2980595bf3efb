"""Transformer selection by override and file name suffix."""

from __future__ import annotations

from pathlib import PurePath
from typing import NamedTuple

from . import suffix
from .context import InstanceContext
from .transformer import AnyTransformer, Transformer


class SuffixRule(NamedTuple):
    """Suffixes that select a transformer. transformer=None marks a sidecar."""

    suffixes: tuple[str, ...]
    transformer: Transformer | None


SERVER_SCRIPT_SUFFIXES = (".server.luau", ".server.lua")
CLIENT_SCRIPT_SUFFIXES = (".client.luau", ".client.lua")
SCRIPT_SUFFIXES = (".luau", ".lua")
META_SUFFIX = ".meta.json"

# most specific first: '.server.lua' must be seen before '.lua', and
# '.meta.json' / '.model.json' / '.project.json' before '.json'
SUFFIX_RULES: tuple[SuffixRule, ...] = (
    SuffixRule(SERVER_SCRIPT_SUFFIXES, Transformer.LUAU_SERVER),
    SuffixRule(CLIENT_SCRIPT_SUFFIXES, Transformer.LUAU_CLIENT),
    SuffixRule(SCRIPT_SUFFIXES, Transformer.LUAU_MODULE),
    SuffixRule((".project.json",), Transformer.PROJECT),
    SuffixRule((".model.json",), Transformer.JSON_MODEL),
    SuffixRule((META_SUFFIX,), None),
    SuffixRule((".json",), Transformer.JSON),
    SuffixRule((".toml",), Transformer.TOML),
    SuffixRule((".csv",), Transformer.CSV),
    SuffixRule((".txt",), Transformer.PLAIN),
    SuffixRule((".rbxmx",), Transformer.RBXMX),
    SuffixRule((".rbxm",), Transformer.RBXM),
)


def match_rule(path: PurePath) -> SuffixRule | None:
    """Return the first suffix rule matching the path's file name."""
    for rule in SUFFIX_RULES:
        if any(suffix.file_name_ends_with(path, s) for s in rule.suffixes):
            return rule
    return None


def infer_transformer(path: PurePath) -> Transformer | None:
    """Infer a transformer from the file name alone.

    Sidecar (.meta.json) and unrecognized names give None.
    """
    rule = match_rule(path)
    return rule.transformer if rule is not None else None


def select_transformer(context: InstanceContext, path: PurePath) -> AnyTransformer | None:
    """Return the transformer owning path.

    Overrides in context always win, even over the sidecar rule.
    """
    forced = context.get_transformer_override(path)
    if forced is not None:
        return forced
    return infer_transformer(path)
