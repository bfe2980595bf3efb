"""Transformer variants and script roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Transformer(Enum):
    """Content handler that owns a path.

    Values are the identifiers used by overrides and sync rules in config.
    """

    PROJECT = "project"
    LUAU_MODULE = "luauModule"
    LUAU_SERVER = "luauServer"
    LUAU_CLIENT = "luauClient"
    JSON = "json"
    JSON_MODEL = "jsonModel"
    TOML = "toml"
    CSV = "csv"
    PLAIN = "plain"
    RBXMX = "rbxmx"
    RBXM = "rbxm"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Other:
    """An override identifier that names no known transformer."""

    name: str

    def __str__(self) -> str:
        return self.name


AnyTransformer = Union[Transformer, Other]


class ScriptRole(Enum):
    """Runtime role of a script instance."""

    MODULE = "module"
    SERVER = "server"
    CLIENT = "client"


SCRIPT_ROLES: dict[Transformer, ScriptRole] = {
    Transformer.LUAU_MODULE: ScriptRole.MODULE,
    Transformer.LUAU_SERVER: ScriptRole.SERVER,
    Transformer.LUAU_CLIENT: ScriptRole.CLIENT,
}


def parse_transformer(identifier: str) -> AnyTransformer:
    """Parse a config identifier (e.g. 'luauServer') into a transformer.

    Unknown identifiers become Other so they fail only where they are matched.
    """
    try:
        return Transformer(identifier.strip())
    except ValueError:
        return Other(identifier)
