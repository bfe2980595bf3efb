"""Shared CLI utilities for terminal output."""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePath

from treesnap.core.snapshot import InstanceSnapshot
from treesnap.core.transformer import AnyTransformer, Transformer


class C:
    """Terminal colors using ANSI escape codes."""

    _enabled = sys.stdout.isatty() and os.environ.get("NO_COLOR") is None

    BOLD = "\033[1m" if _enabled else ""
    DIM = "\033[2m" if _enabled else ""
    RED = "\033[91m" if _enabled else ""
    GREEN = "\033[92m" if _enabled else ""
    YELLOW = "\033[93m" if _enabled else ""
    CYAN = "\033[96m" if _enabled else ""
    RESET = "\033[0m" if _enabled else ""

    @classmethod
    def bold(cls, s: str) -> str:
        return f"{cls.BOLD}{s}{cls.RESET}"

    @classmethod
    def dim(cls, s: str) -> str:
        return f"{cls.DIM}{s}{cls.RESET}"

    @classmethod
    def green(cls, s: str) -> str:
        return f"{cls.GREEN}{s}{cls.RESET}"

    @classmethod
    def yellow(cls, s: str) -> str:
        return f"{cls.YELLOW}{s}{cls.RESET}"

    @classmethod
    def cyan(cls, s: str) -> str:
        return f"{cls.CYAN}{s}{cls.RESET}"


def format_transformer(transformer: AnyTransformer | None) -> str:
    """Format a transformer for display, e.g. 'luauServer' or '-'."""
    if transformer is None:
        return "-"
    if isinstance(transformer, Transformer):
        return transformer.value
    return str(transformer)


def display_path(path: PurePath, root: Path) -> str:
    """Show path relative to root when it is inside it."""
    try:
        relative = PurePath(path).relative_to(root)
    except ValueError:
        return str(path)
    return str(relative) if str(relative) != "." else str(path)


def format_snapshot_line(snapshot: InstanceSnapshot, depth: int, root: Path) -> str:
    """Format one row of the instance tree.

    e.g. '  Server (Script) <- server/init.server.lua [luauServer]'
    """
    indent = "  " * depth
    class_name = snapshot.class_name or "?"
    parts = [f"{indent}{C.bold(snapshot.name)} ({C.cyan(class_name)})"]
    parts.append(C.dim(f"<- {display_path(snapshot.path, root)}"))
    if snapshot.transformer is not None:
        parts.append(C.green(f"[{format_transformer(snapshot.transformer)}]"))
    if snapshot.properties:
        props = ", ".join(f"{k}={v}" for k, v in sorted(snapshot.properties.items()))
        parts.append(C.yellow(props))
    return " ".join(parts)
