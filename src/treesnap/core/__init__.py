"""Core domain logic for init resolution, transformer selection, and dispatch."""

from . import context, dispatch, errors, handlers, init_paths, plan, selection, snapshot, suffix, transformer, vfs, walk

__all__ = [
    "context",
    "dispatch",
    "errors",
    "handlers",
    "init_paths",
    "plan",
    "selection",
    "snapshot",
    "suffix",
    "transformer",
    "vfs",
    "walk",
]
