"""Dispatch a filesystem path to the transformer that owns it.

snapshot_from_vfs() is the entrypoint. It can be pointed at any path:

- absent paths yield None, never an error
- directories with an init file become that init's instance (project,
  script container, or localization table container); other directories
  go to the directory handler
- init files seen on their own yield None, since their directory already
  consumed them
- other files go to exactly one handler chosen by select_transformer()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath

from . import init_paths, selection, suffix
from .context import InstanceContext
from .errors import SnapshotError, TransformerError, UnknownTransformerError
from .handlers import SnapshotHandlers
from .snapshot import InstanceSnapshot
from .transformer import SCRIPT_ROLES, Other, Transformer
from .vfs import Vfs

logger = logging.getLogger(__name__)

RESERVED_SCRIPT_NAMES = frozenset({"init", "init.client", "init.server"})
RESERVED_CSV_NAMES = frozenset({"init"})

# transformers that turn a directory with a matching init file into one instance
DIRECTORY_TRANSFORMERS = frozenset({Transformer.PROJECT, Transformer.CSV, *SCRIPT_ROLES})


def is_consumed_init(path: PurePath) -> bool:
    """Check if path is an init file that its directory snapshots instead.

    e.g., 'init.server.lua' and 'init.csv' -> True, 'main.lua' -> False
    """
    script_name = suffix.trim_any(path, selection.SCRIPT_SUFFIXES)
    if script_name is not None and script_name in RESERVED_SCRIPT_NAMES:
        return True

    csv_name = suffix.trim_any(path, (".csv",))
    return csv_name is not None and csv_name in RESERVED_CSV_NAMES


def snapshot_from_vfs(
    context: InstanceContext,
    vfs: Vfs,
    path: PurePath,
    handlers: SnapshotHandlers,
) -> InstanceSnapshot | None:
    """Snapshot path with the handler that owns it, or return None."""
    meta = vfs.probe(path)
    if meta is None:
        logger.debug("%s does not exist, skipping", path)
        return None

    if meta.is_dir:
        return _snapshot_dir(context, vfs, path, handlers)
    return _snapshot_file(context, vfs, path, handlers)


def init_transformer(context: InstanceContext, init_path: PurePath) -> Transformer | None:
    """Return the transformer a directory takes from its init file.

    Only project, script and csv transformers make the directory a composite
    object; anything else (e.g. an init overridden to 'plain' or 'ignore')
    gives None and the directory stays a plain folder.
    """
    transformer = selection.select_transformer(context, init_path)

    if isinstance(transformer, Other):
        raise UnknownTransformerError(transformer.name, init_path)

    if transformer in DIRECTORY_TRANSFORMERS:
        return transformer

    logger.debug("init file %s selected %s, treating its directory as a plain folder", init_path, transformer)
    return None


def _snapshot_dir(
    context: InstanceContext,
    vfs: Vfs,
    path: PurePath,
    handlers: SnapshotHandlers,
) -> InstanceSnapshot | None:
    init_path = init_paths.resolve_init(vfs, path)
    transformer = init_transformer(context, init_path) if init_path is not None else None

    if transformer is Transformer.PROJECT:
        return _invoke(handlers.project, context, vfs, init_path)

    if transformer is Transformer.CSV:
        return _invoke(handlers.csv_init, context, vfs, init_path)

    if transformer is not None:
        return _invoke(handlers.lua_init, context, vfs, init_path, SCRIPT_ROLES[transformer])

    return _invoke(handlers.dir, context, vfs, path)


def _snapshot_file(
    context: InstanceContext,
    vfs: Vfs,
    path: PurePath,
    handlers: SnapshotHandlers,
) -> InstanceSnapshot | None:
    # fails on names that are missing or not valid text
    suffix.file_name(path)

    if is_consumed_init(path):
        logger.debug("%s is consumed by its parent directory, skipping", path)
        return None

    transformer = selection.select_transformer(context, path)

    if isinstance(transformer, Other):
        raise UnknownTransformerError(transformer.name, path)

    if transformer is None or transformer is Transformer.IGNORE:
        logger.debug("no transformer for %s, skipping", path)
        return None

    role = SCRIPT_ROLES.get(transformer)
    if role is not None:
        return _invoke(handlers.lua, context, vfs, path, role)

    file_handlers: dict[Transformer, Callable[..., InstanceSnapshot | None]] = {
        Transformer.PROJECT: handlers.project,
        Transformer.JSON_MODEL: handlers.json_model,
        Transformer.JSON: handlers.json,
        Transformer.TOML: handlers.toml,
        Transformer.CSV: handlers.csv,
        Transformer.PLAIN: handlers.txt,
        Transformer.RBXMX: handlers.rbxmx,
        Transformer.RBXM: handlers.rbxm,
    }
    return _invoke(file_handlers[transformer], context, vfs, path)


def _invoke(
    handler: Callable[..., InstanceSnapshot | None],
    context: InstanceContext,
    vfs: Vfs,
    path: PurePath,
    *args: object,
) -> InstanceSnapshot | None:
    """Call a handler, adding the path to any failure that lacks one."""
    logger.debug("snapshotting %s with %s", path, getattr(handler, "__name__", handler))
    try:
        return handler(context, vfs, path, *args)
    except SnapshotError:
        raise
    except Exception as e:
        raise TransformerError(path, e) from e
