"""Whole-tree snapshots built with an explicit stack."""

from __future__ import annotations

import logging
from pathlib import PurePath

from . import dispatch
from .context import InstanceContext
from .handlers import SnapshotHandlers
from .snapshot import InstanceSnapshot
from .vfs import Vfs

logger = logging.getLogger(__name__)


def snapshot_tree(
    context: InstanceContext,
    vfs: Vfs,
    root: PurePath,
    handlers: SnapshotHandlers,
) -> InstanceSnapshot | None:
    """Snapshot root and, for every container snapshot, its directory children.

    Each child path goes back through dispatch.snapshot_from_vfs(), so init
    files and sidecars drop out on their own. Children keep read_dir() order.
    """
    root_snapshot = dispatch.snapshot_from_vfs(context, vfs, root, handlers)
    if root_snapshot is None:
        return None

    # (directory, snapshot its children attach to)
    pending: list[tuple[PurePath, InstanceSnapshot]] = []
    if root_snapshot.container:
        pending.append((root, root_snapshot))

    visited = 0
    while pending:
        directory, parent = pending.pop()
        for child_path in vfs.read_dir(directory):
            child = dispatch.snapshot_from_vfs(context, vfs, child_path, handlers)
            if child is None:
                continue
            parent.children.append(child)
            visited += 1
            if child.container:
                pending.append((child_path, child))

    logger.info("snapshotted %s with %d descendant instances", root, visited)
    return root_snapshot
