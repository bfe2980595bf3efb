"""Init file resolution for directories."""

from __future__ import annotations

import logging
from pathlib import PurePath

from .vfs import Vfs

logger = logging.getLogger(__name__)

# priority order: a project file declares the whole directory and beats any
# script; module, server, client is the historical default and must not change
INIT_CANDIDATES: tuple[str, ...] = (
    "default.project.json",
    "init.luau",
    "init.lua",
    "init.server.luau",
    "init.server.lua",
    "init.client.luau",
    "init.client.lua",
    "init.csv",
)


def resolve_init(vfs: Vfs, directory: PurePath) -> PurePath | None:
    """Return the first init file present in directory, or None.

    Absent candidates are skipped; any other I/O error propagates.
    """
    for candidate in INIT_CANDIDATES:
        init_path = directory / candidate
        if vfs.probe(init_path) is not None:
            logger.debug("resolved init file %s", init_path)
            return init_path
    return None
