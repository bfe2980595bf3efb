"""Which subcommand: explain the dispatch decision for individual paths."""

from __future__ import annotations

from pathlib import Path

import click

from treesnap import core

from . import util
from .plan import resolve_context


def describe(context: core.context.InstanceContext, vfs: core.vfs.Vfs, path: Path) -> str:
    """Describe what the dispatcher does with a single path."""
    meta = vfs.probe(path)
    if meta is None:
        return "no instance (does not exist)"

    if meta.is_dir:
        init_path = core.init_paths.resolve_init(vfs, path)
        if init_path is None:
            return "directory (no init file)"
        transformer = core.dispatch.init_transformer(context, init_path)
        if transformer is None:
            selected = util.format_transformer(core.selection.select_transformer(context, init_path))
            return f"directory (init {init_path.name} is {selected}, treated as a plain folder)"
        return f"directory via {init_path.name} [{util.format_transformer(transformer)}]"

    if core.dispatch.is_consumed_init(path):
        return "no instance (init file of its directory)"

    transformer = core.selection.select_transformer(context, path)
    if transformer is None:
        if core.suffix.file_name_ends_with(path, core.selection.META_SUFFIX):
            return "no instance (metadata sidecar)"
        return "no instance (unrecognized file type)"
    if transformer is core.transformer.Transformer.IGNORE:
        return "no instance (ignored)"

    forced = context.get_transformer_override(path) is not None
    label = f"[{util.format_transformer(transformer)}]"
    return f"{label} (override)" if forced else label


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "-c",
    "--config",
    "cfg",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to config file (default: nearest treesnap.yml)",
)
@click.option("--no-config", is_flag=True, help="Ignore any treesnap.yml and use suffix rules only")
def which(paths: tuple[Path, ...], cfg: Path | None, no_config: bool) -> None:
    """Show the transformer chosen for each PATH.

    Also runs the dispatcher on each path, so unknown override identifiers
    and invalid names are reported the same way a full pass would.

    \b
    Examples:
      treesnap which src/main.server.lua
      treesnap which src/init.lua src/settings.meta.json
    """
    context = resolve_context(cfg, no_config)
    vfs = core.vfs.OsVfs()
    handlers = core.plan.PlanHandlers()

    for path in paths:
        resolved = path.resolve()
        try:
            core.dispatch.snapshot_from_vfs(context, vfs, resolved, handlers)
            description = describe(context, vfs, resolved)
        except (core.errors.SnapshotError, OSError) as e:
            raise click.ClickException(str(e)) from None
        click.echo(f"{util.C.bold(str(path))}: {description}")
