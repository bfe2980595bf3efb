"""Plan subcommand: print the instance tree a directory would produce."""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from treesnap import core

from . import config, util


def resolve_context(cfg: Path | None, no_config: bool) -> core.context.InstanceContext:
    """Load the context from -c, or from the nearest treesnap.yml."""
    if no_config:
        return core.context.InstanceContext()

    config_path = cfg if cfg else config.find_config(Path.cwd())
    if config_path is not None:
        click.echo(util.C.dim(f"Using config {config_path}"), err=True)
    try:
        return config.load_context(config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from None


def print_tree(snapshot: core.snapshot.InstanceSnapshot, root: Path) -> None:
    """Print the snapshot tree as indented rows with a summary."""
    count = 0
    for depth, node in snapshot.walk():
        click.echo(util.format_snapshot_line(node, depth, root))
        count += 1
    click.echo()
    click.echo(util.C.dim(f"Total: {count} instances"))


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Choice(["tree", "yaml"]),
    default="tree",
    help="Output format: tree (indented) or yaml",
)
@click.option(
    "-c",
    "--config",
    "cfg",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to config file (default: nearest treesnap.yml)",
)
@click.option("--no-config", is_flag=True, help="Ignore any treesnap.yml and use suffix rules only")
def plan(path: Path, output: str, cfg: Path | None, no_config: bool) -> None:
    """Show which instances PATH turns into, without reading file contents.

    \b
    Examples:
      treesnap plan src                  # Tree view
      treesnap plan src -o yaml          # Nested YAML
      treesnap plan src -c treesnap.yml  # Apply sync rules from a config
    """
    context = resolve_context(cfg, no_config)
    root = path.resolve()

    try:
        snapshot = core.walk.snapshot_tree(context, core.vfs.OsVfs(), root, core.plan.PlanHandlers())
    except (core.errors.SnapshotError, OSError) as e:
        raise click.ClickException(str(e)) from None

    if snapshot is None:
        click.echo(util.C.yellow(f"{path} does not produce an instance."))
        return

    if output == "yaml":
        click.echo(yaml.safe_dump(snapshot.to_dict(), sort_keys=False), nl=False)
    else:
        print_tree(snapshot, root.parent)
