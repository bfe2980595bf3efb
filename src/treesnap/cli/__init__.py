"""CLI entry point for treesnap."""

from . import cli as cli_module


def run() -> None:
    """Entry point for the treesnap CLI."""
    cli_module.cli()
