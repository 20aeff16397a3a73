"""Command line interface for quickresponse."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from quickresponse import __version__
from quickresponse.config import ConfigError, QuickResponseConfig
from quickresponse.migration import QuickResponseMigrator
from quickresponse.paths import get_config_path, get_data_dir, get_preferences_path
from quickresponse.store import StoreCorruptedError

console = Console()


def _load_migrator(config_path: Path | None) -> QuickResponseMigrator:
    try:
        config = QuickResponseConfig.load(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    return QuickResponseMigrator.from_config(config)


@click.group()
@click.version_option(version=__version__, prog_name="quickresponse")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (defaults to the user config directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log migration steps to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Manage SMS quick responses."""
    ctx.obj = config_path
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command()
@click.pass_obj
def migrate(config_path: Path | None) -> None:
    """Copy legacy quick responses into the current store if it has none."""
    migrator = _load_migrator(config_path)
    try:
        written = migrator.migrate()
    except StoreCorruptedError as exc:
        raise click.ClickException(str(exc)) from exc

    if written:
        console.print(f"[green]Migrated quick responses[/] into {migrator.current}")
    else:
        console.print("[dim]Quick responses already present, nothing to do[/]")


@cli.command(name="list")
@click.pass_obj
def list_responses(config_path: Path | None) -> None:
    """Show the four quick responses, migrating them first if needed."""
    migrator = _load_migrator(config_path)
    try:
        responses = migrator.load()
    except StoreCorruptedError as exc:
        raise click.ClickException(str(exc)) from exc

    table = Table(title="Quick responses")
    table.add_column("Slot", justify="right")
    table.add_column("Response")
    for index, text in enumerate(responses.responses, start=1):
        table.add_row(str(index), text)
    console.print(table)


@cli.command()
@click.pass_obj
def paths(config_path: Path | None) -> None:
    """Show where configuration and preferences are stored."""
    try:
        config = QuickResponseConfig.load(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    general = config.general

    click.echo(f"Config:  {config_path or get_config_path()}")
    click.echo(f"Data:    {get_data_dir()}")
    click.echo(f"Current: {get_preferences_path(general.current_component, general.namespace)}")
    click.echo(f"Legacy:  {get_preferences_path(general.legacy_component, general.namespace)}")
