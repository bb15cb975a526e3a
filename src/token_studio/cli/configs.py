"""
Saved configuration commands.

Commands:
- configs list: List saved configurations, most recently updated first
- configs save-as: Snapshot the working tree under a name
- configs load: Replace the working tree with a saved configuration
- configs delete: Delete a saved configuration
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

import typer
from rich.table import Table

from token_studio.cli.common import console, run_with_store
from token_studio.core.ir.tokens import SavedConfig
from token_studio.store import TokenStore

configs_app = typer.Typer(
    help="Named snapshots of the token tree.",
    no_args_is_help=True,
)


def _format_ms(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=UTC).strftime("%Y-%m-%d %H:%M")


@configs_app.command(name="list")
def list_configs(ctx: typer.Context) -> None:
    """List saved configurations."""

    async def _list(store: TokenStore) -> list[SavedConfig]:
        return store.saved_configs

    configs = run_with_store(ctx, _list)
    if not configs:
        console.print("[dim]No saved configurations.[/dim]")
        return

    table = Table(title="Saved Configurations")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Colors", justify="right")
    table.add_column("Updated")

    for config in configs:
        table.add_row(
            config.id,
            config.name,
            str(len(config.tokens.colors)),
            _format_ms(config.updated_at),
        )

    console.print(table)


@configs_app.command(name="save-as")
def save_as(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Configuration name")],
) -> None:
    """Save the working tree as a new named configuration."""

    async def _save_as(store: TokenStore) -> SavedConfig:
        return await store.save_as(name)

    config = run_with_store(ctx, _save_as)
    typer.echo(config.id)


@configs_app.command(name="load")
def load_config(
    ctx: typer.Context,
    config_id: Annotated[str, typer.Argument(help="Configuration id")],
) -> None:
    """Replace the working tree with a saved configuration."""

    async def _load(store: TokenStore) -> str | None:
        await store.load_config(config_id)
        return store.active_config_name

    name = run_with_store(ctx, _load)
    console.print(f"[green]Loaded configuration '{name}'[/green]")


@configs_app.command(name="delete")
def delete_config(
    ctx: typer.Context,
    config_id: Annotated[str, typer.Argument(help="Configuration id")],
) -> None:
    """Delete a saved configuration. The working tree is not changed."""

    async def _delete(store: TokenStore) -> None:
        await store.delete_config(config_id)

    run_with_store(ctx, _delete)
    console.print(f"[green]Deleted {config_id}[/green]")
