"""
Token Studio CLI.

- tokens.py: export, show, set, step, reset, yaml-export, yaml-import
- configs.py: saved configuration commands
- common.py: manifest resolution and store helpers
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from token_studio._version import get_version
from token_studio.cli.common import resolve_manifest
from token_studio.cli.configs import configs_app
from token_studio.cli.tokens import (
    export_command,
    reset_command,
    set_command,
    show_command,
    step_command,
    yaml_export_command,
    yaml_import_command,
)
from token_studio.core.manifest import MANIFEST_ENV_VAR

app = typer.Typer(
    help="Token Studio - edit design tokens and generate CSS.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"token-studio {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    manifest: Annotated[
        Path | None,
        typer.Option(
            "--manifest",
            "-m",
            envvar=MANIFEST_ENV_VAR,
            help="Path to token-studio.toml (default: ./token-studio.toml)",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Token Studio CLI main callback for global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = resolve_manifest(manifest)


app.command(name="export")(export_command)
app.command(name="show")(show_command)
app.command(name="set")(set_command)
app.command(name="step")(step_command)
app.command(name="reset")(reset_command)
app.command(name="yaml-export")(yaml_export_command)
app.command(name="yaml-import")(yaml_import_command)
app.add_typer(configs_app, name="configs")


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
