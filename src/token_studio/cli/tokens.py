"""
Token commands.

Commands:
- export: Generate CSS for the working tree
- show: Print a token value or subtree as JSON
- set: Set a token value and save
- step: Step a numeric token the way the editor's arrow keys do, and save
- reset: Restore the canonical tree
- yaml-export / yaml-import: Round-trip the working tree through YAML
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from token_studio.cli.common import (
    console,
    manifest_from,
    parse_cli_value,
    run_with_store,
    write_output,
)
from token_studio.core.errors import TokenPathError
from token_studio.core.field_editor import FieldEditor
from token_studio.core.field_specs import field_spec_for_path
from token_studio.core.yaml_io import load_tokens_yaml, tokens_to_yaml
from token_studio.store import TokenStore
from token_studio.themes import generate_section

SECTIONS = ("colors", "typography", "buttons", "all")


def export_command(
    ctx: typer.Context,
    section: Annotated[
        str, typer.Option("--section", "-s", help="colors, typography, buttons or all")
    ] = "all",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to this file instead of stdout")
    ] = None,
    write: Annotated[
        bool, typer.Option("--write", "-w", help="Write to the manifest's [export] output")
    ] = False,
) -> None:
    """
    Generate CSS for the working tree.

    Examples:
        token-studio export                       # Full stylesheet to stdout
        token-studio export -s buttons            # Button rules only
        token-studio export -w                    # Write to [export] output
    """
    if section not in SECTIONS:
        typer.echo(f"Unknown section '{section}'. Choose from: {', '.join(SECTIONS)}", err=True)
        raise typer.Exit(code=1)

    async def _export(store: TokenStore) -> str:
        return generate_section(store.tokens, section)

    css = run_with_store(ctx, _export)
    if write and output is None:
        output = manifest_from(ctx).export.output
    write_output(css, output)


def show_command(
    ctx: typer.Context,
    path: Annotated[
        str | None, typer.Argument(help="Token path, e.g. typography.headings.h1.fontSize")
    ] = None,
) -> None:
    """Print a token value or subtree as JSON (the whole tree without PATH)."""

    async def _show(store: TokenStore) -> Any:
        if path is None:
            return store.tokens.to_document()
        return store.get(path)

    value = run_with_store(ctx, _show)
    typer.echo(json.dumps(value, indent=2, ensure_ascii=False))


def set_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Token path, e.g. colors.0.value")],
    value: Annotated[str, typer.Argument(help="New value (JSON, or a plain string)")],
) -> None:
    """
    Set a token value and save.

    Examples:
        token-studio set typography.headings.h1.fontSize 64
        token-studio set colors.0.value '#ff0000'
        token-studio set buttons.primary.default.fontSize 1rem
    """
    parsed = parse_cli_value(value)
    spec = field_spec_for_path(path)
    if spec is not None and spec.normalize is not None and isinstance(parsed, str):
        parsed = spec.normalize(parsed)

    async def _set(store: TokenStore) -> Any:
        store.mutate(path, parsed)
        await store.save()
        return store.get(path)

    result = run_with_store(ctx, _set)
    console.print(f"[green]{path}[/green] = {json.dumps(result)}")


def step_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Numeric token path")],
    down: Annotated[bool, typer.Option("--down", "-d", help="Decrement instead")] = False,
    fine: Annotated[bool, typer.Option("--fine", help="Step by a tenth")] = False,
    coarse: Annotated[bool, typer.Option("--coarse", help="Step by ten")] = False,
) -> None:
    """Step a numeric token within its declared bounds, and save."""
    spec = field_spec_for_path(path)
    if spec is None or not spec.steppable:
        typer.echo(f"Error: {path} is not a steppable field", err=True)
        raise typer.Exit(code=1)

    async def _step(store: TokenStore) -> Any:
        editor = FieldEditor(spec, store.get(path), on_change=lambda v: store.mutate(path, v))
        result = editor.step(-1 if down else 1, fine=fine, coarse=coarse)
        if result is None:
            raise TokenPathError(path, f"cannot step value {editor.value!r}")
        await store.save()
        return result

    result = run_with_store(ctx, _step)
    console.print(f"[green]{path}[/green] = {json.dumps(result)}")


def reset_command(ctx: typer.Context) -> None:
    """Restore the canonical tokens and clear the local cache."""

    async def _reset(store: TokenStore) -> None:
        await store.reset()

    run_with_store(ctx, _reset)
    console.print("[green]Tokens reset to defaults[/green]")


def yaml_export_command(
    ctx: typer.Context,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to this file instead of stdout")
    ] = None,
) -> None:
    """Export the working tree as YAML."""

    async def _export(store: TokenStore) -> str:
        return tokens_to_yaml(store.tokens)

    write_output(run_with_store(ctx, _export), output)


def yaml_import_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="YAML token file")],
) -> None:
    """Import a YAML token file (missing fields take default values) and save."""

    async def _import(store: TokenStore) -> None:
        store.replace(load_tokens_yaml(path, store.canonical))
        await store.save()

    run_with_store(ctx, _import)
    console.print(f"[green]Imported {path.name}[/green]")
