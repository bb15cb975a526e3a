"""Shared CLI helpers: manifest resolution, store construction, error exits."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console

from token_studio.core.errors import StoreUnavailableError, TokenStudioError
from token_studio.core.manifest import MANIFEST_FILE, TokenStudioManifest, load_manifest
from token_studio.store import JsonDocumentStore, JsonFileCache, StoreSettings, TokenStore

console = Console()

T = TypeVar("T")


def resolve_manifest(manifest: Path | None) -> TokenStudioManifest:
    """Load the manifest, defaulting to ``token-studio.toml`` in the cwd.

    Exits with code 1 if the file exists but cannot be parsed.
    """
    path = (manifest or Path.cwd() / MANIFEST_FILE).resolve()
    try:
        return load_manifest(path)
    except TokenStudioError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def manifest_from(ctx: typer.Context) -> TokenStudioManifest:
    obj = ctx.find_root().obj
    if isinstance(obj, TokenStudioManifest):
        return obj
    return resolve_manifest(None)


def build_store(manifest: TokenStudioManifest) -> TokenStore:
    settings = StoreSettings(
        tokens_document=manifest.store.tokens_document,
        configs_collection=manifest.store.configs_collection,
        cache_key=manifest.cache.key,
    )
    return TokenStore(
        JsonDocumentStore(manifest.store.root),
        JsonFileCache(manifest.cache.path),
        settings=settings,
    )


def run_with_store(ctx: typer.Context, action: Callable[[TokenStore], Awaitable[T]]) -> T:
    """Load the token store, run ``action`` against it, and map failures to exit codes.

    Store failures print a degraded-mode warning; edits have already been
    written to the local cache by then.

    Raises:
        typer.Exit: On any store or token error (code 1).
    """
    store = build_store(manifest_from(ctx))

    async def _run() -> T:
        await store.load()
        if store.last_error is not None:
            typer.echo(
                f"Warning: document store unavailable ({store.last_error}), using local cache",
                err=True,
            )
        return await action(store)

    try:
        return asyncio.run(_run())
    except StoreUnavailableError as e:
        typer.echo(f"Error: document store write failed: {e}", err=True)
        typer.echo("Changes were kept in the local cache.", err=True)
        raise typer.Exit(code=1)
    except (TokenStudioError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def parse_cli_value(text: str) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string.

    ``64`` -> 64, ``true`` -> True, ``#fb2545`` -> "#fb2545", ``0.9vw`` -> "0.9vw".
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def write_output(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Wrote {output}[/green]")
