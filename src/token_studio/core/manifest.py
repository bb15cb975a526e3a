"""
Project configuration (``token-studio.toml``).

Example::

    [store]
    root = ".token-studio/store"
    tokens_document = "tokens/musio-design-tokens"
    configs_collection = "saved-configs"

    [cache]
    path = ".token-studio/cache.json"
    key = "musio-tokens"

    [export]
    output = "tokens.css"

Relative paths resolve against the directory holding the manifest.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ManifestError

MANIFEST_FILE = "token-studio.toml"
MANIFEST_ENV_VAR = "TOKEN_STUDIO_MANIFEST"


@dataclass
class StoreConfig:
    """Document store configuration."""

    root: Path = Path(".token-studio/store")
    tokens_document: str = "tokens/musio-design-tokens"
    configs_collection: str = "saved-configs"


@dataclass
class CacheConfig:
    """Local fallback cache configuration."""

    path: Path = Path(".token-studio/cache.json")
    key: str = "musio-tokens"


@dataclass
class ExportConfig:
    output: Path = Path("tokens.css")


@dataclass
class TokenStudioManifest:
    project_root: Path
    store: StoreConfig = field(default_factory=StoreConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def default_manifest(project_root: Path) -> TokenStudioManifest:
    """Manifest with default settings, paths resolved under ``project_root``."""
    return _resolve(TokenStudioManifest(project_root=project_root))


def load_manifest(path: Path) -> TokenStudioManifest:
    """
    Load ``token-studio.toml``.

    A missing file yields the defaults for its directory.

    Raises:
        ManifestError: The file is not valid TOML or a value has the wrong type
    """
    if not path.exists():
        return default_manifest(path.parent)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ManifestError(str(e), context=str(path)) from e

    store_data = _section(data, "store", path)
    cache_data = _section(data, "cache", path)
    export_data = _section(data, "export", path)

    store = StoreConfig(
        root=Path(_string(store_data, "root", ".token-studio/store", path)),
        tokens_document=_string(store_data, "tokens_document", "tokens/musio-design-tokens", path),
        configs_collection=_string(store_data, "configs_collection", "saved-configs", path),
    )
    cache = CacheConfig(
        path=Path(_string(cache_data, "path", ".token-studio/cache.json", path)),
        key=_string(cache_data, "key", "musio-tokens", path),
    )
    export = ExportConfig(output=Path(_string(export_data, "output", "tokens.css", path)))

    if "/" not in store.tokens_document:
        raise ManifestError(
            f"store.tokens_document must look like 'collection/key', got {store.tokens_document!r}",
            context=str(path),
        )

    manifest = TokenStudioManifest(
        project_root=path.parent, store=store, cache=cache, export=export
    )
    return _resolve(manifest)


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ManifestError(f"[{name}] must be a table", context=str(path))
    return section


def _string(section: dict[str, Any], key: str, default: str, path: Path) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ManifestError(f"{key} must be a non-empty string, got {value!r}", context=str(path))
    return value


def _resolve(manifest: TokenStudioManifest) -> TokenStudioManifest:
    root = manifest.project_root
    manifest.store.root = root / manifest.store.root
    manifest.cache.path = root / manifest.cache.path
    manifest.export.output = root / manifest.export.output
    return manifest
