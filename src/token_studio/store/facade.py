"""
Token store.

Owns the working token tree and the saved-configuration list, and sequences
load, mutation, save and reset against a ``DocumentStore`` plus a local
``KeyValueCache``. Storage mechanics live entirely in the backends.

``has_changes`` is true exactly when the in-memory working tree may differ
from what the document store holds. Store failures never lose edits: the
local cache is written first and the flag stays set until a write succeeds.
"""

from __future__ import annotations

import json
import logging
import re
import secrets
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from token_studio.core.canonical import CANONICAL_TOKENS
from token_studio.core.errors import (
    ConfigNotFoundError,
    StoreUnavailableError,
    TokenPathError,
    TokenValueError,
)
from token_studio.core.ir.tokens import (
    BUTTON_KINDS,
    BUTTON_STATES,
    HEADING_LEVELS,
    PARAGRAPH_VARIANTS,
    ButtonStateUpdate,
    ColorToken,
    DesignTokens,
    SavedConfig,
    TypographyTokenUpdate,
)
from token_studio.core.merge import (
    PathLike,
    deep_merge,
    get_at_path,
    merge_tokens,
    replace_at_path,
    split_path,
)

from .backends import DocumentStore, KeyValueCache

logger = logging.getLogger(__name__)

TOKENS_DOCUMENT = "tokens/musio-design-tokens"
CONFIGS_COLLECTION = "saved-configs"
CACHE_KEY = "musio-tokens"


@dataclass(frozen=True)
class StoreSettings:
    """Well-known identifiers used by the token store."""

    tokens_document: str = TOKENS_DOCUMENT
    configs_collection: str = CONFIGS_COLLECTION
    cache_key: str = CACHE_KEY


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def _config_id(now: int) -> str:
    return f"config-{now}-{secrets.token_hex(4)}"


def slugify_color_name(name: str) -> str:
    """``"  Brand Blue "`` -> ``"brand-blue"``."""
    return re.sub(r"\s+", "-", name.strip().lower())


def _path_label(path: PathLike) -> str:
    return path if isinstance(path, str) else ".".join(str(p) for p in path)


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    loc = ".".join(str(p) for p in detail["loc"])
    return f"{detail['msg']} at {loc}" if loc else detail["msg"]


def _store_error(error: Exception, operation: str, doc_id: str) -> StoreUnavailableError:
    """Normalize any backend failure raised during a read into ``StoreUnavailableError``."""
    if isinstance(error, StoreUnavailableError):
        return error
    wrapped = StoreUnavailableError(
        f"{type(error).__name__}: {error}", operation=operation, doc_id=doc_id
    )
    wrapped.__cause__ = error
    return wrapped


class TokenStore:
    """
    Working token tree plus saved configurations.

    Args:
        documents: Document store holding the working tree and configs
        cache: Local fallback cache
        settings: Document ids and cache key
        canonical: Tree every load merges over and reset restores
        clock: Returns the current time in epoch milliseconds
        id_factory: Builds a config id from a timestamp

    Example:
        store = TokenStore(JsonDocumentStore(root), JsonFileCache(path))
        await store.load()
        store.mutate("typography.headings.h1.fontSize", 64)
        await store.save()
    """

    def __init__(
        self,
        documents: DocumentStore,
        cache: KeyValueCache,
        *,
        settings: StoreSettings | None = None,
        canonical: DesignTokens = CANONICAL_TOKENS,
        clock: Callable[[], int] | None = None,
        id_factory: Callable[[int], str] | None = None,
    ) -> None:
        self.documents = documents
        self.cache = cache
        self.settings = settings or StoreSettings()
        self.canonical = canonical
        self._clock = clock or _epoch_ms
        self._id_factory = id_factory or _config_id

        self._tokens = canonical
        self._configs: list[SavedConfig] = []
        self._active_id: str | None = None
        self._active_name: str | None = None
        self.has_changes = False
        self.is_loading = False
        self.last_error: StoreUnavailableError | None = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def tokens(self) -> DesignTokens:
        return self._tokens

    @property
    def saved_configs(self) -> list[SavedConfig]:
        """Saved configurations, most recently updated first."""
        return list(self._configs)

    @property
    def active_config(self) -> SavedConfig | None:
        if self._active_id is None:
            return None
        return self._find_config(self._active_id)

    @property
    def active_config_name(self) -> str | None:
        active = self.active_config
        return active.name if active is not None else self._active_name

    def get_config(self, config_id: str) -> SavedConfig:
        config = self._find_config(config_id)
        if config is None:
            raise ConfigNotFoundError(config_id)
        return config

    def _find_config(self, config_id: str) -> SavedConfig | None:
        for config in self._configs:
            if config.id == config_id:
                return config
        return None

    def _config_doc_id(self, config_id: str) -> str:
        return f"{self.settings.configs_collection}/{config_id}"

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def load(self) -> DesignTokens:
        """
        Load the working tree and the saved-configuration list.

        Store problems never raise here: any backend failure falls back to
        the local cache, and anything missing falls back to the canonical
        tree. The last store failure is kept in ``last_error``.
        """
        self.is_loading = True
        self.last_error = None
        try:
            persisted = await self._fetch_working_document()
            self._tokens = merge_tokens(self.canonical, persisted)
            self.has_changes = False
            try:
                await self.refresh_configs()
            except Exception as e:
                error = _store_error(e, "list", self.settings.configs_collection)
                logger.warning("Could not list saved configurations: %s", error)
                self.last_error = error
                self._configs = []
        finally:
            self.is_loading = False

        logger.info(
            "Loaded tokens (%d colors, %d saved configs)",
            len(self._tokens.colors),
            len(self._configs),
        )
        return self._tokens

    async def refresh_configs(self) -> list[SavedConfig]:
        """Re-list the saved-configuration collection."""
        docs = await self.documents.list_collection(self.settings.configs_collection)
        configs = []
        for doc in docs:
            config = self._parse_config(doc)
            if config is not None:
                configs.append(config)
        configs.sort(key=lambda c: c.updated_at, reverse=True)
        self._configs = configs
        return self.saved_configs

    def _parse_config(self, doc: Mapping[str, Any]) -> SavedConfig | None:
        # Snapshots written before a schema addition still load completely
        data = dict(doc)
        data["tokens"] = merge_tokens(self.canonical, data.get("tokens")).to_document()
        try:
            return SavedConfig.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "Skipping unreadable saved configuration %r: %s", doc.get("id"), _first_error(e)
            )
            return None

    async def _fetch_working_document(self) -> dict[str, Any] | None:
        try:
            doc = await self.documents.get(self.settings.tokens_document)
        except Exception as e:
            error = _store_error(e, "get", self.settings.tokens_document)
            logger.warning("Document store unavailable (%s), reading local cache", error)
            self.last_error = error
            return self._read_cache()
        if doc is None:
            logger.debug("No working document at %s", self.settings.tokens_document)
        return doc

    def _read_cache(self) -> dict[str, Any] | None:
        raw = self.cache.get_item(self.settings.cache_key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt token cache: %s", e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring token cache holding %s", type(data).__name__)
            return None
        return data

    def _write_cache(self, tokens: DesignTokens) -> None:
        try:
            self.cache.set_item(self.settings.cache_key, json.dumps(tokens.to_document()))
        except OSError as e:
            logger.warning("Local token cache not written: %s", e)

    def _clear_cache(self) -> None:
        try:
            self.cache.remove_item(self.settings.cache_key)
        except OSError as e:
            logger.warning("Local token cache not cleared: %s", e)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def mutate(self, path: PathLike, value: Any) -> DesignTokens:
        """
        Replace the value at ``path`` and validate the resulting tree.

        Paths use the camelCase document names, e.g.
        ``"buttons.primary.hover.paddingTop"`` or ``("colors", 2, "value")``.
        Storage is not touched.

        Raises:
            TokenPathError: ``path`` does not address an existing field
            TokenValueError: ``value`` does not fit the field
        """
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)

        updated = replace_at_path(self._tokens.to_tree(), path, value)
        try:
            tokens = DesignTokens.model_validate(updated)
        except ValidationError as e:
            raise TokenValueError(_path_label(path), _first_error(e)) from e

        self._tokens = tokens
        self.has_changes = True
        return tokens

    def replace(self, tokens: DesignTokens) -> DesignTokens:
        """Replace the whole working tree, e.g. with an imported file."""
        self._tokens = tokens
        self.has_changes = True
        return tokens

    def get(self, path: PathLike) -> Any:
        """Value at ``path`` in the working tree (document form)."""
        return get_at_path(self._tokens.to_tree(), path)

    def update_color(self, index: int, value: str) -> DesignTokens:
        return self.mutate(("colors", index, "value"), value)

    def add_color(self, color: ColorToken | Mapping[str, str]) -> ColorToken:
        """
        Append a color to the palette.

        The name is slugged (``"Brand Blue"`` -> ``"brand-blue"``). Duplicate
        names are accepted; the palette keeps display order.
        """
        if isinstance(color, ColorToken):
            name, value = color.name, color.value
        else:
            name, value = color.get("name", ""), color.get("value", "")
        slug = slugify_color_name(name or "")
        value = (value or "").strip()
        if not slug or not value:
            raise ValueError("Color name and value are required")

        added = ColorToken(name=slug, value=value)
        colors = [c.to_document() for c in self._tokens.colors]
        colors.append(added.to_document())
        self.mutate("colors", colors)
        return added

    def update_heading(
        self, level: str, updates: TypographyTokenUpdate | Mapping[str, Any]
    ) -> DesignTokens:
        if level not in HEADING_LEVELS:
            raise TokenPathError(f"typography.headings.{level}", "unknown heading level")
        return self._apply_update(
            ("typography", "headings", level), TypographyTokenUpdate, updates
        )

    def update_paragraph(
        self, variant: str, updates: TypographyTokenUpdate | Mapping[str, Any]
    ) -> DesignTokens:
        if variant not in PARAGRAPH_VARIANTS:
            raise TokenPathError(f"typography.paragraph.{variant}", "unknown paragraph variant")
        return self._apply_update(
            ("typography", "paragraph", variant), TypographyTokenUpdate, updates
        )

    def update_button(
        self, kind: str, state: str, updates: ButtonStateUpdate | Mapping[str, Any]
    ) -> DesignTokens:
        return self._apply_update(self._button_path(kind, state), ButtonStateUpdate, updates)

    def set_button_border(self, kind: str, state: str, enabled: bool) -> DesignTokens:
        """Toggle a button border; disabling also zeroes its width."""
        if enabled:
            return self.update_button(kind, state, ButtonStateUpdate(border_enabled=True))
        return self.update_button(
            kind, state, ButtonStateUpdate(border_enabled=False, border_width=0)
        )

    def set_button_height(self, kind: str, state: str, px: int | float) -> DesignTokens:
        """Set both ``height`` and ``minHeight`` of a button state."""
        return self.update_button(kind, state, ButtonStateUpdate(height=px, min_height=px))

    def _button_path(self, kind: str, state: str) -> tuple[str, str, str]:
        if kind not in BUTTON_KINDS:
            raise TokenPathError(f"buttons.{kind}", "unknown button kind")
        if state not in BUTTON_STATES:
            raise TokenPathError(f"buttons.{kind}.{state}", "unknown button state")
        return ("buttons", kind, state)

    def _apply_update(
        self,
        path: tuple[str, ...],
        model: type[TypographyTokenUpdate] | type[ButtonStateUpdate],
        updates: BaseModel | Mapping[str, Any],
    ) -> DesignTokens:
        label = _path_label(path)
        if not isinstance(updates, BaseModel):
            try:
                updates = model.model_validate(dict(updates))
            except ValidationError as e:
                raise TokenValueError(label, _first_error(e)) from e
        doc = updates.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
        current = get_at_path(self._tokens.to_tree(), split_path(path))
        return self.mutate(path, deep_merge(current, doc))

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    async def save(self) -> None:
        """
        Persist the working tree.

        The local cache is always written. When a configuration is active its
        snapshot is rewritten with a fresh ``updated_at``.

        Raises:
            StoreUnavailableError: The document store write failed;
                ``has_changes`` stays true
        """
        tokens = self._tokens
        self._write_cache(tokens)
        try:
            await self.documents.set(self.settings.tokens_document, tokens.to_document())
            if self._active_id is not None:
                await self._update_active_snapshot(tokens)
        except StoreUnavailableError as e:
            logger.warning("Save failed, changes kept in local cache: %s", e)
            self.last_error = e
            self.has_changes = True
            raise

        # Mutations made while the write was in flight are still pending
        self.has_changes = self._tokens is not tokens
        logger.info("Saved tokens to %s", self.settings.tokens_document)

    async def _update_active_snapshot(self, tokens: DesignTokens) -> None:
        config = self._find_config(self._active_id or "")
        if config is None:
            logger.debug("Active configuration %s no longer listed", self._active_id)
            return
        updated = config.model_copy(update={"tokens": tokens, "updated_at": self._clock()})
        await self.documents.set(self._config_doc_id(updated.id), updated.to_document())
        self._configs = [updated if c.id == updated.id else c for c in self._configs]
        self._configs.sort(key=lambda c: c.updated_at, reverse=True)

    async def save_as(self, name: str) -> SavedConfig:
        """
        Snapshot the working tree as a new named configuration and activate it.

        Raises:
            ValueError: ``name`` is blank
            StoreUnavailableError: The snapshot could not be written (state is
                unchanged) or the working tree could not be written (the new
                configuration is active, ``has_changes`` stays true)
        """
        name = name.strip()
        if not name:
            raise ValueError("Configuration name is required")

        tokens = self._tokens
        now = self._clock()
        config = SavedConfig(
            id=self._id_factory(now), name=name, tokens=tokens, created_at=now, updated_at=now
        )
        await self.documents.set(self._config_doc_id(config.id), config.to_document())

        self._configs.insert(0, config)
        self._active_id = config.id
        self._active_name = config.name
        logger.info("Saved configuration %r as %s", name, config.id)

        self._write_cache(tokens)
        try:
            await self.documents.set(self.settings.tokens_document, tokens.to_document())
        except StoreUnavailableError as e:
            self.last_error = e
            self.has_changes = True
            raise
        self.has_changes = self._tokens is not tokens
        return config

    async def load_config(self, config: SavedConfig | str) -> DesignTokens:
        """
        Replace the working tree with a saved configuration and activate it.

        The snapshot is taken as-is (no merge). The switch happens even if
        the store write fails, in which case ``has_changes`` is set and the
        error is raised.
        """
        if isinstance(config, str):
            config = self.get_config(config)

        self._tokens = config.tokens
        self._active_id = config.id
        self._active_name = config.name
        self._write_cache(config.tokens)
        logger.info("Loaded configuration %r", config.name)

        try:
            await self.documents.set(self.settings.tokens_document, config.tokens.to_document())
        except StoreUnavailableError as e:
            logger.warning("Configuration loaded locally only: %s", e)
            self.last_error = e
            self.has_changes = True
            raise
        self.has_changes = self._tokens is not config.tokens
        return self._tokens

    async def delete_config(self, config_id: str) -> None:
        """
        Delete a saved configuration. The working tree is untouched.

        Raises:
            ConfigNotFoundError: No configuration with ``config_id``
            StoreUnavailableError: The store delete failed (list unchanged)
        """
        self.get_config(config_id)
        await self.documents.delete(self._config_doc_id(config_id))
        self._configs = [c for c in self._configs if c.id != config_id]
        if self._active_id == config_id:
            self._active_id = None
            self._active_name = None
        logger.info("Deleted configuration %s", config_id)

    async def reset(self) -> DesignTokens:
        """
        Restore the canonical tree, clear the local cache and the active marker.

        The local reset always completes. If writing the canonical tree to
        the store fails, ``has_changes`` is set and the error is raised.
        """
        self._tokens = self.canonical
        self._clear_cache()
        self._active_id = None
        self._active_name = None
        self.has_changes = False
        logger.info("Reset tokens to canonical")

        try:
            await self.documents.set(self.settings.tokens_document, self.canonical.to_document())
        except StoreUnavailableError as e:
            logger.warning("Reset not written to document store: %s", e)
            self.last_error = e
            self.has_changes = True
            raise
        return self._tokens
