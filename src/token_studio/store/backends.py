"""
Storage backends for token documents.

Two contracts are consumed by the token store:

- ``DocumentStore``: async document store addressed by ``"{collection}/{key}"``
  ids, with collection listing. Failures surface as ``StoreUnavailableError``.
- ``KeyValueCache``: synchronous string key-value cache used as the local
  fallback read path and write-through target.

File-backed implementations keep one JSON file per document, written the
same way the project persistence files are (indented, UTF-8).
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from token_studio.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def split_doc_id(doc_id: str) -> tuple[str, str]:
    """Split ``"saved-configs/config-1"`` into collection and key."""
    collection, sep, key = doc_id.partition("/")
    if not sep or not collection or not key or "/" in key:
        raise ValueError(f"Document id must look like 'collection/key', got {doc_id!r}")
    return collection, key


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class DocumentStore(Protocol):
    """Remote-style document store."""

    async def get(self, doc_id: str) -> dict[str, Any] | None:
        """Fetch a document, or None if it does not exist."""
        ...

    async def set(self, doc_id: str, doc: dict[str, Any]) -> None:
        """Create or overwrite a document."""
        ...

    async def delete(self, doc_id: str) -> None:
        """Delete a document; deleting a missing document is a no-op."""
        ...

    async def list_collection(self, name: str) -> list[dict[str, Any]]:
        """All documents in a collection, in no particular order."""
        ...


@runtime_checkable
class KeyValueCache(Protocol):
    """Local string cache, in the manner of browser local storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


# =============================================================================
# JSON file document store
# =============================================================================


class JsonDocumentStore:
    """
    Document store backed by JSON files under ``root``.

    Layout::

        root/
            tokens/musio-design-tokens.json
            saved-configs/config-1712345678901-1a2b3c4d.json
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _path(self, doc_id: str) -> Path:
        collection, key = split_doc_id(doc_id)
        return self.root / collection / f"{key}.json"

    async def get(self, doc_id: str) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._read, doc_id)

    async def set(self, doc_id: str, doc: dict[str, Any]) -> None:
        await asyncio.to_thread(self._write, doc_id, doc)

    async def delete(self, doc_id: str) -> None:
        await asyncio.to_thread(self._remove, doc_id)

    async def list_collection(self, name: str) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._list, name)

    def _read(self, doc_id: str) -> dict[str, Any] | None:
        path = self._path(doc_id)
        try:
            if not path.exists():
                return None
        except OSError as e:
            raise StoreUnavailableError(str(e), operation="get", doc_id=doc_id) from e
        logger.debug("Reading %s", path)
        return _load_object(path, operation="get", doc_id=doc_id)

    def _write(self, doc_id: str, doc: dict[str, Any]) -> None:
        path = self._path(doc_id)
        logger.debug("Writing %s", path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(doc, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StoreUnavailableError(str(e), operation="set", doc_id=doc_id) from e

    def _remove(self, doc_id: str) -> None:
        path = self._path(doc_id)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreUnavailableError(str(e), operation="delete", doc_id=doc_id) from e

    def _list(self, name: str) -> list[dict[str, Any]]:
        directory = self.root / name
        try:
            if not directory.is_dir():
                return []
        except OSError as e:
            raise StoreUnavailableError(str(e), operation="list", doc_id=name) from e
        return [
            _load_object(path, operation="list", doc_id=f"{name}/{path.stem}")
            for path in sorted(directory.glob("*.json"))
        ]


def _load_object(path: Path, *, operation: str, doc_id: str) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise StoreUnavailableError(str(e), operation=operation, doc_id=doc_id) from e
    if not isinstance(data, dict):
        raise StoreUnavailableError(
            f"expected a JSON object, got {type(data).__name__}",
            operation=operation,
            doc_id=doc_id,
        )
    return data


# =============================================================================
# In-memory document store
# =============================================================================


class MemoryDocumentStore:
    """
    In-memory document store.

    Setting ``fail = True`` makes every call raise ``StoreUnavailableError``,
    which is how degraded mode is exercised without a real backend.
    """

    def __init__(self, documents: dict[str, dict[str, Any]] | None = None):
        self.documents: dict[str, dict[str, Any]] = copy.deepcopy(documents or {})
        self.fail = False
        self.writes = 0

    def _check(self, operation: str, doc_id: str | None = None) -> None:
        if self.fail:
            raise StoreUnavailableError("store offline", operation=operation, doc_id=doc_id)

    async def get(self, doc_id: str) -> dict[str, Any] | None:
        self._check("get", doc_id)
        doc = self.documents.get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def set(self, doc_id: str, doc: dict[str, Any]) -> None:
        self._check("set", doc_id)
        split_doc_id(doc_id)
        self.documents[doc_id] = copy.deepcopy(doc)
        self.writes += 1

    async def delete(self, doc_id: str) -> None:
        self._check("delete", doc_id)
        self.documents.pop(doc_id, None)

    async def list_collection(self, name: str) -> list[dict[str, Any]]:
        self._check("list", name)
        prefix = f"{name}/"
        return [
            copy.deepcopy(doc)
            for doc_id, doc in self.documents.items()
            if doc_id.startswith(prefix)
        ]


# =============================================================================
# Key-value caches
# =============================================================================


class JsonFileCache:
    """
    Key-value cache persisted as a single JSON object file.

    A missing or corrupt file reads as an empty cache; the corrupt file is
    replaced on the next write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring cache file %s: not a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)


class MemoryCache:
    """In-memory key-value cache."""

    def __init__(self, items: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
