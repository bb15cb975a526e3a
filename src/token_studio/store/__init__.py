"""Token persistence: storage backends and the token store."""

from .backends import (
    DocumentStore,
    JsonDocumentStore,
    JsonFileCache,
    KeyValueCache,
    MemoryCache,
    MemoryDocumentStore,
)
from .facade import StoreSettings, TokenStore, slugify_color_name

__all__ = [
    "DocumentStore",
    "KeyValueCache",
    "JsonDocumentStore",
    "MemoryDocumentStore",
    "JsonFileCache",
    "MemoryCache",
    "StoreSettings",
    "TokenStore",
    "slugify_color_name",
]
