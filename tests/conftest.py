"""Shared pytest fixtures for Token Studio tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from token_studio.core.canonical import CANONICAL_TOKENS
from token_studio.core.ir import DesignTokens
from token_studio.store import MemoryCache, MemoryDocumentStore, TokenStore

START_MS = 1_700_000_000_000


class FakeClock:
    """Epoch-ms clock that advances one second per call."""

    def __init__(self, start: int = START_MS):
        self.now = start

    def __call__(self) -> int:
        self.now += 1000
        return self.now


@pytest.fixture
def canonical() -> DesignTokens:
    return CANONICAL_TOKENS


@pytest.fixture
def documents() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_store(documents: MemoryDocumentStore, cache: MemoryCache, clock: FakeClock) -> TokenStore:
    """Token store over in-memory backends with deterministic ids and timestamps."""
    return TokenStore(documents, cache, clock=clock, id_factory=lambda now: f"config-{now}")


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """A token-studio.toml with all paths inside tmp_path."""
    path = tmp_path / "token-studio.toml"
    path.write_text(
        "[store]\n"
        'root = "store"\n'
        "\n"
        "[cache]\n"
        'path = "cache.json"\n'
        "\n"
        "[export]\n"
        'output = "out/tokens.css"\n',
        encoding="utf-8",
    )
    return path
