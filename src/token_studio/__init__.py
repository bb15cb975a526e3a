"""
Token Studio - design token engine.

Canonical token schema, merge of persisted documents over defaults,
unit-aware field editing, and deterministic CSS generation.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.canonical import CANONICAL_TOKENS
from .core.errors import (
    ConfigNotFoundError,
    StoreUnavailableError,
    TokenStudioError,
)
from .store import TokenStore

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CANONICAL_TOKENS",
    "TokenStore",
    "TokenStudioError",
    "StoreUnavailableError",
    "ConfigNotFoundError",
]
