"""
YAML export and import of token trees.

Exported files use the persisted document shape (camelCase keys, schema key
order). Imported files are merged over a complete tree, so hand-edited or
partial files are accepted the same way a persisted document is on load.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .canonical import CANONICAL_TOKENS
from .errors import TokenDocumentError
from .ir.tokens import DesignTokens
from .merge import merge_tokens

logger = logging.getLogger(__name__)


def tokens_to_yaml(tokens: DesignTokens) -> str:
    return yaml.dump(
        tokens.to_document(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def tokens_from_yaml(text: str, base: DesignTokens = CANONICAL_TOKENS) -> DesignTokens:
    """
    Parse a YAML token document and merge it over ``base``.

    Raises:
        TokenDocumentError: The text is not YAML or its root is not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise TokenDocumentError(f"Invalid YAML: {e}") from e

    if data is None:
        logger.warning("Empty token YAML, using base tree")
        return base
    if not isinstance(data, dict):
        raise TokenDocumentError(f"Token YAML must be a mapping, got {type(data).__name__}")
    return merge_tokens(base, data)


def save_tokens_yaml(path: Path, tokens: DesignTokens) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tokens_to_yaml(tokens), encoding="utf-8")
    logger.info("Saved tokens to %s", path)
    return path


def load_tokens_yaml(path: Path, base: DesignTokens = CANONICAL_TOKENS) -> DesignTokens:
    """Read a YAML token file; see ``tokens_from_yaml``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TokenDocumentError(str(e), context=str(path)) from e
    return tokens_from_yaml(text, base)
