"""
Structural merge of partial token documents.

Resolves a token tree by laying a partial (possibly outdated) document over
a complete one:

1. Mappings merge key by key, recursively
2. Lists (the color palette) and primitives replace wholesale
3. Missing keys and ``None`` values leave the base value in place

Also provides the path helpers the store uses to replace single leaves.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .errors import TokenPathError
from .ir.tokens import DesignTokens

logger = logging.getLogger(__name__)

PathLike = str | Sequence[str | int]


def deep_merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge ``incoming`` over ``base`` without mutating either.

    Args:
        base: Complete document
        incoming: Partial document; keys absent or ``None`` are ignored

    Returns:
        New document with the same shape as ``base``
    """
    result = copy.deepcopy(dict(base))
    for key, value in incoming.items():
        if value is None:
            continue
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def merge_tokens(
    base: DesignTokens,
    incoming: Mapping[str, Any] | DesignTokens | None,
) -> DesignTokens:
    """
    Merge a persisted document over a complete token tree.

    Always returns a complete tree. Leaves of the wrong type in ``incoming``
    fall back to the value in ``base``.
    """
    if incoming is None:
        return base
    if isinstance(incoming, DesignTokens):
        incoming = incoming.to_document()
    if not isinstance(incoming, Mapping):
        logger.warning("Ignoring non-mapping token document of type %s", type(incoming).__name__)
        return base

    base_doc = base.to_tree()
    merged = deep_merge(base_doc, incoming)

    # Each pass restores the offending leaves; bounded by the number of
    # top-level sections so a hopeless document cannot loop.
    for _ in range(len(base_doc) + 1):
        try:
            return DesignTokens.model_validate(merged)
        except ValidationError as e:
            merged = _restore_invalid_leaves(merged, base_doc, e)

    logger.warning("Persisted token document unusable, keeping base tree")
    return base


def _restore_invalid_leaves(
    merged: dict[str, Any],
    base_doc: dict[str, Any],
    error: ValidationError,
) -> dict[str, Any]:
    """Put base values back wherever validation failed."""
    for detail in error.errors():
        target = _known_prefix(base_doc, tuple(detail["loc"]))
        if not target:
            continue
        fallback = get_at_path(base_doc, target)
        logger.warning(
            "Token document gap at %s (%s), using default",
            ".".join(str(p) for p in target),
            detail["msg"],
        )
        try:
            merged = replace_at_path(merged, target, copy.deepcopy(fallback))
        except TokenPathError:
            merged = {**merged, str(target[0]): copy.deepcopy(base_doc.get(str(target[0])))}
    return merged


def _known_prefix(base_doc: Mapping[str, Any], loc: tuple[Any, ...]) -> tuple[Any, ...]:
    """
    Longest prefix of an error location that exists in the base document.

    Union errors carry member tags (``...fontSize.int``) and extra list items
    have no base counterpart; both resolve to the nearest restorable node.
    """
    node: Any = base_doc
    prefix: list[Any] = []
    for segment in loc:
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            node = node[segment]
        else:
            break
        prefix.append(segment)
    if prefix and prefix[0] == "colors" and len(prefix) > 1:
        # Palette entries are positional; restore the palette as a whole
        return ("colors",)
    return tuple(prefix)


# =============================================================================
# Path helpers
# =============================================================================


def split_path(path: PathLike) -> tuple[str | int, ...]:
    """Split ``"colors.2.value"`` into ``("colors", 2, "value")``."""
    if isinstance(path, str):
        parts: list[str | int] = []
        for segment in path.split("."):
            if not segment:
                raise TokenPathError(path, "empty path segment")
            parts.append(int(segment) if segment.lstrip("-").isdigit() else segment)
        return tuple(parts)
    return tuple(path)


def _path_label(path: PathLike) -> str:
    return path if isinstance(path, str) else ".".join(str(p) for p in path)


def get_at_path(doc: Any, path: PathLike) -> Any:
    """Return the value at ``path`` in a document."""
    node = doc
    for segment in split_path(path):
        if isinstance(node, Mapping):
            if segment not in node:
                raise TokenPathError(_path_label(path), f"no key {segment!r}")
            node = node[segment]
        elif isinstance(node, list):
            if not isinstance(segment, int) or not 0 <= segment < len(node):
                raise TokenPathError(_path_label(path), f"no index {segment!r}")
            node = node[segment]
        else:
            raise TokenPathError(_path_label(path), f"cannot descend into {type(node).__name__}")
    return node


def replace_at_path(doc: Mapping[str, Any], path: PathLike, value: Any) -> dict[str, Any]:
    """
    Return a copy of ``doc`` with the value at ``path`` replaced.

    List segments are indexes; an index equal to the list length appends.
    Every mapping key must already exist, so callers pass trees produced by
    ``to_tree()`` where optional fields are present as ``None``.
    """
    parts = split_path(path)
    if not parts:
        raise TokenPathError(_path_label(path), "empty path")
    label = _path_label(path)
    return _replace(doc, parts, value, label)


def _replace(node: Any, parts: tuple[str | int, ...], value: Any, label: str) -> Any:
    head, rest = parts[0], parts[1:]
    if isinstance(node, Mapping):
        if head not in node:
            raise TokenPathError(label, f"no key {head!r}")
        updated = dict(node)
        updated[head] = _replace(node[head], rest, value, label) if rest else value
        return updated
    if isinstance(node, list):
        if not isinstance(head, int):
            raise TokenPathError(label, f"list index expected, got {head!r}")
        updated_list = list(node)
        if head == len(node) and not rest:
            updated_list.append(value)
            return updated_list
        if not 0 <= head < len(node):
            raise TokenPathError(label, f"no index {head}")
        updated_list[head] = _replace(node[head], rest, value, label) if rest else value
        return updated_list
    raise TokenPathError(label, f"cannot descend into {type(node).__name__}")
