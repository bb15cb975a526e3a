"""Core Token Studio functionality: token IR, canonical tree, merge, field editing."""

from . import ir
from .canonical import CANONICAL_TOKENS, canonical_document, canonical_tokens
from .errors import (
    ConfigNotFoundError,
    ManifestError,
    StoreUnavailableError,
    TokenDocumentError,
    TokenPathError,
    TokenStudioError,
    TokenValueError,
)
from .field_editor import EditorState, FieldEditor, FieldKind, FieldSpec
from .field_specs import FIELD_SPECS, field_spec, field_spec_for_path
from .merge import deep_merge, get_at_path, merge_tokens, replace_at_path, split_path
from .units import format_number, format_value, parse_value_and_unit

__all__ = [
    "ir",
    "CANONICAL_TOKENS",
    "canonical_tokens",
    "canonical_document",
    "TokenStudioError",
    "StoreUnavailableError",
    "ConfigNotFoundError",
    "TokenPathError",
    "TokenValueError",
    "TokenDocumentError",
    "ManifestError",
    "FieldEditor",
    "FieldSpec",
    "FieldKind",
    "EditorState",
    "FIELD_SPECS",
    "field_spec",
    "field_spec_for_path",
    "deep_merge",
    "merge_tokens",
    "get_at_path",
    "replace_at_path",
    "split_path",
    "parse_value_and_unit",
    "format_number",
    "format_value",
]
