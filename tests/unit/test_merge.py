"""Tests for deep merge and the path helpers."""

from __future__ import annotations

import logging

import pytest

from token_studio.core.canonical import CANONICAL_TOKENS, canonical_document
from token_studio.core.errors import TokenPathError
from token_studio.core.merge import (
    deep_merge,
    get_at_path,
    merge_tokens,
    replace_at_path,
    split_path,
)


class TestDeepMerge:
    def test_nested_mappings_merge(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        assert deep_merge(base, {"a": {"y": 20}}) == {"a": {"x": 1, "y": 20}, "b": 3}

    def test_lists_replace_wholesale(self):
        base = {"items": [1, 2, 3]}
        assert deep_merge(base, {"items": [9]}) == {"items": [9]}

    def test_none_is_absent(self):
        assert deep_merge({"a": 1}, {"a": None}) == {"a": 1}

    def test_inputs_not_mutated(self):
        base = {"a": {"x": 1}}
        incoming = {"a": {"x": 2}}
        result = deep_merge(base, incoming)
        result["a"]["x"] = 99
        assert base == {"a": {"x": 1}}
        assert incoming == {"a": {"x": 2}}

    def test_new_keys_added(self):
        assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


class TestMergeTokens:
    def test_empty_document_yields_base(self):
        assert merge_tokens(CANONICAL_TOKENS, {}) == CANONICAL_TOKENS

    def test_none_yields_base(self):
        assert merge_tokens(CANONICAL_TOKENS, None) is CANONICAL_TOKENS

    def test_leaf_override(self):
        merged = merge_tokens(
            CANONICAL_TOKENS, {"typography": {"headings": {"h1": {"fontSize": 64}}}}
        )
        assert merged.heading("h1").font_size == 64
        assert merged.heading("h1").line_height == 1.0
        assert merged.heading("h2") == CANONICAL_TOKENS.heading("h2")

    def test_colors_replaced_wholesale(self):
        merged = merge_tokens(CANONICAL_TOKENS, {"colors": [{"name": "only", "value": "#111"}]})
        assert [c.name for c in merged.colors] == ["only"]

    def test_document_predating_new_fields(self):
        doc = canonical_document()
        del doc["buttons"]["primary"]["default"]["borderEnabled"]
        del doc["typography"]["paragraph"]
        merged = merge_tokens(CANONICAL_TOKENS, doc)
        assert merged.button("primary").default.border_enabled is True
        assert merged.typography.paragraph == CANONICAL_TOKENS.typography.paragraph

    def test_none_leaf_keeps_base(self):
        merged = merge_tokens(
            CANONICAL_TOKENS, {"typography": {"headings": {"h1": {"fontSize": None}}}}
        )
        assert merged.heading("h1").font_size == 70

    def test_accepts_token_tree(self):
        other = merge_tokens(CANONICAL_TOKENS, {"colors": []})
        assert merge_tokens(CANONICAL_TOKENS, other) == other

    def test_unknown_keys_ignored(self):
        merged = merge_tokens(CANONICAL_TOKENS, {"spacing": {"sm": 4}})
        assert merged == CANONICAL_TOKENS

    def test_non_mapping_document_yields_base(self):
        assert merge_tokens(CANONICAL_TOKENS, ["not", "a", "tree"]) is CANONICAL_TOKENS  # type: ignore[arg-type]

    def test_no_missing_leaves(self):
        merged = merge_tokens(CANONICAL_TOKENS, {"buttons": {"secondary": {"hover": {}}}})
        for kind in ("primary", "secondary"):
            state = merged.button(kind).hover
            assert state.min_width is not None
            assert state.font_size


class TestMergeGaps:
    def test_wrong_leaf_type_falls_back(self):
        doc = {
            "typography": {
                "headings": {
                    "h1": {"fontSize": "huge"},
                    "h2": {"fontSize": 55},
                }
            }
        }
        merged = merge_tokens(CANONICAL_TOKENS, doc)
        assert merged.heading("h1").font_size == 70
        assert merged.heading("h2").font_size == 55

    def test_broken_color_entry_restores_palette(self):
        merged = merge_tokens(CANONICAL_TOKENS, {"colors": [{"name": "x"}]})
        assert merged.colors == CANONICAL_TOKENS.colors

    def test_wrong_section_type_falls_back(self):
        merged = merge_tokens(CANONICAL_TOKENS, {"buttons": "none", "colors": []})
        assert merged.buttons == CANONICAL_TOKENS.buttons
        assert merged.colors == ()

    def test_gap_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="token_studio.core.merge"):
            merge_tokens(CANONICAL_TOKENS, {"typography": {"headings": {"h3": {"fontWeight": "x"}}}})
        assert "typography.headings.h3.fontWeight" in caplog.text


class TestPaths:
    def test_split_path(self):
        assert split_path("colors.2.value") == ("colors", 2, "value")

    def test_split_sequence_passthrough(self):
        assert split_path(("colors", 0)) == ("colors", 0)

    def test_split_rejects_empty_segment(self):
        with pytest.raises(TokenPathError):
            split_path("typography..h1")

    def test_get_at_path(self):
        doc = canonical_document()
        assert get_at_path(doc, "typography.headings.h6.textShadow.blur") == 0
        assert get_at_path(doc, "colors.5.name") == "cinesamples-blue"

    def test_get_missing_key(self):
        with pytest.raises(TokenPathError):
            get_at_path(canonical_document(), "typography.headings.h7")

    def test_replace_copies(self):
        doc = canonical_document()
        updated = replace_at_path(doc, "typography.headings.h1.fontSize", 64)
        assert updated["typography"]["headings"]["h1"]["fontSize"] == 64
        assert doc["typography"]["headings"]["h1"]["fontSize"] == 70
        assert updated["buttons"] is doc["buttons"]

    def test_replace_appends_at_length(self):
        doc = {"colors": [{"name": "a", "value": "#000"}]}
        updated = replace_at_path(doc, "colors.1", {"name": "b", "value": "#fff"})
        assert [c["name"] for c in updated["colors"]] == ["a", "b"]

    def test_replace_rejects_unknown_key(self):
        with pytest.raises(TokenPathError):
            replace_at_path(canonical_document(), "typography.headings.h1.fontColor", "red")

    def test_replace_rejects_index_past_end(self):
        with pytest.raises(TokenPathError):
            replace_at_path(canonical_document(), "colors.9.value", "#000")

    def test_replace_rejects_descent_into_leaf(self):
        with pytest.raises(TokenPathError):
            replace_at_path(canonical_document(), "colors.0.value.x", "#000")
