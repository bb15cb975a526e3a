"""Tests for the token IR types and the canonical tree."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from token_studio.core.canonical import CANONICAL_TOKENS, canonical_document
from token_studio.core.ir import (
    BUTTON_KINDS,
    HEADING_LEVELS,
    ButtonStateToken,
    ColorToken,
    DesignTokens,
    SavedConfig,
    TypographyTokenUpdate,
)


class TestCanonicalTree:
    def test_palette_order(self):
        names = [c.name for c in CANONICAL_TOKENS.colors]
        assert names == [
            "musio-red",
            "musio-slate",
            "musio-gray",
            "musio-black",
            "musio-white",
            "cinesamples-blue",
            "musio-accent-mint",
        ]

    def test_heading_sizes_descend(self):
        sizes = [CANONICAL_TOKENS.heading(level).font_size for level in HEADING_LEVELS]
        assert sizes == [70, 60, 50, 40, 30, 20]

    def test_paragraph_small_weight(self):
        assert CANONICAL_TOKENS.paragraph("small").font_weight == 500
        assert CANONICAL_TOKENS.paragraph("large").font_weight == 600

    def test_primary_and_secondary_swap_fills(self):
        primary = CANONICAL_TOKENS.button("primary")
        secondary = CANONICAL_TOKENS.button("secondary")
        assert primary.default.background == secondary.hover.background == "#fb2545"
        assert primary.hover.background == secondary.default.background == "#ffffff"

    def test_every_button_state_has_border_enabled(self):
        for kind in BUTTON_KINDS:
            button = CANONICAL_TOKENS.button(kind)
            assert button.default.border_is_enabled
            assert button.hover.border_is_enabled

    def test_canonical_document_is_a_fresh_copy(self):
        doc = canonical_document()
        doc["colors"].clear()
        assert len(canonical_document()["colors"]) == 7


class TestDocumentShape:
    def test_document_uses_camel_case(self):
        doc = CANONICAL_TOKENS.to_document()
        h1 = doc["typography"]["headings"]["h1"]
        assert h1["fontSize"] == 70
        assert h1["letterSpacing"] == -1.75
        assert h1["textShadow"] == {"x": 0, "y": 1, "blur": 1, "color": "#000000"}
        assert doc["buttons"]["primary"]["default"]["minHeight"] == 48

    def test_document_omits_unset_height(self):
        doc = CANONICAL_TOKENS.to_document()
        assert "height" not in doc["buttons"]["primary"]["default"]

    def test_tree_keeps_unset_height(self):
        tree = CANONICAL_TOKENS.to_tree()
        assert tree["buttons"]["primary"]["default"]["height"] is None

    def test_document_validates_back(self):
        assert DesignTokens.model_validate(CANONICAL_TOKENS.to_document()) == CANONICAL_TOKENS

    def test_snake_case_names_accepted(self):
        token = ColorToken(name="brand", value="#123456")
        assert token.to_document() == {"name": "brand", "value": "#123456"}


class TestImmutability:
    def test_models_are_frozen(self):
        with pytest.raises(ValidationError):
            CANONICAL_TOKENS.heading("h1").font_size = 10  # type: ignore[misc]

    def test_palette_is_a_tuple(self):
        assert isinstance(CANONICAL_TOKENS.colors, tuple)


class TestButtonState:
    def _state(self, **overrides) -> ButtonStateToken:
        data = CANONICAL_TOKENS.button("primary").default.model_dump()
        data.update(overrides)
        return ButtonStateToken(**data)

    def test_effective_height_defaults_to_min_height(self):
        assert self._state().effective_height == 48

    def test_effective_height_prefers_height(self):
        assert self._state(height=60).effective_height == 60

    def test_border_enabled_when_unset(self):
        assert self._state(border_enabled=None).border_is_enabled is True

    def test_border_disabled_only_when_false(self):
        assert self._state(border_enabled=False).border_is_enabled is False


class TestLookups:
    def test_color_by_name(self):
        assert CANONICAL_TOKENS.color("cinesamples-blue").value == "#1e94fc"

    def test_unknown_color(self):
        assert CANONICAL_TOKENS.color("nope") is None


class TestSavedConfig:
    def test_timestamps_use_camel_case(self):
        config = SavedConfig(
            id="config-1", name="Brand", tokens=CANONICAL_TOKENS, created_at=1, updated_at=2
        )
        doc = config.to_document()
        assert doc["createdAt"] == 1
        assert doc["updatedAt"] == 2
        assert SavedConfig.model_validate(doc) == config


class TestPartialUpdates:
    def test_only_set_fields_are_dumped(self):
        update = TypographyTokenUpdate(font_size=64)
        assert update.to_document() == {"fontSize": 64}

    def test_aliases_accepted(self):
        update = TypographyTokenUpdate.model_validate({"letterSpacing": -1})
        assert update.letter_spacing == -1
