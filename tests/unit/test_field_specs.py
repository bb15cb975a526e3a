"""Tests for the field catalogue and font family normalization."""

from __future__ import annotations

import pytest

from token_studio.core.field_editor import FieldKind
from token_studio.core.field_specs import FIELD_SPECS, field_spec, field_spec_for_path
from token_studio.core.fonts import DEFAULT_FONT_FAMILY, normalize_font_family


class TestFieldSpecLookup:
    def test_heading_font_size_bounds(self):
        spec = field_spec("heading", "fontSize")
        assert (spec.minimum, spec.maximum, spec.step) == (12, 120, 1)

    def test_paragraph_overrides(self):
        spec = field_spec("paragraph", "lineHeight")
        assert (spec.minimum, spec.maximum, spec.step) == (1, 3, 0.05)

    def test_paragraph_inherits_shadow_fields(self):
        assert field_spec("paragraph", "textShadow.blur") == field_spec("heading", "textShadow.blur")

    def test_font_weight_steps_by_hundred(self):
        spec = field_spec("heading", "fontWeight")
        assert spec.step == 100
        assert spec.kind is FieldKind.NUMBER

    def test_button_font_size_is_unit_aware(self):
        spec = field_spec("button", "fontSize")
        assert spec.allow_unit_change
        assert spec.steppable

    def test_unknown_field(self):
        assert field_spec("heading", "color") is None
        assert field_spec("nope", "fontSize") is None

    def test_font_family_fields_normalize(self):
        for section in ("heading", "paragraph", "button"):
            assert FIELD_SPECS[section]["fontFamily"].normalize is normalize_font_family


class TestFieldSpecForPath:
    @pytest.mark.parametrize(
        ("path", "section", "field"),
        [
            ("typography.headings.h1.fontSize", "heading", "fontSize"),
            ("typography.headings.h4.textShadow.blur", "heading", "textShadow.blur"),
            ("typography.paragraph.small.letterSpacing", "paragraph", "letterSpacing"),
            ("buttons.primary.hover.paddingTop", "button", "paddingTop"),
            ("colors.3.value", "color", "value"),
        ],
    )
    def test_resolves(self, path, section, field):
        assert field_spec_for_path(path) is field_spec(section, field)

    @pytest.mark.parametrize(
        "path", ["colors", "colors.1", "typography.headings.h1", "buttons.primary", "spacing.x.y.z"]
    )
    def test_non_field_paths(self, path):
        assert field_spec_for_path(path) is None


class TestNormalizeFontFamily:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Roboto Mono", "Roboto Mono"),
            ("'Roboto Mono'", "Roboto Mono"),
            ('"Inter"', "Inter"),
            ("roboto-mono", "Roboto Mono"),
            ("open_sans", "Open Sans"),
            ("ROBOTO MONO", "Roboto Mono"),
            ("  inter  ", "Inter"),
        ],
    )
    def test_normalizes(self, text, expected):
        assert normalize_font_family(text) == expected

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_uses_default(self, text):
        assert normalize_font_family(text) == DEFAULT_FONT_FAMILY == "Inter"
