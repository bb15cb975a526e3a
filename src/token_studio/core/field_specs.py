"""
Field catalogue.

Bounds, steps and units for every editable token field, keyed by section
and camelCase field path. ``field_spec_for_path`` resolves a full token
path such as ``typography.headings.h1.fontSize`` to its declaration.
"""

from __future__ import annotations

from collections.abc import Sequence

from .field_editor import FieldKind, FieldSpec
from .fonts import normalize_font_family
from .merge import split_path

_FONT_FAMILY = FieldSpec(kind=FieldKind.TEXT, label="Font Family", normalize=normalize_font_family)
_FONT_WEIGHT = FieldSpec(
    kind=FieldKind.NUMBER, label="Font Weight", unit="", minimum=100, maximum=900, step=100
)


def _px(label: str, minimum: float | None, maximum: float | None, step: float = 1) -> FieldSpec:
    return FieldSpec(
        kind=FieldKind.NUMBER, label=label, unit="px", minimum=minimum, maximum=maximum, step=step
    )


def _color(label: str) -> FieldSpec:
    return FieldSpec(kind=FieldKind.COLOR, label=label)


HEADING_FIELDS: dict[str, FieldSpec] = {
    "fontFamily": _FONT_FAMILY,
    "fontSize": _px("Font Size", 12, 120),
    "fontWeight": _FONT_WEIGHT,
    "lineHeight": FieldSpec(
        kind=FieldKind.NUMBER, label="Line Height", unit="", minimum=0.5, maximum=3, step=0.1
    ),
    "letterSpacing": _px("Letter Spacing", -5, 10, step=0.25),
    "textShadow.x": _px("Shadow X", -10, 10),
    "textShadow.y": _px("Shadow Y", -10, 10),
    "textShadow.blur": _px("Shadow Blur", 0, 20),
    "textShadow.color": _color("Shadow Color"),
}

PARAGRAPH_FIELDS: dict[str, FieldSpec] = {
    **HEADING_FIELDS,
    "fontSize": _px("Font Size", 10, 32),
    "lineHeight": FieldSpec(
        kind=FieldKind.NUMBER, label="Line Height", unit="", minimum=1, maximum=3, step=0.05
    ),
    "letterSpacing": _px("Letter Spacing", -2, 5, step=0.1),
}

BUTTON_FIELDS: dict[str, FieldSpec] = {
    "paddingTop": _px("Padding Top", 0, 50),
    "paddingBottom": _px("Padding Bottom", 0, 50),
    "paddingLeft": _px("Padding Left", 0, 100),
    "paddingRight": _px("Padding Right", 0, 100),
    "minWidth": _px("Min Width", 50, 400),
    "minHeight": _px("Height", 24, 120),
    "height": _px("Height", 24, 120),
    "fontFamily": _FONT_FAMILY,
    "fontWeight": _FONT_WEIGHT,
    "fontSize": FieldSpec(kind=FieldKind.TEXT, label="Font Size", allow_unit_change=True),
    "borderWidth": _px("Border Width", 0, 10),
    "borderRadius": _px("Border Radius", 0, 200),
    "background": _color("Background"),
    "textColor": _color("Text Color"),
    "borderColor": _color("Border Color"),
}

COLOR_FIELDS: dict[str, FieldSpec] = {
    "name": FieldSpec(kind=FieldKind.TEXT, label="Color Name"),
    "value": _color("Color Value"),
}

FIELD_SPECS: dict[str, dict[str, FieldSpec]] = {
    "heading": HEADING_FIELDS,
    "paragraph": PARAGRAPH_FIELDS,
    "button": BUTTON_FIELDS,
    "color": COLOR_FIELDS,
}


def field_spec(section: str, field: str) -> FieldSpec | None:
    """Look up a field declaration, e.g. ``field_spec("heading", "fontSize")``."""
    return FIELD_SPECS.get(section, {}).get(field)


def field_spec_for_path(path: str | Sequence[str | int]) -> FieldSpec | None:
    """
    Resolve a full token path to its field declaration.

    ``typography.headings.h1.textShadow.blur`` -> heading ``textShadow.blur``
    ``buttons.primary.hover.fontSize``          -> button ``fontSize``
    ``colors.3.value``                          -> color ``value``
    """
    parts = [str(p) for p in split_path(path)]
    if len(parts) > 3 and parts[0] == "typography":
        section = {"headings": "heading", "paragraph": "paragraph"}.get(parts[1])
        if section:
            return field_spec(section, ".".join(parts[3:]))
    elif len(parts) > 3 and parts[0] == "buttons":
        return field_spec("button", ".".join(parts[3:]))
    elif len(parts) == 3 and parts[0] == "colors":
        return field_spec("color", parts[2])
    return None
