"""
Canonical design tokens.

The built-in default tree. Every leaf missing from a persisted document
falls back to the value defined here, which keeps old documents loadable
after the schema gains fields.
"""

from __future__ import annotations

import copy
from typing import Any

from .ir.tokens import (
    ButtonStateToken,
    ButtonToken,
    ButtonTokens,
    ColorToken,
    DesignTokens,
    HeadingTokens,
    ParagraphTokens,
    TextShadow,
    TypographyToken,
    TypographyTokens,
)


def _text(
    font_size: int,
    line_height: float,
    letter_spacing: float,
    shadow: TextShadow,
    font_weight: int = 600,
) -> TypographyToken:
    return TypographyToken(
        font_family="Inter",
        font_weight=font_weight,
        font_size=font_size,
        line_height=line_height,
        letter_spacing=letter_spacing,
        text_shadow=shadow,
    )


# =============================================================================
# Buttons
# =============================================================================

_BUTTON_DEFAULT_BOX: dict[str, Any] = {
    "padding_top": 10,
    "padding_bottom": 10,
    "padding_left": 20,
    "padding_right": 20,
    "min_width": 300,
    "min_height": 48,
    "font_family": "Inter",
    "font_weight": 600,
    "font_size": "0.9vw",
    "border_width": 1,
    "border_radius": 100,
    "border_enabled": True,
}

_BUTTON_HOVER_BOX: dict[str, Any] = {
    "padding_top": 5,
    "padding_bottom": 5,
    "padding_left": 35,
    "padding_right": 35,
    "min_width": 280,
    "min_height": 45,
    "font_family": "Inter",
    "font_weight": 600,
    "font_size": "0.8vw",
    "border_width": 1,
    "border_radius": 100,
    "border_enabled": True,
}

# Red-on-white and white-on-red, swapped between states
_RED_FILL = {"background": "#fb2545", "text_color": "#ffffff", "border_color": "#ffffff"}
_WHITE_FILL = {"background": "#ffffff", "text_color": "#fb2545", "border_color": "#fb2545"}


# =============================================================================
# Canonical tree
# =============================================================================

CANONICAL_TOKENS = DesignTokens(
    colors=(
        ColorToken(name="musio-red", value="#fb2545"),
        ColorToken(name="musio-slate", value="#1a1925"),
        ColorToken(name="musio-gray", value="#262532"),
        ColorToken(name="musio-black", value="#000000"),
        ColorToken(name="musio-white", value="#eeeeee"),
        ColorToken(name="cinesamples-blue", value="#1e94fc"),
        ColorToken(name="musio-accent-mint", value="#26FBB8"),
    ),
    typography=TypographyTokens(
        headings=HeadingTokens(
            h1=_text(70, 1.0, -1.75, TextShadow(x=0, y=1, blur=1, color="#000000")),
            h2=_text(60, 1.0, -1.75, TextShadow(x=0, y=1, blur=1, color="#000000")),
            h3=_text(50, 1.0, -1.75, TextShadow(x=0, y=1, blur=1, color="rgba(0, 0, 0, 0.985)")),
            h4=_text(40, 1.2, -0.5, TextShadow(x=0, y=1, blur=1, color="rgba(0, 0, 0, 0.96)")),
            h5=_text(30, 1.2, -0.5, TextShadow(x=0, y=1, blur=1, color="rgba(0, 0, 0, 0.97)")),
            h6=_text(20, 1.4, 0, TextShadow(x=0, y=1, blur=0, color="rgba(0, 0, 0, 0.92)")),
        ),
        paragraph=ParagraphTokens(
            large=_text(18, 1.25, 0, TextShadow(x=0, y=1, blur=0, color="rgba(0, 0, 0, 0.92)")),
            small=_text(
                14,
                1.5,
                0,
                TextShadow(x=0, y=1, blur=0, color="rgba(0, 0, 0, 0.82)"),
                font_weight=500,
            ),
        ),
    ),
    buttons=ButtonTokens(
        primary=ButtonToken(
            default=ButtonStateToken(**_BUTTON_DEFAULT_BOX, **_RED_FILL),
            hover=ButtonStateToken(**_BUTTON_HOVER_BOX, **_WHITE_FILL),
        ),
        secondary=ButtonToken(
            default=ButtonStateToken(**_BUTTON_DEFAULT_BOX, **_WHITE_FILL),
            hover=ButtonStateToken(**_BUTTON_HOVER_BOX, **_RED_FILL),
        ),
    ),
)

_CANONICAL_DOCUMENT = CANONICAL_TOKENS.to_document()


def canonical_tokens() -> DesignTokens:
    """Return the canonical tree. Frozen, so safe to share."""
    return CANONICAL_TOKENS


def canonical_document() -> dict[str, Any]:
    """Return a fresh camelCase document copy of the canonical tree."""
    return copy.deepcopy(_CANONICAL_DOCUMENT)
