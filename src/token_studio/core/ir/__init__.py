"""Token tree IR types."""

from .tokens import (
    BUTTON_KINDS,
    BUTTON_STATES,
    HEADING_LEVELS,
    PARAGRAPH_VARIANTS,
    ButtonKind,
    ButtonState,
    ButtonStateToken,
    ButtonStateUpdate,
    ButtonToken,
    ButtonTokens,
    ColorToken,
    DesignTokens,
    HeadingLevel,
    HeadingTokens,
    ParagraphTokens,
    ParagraphVariant,
    SavedConfig,
    TextShadow,
    TextShadowUpdate,
    TypographyToken,
    TypographyTokens,
    TypographyTokenUpdate,
)

__all__ = [
    "BUTTON_KINDS",
    "BUTTON_STATES",
    "HEADING_LEVELS",
    "PARAGRAPH_VARIANTS",
    "ButtonKind",
    "ButtonState",
    "ButtonStateToken",
    "ButtonStateUpdate",
    "ButtonToken",
    "ButtonTokens",
    "ColorToken",
    "DesignTokens",
    "HeadingLevel",
    "HeadingTokens",
    "ParagraphTokens",
    "ParagraphVariant",
    "SavedConfig",
    "TextShadow",
    "TextShadowUpdate",
    "TypographyToken",
    "TypographyTokens",
    "TypographyTokenUpdate",
]
