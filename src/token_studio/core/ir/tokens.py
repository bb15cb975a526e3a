"""
Design token IR types.

Defines the canonical shape of a token tree: an ordered color palette,
heading and paragraph typography, and button states. Attribute names are
snake_case; the persisted document uses the camelCase aliases, so a tree
dumped with ``by_alias=True`` can be stored and read back unchanged.

Every model is frozen. Edits produce new trees (see ``store.facade``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HeadingLevel = Literal["h1", "h2", "h3", "h4", "h5", "h6"]
ParagraphVariant = Literal["large", "small"]
ButtonKind = Literal["primary", "secondary"]
ButtonState = Literal["default", "hover"]

HEADING_LEVELS: tuple[HeadingLevel, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")
PARAGRAPH_VARIANTS: tuple[ParagraphVariant, ...] = ("large", "small")
BUTTON_KINDS: tuple[ButtonKind, ...] = ("primary", "secondary")
BUTTON_STATES: tuple[ButtonState, ...] = ("default", "hover")

Number = int | float

_TOKEN_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
_UPDATE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class _TokenModel(BaseModel):
    model_config = _TOKEN_CONFIG

    def to_document(self) -> dict[str, Any]:
        """Dump to the persisted (camelCase, JSON-safe) document shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_tree(self) -> dict[str, Any]:
        """Like ``to_document`` but keeps unset optional fields as ``None``."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Colors
# =============================================================================


class ColorToken(_TokenModel):
    """A named palette entry, emitted as ``--color-{name}``."""

    name: str = Field(description="Slug-like name (lowercase, hyphenated)")
    value: str = Field(description="CSS color literal")


# =============================================================================
# Typography
# =============================================================================


class TextShadow(_TokenModel):
    """Single text shadow, emitted in ``x y blur color`` order."""

    x: Number = 0
    y: Number = 0
    blur: Number = 0
    color: str = "#000000"


class TypographyToken(_TokenModel):
    """
    Text style for one heading level or paragraph variant.

    Example:
        TypographyToken(
            font_family="Inter",
            font_weight=600,
            font_size=70,
            line_height=1.0,
            letter_spacing=-1.75,
            text_shadow=TextShadow(x=0, y=1, blur=1, color="#000000"),
        )
    """

    font_family: str = Field(description="Font family name, unquoted")
    font_weight: int = Field(description="Numeric weight, typically 100-900")
    font_size: Number = Field(description="Font size in pixels")
    line_height: Number = Field(description="Unitless line-height multiplier")
    letter_spacing: Number = Field(description="Letter spacing in pixels, may be negative")
    text_shadow: TextShadow = Field(default_factory=TextShadow)


class HeadingTokens(_TokenModel):
    h1: TypographyToken
    h2: TypographyToken
    h3: TypographyToken
    h4: TypographyToken
    h5: TypographyToken
    h6: TypographyToken


class ParagraphTokens(_TokenModel):
    large: TypographyToken
    small: TypographyToken


class TypographyTokens(_TokenModel):
    headings: HeadingTokens
    paragraph: ParagraphTokens


# =============================================================================
# Buttons
# =============================================================================


class ButtonStateToken(_TokenModel):
    """Box model, typography, and color for one button state."""

    padding_top: Number
    padding_bottom: Number
    padding_left: Number
    padding_right: Number
    min_width: Number
    min_height: Number
    height: Number | None = Field(default=None, description="Overrides min_height when set")
    font_family: str
    font_weight: int
    font_size: str = Field(description="Pre-unitized CSS length, e.g. '0.9vw'")
    background: str
    text_color: str
    border_width: Number
    border_color: str
    border_radius: Number
    border_enabled: bool | None = Field(
        default=None, description="Only an explicit False disables the border"
    )

    @property
    def effective_height(self) -> Number:
        """Height used for layout: ``height`` if set, else ``min_height``."""
        return self.height if self.height is not None else self.min_height

    @property
    def border_is_enabled(self) -> bool:
        return self.border_enabled is not False


class ButtonToken(_TokenModel):
    default: ButtonStateToken
    hover: ButtonStateToken


class ButtonTokens(_TokenModel):
    primary: ButtonToken
    secondary: ButtonToken


# =============================================================================
# Root
# =============================================================================


class DesignTokens(_TokenModel):
    """Root of the token tree."""

    colors: tuple[ColorToken, ...] = Field(description="Palette in display order")
    typography: TypographyTokens
    buttons: ButtonTokens

    def heading(self, level: HeadingLevel) -> TypographyToken:
        token: TypographyToken = getattr(self.typography.headings, level)
        return token

    def paragraph(self, variant: ParagraphVariant) -> TypographyToken:
        token: TypographyToken = getattr(self.typography.paragraph, variant)
        return token

    def button(self, kind: ButtonKind) -> ButtonToken:
        token: ButtonToken = getattr(self.buttons, kind)
        return token

    def color(self, name: str) -> ColorToken | None:
        """First color with ``name``, or None."""
        for color in self.colors:
            if color.name == name:
                return color
        return None


class SavedConfig(_TokenModel):
    """A named, timestamped snapshot of a full token tree."""

    id: str
    name: str
    tokens: DesignTokens
    created_at: int = Field(description="Epoch milliseconds")
    updated_at: int = Field(description="Epoch milliseconds")


# =============================================================================
# Partial updates
# =============================================================================


class _TokenUpdate(BaseModel):
    """Base for partial updates. Only explicitly set fields apply; unknown keys are rejected."""

    model_config = _UPDATE_CONFIG

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


class TextShadowUpdate(_TokenUpdate):
    x: Number | None = None
    y: Number | None = None
    blur: Number | None = None
    color: str | None = None


class TypographyTokenUpdate(_TokenUpdate):
    font_family: str | None = None
    font_weight: int | None = None
    font_size: Number | None = None
    line_height: Number | None = None
    letter_spacing: Number | None = None
    text_shadow: TextShadowUpdate | None = None


class ButtonStateUpdate(_TokenUpdate):
    padding_top: Number | None = None
    padding_bottom: Number | None = None
    padding_left: Number | None = None
    padding_right: Number | None = None
    min_width: Number | None = None
    min_height: Number | None = None
    height: Number | None = None
    font_family: str | None = None
    font_weight: int | None = None
    font_size: str | None = None
    background: str | None = None
    text_color: str | None = None
    border_width: Number | None = None
    border_color: str | None = None
    border_radius: Number | None = None
    border_enabled: bool | None = None
