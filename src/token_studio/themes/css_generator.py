"""
CSS generator for design tokens.

Generates stylesheet text from a token tree: color custom properties,
typography rules, and button rules with a ``:hover`` variant. Output is
used for live previews and as the export format, so every function is
pure and deterministic (fixed property order, no timestamps).
"""

from __future__ import annotations

from token_studio.core.ir.tokens import (
    BUTTON_KINDS,
    HEADING_LEVELS,
    PARAGRAPH_VARIANTS,
    ButtonStateToken,
    ButtonToken,
    DesignTokens,
    TypographyToken,
)
from token_studio.core.units import format_number

STYLESHEET_HEADER = "/* Design Tokens */\n/* Auto-generated - do not edit */"


def _px(value: int | float) -> str:
    return f"{format_number(value)}px"


def _font_family(family: str) -> str:
    return f'"{family}", sans-serif'


def _rule(selector: str, declarations: list[str]) -> str:
    lines = [f"{selector} {{"]
    lines.extend(f"  {declaration}" for declaration in declarations)
    lines.append("}")
    return "\n".join(lines)


def color_variables(tokens: DesignTokens) -> str:
    """
    Generate a ``:root`` block with one ``--color-*`` property per color.

    Args:
        tokens: Token tree; colors are emitted in palette order

    Returns:
        CSS string
    """
    return _rule(":root", [f"--color-{color.name}: {color.value};" for color in tokens.colors])


def typography_rule(token: TypographyToken, selector: str) -> str:
    """
    Generate a rule applying a typography token to ``selector``.

    Args:
        token: Heading or paragraph token
        selector: CSS selector, e.g. ``.heading-h1``

    Returns:
        CSS string
    """
    shadow = token.text_shadow
    return _rule(
        selector,
        [
            f"font-family: {_font_family(token.font_family)};",
            f"font-weight: {token.font_weight};",
            f"font-size: {_px(token.font_size)};",
            f"line-height: {format_number(token.line_height)};",
            f"letter-spacing: {_px(token.letter_spacing)};",
            f"text-shadow: {_px(shadow.x)} {_px(shadow.y)} {_px(shadow.blur)} {shadow.color};",
        ],
    )


def button_rule(token: ButtonToken, class_name: str) -> str:
    """
    Generate wrapper, base and ``:hover`` rules for a button.

    The hover rule only carries padding, min-width, background, color and
    border. Height, min-height and border-radius are not re-emitted there.

    Args:
        token: Button with default and hover states
        class_name: Class without the leading dot, e.g. ``btn-primary``

    Returns:
        CSS string with three blocks separated by blank lines
    """
    class_name = class_name.lstrip(".")
    d = token.default
    h = token.hover

    wrapper = _rule(
        f".{class_name}-wrapper",
        [
            f"height: {_px(d.effective_height)};",
            "display: flex;",
            "align-items: center;",
        ],
    )
    base = _rule(
        f".{class_name}",
        [
            f"padding: {_padding(d)};",
            f"min-width: {_px(d.min_width)};",
            f"min-height: {_px(d.min_height)};",
            f"font-family: {_font_family(d.font_family)};",
            f"font-weight: {d.font_weight};",
            f"font-size: {d.font_size};",
            f"background: {d.background};",
            f"color: {d.text_color};",
            f"border: {_border(d)};",
            f"border-radius: {_px(d.border_radius)};",
            "cursor: pointer;",
            "transition: all 0.25s ease-out;",
        ],
    )
    hover = _rule(
        f".{class_name}:hover",
        [
            f"padding: {_padding(h)};",
            f"min-width: {_px(h.min_width)};",
            f"background: {h.background};",
            f"color: {h.text_color};",
            f"border: {_border(h)};",
        ],
    )
    return "\n\n".join([wrapper, base, hover])


def _padding(state: ButtonStateToken) -> str:
    sides = (state.padding_top, state.padding_right, state.padding_bottom, state.padding_left)
    return " ".join(_px(side) for side in sides)


def _border(state: ButtonStateToken) -> str:
    width = state.border_width if state.border_is_enabled else 0
    return f"{_px(width)} solid {state.border_color}"


def _typography_rules(tokens: DesignTokens) -> list[str]:
    rules = [
        typography_rule(tokens.heading(level), f".heading-{level}") for level in HEADING_LEVELS
    ]
    rules.extend(
        typography_rule(tokens.paragraph(variant), f".paragraph-{variant}")
        for variant in PARAGRAPH_VARIANTS
    )
    return rules


def _button_rules(tokens: DesignTokens) -> list[str]:
    return [button_rule(tokens.button(kind), f"btn-{kind}") for kind in BUTTON_KINDS]


def generate_stylesheet(tokens: DesignTokens) -> str:
    """
    Generate the full stylesheet for a token tree.

    Blocks, in order: color variables, ``.heading-h1`` .. ``.heading-h6``,
    ``.paragraph-large``, ``.paragraph-small``, ``.btn-primary``,
    ``.btn-secondary``.
    """
    blocks = [STYLESHEET_HEADER, color_variables(tokens)]
    blocks.extend(_typography_rules(tokens))
    blocks.extend(_button_rules(tokens))
    return "\n\n".join(blocks) + "\n"


def generate_section(tokens: DesignTokens, section: str) -> str:
    """Generate one section: ``colors``, ``typography``, ``buttons`` or ``all``."""
    if section == "all":
        return generate_stylesheet(tokens)
    if section == "colors":
        return color_variables(tokens) + "\n"
    if section == "typography":
        return "\n\n".join(_typography_rules(tokens)) + "\n"
    if section == "buttons":
        return "\n\n".join(_button_rules(tokens)) + "\n"
    raise ValueError(f"Unknown section {section!r}; expected colors, typography, buttons or all")
