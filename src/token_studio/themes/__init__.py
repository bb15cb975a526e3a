"""Stylesheet generation from token trees."""

from .css_generator import (
    button_rule,
    color_variables,
    generate_section,
    generate_stylesheet,
    typography_rule,
)

__all__ = [
    "color_variables",
    "typography_rule",
    "button_rule",
    "generate_stylesheet",
    "generate_section",
]
