"""Font family input normalization."""

from __future__ import annotations

import re

DEFAULT_FONT_FAMILY = "Inter"

_QUOTED = re.compile(r"""^["'](.+)["']$""")


def normalize_font_family(text: str) -> str:
    """
    Normalize a typed font family name.

    Examples:
        "Roboto Mono"   -> "Roboto Mono"
        "'Roboto Mono'" -> "Roboto Mono"
        "Roboto-Mono"   -> "Roboto Mono"
        "roboto_mono"   -> "Roboto Mono"
        "ROBOTO MONO"   -> "Roboto Mono"
        ""              -> "Inter"
    """
    if not text or not text.strip():
        return DEFAULT_FONT_FAMILY

    normalized = _QUOTED.sub(r"\1", text.strip())
    normalized = re.sub(r"[-_]", " ", normalized)
    return " ".join(word[:1].upper() + word[1:].lower() for word in normalized.split(" "))
