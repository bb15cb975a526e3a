"""
Numeric values with CSS units.

Parses text such as ``"12px"``, ``"-0.5 rem"`` or ``"0.9vw"`` into a
``(number, unit)`` pair and formats numbers back to canonical text.

Grammar accepted by the scanner::

    value  := ws? "-"? number (ws? unit)? ws?
    number := digits ("." digits?)? | "." digits
    unit   := (letter | "%")+

A recognized unit is adopted; any other suffix falls back to the caller's
default unit. Text that does not match is a parse failure and yields
``None``; callers drop such input instead of raising.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple

CSS_UNITS: tuple[str, ...] = ("px", "rem", "em", "vw", "vh", "%", "pt", "ch")

# Stepped values are rounded to this many decimals before formatting
_PRECISION = 10


class ParsedValue(NamedTuple):
    """Result of scanning a unit-bearing value."""

    number: float
    unit: str
    text: str  # the numeric part as typed, e.g. "12." or "-0.5"


class _State(Enum):
    START = auto()
    SIGN = auto()
    INT = auto()
    DOT = auto()  # seen "." with no digits before it
    FRAC = auto()
    NUM_END = auto()  # whitespace after the number
    UNIT = auto()
    TRAILING = auto()  # whitespace after the unit


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_recognized_unit(unit: str | None) -> bool:
    return unit is not None and unit.lower() in CSS_UNITS


def scan(text: str) -> tuple[str, str] | None:
    """
    Split text into its numeric part and raw unit suffix.

    Returns:
        ``(numeric_text, unit_text)`` where ``unit_text`` may be empty, or
        None when the text is not a number optionally followed by a unit
    """
    state = _State.START
    number_chars: list[str] = []
    unit_chars: list[str] = []
    has_digits = False

    for ch in text:
        if state is _State.START:
            if ch.isspace():
                continue
            if ch == "-":
                state = _State.SIGN
            elif _is_digit(ch):
                state = _State.INT
                has_digits = True
            elif ch == ".":
                state = _State.DOT
            else:
                return None
            number_chars.append(ch)
        elif state in (_State.SIGN, _State.INT, _State.DOT, _State.FRAC):
            if _is_digit(ch):
                number_chars.append(ch)
                has_digits = True
                if state is _State.SIGN:
                    state = _State.INT
                elif state is _State.DOT:
                    state = _State.FRAC
            elif ch == "." and state in (_State.SIGN, _State.INT):
                number_chars.append(ch)
                state = _State.FRAC if state is _State.INT else _State.DOT
            elif not has_digits:
                return None
            elif ch.isspace():
                state = _State.NUM_END
            elif ch.isalpha() or ch == "%":
                unit_chars.append(ch)
                state = _State.UNIT
            else:
                return None
        elif state is _State.NUM_END:
            if ch.isspace():
                continue
            if ch.isalpha() or ch == "%":
                unit_chars.append(ch)
                state = _State.UNIT
            else:
                return None
        elif state is _State.UNIT:
            if ch.isalpha() or ch == "%":
                unit_chars.append(ch)
            elif ch.isspace():
                state = _State.TRAILING
            else:
                return None
        elif state is _State.TRAILING:
            if not ch.isspace():
                return None

    if not has_digits:
        return None
    return "".join(number_chars), "".join(unit_chars)


def parse_value_and_unit(value: str | int | float, default_unit: str = "px") -> ParsedValue | None:
    """
    Parse a value into number and unit.

    Numbers (not strings) are taken to be in ``default_unit`` already and
    are never scanned.

    Args:
        value: Raw field text or a number
        default_unit: Unit used when the text has no recognized unit

    Returns:
        ParsedValue, or None if no number could be extracted
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return ParsedValue(float(value), default_unit, format_number(value))

    scanned = scan(value)
    if scanned is None:
        return None
    numeric_text, unit_text = scanned
    unit = unit_text.lower()
    return ParsedValue(
        number=float(numeric_text),
        unit=unit if unit in CSS_UNITS else default_unit,
        text=numeric_text,
    )


def parse_number(text: str | int | float) -> float | None:
    """Parse a plain number, ignoring any unit suffix."""
    parsed = parse_value_and_unit(text)
    return parsed.number if parsed is not None else None


# =============================================================================
# Formatting
# =============================================================================


def format_number(value: int | float) -> str:
    """
    Canonical text for a number.

    ``12.0 -> "12"``, ``-1.75 -> "-1.75"``, ``0.7999999999999999 -> "0.8"``.
    """
    rounded = round(float(value), _PRECISION)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def format_value(number: int | float, unit: str) -> str:
    return f"{format_number(number)}{unit}"


def coerce_number(value: int | float) -> int | float:
    """Collapse integral floats to int so ``64.0`` is stored as ``64``."""
    rounded = round(float(value), _PRECISION)
    if rounded.is_integer():
        return int(rounded)
    return rounded


# =============================================================================
# Stepping
# =============================================================================

FINE_MULTIPLIER = 0.1
COARSE_MULTIPLIER = 10


def step_delta(
    base_step: float,
    direction: int,
    *,
    fine: bool = False,
    coarse: bool = False,
) -> float:
    """Signed step size; the fine and coarse modifiers compose."""
    if direction == 0:
        return 0.0
    multiplier = 1.0
    if fine:
        multiplier *= FINE_MULTIPLIER
    if coarse:
        multiplier *= COARSE_MULTIPLIER
    return base_step * multiplier * (1 if direction > 0 else -1)


def clamp(value: float, minimum: float | None = None, maximum: float | None = None) -> float:
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value
