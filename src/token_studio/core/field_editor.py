"""
Editing session for a single token field.

A ``FieldEditor`` reconciles free-text keystrokes with the structured value
stored in the token tree. It is a two-state machine:

    IDLE --focus()--> EDITING --blur()--> IDLE

While editing, the draft text is shown as typed. Unit-aware fields push
``"{number}{unit}"`` to the tree on every keystroke that contains a valid
number; anything else only updates the draft. Keyboard stepping is
available in both states.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from .units import (
    clamp,
    coerce_number,
    format_number,
    format_value,
    parse_number,
    parse_value_and_unit,
    step_delta,
)

logger = logging.getLogger(__name__)

FieldValue = str | int | float


class FieldKind(StrEnum):
    """How a field's text maps to its stored value."""

    TEXT = "text"
    NUMBER = "number"
    COLOR = "color"


class EditorState(StrEnum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass(frozen=True)
class FieldSpec:
    """
    Declared behaviour of an editable field.

    Example:
        FieldSpec(kind=FieldKind.NUMBER, unit="px", minimum=12, maximum=120)
        FieldSpec(kind=FieldKind.TEXT, allow_unit_change=True)  # "0.9vw"
    """

    kind: FieldKind = FieldKind.TEXT
    label: str = ""
    unit: str = "px"
    minimum: float | None = None
    maximum: float | None = None
    step: float = 1
    allow_unit_change: bool = False
    normalize: Callable[[str], str] | None = None

    @property
    def steppable(self) -> bool:
        return self.allow_unit_change or self.kind is FieldKind.NUMBER


class FieldEditor:
    """
    Editing state for one field instance.

    Args:
        spec: Field declaration
        value: Committed value from the token tree
        on_change: Receives every propagated value
    """

    def __init__(
        self,
        spec: FieldSpec,
        value: FieldValue,
        on_change: Callable[[FieldValue], None] | None = None,
    ) -> None:
        self.spec = spec
        self.state = EditorState.IDLE
        self._value = value
        self._draft: str | None = None
        self._unit = spec.unit
        self._on_change = on_change
        self._sync_unit()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def value(self) -> FieldValue:
        """Last committed (propagated or received) value."""
        return self._value

    @property
    def active_unit(self) -> str:
        return self._unit

    @property
    def display(self) -> str:
        """Text shown in the input."""
        if self.state is EditorState.EDITING and self._draft is not None:
            return self._draft
        return self._idle_text()

    @property
    def full_value(self) -> str:
        """Display text with the active unit, as shown in the live tooltip."""
        if self.spec.allow_unit_change:
            return f"{self.display}{self._unit}"
        return str(self._value)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def focus(self) -> None:
        if self.state is EditorState.EDITING:
            return
        self.state = EditorState.EDITING
        self._draft = self._idle_text()

    def input(self, text: str) -> FieldValue | None:
        """
        Handle a keystroke that left ``text`` in the input.

        Returns:
            The propagated value, or None when the text was only drafted
        """
        if self.state is EditorState.IDLE:
            self.focus()
        self._draft = text

        if self.spec.kind is FieldKind.COLOR:
            return self._propagate(text)

        if self.spec.allow_unit_change:
            parsed = parse_value_and_unit(text, self._unit)
            if parsed is None:
                logger.debug("Ignoring unparsable draft %r", text)
                return None
            self._unit = parsed.unit
            return self._propagate(format_value(parsed.number, parsed.unit))

        if self.spec.kind is FieldKind.NUMBER:
            number = parse_number(text)
            if number is None:
                logger.debug("Ignoring non-numeric draft %r", text)
                return None
            return self._propagate(coerce_number(number))

        if self.spec.normalize is not None:
            return self._propagate(self.spec.normalize(text))
        return self._propagate(text)

    def blur(self) -> FieldValue | None:
        """Leave editing; unit-aware fields commit their canonical value."""
        if self.state is EditorState.IDLE:
            return None
        draft = self._draft
        self.state = EditorState.IDLE
        self._draft = None

        if not self.spec.allow_unit_change or draft is None:
            return None
        parsed = parse_value_and_unit(draft, self._unit)
        if parsed is None:
            return None
        self._unit = parsed.unit
        return self._propagate(format_value(parsed.number, parsed.unit))

    def step(
        self,
        direction: int,
        *,
        fine: bool = False,
        coarse: bool = False,
    ) -> FieldValue | None:
        """
        Increment (``direction > 0``) or decrement the value.

        The result is clamped to the declared bounds. Returns the propagated
        value, or None when the field cannot be stepped.
        """
        if not self.spec.steppable:
            return None
        delta = step_delta(self.spec.step, direction, fine=fine, coarse=coarse)
        if delta == 0:
            return None

        current = self.display
        if self.spec.allow_unit_change:
            parsed = parse_value_and_unit(current, self._unit)
            if parsed is None:
                return None
            bounded = clamp(parsed.number + delta, self.spec.minimum, self.spec.maximum)
            self._unit = parsed.unit
            self._redraft(bounded)
            return self._propagate(format_value(bounded, parsed.unit))

        number = parse_number(current)
        if number is None:
            return None
        bounded = clamp(number + delta, self.spec.minimum, self.spec.maximum)
        self._redraft(bounded)
        return self._propagate(coerce_number(bounded))

    def receive(self, value: FieldValue) -> None:
        """Sync the committed value from the tree (e.g. after a reload)."""
        self._value = value
        if self.state is EditorState.IDLE:
            self._sync_unit()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _idle_text(self) -> str:
        if self.spec.allow_unit_change and isinstance(self._value, str):
            parsed = parse_value_and_unit(self._value, self._unit)
            return format_number(parsed.number) if parsed else self._value
        if isinstance(self._value, int | float) and not isinstance(self._value, bool):
            return format_number(self._value)
        return str(self._value)

    def _sync_unit(self) -> None:
        if self.spec.allow_unit_change and isinstance(self._value, str):
            parsed = parse_value_and_unit(self._value, self.spec.unit)
            if parsed is not None:
                self._unit = parsed.unit

    def _redraft(self, number: float) -> None:
        if self.state is EditorState.EDITING:
            self._draft = format_number(number)

    def _propagate(self, value: FieldValue) -> FieldValue:
        self._value = value
        if self._on_change is not None:
            self._on_change(value)
        return value
