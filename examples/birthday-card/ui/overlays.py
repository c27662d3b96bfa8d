"""DOM-like overlay elements the stages write to."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TextLine:
    """One line of the typed text area."""

    text: str = ""


@dataclass
class Panel:
    """Element with visibility and numeric style state.

    ``opacity`` is 0..1; ``scale`` multiplies the element's base size.
    """

    visible: bool = True
    opacity: float = 1.0
    scale: float = 1.0
