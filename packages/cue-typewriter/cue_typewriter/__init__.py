"""cue-typewriter - Typing effect for text sinks."""
from __future__ import annotations

from cue_typewriter.session import Sleep, TypingSession, type_text

__all__ = ["TypingSession", "type_text", "Sleep"]
