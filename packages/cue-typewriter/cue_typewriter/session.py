"""Character-by-character reveal of a string into a text sink."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class TypingSession:
    """One typing call: reveal ``text`` into ``sink.text``.

    Callers must not run two sessions against the same sink at once; the
    sink is shared and nothing here serialises access to it.
    """

    sink: Any
    text: str
    char_delay_ms: float = 60.0

    async def run(self, sleep: Sleep) -> None:
        self.sink.text = ""
        for ch in self.text:
            self.sink.text += ch
            await sleep(self.char_delay_ms)


async def type_text(sink: Any, text: str, char_delay_ms: float, sleep: Sleep) -> None:
    """Clear ``sink`` and type ``text`` into it, waiting after each character."""
    await TypingSession(sink, text, char_delay_ms).run(sleep)
