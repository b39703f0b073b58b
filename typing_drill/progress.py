from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional


# ---------------------------
# Typing math
# ---------------------------

def words_per_minute(words: int, elapsed_sec: float) -> int:
    # Below one second the rate is meaningless, and zero would divide by zero.
    if elapsed_sec < 1.0:
        return 0
    return int(words * 60 // elapsed_sec)


def format_elapsed(elapsed_sec: float) -> str:
    total = int(max(0.0, elapsed_sec))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def status_line(words: int, elapsed_sec: float) -> str:
    return f"{words_per_minute(words, elapsed_sec)} word/min, {format_elapsed(elapsed_sec)}"


# ---------------------------
# Session state
# ---------------------------

@dataclass
class TypingSession:
    """Progress through one practice text. `started_at` is set by the first keystroke."""

    text: str
    index: int = 0
    word_count: int = 0
    started_at: Optional[float] = None
    clock: Callable[[], float] = time.time

    @property
    def finished(self) -> bool:
        return self.index == len(self.text)

    def start(self) -> bool:
        """Start the clock if it isn't running. True when this call started it."""
        if self.started_at is not None:
            return False
        self.started_at = self.clock()
        return True

    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        return max(0.0, self.clock() - self.started_at)

    def type_char(self, ch: str) -> bool:
        """Consume one character; returns whether it matched the text."""
        matched = self.text[self.index] == ch
        self.index += 1
        if ch.isspace():
            self.word_count += 1
        return matched

    def back(self) -> None:
        self.index = max(0, self.index - 1)

    def complete(self) -> None:
        # the last word has no trailing space to count it
        if self.text and not self.text[-1].isspace():
            self.word_count += 1

    def status(self) -> str:
        return status_line(self.word_count, self.elapsed())
