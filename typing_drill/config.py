from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

from rich.style import Style

from .words import random_text


# ---------------------------
# Key bindings
# ---------------------------

@dataclass(frozen=True)
class KeyMap:
    new_game: str = "ctrl+n"
    stop_game: str = "ctrl+d"
    quit: str = "ctrl+c"
    confirm: str = "enter"
    newline: str = "enter"
    backspace: str = "backspace"


def key_label(key: str) -> str:
    """'ctrl+n' -> 'Ctrl-n'"""
    parts = key.split("+")
    mods = [p.capitalize() for p in parts[:-1]]
    return "-".join(mods + [parts[-1]])


# ---------------------------
# Colours
# ---------------------------

PALETTE: Dict[str, str] = {
    "text": "default",
    "hint": "yellow",
    "bad": "red",
    "rule": "default",
}


@dataclass
class Settings:
    keys: KeyMap = field(default_factory=KeyMap)
    palette: Dict[str, str] = field(default_factory=lambda: PALETTE.copy())
    sentences: int = 5
    words_per_sentence: int = 5
    text_source: Callable[[int, int], str] = random_text

    def style(self, name: str) -> Style:
        color = self.palette.get(name, "default")
        if color == "default":
            return Style()
        return Style(color=color)

    def practice_text(self) -> str:
        return self.text_source(self.sentences, self.words_per_sentence)

    def help_text(self) -> str:
        rows = [
            ("New game", self.keys.new_game),
            ("Stop game", self.keys.stop_game),
            ("Quit", self.keys.quit),
        ]
        return "\n" + "\n".join(f"{name:<12}{key_label(key)}" for name, key in rows)
