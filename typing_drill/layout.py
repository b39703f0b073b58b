"""
Text measurement and word placement on a character grid.

Cell widths come from wcwidth. Zero-width joiner sequences and combining
marks are folded into the preceding cell so a family emoji or an accented
letter written as base + mark still occupies a single grid position.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from wcwidth import wcwidth

ZWJ = "\u200d"


@dataclass(frozen=True)
class Cluster:
    text: str
    width: int

    @property
    def main(self) -> str:
        return self.text[0]

    @property
    def combining(self) -> Tuple[str, ...]:
        return tuple(self.text[1:])


@dataclass(frozen=True)
class Placement:
    x: int
    y: int
    word: str


def char_width(ch: str) -> int:
    # control characters report -1
    return max(0, wcwidth(ch))


def clusters(text: str) -> List[Cluster]:
    out: List[Cluster] = []
    pending = ""
    width = 0
    joined = False
    for ch in text:
        if ch == ZWJ:
            if not pending:
                pending, width = " ", 1
            pending += ch
            joined = True
            continue
        if joined:
            pending += ch
            joined = False
            continue
        w = char_width(ch)
        if w == 0:
            if not pending:
                pending, width = " ", 1
            pending += ch
            continue
        if pending:
            out.append(Cluster(pending, width))
        pending, width = ch, w
    if pending:
        out.append(Cluster(pending, width))
    return out


def display_width(text: str) -> int:
    return sum(c.width for c in clusters(text))


def split_words(text: str) -> List[str]:
    """
    Split on single spaces, keeping each space attached to the word before it.
    "cat sat." -> ["cat ", "sat."]
    """
    words: List[str] = []
    start = 0
    for i, ch in enumerate(text):
        if ch == " ":
            words.append(text[start:i + 1])
            start = i + 1
    if start < len(text):
        words.append(text[start:])
    return words


def wrap_words(text: str, width: int, x: int = 0, y: int = 0) -> List[Placement]:
    placements: List[Placement] = []
    lx, ly = x, y
    for word in split_words(text):
        w = display_width(word)
        if lx + w >= width - 1 and lx > x:
            lx = x
            ly += 1
        placements.append(Placement(lx, ly, word))
        lx += w
    return placements


def longest_word(words: Iterable[str]) -> int:
    return max((len(w) for w in words), default=0)
