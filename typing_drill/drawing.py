from __future__ import annotations

from rich.style import Style

from .layout import clusters, display_width, wrap_words
from .surface import CellBuffer

HLINE = "─"


# ---------------------------
# Screen regions
# ---------------------------

def input_row(screen: CellBuffer) -> int:
    _, h = screen.dimensions()
    return h // 2 + 1


def status_row(screen: CellBuffer) -> int:
    _, h = screen.dimensions()
    return h - 1


# ---------------------------
# Primitives
# ---------------------------

def puts(screen: CellBuffer, style: Style, x: int, y: int, text: str) -> int:
    """Write `text` starting at (x, y); returns the number of columns used."""
    i = 0
    for cluster in clusters(text):
        screen.set_content(x + i, y, cluster.main, cluster.combining, style)
        i += cluster.width
    return i


def putexp(
    screen: CellBuffer,
    style: Style,
    bad_style: Style,
    x: int,
    y: int,
    ch: str,
    expected: bool,
) -> None:
    puts(screen, style if expected else style + bad_style, x, y, ch)


def clear_rows(screen: CellBuffer, style: Style, top: int, bottom: int) -> None:
    """Blank rows top..bottom-1."""
    w, _ = screen.dimensions()
    blank = " " * w
    for y in range(top, bottom):
        puts(screen, style, 0, y, blank)


def clear_display(screen: CellBuffer, style: Style) -> None:
    _, h = screen.dimensions()
    clear_rows(screen, style, 0, h // 2)


def clear_input(screen: CellBuffer, style: Style) -> None:
    _, h = screen.dimensions()
    clear_rows(screen, style, h // 2 + 1, h - 2)


def clear_status(screen: CellBuffer, style: Style) -> None:
    row = status_row(screen)
    clear_rows(screen, style, row, row + 1)


def draw_rule(screen: CellBuffer, style: Style, y: int, width: int) -> None:
    puts(screen, style, 0, y, HLINE * width)


def draw_lines(screen: CellBuffer, style: Style) -> None:
    w, h = screen.dimensions()
    draw_rule(screen, style, h // 2, w)
    draw_rule(screen, style, h - 2, w)


def draw_status(screen: CellBuffer, style: Style, line: str) -> None:
    clear_status(screen, style)
    puts(screen, style, 0, status_row(screen), line)


def center_text(screen: CellBuffer, style: Style, y: int, text: str) -> None:
    w, _ = screen.dimensions()
    for row, line in enumerate(text.splitlines(), start=y):
        x = w // 2 - display_width(line) // 2
        puts(screen, style, x, row, line)


def fill_text(screen: CellBuffer, style: Style, x: int, y: int, text: str) -> None:
    w, _ = screen.dimensions()
    for placement in wrap_words(text, w, x, y):
        puts(screen, style, placement.x, placement.y, placement.word)
