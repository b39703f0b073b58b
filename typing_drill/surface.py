"""
The character grid every mode draws into, and the Textual widget that shows it.

`CellBuffer` is cell-addressed: writes land in a dict keyed by (x, y) and only
become visible when `sync()` asks the widget to repaint. Input arrives through
`poll_event()`, which blocks the calling coroutine until the widget (or a
test) pushes a key or resize event.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from rich.segment import Segment
from rich.style import Style
from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from .layout import char_width

CURSOR_STYLE = Style(reverse=True)


@dataclass(frozen=True)
class KeyPress:
    key: str
    character: Optional[str] = None


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[KeyPress, Resize]


class TerminalUnavailable(RuntimeError):
    """The terminal could not be taken over for drawing."""


class CellBuffer:
    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        on_sync: Optional[Callable[[], None]] = None,
    ) -> None:
        self.width = width
        self.height = height
        # (x, y) -> (text, style, columns)
        self.cells: Dict[Tuple[int, int], Tuple[str, Style, int]] = {}
        self.cursor: Optional[Tuple[int, int]] = None
        self.syncs = 0
        self._on_sync = on_sync
        self._events: "asyncio.Queue[Event]" = asyncio.Queue()

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height

    def set_content(
        self,
        x: int,
        y: int,
        main: str,
        combining: Sequence[str],
        style: Style,
    ) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        text = main + "".join(combining)
        self.cells[(x, y)] = (text, style, max(1, char_width(main)))

    def clear_cells(self) -> None:
        self.cells.clear()

    def show_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def hide_cursor(self) -> None:
        self.cursor = None

    def sync(self) -> None:
        self.syncs += 1
        if self._on_sync is not None:
            self._on_sync()

    def push_event(self, event: Event) -> None:
        self._events.put_nowait(event)

    async def poll_event(self) -> Event:
        return await self._events.get()

    def cell(self, x: int, y: int) -> Optional[Tuple[str, Style, int]]:
        return self.cells.get((x, y))

    def row_text(self, y: int) -> str:
        """Plain text of one row, blanks for unwritten cells."""
        out = []
        x = 0
        while x < self.width:
            cell = self.cells.get((x, y))
            if cell is None:
                out.append(" ")
                x += 1
                continue
            text, _, columns = cell
            out.append(text)
            x += columns
        return "".join(out)


# ---------------------------
# Widget
# ---------------------------

class CellCanvas(Widget, can_focus=True):
    """Paints a CellBuffer and feeds it keyboard and resize events."""

    DEFAULT_CSS = """
    CellCanvas {
        width: 100%;
        height: 100%;
    }
    """

    class Ready(Message):
        """Posted once the canvas knows its size."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.buffer = CellBuffer(on_sync=self.refresh)
        self._sized = False

    def on_resize(self, event: events.Resize) -> None:
        self.buffer.resize(event.size.width, event.size.height)
        if not self._sized:
            self._sized = True
            self.post_message(self.Ready())
            return
        self.buffer.push_event(Resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        character = event.character if event.is_printable else None
        self.buffer.push_event(KeyPress(event.key, character))
        event.stop()
        event.prevent_default()

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        if width <= 0:
            return Strip([])
        buffer = self.buffer
        segments = []
        x = 0
        while x < width:
            cell = buffer.cells.get((x, y))
            if cell is None:
                text, style, columns = " ", Style(), 1
            else:
                text, style, columns = cell
            if buffer.cursor == (x, y):
                style = style + CURSOR_STYLE
            segments.append(Segment(text, style))
            x += columns
        return Strip(segments).adjust_cell_length(width)
