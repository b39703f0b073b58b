"""
Game phases.

Each mode draws its screen, then awaits events from the shared CellBuffer
until it knows which mode comes next. `run()` returns that mode, or None when
the player quits. Only one mode runs at a time, so they all draw into the same
buffer without coordination.
"""
from __future__ import annotations

import logging
from typing import Optional

from .config import Settings
from .drawing import (
    center_text,
    clear_display,
    clear_input,
    clear_status,
    draw_lines,
    draw_status,
    fill_text,
    input_row,
    putexp,
    puts,
    status_row,
)
from .layout import longest_word
from .progress import TypingSession
from .surface import CellBuffer, KeyPress, Resize
from .words import vocabulary

logger = logging.getLogger(__name__)

GAME_OVER = """ Game Over
 Press ENTER to continue.
                          """


class Mode:
    def __init__(self, screen: CellBuffer, settings: Settings) -> None:
        self.screen = screen
        self.settings = settings

    async def run(self) -> Optional["Mode"]:
        raise NotImplementedError


async def run_modes(first: Mode) -> None:
    mode: Optional[Mode] = first
    while mode is not None:
        logger.debug("entering %s", type(mode).__name__)
        mode = await mode.run()
    logger.debug("no next mode, stopping")


# ---------------------------
# Help
# ---------------------------

class HelpMode(Mode):
    async def run(self) -> Optional[Mode]:
        screen, settings = self.screen, self.settings
        keys = settings.keys
        screen.clear_cells()
        screen.hide_cursor()
        center_text(screen, settings.style("text"), 1, settings.help_text())
        screen.sync()
        while True:
            event = await screen.poll_event()
            if isinstance(event, Resize):
                screen.sync()
                continue
            if event.key == keys.quit:
                return None
            if event.key == keys.new_game:
                return GameMode(screen, settings)


# ---------------------------
# Active game
# ---------------------------

class GameMode(Mode):
    def __init__(self, screen: CellBuffer, settings: Settings) -> None:
        super().__init__(screen, settings)
        self.session: Optional[TypingSession] = None
        self.x = 0
        self.y = 0

    async def run(self) -> Optional[Mode]:
        screen, settings = self.screen, self.settings
        keys = settings.keys
        style = settings.style("text")
        w, _ = screen.dimensions()

        session = self.session = TypingSession(settings.practice_text())
        self.x, self.y = 0, input_row(screen)
        logger.info("new game: %d characters", len(session.text))

        draw_lines(screen, settings.style("rule"))
        clear_display(screen, style)
        clear_input(screen, style)
        fill_text(screen, style, 0, 0, session.text)
        screen.show_cursor(self.x, self.y)
        puts(screen, settings.style("hint"), 0, status_row(screen), "Start typing")
        screen.sync()

        long = longest_word(vocabulary())
        while True:
            event = await screen.poll_event()
            if isinstance(event, Resize):
                screen.sync()
                continue

            if event.key == keys.quit:
                return None
            if event.key == keys.stop_game:
                logger.info("game stopped at %d/%d", session.index, len(session.text))
                clear_display(screen, style)
                clear_input(screen, style)
                screen.hide_cursor()
                self.session = None
                return HelpMode(screen, settings)

            if not self._is_keystroke(event):
                continue
            if session.start():
                clear_status(screen, style)

            if event.key == keys.backspace:
                self.x = max(0, self.x - 1)
                puts(screen, style, self.x, self.y, " ")
                session.back()
            elif event.key == keys.newline:
                self.x = 0
                self.y += 1
            else:
                ch = event.character
                matched = session.type_char(ch)
                putexp(screen, style, settings.style("bad"), self.x, self.y, ch, matched)
                self.x += 1
                if ch.isspace():
                    draw_status(screen, style, session.status())
                    if self.x >= w - long:
                        self.x = 0
                        self.y += 1

            screen.show_cursor(self.x, self.y)
            screen.sync()
            if session.finished:
                session.complete()
                draw_status(screen, style, session.status())
                logger.info(
                    "game finished: %d words in %.1fs", session.word_count, session.elapsed()
                )
                screen.hide_cursor()
                return GameOverMode(screen, settings)

    def _is_keystroke(self, event: KeyPress) -> bool:
        keys = self.settings.keys
        if event.key in (keys.backspace, keys.newline):
            return True
        return bool(event.character)


# ---------------------------
# Game over
# ---------------------------

class GameOverMode(Mode):
    async def run(self) -> Optional[Mode]:
        screen, settings = self.screen, self.settings
        keys = settings.keys
        style = settings.style("text")
        center_text(screen, settings.style("hint"), 3, GAME_OVER)
        screen.sync()
        while True:
            event = await screen.poll_event()
            if isinstance(event, Resize):
                screen.sync()
                continue
            if event.key == keys.quit:
                return None
            if event.key == keys.confirm:
                clear_display(screen, style)
                clear_input(screen, style)
                return HelpMode(screen, settings)
