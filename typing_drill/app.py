from __future__ import annotations

import logging
import sys
from typing import Optional

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.logging import TextualHandler

    from .config import KeyMap, Settings
    from .modes import HelpMode, run_modes
    from .surface import CellCanvas, KeyPress, TerminalUnavailable
except ModuleNotFoundError as exc:
    missing = getattr(exc, "name", "")
    hint = "python3 -m pip install -U rich textual wcwidth"
    print(f"Missing dependency '{missing}'. Install with: {hint}", file=sys.stderr)
    raise SystemExit(1) from exc

logger = logging.getLogger(__name__)


# ---------------------------
# App
# ---------------------------

class TypingDrill(App):
    CSS = """
    Screen {
        background: transparent;
    }
    """

    TITLE = "Typing Drill"
    ENABLE_COMMAND_PALETTE = False

    # Textual claims ctrl+c for itself; hand it to the running mode instead.
    BINDINGS = [
        Binding(KeyMap.quit, "forward_quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.canvas = CellCanvas()

    def compose(self) -> ComposeResult:
        yield self.canvas

    def on_mount(self) -> None:
        self.canvas.focus()

    def on_cell_canvas_ready(self, message: CellCanvas.Ready) -> None:
        self.run_worker(self._play(), name="modes", exclusive=True)

    async def _play(self) -> None:
        await run_modes(HelpMode(self.canvas.buffer, self.settings))
        self.exit()

    def action_forward_quit(self) -> None:
        self.canvas.buffer.push_event(KeyPress(self.settings.keys.quit))


def setup() -> TypingDrill:
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise TerminalUnavailable("typing-drill needs an interactive terminal")
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    return TypingDrill()


def main() -> int:
    try:
        app = setup()
    except TerminalUnavailable as exc:
        print(f"{exc}", file=sys.stderr)
        return 1
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
