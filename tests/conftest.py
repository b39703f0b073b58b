import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from typing_drill.config import Settings
from typing_drill.surface import CellBuffer, KeyPress


def keys(text):
    """Key events for typing `text` literally."""
    return [KeyPress("space" if ch == " " else ch, ch) for ch in text]


def run_mode(mode, events, timeout=2.0):
    """Feed `events` to the mode's buffer and run it to its transition."""
    for event in events:
        mode.screen.push_event(event)
    return asyncio.run(asyncio.wait_for(mode.run(), timeout))


@pytest.fixture
def screen():
    return CellBuffer(40, 12)


@pytest.fixture
def settings():
    return Settings(text_source=lambda sentences, words: "cat sat.")
