#!/usr/bin/env python3
"""Tests for the Textual app and the command entry point."""

import asyncio
import importlib
import io
import logging
import sys

import pytest

from typing_drill.app import TypingDrill, main, setup
from typing_drill.config import Settings, key_label


class FakeTty(io.StringIO):
    def isatty(self):
        return True


def test_key_label():
    assert key_label("ctrl+n") == "Ctrl-n"
    assert key_label("enter") == "enter"


def test_help_text_lists_bindings():
    text = Settings().help_text()
    assert text.splitlines()[1] == "New game    Ctrl-n"
    assert text.splitlines()[3] == "Quit        Ctrl-c"


def test_main_without_terminal(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO())
    assert main() == 1
    assert "interactive terminal" in capsys.readouterr().err


def test_setup_logs_at_info(monkeypatch):
    calls = {}
    monkeypatch.setattr(sys, "stdin", FakeTty())
    monkeypatch.setattr(sys, "stdout", FakeTty())
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    app = setup()
    assert isinstance(app, TypingDrill)
    assert calls["level"] == logging.INFO


def test_missing_dependency_prints_hint(monkeypatch, capsys):
    for name in [m for m in sys.modules if m.startswith("typing_drill")]:
        monkeypatch.delitem(sys.modules, name)
    monkeypatch.setitem(sys.modules, "wcwidth", None)
    with pytest.raises(SystemExit) as exc_info:
        importlib.import_module("typing_drill.app")
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Missing dependency 'wcwidth'" in err
    assert "pip install" in err


def test_play_in_app():
    async def scenario():
        app = TypingDrill(Settings(text_source=lambda s, w: "cat sat."))
        async with app.run_test(size=(40, 12)) as pilot:
            await pilot.pause(0.1)
            buffer = app.canvas.buffer
            assert buffer.dimensions() == (40, 12)
            assert "New game" in buffer.row_text(2)

            await pilot.press("ctrl+n")
            await pilot.pause(0.1)
            assert buffer.row_text(0).startswith("cat sat.")
            assert buffer.row_text(11).startswith("Start typing")

            await pilot.press("c", "a")
            await pilot.pause(0.1)
            assert buffer.row_text(7).startswith("ca")
            assert buffer.cursor == (2, 7)

            syncs = buffer.syncs
            await pilot.resize_terminal(50, 14)
            await pilot.pause(0.1)
            assert buffer.dimensions() == (50, 14)
            assert buffer.syncs == syncs + 1
            await pilot.press("t")
            await pilot.pause(0.1)
            assert buffer.row_text(7).startswith("cat")
            assert buffer.cursor == (3, 7)

            await pilot.press("ctrl+c")
            await pilot.pause(0.1)
        return app.return_code

    assert asyncio.run(scenario()) == 0
