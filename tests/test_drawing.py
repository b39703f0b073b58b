#!/usr/bin/env python3
"""Tests for the drawing helpers on top of CellBuffer."""

from rich.style import Style

from typing_drill.drawing import (
    HLINE,
    center_text,
    clear_display,
    clear_input,
    draw_lines,
    draw_status,
    fill_text,
    input_row,
    putexp,
    puts,
    status_row,
)

PLAIN = Style()
RED = Style(color="red")


class TestPuts:
    """Test width-aware writes."""

    def test_plain_text(self, screen):
        assert puts(screen, PLAIN, 1, 0, "abc") == 3
        assert screen.row_text(0).startswith(" abc")

    def test_zwj_sequence_takes_one_cell(self, screen):
        puts(screen, PLAIN, 5, 0, "a\u200db" + "x")
        assert screen.cell(5, 0)[0] == "a\u200db"
        assert screen.cell(6, 0)[0] == "x"

    def test_wide_zwj_sequence_takes_one_double_cell(self, screen):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert puts(screen, PLAIN, 0, 0, family + "x") == 3
        assert screen.cell(0, 0)[0] == family
        assert screen.cell(1, 0) is None
        assert screen.cell(2, 0)[0] == "x"

    def test_out_of_bounds_ignored(self, screen):
        puts(screen, PLAIN, 38, 0, "abcd")
        assert screen.cell(39, 0)[0] == "b"
        assert (40, 0) not in screen.cells
        puts(screen, PLAIN, 0, 99, "a")
        assert (0, 99) not in screen.cells


class TestPutexp:
    def test_match_keeps_style(self, screen):
        putexp(screen, PLAIN, RED, 0, 0, "a", True)
        assert screen.cell(0, 0)[1] == PLAIN

    def test_mismatch_uses_bad_style(self, screen):
        putexp(screen, PLAIN, RED, 0, 0, "a", False)
        assert screen.cell(0, 0)[1].color.name == "red"


class TestRegions:
    """Test the fixed screen regions on a 40x12 grid."""

    def test_rows(self, screen):
        assert input_row(screen) == 7
        assert status_row(screen) == 11

    def test_draw_lines(self, screen):
        draw_lines(screen, PLAIN)
        assert screen.row_text(6) == HLINE * 40
        assert screen.row_text(10) == HLINE * 40

    def test_clear_display_and_input(self, screen):
        for y in range(12):
            puts(screen, PLAIN, 0, y, "x" * 40)
        clear_display(screen, PLAIN)
        clear_input(screen, PLAIN)
        for y in range(0, 6):
            assert screen.row_text(y).strip() == ""
        for y in range(7, 10):
            assert screen.row_text(y).strip() == ""
        assert screen.row_text(6) == "x" * 40
        assert screen.row_text(10) == "x" * 40

    def test_draw_status_replaces_line(self, screen):
        draw_status(screen, PLAIN, "a much longer status line")
        draw_status(screen, PLAIN, "short")
        assert screen.row_text(11).rstrip() == "short"


class TestText:
    def test_center_text(self, screen):
        center_text(screen, PLAIN, 2, "abcd\nab")
        assert screen.cell(18, 2)[0] == "a"
        assert screen.cell(19, 3)[0] == "a"

    def test_fill_text_wraps(self, screen):
        fill_text(screen, PLAIN, 0, 0, "aaaaaaaaaa " * 5)
        assert screen.row_text(0).rstrip() == ("aaaaaaaaaa " * 3).rstrip()
        assert screen.row_text(1).rstrip() == ("aaaaaaaaaa " * 2).rstrip()
