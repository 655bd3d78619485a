"""Tests for full-frame painting."""

import io
from unittest.mock import Mock

from termedit.cursor import CursorStyle
from termedit.document import Document
from termedit.screen import Screen
from termedit.terminal import StreamSink


def make_screen(terminal=None):
    out = io.StringIO()
    sink = StreamSink(out)
    screen = Screen(sink, terminal)
    return screen, sink, out


def clear(out):
    out.seek(0)
    out.truncate(0)


def test_construction_erases_frame():
    _, _, out = make_screen()
    assert out.getvalue() == "\x1b[2J"


def test_dimensions_from_terminal():
    terminal = Mock(width=120, height=40)
    screen, _, _ = make_screen(terminal)
    assert (screen.width, screen.height) == (120, 40)


def test_default_dimensions():
    screen, _, _ = make_screen()
    assert (screen.width, screen.height) == (80, 24)


def test_draw_paints_lines_then_editing_cursor():
    screen, sink, out = make_screen()
    doc = Document.from_text("ab\ncd", sink)
    clear(out)

    screen.draw(doc)

    assert out.getvalue() == (
        "\x1b[2J"
        "\x1b[1;1Hab"
        "\x1b[2;1Hcd"
        "\x1b[1;1H\x1b[2 q\x1b[?25h"
    )


def test_draw_restores_cursor_position_and_style():
    screen, sink, out = make_screen()
    doc = Document.from_text("hello", sink)
    doc.insert_char("!")
    doc.set_cursor_style(CursorStyle.STEADY_BAR)
    clear(out)

    screen.draw(doc)

    assert out.getvalue().endswith("\x1b[1;2H\x1b[6 q\x1b[?25h")
    assert (doc.cursor.row, doc.cursor.col) == (1, 2)


def test_paint_cursor_never_shows():
    screen, sink, out = make_screen()
    doc = Document.from_text("a\nb\nc", sink)
    clear(out)
    screen.draw(doc)
    # Only the editing cursor touches visibility
    assert out.getvalue().count("\x1b[?25") == 1
    assert not doc.paint_cursor.visible


def test_draw_flushes():
    sink = Mock()
    screen = Screen(sink)
    doc = Document(sink)
    sink.reset_mock()
    screen.draw(doc)
    sink.flush.assert_called_once()


def test_draw_clips_to_height():
    screen, sink, out = make_screen(Mock(width=80, height=2))
    doc = Document.from_text("one\ntwo\nthree", sink)
    clear(out)
    screen.draw(doc)
    assert "two" in out.getvalue()
    assert "three" not in out.getvalue()


def test_repeated_draws_are_identical():
    screen, sink, out = make_screen()
    doc = Document.from_text("x\ny", sink)
    clear(out)
    screen.draw(doc)
    first = out.getvalue()
    clear(out)
    screen.draw(doc)
    assert out.getvalue() == first


def test_current_document_handling():
    screen, sink, out = make_screen()
    assert screen.current_document is None
    clear(out)
    screen.draw_current()
    assert out.getvalue() == ""

    doc = Document.from_text("text", sink)
    screen.set_current_document(doc)
    assert screen.current_document is doc
    screen.draw_current()
    assert "text" in out.getvalue()

    screen.remove_current_document()
    assert screen.current_document is None
