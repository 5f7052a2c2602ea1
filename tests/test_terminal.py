import pytest

from moosekernel.terminal import Terminal
from moosekernel.vga import VgaColor, entry, entry_color


@pytest.fixture
def term():
    return Terminal()


def test_initial_screen_is_blank(term):
    assert (term.row, term.column) == (0, 0)
    assert term.color == entry_color(VgaColor.WHITE, VgaColor.BLACK)
    assert term.screen_text().replace("\n", "").strip() == ""
    assert term.cell(0, 0) == entry(" ", term.color)


def test_write_without_newline(term):
    term.write_string("hi", False)
    assert term.line_text(0).startswith("hi ")
    assert (term.row, term.column) == (0, 2)


def test_write_with_newline_from_column_zero(term):
    term.write_string("Welcome", True)
    assert term.line_text(0).rstrip() == "Welcome"
    assert (term.row, term.column) == (1, 0)


def test_put_char_wraps(term):
    term.write("x" * Terminal.WIDTH)
    assert (term.row, term.column) == (1, 0)
    assert term.line_text(0) == "x" * Terminal.WIDTH


def test_set_color_applies_to_new_cells(term):
    color = entry_color(VgaColor.RED, VgaColor.BLUE)
    term.set_color(color)
    term.put_char("A")
    assert term.cell(0, 0) == entry("A", color)


def test_newline_moves_to_next_row(term):
    term.write("abc")
    term.newline()
    assert (term.row, term.column) == (1, 0)
    assert term.line_text(0).rstrip() == "abc"


def test_newline_at_column_zero_does_nothing(term):
    term.newline()
    assert (term.row, term.column) == (0, 0)


def test_backspace_erases(term):
    term.write("abc")
    term.backspace()
    assert term.column == 2
    assert term.line_text(0).rstrip() == "ab"


def test_backspace_respects_protected_prefix(term):
    term.write("prompt# ")
    term.no_delete = 8
    term.backspace()
    assert term.column == 8
    assert term.line_text(0).rstrip() == "prompt#"


def test_screen_scrolls_when_full(term):
    for n in range(Terminal.HEIGHT):
        term.write_string(f"line{n}", True)
    assert term.row == Terminal.HEIGHT - 1
    assert term.line_text(0).rstrip() == "line1"
    assert term.line_text(Terminal.HEIGHT - 2).rstrip() == f"line{Terminal.HEIGHT - 1}"
    assert term.line_text(Terminal.HEIGHT - 1).strip() == ""


def test_scroll_moves_rows_and_cursor(term):
    term.write_string("top", True)
    term.write_string("second", True)
    term.scroll(1)
    assert term.line_text(0).rstrip() == "second"
    assert term.row == 1


def test_scroll_clamps_row_at_zero(term):
    term.write("a")
    term.scroll(3)
    assert term.row == 0
    assert term.line_text(0).strip() == ""


def test_scroll_non_positive_is_noop(term):
    term.write("keep")
    term.scroll(0)
    term.scroll(-2)
    assert term.line_text(0).rstrip() == "keep"


def test_scroll_whole_screen_blanks(term):
    term.write_string("gone", True)
    term.scroll(Terminal.HEIGHT + 5)
    assert term.screen_text().replace("\n", "").strip() == ""


def test_initialize_clears(term):
    term.write_string("data", True)
    term.initialize()
    assert (term.row, term.column) == (0, 0)
    assert term.line_text(0).strip() == ""


def test_put_entry_outside_screen_raises(term):
    with pytest.raises(IndexError):
        term.put_entry_at("a", term.color, Terminal.WIDTH, 0)
    with pytest.raises(IndexError):
        term.cell(0, Terminal.HEIGHT)


def test_screen_text_shape(term):
    lines = term.screen_text().split("\n")
    assert len(lines) == Terminal.HEIGHT
    assert all(len(line) == Terminal.WIDTH for line in lines)