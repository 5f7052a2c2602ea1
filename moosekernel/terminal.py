"""An 80x25 VGA text-mode terminal held in memory."""

from __future__ import annotations

from .vga import VgaColor, entry, entry_color


class Terminal:
    """A text screen of 16-bit cells with a cursor, scrolling and backspace guard."""

    WIDTH = 80
    HEIGHT = 25

    def __init__(self) -> None:
        self.no_delete = 0
        self.initialize()

    def initialize(self) -> None:
        """Reset the cursor and colour and blank the whole screen."""
        self.row = 0
        self.column = 0
        self.color = entry_color(VgaColor.WHITE, VgaColor.BLACK)
        self._cells = [entry(" ", self.color)] * (self.WIDTH * self.HEIGHT)

    def set_color(self, color: int) -> None:
        """Use a new attribute byte for subsequent output."""
        self.color = color

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.WIDTH and 0 <= y < self.HEIGHT):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return y * self.WIDTH + x

    def put_entry_at(self, char: str, color: int, x: int, y: int) -> None:
        """Place a character with a colour at a screen position."""
        self._cells[self._index(x, y)] = entry(char, color)

    def put_char(self, char: str) -> None:
        """Write one character at the cursor and advance, wrapping and scrolling."""
        self.put_entry_at(char, self.color, self.column, self.row)
        self.column += 1
        if self.column == self.WIDTH:
            self.column = 0
            self.row += 1
            if self.row == self.HEIGHT:
                self.scroll(1)
                self.row = self.HEIGHT - 1

    def write(self, data: str) -> None:
        """Write every character of ``data``."""
        for char in data:
            self.put_char(char)

    def write_string(self, data: str, newline: bool) -> None:
        """Write ``data``; with ``newline``, pad with spaces to a full screen width."""
        self.write(data)
        if newline:
            self.write(" " * max(0, self.WIDTH - len(data)))

    def newline(self) -> None:
        """Blank the rest of the current line and move to the next one."""
        if self.column > 0:
            self.write(" " * (self.WIDTH - self.column))

    def backspace(self) -> None:
        """Erase the character left of the cursor unless it is protected."""
        if self.column > self.no_delete:
            self.put_entry_at(" ", self.color, self.column - 1, self.row)
            self.column -= 1

    def scroll(self, lines: int) -> None:
        """Move the screen contents up by ``lines`` rows, blanking the bottom."""
        if lines <= 0:
            return
        lines = min(lines, self.HEIGHT)
        shift = lines * self.WIDTH
        keep = len(self._cells) - shift
        self._cells[:keep] = self._cells[shift:]
        self._cells[keep:] = [entry(" ", self.color)] * shift
        self.row = self.row - lines if self.row >= lines else 0

    def cell(self, x: int, y: int) -> int:
        """Return the raw 16-bit cell at a screen position."""
        return self._cells[self._index(x, y)]

    def line_text(self, row: int) -> str:
        """Return the characters of one screen row."""
        self._index(0, row)
        start = row * self.WIDTH
        return "".join(chr(c & 0xFF) for c in self._cells[start : start + self.WIDTH])

    def screen_text(self) -> str:
        """Return the whole screen as lines joined by newlines."""
        return "\n".join(self.line_text(row) for row in range(self.HEIGHT))