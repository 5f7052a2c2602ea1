"""Turns keyboard scan codes into line editing and shell commands."""

from __future__ import annotations

from .keyboard import translate
from .shell import Shell
from .terminal import Terminal

ESCAPE = 0x01
BACKSPACE = 0x0E
ENTER = 0x1C
LEFT_SHIFT = 0x2A
RIGHT_SHIFT = 0x36
CAPS_LOCK = 0x3A
_LINE_LIMIT = 255


class KeyHandler:
    """Keeps the modifier state and the line being typed."""

    def __init__(self, terminal: Terminal, shell: Shell) -> None:
        self.terminal = terminal
        self.shell = shell
        self.shift = False
        self.caps = False
        self._line: list[str] = []

    @property
    def line(self) -> str:
        """The text typed since the last Enter."""
        return "".join(self._line)

    def process_key(self, keycode: int) -> None:
        """Handle one scan code; release codes and Escape are ignored."""
        if not -0x80 <= keycode <= 0xFF:
            raise ValueError(f"scan code {keycode} is not a byte")
        if keycode < 0 or keycode >= 0x80 or keycode == ESCAPE:
            return
        if keycode in (LEFT_SHIFT, RIGHT_SHIFT):
            self.shift = not self.shift
        elif keycode == CAPS_LOCK:
            self.caps = not self.caps
        elif keycode == ENTER:
            self.terminal.newline()
            self.shell.process_command(self.line)
            self._line.clear()
            self.terminal.newline()
            self.shell.prompt()
        elif keycode == BACKSPACE:
            self.terminal.backspace()
            if self._line:
                self._line.pop()
        else:
            char = translate(keycode, self.shift, self.caps)
            if char:
                self.terminal.put_char(char)
                if len(self._line) < _LINE_LIMIT:
                    self._line.append(char)