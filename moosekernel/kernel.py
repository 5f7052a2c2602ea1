"""Boots the text console, file system and shell and feeds them keystrokes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .filesystem import FileSystem
from .keyboard import translate
from .keyhandler import (
    BACKSPACE,
    CAPS_LOCK,
    ENTER,
    ESCAPE,
    LEFT_SHIFT,
    RIGHT_SHIFT,
    KeyHandler,
)
from .shell import Shell
from .terminal import Terminal
from .vga import Framebuffer, VgaColor

WELCOME = "Welcome to the SimpleM kernel"
_SPECIAL_KEYS = frozenset({ESCAPE, BACKSPACE, ENTER, LEFT_SHIFT, RIGHT_SHIFT, CAPS_LOCK})


class Kernel:
    """Owns the devices and services and wires them together."""

    def __init__(self) -> None:
        self.terminal = Terminal()
        self.filesystem = FileSystem()
        self.shell = Shell(self.terminal, self.filesystem)
        self.keys = KeyHandler(self.terminal, self.shell)
        self.framebuffer = Framebuffer()

    def boot(self) -> None:
        """Clear the screen, greet, show the prompt and paint the test rectangle."""
        self.terminal.initialize()
        self.terminal.write_string(WELCOME, True)
        self.shell.prompt()
        self.framebuffer.draw_rect(0, 0, 80, 25, VgaColor.RED)

    def _keystroke(self, char: str) -> tuple[int, bool]:
        for shifted in (False, True):
            for code in range(1, 0x80):
                if code not in _SPECIAL_KEYS and translate(code, shifted, self.keys.caps) == char:
                    return code, shifted
        raise ValueError(f"character {char!r} cannot be typed")

    def type_line(self, line: str) -> None:
        """Type a line as key presses and finish it with Enter."""
        strokes = [self._keystroke(char) for char in line]
        for code, shifted in strokes:
            if self.keys.shift != shifted:
                self.keys.process_key(LEFT_SHIFT)
            self.keys.process_key(code)
        if self.keys.shift:
            self.keys.process_key(LEFT_SHIFT)
        self.keys.process_key(ENTER)


def _screen(terminal: Terminal) -> str:
    return "\n".join(line.rstrip() for line in terminal.screen_text().splitlines())


def main(argv: list[str] | None = None) -> int:
    """Boot, run commands from the arguments or standard input, print the screen."""
    parser = argparse.ArgumentParser(
        prog="moosekernel", description="Run shell commands on the in-memory console."
    )
    parser.add_argument("commands", nargs="*", help="command lines to type")
    args = parser.parse_args(argv)

    kernel = Kernel()
    kernel.boot()
    commands: Iterable[str] = args.commands or (line.rstrip("\n") for line in sys.stdin)
    try:
        for command in commands:
            kernel.type_line(command)
    except ValueError as error:
        print(f"moosekernel: {error}", file=sys.stderr)
        return 1
    print(_screen(kernel.terminal))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())