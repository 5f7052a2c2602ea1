"""VGA colour attributes, text-mode cell encoding and a linear pixel framebuffer."""

from __future__ import annotations

from enum import IntEnum


class VgaColor(IntEnum):
    """The sixteen colours of the standard VGA palette."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GREY = 7
    DARK_GREY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_BROWN = 14
    WHITE = 15


def entry_color(fg: int, bg: int) -> int:
    """Combine a foreground and background colour into one attribute byte."""
    return (int(fg) | int(bg) << 4) & 0xFF


def entry(char: str | int, color: int) -> int:
    """Encode a character and an attribute byte as a 16-bit text-mode cell."""
    code = ord(char) if isinstance(char, str) else int(char)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character {char!r} does not fit in one byte")
    return code | (int(color) & 0xFF) << 8


class Framebuffer:
    """A byte-per-pixel framebuffer laid out row after row."""

    def __init__(self, width: int = 320, height: int = 200) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)

    @property
    def data(self) -> bytes:
        """A snapshot of the raw pixel bytes."""
        return bytes(self._pixels)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        return self.width * y + x

    def putpixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel to a palette index."""
        color = int(color)
        if not 0 <= color <= 0xFF:
            raise ValueError(f"colour {color} does not fit in one byte")
        self._pixels[self._offset(x, y)] = color

    def pixel(self, x: int, y: int) -> int:
        """Return the palette index stored at a pixel."""
        return self._pixels[self._offset(x, y)]

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle whose top-left corner is at (x, y)."""
        if width <= 0 or height <= 0:
            return
        self._offset(x, y)
        self._offset(x + width - 1, y + height - 1)
        for row in range(y, y + height):
            for column in range(x, x + width):
                self.putpixel(column, row, color)