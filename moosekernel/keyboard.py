"""Scan code set 1 to character translation for a US keyboard layout."""

from __future__ import annotations

_SIZE = 128

NORMAL_MAP = "\0\x1b1234567890-=\b\tqwertyuiop[]\n\0asdfghjkl;'`\0\\zxcvbnm,./\0*\0 ".ljust(
    _SIZE, "\0"
)
SHIFT_MAP = '\0\x1b!@#$%^&*()_+\b\tQWERTYUIOP{}\n\0ASDFGHJKL:"~\0|ZXCVBNM<>?\0*\0 '.ljust(
    _SIZE, "\0"
)
CAPS_MAP = "\0\x1b1234567890-=\b\tQWERTYUIOP[]\n\0ASDFGHJKL;'`\0\\ZXCVBNM,./\0*\0 ".ljust(
    _SIZE, "\0"
)


def translate(scancode: int, shift: bool, caps: bool) -> str | None:
    """Return the character for a key-press scan code, or None if it has none.

    Shift takes precedence over caps lock. Release codes (0x80 and above)
    yield None.
    """
    if not 0 <= scancode <= 0xFF:
        raise ValueError(f"scan code {scancode} is not a byte")
    if scancode >= _SIZE:
        return None
    table = SHIFT_MAP if shift else CAPS_MAP if caps else NORMAL_MAP
    char = table[scancode]
    return None if char == "\0" else char