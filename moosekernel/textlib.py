"""Small string helpers: bounded names, bounded formatting and splitting."""

from __future__ import annotations

MAX_NAME_LEN = 128
MAX_PARTS = 10
MAX_PART_LEN = 32


def truncate_name(text: str) -> str:
    """Cut a name down to what fits in a name field."""
    return text[: MAX_NAME_LEN - 1]


def format_bounded(size: int, fmt: str, *args: str) -> str:
    """Expand ``%s`` and ``%%`` in ``fmt`` and keep what fits in ``size`` bytes.

    One byte of ``size`` is reserved for the terminator, so at most
    ``size - 1`` characters are returned. Any other ``%`` is copied as is.
    """
    pieces: list[str] = []
    values = iter(args)
    i = 0
    while i < len(fmt):
        directive = fmt[i : i + 2]
        if directive == "%s":
            try:
                pieces.append(str(next(values)))
            except StopIteration:
                raise ValueError("not enough arguments for format string") from None
            i += 2
        elif directive == "%%":
            pieces.append("%")
            i += 2
        else:
            pieces.append(fmt[i])
            i += 1
    return "".join(pieces)[: max(size - 1, 0)]


def split_string(text: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter into at most ten short parts.

    Each part keeps at most 31 characters; splitting stops once ten parts
    have been completed.
    """
    parts: list[str] = []
    current: list[str] = []
    for char in text:
        if char == delimiter:
            parts.append("".join(current))
            if len(parts) >= MAX_PARTS:
                return parts
            current = []
        elif len(current) < MAX_PART_LEN - 1:
            current.append(char)
    parts.append("".join(current))
    return parts