"""A simulated toy kernel: a VGA text terminal, scan code keyboard handling, an in-memory file system and a shell."""

__version__ = "0.0.5"