"""The command shell: prompt rendering and command dispatch."""

from __future__ import annotations

from collections.abc import Callable

from .filesystem import (
    AlreadyExistsError,
    FileSystem,
    InvalidContentError,
    InvalidNameError,
    LimitReachedError,
    NotEmptyError,
    NotFoundError,
)
from .terminal import Terminal
from .textlib import format_bounded, split_string

SYSTEM_NAME = "simpleMOS"
VERSION = "0.0.5"
_BUFFER_SIZE = 256
_NEEDS_ARGUMENTS = frozenset({"cd", "mkdir", "rmdir", "rm", "cat", "touch", "echo"})


class Shell:
    """Interprets command lines against a file system and writes to a terminal."""

    def __init__(self, terminal: Terminal, filesystem: FileSystem, user: str = "root") -> None:
        self.terminal = terminal
        self.filesystem = filesystem
        self.user = user
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "ls": self._ls,
            "pwd": self._pwd,
            "cd": self._cd,
            "mkdir": self._mkdir,
            "rmdir": self._rmdir,
            "rm": self._rm,
            "cat": self._cat,
            "touch": self._touch,
            "hello": self._hello,
            "clear": self._clear,
            "echo": self._echo,
        }

    def _say(self, message: str) -> None:
        self.terminal.write_string(message, True)

    def prompt(self) -> None:
        """Write the prompt and protect it from backspace."""
        cwd = self.filesystem.pwd()
        self.terminal.no_delete = len(SYSTEM_NAME) + len(self.user) + len(cwd) + 4
        for piece in (self.user, "@", SYSTEM_NAME, cwd, " # "):
            self.terminal.write_string(piece, False)

    def process_command(self, command: str) -> None:
        """Run one command line."""
        args = [part for part in split_string(command, " ") if part]
        if not args:
            return
        name, *rest = args
        handler = self._commands.get(name)
        if handler is None:
            self._say("Error: UNKNOWN COMMAND")
        elif name in _NEEDS_ARGUMENTS and not rest:
            self._say(f"Error: {name.upper()} NEEDS ARGUMENTS")
        else:
            handler(rest)

    def _ls(self, args: list[str]) -> None:
        for line in self.filesystem.listing():
            self._say(line)

    def _pwd(self, args: list[str]) -> None:
        self._say(self.filesystem.pwd())

    def _cd(self, args: list[str]) -> None:
        try:
            self.filesystem.cd(args[0])
        except NotFoundError:
            self._say("Error: Directory not found.")

    def _mkdir(self, args: list[str]) -> None:
        try:
            self.filesystem.mkdir(args[0])
        except LimitReachedError:
            self._say("Error: DIR LIMIT REACHED")
        except InvalidNameError:
            self._say("Error: DIR NAME INVALID")
        except AlreadyExistsError:
            self._say("Error: DIR ALREADY EXISTS")
        else:
            self._say("MKDIR SUCCESSFUL")

    def _rmdir(self, args: list[str]) -> None:
        try:
            self.filesystem.rmdir(args[0])
        except NotEmptyError:
            self._say("Error: Folder is not empty")
            self._say("Error: DIR NOT EMPTY")
        except NotFoundError:
            self._say("Error: DIR NOT FOUND")
        else:
            self._say("Directory removed successfully.")
            self._say("RMDIR SUCCESS")

    def _rm(self, args: list[str]) -> None:
        try:
            self.filesystem.rm(args[0])
        except NotFoundError:
            self._say("Error: FILE NOT FOUND")
        else:
            self._say("File removed successfully.")
            self._say("RM SUCCESS")

    def _cat(self, args: list[str]) -> None:
        try:
            content = self.filesystem.cat(args[0])
        except NotFoundError:
            self._say("Error: File not found.")
        else:
            self._say(format_bounded(_BUFFER_SIZE, "%s", content))

    def _touch(self, args: list[str]) -> None:
        try:
            self.filesystem.mkfile(args[0], "")
        except LimitReachedError:
            self._say("Error: FILE LIMIT REACHED")
        except InvalidNameError:
            self._say("Error: INVALID FILE NAME")
        except InvalidContentError:
            self._say("Error: INVALID FILE CONTENT")
        except AlreadyExistsError:
            self._say("Error: FILE ALREADY EXISTS.")
        else:
            self._say("TOUCH SUCCESS")

    def _hello(self, args: list[str]) -> None:
        self._say(format_bounded(_BUFFER_SIZE, "Hello, %s!", self.user))
        self._say(format_bounded(_BUFFER_SIZE, "You are running %s (%s).", SYSTEM_NAME, VERSION))

    def _clear(self, args: list[str]) -> None:
        self.terminal.initialize()

    def _echo(self, args: list[str]) -> None:
        self.terminal.write_string(" ".join(args), False)
        self.terminal.newline()