"""An in-memory hierarchical file system with a current working directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .textlib import MAX_NAME_LEN, format_bounded, truncate_name

MAX_CONTENT = 4096
MAX_CHILDREN = 4096
MAX_NODES = 4096
_BUFFER_SIZE = 256


class FileSystemError(Exception):
    """Base class for file system failures."""


class InvalidNameError(FileSystemError):
    """The name is empty or too long."""


class InvalidContentError(FileSystemError):
    """The file content is missing or too long."""


class LimitReachedError(FileSystemError):
    """The node pool or the directory is full."""


class AlreadyExistsError(FileSystemError):
    """An entry of the same kind and name already exists."""


class NotFoundError(FileSystemError):
    """No entry of the requested kind and name exists."""


class NotEmptyError(FileSystemError):
    """The directory still has entries."""


class NodeType(Enum):
    """Kind of a file system entry; the value is its listing tag."""

    FILE = "FILE"
    FOLDER = "DIR"


@dataclass(eq=False)
class Node:
    """A file or folder in the tree."""

    name: str
    type: NodeType
    parent: Node | None = None
    content: str = ""
    children: list[Node] = field(default_factory=list)


class FileSystem:
    """A tree of folders and files drawn from a fixed-size node pool.

    Nodes taken from the pool are never returned to it, so removing
    entries does not make room for new ones.
    """

    def __init__(self, max_nodes: int = MAX_NODES, max_children: int = MAX_CHILDREN) -> None:
        if max_nodes < 1:
            raise ValueError("the node pool must hold at least the root")
        self.max_nodes = max_nodes
        self.max_children = max_children
        self._allocated = 0
        self.root = self._allocate("/", NodeType.FOLDER, None)
        self.cwd = self.root

    def _allocate(self, name: str, kind: NodeType, parent: Node | None, content: str = "") -> Node:
        if self._allocated >= self.max_nodes:
            raise LimitReachedError("node pool exhausted")
        self._allocated += 1
        return Node(truncate_name(name), kind, parent, content)

    def _find(self, name: str, kind: NodeType) -> Node | None:
        return next(
            (child for child in self.cwd.children if child.type is kind and child.name == name),
            None,
        )

    def _require(self, name: str, kind: NodeType) -> Node:
        node = self._find(name, kind)
        if node is None:
            what = "File" if kind is NodeType.FILE else "Directory"
            raise NotFoundError(f"{what} not found.")
        return node

    @staticmethod
    def _check_name(name: str | None) -> None:
        if not name or len(name) >= MAX_NAME_LEN:
            raise InvalidNameError(f"invalid name {name!r}")

    def _check_room(self) -> None:
        if len(self.cwd.children) >= self.max_children:
            raise LimitReachedError("directory is full")

    def mkdir(self, name: str) -> Node:
        """Create a folder in the current directory."""
        self._check_name(name)
        self._check_room()
        if self._find(name, NodeType.FOLDER) is not None:
            raise AlreadyExistsError(f"folder {name!r} already exists")
        node = self._allocate(name, NodeType.FOLDER, self.cwd)
        self.cwd.children.append(node)
        return node

    def mkfile(self, name: str, content: str = "") -> Node:
        """Create a file with the given content in the current directory."""
        self._check_name(name)
        if content is None or len(content) >= MAX_CONTENT:
            raise InvalidContentError("file content is missing or too long")
        self._check_room()
        if self._find(name, NodeType.FILE) is not None:
            raise AlreadyExistsError(f"file {name!r} already exists")
        node = self._allocate(name, NodeType.FILE, self.cwd, content)
        self.cwd.children.append(node)
        return node

    def listing(self) -> list[str]:
        """Return the lines describing the current directory."""
        lines = [format_bounded(_BUFFER_SIZE, "Contents of %s:", self.cwd.name)]
        if not self.cwd.children:
            lines.append(" (empty)")
        lines.extend(
            format_bounded(_BUFFER_SIZE, " [%s] %s", child.type.value, child.name)
            for child in self.cwd.children
        )
        return lines

    def cd(self, name: str) -> None:
        """Enter a child folder, or the parent with ``..``."""
        if name == "..":
            if self.cwd.parent is not None:
                self.cwd = self.cwd.parent
            return
        self.cwd = self._require(name, NodeType.FOLDER)

    def cat(self, name: str) -> str:
        """Return the content of a file in the current directory."""
        return self._require(name, NodeType.FILE).content

    def rm(self, name: str) -> None:
        """Remove a file from the current directory."""
        self.cwd.children.remove(self._require(name, NodeType.FILE))

    def rmdir(self, name: str) -> None:
        """Remove an empty folder from the current directory."""
        node = self._require(name, NodeType.FOLDER)
        if node.children:
            raise NotEmptyError("Folder is not empty")
        self.cwd.children.remove(node)

    def pwd(self) -> str:
        """Return the absolute path of the current directory."""
        path = ""
        node = self.cwd
        while node.parent is not None:
            path = truncate_name(format_bounded(_BUFFER_SIZE, "/%s%s", node.name, path))
            node = node.parent
        return path or "/"

    def edit_file(self, name: str, content: str) -> None:
        """Replace a file's content, cutting it to the maximum size."""
        self._require(name, NodeType.FILE).content = content[: MAX_CONTENT - 1]