"""Node representation for entries of a walked directory."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory found during a walk.

    Extends anytree.Node with the full path of the entry and flags describing what
    kind of entry it is. Children keep the order in which the walker attached them,
    which is sorted by name.

    Attributes:
        name (str): The basename of the entry.
        full_path (str): The full path of the entry, as it appears in walk results.
        is_dir (bool): True if the walker descends into this entry.
        is_symlink (bool): True if the entry is a symbolic link.
        symlink_target (Optional[str]): Target of the link, if this is a symlink.

    Example:
        >>> root = FileSystemNode("a", full_path="a", is_dir=True)
        >>> child = FileSystemNode("f1", parent=root, full_path="a/f1")
        >>> child.is_dir, child.parent is root
        (False, True)
        >>> [node.full_path for node in root.children]
        ['a/f1']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        full_path: Optional[str] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.full_path = full_path if full_path is not None else name
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target

    @property
    def display_name(self) -> str:
        """Name used when rendering the tree: directories get a slash, symlinks their target."""
        if self.is_dir:
            return f"{self.name}/"
        if self.is_symlink and self.symlink_target:
            return f"{self.name} -> {self.symlink_target}"
        return self.name
