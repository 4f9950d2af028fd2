from os import PathLike
from typing import List, NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class Tree(NamedTuple):
    """Result of a directory walk.

    Holds two flat, ordered lists of paths. The first entry of ``directories`` is
    always the walked root itself. Being a tuple, a Tree unpacks as a pair.

    Attributes:
        directories: The root followed by every non-excluded subdirectory, in pre-order.
        files: Every non-excluded file, grouped by directory in the same pre-order.

    Example:
        >>> tree = Tree(["a", "a/b"], ["a/f1", "a/b/f2"])
        >>> directories, files = tree
        >>> directories[0]
        'a'
        >>> Tree.empty()
        Tree(directories=[], files=[])
    """

    directories: List[str]
    files: List[str]

    @classmethod
    def empty(cls) -> "Tree":
        """Return a Tree with no directories and no files."""
        return cls([], [])
