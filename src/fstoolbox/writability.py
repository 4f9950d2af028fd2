"""Recursive read/write permission checks over a directory tree."""

import os
from typing import Optional

from fstoolbox.exceptions import DirectoryNotFoundError
from fstoolbox.file_system_tree.tree_walker import TreeWalker
from fstoolbox.types import PathType


class WritabilityProbe:
    """Tells whether a directory and everything beneath it is readable and writable.

    Attributes:
        walker (TreeWalker): Walker used to list the entries to check.
    """

    def __init__(self, walker: Optional[TreeWalker] = None) -> None:
        self.walker = walker or TreeWalker()

    def is_writable_recursive(
        self, path: PathType, check_only_directories: bool = True, ignore_errors: bool = False
    ) -> bool:
        """Check that a directory and its subdirectories (optionally its files too) are readable and writable.

        Entries are checked in walk order and the check stops at the first failure,
        so nothing past it is touched.

        Args:
            path: The directory to check. It is always checked itself.
            check_only_directories: If False, files are checked as well.
            ignore_errors: If True, a missing directory returns False instead of raising.

        Returns:
            True if every checked entry is both readable and writable.

        Raises:
            DirectoryNotFoundError: If ``path`` is missing or not a directory and
                ``ignore_errors`` is False.
        """
        path = os.fspath(path)
        try:
            directories, files = self.walker.walk(path)
        except DirectoryNotFoundError:
            if not ignore_errors:
                raise
            return False

        items = list(directories) if check_only_directories else [*directories, *files]
        if path not in items:
            items.append(path)

        for item in items:
            if not os.access(item, os.R_OK) or not os.access(item, os.W_OK):
                return False

        return True
