"""Recursive removal of directory trees, or of the files they contain."""

import logging
import os
import shutil
from typing import Optional

from fstoolbox.exceptions import DirectoryNotFoundError, FilesystemIOError
from fstoolbox.file_system_tree.tree_walker import ExceptionsType, TreeWalker
from fstoolbox.types import PathType

logger = logging.getLogger(__name__)


class RecursiveRemover:
    """Removes whole directory trees, or only the files within them.

    Attributes:
        walker (TreeWalker): Walker used to list the files to remove.

    Example:
        >>> remover = RecursiveRemover()
        >>> remover.remove_files_only("build", exceptions=[".gitkeep"])  # doctest: +SKIP
        True
        >>> remover.remove_tree("build")  # doctest: +SKIP
        True
    """

    def __init__(self, walker: Optional[TreeWalker] = None) -> None:
        self.walker = walker or TreeWalker()

    def remove_tree(self, path: PathType) -> bool:
        """Remove a directory together with all its subdirectories and files.

        To remove only the files, leaving the directories in place, use
        ``remove_files_only()`` instead.

        Args:
            path: The directory to remove. A symlink to a directory is removed
                itself, its target is left alone.

        Returns:
            True once the directory is removed, False if ``path`` is not a directory.

        Raises:
            FilesystemIOError: If removal fails, e.g. for lack of permissions.
        """
        path = os.fspath(path)
        if not os.path.isdir(path):
            return False

        try:
            if os.path.islink(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
        except OSError as e:
            raise FilesystemIOError(getattr(e, "filename", None) or path, "Failed to remove", e.errno) from e

        return True

    def remove_files_only(
        self, path: PathType, exceptions: ExceptionsType = None, ignore_errors: bool = False
    ) -> bool:
        """Remove the files contained in a directory and its subdirectories.

        Every directory, including those left empty, is kept. Symlinks are removed
        themselves, never their targets.

        Args:
            path: The directory to clean.
            exceptions: Files or directories to leave alone, in any form accepted
                by ``TreeWalker.walk()``.
            ignore_errors: If True, failures return False instead of raising.

        Returns:
            True on success, False on an ignored failure.

        Raises:
            DirectoryNotFoundError: If ``path`` is missing or not a directory.
            FilesystemIOError: If a file cannot be removed.
        """
        try:
            _, files = self.walker.walk(path, exceptions)
            for filename in files:
                self._unlink(filename)
        except (DirectoryNotFoundError, FilesystemIOError):
            if not ignore_errors:
                raise
            return False

        return True

    def _unlink(self, filename: str) -> None:
        try:
            os.unlink(filename)
        except FileNotFoundError:
            logger.debug("File already removed: %s", filename)
        except OSError as e:
            raise FilesystemIOError(filename, "Failed to remove file", e.errno) from e
