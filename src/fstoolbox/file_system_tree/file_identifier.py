"""Identification of filesystem entries by device and inode."""

import os
from typing import NamedTuple, Optional


class FileIdentifier(NamedTuple):
    """Uniquely identifies a file or directory by its device ID and inode number.

    Used to detect symlink loops when the walker follows symbolic links: a directory
    whose identifier is already on the current branch would be walked forever.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
        >>> len({FileIdentifier(1, 42), FileIdentifier(1, 42), FileIdentifier(2, 42)})
        2
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: str) -> Optional["FileIdentifier"]:
        """Build the identifier of the entry a path resolves to.

        Args:
            path: Path to stat. Symlinks are followed.

        Returns:
            The identifier, or None if the entry cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
