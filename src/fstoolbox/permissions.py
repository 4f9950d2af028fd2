"""Rendering of file permissions as four-character octal strings."""

import os
import stat
from typing import Union

from fstoolbox.types import PathType


def fileperms_as_octal(filename: PathType) -> str:
    """Get the permissions of a file as a four-character octal string (e.g. ``'0755'``).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    return f"{stat.S_IMODE(os.stat(filename).st_mode):04o}"


def fileperms_to_string(perms: Union[int, str]) -> str:
    """Render permissions given as an octal number as a four-character string.

    Strings are returned unchanged.

    Example:
        >>> fileperms_to_string(0o755)
        '0755'
        >>> fileperms_to_string("0644")
        '0644'
    """
    return perms if isinstance(perms, str) else f"{perms:04o}"
