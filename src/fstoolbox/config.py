"""Process-wide configuration for root-relative rendering and temporary files.

The root path is read from the ``ROOT`` environment variable, falling back to the
``ROOT`` constant of this module. Applications that cannot rely on the environment
set the constant once at startup:

    >>> import fstoolbox.config
    >>> fstoolbox.config.ROOT = "/srv/app/"  # doctest: +SKIP

Neither value is read until a root-relative path is actually requested.
"""

import os
import tempfile
from typing import Optional

from fstoolbox.exceptions import ConfigurationError
from fstoolbox.types import PathType

# Environment variable holding the root path
ROOT_ENV_VAR = "ROOT"

# Fallback root path, used when the environment variable is unset or empty
ROOT: Optional[str] = None

# Directory for temporary files; None means the system temporary directory
TMP: Optional[str] = None


def resolve_root(explicit: Optional[PathType] = None) -> str:
    """Resolve the root path.

    Args:
        explicit: A root passed by the caller. Takes precedence over the environment
            and the module constant.

    Returns:
        The root path, exactly as configured (a trailing separator is kept).

    Raises:
        ConfigurationError: If no root is configured anywhere.
    """
    if explicit is not None and os.fspath(explicit):
        return os.fspath(explicit)

    root = os.environ.get(ROOT_ENV_VAR)
    if root:
        return root

    if ROOT:
        return ROOT

    raise ConfigurationError()


def get_tmp_dir() -> str:
    """Get the directory where temporary files are created.

    Returns:
        The ``TMP`` constant if set, otherwise the system temporary directory.
    """
    return TMP or tempfile.gettempdir()
