"""Pure string operations on filesystem paths.

None of the methods in this module touch the filesystem. Separators are always
recognized in both styles (``/`` and ``\\``) and rendered with ``os.sep``.
"""

import os
import re
from typing import List, Optional

from fstoolbox.config import resolve_root
from fstoolbox.exceptions import InvalidPathError
from fstoolbox.types import PathType

SEPARATORS = ("/", "\\")

_DRIVE_RE = re.compile(r"^[A-Za-z]:[/\\]")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


class PathTool:
    """Normalizes, joins and converts paths.

    A PathTool carries only the optional root used for root-relative rendering. When
    no root is passed, it is looked up on demand through ``fstoolbox.config``.

    Attributes:
        root (Optional[str]): Explicit root path, or None to use the configured one.

    Example:
        >>> import os
        >>> tool = PathTool(root="/home/user/")
        >>> tool.concatenate("dir", "subdir", "file.txt") == os.path.join("dir", "subdir", "file.txt")
        True
        >>> tool.root_relative("/home/user/project/file")
        'project/file'
        >>> tool.get_extension("backup.sql.gz")
        'sql.gz'
    """

    def __init__(self, root: Optional[PathType] = None) -> None:
        self.root = os.fspath(root) if root is not None else None

    def normalize(self, path: PathType) -> str:
        """Replace every forward and back slash with the platform separator.

        Args:
            path: Path to normalize.

        Returns:
            The normalized path.

        Example:
            >>> PathTool().normalize("path\\\\to/normalize") == os.sep.join(["path", "to", "normalize"])
            True
        """
        path = os.fspath(path)
        for separator in SEPARATORS:
            path = path.replace(separator, os.sep)
        return path

    def is_slash_term(self, path: PathType) -> bool:
        """Check if a path ends in a slash (in either style)."""
        return os.fspath(path).endswith(SEPARATORS)

    def add_slash_term(self, path: PathType) -> str:
        """Append the platform separator to a path, unless it already ends in a slash."""
        path = os.fspath(path)
        return path if self.is_slash_term(path) else path + os.sep

    def concatenate(self, *paths: PathType) -> str:
        """Concatenate paths, adding a separator after every part but the last.

        Separators already present are not collapsed, so ``concatenate("a/", "/b")``
        yields a doubled separator.

        Args:
            *paths: Parts to join. At least one part is required.

        Returns:
            The concatenated path.

        Raises:
            InvalidPathError: If no parts are given.
        """
        if not paths:
            raise InvalidPathError("At least one path must be provided")

        *heads, end = paths
        return "".join(self.add_slash_term(head) for head in heads) + os.fspath(end)

    def is_absolute(self, path: PathType) -> bool:
        """Tell whether a path is absolute.

        Recognizes POSIX roots, Windows drive roots and URLs with a scheme.

        Example:
            >>> tool = PathTool()
            >>> tool.is_absolute("/tmp"), tool.is_absolute("C:\\\\Windows"), tool.is_absolute("s3://bucket/key")
            (True, True, True)
            >>> tool.is_absolute("relative/path")
            False
        """
        path = os.fspath(path)
        if not path:
            return False
        return path.startswith(SEPARATORS) or bool(_DRIVE_RE.match(path)) or bool(_SCHEME_RE.match(path))

    def make_absolute(self, end_path: PathType, start_path: PathType) -> str:
        """Make a relative path absolute, prepending a start path.

        Args:
            end_path: The path to make absolute. Returned unchanged if already absolute.
            start_path: The absolute path to prepend.

        Returns:
            The absolute path.

        Raises:
            InvalidPathError: If ``start_path`` is not absolute.
        """
        end_path = os.fspath(end_path)
        start_path = os.fspath(start_path)
        if not self.is_absolute(start_path):
            raise InvalidPathError(f"The start path `{start_path}` is not absolute")
        if self.is_absolute(end_path):
            return end_path

        return self.concatenate(start_path, end_path)

    def make_relative(self, end_path: PathType, start_path: PathType) -> str:
        """Get the path of ``end_path`` relative to ``start_path``.

        Segments shared by both paths are stripped and every remaining segment of
        ``start_path`` becomes a ``..`` step.

        Args:
            end_path: The target path.
            start_path: The path the result is relative to.

        Returns:
            The normalized relative path, without a trailing separator. ``.`` when
            both paths are the same.

        Raises:
            InvalidPathError: If one path is absolute and the other is not.

        Example:
            >>> tool = PathTool()
            >>> tool.make_relative("/var/lib/app/src", "/var/lib/app/") == os.path.join("src")
            True
            >>> tool.make_relative("/var/log", "/var/lib/app") == os.path.join("..", "..", "log")
            True
            >>> tool.make_relative("/var/lib", "/var/lib/")
            '.'
        """
        end_path = os.fspath(end_path)
        start_path = os.fspath(start_path)
        if self.is_absolute(end_path) != self.is_absolute(start_path):
            raise InvalidPathError(
                f"The end path `{end_path}` and the start path `{start_path}` must be both absolute or both relative"
            )

        end_segments = self._split_segments(end_path)
        start_segments = self._split_segments(start_path)

        common = 0
        for end_segment, start_segment in zip(end_segments, start_segments):
            if end_segment != start_segment:
                break
            common += 1

        segments = [".."] * (len(start_segments) - common) + end_segments[common:]
        relative = self.normalize("/".join(segments) or ".")
        return relative.rstrip(os.sep) or relative

    def get_root(self) -> str:
        """Get the root path used for root-relative rendering.

        Raises:
            ConfigurationError: If no root has been configured.
        """
        return resolve_root(self.root)

    def root_relative(self, path: PathType) -> str:
        """Render a path relative to the root path.

        Absolute paths under the root lose the root prefix; every other path is
        returned as given. The trailing separator is always stripped.

        Args:
            path: Path to render.

        Returns:
            The rendered path.

        Raises:
            ConfigurationError: If no root has been configured.

        Example:
            >>> PathTool(root="/home/user/").root_relative("/other/file/")
            '/other/file'
        """
        path = os.fspath(path)
        root = self.get_root()
        if self.is_absolute(path) and path.startswith(root):
            path = self.normalize(self.make_relative(path, root))

        return path.rstrip(os.sep)

    rtr = root_relative

    def get_extension(self, filename: PathType) -> Optional[str]:
        """Get the extension of a filename.

        URL query strings and fragments are removed first, then any directory prefix.
        The extension starts after the first dot found at offset 1 or later, so hidden
        files have no extension and multi-part extensions (``sql.gz``) are kept whole.

        Args:
            filename: A filename, a path or a URL.

        Returns:
            The lower-cased extension, or None if there is none.

        Example:
            >>> tool = PathTool()
            >>> tool.get_extension("/full/path/to/BACKUP.SQL.GZ")
            'sql.gz'
            >>> tool.get_extension("http://example.com/backup.sql.gz?name=value#fragment")
            'sql.gz'
            >>> tool.get_extension(".hiddenFile") is None
            True
        """
        name = re.split(r"[?#]", os.fspath(filename), maxsplit=1)[0]
        name = re.split(r"[/\\]", name)[-1]

        position = name.find(".", 1)
        return None if position == -1 else name[position + 1 :].lower()

    def _split_segments(self, path: str) -> List[str]:
        """Split a path into segments, dropping empty and ``.`` segments and resolving ``..``."""
        segments: List[str] = []
        for segment in re.split(r"[/\\]", path):
            if segment in ("", "."):
                continue
            if segment == ".." and segments and segments[-1] != "..":
                segments.pop()
            else:
                segments.append(segment)
        return segments
