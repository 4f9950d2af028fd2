"""Recursive directory walking into flat lists of directories and files.

The walker first builds an anytree tree of FileSystemNode objects, pruning excluded
entries as it goes, and then flattens it into a Tree. Both steps are exposed so that
callers can either consume the flat lists or render the hierarchy.
"""

import logging
import os
from typing import Iterable, Optional, Set, Union

from anytree import PreOrderIter, RenderTree

from fstoolbox.exceptions import DirectoryNotFoundError
from fstoolbox.exclusion_rules.base_rules import BaseExclusionRules
from fstoolbox.exclusion_rules.name_rules import NameExclusionRules
from fstoolbox.file_system_tree.file_identifier import FileIdentifier
from fstoolbox.file_system_tree.file_system_node import FileSystemNode
from fstoolbox.path_tool import PathTool
from fstoolbox.types import PathType, Tree

logger = logging.getLogger(__name__)

# Everything the walker accepts as ``exceptions``
ExceptionsType = Union[None, bool, str, Iterable[str], BaseExclusionRules]


class TreeWalker:
    """Walks a directory recursively and returns its directories and files.

    Entries are visited in name order at every level. Directories come out in
    pre-order, starting with the walked root; files are grouped by directory in the
    same order, a directory's own files before those of its subdirectories.

    Exclusions:
        The ``exceptions`` argument of ``walk()`` accepts None or False (nothing
        excluded), True (dot-entries excluded), a name or a list of names (``.``
        standing for dot-entries), or any BaseExclusionRules. Names match the
        basename of an entry exactly. An excluded directory is pruned together with
        everything beneath it.

    Error Handling:
        A root that is missing or is not a directory raises DirectoryNotFoundError,
        or yields an empty Tree when ``ignore_errors`` is set. Subdirectories that
        cannot be listed are always tolerated: they are kept in the result, their
        contents are skipped and the walk goes on.

    Symbolic Link Behavior:
        By default symlinks are listed as files and never descended into. With
        ``follow_symlinks`` set, symlinked directories are walked like real ones;
        a link leading back to a directory of the current branch is listed as a file
        and not followed.

    Attributes:
        path_tool (PathTool): Used to normalize the root path.
        follow_symlinks (bool): Whether to descend into symlinked directories.

    Example:
        >>> walker = TreeWalker()
        >>> directories, files = walker.walk("project", exceptions=["node_modules", "."])  # doctest: +SKIP
        >>> directories[0]  # doctest: +SKIP
        'project'
    """

    def __init__(self, path_tool: Optional[PathTool] = None, follow_symlinks: bool = False) -> None:
        self.path_tool = path_tool or PathTool()
        self.follow_symlinks = follow_symlinks

    def walk(self, path: PathType, exceptions: ExceptionsType = None, ignore_errors: bool = False) -> Tree:
        """Walk a directory and return its directories and files.

        Args:
            path: The directory to walk. It is normalized and stripped of trailing
                separators, unless it is the filesystem root.
            exceptions: Entries to exclude (see the class documentation).
            ignore_errors: If True, a missing root yields an empty Tree instead of raising.

        Returns:
            The Tree of directories (root first) and files.

        Raises:
            DirectoryNotFoundError: If ``path`` is missing or not a directory and
                ``ignore_errors`` is False.
        """
        try:
            root = self.build(path, exceptions)
        except DirectoryNotFoundError:
            if not ignore_errors:
                raise
            return Tree.empty()

        return self.flatten(root)

    def build(self, path: PathType, exceptions: ExceptionsType = None) -> FileSystemNode:
        """Build the tree of entries under a directory.

        Args:
            path: The directory to walk.
            exceptions: Entries to exclude (see the class documentation).

        Returns:
            The root node. Its ``full_path`` is the normalized root path.

        Raises:
            DirectoryNotFoundError: If ``path`` is missing or not a directory.
        """
        root_path = self._prepare_root(path)
        if not os.path.exists(root_path):
            raise DirectoryNotFoundError(root_path)
        if not os.path.isdir(root_path):
            raise DirectoryNotFoundError(root_path, f"Not a directory: {root_path}")

        rules = self._build_exclusion_rules(exceptions)
        root = FileSystemNode(os.path.basename(root_path) or root_path, full_path=root_path, is_dir=True)

        visited: Set[FileIdentifier] = set()
        if self.follow_symlinks:
            root_id = FileIdentifier.from_path(root_path)
            if root_id is not None:
                visited.add(root_id)

        self._populate(root, "", rules, visited)
        return root

    def flatten(self, root: FileSystemNode) -> Tree:
        """Flatten a built tree into its directory and file lists."""
        directories = []
        files = []
        for node in PreOrderIter(root, filter_=lambda n: n.is_dir):
            directories.append(node.full_path)
            files.extend(child.full_path for child in node.children if not child.is_dir)

        return Tree(directories, files)

    def render(self, path: PathType, exceptions: ExceptionsType = None) -> str:
        """Render the walked hierarchy one entry per line, like the Unix ``tree`` command.

        Raises:
            DirectoryNotFoundError: If ``path`` is missing or not a directory.
        """
        root = self.build(path, exceptions)
        lines = []
        for prefix, _, node in RenderTree(root):
            name = node.full_path if node is root else node.display_name
            lines.append(f"{prefix}{name}")

        return "\n".join(lines)

    def _prepare_root(self, path: PathType) -> str:
        path = self.path_tool.normalize(path)
        return path if path == os.sep else path.rstrip(os.sep)

    def _build_exclusion_rules(self, exceptions: ExceptionsType) -> Optional[BaseExclusionRules]:
        if isinstance(exceptions, BaseExclusionRules):
            return exceptions

        rules = NameExclusionRules.from_exceptions(exceptions)
        return rules if rules.has_rules() else None

    def _populate(
        self,
        node: FileSystemNode,
        relative_path: str,
        rules: Optional[BaseExclusionRules],
        visited: Set[FileIdentifier],
    ) -> None:
        """Attach the children of a directory node, recursing into subdirectories."""
        try:
            names = sorted(os.listdir(node.full_path))
        except OSError as e:
            # The directory stays in the result, only its contents are skipped
            logger.debug("Skipping unreadable directory %s: %s", node.full_path, e)
            return

        for name in names:
            child_path = os.path.join(node.full_path, name)
            child_relative_path = relative_path + name
            is_symlink = os.path.islink(child_path)
            points_to_dir = os.path.isdir(child_path)

            # Directories are matched with a trailing slash, as in .gitignore files
            if rules is not None and rules.exclude(child_relative_path + "/" if points_to_dir else child_relative_path):
                continue

            is_dir = points_to_dir and (not is_symlink or self.follow_symlinks)
            child_id = None
            if is_dir and self.follow_symlinks:
                child_id = FileIdentifier.from_path(child_path)
                if child_id is not None and child_id in visited:
                    logger.debug("Not following symlink loop at %s", child_path)
                    is_dir = False

            child = FileSystemNode(
                name,
                parent=node,
                full_path=child_path,
                is_dir=is_dir,
                is_symlink=is_symlink,
                symlink_target=self._read_link(child_path) if is_symlink else None,
            )

            if not is_dir:
                continue

            if child_id is not None:
                visited.add(child_id)
            self._populate(child, child_relative_path + "/", rules, visited)
            if child_id is not None:
                visited.discard(child_id)

    @staticmethod
    def _read_link(path: str) -> Optional[str]:
        try:
            return os.readlink(path)
        except OSError:
            return None
