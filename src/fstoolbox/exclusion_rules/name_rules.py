"""Exclusion rules matching entries by their literal name."""

from typing import Iterable, Optional, Set, Union

from .base_rules import BaseExclusionRules

# Name that stands for "every dot-entry" in a list of exceptions
DOT_ENTRIES = "."


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching the basename of an entry against a set of literal names.

    Names are compared for equality with the last segment of the path: no globbing,
    no substring matching. A name excludes files and directories alike. Independently
    of the names, every dot-entry (a file or directory whose name starts with ``.``)
    can be excluded.

    Attributes:
        names (Set[str]): Literal names to exclude.
        exclude_dot_entries (bool): Whether entries whose name starts with a dot are excluded.

    Example:
        >>> rules = NameExclusionRules(["file2", "subDir2"])
        >>> rules.exclude("file2"), rules.exclude("subDir1/file2"), rules.exclude("subDir2/")
        (True, True, True)
        >>> rules.exclude("file20")
        False
        >>> rules.exclude(".hiddenFile")
        False
        >>> NameExclusionRules(exclude_dot_entries=True).exclude("sub/.hiddenDir/")
        True
    """

    def __init__(self, names: Optional[Iterable[str]] = None, exclude_dot_entries: bool = False):
        """Initialize NameExclusionRules.

        Args:
            names: Literal names to exclude. The special name ``.`` is not stored as a name;
                it turns on ``exclude_dot_entries`` instead.
            exclude_dot_entries: Whether to exclude entries whose name starts with a dot.
        """
        self.names: Set[str] = set()
        self.exclude_dot_entries = exclude_dot_entries

        for name in names or ():
            self.add_rule(name)

    @classmethod
    def from_exceptions(cls, exceptions: Union[None, bool, str, Iterable[str]]) -> "NameExclusionRules":
        """Build rules from the loose forms accepted by the walker.

        Args:
            exceptions: Either None or False (exclude nothing), True (exclude dot-entries),
                a single name, or an iterable of names where ``.`` stands for dot-entries.

        Returns:
            The equivalent NameExclusionRules.

        Example:
            >>> rules = NameExclusionRules.from_exceptions([".", "cache"])
            >>> rules.exclude_dot_entries, sorted(rules.names)
            (True, ['cache'])
            >>> NameExclusionRules.from_exceptions(True).has_rules()
            True
            >>> NameExclusionRules.from_exceptions(False).has_rules()
            False
        """
        if exceptions is None or isinstance(exceptions, bool):
            return cls(exclude_dot_entries=bool(exceptions))
        if isinstance(exceptions, str):
            exceptions = [exceptions]

        return cls(exceptions)

    def exclude(self, path: str) -> bool:
        """Check if the basename of a path is an excluded name or a dot-entry.

        Args:
            path: Relative path of the entry, possibly with a trailing slash.

        Returns:
            True if the entry should be excluded.
        """
        name = path.rstrip("/\\").replace("\\", "/").rsplit("/", 1)[-1]
        if not name:
            return False
        if self.exclude_dot_entries and name.startswith("."):
            return True
        return name in self.names

    def add_rule(self, rule: str) -> None:
        """Add a literal name to exclude.

        Args:
            rule: The name to exclude, or ``.`` to exclude dot-entries.
        """
        if rule == DOT_ENTRIES:
            self.exclude_dot_entries = True
        else:
            self.names.add(rule)

    def has_rules(self) -> bool:
        """Check if any name is configured or dot-entries are excluded."""
        return self.exclude_dot_entries or bool(self.names)
