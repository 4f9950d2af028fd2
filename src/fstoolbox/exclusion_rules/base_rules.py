from abc import ABC, abstractmethod
from typing import Sequence, Union

from fstoolbox.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Exclusion rules decide which entries a tree walk leaves out. The walker calls
    ``exclude()`` with the path of each entry relative to the walked root, using
    forward slashes and a trailing slash for directories. An excluded directory is
    pruned together with everything beneath it.

    Loading rules from files and adding single rules are optional capabilities that
    depend on the rule type.

    Example:
        >>> from fstoolbox.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["build"])
        >>> rules.exclude("src/build/")
        True
        >>> rules.exclude("src/builder.py")
        False
        >>> # rules.load_rules('file.txt')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the walked root, with forward slashes.
                Directories carry a trailing slash.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Tell whether any rule is configured.

        Returns:
            bool: True unless a subclass reports that it is empty.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. Its format depends on the rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
