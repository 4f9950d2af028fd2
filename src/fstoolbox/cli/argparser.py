"""Command-line argument parsing for fstoolbox.

This module defines the sub-commands of the fstoolbox command-line interface and
the options they share.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from fstoolbox import __version__
from fstoolbox.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstoolbox.exclusion_rules.name_rules import NameExclusionRules


def create_exclusion_action(
    pattern_rules: GitIgnoreExclusionRules, name_rules: NameExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class feeding exclusion options into rule objects.

    Patterns and pattern files are added to ``pattern_rules`` in the order they appear
    on the command line, so later negations override earlier patterns. Literal names
    go to ``name_rules``.

    Args:
        pattern_rules: Rules receiving -e/--exclude files and -i/--ignore patterns.
        name_rules: Rules receiving -x/--exclude-name names.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action updating the exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    pattern_rules.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            elif option_string in ("-i", "--ignore"):
                pattern_rules.add_rule(str(values))
            else:  # -x/--exclude-name
                name_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def _add_exclusion_arguments(parser: argparse.ArgumentParser, action: Type[argparse.Action]) -> None:
    parser.add_argument(
        "-x",
        "--exclude-name",
        metavar="NAME",
        action=action,
        help="Exclude files and directories with exactly this name (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action=action,
        help=(
            "Exclude entries matching a gitignore-style pattern, e.g. '*.pyc', 'build/' or '!keep.log' "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=action,
        help="Exclude entries matching the patterns of a .gitignore-style file (can be specified multiple times).",
    )
    parser.add_argument(
        "-H",
        "--skip-hidden",
        action="store_true",
        help="Exclude dot-files and dot-directories.",
    )


def create_parser(pattern_rules: GitIgnoreExclusionRules, name_rules: NameExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        pattern_rules: Rules updated by pattern-based exclusion options.
        name_rules: Rules updated by name-based exclusion options.

    Returns:
        An ArgumentParser instance configured with the fstoolbox sub-commands.
    """
    epilog = """
    Examples:
      # List every directory and file under a project, skipping hidden entries
      fstoolbox tree -H /path/to/project

      # Draw the hierarchy, leaving out build output
      fstoolbox tree --render -i "build/" -x node_modules /path/to/project

      # Remove the files of a cache directory, keeping its directories and .gitkeep files
      fstoolbox unlink -x .gitkeep /path/to/cache

      # Check that a directory and all its files are writable
      fstoolbox writable --include-files /path/to/uploads

      # Render paths relative to a root
      fstoolbox rtr --root /srv/app /srv/app/logs/error.log
    """

    parser = argparse.ArgumentParser(
        prog="fstoolbox",
        description="fstoolbox: walk, clean and inspect directory trees.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"fstoolbox {__version__}", help="Show the version and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")

    ExclusionAction = create_exclusion_action(pattern_rules, name_rules)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    tree = subparsers.add_parser("tree", help="List the directories and files under a directory.")
    tree.add_argument("directory", type=Path, help="The directory to walk.")
    _add_exclusion_arguments(tree, ExclusionAction)
    tree.add_argument("-r", "--render", action="store_true", help="Draw the hierarchy instead of flat lists.")
    tree.add_argument(
        "-R",
        "--root-relative",
        action="store_true",
        help="Print paths relative to the root path (ROOT environment variable).",
    )
    tree.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories. By default symlinks are listed as files.",
    )

    rmtree = subparsers.add_parser("rmtree", help="Remove a directory and everything beneath it.")
    rmtree.add_argument("directory", type=Path, help="The directory to remove.")

    unlink = subparsers.add_parser("unlink", help="Remove the files under a directory, keeping the directories.")
    unlink.add_argument("directory", type=Path, help="The directory to clean.")
    _add_exclusion_arguments(unlink, ExclusionAction)
    unlink.add_argument("--ignore-errors", action="store_true", help="Exit quietly with status 1 on failures.")

    writable = subparsers.add_parser("writable", help="Check that a directory tree is readable and writable.")
    writable.add_argument("directory", type=Path, help="The directory to check.")
    writable.add_argument("-f", "--include-files", action="store_true", help="Check files as well as directories.")
    writable.add_argument("--ignore-errors", action="store_true", help="Report a missing directory as not writable.")

    rtr = subparsers.add_parser("rtr", help="Render paths relative to the root path.")
    rtr.add_argument("paths", nargs="+", metavar="PATH", help="Paths to render.")
    rtr.add_argument("--root", help="Root path. Defaults to the ROOT environment variable.")

    ext = subparsers.add_parser("ext", help="Print the extension of filenames or URLs.")
    ext.add_argument("filenames", nargs="+", metavar="FILENAME", help="Filenames or URLs.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if getattr(args, "root_relative", False) and getattr(args, "render", False):
        raise ValueError("--root-relative cannot be combined with --render")
