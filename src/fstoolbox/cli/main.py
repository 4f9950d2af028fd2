"""Command-line interface for fstoolbox.

Sub-commands:
    tree      List (or draw) the directories and files under a directory
    rmtree    Remove a directory and everything beneath it
    unlink    Remove the files under a directory, keeping the directories
    writable  Check that a directory tree is readable and writable
    rtr       Render paths relative to the root path
    ext       Print the extension of filenames or URLs

Exit Codes:
    0: Successful completion
    1: Runtime error, or a negative answer (not a directory, not writable)
    2: Command-line syntax error
    126: Permission denied
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    $ fstoolbox tree -H -x node_modules /path/to/project
"""

import argparse
import errno
import logging
import os
import sys
from typing import Callable, Dict, List, Optional

from fstoolbox.cli.argparser import create_parser, validate_args
from fstoolbox.exclusion_rules.base_rules import BaseExclusionRules
from fstoolbox.exclusion_rules.composite_rules import CompositeExclusionRules
from fstoolbox.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstoolbox.exclusion_rules.name_rules import NameExclusionRules
from fstoolbox.file_system_tree.tree_walker import TreeWalker
from fstoolbox.path_tool import PathTool
from fstoolbox.remover import RecursiveRemover
from fstoolbox.writability import WritabilityProbe

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def combine_rules(*rules: BaseExclusionRules) -> Optional[BaseExclusionRules]:
    """Combine the configured exclusion rules, dropping the empty ones.

    Returns:
        None if no rule is configured, the single configured rule, or a composite.
    """
    configured = [rule for rule in rules if rule.has_rules()]
    if not configured:
        return None
    if len(configured) == 1:
        return configured[0]
    return CompositeExclusionRules(configured)


def run_tree(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    walker = TreeWalker(follow_symlinks=args.follow_symlinks)
    if args.render:
        print(walker.render(args.directory, rules))
        return 0

    directories, files = walker.walk(args.directory, rules)
    path_tool = PathTool()
    render: Callable[[str], str] = path_tool.root_relative if args.root_relative else str
    for directory in directories:
        print(path_tool.add_slash_term(render(directory)))
    for filename in files:
        print(render(filename))
    return 0


def run_rmtree(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    if not RecursiveRemover().remove_tree(args.directory):
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 1
    return 0


def run_unlink(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    removed = RecursiveRemover().remove_files_only(args.directory, rules, ignore_errors=args.ignore_errors)
    return 0 if removed else 1


def run_writable(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    writable = WritabilityProbe().is_writable_recursive(
        args.directory, check_only_directories=not args.include_files, ignore_errors=args.ignore_errors
    )
    print("writable" if writable else "not writable")
    return 0 if writable else 1


def run_rtr(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    path_tool = PathTool(root=args.root)
    for path in args.paths:
        print(path_tool.root_relative(path))
    return 0


def run_ext(args: argparse.Namespace, rules: Optional[BaseExclusionRules]) -> int:
    path_tool = PathTool()
    for filename in args.filenames:
        print(path_tool.get_extension(filename) or "")
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, Optional[BaseExclusionRules]], int]] = {
    "tree": run_tree,
    "rmtree": run_rmtree,
    "unlink": run_unlink,
    "writable": run_writable,
    "rtr": run_rtr,
    "ext": run_ext,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the fstoolbox command-line interface.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error, or a negative answer
        2: Command-line syntax error
        126: Permission denied
        141: Broken pipe
    """
    pattern_rules = GitIgnoreExclusionRules()
    name_rules = NameExclusionRules()

    # argparse exits with status 2 on syntax errors and 0 for --version
    parser = create_parser(pattern_rules, name_rules)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    if getattr(args, "skip_hidden", False):
        name_rules.exclude_dot_entries = True
    rules = combine_rules(name_rules, pattern_rules)

    try:
        exit_code = COMMANDS[args.command](args, rules)
    except BrokenPipeError:
        # Keep the interpreter from complaining again while flushing at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except OSError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if e.errno in (errno.EACCES, errno.EPERM) else 1)
    except Exception as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
