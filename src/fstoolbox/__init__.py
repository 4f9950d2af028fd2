"""Filesystem tree-walking and path utilities.

This package provides tools for normalizing and converting paths, walking
directory trees into flat lists of directories and files, and removing or
probing those trees.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstoolbox")
except PackageNotFoundError:
    __version__ = "unknown"
