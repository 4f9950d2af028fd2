"""Test configuration and fixtures for fstoolbox."""

import os

import pytest


@pytest.fixture
def example_dir(tmp_path):
    """Create a directory tree with hidden entries, an empty directory and nested subdirectories.

    Returns the path of the tree as a string, without a trailing separator.
    """
    root = tmp_path / "exampleDir"
    for directory in (".hiddenDir", "emptyDir", "subDir1", os.path.join("subDir2", "subDir3")):
        (root / directory).mkdir(parents=True)
    for filename in (
        ".hiddenFile",
        "file1",
        os.path.join(".hiddenDir", "file7"),
        os.path.join("subDir1", "file2"),
        os.path.join("subDir1", "file3"),
        os.path.join("subDir2", "file4"),
        os.path.join("subDir2", "file5"),
        os.path.join("subDir2", "subDir3", "file6"),
    ):
        (root / filename).write_text(filename)
    return str(root)


@pytest.fixture
def expected_dirs(example_dir):
    """Directories of ``example_dir`` in walk order."""
    return [
        example_dir,
        os.path.join(example_dir, ".hiddenDir"),
        os.path.join(example_dir, "emptyDir"),
        os.path.join(example_dir, "subDir1"),
        os.path.join(example_dir, "subDir2"),
        os.path.join(example_dir, "subDir2", "subDir3"),
    ]


@pytest.fixture
def expected_files(example_dir):
    """Files of ``example_dir`` in walk order."""
    return [
        os.path.join(example_dir, ".hiddenFile"),
        os.path.join(example_dir, "file1"),
        os.path.join(example_dir, ".hiddenDir", "file7"),
        os.path.join(example_dir, "subDir1", "file2"),
        os.path.join(example_dir, "subDir1", "file3"),
        os.path.join(example_dir, "subDir2", "file4"),
        os.path.join(example_dir, "subDir2", "file5"),
        os.path.join(example_dir, "subDir2", "subDir3", "file6"),
    ]


@pytest.fixture
def no_root(monkeypatch):
    """Make sure no root path is configured."""
    monkeypatch.delenv("ROOT", raising=False)
    monkeypatch.setattr("fstoolbox.config.ROOT", None)
