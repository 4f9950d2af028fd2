"""Unit tests for the FileIdentifier class."""

import os

from fstoolbox.file_system_tree.file_identifier import FileIdentifier


def test_equality_and_hashing():
    assert FileIdentifier(1, 2) == FileIdentifier(1, 2)
    assert FileIdentifier(1, 2) != FileIdentifier(2, 1)
    assert len({FileIdentifier(1, 2), FileIdentifier(1, 2)}) == 1


def test_from_path(tmp_path):
    stat_info = os.stat(tmp_path)
    assert FileIdentifier.from_path(str(tmp_path)) == FileIdentifier(stat_info.st_dev, stat_info.st_ino)


def test_from_path_follows_symlinks(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        return

    assert FileIdentifier.from_path(str(link)) == FileIdentifier.from_path(str(target))


def test_from_path_missing(tmp_path):
    assert FileIdentifier.from_path(str(tmp_path / "missing")) is None
