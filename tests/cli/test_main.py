"""Unit tests for the CLI main module."""

import errno
import os
from unittest.mock import MagicMock, patch

import pytest

from fstoolbox.cli.main import combine_rules, main
from fstoolbox.exclusion_rules.composite_rules import CompositeExclusionRules
from fstoolbox.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstoolbox.exclusion_rules.name_rules import NameExclusionRules


def run(argv):
    """Run the CLI and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_combine_rules():
    name_rules = NameExclusionRules(["node_modules"])
    pattern_rules = GitIgnoreExclusionRules()

    assert combine_rules(NameExclusionRules(), GitIgnoreExclusionRules()) is None
    assert combine_rules(name_rules, pattern_rules) is name_rules

    pattern_rules.add_rule("*.pyc")
    combined = combine_rules(name_rules, pattern_rules)
    assert isinstance(combined, CompositeExclusionRules)
    assert combined.get_rules() == [name_rules, pattern_rules]


def test_tree(example_dir, expected_dirs, expected_files, capsys):
    assert run(["tree", example_dir]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [d + os.sep for d in expected_dirs] + expected_files


def test_tree_with_exclusions(example_dir, capsys):
    assert run(["tree", "-H", "-x", "subDir2", "-i", "file[23]", example_dir]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        example_dir + os.sep,
        os.path.join(example_dir, "emptyDir") + os.sep,
        os.path.join(example_dir, "subDir1") + os.sep,
        os.path.join(example_dir, "file1"),
    ]


def test_tree_root_relative(example_dir, monkeypatch, capsys):
    monkeypatch.setenv("ROOT", os.path.dirname(example_dir) + os.sep)

    assert run(["tree", "-R", "-x", "subDir2", "-H", example_dir]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "exampleDir" + os.sep,
        os.path.join("exampleDir", "emptyDir") + os.sep,
        os.path.join("exampleDir", "subDir1") + os.sep,
        os.path.join("exampleDir", "file1"),
        os.path.join("exampleDir", "subDir1", "file2"),
        os.path.join("exampleDir", "subDir1", "file3"),
    ]


def test_tree_render(example_dir, capsys):
    assert run(["tree", "--render", "-H", example_dir]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == example_dir
    assert lines[1].endswith("emptyDir/")
    assert lines[2].endswith("file1")
    assert lines[-1].endswith("file6")
    assert not any(".hidden" in line for line in lines)


def test_tree_render_root_relative_conflict(example_dir, capsys):
    assert run(["tree", "--render", "--root-relative", example_dir]) == 2
    assert "--root-relative cannot be combined with --render" in capsys.readouterr().err


def test_tree_missing_directory(tmp_path, capsys):
    assert run(["tree", str(tmp_path / "noExisting")]) == 1
    assert "Error: Directory not found" in capsys.readouterr().err


def test_rmtree(example_dir, tmp_path, capsys):
    assert run(["rmtree", example_dir]) == 0
    assert not os.path.exists(example_dir)

    filename = tmp_path / "file"
    filename.write_text("content")
    assert run(["rmtree", str(filename)]) == 1
    assert f"Error: Not a directory: {filename}" in capsys.readouterr().err
    assert filename.exists()


def test_unlink(example_dir, expected_dirs, expected_files):
    assert run(["unlink", "-x", "file1", example_dir]) == 0

    assert [f for f in expected_files if os.path.exists(f)] == [os.path.join(example_dir, "file1")]
    assert all(os.path.isdir(d) for d in expected_dirs)


def test_unlink_missing_directory(tmp_path, capsys):
    missing = str(tmp_path / "noExisting")

    assert run(["unlink", "--ignore-errors", missing]) == 1
    assert capsys.readouterr().err == ""

    assert run(["unlink", missing]) == 1
    assert "Error: Directory not found" in capsys.readouterr().err


def test_unlink_permission_denied(example_dir, capsys):
    with patch("fstoolbox.remover.os.unlink", side_effect=PermissionError(errno.EACCES, "Permission denied")):
        assert run(["unlink", example_dir]) == 126

    assert "Error: Failed to remove file" in capsys.readouterr().err


def test_writable(example_dir, capsys):
    assert run(["writable", "-f", example_dir]) == 0
    assert capsys.readouterr().out == "writable\n"

    with patch("fstoolbox.writability.os.access", return_value=False):
        assert run(["writable", example_dir]) == 1
    assert capsys.readouterr().out == "not writable\n"


def test_writable_missing_directory(tmp_path, capsys):
    assert run(["writable", "--ignore-errors", str(tmp_path / "noExisting")]) == 1
    assert capsys.readouterr().out == "not writable\n"


def test_rtr(capsys):
    assert run(["rtr", "--root", "/srv/app/", "/srv/app/logs/error.log", "/other/file/", "relative"]) == 0
    assert capsys.readouterr().out.splitlines() == ["logs/error.log", "/other/file", "relative"]


def test_rtr_without_root(no_root, capsys):
    assert run(["rtr", "/srv/app/logs/error.log"]) == 1
    assert "Error: No root path has been set" in capsys.readouterr().err


def test_ext(capsys):
    assert run(["ext", "backup.sql.gz", "http://example.com/a.TXT?x=1", ".hiddenFile"]) == 0
    assert capsys.readouterr().out.splitlines() == ["sql.gz", "txt", ""]


def test_broken_pipe(example_dir):
    with patch.dict("fstoolbox.cli.main.COMMANDS", {"tree": MagicMock(side_effect=BrokenPipeError)}), patch(
        "fstoolbox.cli.main.os.dup2"
    ) as dup2, patch("fstoolbox.cli.main.sys.stdout"):
        assert run(["tree", example_dir]) == 141
    dup2.assert_called_once()
