"""Unit tests for the FileSystemNode class."""

from fstoolbox.file_system_tree.file_system_node import FileSystemNode


def test_file_system_node_initialization():
    file_node = FileSystemNode("file.txt", full_path="root/file.txt")
    assert file_node.name == "file.txt"
    assert file_node.full_path == "root/file.txt"
    assert not file_node.is_dir
    assert not file_node.is_symlink
    assert file_node.symlink_target is None

    # Without a full path, the name is used
    assert FileSystemNode("dir", is_dir=True).full_path == "dir"


def test_file_system_node_parent_child():
    root = FileSystemNode("root", full_path="root", is_dir=True)
    child1 = FileSystemNode("child1", parent=root, full_path="root/child1", is_dir=True)
    child2 = FileSystemNode("child2", parent=root, full_path="root/child2")
    grandchild = FileSystemNode("grandchild", parent=child1, full_path="root/child1/grandchild")

    assert child1.parent is root
    assert grandchild.parent is child1
    assert root.children == (child1, child2)
    assert grandchild.root is root


def test_display_name():
    assert FileSystemNode("dir", is_dir=True).display_name == "dir/"
    assert FileSystemNode("file.txt").display_name == "file.txt"
    assert FileSystemNode("link", is_symlink=True, symlink_target="../target").display_name == "link -> ../target"
    assert FileSystemNode("link", is_symlink=True).display_name == "link"
