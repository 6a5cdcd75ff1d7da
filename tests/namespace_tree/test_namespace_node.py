"""Unit tests for the NamespaceNode class."""

import pytest

from imfs.namespace_tree.namespace_node import NamespaceNode
from imfs.types import NodeType


def test_namespace_node_initialization():
    """Test basic initialization of NamespaceNode."""
    # Test file node
    file_node = NamespaceNode.file("notes.txt")
    assert file_node.name == "notes.txt"
    assert file_node.node_type is NodeType.FILE
    assert file_node.is_file
    assert not file_node.is_dir
    assert file_node.content == ""

    # Test directory node
    dir_node = NamespaceNode.directory("docs")
    assert dir_node.name == "docs"
    assert dir_node.node_type is NodeType.DIRECTORY
    assert dir_node.is_dir
    assert not dir_node.is_file
    assert dir_node.content is None


def test_namespace_node_file_content():
    node = NamespaceNode.file("notes.txt", content="hello")
    assert node.content == "hello"

    # Directories ignore any content passed in
    directory = NamespaceNode("docs", NodeType.DIRECTORY, content="ignored")
    assert directory.content is None


def test_namespace_node_type_is_read_only():
    node = NamespaceNode.file("notes.txt")
    with pytest.raises(AttributeError):
        node.node_type = NodeType.DIRECTORY
    assert node.is_file


def test_namespace_node_parent_child():
    """Test parent-child relationships in NamespaceNode."""
    root = NamespaceNode.directory("")
    child1 = NamespaceNode.directory("child1", parent=root)
    child2 = NamespaceNode.file("child2", parent=root)
    grandchild = NamespaceNode.file("grandchild", parent=child1)

    assert child1.parent == root
    assert child2.parent == root
    assert grandchild.parent == child1
    assert root.parent is None

    assert len(root.children) == 2
    assert len(child1.children) == 1
    assert len(child2.children) == 0


def test_namespace_node_children_keep_insertion_order():
    root = NamespaceNode.directory("")
    for name in ["zeta", "alpha", "mid"]:
        NamespaceNode.directory(name, parent=root)
    assert root.child_names() == ["zeta", "alpha", "mid"]


def test_namespace_node_get_child():
    root = NamespaceNode.directory("")
    docs = NamespaceNode.directory("docs", parent=root)
    assert root.get_child("docs") is docs
    assert root.get_child("missing") is None
    assert docs.get_child("docs") is None


def test_namespace_node_file_cannot_have_children():
    notes = NamespaceNode.file("notes.txt")
    with pytest.raises(TypeError):
        NamespaceNode.file("inner", parent=notes)
    assert notes.children == ()


def test_namespace_node_detach_removes_subtree():
    root = NamespaceNode.directory("")
    docs = NamespaceNode.directory("docs", parent=root)
    NamespaceNode.file("notes.txt", parent=docs)
    docs.parent = None
    assert root.children == ()
    assert docs.child_names() == ["notes.txt"]
