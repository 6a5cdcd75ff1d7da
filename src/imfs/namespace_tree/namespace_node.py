"""Node representation for directories and files in the namespace tree."""

from typing import Any, List, Optional

from anytree import Node

from imfs.types import NodeType


class NamespaceNode(Node):  # type: ignore
    """Node class representing a directory or a file in the namespace tree.

    Extends anytree.Node with an immutable node type and, for files, a string payload.
    anytree keeps ``children`` in the order they were attached, which is the listing
    order of a directory. Names are unique among the children of one directory; the
    tree enforces that on insertion, the node itself does not.

    Attributes:
        name (str): The name of the entry (a single segment, never a path).
        parent (Optional[NamespaceNode]): The containing directory, None for the root.
        node_type (NodeType): Whether this node is a directory or a file. Read-only.
        content (Optional[str]): File contents; always None for directories.
        children (tuple[NamespaceNode]): Child entries (inherited from anytree.Node).

    Example:
        >>> root = NamespaceNode.directory("")
        >>> notes = NamespaceNode.file("notes.txt", parent=root)
        >>> root.get_child("notes.txt") is notes
        True
        >>> notes.is_file, notes.content
        (True, '')
    """

    def __init__(
        self,
        name: str,
        node_type: NodeType,
        parent: Optional["NamespaceNode"] = None,
        content: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a NamespaceNode.

        Args:
            name: The name of the entry.
            node_type: Whether the entry is a directory or a file.
            parent: The containing directory node. Defaults to None.
            content: Initial file contents. Ignored for directories; defaults to ""
                for files.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        self._node_type = node_type
        super().__init__(name, parent, **kwargs)
        if node_type is NodeType.FILE:
            self.content = "" if content is None else content
        else:
            self.content = None

    @classmethod
    def directory(cls, name: str, parent: Optional["NamespaceNode"] = None) -> "NamespaceNode":
        """Create an empty directory node."""
        return cls(name, NodeType.DIRECTORY, parent=parent)

    @classmethod
    def file(cls, name: str, parent: Optional["NamespaceNode"] = None, content: str = "") -> "NamespaceNode":
        """Create a file node holding ``content``."""
        return cls(name, NodeType.FILE, parent=parent, content=content)

    @property
    def node_type(self) -> NodeType:
        return self._node_type

    @property
    def is_dir(self) -> bool:
        return self._node_type is NodeType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self._node_type is NodeType.FILE

    def _pre_attach(self, parent: Node) -> None:
        # Only directories may hold children
        if not getattr(parent, "is_dir", False):
            raise TypeError(f"Cannot attach '{self.name}' under non-directory '{parent.name}'")

    def get_child(self, name: str) -> Optional["NamespaceNode"]:
        """Return the direct child called ``name``, or None if there is none.

        Args:
            name: The exact child name to look up.

        Returns:
            The matching child node, or None. Files never have children.
        """
        for child in self.children:
            if child.name == name:
                return child  # type: ignore[no-any-return]
        return None

    def child_names(self) -> List[str]:
        """Return the names of the direct children in insertion order."""
        return [child.name for child in self.children]
