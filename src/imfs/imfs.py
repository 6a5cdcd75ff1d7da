"""In-memory hierarchical filesystem.

This module provides the Imfs class: a tree of named directories and files held
entirely in memory, together with a current directory, and the small command set
used to inspect and change them.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter
from anytree.search import findall

from imfs.exceptions import (
    AlreadyExistsError,
    AtRootError,
    EntryIsDirectoryError,
    EntryIsFileError,
    InternalInconsistencyError,
    NoSuchEntryError,
)
from imfs.namespace_tree.name_validator import MAX_NAME_LENGTH, NameValidator
from imfs.namespace_tree.namespace_node import NamespaceNode
from imfs.namespace_tree.path_resolver import is_absolute, join_path, resolve_directory, split_file_path
from imfs.types import NodeType, Segments

logger = logging.getLogger(__name__)

PARENT_DIRECTORY = ".."


def _node_path(node: NamespaceNode) -> str:
    # node.path starts with the nameless root
    return join_path([ancestor.name for ancestor in node.path[1:]])


class Imfs:
    """An ephemeral in-memory filesystem with a current directory.

    The filesystem is a tree rooted at an empty directory. Directories hold named
    children in insertion order; files hold a single string. Files and directories
    share one namespace inside a directory.

    The current directory is stored as the list of names leading to it from the
    root, never as a node reference. It is walked from the root on every access, so
    no operation can observe a node that has since been detached from the tree.

    Every operation either completes or raises an ImfsError without changing the
    tree or the current directory. Instances share no state with each other.

    Attributes:
        validator (NameValidator): Naming rules applied to new entries and the
            character rule applied to path segments.

    Example:
        >>> fs = Imfs()
        >>> fs.pwd()
        '/'
        >>> fs.mkdir("docs")
        >>> fs.cd("docs")
        >>> fs.touch("notes.txt")
        >>> fs.write("notes.txt", "hello")
        >>> fs.read("/docs/notes.txt")
        'hello'
        >>> fs.pwd()
        '/docs'
        >>> print(fs.get_tree_representation())
        /
        └── docs/
            └── notes.txt
    """

    def __init__(self, max_name_length: int = MAX_NAME_LENGTH) -> None:
        """Initialize an empty filesystem positioned at the root.

        Args:
            max_name_length: Longest name accepted for new entries. Defaults to 256.

        Raises:
            ValueError: If max_name_length is less than 1.
        """
        self.validator = NameValidator(max_name_length=max_name_length)
        self._root = NamespaceNode.directory("")
        self._current_path: Segments = []

    def _get_current_directory(self) -> NamespaceNode:
        """Walk the current path from the root and return the directory it names.

        Raises:
            InternalInconsistencyError: If the current path no longer resolves to a
                directory.
        """
        node = self._root
        for entry in self._current_path:
            child = node.get_child(entry)
            if child is None or not child.is_dir:
                raise InternalInconsistencyError()
            node = child
        return node

    def _resolve_target_directory(self, path: Optional[str]) -> NamespaceNode:
        current = self._get_current_directory()
        if path is None:
            return current
        node, _ = resolve_directory(self._root, current, self._current_path, path, self.validator)
        return node

    def _locate_file(self, filepath: str) -> NamespaceNode:
        """Find the file named by ``filepath``.

        Absolute paths name a file inside a directory resolved from the root; any
        other value is a bare file name in the current directory.

        Raises:
            InvalidPathCharacterError: If a directory segment contains an invalid character.
            PathNotFoundError: If a directory segment does not exist.
            EntryIsFileError: If a directory segment names a file.
            NoSuchEntryError: If the file name does not exist.
            EntryIsDirectoryError: If the file name names a directory.
        """
        if is_absolute(filepath):
            directory_path, filename = split_file_path(filepath)
            directory = self._resolve_target_directory(directory_path)
        else:
            directory = self._get_current_directory()
            filename = filepath
        node = directory.get_child(filename)
        if node is None:
            raise NoSuchEntryError(filename)
        if not node.is_file:
            raise EntryIsDirectoryError(filename)
        return node

    def _create(self, name: str, node_type: NodeType, path: Optional[str]) -> None:
        self.validator.validate(name)
        directory = self._resolve_target_directory(path)
        if directory.get_child(name) is not None:
            raise AlreadyExistsError(name)
        node = NamespaceNode(name, node_type, parent=directory)
        logger.debug("Created %s %s", node_type.value, _node_path(node))

    def pwd(self) -> str:
        """Return the absolute path of the current directory; the root is ``/``."""
        return join_path(self._current_path)

    def ls(self, path: Optional[str] = None) -> List[str]:
        """List the names in a directory, in the order they were created.

        Only a path whose first character is ``/`` is resolved from the root; any
        other path, including one with leading whitespace, starts at the current
        directory. Every segment is character-checked before the walk begins, so an
        invalid character anywhere in the path is reported ahead of a missing segment.

        Args:
            path: Directory to list. Defaults to the current directory.

        Returns:
            The child names of the directory.

        Raises:
            InvalidPathCharacterError: If a path segment contains an invalid character.
            PathNotFoundError: If a path segment does not exist.
            EntryIsFileError: If a path segment names a file.
        """
        return self._resolve_target_directory(path).child_names()

    def mkdir(self, name: str, path: Optional[str] = None) -> None:
        """Create an empty directory.

        Args:
            name: Name of the new directory.
            path: Directory to create it in. Defaults to the current directory.

        Raises:
            NameTooShortError: If name is empty.
            InvalidCharacterError: If name contains an invalid character.
            NameTooLongError: If name is longer than the maximum name length.
            AlreadyExistsError: If the target directory already has an entry called name.
            InvalidPathCharacterError: If a path segment contains an invalid character.
            PathNotFoundError: If a path segment does not exist.
            EntryIsFileError: If a path segment names a file.

        Example:
            >>> fs = Imfs()
            >>> fs.mkdir("a")
            >>> fs.cd("a")
            >>> fs.mkdir("b", "/")
            >>> fs.ls("/")
            ['a', 'b']
        """
        self._create(name, NodeType.DIRECTORY, path)

    def touch(self, name: str, path: Optional[str] = None) -> None:
        """Create an empty file.

        Takes the same arguments and raises the same errors as mkdir.
        """
        self._create(name, NodeType.FILE, path)

    def cd(self, target: str) -> None:
        """Change the current directory.

        ``..`` moves to the parent directory. A target starting with ``/`` is resolved
        from the root and replaces the current directory. Anything else is the name
        of a directory inside the current directory.

        Absolute paths are character-checked in full before the walk, so
        ``/missing/b?c`` raises InvalidPathCharacterError rather than
        PathNotFoundError. Whitespace around each segment is dropped.

        Raises:
            AtRootError: If target is ``..`` and the current directory is the root.
            InvalidPathCharacterError: If an absolute path segment contains an invalid
                character.
            PathNotFoundError: If an absolute path segment does not exist.
            NoSuchEntryError: If a relative name does not exist.
            EntryIsFileError: If the target is a file.
        """
        if target == PARENT_DIRECTORY:
            if not self._current_path:
                raise AtRootError()
            self._current_path.pop()
        elif is_absolute(target):
            _, segments = resolve_directory(self._root, self._root, [], target, self.validator)
            self._current_path = segments
        else:
            node = self._get_current_directory().get_child(target)
            if node is None:
                raise NoSuchEntryError(target)
            if not node.is_dir:
                raise EntryIsFileError(target)
            self._current_path.append(target)
        logger.debug("Changed directory to %s", self.pwd())

    def read(self, filepath: str) -> str:
        """Return the contents of a file.

        Args:
            filepath: A file name in the current directory, or an absolute path.

        Raises:
            NoSuchEntryError: If the file does not exist.
            EntryIsDirectoryError: If the entry is a directory.
            InvalidPathCharacterError: If a directory segment contains an invalid character.
            PathNotFoundError: If a directory segment does not exist.
            EntryIsFileError: If a directory segment names a file.
        """
        return self._locate_file(filepath).content  # type: ignore[no-any-return]

    def write(self, filepath: str, contents: str) -> None:
        """Replace the contents of an existing file.

        The file must already exist; create it with touch first. Resolves filepath
        exactly like read and raises the same errors, including EntryIsDirectoryError
        when filepath names a directory.
        """
        node = self._locate_file(filepath)
        node.content = contents
        logger.debug("Wrote %d characters to %s", len(contents), filepath)

    def rmdir(self, name: str) -> None:
        """Remove an entry of the current directory, together with everything below it.

        Non-empty directories are removed without complaint.

        Raises:
            NoSuchEntryError: If the current directory has no entry called name.
        """
        node = self._get_current_directory().get_child(name)
        if node is None:
            raise NoSuchEntryError(name)
        node.parent = None
        logger.debug("Removed %s from %s", name, self.pwd())

    def find(self, name: str) -> List[str]:
        """Return the names of entries in the current directory equal to ``name``.

        Names are unique within a directory, so the result holds at most one element.
        """
        directory = self._get_current_directory()
        matches = findall(directory, filter_=lambda node: node.parent is directory and node.name == name, maxlevel=2)
        return [node.name for node in matches]

    def cls(self) -> None:
        """Discard every entry and return to an empty root."""
        self._root = NamespaceNode.directory("")
        self._current_path = []
        logger.debug("Cleared filesystem")

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        return sum(1 for node in PreOrderIter(self._root) if node.is_file)

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree, excluding the root."""
        return sum(1 for node in PreOrderIter(self._root) if node.is_dir) - 1

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over every file in the tree.

        Directories are visited before their children and children in creation order.

        Yields:
            Pairs of (absolute_path, contents) for each file.

        Example:
            >>> fs = Imfs()
            >>> fs.mkdir("docs")
            >>> fs.touch("a.txt", "/docs")
            >>> fs.write("/docs/a.txt", "A")
            >>> list(fs.iterate_files())
            [('/docs/a.txt', 'A')]
        """
        for node in PreOrderIter(self._root, filter_=lambda n: n.is_file):
            yield _node_path(node), node.content

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the filesystem one line at a time.

        Output resembles the Unix 'tree' command. The first line is ``/`` for the
        root, directories carry a trailing ``/`` and entries appear in creation order.

        Yields:
            Lines of the tree representation, including the connecting lines.
        """

        def write_node(node: NamespaceNode, prefix: str, is_last: bool) -> Iterator[str]:
            connector = "└── " if is_last else "├── "
            suffix = "/" if node.is_dir else ""
            yield f"{prefix}{connector}{node.name}{suffix}"
            child_prefix = prefix + ("    " if is_last else "│   ")
            for i, child in enumerate(node.children):
                yield from write_node(child, child_prefix, i == len(node.children) - 1)

        yield "/"
        children = self._root.children
        for i, child in enumerate(children):
            yield from write_node(child, "", i == len(children) - 1)

    def get_tree_representation(self) -> str:
        """Get a complete string representation of the filesystem tree."""
        return "\n".join(self.stream_tree_representation())
