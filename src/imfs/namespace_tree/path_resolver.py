"""Path parsing and resolution against the namespace tree.

Every function here is free of side effects: resolution reads the tree, it never
creates or removes entries. Operations that accept a path share these functions so
that a path means the same thing everywhere.
"""

from typing import Tuple

from imfs.exceptions import EntryIsFileError, InvalidPathCharacterError, PathNotFoundError
from imfs.namespace_tree.name_validator import NameValidator
from imfs.namespace_tree.namespace_node import NamespaceNode
from imfs.types import Segments

SEPARATOR = "/"


def is_absolute(path: str) -> bool:
    """Return True if ``path`` is resolved from the root rather than the current directory."""
    return path.startswith(SEPARATOR)


def split_path(path: str) -> Segments:
    """Split a path into its segments.

    Whitespace around the path and around each segment is trimmed and empty segments
    are discarded, so repeated, leading and trailing separators carry no meaning.
    Names never contain spaces, so trimming cannot change which entry a segment names.

    Example:
        >>> split_path("/a//b /")
        ['a', 'b']
        >>> split_path("/")
        []
    """
    segments = (segment.strip() for segment in path.strip().split(SEPARATOR))
    return [segment for segment in segments if segment]


def join_path(segments: Segments) -> str:
    """Build the absolute path string for a sequence of segments; the root is ``/``."""
    return SEPARATOR + SEPARATOR.join(segments)


def check_segments(path: str, segments: Segments, validator: NameValidator) -> None:
    """Apply the name character rule to every segment of ``path``.

    Raises:
        InvalidPathCharacterError: On the first segment holding an invalid character.
    """
    for segment in segments:
        character = validator.find_invalid_character(segment)
        if character is not None:
            raise InvalidPathCharacterError(path, segment, character)


def walk(start: NamespaceNode, segments: Segments, path: str) -> NamespaceNode:
    """Follow ``segments`` from ``start`` one directory at a time.

    Args:
        start: Directory the walk begins at.
        segments: Child names to descend through, in order.
        path: The path being resolved, used in error messages.

    Returns:
        The directory reached after the last segment.

    Raises:
        PathNotFoundError: If a segment does not exist.
        EntryIsFileError: If a segment names a file.
    """
    node = start
    for segment in segments:
        child = node.get_child(segment)
        if child is None:
            raise PathNotFoundError(path, segment)
        if not child.is_dir:
            raise EntryIsFileError(segment)
        node = child
    return node


def resolve_directory(
    root: NamespaceNode,
    current: NamespaceNode,
    current_segments: Segments,
    path: str,
    validator: NameValidator,
) -> Tuple[NamespaceNode, Segments]:
    """Resolve ``path`` to a directory node.

    Absolute paths are walked from ``root``. Any other path is walked from
    ``current`` with the same segment rules.

    Args:
        root: Root directory of the tree.
        current: The current directory.
        current_segments: Segments leading from the root to ``current``.
        path: The path to resolve.
        validator: Supplies the character rule applied to each segment.

    Returns:
        A tuple of the resolved directory and its full segment sequence from the root.

    Raises:
        InvalidPathCharacterError: If a segment contains an invalid character.
        PathNotFoundError: If a segment does not exist.
        EntryIsFileError: If a segment names a file.

    Example:
        >>> root = NamespaceNode.directory("")
        >>> a = NamespaceNode.directory("a", parent=root)
        >>> b = NamespaceNode.directory("b", parent=a)
        >>> node, segments = resolve_directory(root, root, [], "/a//b/", NameValidator())
        >>> node is b, segments
        (True, ['a', 'b'])
    """
    segments = split_path(path)
    check_segments(path, segments, validator)
    if is_absolute(path):
        return walk(root, segments, path), segments
    return walk(current, segments, path), list(current_segments) + segments


def split_file_path(path: str) -> Tuple[str, str]:
    """Split an absolute file path into its directory path and file name.

    The directory part is returned as an absolute path with leading and trailing
    separators. A path with no segments yields an empty file name.

    Example:
        >>> split_file_path("/docs/notes.txt")
        ('/docs/', 'notes.txt')
        >>> split_file_path("/notes.txt")
        ('/', 'notes.txt')
    """
    segments = split_path(path)
    if not segments:
        return SEPARATOR, ""
    directory = segments[:-1]
    if not directory:
        return SEPARATOR, segments[-1]
    return SEPARATOR + SEPARATOR.join(directory) + SEPARATOR, segments[-1]
