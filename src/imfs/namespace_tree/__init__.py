"""Namespace tree building blocks.

This package provides the node type the namespace is made of, the naming rules
applied to new entries, and the path resolution shared by every operation that
accepts a path.
"""

from .name_validator import INVALID_CHARACTERS, MAX_NAME_LENGTH, NameValidator
from .namespace_node import NamespaceNode

__all__ = [
    "INVALID_CHARACTERS",
    "MAX_NAME_LENGTH",
    "NameValidator",
    "NamespaceNode",
]
