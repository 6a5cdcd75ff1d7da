from enum import Enum
from typing import List

# Ordered directory names walked from some starting directory
Segments = List[str]


class NodeType(Enum):
    """Enumeration of the two kinds of entry a namespace can hold.

    Files and directories share one namespace within a parent directory, so a
    name identifies exactly one entry of exactly one of these kinds.

    Attributes:
        FILE: Entry holding a single string payload
        DIRECTORY: Entry holding named children
    """

    FILE = "file"
    DIRECTORY = "directory"
