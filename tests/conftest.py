"""Test configuration and fixtures for imfs."""

import pytest

from imfs import Imfs


@pytest.fixture
def fs():
    """A fresh, empty filesystem."""
    return Imfs()


@pytest.fixture
def populated_fs():
    """A filesystem holding a small tree, positioned at the root.

    /
    ├── docs/
    │   ├── notes.txt   ("first draft")
    │   └── drafts/
    └── readme.md       ("")
    """
    fs = Imfs()
    fs.mkdir("docs")
    fs.touch("notes.txt", "/docs")
    fs.write("/docs/notes.txt", "first draft")
    fs.mkdir("drafts", "/docs")
    fs.touch("readme.md")
    return fs
