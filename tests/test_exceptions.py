"""Tests for custom exceptions."""

import pytest

from imfs.exceptions import (
    AlreadyExistsError,
    AtRootError,
    EntryIsDirectoryError,
    EntryIsFileError,
    ImfsError,
    InternalInconsistencyError,
    InvalidCharacterError,
    InvalidNameError,
    InvalidPathCharacterError,
    NameTooLongError,
    NameTooShortError,
    NoSuchEntryError,
    PathNotFoundError,
)


class TestNameErrors:
    """Test name validation exceptions."""

    def test_name_too_short_message(self):
        error = NameTooShortError()
        assert str(error) == "Proposed name too short, must be at least one character"
        assert error.name == ""

    def test_invalid_character_attributes(self):
        error = InvalidCharacterError("a:b", ":")
        assert error.name == "a:b"
        assert error.character == ":"
        assert str(error) == "Proposed name contains invalid character: :."

    def test_name_too_long_message(self):
        error = NameTooLongError("x" * 257, 256)
        assert error.max_length == 256
        assert str(error) == "Proposed name too long. Must be 1-256 characters."

    def test_name_errors_share_base(self):
        for error in [NameTooShortError(), InvalidCharacterError("*", "*"), NameTooLongError("x", 0)]:
            assert isinstance(error, InvalidNameError)
            assert isinstance(error, ValueError)
            assert isinstance(error, ImfsError)


class TestLookupErrors:
    """Test exceptions raised when entries are missing or of the wrong type."""

    def test_already_exists(self):
        error = AlreadyExistsError("docs")
        assert error.name == "docs"
        assert "Proposed name already exists" in str(error)
        assert isinstance(error, FileExistsError)

    def test_no_such_entry(self):
        error = NoSuchEntryError("notes.txt")
        assert error.name == "notes.txt"
        assert str(error) == "No such file or directory: notes.txt"
        assert isinstance(error, FileNotFoundError)

    def test_path_not_found(self):
        error = PathNotFoundError("/a/b", "b")
        assert error.path == "/a/b"
        assert error.segment == "b"
        assert "/a/b" in str(error)
        assert isinstance(error, FileNotFoundError)

    def test_entry_is_file(self):
        error = EntryIsFileError("notes.txt")
        assert error.name == "notes.txt"
        assert isinstance(error, NotADirectoryError)

    def test_entry_is_directory(self):
        error = EntryIsDirectoryError("docs")
        assert error.name == "docs"
        assert isinstance(error, IsADirectoryError)


class TestNavigationErrors:
    """Test navigation and path exceptions."""

    def test_at_root(self):
        assert "root" in str(AtRootError())

    def test_invalid_path_character(self):
        error = InvalidPathCharacterError("/a/b?c", "b?c", "?")
        assert error.path == "/a/b?c"
        assert error.segment == "b?c"
        assert error.character == "?"
        assert isinstance(error, ValueError)

    def test_internal_inconsistency(self):
        error = InternalInconsistencyError()
        assert str(error) == "Internal Error: Present Working Directory corrupted"
        assert isinstance(error, RuntimeError)


@pytest.mark.parametrize(
    "error",
    [
        AlreadyExistsError("x"),
        AtRootError(),
        EntryIsDirectoryError("x"),
        EntryIsFileError("x"),
        InternalInconsistencyError(),
        InvalidPathCharacterError("/x", "x", "x"),
        NoSuchEntryError("x"),
        PathNotFoundError("/x", "x"),
    ],
)
def test_all_errors_derive_from_imfs_error(error):
    assert isinstance(error, ImfsError)
