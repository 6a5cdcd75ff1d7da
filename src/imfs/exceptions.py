class ImfsError(Exception):
    """
    Base class for every error raised by an in-memory filesystem operation.

    Each failure aborts exactly one operation and leaves the tree and the current
    directory untouched, so catching an ``ImfsError`` and resubmitting corrected
    input is always safe. Most subclasses also derive from the builtin exception
    that describes the same situation on a real filesystem, which lets callers
    write ``except FileNotFoundError`` just as they would against ``os``.

    Example:
        >>> issubclass(NoSuchEntryError, FileNotFoundError)
        True
        >>> issubclass(NoSuchEntryError, ImfsError)
        True
    """

    pass


class InvalidNameError(ImfsError, ValueError):
    """Base class for rejections of a name proposed for a new file or directory."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class NameTooShortError(InvalidNameError):
    """
    Exception raised when the proposed name is the empty string.

    Example:
        >>> str(NameTooShortError())
        'Proposed name too short, must be at least one character'
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name, "Proposed name too short, must be at least one character")


class InvalidCharacterError(InvalidNameError):
    """
    Exception raised when the proposed name contains a disallowed character.

    Attributes:
        name (str): The rejected name.
        character (str): The first disallowed character found.

    Example:
        >>> error = InvalidCharacterError("a*b", "*")
        >>> str(error)
        'Proposed name contains invalid character: *.'
        >>> error.character
        '*'
    """

    def __init__(self, name: str, character: str) -> None:
        self.character = character
        super().__init__(name, f"Proposed name contains invalid character: {character}.")


class NameTooLongError(InvalidNameError):
    """
    Exception raised when the proposed name exceeds the maximum name length.

    Attributes:
        name (str): The rejected name.
        max_length (int): The maximum length that was exceeded.

    Example:
        >>> str(NameTooLongError("x" * 300, 256))
        'Proposed name too long. Must be 1-256 characters.'
    """

    def __init__(self, name: str, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(name, f"Proposed name too long. Must be 1-{max_length} characters.")


class AlreadyExistsError(ImfsError, FileExistsError):
    """Exception raised when creating an entry whose name is already taken in the target directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Proposed name already exists: {name}")


class NoSuchEntryError(ImfsError, FileNotFoundError):
    """
    Exception raised when a bare name is not a child of the directory it is looked up in.

    Example:
        >>> str(NoSuchEntryError("notes.txt"))
        'No such file or directory: notes.txt'
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No such file or directory: {name}")


class PathNotFoundError(ImfsError, FileNotFoundError):
    """
    Exception raised when a segment of a path does not exist.

    Attributes:
        path (str): The path being resolved.
        segment (str): The first segment that could not be found.
    """

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(f"Path not found: {path} (no entry named '{segment}')")


class EntryIsFileError(ImfsError, NotADirectoryError):
    """Exception raised when a directory was expected but the entry is a file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Not a directory: {name}")


class EntryIsDirectoryError(ImfsError, IsADirectoryError):
    """Exception raised when a file was expected but the entry is a directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Not a file: {name}")


class AtRootError(ImfsError):
    """Exception raised when moving to the parent directory while already at the root."""

    def __init__(self, message: str = "Already at root directory") -> None:
        super().__init__(message)


class InvalidPathCharacterError(ImfsError, ValueError):
    """
    Exception raised when a segment of an absolute path contains a disallowed character.

    Path segments are checked against the same character set as names, but not against
    the name length or emptiness rules.

    Attributes:
        path (str): The path being resolved.
        segment (str): The offending segment.
        character (str): The first disallowed character found in the segment.

    Example:
        >>> error = InvalidPathCharacterError("/a/b?c", "b?c", "?")
        >>> str(error)
        "Path contains invalid character: ? (in segment 'b?c' of /a/b?c)"
    """

    def __init__(self, path: str, segment: str, character: str) -> None:
        self.path = path
        self.segment = segment
        self.character = character
        super().__init__(f"Path contains invalid character: {character} (in segment '{segment}' of {path})")


class InternalInconsistencyError(ImfsError, RuntimeError):
    """
    Exception raised when the current directory no longer resolves against the tree.

    Every operation keeps the current directory valid, so this indicates a defect
    rather than a recoverable condition.
    """

    def __init__(self, message: str = "Internal Error: Present Working Directory corrupted") -> None:
        super().__init__(message)
